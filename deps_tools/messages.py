from rich.console import Console
from rich.panel import Panel

from deps_tools.utils.status_reporter import StatusReporter

console = Console()


def dependency_not_installed(dependency: str) -> None:
    """Tell the user the dependency is still missing and why that matters."""
    console.print(
        f"[yellow]{dependency} is not installed.[/yellow] "
        f"Some commands rely on {dependency} and will not work until it is installed."
    )


def show_installation_info(dependency: str, reporter: StatusReporter, url: str) -> None:
    """Point the user at a manual download page and settle the spinner."""
    reporter.info(f"{dependency} has to be installed manually on this platform")
    console.print(Panel(f"Please download from: [blue]{url}[/blue]", title=f"Install {dependency}", border_style="yellow"))
