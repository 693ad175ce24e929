import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from deps_tools.checker import ProbeStatus, probe
from deps_tools.config import load_settings
from deps_tools.dependencies import Dependency
from deps_tools.errors import DependencyError
from deps_tools.orchestrator import InstallOutcome, ensure_all
from deps_tools.utils.os_utils import (
    IS_LINUX,
    IS_MAC,
    IS_WINDOWS,
    get_available_package_manager,
    get_linux_distro,
    get_os_type,
    get_platform_key,
)
from deps_tools.validate import is_valid_input

# Initialize Rich console
console = Console()

app = typer.Typer(
    name="dep-setup",
    help="Check for git, docker and the heroku CLI, and offer to install whatever is missing.",
    add_completion=False
)

STATUS_STYLES = {
    ProbeStatus.PRESENT: "[green]installed[/green]",
    ProbeStatus.ABSENT: "[red]missing[/red]",
    ProbeStatus.PROBE_ERROR: "[yellow]could not check[/yellow]",
}

OUTCOME_MESSAGES = {
    InstallOutcome.ALREADY_INSTALLED: "[green]✓ {name} is already installed[/green]",
    InstallOutcome.INSTALLED: "[green]✓ {name} installed[/green]",
    InstallOutcome.MANUAL: "[yellow]! {name} needs a manual install[/yellow]",
    InstallOutcome.DECLINED: "[yellow]! {name} skipped[/yellow]",
}


def setup_logging(level: str, verbose: bool = False):
    logging.basicConfig(level=logging.DEBUG if verbose else getattr(logging, level, logging.INFO))


def resolve_dependencies(names: Optional[List[str]]) -> List[Dependency]:
    """Map names from the command line to dependencies; all of them if none given."""
    if not names:
        return list(Dependency)
    try:
        return [Dependency.from_name(name) for name in names]
    except DependencyError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)


@app.command()
def check(
    dependencies: Optional[List[str]] = typer.Argument(None, help="Dependencies to check: git, docker, heroku-cli (default: all)"),
):
    """Show which dependencies are installed."""
    setup_logging(load_settings().log_level)
    table = Table(title="Dependencies", show_lines=True)
    table.add_column("Dependency", style="bold")
    table.add_column("Probe", style="cyan")
    table.add_column("Status")
    for dependency in resolve_dependencies(dependencies):
        table.add_row(dependency.value, dependency.probe, STATUS_STYLES[probe(dependency.probe)])
    console.print(table)


def print_outcome(dependency: Dependency, outcome: InstallOutcome):
    console.print(OUTCOME_MESSAGES[outcome].format(name=dependency.value))


@app.command()
def ensure(
    dependencies: Optional[List[str]] = typer.Argument(None, help="Dependencies to ensure: git, docker, heroku-cli (default: all)"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Install without asking"),
    no_refresh: bool = typer.Option(False, "--no-refresh", help="Skip the package index refresh before installing"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output")
):
    """Install any missing dependency after asking first."""
    settings = load_settings()
    if yes:
        settings.assume_yes = True
    if no_refresh:
        settings.refresh_index = False
    setup_logging(settings.log_level, verbose)

    probes = [dependency.probe for dependency in resolve_dependencies(dependencies)]
    try:
        ensure_all(probes, on_outcome=print_outcome, settings=settings)
    except DependencyError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)


@app.command()
def validate(
    name: str = typer.Argument("", help="Value to validate, e.g. a project name"),
):
    """Check that a value is not empty."""
    if not is_valid_input(name):
        raise typer.Exit(code=1)
    console.print(f"[green]✓ {name}[/green]")


@app.command()
def info():
    """Show what platform the installers will target."""
    os_type = get_os_type()
    table = Table(title="Platform", show_lines=True)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    table.add_row("OS", os_type)
    table.add_row("Platform", get_platform_key())
    table.add_row("Windows / Linux / macOS", f"{IS_WINDOWS} / {IS_LINUX} / {IS_MAC}")
    if os_type == "linux":
        table.add_row("Distro", get_linux_distro())
    table.add_row("Package manager", get_available_package_manager())
    console.print(table)


def main():
    """Main entry point"""
    app()

if __name__ == "__main__":
    main()
