"""
Status Reporter

Spinner shown while a dependency is being installed. Wraps rich's
console.status so each install gets its own handle instead of a shared,
process-wide spinner.
"""

from typing import Optional

from rich.console import Console
from rich.status import Status


class StatusReporter:
    """In-progress / success / failure status text for one operation."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self.text = ""
        self._status: Optional[Status] = None

    @property
    def is_spinning(self) -> bool:
        return self._status is not None

    def start(self, text: str) -> None:
        self.text = text
        if self._status is None:
            self._status = self.console.status(f"[bold yellow]{text}")
            self._status.start()
        else:
            self._status.update(f"[bold yellow]{text}")

    def stop(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None

    def hand_over(self) -> None:
        """Stop redrawing and leave the status text as a plain line, so a child process can use the terminal."""
        if self._status is not None:
            self.stop()
            self.console.print(self.text, style="bold yellow", highlight=False)

    def succeed(self, message: str) -> None:
        self.stop()
        self.console.print(f"[green]✓ {message}[/green]")

    def fail(self, message: str) -> None:
        self.stop()
        self.console.print(f"[red]✗ {message}[/red]")

    def info(self, message: str) -> None:
        self.stop()
        self.console.print(f"[blue]ℹ {message}[/blue]")
