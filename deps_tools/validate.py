from rich.console import Console

from deps_tools.constants import EMPTY_INPUT

console = Console()


def is_valid_input(text) -> bool:
    """Reject empty input (empty string or None); accept anything else as-is."""
    if not text:
        console.print(EMPTY_INPUT, highlight=False)
        return False
    return True
