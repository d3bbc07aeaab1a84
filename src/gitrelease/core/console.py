"""User-facing console output.

Usage::

    from gitrelease.core.console import report_error, status

    status("Tagged v1.2.0", style="success")  # ✓ Tagged v1.2.0
    report_error("unable to checkout main")  # ✗ unable to checkout main
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

_console = Console(stderr=True)

# Style prefixes
_STYLES = {
    "success": "[green]✓[/green] ",
    "error": "[red]✗[/red] ",
    "warning": "[yellow]![/yellow] ",
    "info": "  ",
    "none": "",
}


def get_console() -> Console:
    """Get the shared Rich console instance."""
    return _console


def status(message: str, *, style: str = "info", indent: int = 0) -> None:
    """Print a single status line with a style marker."""
    padding = " " * indent
    prefix = _STYLES.get(style, "")
    _console.print(f"{padding}{prefix}{message}", highlight=False)


def report_error(message: str) -> None:
    """Default error sink for failed git actions."""
    status(escape(message), style="error")
