"""Terminal output handling using Rich library.

Converted markup goes to stdout as plain text; status messages and
warnings go to stderr so output can be piped.
"""

from typing import List

from rich.console import Console
from rich.markup import escape

from ..models import ConversionWarning


class OutputHandler:
    """Handles all terminal output using Rich library.

    Attributes:
        verbosity: Verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console for status messages (stderr)
        out: Rich Console for converted output (stdout)
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(stderr=True, no_color=no_color, highlight=False)
        self.out = Console(no_color=True, highlight=False, soft_wrap=True)

    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def error(self, message: str) -> None:
        self.console.print(f"[red]✗[/red] {escape(message)}", style="red")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}", style="yellow")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(escape(message))

    def debug(self, message: str) -> None:
        """Display debug message (only if verbosity >= 2)."""
        if self.verbosity >= 2:
            self.console.print(f"[dim]{escape(message)}[/dim]")

    def print_result(self, text: str) -> None:
        """Write converted markup to stdout without Rich markup processing."""
        self.out.print(text, markup=False)

    def print_warnings(self, warnings: List[ConversionWarning]) -> None:
        """Display collected conversion warnings with a count header."""
        if not warnings:
            return
        self.console.print(f"\n[bold]{len(warnings)} warning(s):[/bold]")
        for warning in warnings:
            self.warning(warning.format())
