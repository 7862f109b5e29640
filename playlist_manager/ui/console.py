"""Console output for the playlist-manager CLI, built on Rich."""

from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table


class ConsoleUI:
    """
    Rich Console with status message helpers.

    Status messages are plain text: playlist names, identities and upstream
    error bodies end up in them, so they are escaped before being styled.
    Only ``print`` and ``print_panel`` take Rich markup.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def print(self, *args, **kwargs) -> None:
        """Print Rich markup or renderables as is."""
        self.console.print(*args, **kwargs)

    def _status(self, style: str, icon: str, message: str) -> None:
        self.console.print(f"[{style}]{icon} {escape(message)}[/{style}]")

    def print_info(self, message: str) -> None:
        self._status("blue", "ℹ️ ", message)

    def print_warning(self, message: str) -> None:
        self._status("yellow", "⚠️ ", message)

    def print_error(self, message: str) -> None:
        self._status("red", "❌", message)

    def print_success(self, message: str) -> None:
        self._status("green", "✓", message)

    def print_panel(self, content: str, title: str = "") -> None:
        """Print markup content in a blue bordered panel."""
        self.console.print(Panel(content, title=title, border_style="blue"))

    def create_table(self, title: str, columns: List[str]) -> Table:
        """
        Create a table with a header row.

        Args:
            title: Table title, as Rich markup.
            columns: Column headers.

        Returns:
            Empty Rich Table, to be filled with ``add_row``.
        """
        table = Table(title=title, show_header=True, header_style="bold magenta")
        for column in columns:
            table.add_column(column)
        return table

    def print_table(self, table: Table) -> None:
        self.console.print(table)
