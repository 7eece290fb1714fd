"""Rich output for the simfs command line."""

from __future__ import annotations

from datetime import datetime, timezone

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from simfs.protocols import FileSystem
from simfs.types import Stat


class ConsoleOutput:
    """Renders filesystem listings, trees and messages."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize output.

        Args:
            console: Console to print to. Defaults to stdout.
        """
        self.console = console or Console()

    def show_listing(self, names: list[str]) -> None:
        """Print directory entries, one per line."""
        for name in names:
            self.console.print(escape(name))

    def show_contents(self, data: str | bytes, encoding: str) -> None:
        """Print file contents, decoding bytes leniently."""
        if isinstance(data, bytes):
            data = data.decode(encoding, errors="replace")
        self.console.print(data, markup=False, highlight=False, end="")

    def show_stat(self, path: str, info: Stat) -> None:
        """Print stat results as a table."""
        table = Table(title=escape(path))
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        modified = datetime.fromtimestamp(info.mtime, tz=timezone.utc)
        table.add_row("Kind", info.kind)
        table.add_row("Size", str(info.size))
        table.add_row("Modified", modified.strftime("%Y-%m-%d %H:%M:%S"))
        self.console.print(table)

    def show_tree(self, fs: FileSystem, path: str) -> None:
        """Print the tree below a directory.

        Args:
            fs: Filesystem to walk.
            path: Directory to start at.
        """
        tree = Tree(f"[bold blue]{escape(path)}[/bold blue]")
        self._add_children(tree, fs, path)
        self.console.print(tree)

    def _add_children(self, branch: Tree, fs: FileSystem, path: str) -> None:
        for name in fs.listdir(path):
            child = f"{path.rstrip('/')}/{name}"
            info = fs.lstat(child)
            if info.is_symbolic_link():
                branch.add(f"[cyan]{escape(name)}[/cyan] -> {escape(fs.realpath(child))}")
            elif info.is_directory():
                self._add_children(branch.add(f"[bold blue]{escape(name)}/[/bold blue]"), fs, child)
            else:
                branch.add(f"{escape(name)} [dim]({info.size} bytes)[/dim]")

    def show_success(self, message: str) -> None:
        """Show success message.

        Args:
            message: Success message.
        """
        self.console.print(f"[green]✓[/green] {message}")

    def show_error(self, message: str) -> None:
        """Show error message.

        Args:
            message: Error message.
        """
        self.console.print(f"[red]✗[/red] {message}")
