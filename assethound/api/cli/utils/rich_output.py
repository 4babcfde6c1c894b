"""Rich-based output formatting utilities for AssetHound CLI commands."""

import os
import sys
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table


# Constants for fallback message prefixes
class MessagePrefixes:
    """Constants for consistent message prefixes in fallback mode."""

    SUCCESS = "[SUCCESS]"
    ERROR = "[ERROR]"
    DEBUG = "[DEBUG]"


class RichOutputFormatter:
    """Terminal UI formatter using Rich library.

    Errors always go to stderr; everything else goes to stdout.
    """

    def __init__(self, verbose: bool = False):
        """Initialize Rich output formatter.

        Args:
            verbose: Whether to enable verbose output
        """
        self.verbose = verbose
        self._terminal_compatible = self._check_terminal_compatibility()
        self.console = Console() if self._terminal_compatible else None
        self.err_console = Console(stderr=True) if self._terminal_compatible else None

    def _check_terminal_compatibility(self) -> bool:
        """Check if terminal supports Rich formatting."""
        if os.environ.get("ASSETHOUND_NO_RICH"):
            return False

        try:
            if not sys.stdout.isatty():
                return False

            term = os.environ.get("TERM", "")
            if term in ["dumb", "unknown"]:
                return False

            return True
        except Exception:
            return False

    def _safe_print(
        self, message: str, fallback_prefix: str = "", plain: str = "", stderr: bool = False
    ) -> None:
        """Safely print with Rich or fallback to plain text."""
        console = self.err_console if stderr else self.console
        if console is not None:
            try:
                console.print(message)
                return
            except Exception:
                # Rich failed, fall through to plain print
                pass

        stream = sys.stderr if stderr else sys.stdout
        text = plain or message
        if fallback_prefix:
            print(f"{fallback_prefix} {text}", file=stream)
        else:
            print(text, file=stream)

    def success(self, message: str) -> None:
        """Print a success message."""
        self._safe_print(
            f"[green][SUCCESS][/green] {escape(message)}", MessagePrefixes.SUCCESS, message
        )

    def error(self, message: str) -> None:
        """Print an error message to stderr."""
        self._safe_print(
            f"[red][ERROR][/red] {escape(message)}", MessagePrefixes.ERROR, message, stderr=True
        )

    def verbose_info(self, message: str) -> None:
        """Print a verbose info message if verbose mode is enabled."""
        if self.verbose:
            self._safe_print(
                f"[cyan][DEBUG][/cyan] {escape(message)}", MessagePrefixes.DEBUG, message
            )

    def section_header(self, title: str) -> None:
        """Print a section header with consistent formatting."""
        if self.console is not None:
            try:
                self.console.print(Panel(title, style="bold cyan", padding=(0, 1)))
                return
            except Exception:
                pass

        print(f"\n=== {title} ===\n")

    def completion_summary(self, stats: dict[str, Any], processing_time: float) -> None:
        """Display completion summary in a styled panel."""
        summary_table = Table.grid(padding=(0, 2))
        summary_table.add_column(style="cyan")
        summary_table.add_column()

        summary_table.add_row("Iterations:", f"[blue]{stats.get('iterations', 0)}[/blue]")
        summary_table.add_row(
            "Renamed:", f"[green]{stats.get('renamed', 0)}[/green] assets"
        )
        summary_table.add_row(
            "Rewritten:", f"[green]{stats.get('rewritten', 0)}[/green] files"
        )
        summary_table.add_row("Time:", f"[cyan]{processing_time:.2f}s[/cyan]")

        panel = Panel(
            summary_table,
            title="[bold green]Renaming Complete[/bold green]",
            border_style="green",
            padding=(1, 2),
        )
        if self.console is not None:
            self.console.print(panel)
        else:
            print("Renaming Complete")
            print(f"Iterations: {stats.get('iterations', 0)}")
            print(f"Renamed: {stats.get('renamed', 0)} assets")
            print(f"Rewritten: {stats.get('rewritten', 0)} files")
            print(f"Time: {processing_time:.2f}s")

    def mapping_table(self, mapping: dict[str, str]) -> None:
        """Print old -> new asset names."""
        if self.console is not None:
            table = Table(show_header=True, header_style="bold")
            table.add_column("Old name", style="yellow")
            table.add_column("New name", style="green")
            for old_name, new_name in mapping.items():
                table.add_row(old_name, new_name)
            self.console.print(table)
        else:
            for old_name, new_name in mapping.items():
                print(f"  {old_name} -> {new_name}")
