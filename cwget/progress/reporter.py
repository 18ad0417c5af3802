"""Console progress output and run statistics."""

from __future__ import annotations

from typing import Callable, final

from rich.console import Console
from rich.markup import escape
from rich.table import Table


@final
class ProgressReporter:
    """Prints progress lines and keeps counts for the end-of-run summary."""

    def __init__(
        self,
        console: Console | None = None,
        log_action: Callable[[str], None] | None = None,
    ) -> None:
        """Initialize the reporter.

        Args:
            console: Rich console instance. If None, creates a new one.
            log_action: Optional sink for plain messages. When given, messages are
                sent to it instead of the console.
        """
        self.console = console or Console()
        self.log_action = log_action

        self.chapters_processed = 0
        self.pages_downloaded = 0
        self.pages_skipped = 0

    def _emit(self, message: str, style: str) -> None:
        if self.log_action is not None:
            self.log_action(message)
        else:
            self.console.print(f"[{style}]{escape(message)}[/{style}]")

    def log(self, message: str) -> None:
        """Emit an unstyled per-chapter or per-page progress line."""
        self._emit(message, "default")

    def display_error(self, message: str, exception: Exception | None = None) -> None:
        """Report the failure that stopped the download.

        Args:
            message: Failure description, usually naming the failing stage
            exception: Underlying error, printed on a second dimmed line
        """
        self._emit(f"Error: {message}", "red")
        if exception:
            self._emit(f"Details: {exception}", "dim")

    def display_warning(self, message: str) -> None:
        """Report a problem that does not fail the current page, such as a leftover raw file."""
        self._emit(f"Warning: {message}", "yellow")

    def display_success(self, message: str) -> None:
        self._emit(message, "green")

    def display_info(self, message: str) -> None:
        self._emit(message, "blue")

    def record_chapter(self) -> None:
        self.chapters_processed += 1

    def record_page(self, skipped: bool) -> None:
        if skipped:
            self.pages_skipped += 1
        else:
            self.pages_downloaded += 1

    def display_summary(self) -> None:
        """Render chapter and page counts as a rich table."""
        table = Table(title="Download Summary")
        table.add_column("Metric", style="cyan")
        table.add_column("Count", style="green")

        table.add_row("Chapters Processed", str(self.chapters_processed))
        table.add_row("Pages Downloaded", str(self.pages_downloaded))
        table.add_row("Pages Skipped", str(self.pages_skipped))

        self.console.print("\n")
        self.console.print(table)
