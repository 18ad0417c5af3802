"""Top level orchestration of a series download."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import final

from rich.console import Console

from cwget.client import ComicWalkerClient
from cwget.config import Settings
from cwget.models import ChapterInfo, SeriesMetadata
from cwget.parsers import parse_series_document
from cwget.processors.chapter_resolver import ChapterResolver
from cwget.processors.page_fetcher import PageFetcher
from cwget.progress import ProgressReporter
from cwget.storage import ensure_dir, series_dir


@final
class SeriesResolver:
    """Main orchestrator: resolves a series and downloads all of its active chapters."""

    def __init__(
        self,
        settings: Settings | None = None,
        client: ComicWalkerClient | None = None,
        console: Console | None = None,
        stop_event: threading.Event | None = None,
    ) -> None:
        """Initialize the resolver and its pipeline stages.

        Args:
            settings: Download settings; defaults are used if None
            client: HTTP client; one is built from ``settings`` if None. A given
                ``stop_event`` is attached to it.
            console: Rich console instance
            stop_event: Set it from another thread to stop after the current request
        """
        self.settings = settings or Settings()
        self.reporter = ProgressReporter(console, self.settings.log_action)
        self.client = client or ComicWalkerClient(
            self.settings.build_id,
            timeout=self.settings.request_timeout,
            stop_event=stop_event,
        )
        if client is not None and stop_event is not None:
            self.client.stop_event = stop_event

        self.page_fetcher = PageFetcher(
            self.client, self.settings, self.reporter, stop_event=stop_event
        )
        self.chapter_resolver = ChapterResolver(
            self.client, self.page_fetcher, self.settings, self.reporter
        )

    def resolve(self, cid: str, episode: str) -> tuple[SeriesMetadata, list[ChapterInfo]]:
        """Fetch the series detail document and read the title and active chapters.

        Args:
            cid: Series id
            episode: Episode id the detail document is requested for

        Returns:
            Series metadata and the active chapters in platform order

        Raises:
            RetrievalError: If the document cannot be fetched or parsed
            SchemaError: If the document does not have the expected shape
        """
        document = self.client.get_series_detail(cid, episode)
        return parse_series_document(document)

    def get(self, cid: str, episode: str) -> Path:
        """Download a whole series.

        Args:
            cid: Series id
            episode: Episode id used to look up the series

        Returns:
            Path to the series folder
        """
        series, chapters = self.resolve(cid, episode)

        series_path = ensure_dir(series_dir(self.settings.download_path, series.title))
        self.reporter.display_info(f"Fetching series {series.title}.")

        for index, chapter in enumerate(chapters, start=1):
            _ = self.chapter_resolver.download(series_path, chapter, index, len(chapters))

        return series_path
