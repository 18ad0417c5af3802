"""Page manifest resolution and per-chapter download."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, final

from cwget.config import Settings
from cwget.models import ChapterInfo, PageInfo
from cwget.parsers import parse_page_manifest
from cwget.processors.page_fetcher import PageFetcher
from cwget.progress import ProgressReporter
from cwget.storage import chapter_dir, ensure_dir


class ManifestSource(Protocol):
    def get_page_manifest(self, episode_id: str) -> Any: ...


@final
class ChapterResolver:
    """Resolves a chapter's pages and downloads them in manifest order."""

    def __init__(
        self,
        client: ManifestSource,
        page_fetcher: PageFetcher,
        settings: Settings,
        reporter: ProgressReporter,
    ) -> None:
        self.client = client
        self.page_fetcher = page_fetcher
        self.settings = settings
        self.reporter = reporter

    def chapter_path(self, series_path: Path, chapter: ChapterInfo, index: int) -> Path:
        """Return the folder of a chapter.

        Args:
            series_path: Folder of the series
            chapter: Chapter to place
            index: 1-based position of the chapter in the chapter list

        Returns:
            Path to the chapter folder, prefixed with the index when enabled
        """
        prefix_index = index if self.settings.index_prefix_chapters else None
        return chapter_dir(series_path, chapter.title, prefix_index)

    def resolve_pages(self, chapter: ChapterInfo) -> list[PageInfo]:
        """Fetch and parse the page manifest of a chapter.

        Raises:
            RetrievalError: If the manifest cannot be fetched or parsed
            SchemaError: If the manifest does not have the expected shape
        """
        document = self.client.get_page_manifest(chapter.id)
        return parse_page_manifest(document)

    def download(self, series_path: Path, chapter: ChapterInfo, index: int, total: int) -> Path:
        """Download every page of a chapter.

        Args:
            series_path: Folder of the series
            chapter: Chapter to download
            index: 1-based position of the chapter in the chapter list
            total: Number of chapters in the list

        Returns:
            Path to the chapter folder
        """
        self.reporter.log(f"Fetching chapter {chapter.title} ({index}/{total}).")

        chapter_path = ensure_dir(self.chapter_path(series_path, chapter, index))
        pages = self.resolve_pages(chapter)

        for i, page in enumerate(pages, start=1):
            self.reporter.log(f"Fetching page {page.page} ({i}/{len(pages)}).")
            _ = self.page_fetcher.fetch(chapter_path, page)

        self.reporter.record_chapter()
        return chapter_path
