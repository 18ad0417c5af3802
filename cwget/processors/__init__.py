"""Download pipeline stages."""

from .chapter_resolver import ChapterResolver
from .page_fetcher import PageFetcher
from .series_resolver import SeriesResolver

__all__ = ["ChapterResolver", "PageFetcher", "SeriesResolver"]
