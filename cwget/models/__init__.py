"""Data models for the ComicWalker downloader."""

from .chapter import ChapterInfo
from .page import PageInfo, PageResult
from .series import SeriesMetadata

__all__ = ["ChapterInfo", "PageInfo", "PageResult", "SeriesMetadata"]
