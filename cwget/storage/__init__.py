"""Filesystem layout helpers."""

from .layout import (
    KNOWN_SUFFIXES,
    chapter_dir,
    ensure_dir,
    match_suffix,
    page_paths,
    sanitize_path,
    series_dir,
)

__all__ = [
    "KNOWN_SUFFIXES",
    "chapter_dir",
    "ensure_dir",
    "match_suffix",
    "page_paths",
    "sanitize_path",
    "series_dir",
]
