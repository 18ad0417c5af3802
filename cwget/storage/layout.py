"""Local folder layout for downloaded series."""

from __future__ import annotations

import re
from pathlib import Path

# Characters rejected in path components on common filesystems
_INVALID_PATH_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')

KNOWN_SUFFIXES = (".png", ".webp", ".jpg")
_SUFFIX_PATTERN = re.compile("|".join(re.escape(s) for s in KNOWN_SUFFIXES), re.IGNORECASE)


def sanitize_path(name: str) -> str:
    """Remove characters that cannot appear in a folder name."""
    return _INVALID_PATH_CHARS.sub("", name)


def pad_number(number: int) -> str:
    return str(number).zfill(3)


def series_dir(download_path: Path, title: str) -> Path:
    return download_path / sanitize_path(title)


def chapter_dir(series_path: Path, title: str, index: int | None = None) -> Path:
    """Build a chapter folder path, optionally prefixed with ``<index3> - ``.

    Args:
        series_path: Folder of the series
        title: Chapter title
        index: 1-based chapter index; no prefix when None

    Returns:
        Path to the chapter folder
    """
    prefix = f"{pad_number(index)} - " if index is not None else ""
    return series_path / (prefix + sanitize_path(title))


def match_suffix(url: str) -> str | None:
    """Find the first known image suffix in ``url``, keeping its case."""
    match = _SUFFIX_PATTERN.search(url)
    return match.group(0) if match else None


def page_paths(chapter_path: Path, page: int, suffix: str, target_format: str) -> tuple[Path, Path]:
    """Return the raw download path and the normalized path of a page.

    The suffix is lower-cased, so a PNG page has a single name whatever the
    case of its URL.
    """
    stem = pad_number(page)
    return chapter_path / f"{stem}{suffix.lower()}", chapter_path / f"{stem}.{target_format}"


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path
