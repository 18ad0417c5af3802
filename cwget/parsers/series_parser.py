"""Extraction of series metadata and chapters from the detail document."""

from __future__ import annotations

from typing import Any

from cwget.models import ChapterInfo, SeriesMetadata
from cwget.parsers.document import expect, get_typed, walk

# pageProps.dehydratedState.queries[0].state.data
_QUERY_DATA_PATH: list[str | int] = ["pageProps", "dehydratedState", "queries", 0, "state", "data"]


def _query_data(document: object) -> tuple[dict[str, Any], str]:
    data, path = walk(document, _QUERY_DATA_PATH)
    return expect(data, dict, path), path


def parse_series_title(document: object) -> SeriesMetadata:
    """Read the series title from the detail document.

    Args:
        document: Parsed detail JSON

    Returns:
        SeriesMetadata for the series

    Raises:
        SchemaError: If the title is missing or not a string
    """
    data, path = _query_data(document)
    title = get_typed(data, ["work", "title"], str, path)
    return SeriesMetadata(title=title)


def parse_chapter_list(document: object) -> list[ChapterInfo]:
    """Read the active chapters from the detail document, in source order.

    Only entries whose ``isActive`` flag is boolean ``true`` are kept. Null
    entries and entries without the flag are skipped.

    Args:
        document: Parsed detail JSON

    Returns:
        List of ChapterInfo objects for the active chapters

    Raises:
        SchemaError: If the chapter list is missing, or an active entry lacks an id or title
    """
    data, path = _query_data(document)
    entries = get_typed(data, ["firstEpisodes", "result"], list, path)
    list_path = f"{path}.firstEpisodes.result"

    chapters: list[ChapterInfo] = []
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            continue
        if entry.get("isActive") is not True:
            continue
        entry_path = f"{list_path}[{i}]"
        chapters.append(
            ChapterInfo(
                id=get_typed(entry, ["id"], str, entry_path),
                title=get_typed(entry, ["title"], str, entry_path),
            )
        )
    return chapters


def parse_series_document(document: object) -> tuple[SeriesMetadata, list[ChapterInfo]]:
    """Parse both the series title and its active chapters."""
    return parse_series_title(document), parse_chapter_list(document)
