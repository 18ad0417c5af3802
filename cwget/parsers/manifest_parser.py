"""Extraction of page entries from a chapter's viewer manifest."""

from __future__ import annotations

from cwget.errors import SchemaError
from cwget.models import PageInfo
from cwget.parsers.document import expect, get_optional_str, get_typed


def parse_page_manifest(document: object) -> list[PageInfo]:
    """Turn every ``manuscripts`` entry into a PageInfo, in manifest order.

    Args:
        document: Parsed viewer JSON

    Returns:
        List of PageInfo objects; nothing is filtered out

    Raises:
        SchemaError: If the list or any field of an entry is missing or malformed
    """
    manuscripts = get_typed(document, ["manuscripts"], list)

    pages: list[PageInfo] = []
    for i, entry in enumerate(manuscripts):
        entry_path = f"$.manuscripts[{i}]"
        fields = expect(entry, dict, entry_path)

        page = get_typed(fields, ["page"], int, entry_path)
        if page < 1:
            raise SchemaError(f"{entry_path}.page", f"expected a positive page number, got {page}")

        pages.append(
            PageInfo(
                drm_mode=get_typed(fields, ["drmMode"], str, entry_path),
                drm_hash=get_optional_str(fields, "drmHash", entry_path),
                image_url=get_typed(fields, ["drmImageUrl"], str, entry_path),
                page=page,
            )
        )
    return pages
