"""Document and input parsing utilities."""

from .manifest_parser import parse_page_manifest
from .series_parser import parse_chapter_list, parse_series_document, parse_series_title
from .url_parser import episode_code, parse_detail_url, parse_input

__all__ = [
    "episode_code",
    "parse_chapter_list",
    "parse_detail_url",
    "parse_input",
    "parse_page_manifest",
    "parse_series_document",
    "parse_series_title",
]
