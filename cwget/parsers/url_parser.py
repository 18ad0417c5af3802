"""Derivation of series and episode ids from user input."""

from __future__ import annotations

import re

DETAIL_URL_PATTERN = re.compile(
    r"https://comic-walker\.com/detail/(?P<cid>[^/?#]+)(?:/episodes/(?P<episode>[^/?#]+))?"
)


def episode_code(cid: str, chapter_number: int) -> str:
    """Build the episode id of a numbered chapter of series ``cid``.

    Series ids end in a two character suffix (``_S``) which is replaced by the
    zero-padded chapter number and the ``00011_E`` episode suffix.
    """
    if chapter_number < 1:
        raise ValueError(f"Chapter number must be positive, got {chapter_number}")
    return cid[:-2] + str(chapter_number).zfill(5) + "00011_E"


def parse_detail_url(url: str) -> tuple[str, str] | None:
    """Extract ``(cid, episode)`` from a series or episode URL.

    A series URL without an episode resolves to its first chapter.

    Args:
        url: A ``https://comic-walker.com/detail/...`` URL

    Returns:
        The series and episode ids, or None if the URL is not recognised
    """
    match = DETAIL_URL_PATTERN.match(url)
    if not match:
        return None

    cid = match.group("cid")
    episode = match.group("episode") or episode_code(cid, 1)
    return cid, episode


def parse_input(args: list[str]) -> tuple[str, str] | None:
    """Derive ``(cid, episode)`` from command line arguments.

    Accepts either a single URL, or a series id followed by a chapter number.

    Returns:
        The series and episode ids, or None when they cannot be derived
    """
    if len(args) == 1 and args[0].startswith("http"):
        return parse_detail_url(args[0])

    if len(args) >= 2:
        try:
            chapter_number = int(args[1])
        except ValueError:
            return None
        if chapter_number < 1:
            return None
        return args[0], episode_code(args[0], chapter_number)

    return None
