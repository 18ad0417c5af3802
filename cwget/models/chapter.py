"""Chapter information data model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChapterInfo:
    """An active chapter of a series, in platform order."""

    id: str
    title: str
