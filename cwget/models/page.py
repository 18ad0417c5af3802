"""Page information data model."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class PageInfo:
    """One entry of a chapter's page manifest.

    ``drm_hash`` is only meaningful when ``drm_mode`` is ``"xor"``.
    """

    drm_mode: str
    drm_hash: str | None
    image_url: str
    page: int


@dataclass
class PageResult:
    """Outcome of fetching a single page."""

    path: Path
    skipped: bool
