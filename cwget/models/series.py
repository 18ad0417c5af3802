"""Series metadata data model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SeriesMetadata:
    """Series-level information used to name the series folder."""

    title: str
