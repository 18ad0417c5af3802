"""Runtime settings for the downloader, loaded from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from dotenv import load_dotenv

from cwget.images import PILLOW_FORMATS

# Next.js build id baked into the series detail endpoint
DEFAULT_BUILD_ID = "2SvEXbIS_EMCYklkC4JQy"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    """Read a boolean environment variable.

    Args:
        name: Variable name
        default: Value used when the variable is unset or empty

    Returns:
        The parsed boolean

    Raises:
        ValueError: If the value is not a recognised boolean spelling
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default

    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _env_number(name: str, default: float, cast: Callable[[str], float]) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


@dataclass
class Settings:
    """Options recognised by the download pipeline.

    Attributes:
        page_wait_ms: Delay after each page, in milliseconds
        overwrite: Ignore already downloaded files and fetch them again
        convert_to_png: Re-encode every page to ``target_format`` and drop the original
        target_format: Format pages are normalized to
        index_prefix_chapters: Prefix chapter folders with their 1-based list index
        download_path: Root folder series are saved under
        log_action: Sink for plain progress lines; the rich console is used when None
        build_id: Next.js build id used by the series detail endpoint
        request_timeout: Timeout for every HTTP request, in seconds
    """

    page_wait_ms: int = 0
    overwrite: bool = False
    convert_to_png: bool = True
    target_format: str = "png"
    index_prefix_chapters: bool = False
    download_path: Path = field(default_factory=lambda: Path("manga"))
    log_action: Callable[[str], None] | None = None
    build_id: str = DEFAULT_BUILD_ID
    request_timeout: float = 30.0

    def __post_init__(self) -> None:
        if self.page_wait_ms < 0:
            raise ValueError("page_wait_ms cannot be negative")
        self.download_path = Path(self.download_path)
        self.target_format = self.target_format.lower().lstrip(".")
        if self.target_format not in PILLOW_FORMATS:
            raise ValueError(
                f"Unsupported target format {self.target_format!r}, expected one of {sorted(PILLOW_FORMATS)}"
            )

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from ``CWGET_*`` variables, reading a ``.env`` file first.

        Returns:
            Settings populated from the environment, with defaults for unset values
        """
        _ = load_dotenv()

        return cls(
            page_wait_ms=int(_env_number("CWGET_PAGE_WAIT_MS", 0, int)),
            overwrite=_env_bool("CWGET_OVERWRITE", False),
            convert_to_png=_env_bool("CWGET_CONVERT_TO_PNG", True),
            target_format=os.getenv("CWGET_TARGET_FORMAT") or "png",
            index_prefix_chapters=_env_bool("CWGET_INDEX_PREFIX", False),
            download_path=Path(os.getenv("CWGET_DOWNLOAD_PATH") or "manga"),
            build_id=os.getenv("CWGET_BUILD_ID") or DEFAULT_BUILD_ID,
            request_timeout=_env_number("CWGET_REQUEST_TIMEOUT", 30.0, float),
        )
