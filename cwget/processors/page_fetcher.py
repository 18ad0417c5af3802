"""Download, decoding and conversion of a single page."""

from __future__ import annotations

import threading
import time
from pathlib import Path
from typing import Callable, Protocol, final

from cwget.config import Settings
from cwget.decoders import xor_decode
from cwget.errors import DownloadCancelledError, MalformedUrlError, UnsupportedDrmError
from cwget.images import normalize_image
from cwget.models import PageInfo, PageResult
from cwget.progress import ProgressReporter
from cwget.storage import match_suffix, page_paths

DRM_NONE = "none"
DRM_XOR = "xor"


class ImageSource(Protocol):
    def get_image(self, url: str) -> bytes: ...


@final
class PageFetcher:
    """Ensures the local file for one page exists, decoded and converted."""

    def __init__(
        self,
        client: ImageSource,
        settings: Settings,
        reporter: ProgressReporter,
        stop_event: threading.Event | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the page fetcher.

        Args:
            client: Source of page image bytes
            settings: Download settings
            reporter: Progress reporter
            stop_event: Checked before the inter-page delay
            sleep: Function used to wait between pages
        """
        self.client = client
        self.settings = settings
        self.reporter = reporter
        self.stop_event = stop_event
        self.sleep = sleep

    def fetch(self, chapter_path: Path, page: PageInfo) -> PageResult:
        """Download a page into ``chapter_path`` unless it is already there.

        Args:
            chapter_path: Folder of the chapter the page belongs to
            page: Page to fetch

        Returns:
            PageResult with the final file path and whether the page was skipped

        Raises:
            MalformedUrlError: If the image URL has no known image suffix
            UnsupportedDrmError: If the page uses an unknown obfuscation mode
            RetrievalError: If the image cannot be downloaded
            KeyFormatError: If the XOR key is malformed
            DecodeError: If the image cannot be converted
        """
        suffix = match_suffix(page.image_url)
        if suffix is None:
            raise MalformedUrlError(f"Invalid page image url: {page.image_url}")

        raw_path, converted_path = page_paths(
            chapter_path, page.page, suffix, self.settings.target_format
        )
        final_path = converted_path if self.settings.convert_to_png else raw_path

        # The final file doubles as the resume marker
        if not self.settings.overwrite and final_path.exists():
            self.reporter.log("File exists; skipping.")
            skipped = True
        else:
            self._download(page, raw_path, converted_path)
            skipped = False

        self.reporter.record_page(skipped)
        self._wait()
        return PageResult(path=final_path, skipped=skipped)

    def _download(self, page: PageInfo, raw_path: Path, converted_path: Path) -> None:
        if page.drm_mode not in (DRM_NONE, DRM_XOR):
            raise UnsupportedDrmError(
                f"Page {page.page} uses unsupported DRM mode {page.drm_mode!r}"
            )

        data = bytearray(self.client.get_image(page.image_url))

        if page.drm_mode == DRM_XOR:
            if page.drm_hash is not None:
                _ = xor_decode(data, page.drm_hash)
            else:
                self.reporter.display_warning(
                    f"Page {page.page} is marked as XOR encoded but has no key; saving as is."
                )

        _ = raw_path.write_bytes(data)

        if self.settings.convert_to_png and raw_path != converted_path:
            converted = normalize_image(bytes(data), self.settings.target_format)
            _ = converted_path.write_bytes(converted)
            try:
                raw_path.unlink()
            except OSError as e:
                self.reporter.display_warning(f"Couldn't delete unconverted page. {e}")

    def _wait(self) -> None:
        if self.settings.page_wait_ms <= 0:
            return
        if self.stop_event is not None and self.stop_event.is_set():
            raise DownloadCancelledError("Download cancelled")
        self.sleep(self.settings.page_wait_ms / 1000)
