"""Shared test doubles and document builders."""

from __future__ import annotations

import io
from typing import Any

from PIL import Image


def make_image(fmt: str = "PNG", size: tuple[int, int] = (4, 3), mode: str = "RGB") -> bytes:
    color = (200, 30, 60, 128)[: len(mode)] if mode in ("RGB", "RGBA") else 0
    img = Image.new(mode, size, color)
    buf = io.BytesIO()
    img.save(buf, format=fmt)
    return buf.getvalue()


def xor_bytes(data: bytes, key: bytes) -> bytes:
    return bytes(b ^ key[i % len(key)] for i, b in enumerate(data))


def series_document(title: object, episodes: list[Any]) -> dict[str, Any]:
    return {
        "pageProps": {
            "dehydratedState": {
                "queries": [
                    {
                        "state": {
                            "data": {
                                "work": {"title": title},
                                "firstEpisodes": {"result": episodes},
                            }
                        }
                    }
                ]
            }
        }
    }


def manuscript(
    page: int,
    url: str,
    drm_mode: str = "none",
    drm_hash: str | None = None,
) -> dict[str, Any]:
    return {"drmMode": drm_mode, "drmHash": drm_hash, "drmImageUrl": url, "page": page}


class FakeClient:
    """In-memory stand-in for ComicWalkerClient that records every call."""

    def __init__(
        self,
        detail: Any = None,
        manifests: dict[str, Any] | None = None,
        images: dict[str, bytes | Exception] | None = None,
    ) -> None:
        self.detail = detail
        self.manifests = manifests or {}
        self.images = images or {}
        self.calls: list[tuple[str, str]] = []

    def get_series_detail(self, cid: str, episode: str) -> Any:
        self.calls.append(("detail", f"{cid}/{episode}"))
        if isinstance(self.detail, Exception):
            raise self.detail
        return self.detail

    def get_page_manifest(self, episode_id: str) -> Any:
        self.calls.append(("manifest", episode_id))
        value = self.manifests[episode_id]
        if isinstance(value, Exception):
            raise value
        return value

    def get_image(self, url: str) -> bytes:
        self.calls.append(("image", url))
        value = self.images[url]
        if isinstance(value, Exception):
            raise value
        return value

    def image_calls(self) -> list[str]:
        return [target for kind, target in self.calls if kind == "image"]
