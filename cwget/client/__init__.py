"""HTTP access to ComicWalker."""

from .comicwalker import BASE_URL, ComicWalkerClient

__all__ = ["BASE_URL", "ComicWalkerClient"]
