"""Exception hierarchy for the download pipeline."""

from __future__ import annotations


class ComicWalkerError(Exception):
    """Base class for every failure raised by the download pipeline."""


class RetrievalError(ComicWalkerError):
    """A network call failed or returned a body that could not be read.

    The underlying cause is always chained via ``raise ... from``.
    """


class SchemaError(ComicWalkerError):
    """A document was readable but an expected field was missing or malformed."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class MalformedUrlError(ComicWalkerError):
    """A page image URL does not carry a known image suffix."""


class KeyFormatError(ComicWalkerError):
    """An XOR key is empty, of odd length or not hexadecimal."""


class DecodeError(ComicWalkerError):
    """Downloaded bytes could not be read as an image."""


class UnsupportedDrmError(ComicWalkerError):
    """A page uses an obfuscation mode this downloader does not understand."""


class DownloadCancelledError(ComicWalkerError):
    """The caller asked the pipeline to stop."""
