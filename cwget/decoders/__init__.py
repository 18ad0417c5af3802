"""Decoders for obfuscated image data."""

from .xor import parse_key, xor_decode

__all__ = ["parse_key", "xor_decode"]
