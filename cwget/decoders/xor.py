"""Repeating-key XOR decoding for obfuscated page images."""

from __future__ import annotations

import string

from cwget.errors import KeyFormatError

_HEX_DIGITS = set(string.hexdigits)


def parse_key(key_hex: str) -> bytes:
    """Convert a hexadecimal key string into key bytes.

    Args:
        key_hex: Key as hex text, two characters per byte (e.g. ``"00ff"``)

    Returns:
        The decoded key bytes

    Raises:
        KeyFormatError: If the key is empty, of odd length or not hexadecimal
    """
    if not key_hex:
        raise KeyFormatError("XOR key is empty")
    if len(key_hex) % 2 != 0:
        raise KeyFormatError(f"XOR key has odd length ({len(key_hex)})")
    if any(c not in _HEX_DIGITS for c in key_hex):
        raise KeyFormatError(f"XOR key is not hexadecimal: {key_hex!r}")
    return bytes.fromhex(key_hex)


def xor_decode(data: bytearray, key_hex: str) -> bytearray:
    """XOR ``data`` in place against the key, repeating the key as needed.

    Applying the same key twice restores the original bytes.

    Args:
        data: Buffer to decode; modified in place
        key_hex: Hexadecimal key string

    Returns:
        The same ``data`` buffer, for convenience

    Raises:
        KeyFormatError: If the key is malformed
    """
    key = parse_key(key_hex)
    key_len = len(key)
    for i in range(len(data)):
        data[i] ^= key[i % key_len]
    return data
