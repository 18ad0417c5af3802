"""Image format normalization backed by Pillow."""

from __future__ import annotations

import io

from PIL import Image, UnidentifiedImageError

from cwget.errors import DecodeError

# Pillow format names for the suffixes pages are saved with
PILLOW_FORMATS = {
    "png": "PNG",
    "jpg": "JPEG",
    "jpeg": "JPEG",
    "webp": "WEBP",
}


def normalize_image(data: bytes, target_format: str = "png") -> bytes:
    """Decode an image and re-encode it in ``target_format``.

    No resizing is done; the pixel mode is only converted when the target
    format cannot store it (JPEG has no alpha or palette support).

    Args:
        data: Encoded source image (PNG, JPEG, WebP or any format Pillow reads)
        target_format: Output suffix, e.g. ``"png"``

    Returns:
        The re-encoded image bytes

    Raises:
        DecodeError: If ``data`` is not a readable image
        ValueError: If ``target_format`` is not supported
    """
    fmt = PILLOW_FORMATS.get(target_format.lower().lstrip("."))
    if fmt is None:
        raise ValueError(f"Unsupported target format: {target_format}")

    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            if fmt == "JPEG" and img.mode not in ("RGB", "L"):
                if "transparency" in img.info:
                    img = img.convert("RGBA")
                img = img.convert("RGB")
            out = io.BytesIO()
            img.save(out, format=fmt)
    # Corrupt chunks surface as SyntaxError or ValueError rather than OSError
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError, Image.DecompressionBombError) as e:
        raise DecodeError(f"Could not read image data: {e}") from e

    return out.getvalue()
