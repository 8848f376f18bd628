# -*- coding: utf-8 -*-
from __future__ import annotations
import base64
import io
import logging
import warnings
from typing import Callable, Optional

from PIL import Image, UnidentifiedImageError

from vcardkit.properties import KeyLike, PropertyKey, PropertyStore
from vcardkit.utils import fetch_bytes

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], Optional[bytes]]


# JPEG with embedded extra pictures (most phone/camera shots)
_FORMAT_ALIASES = {"MPO": "JPEG"}


def _sniff_format(data: bytes) -> Optional[str]:
    """Format name from the registered plugins' magic-number checks, without opening."""
    Image.init()
    prefix = data[:16]
    for fmt, (_factory, accept) in Image.OPEN.items():
        if accept is None:
            continue
        result = accept(prefix)
        if result and not isinstance(result, str):
            return fmt
    return None


def detect_image_subtype(data: bytes) -> Optional[str]:
    """MIME subtype of an image ("jpeg", "png", ...) read from its content, or None.

    Only the header is inspected: images over Pillow's pixel limit are still
    identified, from their magic number.
    """
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", Image.DecompressionBombWarning)
            with Image.open(io.BytesIO(data)) as img:
                fmt = img.format
    except Image.DecompressionBombError:
        fmt = _sniff_format(data)
    except (UnidentifiedImageError, OSError):
        return None
    fmt = _FORMAT_ALIASES.get(fmt or "", fmt)
    mime = Image.MIME.get(fmt or "")
    if not mime or not mime.startswith("image/"):
        return None
    return mime[len("image/"):]


def attach_media(
    store: PropertyStore,
    name: KeyLike,
    url: str,
    include: bool = True,
    fetch: Fetcher = fetch_bytes,
) -> bool:
    """Store a PHOTO/LOGO style property.

    include=False keeps the URL as value. include=True embeds the image as
    base64 with ENCODING=b;TYPE=<SUBTYPE>; returns False (nothing stored) when
    the source is empty or not a recognisable image.
    """
    key = name if isinstance(name, PropertyKey) else PropertyKey.parse(name)
    if not include:
        store.set(key, url)
        return True

    data = fetch(url)
    if not data:
        logger.warning("No data returned for %s from %s", key, url)
        return False

    subtype = detect_image_subtype(data)
    if subtype is None:
        logger.warning("Unknown image type for %s from %s (%d bytes)", key, url, len(data))
        return False

    encoded = base64.b64encode(data).decode("ascii")
    store.set(key.with_params("ENCODING=b", f"TYPE={subtype.upper()}"), encoded)
    logger.debug("Embedded %s (%s, %d bytes)", key, subtype, len(data))
    return True
