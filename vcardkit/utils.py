# -*- coding: utf-8 -*-
from __future__ import annotations
import re
from pathlib import Path
from typing import Iterable, Optional, Union

import requests
from slugify import slugify


def ensure_data_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


def fetch_bytes(url: str) -> bytes:
    """Read an image from an http(s) URL or a local path. Errors are left to the caller."""
    if url.lower().startswith(("http://", "https://")):
        resp = requests.get(url)
        resp.raise_for_status()
        return resp.content
    with open(url, "rb") as f:
        return f.read()


def load_image_bytes(path: str) -> Optional[bytes]:
    """Best-effort read for optional assets (UI preview): None when missing."""
    p = Path(path)
    if not p.is_file():
        return None
    return p.read_bytes()


def normalize_filename(value: Union[str, Iterable[str]], separator: str = "_") -> str:
    """Lowercase ASCII slug for download names ("Jérôme Doe" -> "jerome_doe").

    Returns an empty string when nothing usable is left.
    """
    if not isinstance(value, str):
        value = separator.join(v for v in value if v)
    value = value.strip().strip(separator)
    value = re.sub(r"\s+", separator, value)
    if not value:
        return ""
    return slugify(value, separator=separator, lowercase=True)
