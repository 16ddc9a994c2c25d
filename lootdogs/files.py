"""Helpers for serving static files."""

from __future__ import annotations

import os
from pathlib import Path

from .constants import DEFAULT_MIME_TYPE, MIME_TYPES

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def is_sub_path(path: str | os.PathLike, base: str | os.PathLike) -> bool:
    """Return True if ``path`` lies inside ``base`` once both are normalised."""
    path_parts = Path(path).resolve(strict=False).parts
    base_parts = Path(base).resolve(strict=False).parts
    return path_parts[: len(base_parts)] == base_parts


def url_decode(url: str) -> str:
    """Decode %XX escapes and '+' signs in a URL path.

    A '%' without two following characters is dropped.
    """
    raw = url.encode("utf-8")
    result = bytearray()
    i = 0
    while i < len(raw):
        char = raw[i]
        if char == ord("%"):
            if i + 2 < len(raw):
                pair = raw[i + 1 : i + 3].decode("utf-8", errors="replace")
                digits = ""
                for symbol in pair:
                    if symbol not in _HEX_DIGITS:
                        break
                    digits += symbol
                if not digits:
                    raise ValueError(f"invalid escape sequence %{pair}")
                result.append(int(digits, 16) & 0xFF)
                i += 2
        elif char == ord("+"):
            result.append(ord(" "))
        else:
            result.append(char)
        i += 1
    return result.decode("utf-8", errors="surrogateescape")


def mime_type(path: str | os.PathLike) -> str:
    """Return the MIME type for the file extension of ``path``."""
    extension = Path(path).suffix.lower()
    return MIME_TYPES.get(extension, DEFAULT_MIME_TYPE)