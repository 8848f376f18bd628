# -*- coding: utf-8 -*-
from __future__ import annotations
from typing import List

CRLF = "\r\n"
MAX_LINE_OCTETS = 75


def _octets(text: str, encoding: str) -> int:
    # byte-order marks (utf-16, utf-8-sig) are not part of the line
    return len(text.encode(encoding)) - len("".encode(encoding))


def _take(text: str, start: int, budget: int, encoding: str) -> int:
    """Return the end index of the longest run from `start` fitting in `budget` encoded bytes."""
    used = 0
    end = start
    while end < len(text):
        size = _octets(text[end], encoding)
        if used + size > budget:
            break
        used += size
        end += 1
    # a single character wider than the budget still has to go somewhere
    if end == start and start < len(text):
        end += 1
    return end


def fold(text: str, limit: int = MAX_LINE_OCTETS, newline: str = CRLF, encoding: str = "utf-8") -> str:
    """Fold a content line according to RFC 2425 section 5.8.1.

    The limit counts octets of the content in `encoding`, the line break
    excluded. The first physical line carries up to `limit` bytes, every
    continuation line a single space plus what is left of `limit`, so no
    physical line exceeds `limit`. Characters are never split across lines.

    http://tools.ietf.org/html/rfc2425#section-5.8.1
    """
    terminated = text.endswith(newline)
    content = text[: -len(newline)] if terminated else text
    if _octets(content, encoding) <= limit:
        return text

    continuation = limit - _octets(" ", encoding)
    parts: List[str] = []
    end = _take(content, 0, limit, encoding)
    parts.append(content[:end])
    while end < len(content):
        start = end
        end = _take(content, start, continuation, encoding)
        parts.append(" " + content[start:end])

    folded = newline.join(parts)
    return folded + newline if terminated else folded


def unfold(text: str, newline: str = CRLF) -> str:
    """Join continuation lines back onto their logical line."""
    return text.replace(newline + " ", "")
