# -*- coding: utf-8 -*-
"""
Output format selection.

Old iOS Safari (< iOS 8) cannot open .vcf downloads; those clients get the
vCard wrapped in a one-event .ics instead. The decision is made from an
explicit `ClientCapability`, never from request globals.
"""
from __future__ import annotations
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

WRAP_BELOW_MAJOR = 8

_LEGACY_MOBILE_TOKENS = ("iphone", "ipod", "ipad")
_OS_VERSION = re.compile(r"os (\d+)_(\d+)(?:_\d+)?\s+")


class OutputFormat(Enum):
    DIRECT = ("text/x-vcard", "vcf")
    WRAPPED = ("text/x-vcalendar", "ics")

    @property
    def content_type(self) -> str:
        return self.value[0]

    @property
    def extension(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class ClientCapability:
    is_legacy_mobile: bool = False
    major_version: Optional[int] = None  # None: unknown


def select_format(capability: Optional[ClientCapability]) -> OutputFormat:
    if capability is None or not capability.is_legacy_mobile:
        return OutputFormat.DIRECT
    if capability.major_version is None:
        return OutputFormat.DIRECT
    if capability.major_version < WRAP_BELOW_MAJOR:
        return OutputFormat.WRAPPED
    return OutputFormat.DIRECT


def capability_from_user_agent(user_agent: Optional[str]) -> ClientCapability:
    """Parse a User-Agent header, e.g. "... iPhone; CPU iPhone OS 6_1 like Mac OS X ..."."""
    ua = (user_agent or "").lower()
    legacy = any(tok in ua for tok in _LEGACY_MOBILE_TOKENS)
    m = _OS_VERSION.search(ua)
    return ClientCapability(is_legacy_mobile=legacy, major_version=int(m.group(1)) if m else None)
