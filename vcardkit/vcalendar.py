# -*- coding: utf-8 -*-
from __future__ import annotations
import base64
from datetime import datetime, timedelta
from typing import List

TZID = "Europe/London"
SUMMARY = "Click attached contact below to save to your contacts"
B64_LINE_WIDTH = 74


def _chunk(text: str, width: int) -> List[str]:
    return [text[i:i + width] for i in range(0, len(text), width)]


def build_vcalendar(vcard_text: str, attachment_name: str, now: datetime, charset: str = "utf-8") -> str:
    """Wrap a vCard as the base64 attachment of a single dummy event (LF line endings).

    The payload is cut in 74-char lines, each indented by one space
    (line length taken from an .ics exported by Apple Calendar).
    """
    start = now.replace(second=0, microsecond=0)
    end = start + timedelta(minutes=1)
    dtstart = start.strftime("%Y%m%dT%H%M%S")
    dtend = end.strftime("%Y%m%dT%H%M%S")

    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        "BEGIN:VEVENT",
        f"DTSTART;TZID={TZID}:{dtstart}",
        f"DTEND;TZID={TZID}:{dtend}",
        f"SUMMARY:{SUMMARY}",
        f"DTSTAMP:{dtstart}Z",
        "ATTACH;VALUE=BINARY;ENCODING=BASE64;FMTTYPE=text/directory;",
        f" X-APPLE-FILENAME={attachment_name}:",
    ]
    b64 = base64.b64encode(vcard_text.encode(charset)).decode("ascii")
    lines.extend(" " + part for part in _chunk(b64, B64_LINE_WIDTH))
    lines.append("END:VEVENT")
    lines.append("END:VCALENDAR")
    return "\n".join(lines) + "\n"
