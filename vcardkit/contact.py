# -*- coding: utf-8 -*-
"""
vCard 3.0 document: typed setters over an ordered property store, and the
two output flavours (.vcf, or .ics wrapper for old iOS Safari).
"""
from __future__ import annotations
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, Iterable, Optional, Union

from vcardkit.client import ClientCapability, OutputFormat, select_format
from vcardkit.folding import CRLF, fold
from vcardkit.media import Fetcher, attach_media
from vcardkit.properties import PropertyKey, PropertyStore
from vcardkit.utils import ensure_data_dir, fetch_bytes, normalize_filename
from vcardkit.vcalendar import build_vcalendar

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "vcard"

Slugger = Callable[[Union[str, Iterable[str]], str], str]


class VCard:
    """Contact card builder. Not thread-safe: one instance per outbound document."""

    def __init__(
        self,
        charset: str = "utf-8",
        clock: Callable[[], datetime] = datetime.now,
        slugger: Slugger = normalize_filename,
    ) -> None:
        self.charset = charset
        self.properties = PropertyStore()
        self._filename: Optional[str] = None
        self._clock = clock
        self._slugger = slugger

    # -----------------------------
    # Setters
    # -----------------------------

    def set_property(self, key: Union[PropertyKey, str], value: str) -> None:
        self.properties.set(key, value)

    def add_address(
        self,
        name: str = "",
        extended: str = "",
        street: str = "",
        city: str = "",
        region: str = "",
        zip: str = "",
        country: str = "",
        type: str = "WORK;POSTAL",
    ) -> None:
        """ADR; `type` is any combination of DOM, INTL, POSTAL, PARCEL, HOME, WORK (e.g. "WORK;PARCEL;POSTAL")."""
        value = ";".join([name, extended, street, city, region, zip, country])
        self.set_property(PropertyKey.of("ADR", type), value)

    def add_birthday(self, date: str) -> None:
        """Date as YYYY-MM-DD."""
        self.set_property("BDAY", date)

    def add_company(self, company: str) -> None:
        self.set_property("ORG", company)
        self._infer_filename(company)

    def add_email(self, address: str) -> None:
        self.set_property(PropertyKey("EMAIL", ("INTERNET",)), address)

    def add_jobtitle(self, jobtitle: str) -> None:
        self.set_property("TITLE", jobtitle)

    def add_role(self, role: str) -> None:
        self.set_property("ROLE", role)

    def add_name(
        self,
        last_name: str = "",
        first_name: str = "",
        additional: str = "",
        prefix: str = "",
        suffix: str = "",
    ) -> None:
        parts = [v for v in (prefix, first_name, additional, last_name, suffix) if v]
        self._infer_filename(parts)

        self.set_property("N", ";".join([last_name, first_name, additional, prefix, suffix]))

        # FN is derived once; an explicit non-empty FN is never replaced
        candidate = " ".join(parts).strip()
        if not self.properties.get("FN"):
            self.set_property("FN", candidate)

    def add_note(self, note: str) -> None:
        self.set_property("NOTE", note)

    def add_phone_number(self, number: str, type: str = "") -> None:
        """TEL; `type` among PREF, WORK, HOME, VOICE, FAX, MSG, CELL, PAGER, BBS, CAR, MODEM, ISDN, VIDEO (";"-combined)."""
        self.set_property(PropertyKey.of("TEL", type), number)

    def add_url(self, url: str, type: str = "") -> None:
        """URL; `type` may be WORK or HOME."""
        self.set_property(PropertyKey.of("URL", type), url)

    def add_photo(self, url: str, include: bool = True, fetch: Fetcher = fetch_bytes) -> bool:
        return attach_media(self.properties, "PHOTO", url, include, fetch)

    def add_logo(self, url: str, include: bool = True, fetch: Fetcher = fetch_bytes) -> bool:
        return attach_media(self.properties, "LOGO", url, include, fetch)

    # -----------------------------
    # Filename
    # -----------------------------

    def get_filename(self) -> Optional[str]:
        return self._filename

    def set_filename(
        self,
        value: Union[str, Iterable[str]],
        overwrite: bool = True,
        separator: str = "_",
    ) -> None:
        """Set (or append to) the download name; blank values are ignored."""
        slug = self._slugger(value, separator)
        if not slug:
            return
        if overwrite or not self._filename:
            self._filename = slug
        else:
            self._filename = self._filename + separator + slug

    def _infer_filename(self, value: Union[str, Iterable[str]]) -> None:
        if self._filename is None:
            self.set_filename(value)

    # -----------------------------
    # Builders
    # -----------------------------

    def build_vcard(self, now: Optional[datetime] = None) -> str:
        """Build the .vcf text.

        REV is local wall-clock time with a literal "Z"; it is not converted
        to UTC.
        """
        now = now or self._clock()
        out = ["BEGIN:VCARD" + CRLF, "VERSION:3.0" + CRLF]
        out.append("REV:" + now.strftime("%Y-%m-%dT%H:%M:%SZ") + CRLF)
        for line in self.properties.lines():
            out.append(fold(line + CRLF, encoding=self.charset))
        out.append("END:VCARD" + CRLF)
        logger.debug("Built vCard with %d properties", len(self.properties))
        return "".join(out)

    def build_vcalendar(self, now: Optional[datetime] = None) -> str:
        """Build the .ics wrapper around the vCard of the same instant."""
        now = now or self._clock()
        attachment = f"{self._output_name()}.{OutputFormat.WRAPPED.extension}"
        return build_vcalendar(self.build_vcard(now), attachment, now, self.charset)

    # -----------------------------
    # Output
    # -----------------------------

    def output_format(self, client: Optional[ClientCapability] = None) -> OutputFormat:
        return select_format(client)

    def get_content_type(self, client: Optional[ClientCapability] = None) -> str:
        return self.output_format(client).content_type

    def get_file_extension(self, client: Optional[ClientCapability] = None) -> str:
        return self.output_format(client).extension

    def get_output(self, client: Optional[ClientCapability] = None) -> str:
        if self.output_format(client) is OutputFormat.WRAPPED:
            return self.build_vcalendar()
        return self.build_vcard()

    def get_output_bytes(self, client: Optional[ClientCapability] = None) -> bytes:
        return self.get_output(client).encode(self.charset)

    def get_download_name(self, client: Optional[ClientCapability] = None) -> str:
        return f"{self._output_name()}.{self.get_file_extension(client)}"

    def get_headers(self, client: Optional[ClientCapability] = None) -> Dict[str, str]:
        fmt = self.output_format(client)
        body = self.get_output_bytes(client)
        return {
            "Content-type": f"{fmt.content_type}; charset={self.charset}",
            "Content-Disposition": f"attachment; filename={self._output_name()}.{fmt.extension}",
            "Content-Length": str(len(body)),
            "Connection": "close",
        }

    def save(self, directory: Union[str, Path] = ".", client: Optional[ClientCapability] = None) -> Path:
        target_dir = Path(directory)
        ensure_data_dir(target_dir)
        path = target_dir / self.get_download_name(client)
        path.write_bytes(self.get_output_bytes(client))
        logger.info("Saved %s (%s)", path, self.get_content_type(client))
        return path

    def _output_name(self) -> str:
        return self._filename or DEFAULT_FILENAME


def from_identity(identity: Dict[str, str], **kwargs) -> VCard:
    """Build a card from a flat identity mapping (keys as in the app's .env)."""
    card = VCard(**kwargs)
    card.add_name(identity.get("N_LAST", ""), identity.get("N_FIRST", ""))
    if identity.get("ORG"):
        card.add_company(identity["ORG"])
    if identity.get("TITLE"):
        card.add_jobtitle(identity["TITLE"])
    if identity.get("TEL"):
        card.add_phone_number(identity["TEL"], "PREF;WORK;VOICE")
    if identity.get("EMAIL"):
        card.add_email(identity["EMAIL"])
    if identity.get("URL"):
        url = identity["URL"]
        card.add_url(url if url.startswith(("http://", "https://")) else "https://" + url, "WORK")
    if any(identity.get(k) for k in ("ADR_STREET", "ADR_CITY", "ADR_PC", "ADR_COUNTRY")):
        card.add_address(
            street=identity.get("ADR_STREET", ""),
            city=identity.get("ADR_CITY", ""),
            zip=identity.get("ADR_PC", ""),
            country=identity.get("ADR_COUNTRY", ""),
        )
    if identity.get("NOTE"):
        card.add_note(identity["NOTE"])
    return card
