"""Gjenkjenning av ZIP-arkiv og XML-dokumenter fra de første bytene."""

from __future__ import annotations

import codecs
import xml.etree.ElementTree as ET
from typing import BinaryIO

from ..constants import SNIFF_BYTES
from .models import ContentKind

__all__ = ["SNIFF_BYTES", "classify", "sniff"]

_ZIP_SIGNATURES = (b"PK\x03\x04", b"PK\x05\x06", b"PK\x07\x08")

_BOMS = (
    (codecs.BOM_UTF8, "utf-8"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
)


def _decode_prefix(prefix: bytes) -> str:
    for bom, encoding in _BOMS:
        if prefix.startswith(bom):
            return prefix[len(bom):].decode(encoding, errors="ignore")
    return prefix.decode("utf-8", errors="ignore")


def _is_well_formed_prefix(text: str) -> bool:
    """Sjekker at prefikset kan være starten på et velformet XML-dokument.

    Prefikset er ofte avkuttet midt i dokumentet, så bare syntaksfeil som
    oppstår før prefikset slutter, teller.
    """

    parser = ET.XMLPullParser()
    try:
        parser.feed(text)
        for _ in parser.read_events():
            pass
    except ET.ParseError:
        return False
    return True


def _looks_like_xml(prefix: bytes) -> bool:
    text = _decode_prefix(prefix).lstrip()
    if text.startswith("<?xml"):
        return True
    if len(text) < 2 or text[0] != "<":
        return False
    start = text[1]
    if not (start.isalpha() or start in "_:!"):
        return False
    return _is_well_formed_prefix(text)


def classify(prefix: bytes) -> ContentKind:
    """Klassifiserer innholdet basert på et prefiks av bytestrømmen."""

    if prefix.startswith(_ZIP_SIGNATURES):
        return ContentKind.ARCHIVE
    if _looks_like_xml(prefix):
        return ContentKind.DOCUMENT
    return ContentKind.UNRECOGNIZED


def sniff(stream: BinaryIO) -> ContentKind:
    """Leser inntil ``SNIFF_BYTES`` og spoler tilbake før klassifisering."""

    position = stream.tell()
    prefix = stream.read(SNIFF_BYTES)
    stream.seek(position)
    return classify(prefix)
