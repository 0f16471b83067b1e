"""Tolkning av enkeltfelt i en camt-post til sterke typer."""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from functools import lru_cache
from typing import Optional

from schwifty import IBAN

from ..helpers.xml_helpers import Node, find
from .errors import CamtParseError, CamtStructureError

__all__ = [
    "get_date",
    "get_iban",
    "optional_text",
    "parse_amount",
    "parse_iban",
    "parse_iso_date",
    "require_attribute",
    "require_node",
    "require_text",
]

_LOGGER = logging.getLogger(__name__)

_ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
# Kun punktum som desimaltegn, ingen tusenskille eller eksponent.
_AMOUNT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


def require_node(entry: Node, path: str) -> ET.Element:
    element = find(entry, path)
    if element is None:
        raise CamtStructureError(path, f"Fant ikke elementet '{path}'")
    return element


def require_text(entry: Node, path: str) -> str:
    """Henter teksten til et påkrevd element.

    Teksten returneres uendret; det er opp til kalleren å trimme den.
    """

    element = require_node(entry, path)
    if element.text is None or not element.text.strip():
        raise CamtStructureError(path, f"Ingen tekst i elementet '{path}'")
    return element.text


def require_attribute(entry: Node, path: str, name: str) -> str:
    element = require_node(entry, path)
    value = element.get(name)
    if value is None or not value.strip():
        label = f"{path}[@{name}]"
        raise CamtStructureError(label, f"Ingen tekst i attributtet '{label}'")
    return value.strip()


def optional_text(entry: Node, path: str) -> Optional[str]:
    """Returnerer rå tekst fra elementet, eller ``None`` når det mangler."""

    element = find(entry, path)
    if element is None or element.text is None:
        return None
    return element.text


def parse_iso_date(text: str) -> date:
    """Tolker en dato på formen ``YYYY-MM-DD`` og ingen andre."""

    return _parse_iso_date_cached(text.strip())


@lru_cache(maxsize=4096)
def _parse_iso_date_cached(text: str) -> date:
    if not _ISO_DATE_PATTERN.fullmatch(text):
        raise CamtParseError(f"Ugyldig dato {text!r}: forventet formatet YYYY-MM-DD")
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError as exc:
        raise CamtParseError(f"Ugyldig dato {text!r}: {exc}") from exc


def parse_amount(text: str) -> Decimal:
    """Tolker et beløp skrevet med punktum som desimaltegn til ``Decimal``.

    Kommaer, mellomrom og eksponenter avvises. Dette hindrer at f.eks.
    ``1,000.00`` eller ``1.000,00`` tolkes med feil størrelsesorden.
    """

    cleaned = text.strip()
    if not _AMOUNT_PATTERN.fullmatch(cleaned):
        raise CamtParseError(f"Ugyldig beløp {text!r}: forventet et desimaltall med punktum")
    try:
        return Decimal(cleaned)
    except InvalidOperation as exc:  # pragma: no cover - fanges av mønsteret
        raise CamtParseError(f"Ugyldig beløp {text!r}") from exc


def parse_iban(text: str) -> Optional[IBAN]:
    """Validerer et IBAN strukturelt; ugyldige verdier gir ``None``."""

    cleaned = text.strip()
    if not cleaned:
        return None
    try:
        return IBAN(cleaned)
    except ValueError as exc:
        _LOGGER.warning("Ignorerer ugyldig IBAN %r: %s", cleaned, exc)
        return None


def get_date(entry: Node, path: str) -> date:
    return parse_iso_date(require_text(entry, path))


def get_iban(entry: Node, path: str) -> Optional[IBAN]:
    text = optional_text(entry, path)
    if text is None:
        return None
    return parse_iban(text)
