"""Bygger transaksjoner fra ``Ntry``-elementer i camt.052."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from datetime import date
from typing import Iterable, List, Tuple

from ..constants import DEBIT_INDICATOR, DESCRIPTION_SEPARATOR
from ..helpers.xml_helpers import filter_nodes, find, text_or_none
from .currencies import lookup_currency
from .fields import get_date, get_iban, optional_text, parse_amount, require_attribute, require_text
from .models import Money, Party, Transaction

__all__ = ["build_transaction", "build_transactions"]

_LOGGER = logging.getLogger(__name__)

_PARTIES = "NtryDtls/TxDtls/RltdPties"
_REMITTANCE_PATH = "NtryDtls/TxDtls/RmtInf/Ustrd"


def _party_name_paths(role: str) -> Tuple[str, str]:
    return f"{_PARTIES}/{role}/Nm", f"{_PARTIES}/{role}/Pty/Nm"


def _party_name(
    entry: ET.Element, role: str, label: str, *, booking_date: date, amount_text: str
) -> str:
    for path in _party_name_paths(role):
        text = optional_text(entry, path)
        if text is not None and text.strip():
            return text.strip()
    _LOGGER.warning(
        "Fant ingen %s: dato %s, beløp %s", label, booking_date, amount_text.strip()
    )
    return ""


def _party(
    entry: ET.Element, role: str, label: str, *, booking_date: date, amount_text: str
) -> Party:
    name = _party_name(
        entry, role, label, booking_date=booking_date, amount_text=amount_text
    )
    iban = get_iban(entry, f"{_PARTIES}/{role}Acct/Id/IBAN")
    return Party(name=name, iban=iban)


def _is_debit(entry: ET.Element) -> bool:
    return text_or_none(find(entry, "CdtDbtInd")) == DEBIT_INDICATOR


def _description(entry: ET.Element) -> str:
    fragments = [(node.text or "").strip() for node in filter_nodes(entry, _REMITTANCE_PATH)]
    return DESCRIPTION_SEPARATOR.join(fragments)


def build_transaction(entry: ET.Element) -> Transaction:
    """Bygger én transaksjon fra et ``Ntry``-element.

    Påkrevde felt er bokføringsdato, valuteringsdato, beløp med valuta og
    ``AddtlNtryInf``. Mangler ett av dem kastes ``CamtStructureError`` eller
    ``CamtParseError``. Navn og IBAN for motpartene er valgfrie: manglende
    navn logges og blir tom streng, ugyldig IBAN blir ``None``.
    """

    booking_date = get_date(entry, "BookgDt/Dt")
    valuta = get_date(entry, "ValDt/Dt")
    debit = _is_debit(entry)
    amount_text = require_text(entry, "Amt")
    currency_code = require_attribute(entry, "Amt", "Ccy")

    creditor = _party(
        entry, "Cdtr", "kreditor", booking_date=booking_date, amount_text=amount_text
    )
    debtor = _party(
        entry, "Dbtr", "debitor", booking_date=booking_date, amount_text=amount_text
    )
    transaction_type = require_text(entry, "AddtlNtryInf").strip()
    description = _description(entry)

    amount = parse_amount(amount_text)
    if debit:
        amount = amount.copy_negate()
    money = Money(amount=amount, currency=lookup_currency(currency_code))

    return Transaction(
        date=booking_date,
        valuta=valuta,
        amount=money,
        creditor=creditor,
        debtor=debtor,
        transaction_type=transaction_type,
        description=description,
    )


def build_transactions(entries: Iterable[ET.Element]) -> List[Transaction]:
    """Bygger alle poster i rekkefølge; første feil avbryter hele dokumentet."""

    return [build_transaction(entry) for entry in entries]
