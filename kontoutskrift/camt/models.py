"""Dataklasser for transaksjoner fra camt.052."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from schwifty import IBAN

__all__ = ["ContentKind", "Money", "Party", "Transaction"]


class ContentKind(Enum):
    """Klassifisering av en bytestrøm basert på de første bytene."""

    ARCHIVE = "archive"
    DOCUMENT = "document"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class Money:
    """Beløp med fortegn og ISO 4217-valutakode."""

    amount: Decimal
    currency: str

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"


@dataclass(frozen=True)
class Party:
    """Motpart i en transaksjon."""

    name: str
    iban: Optional[IBAN] = None

    @property
    def iban_text(self) -> str:
        if self.iban is None:
            return ""
        return self.iban.compact


@dataclass(frozen=True)
class Transaction:
    """Én bokført post fra en kontoutskrift."""

    date: date
    valuta: date
    amount: Money
    creditor: Party
    debtor: Party
    transaction_type: str
    description: str
