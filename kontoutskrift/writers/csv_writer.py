"""Skriver transaksjoner som semikolonseparert tekst."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence, TextIO

from ..constants import DEFAULT_CSV_DELIMITER
from .table import transactions_to_dataframe

if TYPE_CHECKING:  # pragma: no cover
    from ..camt.models import Transaction

__all__ = ["CsvWriter"]


class CsvWriter:
    """Skriver én linje per transaksjon med fast kolonnerekkefølge."""

    binary = False

    def __init__(self, delimiter: str = DEFAULT_CSV_DELIMITER) -> None:
        if len(delimiter) != 1:
            raise ValueError(f"Skilletegnet må være ett tegn: {delimiter!r}")
        self.delimiter = delimiter

    def write(self, transactions: Sequence["Transaction"], stream: TextIO) -> None:
        frame = transactions_to_dataframe(transactions, as_text=True)
        frame.to_csv(stream, sep=self.delimiter, index=False, lineterminator="\n")
