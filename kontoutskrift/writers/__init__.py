"""Utdataformater for transaksjonslister."""

from __future__ import annotations

import io
from enum import Enum
from typing import IO, TYPE_CHECKING, Any, Protocol, Sequence

from ..constants import DEFAULT_CSV_DELIMITER
from .csv_writer import CsvWriter
from .spreadsheet import SpreadsheetWriter
from .table import transaction_row, transactions_to_dataframe

if TYPE_CHECKING:  # pragma: no cover
    from ..camt.models import Transaction

__all__ = [
    "CsvWriter",
    "OutputFormat",
    "SpreadsheetWriter",
    "Writer",
    "get_writer",
    "render",
    "transaction_row",
    "transactions_to_dataframe",
]


class Writer(Protocol):
    binary: bool

    def write(self, transactions: Sequence["Transaction"], stream: IO[Any]) -> None:
        ...


class OutputFormat(str, Enum):
    CSV = "csv"
    XLSX = "xlsx"
    ODS = "ods"


def get_writer(output_format: OutputFormat | str, *, delimiter: str = DEFAULT_CSV_DELIMITER) -> Writer:
    """Returnerer skriveren for ønsket format."""

    fmt = OutputFormat(output_format)
    if fmt is OutputFormat.CSV:
        return CsvWriter(delimiter=delimiter)
    if fmt is OutputFormat.XLSX:
        return SpreadsheetWriter(engine="xlsxwriter")
    return SpreadsheetWriter(engine="odf")


def render(writer: Writer, transactions: Sequence["Transaction"]) -> bytes:
    """Skriver til minnet først, slik at ingenting havner på disk ved feil."""

    if writer.binary:
        binary_buffer = io.BytesIO()
        writer.write(transactions, binary_buffer)
        return binary_buffer.getvalue()
    text_buffer = io.StringIO()
    writer.write(transactions, text_buffer)
    return text_buffer.getvalue().encode("utf-8")
