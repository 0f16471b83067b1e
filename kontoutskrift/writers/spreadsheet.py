"""Skriver transaksjoner til regneark (XLSX eller ODS)."""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO, Sequence

from ..helpers.lazy_imports import lazy_pandas, require_module
from .table import transactions_to_dataframe

if TYPE_CHECKING:  # pragma: no cover
    from ..camt.models import Transaction

pd = lazy_pandas()

__all__ = ["SHEET_NAME", "SpreadsheetWriter"]

SHEET_NAME = "Transaksjoner"

_ENGINE_MODULES = {
    "xlsxwriter": "xlsxwriter",
    "odf": "odf",
}


class SpreadsheetWriter:
    """Regnearkeksport via ``pandas.ExcelWriter``.

    ``engine`` er ``"xlsxwriter"`` for XLSX eller ``"odf"`` for ODS.
    """

    binary = True

    def __init__(self, engine: str = "xlsxwriter") -> None:
        if engine not in _ENGINE_MODULES:
            raise ValueError(f"Ukjent regnearkmotor: {engine!r}")
        self.engine = engine

    def write(self, transactions: Sequence["Transaction"], stream: BinaryIO) -> None:
        require_module(_ENGINE_MODULES[self.engine])
        frame = transactions_to_dataframe(transactions, as_text=False)
        with pd.ExcelWriter(stream, engine=self.engine, date_format="YYYY-MM-DD") as writer:
            frame.to_excel(writer, sheet_name=SHEET_NAME, index=False)
