"""Tabellform av transaksjoner for eksport."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Sequence

from ..constants import OUTPUT_HEADERS
from ..helpers.lazy_imports import lazy_pandas

if TYPE_CHECKING:  # pragma: no cover
    import pandas as pd

    from ..camt.models import Transaction

pd = lazy_pandas()

__all__ = ["transaction_row", "transactions_to_dataframe"]


def transaction_row(transaction: "Transaction", *, as_text: bool = True) -> Dict[str, Any]:
    """Gjør om en transaksjon til én rad med de faste kolonnene.

    Med ``as_text`` skrives datoer som ``YYYY-MM-DD`` og beløpet som eksakt
    desimaltekst. Uten ``as_text`` beholdes dato-objekter og beløpet blir et
    tall, slik regneark forventer.
    """

    amount = transaction.amount.amount
    values: List[Any] = [
        transaction.date.isoformat() if as_text else transaction.date,
        transaction.valuta.isoformat() if as_text else transaction.valuta,
        str(amount) if as_text else float(amount),
        transaction.amount.currency,
        transaction.creditor.name,
        transaction.creditor.iban_text,
        transaction.debtor.name,
        transaction.debtor.iban_text,
        transaction.transaction_type,
        transaction.description,
    ]
    return dict(zip(OUTPUT_HEADERS, values))


def transactions_to_dataframe(
    transactions: Sequence["Transaction"], *, as_text: bool = True
) -> "pd.DataFrame":
    rows = [transaction_row(transaction, as_text=as_text) for transaction in transactions]
    return pd.DataFrame(rows, columns=list(OUTPUT_HEADERS))
