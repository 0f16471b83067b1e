"""Offentlig API for innlesing av camt.052-kontoutskrifter."""

from __future__ import annotations

from .dispatcher import process_document, process_stream
from .errors import (
    CamtError,
    CamtFileError,
    CamtParseError,
    CamtStructureError,
    MissingInputError,
)
from .loader import check_input_paths, load_file, load_transactions
from .models import ContentKind, Money, Party, Transaction
from .transaction import build_transaction, build_transactions

__all__ = [
    "CamtError",
    "CamtFileError",
    "CamtParseError",
    "CamtStructureError",
    "ContentKind",
    "MissingInputError",
    "Money",
    "Party",
    "Transaction",
    "build_transaction",
    "build_transactions",
    "check_input_paths",
    "load_file",
    "load_transactions",
    "process_document",
    "process_stream",
]
