"""Konstanter for kontoutskrift."""

# Gjentakende poster i en camt.052-rapport.
ENTRY_PATH = "Document/BkToCstmrAcctRpt/Rpt/Ntry"

DESCRIPTION_SEPARATOR = "; "
DEBIT_INDICATOR = "DBIT"

SNIFF_BYTES = 2048

OUTPUT_HEADERS = (
    "Date",
    "Valuta",
    "Amount",
    "Currency",
    "Creditor Name",
    "Creditor IBAN",
    "Debtor Name",
    "Debtor IBAN",
    "Transaction Type",
    "Description",
)

DEFAULT_CSV_DELIMITER = ";"
