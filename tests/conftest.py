import io
import struct
import sys
import zipfile
from pathlib import Path
from typing import Callable, Optional, Sequence

import pytest


PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

CAMT_NAMESPACE = "urn:iso:std:iso:20022:tech:xsd:camt.052.001.02"

VALID_IBAN = "DE89370400440532013000"
OTHER_VALID_IBAN = "GB29NWBK60161331926819"


def build_entry(
    *,
    booking: Optional[str] = "2023-05-01",
    valuta: Optional[str] = "2023-05-02",
    indicator: Optional[str] = "DBIT",
    amount: Optional[str] = "100.00",
    currency: Optional[str] = "EUR",
    creditor: Optional[str] = "Kreditor AS",
    creditor_in_party: bool = False,
    creditor_iban: Optional[str] = VALID_IBAN,
    debtor: Optional[str] = "Debitor AS",
    debtor_iban: Optional[str] = None,
    transaction_type: Optional[str] = "SEPA-Überweisung",
    remittance: Sequence[str] = ("Faktura 1",),
) -> str:
    parts = []
    if amount is not None:
        ccy = f' Ccy="{currency}"' if currency is not None else ""
        parts.append(f"<Amt{ccy}>{amount}</Amt>")
    if indicator is not None:
        parts.append(f"<CdtDbtInd>{indicator}</CdtDbtInd>")
    if booking is not None:
        parts.append(f"<BookgDt><Dt>{booking}</Dt></BookgDt>")
    if valuta is not None:
        parts.append(f"<ValDt><Dt>{valuta}</Dt></ValDt>")

    parties = []
    if debtor is not None:
        parties.append(f"<Dbtr><Nm>{debtor}</Nm></Dbtr>")
    if debtor_iban is not None:
        parties.append(f"<DbtrAcct><Id><IBAN>{debtor_iban}</IBAN></Id></DbtrAcct>")
    if creditor is not None:
        if creditor_in_party:
            parties.append(f"<Cdtr><Pty><Nm>{creditor}</Nm></Pty></Cdtr>")
        else:
            parties.append(f"<Cdtr><Nm>{creditor}</Nm></Cdtr>")
    if creditor_iban is not None:
        parties.append(f"<CdtrAcct><Id><IBAN>{creditor_iban}</IBAN></Id></CdtrAcct>")
    remittance_xml = "".join(f"<Ustrd>{text}</Ustrd>" for text in remittance)
    parts.append(
        "<NtryDtls><TxDtls>"
        f"<RltdPties>{''.join(parties)}</RltdPties>"
        f"<RmtInf>{remittance_xml}</RmtInf>"
        "</TxDtls></NtryDtls>"
    )
    if transaction_type is not None:
        parts.append(f"<AddtlNtryInf>{transaction_type}</AddtlNtryInf>")
    return "<Ntry>" + "".join(parts) + "</Ntry>"


def build_document(entries: Sequence[str], *, namespace: Optional[str] = CAMT_NAMESPACE) -> bytes:
    xmlns = f' xmlns="{namespace}"' if namespace else ""
    body = "".join(entries)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f"<Document{xmlns}><BkToCstmrAcctRpt>"
        "<GrpHdr><MsgId>1</MsgId></GrpHdr>"
        f"<Rpt><Id>R1</Id>{body}</Rpt>"
        "</BkToCstmrAcctRpt></Document>"
    ).encode("utf-8")


def build_zip(members: Sequence[tuple[str, bytes]]) -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for name, data in members:
            archive.writestr(name, data)
    return buffer.getvalue()


def corrupt_member(archive: bytes, name: str) -> bytes:
    """Overskriver de komprimerte dataene til et medlem med 0xFF-bytes."""

    with zipfile.ZipFile(io.BytesIO(archive)) as reader:
        info = reader.getinfo(name)
    offset = info.header_offset
    name_length, extra_length = struct.unpack_from("<HH", archive, offset + 26)
    start = offset + 30 + name_length + extra_length
    end = start + info.compress_size
    return archive[:start] + b"\xff" * (end - start) + archive[end:]


@pytest.fixture
def entry_xml() -> Callable[..., str]:
    return build_entry


@pytest.fixture
def camt_document() -> Callable[..., bytes]:
    return build_document


@pytest.fixture
def zip_bytes() -> Callable[[Sequence[tuple[str, bytes]]], bytes]:
    return build_zip


@pytest.fixture
def two_entry_document() -> bytes:
    return build_document(
        [
            build_entry(amount="100.00", indicator="DBIT", remittance=("Husleie",)),
            build_entry(
                amount="50.00",
                indicator="CRDT",
                creditor="Mottaker",
                debtor="Betaler",
                debtor_iban=OTHER_VALID_IBAN,
                creditor_iban=None,
                remittance=("Del 1", "Del 2"),
            ),
        ]
    )


@pytest.fixture
def corrupted_member() -> Callable[[bytes, str], bytes]:
    return corrupt_member
