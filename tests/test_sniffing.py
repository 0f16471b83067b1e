"""Tester for gjenkjenning av innholdstype."""

from __future__ import annotations

import codecs
import io

import pytest

from kontoutskrift.camt.models import ContentKind
from kontoutskrift.camt.sniffing import SNIFF_BYTES, classify, sniff


@pytest.mark.parametrize(
    "prefix, expected",
    [
        (b"PK\x03\x04rest", ContentKind.ARCHIVE),
        (b"PK\x05\x06" + b"\x00" * 18, ContentKind.ARCHIVE),
        (b'<?xml version="1.0"?><Document/>', ContentKind.DOCUMENT),
        (b"  \n<Document/>", ContentKind.DOCUMENT),
        (codecs.BOM_UTF8 + b"<?xml version='1.0'?><a/>", ContentKind.DOCUMENT),
        ("<?xml version='1.0'?><a/>".encode("utf-16"), ContentKind.DOCUMENT),
        (b"<!-- kommentar --><a/>", ContentKind.DOCUMENT),
        (b"Date;Amount\n2023-05-01;1.00", ContentKind.UNRECOGNIZED),
        (b"%PDF-1.7", ContentKind.UNRECOGNIZED),
        (b"< ikke xml", ContentKind.UNRECOGNIZED),
        (b"<html><body><br></body></html>", ContentKind.UNRECOGNIZED),
        (b"<html><body><p>Hei", ContentKind.DOCUMENT),
        (b"", ContentKind.UNRECOGNIZED),
    ],
)
def test_classify(prefix: bytes, expected: ContentKind) -> None:
    assert classify(prefix) is expected


def test_sniff_spoler_tilbake() -> None:
    stream = io.BytesIO(b"<Document/>" + b" " * (SNIFF_BYTES * 2))
    stream.seek(0)

    assert sniff(stream) is ContentKind.DOCUMENT
    assert stream.tell() == 0
    assert stream.read(11) == b"<Document/>"
