"""Rekursiv behandling av ZIP-arkiver og camt-XML-dokumenter."""

from __future__ import annotations

import io
import logging
import lzma
import xml.etree.ElementTree as ET
import zipfile
import zlib
from pathlib import PurePath
from typing import BinaryIO, List

from ..constants import ENTRY_PATH
from ..helpers.xml_helpers import filter_nodes
from .errors import CamtFileError
from .models import ContentKind, Transaction
from .sniffing import sniff
from .transaction import build_transactions

__all__ = ["process_document", "process_stream"]

_LOGGER = logging.getLogger(__name__)

# Feil som får stikontekst før de sendes videre. ValueError dekker CamtError.
_PROCESSING_ERRORS = (
    OSError,
    EOFError,
    ValueError,
    RuntimeError,
    NotImplementedError,
    zipfile.BadZipFile,
    zipfile.LargeZipFile,
    zlib.error,
    lzma.LZMAError,
    ET.ParseError,
)


def process_document(path: PurePath, data: bytes) -> List[Transaction]:
    """Leser alle ``Ntry``-poster fra et camt.052-dokument."""

    tree = ET.ElementTree(ET.fromstring(data))
    entries = filter_nodes(tree, ENTRY_PATH)
    if not entries:
        _LOGGER.warning("Fant ingen poster i %s", path)
        return []
    _LOGGER.debug("Fant %d poster i %s", len(entries), path)
    return build_transactions(entries)


def _process_archive(path: PurePath, stream: BinaryIO) -> List[Transaction]:
    transactions: List[Transaction] = []
    with zipfile.ZipFile(stream) as archive:
        for info in archive.infolist():
            if info.is_dir():
                continue
            _LOGGER.debug("Fil i arkivet %s: %s", path, info.filename)
            buffer = io.BytesIO(archive.read(info))
            transactions.extend(process_stream(path / info.filename, buffer))
    return transactions


def _dispatch(path: PurePath, stream: BinaryIO) -> List[Transaction]:
    kind = sniff(stream)
    if kind is ContentKind.ARCHIVE:
        _LOGGER.info("ZIP-arkiv: %s", path)
        return _process_archive(path, stream)
    if kind is ContentKind.DOCUMENT:
        _LOGGER.info("Behandler XML-fil: %s", path)
        return process_document(path, stream.read())
    _LOGGER.warning("Filen er verken ZIP eller XML og hoppes over: %s", path)
    return []


def process_stream(path: PurePath, stream: BinaryIO) -> List[Transaction]:
    """Klassifiserer strømmen og behandler den rekursivt.

    Arkiver pakkes ut medlem for medlem i arkivets rekkefølge, og hvert
    medlem behandles som en ny strøm med stien ``path / medlemsnavn``.
    Feil fra et dypere nivå sendes uendret videre, slik at meldingen peker
    på det innerste medlemmet som feilet.
    """

    try:
        return _dispatch(path, stream)
    except CamtFileError:
        raise
    except _PROCESSING_ERRORS as exc:
        raise CamtFileError(path, exc) from exc
