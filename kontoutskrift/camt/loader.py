"""Innlesing av flere kontoutskriftsfiler i én samlet transaksjonsliste."""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from ..settings import MAX_WORKERS_OVERRIDE, PARALLEL_ENABLED
from .dispatcher import process_stream
from .errors import CamtFileError, MissingInputError
from .models import Transaction

__all__ = [
    "check_input_paths",
    "load_file",
    "load_transactions",
    "suggest_max_workers",
]

_LOGGER = logging.getLogger(__name__)

PathArg = str | os.PathLike[str]


def check_input_paths(paths: Sequence[PathArg]) -> List[Path]:
    """Kontrollerer at alle stier finnes og er vanlige filer.

    Alle stier som feiler rapporteres samlet i én ``MissingInputError``.
    """

    resolved = [Path(path) for path in paths]
    missing = [path for path in resolved if not path.is_file()]
    if missing:
        raise MissingInputError(missing)
    return resolved


def load_file(path: PathArg) -> List[Transaction]:
    """Åpner én fil og returnerer transaksjonene i dokumentrekkefølge."""

    file_path = Path(path)
    try:
        handle = file_path.open("rb")
    except OSError as exc:
        raise CamtFileError(file_path, exc) from exc
    with handle:
        return process_stream(file_path, handle)


def suggest_max_workers(
    paths: Sequence[PathArg], *, cpu_limit: Optional[int] = None
) -> int:
    """Velger et trådantall begrenset av CPU-er og antall filer."""

    if not paths:
        return 1
    if MAX_WORKERS_OVERRIDE is not None and MAX_WORKERS_OVERRIDE > 0:
        return max(1, min(MAX_WORKERS_OVERRIDE, len(paths)))
    cpu_count = cpu_limit if cpu_limit is not None else (os.cpu_count() or 1)
    return max(1, min(len(paths), cpu_count))


def _load_sequential(paths: Sequence[Path]) -> List[List[Transaction]]:
    return [load_file(path) for path in paths]


def _load_parallel(
    paths: Sequence[Path], max_workers: Optional[int]
) -> List[List[Transaction]]:
    workers = max_workers or suggest_max_workers(paths)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(load_file, path) for path in paths]
        results: Dict[int, List[Transaction]] = {}
        first_exception: Optional[BaseException] = None
        # Futures leses i inndata-rekkefølge, så første feil er den tidligste filen.
        for index, future in enumerate(futures):
            try:
                results[index] = future.result()
            except Exception as exc:  # noqa: BLE001 - kastes videre etter løkka
                _LOGGER.debug("Feil ved innlesing av %s", paths[index])
                if first_exception is None:
                    first_exception = exc
    if first_exception is not None:
        raise first_exception
    return [results[index] for index in range(len(paths))]


def load_transactions(
    paths: Sequence[PathArg],
    *,
    parallel: Optional[bool] = None,
    max_workers: Optional[int] = None,
) -> List[Transaction]:
    """Leser alle filer og slår sammen transaksjonene.

    Rekkefølgen er inndatafilenes rekkefølge, deretter arkivrekkefølge og
    dokumentrekkefølge. Feiler én fil, avbrytes hele kjøringen uten
    delresultat.
    """

    _LOGGER.info("Filer: %s", [str(path) for path in paths])
    checked = check_input_paths(paths)
    _LOGGER.info("Alle filer finnes")

    use_parallel = PARALLEL_ENABLED if parallel is None else parallel
    if use_parallel and len(checked) > 1:
        per_file = _load_parallel(checked, max_workers)
    else:
        per_file = _load_sequential(checked)

    transactions = [transaction for batch in per_file for transaction in batch]
    _LOGGER.info("Leste %d transaksjoner fra %d filer", len(transactions), len(checked))
    return transactions
