"""Kommandolinjeverktøy for konvertering av camt.052 til CSV eller regneark."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import settings
from .camt.errors import CamtError
from .camt.loader import load_transactions
from .helpers.lazy_imports import MissingDependencyError
from .writers import OutputFormat, get_writer, render

__all__ = ["build_parser", "configure_logging", "main"]

_LOGGER = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(level: str) -> None:
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logging.basicConfig(level=numeric, format=_LOG_FORMAT, stream=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kontoutskrift",
        description="Leser camt.052-kontoutskrifter (XML eller ZIP) og skriver transaksjonene ut.",
    )
    parser.add_argument("files", nargs="+", help="XML- eller ZIP-filer som skal leses")
    parser.add_argument(
        "-f",
        "--format",
        choices=[fmt.value for fmt in OutputFormat],
        default=OutputFormat.CSV.value,
        help="Utdataformat (standard: csv)",
    )
    parser.add_argument("-o", "--output", help="Skriv til fil i stedet for standard ut")
    parser.add_argument(
        "-d",
        "--delimiter",
        default=settings.CSV_DELIMITER,
        help="Skilletegn for CSV (standard: ';')",
    )
    parser.add_argument(
        "--parallel",
        action=argparse.BooleanOptionalAction,
        default=settings.PARALLEL_ENABLED,
        help="Les inndatafilene i parallell (--no-parallel slår det av)",
    )
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        help="Loggnivå, f.eks. INFO eller DEBUG (standard: WARNING)",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Kjører konverteringen og returnerer prosessens avslutningskode."""

    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if len(args.delimiter) != 1:
        parser.error("Skilletegnet må være nøyaktig ett tegn.")

    try:
        transactions = load_transactions(args.files, parallel=args.parallel)
        writer = get_writer(args.format, delimiter=args.delimiter)
        content = render(writer, transactions)
        if args.output:
            Path(args.output).write_bytes(content)
        else:
            sys.stdout.buffer.write(content)
            sys.stdout.buffer.flush()
    except (CamtError, MissingDependencyError, OSError) as exc:
        _LOGGER.error("%s", exc)
        print(f"Feil: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover - CLI brukes ved behov
    raise SystemExit(main())
