"""Feiltyper for innlesing av camt.052-filer."""

from __future__ import annotations

from pathlib import PurePath
from typing import Sequence

__all__ = [
    "CamtError",
    "CamtFileError",
    "CamtParseError",
    "CamtStructureError",
    "MissingInputError",
]


class CamtError(ValueError):
    """Felles basisklasse for feil ved innlesing av kontoutskrifter."""


class MissingInputError(CamtError):
    """En eller flere inndatafiler finnes ikke eller er ikke vanlige filer."""

    def __init__(self, paths: Sequence[PurePath]) -> None:
        self.paths = list(paths)
        listed = ", ".join(f"'{path}'" for path in self.paths)
        super().__init__(f"Filen finnes ikke: {listed}")


class CamtStructureError(CamtError):
    """Et påkrevd XML-element eller attributt mangler eller er tomt."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(message)


class CamtParseError(CamtError):
    """Tekst finnes, men kan ikke tolkes som dato, beløp eller valuta."""


class CamtFileError(CamtError):
    """Feil under behandling av en fil eller et arkivmedlem.

    ``path`` er stien på nivået der feilen ble oppdaget. Ved nestede arkiver
    pakkes den innerste feilen først, slik at meldingen peker på det innerste
    medlemmet.
    """

    def __init__(self, path: PurePath, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Feil ved behandling av filen '{path}': {cause}")
