"""Oppslag i ISO 4217-valutatabellen."""

from __future__ import annotations

from functools import lru_cache

import pycountry

from .errors import CamtParseError

__all__ = ["lookup_currency"]


def lookup_currency(code: str) -> str:
    """Returnerer valutakoden slik den står i ISO 4217-tabellen.

    Ukjente koder gir ``CamtParseError``.
    """

    return _lookup_currency_cached(code.strip())


@lru_cache(maxsize=256)
def _lookup_currency_cached(code: str) -> str:
    # Koden må stå med store bokstaver som i ISO 4217.
    if len(code) != 3 or not code.isupper():
        raise CamtParseError(f"Ukjent valutakode: {code!r}")
    currency = pycountry.currencies.get(alpha_3=code)
    if currency is None:
        raise CamtParseError(f"Ukjent valutakode: {code!r}")
    return currency.alpha_3
