"""kontoutskrift-bibliotekets grensesnitt."""

from __future__ import annotations

from importlib import import_module
from typing import Any

from .constants import ENTRY_PATH, OUTPUT_HEADERS

__all__ = [
    "ENTRY_PATH",
    "OUTPUT_HEADERS",
    "camt",
    "cli",
    "writers",
]

_MODULE_MAP = {
    "camt": "kontoutskrift.camt",
    "cli": "kontoutskrift.cli",
    "writers": "kontoutskrift.writers",
}


def __getattr__(name: str) -> Any:
    """Last moduler først når de faktisk brukes."""

    if name in _MODULE_MAP:
        module = import_module(_MODULE_MAP[name])
        globals()[name] = module
        return module
    raise AttributeError(f"module 'kontoutskrift' has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(set(__all__ + list(globals().keys())))
