"""Felles innstillinger som leses fra miljøvariabler."""

from __future__ import annotations

import os
from typing import Optional

from .constants import DEFAULT_CSV_DELIMITER

__all__ = [
    "LOG_LEVEL",
    "PARALLEL_ENABLED",
    "MAX_WORKERS_OVERRIDE",
    "CSV_DELIMITER",
]


def _env_flag(name: str) -> bool:
    value = os.getenv(name)
    if value is None:
        return False
    normalized = value.strip().lower()
    return normalized in {"1", "true", "ja", "on", "yes"}


def _env_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_delimiter(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or len(value) != 1:
        return default
    return value


LOG_LEVEL = _env_str("KONTOUTSKRIFT_LOG_LEVEL", "WARNING").upper()
PARALLEL_ENABLED = _env_flag("KONTOUTSKRIFT_PARALLEL")
MAX_WORKERS_OVERRIDE = _env_int("KONTOUTSKRIFT_MAX_WORKERS")
CSV_DELIMITER = _env_delimiter("KONTOUTSKRIFT_CSV_DELIMITER", DEFAULT_CSV_DELIMITER)
