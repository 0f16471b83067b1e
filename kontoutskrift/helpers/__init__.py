"""Samlemodul for generelle hjelpere."""

from .lazy_imports import MissingDependencyError, lazy_import, lazy_pandas, require_module
from .xml_helpers import filter_nodes, find, local_name, text_or_none

__all__ = [
    "MissingDependencyError",
    "filter_nodes",
    "find",
    "lazy_import",
    "lazy_pandas",
    "local_name",
    "require_module",
    "text_or_none",
]
