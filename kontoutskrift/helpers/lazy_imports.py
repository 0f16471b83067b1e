"""Sen import av pandas og skrivemotorene for regneark."""

from __future__ import annotations

from importlib import import_module
from types import ModuleType
from typing import TYPE_CHECKING, Any, Dict, List, Optional, cast

if TYPE_CHECKING:  # pragma: no cover - kun for typekontroll
    import pandas as pd

__all__ = ["MissingDependencyError", "lazy_import", "lazy_pandas", "require_module"]

# Pakkenavn på PyPI når det avviker fra importnavnet.
_DISTRIBUTION_NAMES = {
    "odf": "odfpy",
}


class MissingDependencyError(ModuleNotFoundError):
    """Et valgfritt bibliotek mangler for ønsket utdataformat."""


def require_module(module_name: str) -> ModuleType:
    """Importerer modulen eller kaster en feil med installasjonshint."""

    try:
        return import_module(module_name)
    except ModuleNotFoundError as exc:
        package = _DISTRIBUTION_NAMES.get(module_name, module_name)
        raise MissingDependencyError(
            f"Modulen '{module_name}' mangler. Installer den med 'pip install {package}'.",
            name=module_name,
        ) from exc


class _LazyModule(ModuleType):
    """Proxy som laster modulen ved første attributtoppslag."""

    def __init__(self, module_name: str) -> None:
        super().__init__(module_name)
        self._module_name = module_name
        self._module: Optional[ModuleType] = None

    def _load(self) -> ModuleType:
        if self._module is None:
            self._module = require_module(self._module_name)
        return self._module

    def __getattr__(self, item: str) -> Any:
        return getattr(self._load(), item)

    def __dir__(self) -> List[str]:
        return dir(self._load())


_LAZY_MODULES: Dict[str, _LazyModule] = {}


def lazy_import(module_name: str) -> ModuleType:
    """Returnerer en delt proxy for ``module_name``."""

    if module_name not in _LAZY_MODULES:
        _LAZY_MODULES[module_name] = _LazyModule(module_name)
    return _LAZY_MODULES[module_name]


def lazy_pandas() -> "pd":
    """Returnerer en proxy som importerer ``pandas`` først når den brukes."""

    return cast("pd", lazy_import("pandas"))
