"""Built-in packages and lookup of their named constants."""

from __future__ import annotations

import time
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional

DEFAULT_PACKAGES = ("math", "time")

_packages: Dict[str, Dict[str, Any]] = {}


def _math_package() -> Dict[str, Any]:
    return {
        "pi": 3.141592653589793,
        "e": 2.718281828459045,
        "tau": 6.283185307179586,
        "phi": 1.618033988749895,
    }


def _time_package() -> Dict[str, Any]:
    seconds = (time.time_ns() // 1000) / 1e6
    return {"time": seconds}


_BUILDERS = {
    "math": _math_package,
    "time": _time_package,
}


def initialize_default_packages(packages: Optional[Iterable[str]] = None) -> None:
    """Load each named package that is known; unknown names are ignored.

    The ``time`` package records the current time, in seconds with
    microsecond resolution, at the moment it is loaded.
    """
    for name in DEFAULT_PACKAGES if packages is None else packages:
        builder = _BUILDERS.get(name)
        if builder is not None:
            _packages[name] = builder()


def _ensure_loaded() -> None:
    if not _packages:
        initialize_default_packages()


def get_package(name: str) -> Optional[Mapping[str, Any]]:
    """Read-only view of the package's constants, or None if it does not exist."""
    _ensure_loaded()
    package = _packages.get(name)
    return None if package is None else MappingProxyType(package)


def get_constant(package_name: str, constant_name: str) -> Any:
    """Value of a constant in a package, or None if either is unknown."""
    package = get_package(package_name)
    if package is None:
        return None
    return package.get(constant_name)


def package_exists(name: str) -> bool:
    """Whether a package with this name is loaded."""
    _ensure_loaded()
    return name in _packages


def get_available_packages() -> List[str]:
    """Names of all loaded packages."""
    _ensure_loaded()
    return list(_packages)


def get_package_constants(name: str) -> List[str]:
    """Names of the constants in a package; empty if the package is unknown."""
    package = get_package(name)
    return [] if package is None else list(package)