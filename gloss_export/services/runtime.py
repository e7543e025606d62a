"""Runtime service container registry for dependency inversion.

The host handler and the CLI register the active :class:`ServiceContainer`
here so that the adapters (one DB pool, one HTTP client) are built once per
process and shared by every invocation. Tests may override it with in-memory
fakes.
"""

from __future__ import annotations

from typing import Optional

from . import ServiceContainer

_registry: dict[str, Optional[ServiceContainer]] = {"services": None}


def set_services(container: ServiceContainer) -> None:
    """Register the active service container."""
    _registry["services"] = container


def get_services() -> ServiceContainer:
    """Return the registered service container or raise if missing."""
    container = _registry.get("services")
    if container is None:
        raise RuntimeError("Service container has not been configured.")
    return container


def has_services() -> bool:
    """Return whether a service container has been registered."""
    return _registry.get("services") is not None


def clear_services() -> None:
    """Reset the registry (used primarily in tests)."""
    _registry["services"] = None


__all__ = ["set_services", "get_services", "has_services", "clear_services"]
