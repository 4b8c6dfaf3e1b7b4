"""npm-registry: async client for the npm registry API."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _distribution_version

from npm_registry.config import RegistrySettings, debug_enabled, set_debug
from npm_registry.errors import (
    InvalidArgumentError,
    NotFoundError,
    NpmRegistryError,
    RequestError,
)
from npm_registry.models import Credentials, Dist, DownloadPeriod, DownloadType, Human, Readme
from npm_registry.registry.client import RegistryClient
from npm_registry.session import open_registry
from npm_registry.utils import clamp
from npm_registry.views.package import Package
from npm_registry.views.version import Version

_LOCAL_VERSION_FALLBACK = "0.0.0+local"


def _resolve_version() -> str:
    """Resolve package version from installed metadata with deterministic fallback."""
    try:
        return _distribution_version("npm-registry")
    except PackageNotFoundError:
        return _LOCAL_VERSION_FALLBACK


__version__ = _resolve_version()

__all__ = [
    "Credentials",
    "Dist",
    "DownloadPeriod",
    "DownloadType",
    "Human",
    "InvalidArgumentError",
    "NotFoundError",
    "NpmRegistryError",
    "Package",
    "Readme",
    "RegistryClient",
    "RegistrySettings",
    "RequestError",
    "Version",
    "__version__",
    "clamp",
    "debug_enabled",
    "open_registry",
    "set_debug",
]
