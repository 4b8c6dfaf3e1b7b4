"""Client settings and the process-wide debug flag."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from npm_registry.errors import InvalidArgumentError

DEFAULT_URL = "https://registry.npmjs.org"
DEFAULT_API_URL = "https://api.npmjs.org/"

_DEFAULT_TIMEOUT_SECONDS = 30.0
_DEFAULT_CONNECT_TIMEOUT_SECONDS = 10.0
_TRUTHY = frozenset({"1", "true", "yes", "on"})

# ─── Debug flag ───────────────────────────────────────────────

_debug: bool = False


def set_debug(enabled: bool) -> None:
    """Toggle logging of caught upstream errors before they are re-raised."""
    global _debug
    _debug = bool(enabled)


def debug_enabled() -> bool:
    return _debug


# ─── Settings ─────────────────────────────────────────────────


def _read_float(env: Mapping[str, str], key: str, default: float) -> float:
    raw = env.get(key, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise InvalidArgumentError(f"{key} must be a number, got {raw!r}") from exc
    if value <= 0:
        raise InvalidArgumentError(f"{key} must be positive, got {raw!r}")
    return value


@dataclass(frozen=True, slots=True)
class RegistrySettings:
    """Connection settings for a registry session."""

    url: str = DEFAULT_URL
    api_url: str = DEFAULT_API_URL
    token: str | None = None
    timeout: float = _DEFAULT_TIMEOUT_SECONDS
    connect_timeout: float = _DEFAULT_CONNECT_TIMEOUT_SECONDS
    debug: bool = False

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> RegistrySettings:
        """Read settings from ``NPM_REGISTRY_*`` / ``NPM_TOKEN`` environment variables."""
        source = env if env is not None else os.environ
        return cls(
            url=source.get("NPM_REGISTRY_URL", "").strip() or DEFAULT_URL,
            api_url=source.get("NPM_REGISTRY_API_URL", "").strip() or DEFAULT_API_URL,
            token=source.get("NPM_TOKEN", "").strip() or None,
            timeout=_read_float(source, "NPM_REGISTRY_TIMEOUT", _DEFAULT_TIMEOUT_SECONDS),
            connect_timeout=_read_float(
                source, "NPM_REGISTRY_CONNECT_TIMEOUT", _DEFAULT_CONNECT_TIMEOUT_SECONDS
            ),
            debug=source.get("NPM_REGISTRY_DEBUG", "").strip().lower() in _TRUTHY,
        )
