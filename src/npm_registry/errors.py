"""Exception hierarchy for npm-registry.

All exceptions inherit from NpmRegistryError (single catch point).
Upstream messages are kept verbatim so diagnostics stay actionable.
"""

from __future__ import annotations


class NpmRegistryError(Exception):
    """Base exception for all npm-registry errors."""


class InvalidArgumentError(NpmRegistryError):
    """An argument has the wrong type or value. Raised before any request."""


class RequestError(NpmRegistryError):
    """Error communicating with the registry API."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(RequestError):
    """The requested package, version, tag, user or scope does not exist."""
