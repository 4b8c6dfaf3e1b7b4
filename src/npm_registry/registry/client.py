"""HTTP client for the npm registry API.

Registry docs: https://github.com/npm/registry/blob/main/docs/REGISTRY-API.md
Base URL: https://registry.npmjs.org
Download counts: https://api.npmjs.org/downloads

Authentication is optional. ``login`` accepts either a bare token (sent as
``Bearer``) or a ``user:password`` pair (sent as ``Basic``).
"""

from __future__ import annotations

import base64
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote as urlquote

import httpx

from npm_registry.config import DEFAULT_API_URL, DEFAULT_URL, debug_enabled
from npm_registry.errors import InvalidArgumentError, NotFoundError, RequestError
from npm_registry.models import (
    Credentials,
    DownloadOptions,
    DownloadPeriod,
    DownloadType,
    SearchOptions,
)
from npm_registry.utils import clamp, is_number
from npm_registry.views.package import Package
from npm_registry.views.version import Version

logger = logging.getLogger(__name__)

# Upper bound the search endpoint accepts for ``size``.
_MAX_SEARCH_SIZE = 250

# Search weights live in [0, 1].
_SEARCH_WEIGHTS = ("quality", "popularity", "maintenance")


def _require_str(value: object, label: str) -> None:
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{label} must be a string, got {type(value).__name__}")


def _require_mapping(value: object, label: str) -> None:
    if not isinstance(value, Mapping):
        raise InvalidArgumentError(f"{label} must be a mapping, got {type(value).__name__}")


@dataclass
class RegistryClient:
    """Async client for the npm registry.

    Every coroutine issues exactly one GET through ``http``. Input checks
    run first and raise ``InvalidArgumentError`` without touching the
    network.
    """

    http: httpx.AsyncClient
    url: str = DEFAULT_URL
    api_url: str = DEFAULT_API_URL
    _authorization: str | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        _require_str(self.url, "url")
        _require_str(self.api_url, "api_url")

    # ── Authentication ───────────────────────────────────────────

    def login(self, credential: str) -> None:
        """Set the ``Authorization`` header sent with every request.

        A credential without ``:`` is treated as a token (``Bearer``);
        ``user:password`` is sent as ``Basic``.
        """
        _require_str(credential, "credential")
        if ":" not in credential:
            self._authorization = f"Bearer {credential}"
        else:
            encoded = base64.b64encode(credential.encode()).decode("ascii")
            self._authorization = f"Basic {encoded}"

    def logout(self) -> None:
        self._authorization = None

    @property
    def is_authenticated(self) -> bool:
        return self._authorization is not None

    # ── Public API ───────────────────────────────────────────────

    async def meta_data(self) -> dict[str, Any]:
        """Fetch the registry metadata document (``db_name``, ``doc_count``, ...)."""
        return await self._get(self._registry_url())

    async def package(self, name: str, version: str | None = None) -> Package | Version:
        """Fetch a package document, or one version of it.

        Args:
            name: Package name, scoped names included (``@scope/name``).
            version: Optional exact version or dist-tag.

        Returns:
            A ``Version`` when *version* is given, otherwise a ``Package``.

        Raises:
            InvalidArgumentError: If *name* or *version* is not a string.
            NotFoundError: If the registry has no such package or version.
            RequestError: On any other upstream or transport failure.
        """
        _require_str(name, "name")
        if version is None:
            return Package(await self._get(self._registry_url(urlquote(name, safe="@"))))
        return await self.package_version(name, version)

    async def package_version(self, name: str, version: str) -> Version:
        """Fetch a single version document of *name*."""
        _require_str(name, "name")
        _require_str(version, "version")
        path = f"{urlquote(name, safe='@')}/{urlquote(version, safe='')}"
        return Version(await self._get(self._registry_url(path)))

    async def user_packages(self, user_name: str) -> dict[str, str]:
        """List the packages *user_name* can access, mapped to ``read``/``write``."""
        _require_str(user_name, "user_name")
        return await self._get(
            self._registry_url(f"-/user/{urlquote(user_name, safe='')}/package")
        )

    async def search(self, options: SearchOptions | Mapping[str, Any]) -> dict[str, Any]:
        """Full-text search (``/-/v1/search``).

        Only the keys present in *options* are sent. ``size`` is clamped to
        0-250 and the quality/popularity/maintenance weights to 0-1.

        Returns:
            The upstream result verbatim: ``{"objects": [...], "total": n, "time": ...}``.
        """
        _require_mapping(options, "options")
        params: dict[str, object] = {}

        if "text" in options:
            _require_str(options["text"], "options.text")
            params["text"] = options["text"]
        for key in ("size", "from", *_SEARCH_WEIGHTS):
            if key not in options:
                continue
            value = options[key]
            if not is_number(value):
                raise InvalidArgumentError(
                    f"options.{key} must be a number, got {type(value).__name__}"
                )
            if key == "size":
                value = clamp(value, 0, _MAX_SEARCH_SIZE)
            elif key in _SEARCH_WEIGHTS:
                value = clamp(value, 0, 1)
            params[key] = value

        return await self._get(self._registry_url("-/v1/search"), params=params)

    async def membership(
        self,
        scope: str,
        credentials: Credentials | None = None,
    ) -> dict[str, str]:
        """List the members of an organisation and their roles.

        *credentials*, when given, replace the client's ``Authorization``
        header for this call only.
        """
        _require_str(scope, "scope")
        if credentials is not None and not isinstance(credentials, Credentials):
            raise InvalidArgumentError(
                f"credentials must be a Credentials instance, got {type(credentials).__name__}"
            )

        authorization = credentials.authorization() if credentials is not None else None
        return await self._get(
            self._registry_url(f"-/org/{urlquote(scope, safe='@')}/user"),
            authorization=authorization,
        )

    async def downloads(
        self,
        package_name: str,
        options: DownloadOptions | Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Fetch download counts from the npm API host.

        Args:
            package_name: Package to count downloads for.
            options: ``period`` (last-day, last-week, last-month; default
                last-day) and ``type`` (point or range; default point).

        Raises:
            InvalidArgumentError: On a non-string name, a non-mapping
                *options*, or an unknown period or type.
        """
        _require_str(package_name, "package_name")
        if options is None:
            options = {}
        _require_mapping(options, "options")

        period_raw = options.get("period", DownloadPeriod.LAST_DAY)
        type_raw = options.get("type", DownloadType.POINT)
        try:
            period = DownloadPeriod(period_raw)
        except ValueError as exc:
            raise InvalidArgumentError(f"Unknown period {period_raw}") from exc
        try:
            kind = DownloadType(type_raw)
        except ValueError as exc:
            raise InvalidArgumentError(
                f"options.type must be equal to <point> or <range>, got {type_raw!r}"
            ) from exc

        name = urlquote(package_name, safe="@/,")
        return await self._get(f"{self.api_url.rstrip('/')}/downloads/{kind}/{period}/{name}")

    # ── HTTP helpers ─────────────────────────────────────────────

    def _registry_url(self, path: str = "") -> str:
        base = self.url.rstrip("/")
        return f"{base}/{path}" if path else base

    def _headers(self, authorization: str | None = None) -> dict[str, str]:
        """Build request headers; *authorization* overrides the logged-in value."""
        value = authorization or self._authorization
        if value:
            return {"Authorization": value}
        return {}

    async def _get(
        self,
        url: str,
        *,
        params: dict[str, object] | None = None,
        authorization: str | None = None,
    ) -> Any:
        """Execute one GET and return the decoded JSON body.

        Raises:
            NotFoundError: On HTTP 404.
            RequestError: On any other HTTP error status, transport failure
                or undecodable body.
        """
        logger.debug("GET %s params=%s", url, params)
        try:
            response = await self.http.get(
                url,
                params=params,
                headers=self._headers(authorization),
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._log_failure(url, exc)
            status = exc.response.status_code
            message = _upstream_message(exc.response)
            if status == 404:
                raise NotFoundError(message, status_code=status) from exc
            raise RequestError(message, status_code=status) from exc
        except httpx.HTTPError as exc:
            self._log_failure(url, exc)
            raise RequestError(str(exc) or type(exc).__name__) from exc

        try:
            return response.json()
        except ValueError as exc:
            self._log_failure(url, exc)
            raise RequestError(
                f"Invalid JSON returned by '{url}'",
                status_code=response.status_code,
            ) from exc

    @staticmethod
    def _log_failure(url: str, exc: Exception) -> None:
        if debug_enabled():
            logger.error("Request to %s failed", url, exc_info=exc)


def _upstream_message(response: httpx.Response) -> str:
    """Pick the registry's own error text, falling back to the status line.

    The registry answers errors with ``{"error": "Not found"}``; the
    downloads API uses the same key.
    """
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in ("error", "message"):
            text = body.get(key)
            if isinstance(text, str) and text:
                return text
    return f"{response.status_code} {response.reason_phrase}".strip()
