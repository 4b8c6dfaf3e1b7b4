"""Read-only view over a registry package document (``GET /{name}``)."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from npm_registry.errors import NotFoundError
from npm_registry.models import Human, Readme
from npm_registry.views.version import Version


def _parse_timestamp(value: object) -> datetime | None:
    """Parse an ISO-8601 registry timestamp, or None when missing or malformed."""
    if not isinstance(value, str) or not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


class Package:
    """A package and all of its published versions.

    The raw document is kept private; properties project it into typed
    values. ``readme`` is the only writable attribute, so callers can swap
    in README content fetched from elsewhere.

    Usage::

        pkg = await registry.package("ava")
        pkg.last_version
        pkg.version(pkg.tag("latest")).dependencies
    """

    __slots__ = ("_document", "readme")

    def __init__(self, document: dict[str, Any]) -> None:
        self._document = document
        self.readme = Readme(
            file=document.get("readmeFilename") or "",
            content=document.get("readme") or "",
        )

    def __repr__(self) -> str:
        return f"Package(name={self.name!r}, last_version={self.last_version!r})"

    # ── Lookups ──────────────────────────────────────────────────

    def version(self, version: str) -> Version:
        """Return the view of a published version.

        Raises:
            NotFoundError: If *version* is not in the versions map.
        """
        versions = self._document.get("versions") or {}
        if version not in versions:
            raise NotFoundError(f"Unknown version {version}")
        return Version(versions[version], package=self)

    def published_at(self, version: str) -> datetime | None:
        """Publication date of *version*, or None when the registry recorded none."""
        return _parse_timestamp((self._document.get("time") or {}).get(version))

    def tag(self, tag_name: str) -> str:
        """Return the version a dist-tag points to.

        Raises:
            NotFoundError: If *tag_name* is not a known dist-tag.
        """
        dist_tags = self._document.get("dist-tags") or {}
        if tag_name not in dist_tags:
            raise NotFoundError(f"Unknown tag with name {tag_name}")
        return dist_tags[tag_name]

    # ── Document fields ──────────────────────────────────────────

    @property
    def id(self) -> str | None:
        """Package name as used for the CouchDB document id."""
        return self._document.get("_id")

    @property
    def rev(self) -> str | None:
        """CouchDB revision of the document."""
        return self._document.get("_rev")

    @property
    def name(self) -> str | None:
        return self._document.get("name")

    @property
    def description(self) -> str | None:
        return self._document.get("description")

    @property
    def versions(self) -> list[str]:
        return list(self._document.get("versions") or {})

    @property
    def created_at(self) -> datetime | None:
        return _parse_timestamp((self._document.get("time") or {}).get("created"))

    @property
    def updated_at(self) -> datetime | None:
        return _parse_timestamp((self._document.get("time") or {}).get("modified"))

    @property
    def maintainers(self) -> list[Human]:
        return Human.list_from_json(self._document.get("maintainers"))

    @property
    def author(self) -> Human | None:
        return Human.from_json(self._document.get("author"))

    @property
    def last_version(self) -> str | None:
        return (self._document.get("dist-tags") or {}).get("latest")

    @property
    def tags(self) -> list[str]:
        return list(self._document.get("dist-tags") or {})

    @property
    def keywords(self) -> list[str]:
        return list(self._document.get("keywords") or [])

    @property
    def homepage(self) -> str:
        return self._document.get("homepage") or ""

    @property
    def license(self) -> str:
        raw = self._document.get("license")
        # Old documents store ``{"type": "MIT", "url": ...}``.
        if isinstance(raw, dict):
            return raw.get("type") or ""
        return raw or ""

    @property
    def bugs_url(self) -> str:
        bugs = self._document.get("bugs")
        if isinstance(bugs, dict):
            return bugs.get("url") or ""
        return ""
