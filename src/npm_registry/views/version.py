"""Read-only view over one entry of a package document's ``versions`` map."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from npm_registry.models import Dist, Human

if TYPE_CHECKING:
    from npm_registry.views.package import Package


class Version:
    """A single published version of a package.

    Every property is a projection of the wrapped version document.
    Missing collections come back empty, missing scalars as ``None``.
    """

    __slots__ = ("_document", "_package")

    def __init__(self, document: dict[str, Any], package: Package | None = None) -> None:
        self._document = document
        self._package = package

    def __repr__(self) -> str:
        return f"Version(name={self.name!r}, version={self.version!r})"

    @property
    def name(self) -> str:
        return self._document.get("name", "")

    @property
    def version(self) -> str:
        return self._document.get("version", "")

    @property
    def package(self) -> Package | None:
        """The package this version was taken from, when built through ``Package.version``."""
        return self._package

    @property
    def description(self) -> str | None:
        return self._document.get("description")

    @property
    def keywords(self) -> list[str]:
        return list(self._document.get("keywords") or [])

    @property
    def author(self) -> Human | None:
        return Human.from_json(self._document.get("author"))

    @property
    def dist(self) -> Dist | None:
        return Dist.from_json(self._document.get("dist"))

    @property
    def dependencies(self) -> dict[str, str]:
        return dict(self._document.get("dependencies") or {})

    @property
    def dev_dependencies(self) -> dict[str, str]:
        return dict(self._document.get("devDependencies") or {})

    @property
    def peer_dependencies(self) -> dict[str, str]:
        return dict(self._document.get("peerDependencies") or {})

    @property
    def npm_version(self) -> str | None:
        """Version of npm used to publish."""
        return self._document.get("_npmVersion")

    @property
    def node_version(self) -> str | None:
        """Version of Node.js used to publish."""
        return self._document.get("_nodeVersion")

    @property
    def publisher(self) -> Human | None:
        """The npm user who published this version (``_npmUser``)."""
        return Human.from_json(self._document.get("_npmUser"))

    @property
    def maintainers(self) -> list[Human]:
        return Human.list_from_json(self._document.get("maintainers"))

    @property
    def contributors(self) -> list[Human]:
        return Human.list_from_json(self._document.get("contributors"))
