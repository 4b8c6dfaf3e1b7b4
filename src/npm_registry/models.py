"""Domain models for npm-registry. Frozen dataclasses unless noted."""

from __future__ import annotations

import base64
import re
from dataclasses import dataclass
from enum import StrEnum
from typing import TypedDict

from npm_registry.errors import InvalidArgumentError

# ─── Enumerations ─────────────────────────────────────────────


class DownloadPeriod(StrEnum):
    LAST_DAY = "last-day"
    LAST_WEEK = "last-week"
    LAST_MONTH = "last-month"


class DownloadType(StrEnum):
    POINT = "point"
    RANGE = "range"


# ─── Option shapes ────────────────────────────────────────────


SearchOptions = TypedDict(
    "SearchOptions",
    {
        "text": str,
        "size": int,
        "from": int,
        "quality": float,
        "popularity": float,
        "maintenance": float,
    },
    total=False,
)


class DownloadOptions(TypedDict, total=False):
    period: str
    type: str


# ─── Registry records ─────────────────────────────────────────

# npm "person" shorthand: ``Name <email> (url)``, email and url optional.
_PERSON_RE = re.compile(r"^\s*([^<(]*?)\s*(?:<([^>]*)>)?\s*(?:\(([^)]*)\))?\s*$")


@dataclass(frozen=True, slots=True)
class Human:
    """A person attached to a package: author, maintainer, contributor or publisher."""

    name: str
    email: str | None = None
    username: str | None = None
    url: str | None = None

    @classmethod
    def from_json(cls, raw: object) -> Human | None:
        """Build a Human from a JSON object or an npm person string.

        Returns None for anything else (missing field, null, numbers).
        """
        if isinstance(raw, dict):
            return cls(
                name=raw.get("name") or "",
                email=raw.get("email"),
                username=raw.get("username"),
                url=raw.get("url"),
            )
        if isinstance(raw, str):
            m = _PERSON_RE.match(raw)
            if m is None:
                return cls(name=raw.strip())
            return cls(name=m.group(1), email=m.group(2) or None, url=m.group(3) or None)
        return None

    @classmethod
    def list_from_json(cls, raw: object) -> list[Human]:
        if not isinstance(raw, list):
            return []
        humans = []
        for entry in raw:
            human = cls.from_json(entry)
            if human is not None:
                humans.append(human)
        return humans


@dataclass(frozen=True, slots=True)
class Dist:
    """Distribution metadata of a published version."""

    shasum: str
    tarball: str
    integrity: str | None = None
    file_count: int | None = None
    unpacked_size: int | None = None
    signature: str | None = None

    @classmethod
    def from_json(cls, raw: object) -> Dist | None:
        if not isinstance(raw, dict):
            return None
        return cls(
            shasum=raw.get("shasum", ""),
            tarball=raw.get("tarball", ""),
            integrity=raw.get("integrity"),
            file_count=raw.get("fileCount"),
            unpacked_size=raw.get("unpackedSize"),
            signature=raw.get("npm-signature"),
        )


@dataclass(slots=True)
class Readme:
    """README of a package. Mutable: callers may replace the content."""

    file: str = ""
    content: str = ""


@dataclass(frozen=True, slots=True)
class Credentials:
    """Username/password pair sent as HTTP Basic authentication."""

    username: str
    password: str

    def __post_init__(self) -> None:
        if not isinstance(self.username, str) or not isinstance(self.password, str):
            raise InvalidArgumentError("credentials username and password must be strings")

    def authorization(self) -> str:
        token = base64.b64encode(f"{self.username}:{self.password}".encode()).decode("ascii")
        return f"Basic {token}"
