"""Data models for alias specifications and resolved stylesheet assets."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass(frozen=True)
class Disabled:
    """Alias switched off; it never resolves and using it is an error."""


@dataclass(frozen=True)
class SameAsName:
    """The alias name doubles as the file stem."""


@dataclass(frozen=True)
class PathSpec:
    """A path fragment relative to the CSS root, suffix optional."""

    base: str


@dataclass(frozen=True)
class UrlSpec:
    """A full or protocol-relative URL, passed through verbatim."""

    url: str


@dataclass(frozen=True)
class ExactPath:
    """A ``Path`` object used as-is, with no suffix search."""

    path: Path


AliasSpec = Union[Disabled, SameAsName, PathSpec, UrlSpec, ExactPath]


@dataclass(frozen=True)
class LocalAsset:
    """Stylesheet found on local disk."""

    path: Path
    name: str
    size: int


@dataclass(frozen=True)
class RemoteAsset:
    """Stylesheet served from a URL; never read or fetched."""

    url: str

    @property
    def name(self) -> str:
        return self.url

    @property
    def size(self) -> int:
        return 0


Asset = Union[LocalAsset, RemoteAsset]
