"""Domain models for lssaid.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and zero
dependencies on external packages.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """One app as listed by the remote catalog."""

    appid: int
    """Steam app id, an unsigned 64-bit integer."""

    name: str
    """Store name of the app, verbatim from the catalog."""


@dataclass(frozen=True, slots=True)
class Catalog:
    """Ordered, immutable sequence of :class:`CatalogEntry` values.

    Entries keep the order of the remote document.  Ids are **not**
    deduplicated; the remote source may list an id more than once.
    """

    entries: tuple[CatalogEntry, ...]

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return len(self.entries) > 0

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self.entries)


# ---------------------------------------------------------------------------
# Cache / loading results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CatalogSnapshot:
    """Raw catalog text as handed out by a catalog source."""

    text: str
    """Verbatim JSON document."""

    refreshed: bool
    """``True`` when the text was downloaded during this run."""

    location: Path
    """Where the snapshot is persisted."""


@dataclass(frozen=True, slots=True)
class LoadedCatalog:
    """A parsed catalog together with where it came from."""

    catalog: Catalog
    refreshed: bool
    location: Path


# ---------------------------------------------------------------------------
# Match results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of looking up one key by app id."""

    key: str
    """The query key exactly as collected (file name or CLI token)."""

    name: str | None
    """Resolved app name, or ``None`` when no catalog entry matched."""


@dataclass(frozen=True, slots=True)
class SearchHit:
    """A catalog entry whose name contains a search term."""

    appid: int
    name: str
    term: str
    """The search term that produced this hit."""
