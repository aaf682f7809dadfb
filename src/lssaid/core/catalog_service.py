"""Core catalog service: turns a catalog source into a parsed catalog.

Depends on a :class:`~lssaid.core.protocols.CatalogSource` injected at
construction time, keeping the core free of filesystem and network
imports.
"""

from __future__ import annotations

from collections.abc import Sequence

from lssaid.core.catalog_parser import parse_catalog
from lssaid.core.matcher import resolve_ids, search_names
from lssaid.core.models import LoadedCatalog, Resolution, SearchHit
from lssaid.core.protocols import CatalogSource


class CatalogService:
    """Loads the catalog once and answers lookups against it.

    Parameters
    ----------
    source:
        Any object satisfying the :class:`CatalogSource` protocol.
    """

    def __init__(self, source: CatalogSource) -> None:
        self._source: CatalogSource = source

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def load(self, force_refresh: bool = False) -> LoadedCatalog:
        """Fetch the snapshot from the source and parse it.

        Raises
        ------
        CacheError
            When the cache cannot be read or written.
        CatalogFetchError
            When a download was needed and failed.
        CatalogSchemaError
            When the snapshot text is not a valid catalog.
        """
        snapshot = self._source.load(force_refresh)
        return LoadedCatalog(
            catalog=parse_catalog(snapshot.text),
            refreshed=snapshot.refreshed,
            location=snapshot.location,
        )

    def needs_refresh(self, force_refresh: bool = False) -> bool:
        """Whether :meth:`load` will have to download the catalog."""
        return self._source.needs_refresh(force_refresh)

    @staticmethod
    def resolve(loaded: LoadedCatalog, keys: Sequence[str]) -> list[Resolution]:
        """Resolve *keys* by app id against *loaded*."""
        return resolve_ids(keys, loaded.catalog)

    @staticmethod
    def search(loaded: LoadedCatalog, terms: Sequence[str]) -> list[SearchHit]:
        """Search app names in *loaded* for *terms*."""
        return search_names(terms, loaded.catalog)
