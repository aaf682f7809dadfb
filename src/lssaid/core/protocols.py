"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations.
"""

from __future__ import annotations

from typing import Protocol

from lssaid.core.models import CatalogSnapshot


class CatalogFetcher(Protocol):
    """Contract for backends that download the raw catalog document."""

    def fetch(self) -> str:
        """Download the full catalog and return the response body as text.

        Implementations must map all transport exceptions to
        :class:`~lssaid.exceptions.CatalogFetchError`.
        """
        ...  # pragma: no cover


class CatalogSource(Protocol):
    """Contract for anything that hands out catalog snapshots.

    The file-backed :class:`~lssaid.infra.catalog_cache.CatalogCache`
    is the production implementation.
    """

    def needs_refresh(self, force_refresh: bool = False) -> bool:
        """Whether the next :meth:`load` will download the catalog."""
        ...  # pragma: no cover

    def load(self, force_refresh: bool = False) -> CatalogSnapshot:
        """Return the current catalog text, downloading it when required.

        Raises
        ------
        CacheError
            When the cache file cannot be read or written.
        CatalogFetchError
            When a download was required and failed.
        """
        ...  # pragma: no cover
