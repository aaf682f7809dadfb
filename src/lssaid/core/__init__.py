"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from lssaid.core.catalog_parser import parse_catalog
from lssaid.core.catalog_service import CatalogService
from lssaid.core.matcher import resolve_ids, search_names
from lssaid.core.models import (
    Catalog,
    CatalogEntry,
    CatalogSnapshot,
    LoadedCatalog,
    Resolution,
    SearchHit,
)
from lssaid.core.protocols import CatalogFetcher, CatalogSource

__all__: list[str] = [
    "Catalog",
    "CatalogEntry",
    "CatalogFetcher",
    "CatalogService",
    "CatalogSnapshot",
    "CatalogSource",
    "LoadedCatalog",
    "Resolution",
    "SearchHit",
    "parse_catalog",
    "resolve_ids",
    "search_names",
]
