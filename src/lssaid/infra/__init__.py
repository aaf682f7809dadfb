"""Infrastructure layer — external system integration.

This layer wraps all interaction with the Steam Web API and the local
filesystem.  Every raw third-party or OS exception must be caught here
and re-raised as a :class:`~lssaid.exceptions.LssaidError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from lssaid.infra.catalog_cache import CatalogCache
from lssaid.infra.input_collector import InputMode, explicit_keys, list_directory_keys
from lssaid.infra.steam_fetcher import SteamCatalogFetcher

__all__: list[str] = [
    "CatalogCache",
    "InputMode",
    "SteamCatalogFetcher",
    "explicit_keys",
    "list_directory_keys",
]
