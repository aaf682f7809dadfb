"""Runtime settings resolved once from the process environment.

The settings are a frozen value object threaded explicitly into the
cache and the fetcher; nothing else in the package reads environment
variables.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path

from lssaid.exceptions import HomeDirectoryError

DEFAULT_CATALOG_URL: str = "https://api.steampowered.com/ISteamApps/GetAppList/v2/"
CACHE_FILENAME: str = "lssaid-cache.json"
FRESHNESS_WINDOW: timedelta = timedelta(days=14)
REQUEST_TIMEOUT: float = 60.0

CATALOG_URL_ENV: str = "LSSAID_CATALOG_URL"


@dataclass(frozen=True, slots=True)
class Settings:
    """Everything the pipeline needs to know about its environment."""

    home: Path
    """The user's home directory."""

    cache_path: Path
    """Location of the cached catalog JSON."""

    catalog_url: str = DEFAULT_CATALOG_URL
    """Endpoint returning the full app catalog."""

    freshness_window: timedelta = FRESHNESS_WINDOW
    """Maximum cache age before the catalog is downloaded again."""

    request_timeout: float = REQUEST_TIMEOUT
    """Seconds to wait for the catalog endpoint."""

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from *environ* (defaults to ``os.environ``).

        Raises
        ------
        HomeDirectoryError
            If ``HOME`` is unset or empty.
        """
        env = os.environ if environ is None else environ

        home_value = env.get("HOME", "")
        if not home_value:
            raise HomeDirectoryError(
                "No $HOME variable set, unable to determine home directory.",
                hint="Set HOME to the directory that should hold .cache/.",
            )
        home = Path(home_value)

        return cls(
            home=home,
            cache_path=home / ".cache" / CACHE_FILENAME,
            catalog_url=env.get(CATALOG_URL_ENV) or DEFAULT_CATALOG_URL,
        )
