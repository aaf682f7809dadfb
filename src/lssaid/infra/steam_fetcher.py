"""``requests``-backed implementation of :class:`~lssaid.core.protocols.CatalogFetcher`.

This module is the **only** place in the codebase that imports
``requests``.  Every transport exception is caught here and re-raised
as :class:`~lssaid.exceptions.CatalogFetchError` — nothing raw escapes
the infrastructure boundary.
"""

from __future__ import annotations

import requests
from loguru import logger

from lssaid.config import DEFAULT_CATALOG_URL, REQUEST_TIMEOUT
from lssaid.exceptions import CatalogFetchError
from lssaid.version import __version__


class SteamCatalogFetcher:
    """Downloads the full app catalog with one GET request.

    Usage::

        fetcher = SteamCatalogFetcher(settings.catalog_url)
        raw = fetcher.fetch()

    No retries and no pagination. The endpoint returns the whole
    catalog in a single response.
    """

    def __init__(
        self,
        url: str = DEFAULT_CATALOG_URL,
        *,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        self._url: str = url
        self._timeout: float = timeout

    @property
    def url(self) -> str:
        return self._url

    def fetch(self) -> str:
        """Download the catalog and return the response body as text.

        Raises
        ------
        CatalogFetchError
            On connection failure, timeout or a non-success status.
        """
        logger.debug("Fetching app catalog from {}", self._url)
        try:
            response = requests.get(
                self._url,
                headers={"User-Agent": f"lssaid/{__version__}"},
                timeout=self._timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise CatalogFetchError(
                f"Failed to fetch the steam app list from {self._url}: {exc}",
                hint="Check your network connection and try again.",
            ) from exc

        if response.encoding is None:
            response.encoding = "utf-8"
        body = response.text
        logger.debug("Fetched {} characters of catalog text", len(body))
        return body
