"""Infrastructure: file-backed catalog cache with a freshness window.

Implements :class:`~lssaid.core.protocols.CatalogSource`.  The cache
holds the verbatim text of the last download; its modification time
decides whether the text may be reused.

Rules
-----
* At most one network call per :meth:`CatalogCache.load`.
* No locking and no atomic replace. A concurrent or interrupted write
  leaves whatever bytes reached the disk.
* No ``print()``. Callers report refreshes to the user.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import timedelta
from pathlib import Path

from loguru import logger

from lssaid.config import FRESHNESS_WINDOW
from lssaid.core.models import CatalogSnapshot
from lssaid.core.protocols import CatalogFetcher
from lssaid.exceptions import REFRESH_HINT, CacheError


class CatalogCache:
    """Reuses the cached catalog while fresh, re-downloads it otherwise.

    Parameters
    ----------
    fetcher:
        Downloads the catalog when the cache cannot be used.
    path:
        Location of the cache file.
    freshness_window:
        Maximum age of the cache file before it is considered stale.
    clock:
        Returns the current time as a POSIX timestamp.
    """

    def __init__(
        self,
        fetcher: CatalogFetcher,
        path: Path,
        *,
        freshness_window: timedelta = FRESHNESS_WINDOW,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._fetcher: CatalogFetcher = fetcher
        self._path: Path = path
        self._window: timedelta = freshness_window
        self._clock: Callable[[], float] = clock

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def load(self, force_refresh: bool = False) -> CatalogSnapshot:
        """Return cached catalog text, refreshing it when required.

        A refresh happens when *force_refresh* is set, when no cache
        file exists, or when the file is older than the freshness
        window.

        Raises
        ------
        CacheError
            When the cache file cannot be inspected, read or written.
        CatalogFetchError
            When a refresh was needed and the download failed.
        """
        if self.needs_refresh(force_refresh):
            return self._refresh()

        return CatalogSnapshot(text=self._read(), refreshed=False, location=self._path)

    def needs_refresh(self, force_refresh: bool = False) -> bool:
        """Whether :meth:`load` would download the catalog.

        True when *force_refresh* is set, when no cache file exists, or
        when the file is older than the freshness window.
        """
        if force_refresh:
            logger.debug("Refresh forced, ignoring {}", self._path)
            return True
        if not self._path.exists():
            logger.debug("No cache file at {}", self._path)
            return True
        return self.is_stale()

    def is_stale(self) -> bool:
        """Whether the existing cache file is older than the window.

        A modification time in the future yields a negative age and
        therefore counts as fresh.
        """
        try:
            modified = self._path.stat().st_mtime
        except OSError as exc:
            raise CacheError(
                f"Failure reading metadata of cache file {self._path}: {exc}",
            ) from exc

        age = timedelta(seconds=self._clock() - modified)
        logger.debug("Cache age {} (window {})", age, self._window)
        return age > self._window

    # ------------------------------------------------------------------
    # File access
    # ------------------------------------------------------------------

    def _refresh(self) -> CatalogSnapshot:
        text = self._fetcher.fetch()
        self._write(text)
        return CatalogSnapshot(text=text, refreshed=True, location=self._path)

    def _read(self) -> str:
        try:
            return self._path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise CacheError(
                f"Cache file {self._path} is not valid UTF-8.",
                hint=REFRESH_HINT,
            ) from exc
        except OSError as exc:
            raise CacheError(
                f"Unable to read steam app list from the cache file {self._path}: {exc}",
            ) from exc

    def _write(self, text: str) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise CacheError(
                f"Failed to write cache file {self._path}: {exc}",
                hint="Check that the cache directory is writable.",
            ) from exc
        logger.debug("Wrote {} characters to {}", len(text), self._path)
