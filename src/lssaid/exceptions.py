"""Custom exception hierarchy for lssaid.

All exceptions that cross layer boundaries must inherit from
:class:`LssaidError`.  Raw third-party and OS exceptions (``requests``,
``OSError``, ``json``) must NEVER propagate beyond the layer that
touched them — they are caught and re-raised as a typed subclass
defined here.

Every subclass names the kind of step that failed via :attr:`step`, so
the CLI error boundary can report *where* a run broke down.

Hierarchy
---------
LssaidError
├── HomeDirectoryError        (environment)
├── FilesystemError           (filesystem)
│   ├── CacheError
│   └── DirectoryListingError
├── CatalogFetchError         (network)
└── CatalogSchemaError        (schema)
"""

from __future__ import annotations


class LssaidError(Exception):
    """Base exception for all lssaid errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    step: str = "general"
    """Kind of pipeline step that failed, shown in the error message."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Environment -----------------------------------------------------------

class HomeDirectoryError(LssaidError):
    """Raised when the user's home directory cannot be determined."""

    step = "environment"


# --- Filesystem ------------------------------------------------------------

class FilesystemError(LssaidError):
    """Raised when a local file or directory cannot be accessed."""

    step = "filesystem"


class CacheError(FilesystemError):
    """Raised when the catalog cache file cannot be read or written."""


class DirectoryListingError(FilesystemError):
    """Raised when the directory to scan cannot be listed."""


# --- Network ---------------------------------------------------------------

class CatalogFetchError(LssaidError):
    """Raised when the remote app catalog cannot be downloaded."""

    step = "network"


# --- Catalog schema --------------------------------------------------------

class CatalogSchemaError(LssaidError):
    """Raised when catalog text is not valid JSON or breaks the schema."""

    step = "schema"


REFRESH_HINT: str = "Run again with --refresh to download a fresh catalog."
"""Hint attached to errors that a re-download is likely to fix."""
