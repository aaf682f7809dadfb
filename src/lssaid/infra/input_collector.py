"""Infrastructure: collect the query inputs for one invocation.

Three mutually exclusive sources are supported: a directory whose
entry names are app ids, explicit ids from the command line, and name
search terms.  Only the directory source touches the filesystem.
"""

from __future__ import annotations

import enum
import os
from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from lssaid.exceptions import DirectoryListingError

DEFAULT_DIRECTORY: str = "./"


class InputMode(enum.Enum):
    """Which input source drives the current run."""

    DIRECTORY = "directory"
    IDS = "ids"
    SEARCH = "search"


def list_directory_keys(directory: str | Path) -> list[str]:
    """Return the names of the direct children of *directory*.

    Order follows the filesystem's iteration order and is not sorted.
    Name bytes that are not valid UTF-8 are rendered as ``\\xNN`` escapes,
    so such a key never matches an app id.

    Raises
    ------
    DirectoryListingError
        If *directory* does not exist, is not a directory, or cannot be
        read.
    """
    path = Path(directory)
    try:
        keys = [_printable_name(child.name) for child in path.iterdir()]
    except OSError as exc:
        raise DirectoryListingError(
            f"Unable to list directory {path}: {exc.strerror or exc}",
        ) from exc
    logger.debug("Collected {} entries from {}", len(keys), path)
    return keys


def _printable_name(name: str) -> str:
    # Undecodable bytes arrive as surrogate escapes; show them as \xNN.
    return os.fsencode(name).decode("utf-8", "backslashreplace")


def explicit_keys(tokens: Iterable[str]) -> list[str]:
    """Return command-line id tokens verbatim, without validation."""
    return list(tokens)
