"""Strict decoding of the Steam ``GetAppList`` document.

Expected shape::

    {"applist": {"apps": [{"appid": 10, "name": "Counter-Strike"}, ...]}}

Any structural deviation is fatal: a single malformed entry rejects
the whole document rather than being skipped.
"""

from __future__ import annotations

import json
from typing import Any

from lssaid.core.models import Catalog, CatalogEntry
from lssaid.exceptions import REFRESH_HINT, CatalogSchemaError

_MAX_APPID: int = 2**64 - 1


def parse_catalog(raw: str) -> Catalog:
    """Decode *raw* catalog text into a :class:`Catalog`.

    Raises
    ------
    CatalogSchemaError
        If *raw* is not JSON or does not match the expected schema.
    """
    try:
        document: Any = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CatalogSchemaError(
            f"Catalog is not valid JSON: {exc}",
            hint=REFRESH_HINT,
        ) from exc

    applist = _require(document, "applist", dict, "applist")
    apps = _require(applist, "apps", list, "applist.apps")

    entries = [
        _parse_entry(app, f"applist.apps[{index}]")
        for index, app in enumerate(apps)
    ]
    return Catalog(entries=tuple(entries))


def _parse_entry(app: Any, path: str) -> CatalogEntry:
    if not isinstance(app, dict):
        raise _schema_error(f"{path} is not an object")

    appid = _require(app, "appid", int, f"{path}.appid")
    # bool is an int subclass; JSON true/false is not an app id.
    if isinstance(appid, bool) or not 0 <= appid <= _MAX_APPID:
        raise _schema_error(f"{path}.appid is not an unsigned 64-bit integer")

    name = _require(app, "name", str, f"{path}.name")
    return CatalogEntry(appid=appid, name=name)


def _require(container: Any, key: str, kind: type, path: str) -> Any:
    """Fetch ``container[key]`` and check it is an instance of *kind*."""
    if not isinstance(container, dict):
        parent = path.rsplit(".", 1)[0] if "." in path else "document"
        raise _schema_error(f"{parent} is not an object")
    if key not in container:
        raise _schema_error(f"missing key {path}")
    value = container[key]
    if not isinstance(value, kind):
        raise _schema_error(
            f"{path} has type {type(value).__name__}, expected {kind.__name__}"
        )
    return value


def _schema_error(detail: str) -> CatalogSchemaError:
    return CatalogSchemaError(f"Unexpected catalog layout: {detail}.", hint=REFRESH_HINT)
