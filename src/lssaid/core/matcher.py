"""Pure matching of query keys and search terms against a catalog.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.

Two algorithms, one per input flavour:

1. **Id resolution** — a key matches an entry when the entry's app id,
   rendered in decimal, equals the key exactly.
2. **Name search** — an entry matches a term when its name contains the
   term as a case-sensitive substring.

Both are plain linear scans; no index is built.
"""

from __future__ import annotations

from collections.abc import Sequence

from lssaid.core.models import Catalog, Resolution, SearchHit


# ---------------------------------------------------------------------------
# 1. Id resolution
# ---------------------------------------------------------------------------

def resolve_ids(keys: Sequence[str], catalog: Catalog) -> list[Resolution]:
    """Resolve each key in *keys* to an app name.

    Comparison is string equality against ``str(appid)``, so ``"007"``
    or ``" 7"`` never match app ``7``.  When the catalog lists an id more
    than once, the **last** entry wins.  Output order follows *keys*.
    """
    return [Resolution(key=key, name=_last_name_for(key, catalog)) for key in keys]


def _last_name_for(key: str, catalog: Catalog) -> str | None:
    name: str | None = None
    for entry in catalog:
        if str(entry.appid) == key:
            name = entry.name
    return name


# ---------------------------------------------------------------------------
# 2. Name search
# ---------------------------------------------------------------------------

def search_names(terms: Sequence[str], catalog: Catalog) -> list[SearchHit]:
    """Return one :class:`SearchHit` per (entry, term) substring match.

    Results are grouped by catalog order, then by term order.  An entry
    matched by several terms is reported once per term.
    """
    hits: list[SearchHit] = []
    for entry in catalog:
        for term in terms:
            if term in entry.name:
                hits.append(SearchHit(appid=entry.appid, name=entry.name, term=term))
    return hits
