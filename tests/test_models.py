"""Tests for domain models (core/models.py).

All models are frozen dataclasses — these tests verify immutability,
equality semantics, and collection behaviour.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from lssaid.core.models import (
    Catalog,
    CatalogEntry,
    CatalogSnapshot,
    Resolution,
    SearchHit,
)


class TestCatalogEntry:
    def test_fields_accessible(self) -> None:
        entry = CatalogEntry(appid=440, name="Team Fortress 2")
        assert entry.appid == 440
        assert entry.name == "Team Fortress 2"

    def test_frozen(self) -> None:
        entry = CatalogEntry(appid=440, name="Team Fortress 2")
        with pytest.raises(AttributeError):
            entry.name = "Changed"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert CatalogEntry(appid=1, name="a") == CatalogEntry(appid=1, name="a")
        assert CatalogEntry(appid=1, name="a") != CatalogEntry(appid=1, name="b")


class TestCatalog:
    def test_len_and_iteration_keep_order(self) -> None:
        entries = (CatalogEntry(appid=2, name="b"), CatalogEntry(appid=1, name="a"))
        catalog = Catalog(entries=entries)
        assert len(catalog) == 2
        assert list(catalog) == list(entries)

    def test_duplicates_are_kept(self) -> None:
        catalog = Catalog(
            entries=(CatalogEntry(appid=1, name="a"), CatalogEntry(appid=1, name="a"))
        )
        assert len(catalog) == 2

    def test_empty_is_falsy(self) -> None:
        assert not Catalog(entries=())

    def test_frozen(self) -> None:
        catalog = Catalog(entries=())
        with pytest.raises(AttributeError):
            catalog.entries = ()  # type: ignore[misc]


class TestResolution:
    def test_resolved_name(self) -> None:
        assert Resolution(key="10", name="Alpha").name == "Alpha"

    def test_not_found_keeps_none(self) -> None:
        res = Resolution(key="99", name=None)
        assert res.name is None


class TestValueObjects:
    def test_snapshot_fields(self) -> None:
        snap = CatalogSnapshot(text="{}", refreshed=True, location=Path("/tmp/x.json"))
        assert snap.refreshed is True
        assert snap.location == Path("/tmp/x.json")

    def test_search_hit_frozen(self) -> None:
        hit = SearchHit(appid=20, name="Beta", term="Be")
        with pytest.raises(AttributeError):
            hit.term = "x"  # type: ignore[misc]
