"""Shared pytest fixtures and configuration for the lssaid test suite.

Guidelines
----------
* No internet access in any test — ``requests`` is mocked at the infra
  boundary.
* Core tests must be pure — no side effects.
* Filesystem tests use ``tmp_path``; ``HOME`` is always redirected.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

from lssaid.core.models import Catalog, CatalogEntry

SAMPLE_APPS: tuple[tuple[int, str], ...] = ((10, "Alpha"), (20, "Beta"))


@pytest.fixture()
def sample_json() -> str:
    """The two-app catalog in the GetAppList layout."""
    return json.dumps(
        {"applist": {"apps": [{"appid": appid, "name": name} for appid, name in SAMPLE_APPS]}}
    )


@pytest.fixture()
def sample_catalog() -> Catalog:
    return Catalog(
        entries=tuple(CatalogEntry(appid=appid, name=name) for appid, name in SAMPLE_APPS)
    )


@pytest.fixture()
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``HOME`` at an empty temporary directory."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.delenv("LSSAID_CATALOG_URL", raising=False)
    return home_dir


@pytest.fixture(autouse=True)
def _reset_loguru() -> Iterator[None]:
    """Drop sinks added by ``configure_logging`` so they never outlive a test."""
    yield
    logger.remove()
