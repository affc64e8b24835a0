"""Shared pytest fixtures for shoplist tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import httpx
import pytest
from _pytest.monkeypatch import MonkeyPatch
from shoplist.runtime import ParsingServiceClient, reset_paths
from shoplist.runtime.category_rules import load_category_keyword_table


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: MonkeyPatch) -> Iterator[Path]:
    """Point the config directory at tmp_path and clear env-provided keys."""
    home = tmp_path / "shoplist-home"
    home.mkdir()
    monkeypatch.setenv("SHOPLIST_HOME", str(home))
    for name in ("SHOPLIST_API_KEY", "ANTHROPIC_API_KEY", "SHOPLIST_USE_AI"):
        monkeypatch.delenv(name, raising=False)
    reset_paths()
    load_category_keyword_table.cache_clear()
    yield home
    reset_paths()
    load_category_keyword_table.cache_clear()


@pytest.fixture
def make_service_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], ParsingServiceClient]:
    """Build a ParsingServiceClient whose HTTP traffic goes to a handler function."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> ParsingServiceClient:
        return ParsingServiceClient(http_client=httpx.Client(transport=httpx.MockTransport(handler)))

    return _make
