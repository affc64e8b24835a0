"""Tests for the list upload server."""

from __future__ import annotations

import io
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest
from _pytest.monkeypatch import MonkeyPatch
from fastapi.testclient import TestClient
from shoplist.runtime import server
from shoplist.runtime.parsing_service import ParsingServiceClient
from shoplist.runtime.settings import Settings


def _completion(text: str) -> httpx.Response:
    return httpx.Response(200, json={"content": [{"type": "text", "text": text}]})


def _use_service(monkeypatch: MonkeyPatch, handler: Callable[[httpx.Request], httpx.Response]) -> None:
    monkeypatch.setattr(
        server,
        "make_client",
        lambda settings: ParsingServiceClient(http_client=httpx.Client(transport=httpx.MockTransport(handler))),
    )


@pytest.fixture
def client() -> TestClient:
    return TestClient(server.app)


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}


def test_parse_json_manual(client: TestClient, monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setattr(server, "get_settings", lambda: Settings())

    response = client.post("/parse", json={"text": "Bread, milk, chicken"})

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "manual"
    assert data["warning"] is None
    assert [(i["name"], i["category"], i["sort_order"]) for i in data["items"]] == [
        ("Bread", "bakery", 0),
        ("chicken", "meat", 1000),
        ("milk", "dairy", 2000),
    ]


def test_parse_picks_up_keyword_file_edits(
    client: TestClient, monkeypatch: MonkeyPatch, isolated_config: Path
) -> None:
    monkeypatch.setattr(server, "get_settings", lambda: Settings())

    before = client.post("/parse", json={"text": "papaya"}).json()
    (isolated_config / "category_keywords.toml").write_text('[keywords]\nfruits = ["papaya"]\n')
    after = client.post("/parse", json={"text": "papaya"}).json()

    assert before["items"][0]["category"] == "other"
    assert after["items"][0]["category"] == "fruits"


def test_parse_form_field(client: TestClient, monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setattr(server, "get_settings", lambda: Settings())

    response = client.post("/parse", data={"text": "soap; bananas"})

    assert response.status_code == 200
    assert [i["name"] for i in response.json()["items"]] == ["bananas", "soap"]


def test_parse_without_text_is_rejected(client: TestClient, monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setattr(server, "get_settings", lambda: Settings())

    response = client.post("/parse", json={"list": "milk"})

    assert response.status_code == 400


def test_parse_falls_back_when_service_fails(client: TestClient, monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setattr(server, "get_settings", lambda: Settings(api_key="k", use_ai=True))
    _use_service(monkeypatch, lambda request: httpx.Response(429))

    data = client.post("/parse", json={"text": "milk, bread"}).json()

    assert data["status"] == "fallback"
    assert data["warning"]
    assert [i["name"] for i in data["items"]] == ["bread", "milk"]


def test_parse_request_can_disable_ai(client: TestClient, monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setattr(server, "get_settings", lambda: Settings(api_key="k", use_ai=True))
    _use_service(monkeypatch, lambda request: pytest.fail("service must not be called"))

    data = client.post("/parse", json={"text": "milk", "use_ai": False}).json()

    assert data["status"] == "manual"


def test_parse_delegated(client: TestClient, monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setattr(server, "get_settings", lambda: Settings(api_key="k", use_ai=True))
    _use_service(monkeypatch, lambda request: _completion('["2x bread", "1l milk"]'))

    data = client.post("/parse", json={"text": "twice bread and a liter of milk"}).json()

    assert data["status"] == "delegated"
    assert [i["name"] for i in data["items"]] == ["2x bread", "1l milk"]


def _jpeg_bytes() -> bytes:
    from PIL import Image

    buffer = io.BytesIO()
    Image.new("RGB", (8, 8)).save(buffer, format="JPEG")
    return buffer.getvalue()


def test_fridge_without_file_is_rejected(client: TestClient, monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setattr(server, "get_settings", lambda: Settings(api_key="k"))

    response = client.post("/fridge", data={"note": "no photo"})

    assert response.status_code == 400


def test_fridge_without_key_is_rejected(client: TestClient, monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setattr(server, "get_settings", lambda: Settings())

    response = client.post("/fridge", files={"photo": ("fridge.jpg", _jpeg_bytes(), "image/jpeg")})

    assert response.status_code == 400


def test_fridge_suggestions_are_categorized(client: TestClient, monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setattr(server, "get_settings", lambda: Settings(api_key="k"))
    _use_service(monkeypatch, lambda request: _completion('{"itemsFound": ["milk"], "suggestions": ["bread", "eggs"]}'))

    response = client.post("/fridge", files={"photo": ("fridge.jpg", _jpeg_bytes(), "image/jpeg")})

    assert response.status_code == 200
    assert response.json() == {
        "status": "success",
        "itemsFound": ["milk"],
        "suggestions": [
            {"name": "bread", "category": "bakery"},
            {"name": "eggs", "category": "other"},
        ],
    }


def test_fridge_service_failure(client: TestClient, monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setattr(server, "get_settings", lambda: Settings(api_key="k"))
    _use_service(monkeypatch, lambda request: httpx.Response(500))

    response = client.post("/fridge", files={"photo": ("fridge.jpg", _jpeg_bytes(), "image/jpeg")})

    assert response.status_code == 502
    assert response.json()["status"] == "error"
