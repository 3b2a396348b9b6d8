import importlib
import json

import httpx
import pytest
from fastapi.testclient import TestClient

import src.main as main
from src.core.telegram import TelegramClient
from src.services.movie_finder import MovieFinderService

router_module = importlib.import_module("src.services.movie_finder.router")


@pytest.fixture
def client(monkeypatch, handler) -> TestClient:
    monkeypatch.setattr(main, "update_handler", handler)
    return TestClient(main.app)


def test_root(client) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["services"] == ["movie_finder"]


def test_health_degraded_when_telegram_unreachable(monkeypatch, client, config, fake_telegram) -> None:
    fake_telegram.fail = True
    monkeypatch.setattr(
        main, "telegram_client", TelegramClient(config, transport=httpx.MockTransport(fake_telegram))
    )

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "degraded", "telegram_connected": False}


def test_webhook_replies_to_chat(client, fake_telegram) -> None:
    payload = {"update_id": 5, "message": {"text": "Drama, Heist", "chat": {"id": 77}}}

    response = client.post("/webhook", content=json.dumps(payload))

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert fake_telegram.sent == [{"chat_id": "77", "text": "Movie One\nMovie Two\n"}]


@pytest.mark.parametrize("body", [b"garbage", b'{"update_id": 0}', b""])
def test_webhook_always_answers_ok(client, fake_telegram, body) -> None:
    response = client.post("/webhook", content=body)

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert fake_telegram.requests == []


def test_webhook_answers_ok_when_dispatch_fails(client, fake_telegram) -> None:
    fake_telegram.fail = True
    payload = {"update_id": 5, "message": {"text": "/start", "chat": {"id": 77}}}

    response = client.post("/webhook", content=json.dumps(payload))

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.fixture
def search_client(monkeypatch, config, fake_telegram, fake_site) -> TestClient:
    monkeypatch.setattr(
        router_module,
        "movie_finder",
        MovieFinderService(config, transport=httpx.MockTransport(fake_site)),
    )
    monkeypatch.setattr(
        router_module,
        "telegram_client",
        TelegramClient(config, transport=httpx.MockTransport(fake_telegram)),
    )
    return TestClient(main.app)


def test_manual_search(search_client, fake_telegram) -> None:
    response = search_client.post("/movie-finder/search", json={"keywords": "Drama, Heist"})

    assert response.status_code == 200
    data = response.json()
    assert data["keywords"] == ["drama", "heist"]
    assert data["titles"] == ["Movie One", "Movie Two"]
    assert data["search_url"].endswith("drama%2Cheist")
    assert data["error"] is None
    assert data["sent_to"] is None
    assert fake_telegram.requests == []


def test_manual_search_sends_to_chat(search_client, fake_telegram) -> None:
    response = search_client.post(
        "/movie-finder/search", json={"keywords": "heist", "chat_id": 12}
    )

    assert response.json()["sent_to"] == 12
    assert fake_telegram.sent == [{"chat_id": "12", "text": "Movie One\nMovie Two\n"}]


def test_manual_search_reports_scrape_error(search_client, fake_site) -> None:
    fake_site.fail = True

    response = search_client.post("/movie-finder/search", json={"keywords": "heist"})

    assert response.status_code == 200
    assert response.json()["titles"] == []
    assert response.json()["error"]


def test_manual_search_rejects_blank_keywords(search_client) -> None:
    response = search_client.post("/movie-finder/search", json={"keywords": " , "})
    assert response.status_code == 400
