"""Shared pytest fixtures for the movie bot tests."""

from urllib.parse import parse_qs

import httpx
import pytest

from src.core.config import Settings
from src.core.telegram import TelegramClient
from src.services.movie_finder import MovieFinderService, UpdateHandler

SEARCH_URL = "https://imdb.test/search/keyword/?keywords="

LISTING_HTML = """
<html><body>
  <div class="lister-item">
    <h3 class="lister-item-header"><a href="/title/tt0000001/">Movie One</a></h3>
  </div>
  <div class="lister-item">
    <h3 class="lister-item-header">
      <a href="/title/tt0000002/">  Movie Two </a>
    </h3>
  </div>
  <h3 class="sidebar-header"><a href="/news/">Not A Movie</a></h3>
</body></html>
"""


class FakeTelegram:
    """Records sendMessage form posts made through an httpx.MockTransport."""

    def __init__(self, status_code: int = 200, fail: bool = False) -> None:
        self.status_code = status_code
        self.fail = fail
        self.requests: list[httpx.Request] = []
        self.sent: list[dict[str, str]] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail:
            raise httpx.ConnectError("connection refused", request=request)
        form = parse_qs(request.content.decode(), keep_blank_values=True)
        self.sent.append({"chat_id": form["chat_id"][0], "text": form["text"][0]})
        if self.status_code == 200:
            return httpx.Response(200, json={"ok": True, "result": {"message_id": 1}})
        return httpx.Response(
            self.status_code, json={"ok": False, "description": "Bad Request"}
        )


class FakeSite:
    """Serves a fixed listing page, or fails, for every GET."""

    def __init__(self, html: str = LISTING_HTML, status_code: int = 200, fail: bool = False) -> None:
        self.html = html
        self.status_code = status_code
        self.fail = fail
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail:
            raise httpx.ConnectError("name resolution failed", request=request)
        return httpx.Response(self.status_code, text=self.html)


@pytest.fixture
def config() -> Settings:
    return Settings(
        _env_file=None,
        telegram_bot_token="TEST-TOKEN",
        telegram_api_base_url="https://telegram.test/bot",
        imdb_search_url=SEARCH_URL,
    )


@pytest.fixture
def fake_telegram() -> FakeTelegram:
    return FakeTelegram()


@pytest.fixture
def fake_site() -> FakeSite:
    return FakeSite()


@pytest.fixture
def handler(config, fake_telegram, fake_site) -> UpdateHandler:
    return UpdateHandler(
        config=config,
        telegram=TelegramClient(config, transport=httpx.MockTransport(fake_telegram)),
        movie_finder=MovieFinderService(config, transport=httpx.MockTransport(fake_site)),
    )
