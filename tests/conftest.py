import json
from typing import Any, Callable

import httpx
import pytest

from fixflow.config import Settings, get_settings
from fixflow.storage import LanguageStore


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        base_url="http://fixflow.test",
        state_dir=tmp_path,
        toast_remove_delay=0.01,
        translation_cache_size=3,
    )


@pytest.fixture
def store(tmp_path) -> LanguageStore:
    return LanguageStore(tmp_path / "config.json")


@pytest.fixture
def cli_env(tmp_path, monkeypatch):
    """Point the CLI's settings at a throwaway state dir and an unreachable host."""
    monkeypatch.setenv("FIXFLOW_STATE_DIR", str(tmp_path))
    monkeypatch.setenv("FIXFLOW_BASE_URL", "http://127.0.0.1:9")
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()


class TranslateBackend:
    """Fake /api/translate: records requests, answers from a dict."""

    def __init__(self, translations: dict[tuple[str, str], str], status: int = 200):
        self.translations = translations
        self.status = status
        self.requests: list[dict[str, Any]] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append(body)
        if self.status >= 400:
            return httpx.Response(self.status, json={"error": "Translation failed"})
        key = (body["text"], body["targetLanguage"])
        return httpx.Response(200, json={"translatedText": self.translations.get(key, body["text"])})

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def backend() -> Callable[..., TranslateBackend]:
    return TranslateBackend
