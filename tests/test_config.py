"""Settings and the durable language store."""

import pytest

from fixflow.config import Settings, load_settings
from fixflow.errors import ConfigError
from fixflow.storage import LanguageStore


def test_defaults():
    s = Settings()
    assert s.toast_limit == 1
    assert s.default_language == "en"
    assert set(s.languages) == {"en", "sv", "fi"}
    assert s.trial_ending_soon_days == 3


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("FIXFLOW_TOAST_LIMIT", "3")
    monkeypatch.setenv("FIXFLOW_BASE_URL", "https://app.fixflow.test/")
    monkeypatch.setenv("FIXFLOW_LANGUAGES", '{"en": "English", "de": "German"}')
    s = Settings()
    assert s.toast_limit == 3
    assert s.base_url == "https://app.fixflow.test"
    assert s.languages == {"en": "English", "de": "German"}


def test_invalid_settings_raise_config_error():
    with pytest.raises(ConfigError):
        load_settings(toast_limit=0)
    with pytest.raises(ConfigError):
        load_settings(default_language="xx")


def test_store_round_trip(tmp_path):
    store = LanguageStore(tmp_path / "nested" / "config.json")
    assert store.get() is None
    store.set("sv")
    assert store.get() == "sv"


def test_store_ignores_corrupt_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    store = LanguageStore(path)
    assert store.get() is None
    store.set("fi")
    assert store.get() == "fi"


def test_store_keeps_other_keys(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"email": "ann@example.com"}')
    LanguageStore(path).set("fi")
    assert '"email"' in path.read_text()
