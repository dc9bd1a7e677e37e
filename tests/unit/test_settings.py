from __future__ import annotations

import pytest

from gradium_client.errors import AuthenticationError
from gradium_client.runtime import load_settings, ws_url_from_base


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "GRADIUM_API_KEY",
        "GRADIUM_REGION",
        "GRADIUM_BASE_URL",
        "GRADIUM_TIMEOUT_S",
        "GRADIUM_WS_OPEN_TIMEOUT_S",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults_to_eu_region() -> None:
    settings = load_settings(api_key="k")
    assert settings.region == "eu"
    assert settings.base_url == "https://eu.api.gradium.ai/api"
    assert settings.ws_url == "wss://eu.api.gradium.ai/api/speech"
    assert settings.timeout_s == 30.0
    assert settings.ws_open_timeout_s == 10.0


def test_us_region() -> None:
    settings = load_settings(api_key="k", region="US")
    assert settings.ws_url == "wss://us.api.gradium.ai/api/speech"


def test_unknown_region_rejected() -> None:
    with pytest.raises(ValueError, match="unknown region"):
        load_settings(api_key="k", region="mars")


def test_missing_api_key() -> None:
    with pytest.raises(AuthenticationError, match="GRADIUM_API_KEY"):
        load_settings()


def test_env_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GRADIUM_API_KEY", "env-key")
    monkeypatch.setenv("GRADIUM_REGION", "us")
    monkeypatch.setenv("GRADIUM_TIMEOUT_S", "5")
    monkeypatch.setenv("GRADIUM_WS_OPEN_TIMEOUT_S", "not-a-number")

    settings = load_settings()
    assert settings.api_key == "env-key"
    assert settings.region == "us"
    assert settings.timeout_s == 5.0
    assert settings.ws_open_timeout_s == 10.0


def test_explicit_arguments_beat_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GRADIUM_API_KEY", "env-key")
    monkeypatch.setenv("GRADIUM_BASE_URL", "https://env.example/api")

    settings = load_settings(api_key="arg-key", base_url="http://localhost:8000/api/", timeout_s=2)
    assert settings.api_key == "arg-key"
    assert settings.base_url == "http://localhost:8000/api"
    assert settings.ws_url == "ws://localhost:8000/api/speech"
    assert settings.timeout_s == 2.0


def test_ws_url_from_base() -> None:
    assert ws_url_from_base("https://eu.api.gradium.ai/api") == "wss://eu.api.gradium.ai/api/speech"
    assert ws_url_from_base("http://127.0.0.1:9000/api/") == "ws://127.0.0.1:9000/api/speech"
