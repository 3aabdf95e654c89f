"""
Tests for settings loading.
"""
from model_fetcher.core.config import DEFAULT_MODEL_URL_TEMPLATE, Settings


def test_defaults(monkeypatch):
    for name in ("MODEL_URL_TEMPLATE", "MODEL_REQUEST_TIMEOUT", "LEAGUE_CODES"):
        monkeypatch.delenv(name, raising=False)

    s = Settings(_env_file=None)

    assert s.model_url_template == DEFAULT_MODEL_URL_TEMPLATE
    assert "{league_code}" in s.model_url_template
    assert s.model_request_timeout is None
    assert s.league_code_list() == ["E0", "E1", "SP1", "D1", "I1", "F1"]


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MODEL_URL_TEMPLATE", "https://mirror.test/m_{league_code}.b64")
    monkeypatch.setenv("MODEL_REQUEST_TIMEOUT", "30")
    monkeypatch.setenv("LEAGUE_CODES", " E0, SP1 ,,D1 ")

    s = Settings(_env_file=None)

    assert s.model_url_template == "https://mirror.test/m_{league_code}.b64"
    assert s.model_request_timeout == 30.0
    assert s.league_code_list() == ["E0", "SP1", "D1"]
