import pytest

from fplpoints.config import DEFAULT_BASE_URL, Settings


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    for name in ("FPLPOINTS_BASE_URL", "FPLPOINTS_TIMEOUT", "FPLPOINTS_WORKERS"):
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_environment():
    settings = Settings.from_env()
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout == 20.0
    assert settings.workers == 1


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("FPLPOINTS_BASE_URL", "http://localhost:8000/api")
    monkeypatch.setenv("FPLPOINTS_TIMEOUT", "5.5")
    monkeypatch.setenv("FPLPOINTS_WORKERS", "4")

    settings = Settings.from_env()

    assert settings.base_url == "http://localhost:8000/api/"
    assert settings.timeout == 5.5
    assert settings.workers == 4


def test_invalid_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("FPLPOINTS_TIMEOUT", "soon")
    monkeypatch.setenv("FPLPOINTS_WORKERS", "many")

    settings = Settings.from_env()

    assert settings.timeout == 20.0
    assert settings.workers == 1


def test_values_are_clamped(monkeypatch):
    monkeypatch.setenv("FPLPOINTS_TIMEOUT", "0.1")
    monkeypatch.setenv("FPLPOINTS_WORKERS", "0")

    settings = Settings.from_env()

    assert settings.timeout == 1.0
    assert settings.workers == 1


def test_invalid_override_is_logged(monkeypatch, caplog):
    monkeypatch.setenv("FPLPOINTS_WORKERS", "2.5")

    with caplog.at_level("WARNING", logger="fplpoints.config.settings"):
        assert Settings.from_env().workers == 1

    assert "FPLPOINTS_WORKERS" in caplog.text


def test_large_values_are_not_capped(monkeypatch):
    monkeypatch.setenv("FPLPOINTS_TIMEOUT", "600")
    monkeypatch.setenv("FPLPOINTS_WORKERS", "64")

    settings = Settings.from_env()

    assert settings.timeout == 600.0
    assert settings.workers == 64
