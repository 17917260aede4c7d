import pytest

from seocheck.core.config import Settings


@pytest.mark.parametrize("engine_url", ["", "   "])
def test_blank_core_engine_url_selects_mock_mode(monkeypatch, engine_url):
    monkeypatch.setenv("CORE_ENGINE_URL", engine_url)

    settings = Settings()

    assert settings.core_engine_url is None
    assert settings.mock_mode is True


def test_core_engine_url_is_stripped(monkeypatch):
    monkeypatch.setenv("CORE_ENGINE_URL", "  http://engine.internal:8080/analyze ")

    settings = Settings()

    assert settings.core_engine_url == "http://engine.internal:8080/analyze"
    assert settings.mock_mode is False


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("CORE_ENGINE_URL", raising=False)
    monkeypatch.delenv("MOCK_DELAY_MS", raising=False)
    monkeypatch.delenv("PORT", raising=False)

    settings = Settings(_env_file=None)

    assert settings.core_engine_timeout_seconds == 30.0
    assert settings.mock_delay_ms == 4500
    assert settings.port == 3000
    assert settings.api_prefix == "/api"


@pytest.mark.parametrize(
    ("raw_origins", "expected"),
    [
        ("https://seo.example.com/", ["https://seo.example.com"]),
        ("seo.example.com", ["https://seo.example.com"]),
        (
            "https://seo.example.com, http://localhost:3000/",
            ["https://seo.example.com", "http://localhost:3000"],
        ),
        (
            '["https://seo.example.com/app","http://localhost:3000"]',
            ["https://seo.example.com", "http://localhost:3000"],
        ),
    ],
)
def test_settings_normalizes_cors_origins(monkeypatch, raw_origins, expected):
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", raw_origins)

    settings = Settings()

    assert settings.cors_origins == expected


@pytest.mark.parametrize(("raw", "expected"), [("debug", "DEBUG"), ("verbose", "INFO")])
def test_settings_normalizes_log_level(monkeypatch, raw, expected):
    monkeypatch.setenv("LOG_LEVEL", raw)

    assert Settings().log_level == expected
