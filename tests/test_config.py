"""
Tests for environment-driven settings
"""

from bookstore.config import Settings


def test_defaults(monkeypatch):
    for name in ("BOOKSTORE_ID_STRATEGY", "BOOKSTORE_SEED_SAMPLE_DATA", "BOOKSTORE_API_PORT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.id_strategy == "sequential"
    assert settings.seed_sample_data is True
    assert settings.api_port == 4000
    assert settings.graphiql is True


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("BOOKSTORE_ID_STRATEGY", "length")
    monkeypatch.setenv("BOOKSTORE_SEED_SAMPLE_DATA", "false")
    monkeypatch.setenv("BOOKSTORE_API_PORT", "4100")

    settings = Settings(_env_file=None)

    assert settings.id_strategy == "length"
    assert settings.seed_sample_data is False
    assert settings.api_port == 4100


def test_case_insensitive(monkeypatch):
    monkeypatch.setenv("bookstore_log_level", "DEBUG")

    assert Settings(_env_file=None).log_level == "DEBUG"


def test_list_setting_from_json(monkeypatch):
    monkeypatch.setenv("BOOKSTORE_CORS_ORIGINS", '["http://a.test", "http://b.test"]')

    assert Settings(_env_file=None).cors_origins == ["http://a.test", "http://b.test"]
