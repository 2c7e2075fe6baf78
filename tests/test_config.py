import pytest
from pydantic import ValidationError

from core.config import Settings


def test_defaults(monkeypatch):
    for name in ["MONGO_URI", "MONGO_URL", "PORT", "MAX_PAGE_SIZE", "CORS_ORIGINS", "LOG_LEVEL"]:
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.mongo_uri == "mongodb://localhost:27017"
    assert settings.port == 8027
    assert settings.max_page_size == 100
    assert settings.cors_origin_list == ["*"]


def test_reads_environment(monkeypatch):
    monkeypatch.delenv("MONGO_URI", raising=False)
    monkeypatch.setenv("MONGO_URL", "mongodb://db:27017")
    monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = Settings(_env_file=None)
    assert settings.mongo_uri == "mongodb://db:27017"
    assert settings.request_timeout_ms == 2500
    assert settings.cors_origin_list == ["http://a.test", "http://b.test"]
    assert settings.log_level == "DEBUG"


def test_mongo_uri_wins_over_legacy_name(monkeypatch):
    monkeypatch.setenv("MONGO_URI", "mongodb://primary:27017")
    monkeypatch.setenv("MONGO_URL", "mongodb://legacy:27017")
    assert Settings(_env_file=None).mongo_uri == "mongodb://primary:27017"


@pytest.mark.parametrize("name,value", [("PORT", "eighty"), ("MAX_PAGE_SIZE", "0"), ("REQUEST_TIMEOUT_SECONDS", "-1")])
def test_bad_values_name_the_field(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError) as exc_info:
        Settings(_env_file=None)
    assert name.lower() in str(exc_info.value)
