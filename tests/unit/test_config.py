import pytest

from tunesearch.config import Settings


def _settings(**overrides) -> Settings:
    values = {"DATABASE_URL": "sqlite+pysqlite:///:memory:"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def test_defaults_match_catalog_deployment():
    settings = _settings()
    assert settings.catalog_base_url == "https://itunes.apple.com/search"
    assert settings.catalog_limit == 30
    assert settings.catalog_timeout_seconds > 0
    assert settings.api_port == 3008
    assert settings.strict_upstream_errors is False


def test_log_level_is_normalized():
    assert _settings(LOG_LEVEL="debug").log_level == "DEBUG"


@pytest.mark.parametrize(
    "overrides",
    [
        {"DATABASE_URL": "  "},
        {"CATALOG_LIMIT": 0},
        {"CATALOG_LIMIT": 201},
        {"CATALOG_TIMEOUT_SECONDS": 0},
        {"CATALOG_COUNTRY": ""},
        {"LOG_LEVEL": "LOUD"},
    ],
)
def test_invalid_settings_are_rejected(overrides):
    with pytest.raises(ValueError):
        _settings(**overrides)


def test_cors_origins_are_split():
    settings = _settings(CORS_ORIGINS="http://localhost:5173, https://example.org,")
    assert settings.cors_origin_list == ["http://localhost:5173", "https://example.org"]
