"""Unit tests that do not require a running API or external services."""
from app.config import settings


def test_settings_load():
    """Settings load from environment (e.g. CI env vars)."""
    assert settings.API_V1_PREFIX == "/api/v1"
    assert settings.APP_NAME == "ISP Back-Office"
    assert settings.PORT == 5000


def test_environment_flag():
    """Environment flags reflect ENVIRONMENT value."""
    assert settings.ENVIRONMENT.lower() in ("development", "test", "production")
    assert settings.is_development == (settings.ENVIRONMENT.lower() == "development")
    assert settings.is_production == (settings.ENVIRONMENT.lower() == "production")


def test_cors_lists_are_parsed():
    assert isinstance(settings.ALLOWED_ORIGINS, list)
    assert "Authorization" in settings.ALLOWED_HEADERS
    assert "PUT" in settings.ALLOWED_METHODS


def test_token_lifetime_is_seven_days():
    assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 60 * 24 * 7
