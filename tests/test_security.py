"""
User Tasks API - Configuration and Security Validation Tests
"""

import warnings

import pytest

from usertasks.config import DEFAULT_JWT_SECRET_KEY, Settings
from usertasks.security import validate_security_config


@pytest.fixture
def app_settings():
    s = Settings()
    s.ENVIRONMENT = "development"
    s.JWT_SECRET_KEY = DEFAULT_JWT_SECRET_KEY
    s.CORS_ORIGINS = ["http://localhost:3000"]
    return s


class TestSettings:
    def test_defaults(self):
        s = Settings()
        assert s.JWT_ALGORITHM == "HS256"
        assert isinstance(s.PORT, int)
        assert isinstance(s.BCRYPT_ROUNDS, int)

    def test_is_production(self, app_settings):
        assert not app_settings.is_production
        app_settings.ENVIRONMENT = "Production"
        assert app_settings.is_production


class TestValidateSecurityConfig:
    def test_default_secret_allowed_in_development(self, app_settings):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            validate_security_config(app_settings)

    def test_default_secret_rejected_in_production(self, app_settings):
        app_settings.ENVIRONMENT = "production"
        with pytest.raises(RuntimeError):
            validate_security_config(app_settings)

    def test_empty_secret_rejected_in_production(self, app_settings):
        app_settings.ENVIRONMENT = "production"
        app_settings.JWT_SECRET_KEY = ""
        with pytest.raises(RuntimeError):
            validate_security_config(app_settings)

    def test_short_secret_warns_in_production(self, app_settings):
        app_settings.ENVIRONMENT = "production"
        app_settings.JWT_SECRET_KEY = "short-but-custom"
        with pytest.warns(UserWarning, match="too short"):
            validate_security_config(app_settings)

    def test_strong_secret_passes_in_production(self, app_settings):
        app_settings.ENVIRONMENT = "production"
        app_settings.JWT_SECRET_KEY = "x" * 48
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            validate_security_config(app_settings)

    def test_cors_wildcard_warns(self, app_settings):
        app_settings.CORS_ORIGINS = ["*"]
        with pytest.warns(UserWarning, match="wildcard"):
            validate_security_config(app_settings)
