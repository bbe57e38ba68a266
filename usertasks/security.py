"""
User Tasks API - Security Validation

Startup checks for the token signing secret and CORS configuration.
"""

import warnings

from usertasks.config import DEFAULT_JWT_SECRET_KEY, Settings, settings as default_settings


def validate_security_config(settings: Settings = default_settings) -> None:
    """
    Validate security configuration on startup.

    A missing or default JWT secret is fatal in production. Other weak settings
    only warn so that tests and local development keep running.
    """
    if not settings.JWT_SECRET_KEY or settings.JWT_SECRET_KEY == DEFAULT_JWT_SECRET_KEY:
        if settings.is_production:
            raise RuntimeError(
                "JWT_SECRET_KEY must be set to a strong secret in production."
            )

    # JWT Secret Key strength (basic check)
    if len(settings.JWT_SECRET_KEY) < 32 and settings.is_production:
        warnings.warn(
            "SECURITY WARNING: JWT_SECRET_KEY is too short for production. "
            "Use at least 32 characters.",
            UserWarning,
        )

    if "*" in settings.CORS_ORIGINS:
        warnings.warn(
            "SECURITY WARNING: CORS wildcard (*) detected. "
            "Set specific origins via CORS_ORIGINS.",
            UserWarning,
        )
