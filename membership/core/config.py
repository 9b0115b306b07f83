# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration — all env-driven, zero hardcode.
Single source of truth for every tunable parameter.
"""

import os


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def parse_users(raw: str) -> dict:
    """'email:password:role' triples, comma separated, to {email: (password, role)}."""
    users = {}
    for triple in raw.split(","):
        triple = triple.strip()
        if triple.count(":") >= 2:
            email, rest = triple.split(":", 1)
            password, role = rest.rsplit(":", 1)
            users[email.strip().lower()] = (password.strip(), role.strip())
    return users


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "membership")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    SERVICE_PORT: int = int(os.getenv("SERVICE_PORT", "3000"))
    ENVIRONMENT: str = os.getenv("APP_ENV", "development").lower()

    # Database: 'mysql://user:pw@host/db' or 'host=..; user=..; password=..; database=..'
    DB_CONNECTION: str = os.getenv("DB_CONNECTION", "")
    DB_POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "10"))
    DB_MAX_OVERFLOW: int = int(os.getenv("DB_MAX_OVERFLOW", "5"))
    DB_POOL_RECYCLE: int = int(os.getenv("DB_POOL_RECYCLE", "300"))
    DB_CREATE_SCHEMA: bool = _flag("DB_CREATE_SCHEMA", "false")

    # Auth
    JWT_SECRET: str = os.getenv("JWT_SECRET", "dev-jwt-secret-change-me")
    JWT_ALGORITHM: str = os.getenv("JWT_ALGORITHM", "HS256")
    JWT_EXPIRY_SECONDS: int = int(os.getenv("JWT_EXPIRY_SECONDS", "86400"))
    SESSION_SECRET: str = os.getenv("SESSION_SECRET", "dev-session-secret-change-me")
    SESSION_MAX_AGE: int = int(os.getenv("SESSION_MAX_AGE", "86400"))

    # Format: "admin@example.com:secret:admin,guest@example.com:guest:guest"
    USER_CREDENTIALS: dict = parse_users(
        os.getenv("AUTH_USERS", "admin@localhost:admin:admin,guest@localhost:guest:guest")
    )

    # Pipeline
    STATIC_DIR: str = os.getenv("STATIC_DIR", "public")
    TRUST_PROXY: bool = _flag("TRUST_PROXY", "true")
    CSP_TRUSTED_CDNS: str = os.getenv(
        "CSP_TRUSTED_CDNS", "ajax.googleapis.com cdnjs.cloudflare.com maxcdn.bootstrapcdn.com"
    )

    # Admin → API passthrough
    API_URL: str = os.getenv("API_URL", "").rstrip("/")
    AJAX_TIMEOUT: float = float(os.getenv("AJAX_TIMEOUT", "10.0"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def __init__(self):
        self.SSL_DISABLED = _flag("SSL_DISABLED", "false" if self.IS_PRODUCTION else "true")

    @property
    def IS_PRODUCTION(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def STATIC_MAX_AGE(self) -> int:
        """Browser cache lifetime for static files, in seconds."""
        return 60 * 60 * 24 if self.IS_PRODUCTION else 1


settings = Settings()
