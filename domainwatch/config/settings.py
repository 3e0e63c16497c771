"""Application configuration with environment-based settings."""
import os
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    return os.getenv(name, str(default)).strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    value = os.getenv(name)
    return int(value) if value else default


class Config:
    """Base configuration, read once from the environment (and .env)."""

    # Redis / Celery
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    CELERY_BROKER_URL: str = os.getenv("CELERY_BROKER_URL", "redis://localhost:6379/1")
    CELERY_RESULT_BACKEND: str = os.getenv("CELERY_RESULT_BACKEND", "redis://localhost:6379/1")

    # Rate limiting of the connector endpoints
    RATELIMIT_STORAGE_URL: str = os.getenv("RATELIMIT_STORAGE_URL", "redis://localhost:6379/2")
    RATELIMIT_ENABLED: bool = _env_bool("RATELIMIT_ENABLED", True)

    # Monitoring
    SENTRY_DSN: Optional[str] = os.getenv("SENTRY_DSN")
    ENABLE_METRICS: bool = _env_bool("ENABLE_METRICS", True)

    # Notifications
    MAILER_BACKEND: str = os.getenv("MAILER_BACKEND", "smtp")  # smtp | console
    MAILER_SENDER_EMAIL: Optional[str] = os.getenv("MAILER_SENDER_EMAIL")
    MAILER_LOCALE: str = os.getenv("MAILER_LOCALE", "en")
    SMTP_HOST: str = os.getenv("SMTP_HOST", "localhost")
    SMTP_PORT: int = _env_int("SMTP_PORT", 25)
    SMTP_USERNAME: Optional[str] = os.getenv("SMTP_USERNAME")
    SMTP_PASSWORD: Optional[str] = os.getenv("SMTP_PASSWORD")
    SMTP_USE_TLS: bool = _env_bool("SMTP_USE_TLS", False)

    # Registrar providers
    PROVIDER_HTTP_TIMEOUT: int = _env_int("PROVIDER_HTTP_TIMEOUT", 30)
    GANDI_BASE_URL: str = os.getenv("GANDI_BASE_URL", "https://api.gandi.net")
    TLD_CACHE_TTL: Optional[int] = _env_int("TLD_CACHE_TTL", None)  # None = no expiry

    # Application
    DEBUG: bool = _env_bool("DEBUG", False)
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-key-change-in-production")

    @classmethod
    def validate(cls) -> None:
        """
        Check the settings without a usable default.

        Raises:
            ValueError: Listing every missing variable
        """
        missing = [name for name in ("MAILER_SENDER_EMAIL",) if not getattr(cls, name)]
        if missing:
            raise ValueError(f"Missing required environment variables: {', '.join(missing)}")


class DevelopmentConfig(Config):
    DEBUG = True
    MAILER_BACKEND = os.getenv("MAILER_BACKEND", "console")


class ProductionConfig(Config):
    DEBUG = False


class TestingConfig(Config):
    TESTING = True
    REDIS_URL = "redis://localhost:6379/15"
    RATELIMIT_ENABLED = False
    ENABLE_METRICS = False
    MAILER_BACKEND = "console"
    MAILER_SENDER_EMAIL = "watchdog@example.test"


def get_config() -> type[Config]:
    """Select the configuration class from FLASK_ENV (default: development)."""
    config_map = {
        "development": DevelopmentConfig,
        "production": ProductionConfig,
        "testing": TestingConfig,
    }
    return config_map.get(os.getenv("FLASK_ENV", "development").lower(), DevelopmentConfig)
