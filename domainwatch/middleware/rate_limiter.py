"""Rate limiting middleware using Flask-Limiter."""
import logging
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from domainwatch.config.settings import Config


def create_rate_limiter(app, config=Config) -> Limiter:
    """
    Create and configure Flask-Limiter instance.

    Connector endpoints call paid registrar APIs, so limits apply per
    client address.

    Args:
        app: Flask application instance
        config: Configuration class

    Returns:
        Configured Limiter instance
    """
    if not config.RATELIMIT_ENABLED:
        return Limiter(
            get_remote_address,
            app=app,
            default_limits=[],
            storage_uri="memory://",
            enabled=False
        )

    try:
        return Limiter(
            get_remote_address,
            app=app,
            default_limits=["200 per hour", "30 per minute"],
            storage_uri=config.RATELIMIT_STORAGE_URL,
            strategy="fixed-window",
            headers_enabled=True
        )
    except Exception as e:
        logging.warning(f"Failed to initialize rate limiter: {e}, using memory storage")
        return Limiter(
            get_remote_address,
            app=app,
            default_limits=["200 per hour", "30 per minute"],
            storage_uri="memory://"
        )
