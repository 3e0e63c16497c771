"""Flask application factory with dependency injection."""
import logging
import sys
from flask import Flask

from domainwatch.config.settings import get_config
from domainwatch.infrastructure.redis_client import RedisClientFactory
from domainwatch.infrastructure.service_container import ServiceContainer
from domainwatch.middleware.error_handler import init_error_handlers
from domainwatch.middleware.monitoring import register_metrics_middleware
from domainwatch.middleware.rate_limiter import create_rate_limiter
from domainwatch.views import connectors_blueprint, health_blueprint


def create_app(config_class=None) -> Flask:
    """
    Create and configure Flask application with dependency injection.

    Args:
        config_class: Optional configuration class (for testing)

    Returns:
        Configured Flask application
    """
    _logger = logging.getLogger(__name__)

    app = Flask(__name__)

    config = config_class or get_config()
    app.config.from_object(config)

    _configure_logging(config)

    app.register_blueprint(health_blueprint)
    app.register_blueprint(connectors_blueprint)

    try:
        config.validate()
    except ValueError as e:
        _logger.warning(f"Configuration validation warning: {e}")

    _initialize_infrastructure(app)
    _initialize_middleware(app, config)

    # Store container in app config for access in views
    app.config['service_container'] = ServiceContainer()

    _logger.info(f"Application ready - registered blueprints: {[bp.name for bp in app.blueprints.values()]}")
    return app


def _configure_logging(config) -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=logging.DEBUG if config.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )


def _initialize_infrastructure(app: Flask) -> None:
    """
    Initialize infrastructure components (Redis).

    Args:
        app: Flask application instance
    """
    if app.config.get("TESTING"):
        return

    redis_client = RedisClientFactory.get_client()
    if redis_client:
        logging.info("Infrastructure initialized successfully with Redis")
    else:
        logging.warning("Infrastructure initialized without Redis (TLD lists won't be cached)")


def _initialize_middleware(app: Flask, config) -> None:
    """
    Initialize middleware (rate limiting, monitoring, error handling).

    Args:
        app: Flask application instance
        config: Configuration class
    """
    app.config['limiter'] = create_rate_limiter(app, config)

    if config.ENABLE_METRICS:
        register_metrics_middleware(app)

    init_error_handlers(app)
