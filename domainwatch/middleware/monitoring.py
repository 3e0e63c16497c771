"""Monitoring and metrics middleware using Prometheus."""
import functools
import logging
from typing import Callable
from prometheus_client import Counter, generate_latest, CONTENT_TYPE_LATEST
from prometheus_client import make_wsgi_app
from werkzeug.middleware.dispatcher import DispatcherMiddleware

from domainwatch.config.settings import Config

logger = logging.getLogger(__name__)

# Prometheus metrics
trigger_messages_total = Counter(
    'domainwatch_trigger_messages_total',
    'Total number of domain trigger messages processed',
    ['status']
)

notifications_total = Counter(
    'domainwatch_notifications_total',
    'Total number of notifications dispatched',
    ['action', 'status']
)

provider_calls_total = Counter(
    'domainwatch_provider_calls_total',
    'Total number of registrar provider operations',
    ['provider', 'operation', 'status']
)


def register_metrics_middleware(app) -> None:
    """
    Register Prometheus metrics middleware.

    Args:
        app: Flask application instance
    """
    if not Config.ENABLE_METRICS:
        return

    # Add metrics endpoint
    @app.route('/metrics')
    def metrics():
        """Prometheus metrics endpoint."""
        return generate_latest(), 200, {'Content-Type': CONTENT_TYPE_LATEST}

    # Wrap app with Prometheus WSGI middleware
    app.wsgi_app = DispatcherMiddleware(app.wsgi_app, {
        '/metrics': make_wsgi_app()
    })

    logger.info("Prometheus metrics enabled at /metrics")


def track_trigger_message(success: bool):
    """
    Track trigger message processing metrics.

    Args:
        success: Whether processing was successful
    """
    try:
        if Config.ENABLE_METRICS:
            status = "success" if success else "error"
            trigger_messages_total.labels(status=status).inc()
    except Exception as e:
        # Don't fail if metrics tracking fails
        logger.debug(f"Failed to track trigger message metrics: {e}")


def track_notification(action: str, success: bool):
    """
    Track notification dispatch metrics.

    Args:
        action: Trigger action (e.g. 'email')
        success: Whether the send succeeded
    """
    try:
        if Config.ENABLE_METRICS:
            status = "success" if success else "error"
            notifications_total.labels(action=action, status=status).inc()
    except Exception as e:
        logger.debug(f"Failed to track notification metrics: {e}")


def track_provider_call(operation: str):
    """
    Decorator to track registrar provider operations.

    The wrapped method's instance must expose a ``name`` attribute.
    Orders called with ``dry_run=True`` are recorded as ``<operation>_dry_run``.

    Args:
        operation: Operation name (e.g. 'verify', 'order')
    """
    def decorator(f: Callable) -> Callable:
        @functools.wraps(f)
        def wrapper(provider, *args, **kwargs):
            label = operation
            if kwargs.get("dry_run") or (len(args) > 1 and args[1] is True):
                label = f"{operation}_dry_run"
            try:
                result = f(provider, *args, **kwargs)
            except Exception:
                _record_provider_call(provider.name, label, False)
                raise
            _record_provider_call(provider.name, label, True)
            return result
        return wrapper
    return decorator


def _record_provider_call(provider: str, operation: str, success: bool):
    try:
        if Config.ENABLE_METRICS:
            status = "success" if success else "error"
            provider_calls_total.labels(provider=provider, operation=operation, status=status).inc()
    except Exception as e:
        logger.debug(f"Failed to track provider call metrics: {e}")
