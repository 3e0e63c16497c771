"""Error handling middleware with Sentry integration."""
import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

from domainwatch.config.settings import Config
from domainwatch.domain.exceptions import DomainWatchError

logger = logging.getLogger(__name__)


def _error_response(message: str, status_code: int):
    return jsonify({"status": "error", "message": message}), status_code


def _init_sentry(app) -> None:
    """Report unhandled web and worker errors to Sentry when a DSN is set."""
    import sentry_sdk
    from sentry_sdk.integrations.celery import CeleryIntegration
    from sentry_sdk.integrations.flask import FlaskIntegration

    sentry_sdk.init(
        dsn=Config.SENTRY_DSN,
        integrations=[FlaskIntegration(), CeleryIntegration()],
        traces_sample_rate=0.1,
        send_default_pii=False,
        environment=app.config.get("FLASK_ENV", "production"),
    )
    logger.info("Sentry error tracking initialized")


def init_error_handlers(app) -> None:
    """
    Render every error as ``{"status": "error", "message": ...}``.

    Typed domainwatch errors keep their own status code, so a caller
    can tell a bad credential bag (400) from missing consent (451) or
    an unreachable registrar (502).

    Args:
        app: Flask application instance
    """
    if Config.SENTRY_DSN:
        _init_sentry(app)

    @app.errorhandler(DomainWatchError)
    def handle_domainwatch_error(error: DomainWatchError):
        level = logging.ERROR if error.status_code >= 500 else logging.INFO
        logger.log(level, f"{type(error).__name__}: {error.message}")
        return _error_response(error.message, error.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        if error.code == 404:
            return _error_response("Resource not found", 404)
        if error.code == 429:
            return _error_response("Rate limit exceeded. Please try again later.", 429)
        return _error_response(error.description or error.name, error.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):
        logger.error(f"Internal server error: {error}", exc_info=True)
        return _error_response("Internal server error", 500)
