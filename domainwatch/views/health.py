"""Health check endpoints."""
import logging
from flask import Blueprint, current_app, jsonify

import redis

from domainwatch.infrastructure.redis_client import RedisClientFactory
from domainwatch.infrastructure.service_container import ServiceContainer

health_blueprint = Blueprint("health", __name__)
_logger = logging.getLogger(__name__)

SERVICE_NAME = "domainwatch"


def _redis_ready() -> bool:
    client = RedisClientFactory.get_client()
    if client is None:
        return False
    try:
        return bool(client.ping())
    except redis.RedisError as e:
        _logger.error(f"Redis health check failed: {e}")
        return False


@health_blueprint.route("/health", methods=["GET"])
def health_check():
    return jsonify({"status": "healthy", "service": SERVICE_NAME}), 200


@health_blueprint.route("/health/ready", methods=["GET"])
def readiness_check():
    """
    Readiness check.

    Ready once Redis answers; the registered providers are reported for
    information only.
    """
    container = current_app.config.get("service_container") or ServiceContainer()
    redis_ok = _redis_ready()

    return jsonify({
        "status": "ready" if redis_ok else "not_ready",
        "checks": {"redis": redis_ok},
        "providers": container.get_provider_registry().names(),
    }), 200 if redis_ok else 503


@health_blueprint.route("/health/live", methods=["GET"])
def liveness_check():
    """Liveness check (process is up)."""
    return jsonify({"status": "alive", "service": SERVICE_NAME}), 200
