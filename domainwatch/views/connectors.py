"""Registrar connector endpoints: credential verification and ordering."""
import logging
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request

from domainwatch.domain.exceptions import ResourceNotFoundError, SchemaError
from domainwatch.infrastructure.service_container import ServiceContainer

connectors_blueprint = Blueprint("connectors", __name__, url_prefix="/api/connectors")
_logger = logging.getLogger(__name__)


def _container() -> ServiceContainer:
    container = current_app.config.get("service_container")
    if container is None:
        container = ServiceContainer()
        current_app.config["service_container"] = container
    return container


def _auth_data(body: Dict[str, Any]) -> Dict[str, Any]:
    auth_data = body.get("authData")
    if not isinstance(auth_data, dict):
        raise SchemaError()
    return auth_data


@connectors_blueprint.route("/<provider_name>/verify", methods=["POST"])
def verify_connector(provider_name: str):
    """
    Verify a credential bag against the provider.

    Returns the normalized field names; secrets are never echoed back.
    """
    body = request.get_json(silent=True) or {}
    auth_data = _auth_data(body)

    provider = _container().get_provider_registry().create(provider_name, auth_data)
    normalized = provider.verify(auth_data)
    _logger.info(f"Connector verified for {provider.name}")

    return jsonify({
        "status": "ok",
        "provider": provider.name,
        "fields": sorted(normalized)
    }), 200


@connectors_blueprint.route("/<provider_name>/order", methods=["POST"])
def order_domain(provider_name: str):
    """
    Order a domain through the provider.

    Expected payload:
    {
        "authData": {...},
        "ldhName": "example.com",
        "dryRun": true
    }

    Returns 200 for a dry run and 202 for a committed order.
    """
    body = request.get_json(silent=True) or {}
    auth_data = _auth_data(body)
    ldh_name = body.get("ldhName")
    dry_run = body.get("dryRun", True) is not False

    container = _container()
    domain = container.get_domain_repository().find_by_ldh_name(ldh_name or "")
    if domain is None:
        raise ResourceNotFoundError(f"Unknown domain {ldh_name}")

    provider = container.get_provider_registry().create(provider_name, auth_data)
    session = provider.order(domain, dry_run=dry_run)

    return jsonify({
        "status": "ok",
        "provider": provider.name,
        "ldhName": domain.ldh_name,
        "dryRun": dry_run,
        "state": session.state.value
    }), 200 if dry_run else 202


@connectors_blueprint.route("/<provider_name>/tlds", methods=["POST"])
def supported_tlds(provider_name: str):
    """List the TLDs the provider can order (cached)."""
    body = request.get_json(silent=True) or {}
    auth_data = _auth_data(body)

    container = _container()
    provider = container.get_provider_registry().create(provider_name, auth_data)
    tlds = container.get_tld_catalog().supported_tlds(provider)

    return jsonify({
        "status": "ok",
        "provider": provider.name,
        "tlds": tlds
    }), 200
