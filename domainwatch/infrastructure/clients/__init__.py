"""Registrar API clients."""
from domainwatch.infrastructure.clients.gandi_api_client import GandiAPIClient
from domainwatch.infrastructure.clients.ovh_api_client import OvhAPIClient

__all__ = ["GandiAPIClient", "OvhAPIClient"]
