"""Registrar provider implementations (Strategy Pattern)."""
from domainwatch.infrastructure.providers.gandi_provider import GandiProvider
from domainwatch.infrastructure.providers.ovh_provider import OvhProvider
from domainwatch.infrastructure.providers.provider_registry import ProviderRegistry

__all__ = ["GandiProvider", "OvhProvider", "ProviderRegistry"]
