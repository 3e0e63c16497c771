"""Name-keyed registry of registrar providers.

Uses the Registry pattern so new registrars can be added without
modifying callers.
"""
import logging
from typing import Any, Callable, Dict, List, Optional

import requests

from domainwatch.domain.exceptions import UnknownProviderError
from domainwatch.domain.interfaces.registrar_provider import IRegistrarProvider
from domainwatch.domain.interfaces.tld_cache import ITldCache
from domainwatch.infrastructure.clients.gandi_api_client import GandiAPIClient

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[Dict[str, Any]], IRegistrarProvider]


class ProviderRegistry:
    """
    Registry for registrar providers.

    Maps a provider name to a factory building a provider instance from
    a credential bag.
    """

    def __init__(self, tld_cache: ITldCache, session: Optional[requests.Session] = None, register_defaults: bool = True):
        """
        Initialize the registry with default providers.

        Args:
            tld_cache: Cache shared by every provider's TLD list
            session: HTTP session shared by the Gandi API clients
            register_defaults: Register Gandi and OVH
        """
        self.tld_cache = tld_cache
        self.session = session or requests.Session()
        self._factories: Dict[str, ProviderFactory] = {}
        if register_defaults:
            self._register_default_providers()

    def _register_default_providers(self):
        """Register default providers."""
        # Import here to avoid circular dependencies
        from domainwatch.infrastructure.providers.gandi_provider import GandiProvider
        from domainwatch.infrastructure.providers.ovh_provider import OvhProvider

        self.register(
            GandiProvider.name,
            lambda auth_data: GandiProvider(auth_data, self.tld_cache, GandiAPIClient(session=self.session))
        )
        # The ovh SDK keeps its own signed HTTP session per client
        self.register(OvhProvider.name, lambda auth_data: OvhProvider(auth_data, self.tld_cache))

    def register(self, name: str, factory: ProviderFactory):
        """
        Register a provider factory under ``name``.

        Args:
            name: Provider name, matched case-insensitively
            factory: Callable building a provider from a credential bag
        """
        self._factories[name.lower()] = factory
        logger.debug(f"Registered registrar provider: {name}")

    def names(self) -> List[str]:
        return sorted(self._factories)

    def create(self, name: str, auth_data: Dict[str, Any]) -> IRegistrarProvider:
        """
        Build the provider registered under ``name``.

        Raises:
            UnknownProviderError: If no provider is registered under ``name``
        """
        factory = self._factories.get((name or "").lower())
        if factory is None:
            raise UnknownProviderError(f"Unknown provider: {name}")
        return factory(auth_data)
