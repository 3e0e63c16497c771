"""Interface for registrar providers (Strategy Pattern).

One implementation per registrar, selected by name through the
provider registry:
- Gandi (token based, direct order)
- OVH (key/secret based, cart order)
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from domainwatch.domain.entities.domain import Domain
from domainwatch.domain.entities.order import OrderSession


class ITldCacheItem(ABC):
    """Handle on the cached TLD list of one provider."""

    key: str

    @abstractmethod
    def is_hit(self) -> bool:
        pass

    @abstractmethod
    def get(self) -> Optional[List[str]]:
        pass

    @abstractmethod
    def set(self, tlds: List[str]) -> None:
        pass


class IRegistrarProvider(ABC):
    """
    Capability set exposed by every registrar.

    Implementations hold the operator-supplied credential bag in memory
    for the duration of a request only.
    """

    name: str

    @abstractmethod
    def verify(self, auth_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate and normalize a credential bag.

        Args:
            auth_data: Provider-shaped credential mapping

        Returns:
            Normalized credentials holding only the fields the workflow needs

        Raises:
            SchemaError, ConsentError, InvalidCredentialError,
            ExpiredCredentialError, InsufficientPermissionError
        """
        pass

    @abstractmethod
    def order(self, domain: Domain, dry_run: bool = False) -> OrderSession:
        """
        Purchase a domain once it has left the registry.

        Args:
            domain: Domain to order, must be flagged as deleted
            dry_run: Run every step except the final financial commit

        Returns:
            The order session, in state CHECKED for a dry run and
            COMPLETED for a committed order

        Raises:
            DomainStillRegisteredError, InvalidDomainError, NoOfferError,
            OrderRejectedError, TransportError
        """
        pass

    @abstractmethod
    def supported_tlds(self) -> List[str]:
        """Fetch the orderable TLDs from the provider (uncached)."""
        pass

    @abstractmethod
    def cached_tlds(self) -> ITldCacheItem:
        """Return the cache handle for this provider's TLD list."""
        pass
