"""Read-through cache of the TLDs each provider can order."""
import logging
from typing import List

from domainwatch.domain.interfaces.registrar_provider import IRegistrarProvider


logger = logging.getLogger(__name__)


class TldCatalog:
    """
    Returns a provider's TLD list from its cache, fetching on a miss.

    Concurrent first accesses may both reach the provider; the last
    write wins.
    """

    def supported_tlds(self, provider: IRegistrarProvider) -> List[str]:
        item = provider.cached_tlds()
        if item.is_hit():
            return item.get()

        logger.info("TLD cache miss for %s, fetching from provider", provider.name)
        tlds = provider.supported_tlds()
        item.set(tlds)
        return tlds
