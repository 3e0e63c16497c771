"""Repository and cache implementations."""
from domainwatch.infrastructure.repositories.tld_cache import RedisTldCache, TldCacheItem
from domainwatch.infrastructure.repositories.memory_repository import (
    InMemoryDomainRepository,
    InMemoryWatchListRepository,
)

__all__ = [
    "RedisTldCache",
    "TldCacheItem",
    "InMemoryDomainRepository",
    "InMemoryWatchListRepository",
]
