"""Redis-based TLD list cache implementation."""
import logging
import json
from typing import List, Optional
import redis

from domainwatch.config.settings import Config
from domainwatch.domain.interfaces.registrar_provider import ITldCacheItem
from domainwatch.domain.interfaces.tld_cache import ITldCache
from domainwatch.infrastructure.redis_client import RedisClientFactory


class RedisTldCache(ITldCache):
    """
    Redis-based TLD list cache.

    Entries never expire unless a TTL is configured. Without Redis, or
    when a Redis call fails, reads are misses and writes are dropped.
    """

    def __init__(self, redis_client: Optional[redis.Redis] = None, ttl: Optional[int] = None):
        """
        Initialize the cache.

        Args:
            redis_client: Redis client instance (Dependency Injection)
            ttl: Optional time to live in seconds (defaults to Config value)
        """
        self.redis = redis_client or RedisClientFactory.get_client()
        self.ttl = ttl if ttl is not None else Config.TLD_CACHE_TTL
        self._logger = logging.getLogger(__name__)

    def get(self, key: str) -> Optional[List[str]]:
        if not self.redis:
            self._logger.warning("Redis not available - TLD cache miss")
            return None

        try:
            data = self.redis.get(key)
        except redis.RedisError as e:
            self._logger.warning(f"Redis read of {key} failed, treating as a miss: {e}")
            return None
        if data is None:
            return None
        return json.loads(data)

    def set(self, key: str, tlds: List[str]) -> None:
        if not self.redis:
            self._logger.warning("Redis not available - cannot store TLD list")
            return

        serialized = json.dumps(tlds)
        try:
            if self.ttl:
                self.redis.setex(key, self.ttl, serialized)
            else:
                self.redis.set(key, serialized)
        except redis.RedisError as e:
            self._logger.warning(f"Redis write of {key} failed, TLD list not cached: {e}")
            return
        self._logger.debug(f"Stored {len(tlds)} TLDs under {key}")


class TldCacheItem(ITldCacheItem):
    """Cache handle bound to one key."""

    def __init__(self, cache: ITldCache, key: str):
        self.cache = cache
        self.key = key
        self._value: Optional[List[str]] = None
        self._loaded = False

    def _load(self) -> Optional[List[str]]:
        if not self._loaded:
            self._value = self.cache.get(self.key)
            self._loaded = True
        return self._value

    def is_hit(self) -> bool:
        return self._load() is not None

    def get(self) -> Optional[List[str]]:
        return self._load()

    def set(self, tlds: List[str]) -> None:
        self.cache.set(self.key, tlds)
        self._value = list(tlds)
        self._loaded = True
