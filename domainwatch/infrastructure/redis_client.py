"""Shared Redis connection used by the TLD cache and health checks."""
import logging
from typing import Optional
from urllib.parse import urlsplit

import redis

from domainwatch.config.settings import Config

logger = logging.getLogger(__name__)

SUPPORTED_SCHEMES = ("redis", "rediss", "unix")


def mask_url(url: str) -> str:
    """Hide the password of a Redis URL before it is logged."""
    parts = urlsplit(url)
    if not parts.password:
        return url
    return url.replace(f":{parts.password}@", ":***@", 1)


class RedisClientFactory:
    """
    Lazily builds one pooled Redis client per process.

    A failed connection is not fatal: callers receive None and run
    without caching.
    """

    _client: Optional[redis.Redis] = None

    @classmethod
    def get_client(cls, url: Optional[str] = None) -> Optional[redis.Redis]:
        """
        Return the process-wide client, connecting on first use.

        Args:
            url: Redis URL (defaults to Config.REDIS_URL)

        Returns:
            Connected client, or None when Redis is unusable
        """
        if cls._client is not None:
            return cls._client

        redis_url = url or Config.REDIS_URL
        if not redis_url or urlsplit(redis_url).scheme not in SUPPORTED_SCHEMES:
            logger.warning(f"Redis disabled: unusable REDIS_URL {mask_url(redis_url or '')!r}")
            return None

        client = redis.Redis.from_url(
            redis_url,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5,
            health_check_interval=30,
        )
        try:
            client.ping()
        except redis.AuthenticationError as e:
            logger.error(f"Redis authentication failed for {mask_url(redis_url)}: {e}")
            return None
        except redis.ConnectionError as e:
            logger.warning(f"Redis unreachable at {mask_url(redis_url)}, TLD lists won't be cached: {e}")
            return None

        logger.info(f"Connected to Redis at {mask_url(redis_url)}")
        cls._client = client
        return cls._client

    @classmethod
    def close(cls) -> None:
        if cls._client is not None:
            cls._client.close()
            cls._client = None
