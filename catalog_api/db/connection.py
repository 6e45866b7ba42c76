"""
==============================================================================
Redis Connection Management Module
==============================================================================

Owns the asyncio Redis client shared by the whole application.

Design Pattern: Singleton
------------------------
RedisManager keeps a single client (and therefore a single connection
pool) per process. The client is created lazily from settings, or can be
supplied from outside with ``use_client`` when the owner of the process
already holds a configured client.

    ┌───────────────┐
    │ RedisManager  │ (Singleton)
    └───────┬───────┘
            │
    ┌───────▼───────┐
    │ redis.asyncio │ (Connection pool)
    │     Redis     │
    └───────────────┘

Timeouts, reconnects and idle health checks are handled by the client
itself and configured through settings.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Optional

from redis.asyncio import Redis
from redis.exceptions import RedisError

from catalog_api.config import get_settings


# Module logger
logger = logging.getLogger(__name__)


class RedisManager:
    """
    Centralized Redis client manager.
    
    Attributes:
        _client: Async Redis client (lazy loaded)
        _settings: Application settings reference
    
    Example:
        >>> manager = RedisManager()
        >>> await manager.client.ping()
        True
        >>> await manager.close()
    """
    
    _instance: Optional[RedisManager] = None
    
    def __new__(cls) -> RedisManager:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance
    
    def __init__(self) -> None:
        if getattr(self, "_initialized", False):
            return
        
        self._settings = get_settings()
        self._client: Optional[Redis] = None
        self._initialized = True
        
        logger.debug("RedisManager initialized")
    
    # =========================================================================
    # CLIENT MANAGEMENT
    # =========================================================================
    
    @property
    def client(self) -> Redis:
        """
        Get the Redis client, creating it on first access.
        
        Returns:
            Async Redis client with string responses
        """
        if self._client is None:
            self._client = self._create_client()
        return self._client
    
    def _create_client(self) -> Redis:
        client = Redis.from_url(
            self._settings.redis_url,
            decode_responses=True,
            socket_timeout=self._settings.redis_socket_timeout,
            socket_connect_timeout=self._settings.redis_socket_timeout,
            health_check_interval=self._settings.redis_health_check_interval,
        )
        logger.info("Created Redis client")
        return client
    
    def use_client(self, client: Redis) -> None:
        """
        Replace the managed client with an externally configured one.
        
        The client must decode responses to ``str``.
        """
        self._client = client
    
    # =========================================================================
    # CONNECTION MANAGEMENT
    # =========================================================================
    
    async def verify_connection(self) -> bool:
        """
        Ping Redis.
        
        Returns:
            True if Redis answered, False otherwise
        """
        try:
            await self.client.ping()
            logger.debug("Redis connection verified")
            return True
        except RedisError as e:
            logger.error(f"Redis connection failed: {e}")
            return False
    
    async def close(self) -> None:
        """Close the client and its connection pool. Call on shutdown."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.info("Redis connection pool closed")


def get_redis_manager() -> RedisManager:
    """Get the global RedisManager instance."""
    return RedisManager()
