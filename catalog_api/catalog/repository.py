"""
==============================================================================
Product Store Module
==============================================================================

Storage access for the product catalog.

Key Space:
---------
All products live in ONE Redis hash:

    hashProducts
      ├── <product id>  →  <serialized product document>
      ├── <product id>  →  ...
      └── ...

There is no secondary index. Filtering by name or category reads and
decodes the whole hash on every call, which is fine at catalog scale
(tens to low thousands of entries). An indexed implementation can be
dropped in behind ``ProductStore`` without touching callers.

Consistency:
-----------
Every operation is a fresh round trip. Redis makes a single HSET / HDEL
atomic per field; nothing here spans several keys, takes locks, caches or
retries. Connection errors from the client propagate unchanged.

==============================================================================
"""

from __future__ import annotations

import logging
import uuid
from abc import ABC, abstractmethod
from typing import Callable, Iterable, List, Optional

from redis.asyncio import Redis

from catalog_api.core import exceptions
from .codec import deserialize_product, serialize_product
from .models import Product
from .seed import SEED_PRODUCTS


# Module logger
logger = logging.getLogger(__name__)

# Fixed name of the products hash. Renaming it requires migrating the data.
PRODUCTS_HASH_KEY = "hashProducts"


class ProductStore(ABC):
    """
    Contract for catalog storage.
    
    Missing data is never an error: lookups return ``None`` and queries
    return an empty list.
    
    An entry whose stored value is empty is absent for ``get_by_id`` and
    corrupt for ``list_all`` and the filters.
    """
    
    @abstractmethod
    async def list_all(self) -> List[Product]:
        """Return every product in the catalog, in no particular order."""
    
    @abstractmethod
    async def get_by_id(self, product_id: str) -> Optional[Product]:
        """Return the product stored under ``product_id``, or None."""
    
    @abstractmethod
    async def get_by_name(self, name: str) -> List[Product]:
        """Return products whose name equals ``name`` (case-sensitive)."""
    
    @abstractmethod
    async def get_by_category(self, category: str) -> List[Product]:
        """Return products whose category equals ``category`` (case-sensitive)."""
    
    @abstractmethod
    async def create(self, product: Product) -> Optional[Product]:
        """Store ``product`` under a freshly generated id and return it."""
    
    @abstractmethod
    async def update(self, product: Product) -> Optional[Product]:
        """Overwrite (or create) the product stored under ``product.id``."""
    
    @abstractmethod
    async def delete(self, product_id: str) -> bool:
        """Remove the product stored under ``product_id``."""


class RedisProductStore(ProductStore):
    """
    Product store backed by a single Redis hash.
    
    The client must be created with ``decode_responses=True``.
    
    Attributes:
        _redis: Async Redis client
    
    Example:
        >>> store = RedisProductStore(redis_client)
        >>> await store.ensure_seeded()
        6
        >>> phones = await store.get_by_category("Smart Phone")
    """
    
    def __init__(self, redis: Redis) -> None:
        if redis is None:
            raise exceptions.invalid_argument("redis", "a Redis client is required")
        self._redis = redis
    
    # =========================================================================
    # SEEDING
    # =========================================================================
    
    async def ensure_seeded(self, products: Iterable[Product] = SEED_PRODUCTS) -> int:
        """
        Populate the hash with ``products`` if it is empty.
        
        The emptiness check is collection-wide and not atomic with the
        write. Two initializers racing on an empty hash both write, but
        they write the same fields with the same values, so the result is
        still one copy of each seed product.
        
        Args:
            products: Products to write, each with a fixed id
            
        Returns:
            Number of products written (0 when the hash already had entries)
        """
        if await self._redis.hlen(PRODUCTS_HASH_KEY) > 0:
            logger.debug(f"'{PRODUCTS_HASH_KEY}' already populated, skipping seed")
            return 0
        
        mapping = {product.id: serialize_product(product) for product in products}
        if not mapping:
            return 0
        
        await self._redis.hset(PRODUCTS_HASH_KEY, mapping=mapping)
        logger.info(f"Seeded '{PRODUCTS_HASH_KEY}' with {len(mapping)} products")
        return len(mapping)
    
    # =========================================================================
    # READ OPERATIONS
    # =========================================================================
    
    async def list_all(self) -> List[Product]:
        entries = await self._redis.hgetall(PRODUCTS_HASH_KEY)
        return [
            deserialize_product(value, field)
            for field, value in entries.items()
        ]
    
    async def get_by_id(self, product_id: str) -> Optional[Product]:
        value = await self._redis.hget(PRODUCTS_HASH_KEY, product_id)
        if not value:
            return None
        return deserialize_product(value, product_id)
    
    async def get_by_name(self, name: str) -> List[Product]:
        return await self._scan(lambda product: product.name == name)
    
    async def get_by_category(self, category: str) -> List[Product]:
        return await self._scan(lambda product: product.category == category)
    
    async def _scan(self, predicate: Callable[[Product], bool]) -> List[Product]:
        """Decode the whole hash and keep the products matching ``predicate``."""
        return [product for product in await self.list_all() if predicate(product)]
    
    # =========================================================================
    # WRITE OPERATIONS
    # =========================================================================
    
    async def create(self, product: Product) -> Optional[Product]:
        """
        Store a new product under a random 128-bit id.
        
        Any id set on ``product`` is ignored. The caller's instance is not
        modified.
        
        Returns:
            The product as read back from Redis. None only if the entry was
            deleted by someone else between the write and the read.
        
        Raises:
            AppException: INVALID_ARGUMENT if ``product`` is None
        """
        if product is None:
            raise exceptions.invalid_argument("product", "must not be None")
        
        stored = product.model_copy(update={"id": str(uuid.uuid4())})
        await self._write(stored)
        logger.info(f"Created product {stored.id} ({stored.name!r})")
        return await self.get_by_id(stored.id)
    
    async def update(self, product: Product) -> Optional[Product]:
        """
        Replace the product stored under ``product.id``.
        
        Existence is not checked: updating an unknown id creates it.
        
        Raises:
            AppException: INVALID_ARGUMENT if ``product`` is None or has no id
        """
        if product is None:
            raise exceptions.invalid_argument("product", "must not be None")
        if not product.id:
            raise exceptions.invalid_argument("product.id", "required for update")
        
        await self._write(product)
        logger.info(f"Updated product {product.id}")
        return await self.get_by_id(product.id)
    
    async def delete(self, product_id: str) -> bool:
        """Remove a product. Deleting an unknown id is not an error."""
        removed = await self._redis.hdel(PRODUCTS_HASH_KEY, product_id)
        logger.info(f"Deleted product {product_id} (removed={removed})")
        return True
    
    async def _write(self, product: Product) -> None:
        await self._redis.hset(
            PRODUCTS_HASH_KEY,
            product.id,
            serialize_product(product),
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

_store_instance: Optional[ProductStore] = None


def get_store() -> Optional[ProductStore]:
    """Get the global product store instance."""
    return _store_instance


def init_store(redis: Redis) -> RedisProductStore:
    """
    Initialize the global product store instance.
    
    Args:
        redis: Async Redis client
        
    Returns:
        RedisProductStore instance
    """
    global _store_instance
    _store_instance = RedisProductStore(redis)
    return _store_instance


def reset_store() -> None:
    """Drop the global product store instance."""
    global _store_instance
    _store_instance = None
