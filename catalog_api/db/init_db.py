"""
==============================================================================
Catalog Initialization Module
==============================================================================

Seeds the products hash once at application startup.

Initialization Flow:
-------------------
1. Check whether the products hash has any entries
2. If empty, write the seed catalog
3. Log the outcome

This runs as an explicit step from the application lifespan, never from
the store constructor, and the startup awaits it. A failure aborts startup;
running it again is safe because every seed product has a fixed id.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from catalog_api.catalog import SEED_PRODUCTS, Product, RedisProductStore


# Module logger
logger = logging.getLogger(__name__)


class CatalogInitializer:
    """
    Catalog initialization manager.
    
    Attributes:
        _store: Store whose hash is seeded
        _products: Seed products to write
    """
    
    def __init__(
        self,
        store: RedisProductStore,
        products: Optional[Iterable[Product]] = None
    ) -> None:
        self._store = store
        self._products = tuple(products) if products is not None else SEED_PRODUCTS
    
    async def initialize(self) -> int:
        """
        Seed the catalog if it is empty.
        
        Returns:
            Number of products written
        """
        logger.info("Initializing product catalog...")
        
        try:
            written = await self._store.ensure_seeded(self._products)
        except Exception as e:
            logger.error(f"Failed to seed product catalog: {e}")
            raise
        
        if written:
            logger.info(f"✅ Seed catalog written ({written} products)")
        else:
            logger.info("Product catalog already populated")
        
        return written


async def init_catalog(store: RedisProductStore) -> int:
    """
    Seed the catalog (convenience function).
    
    Usage:
        from catalog_api.db import init_catalog
        await init_catalog(store)
    """
    initializer = CatalogInitializer(store)
    return await initializer.initialize()
