"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for route handlers.

Dependency Hierarchy:
--------------------
    ┌───────────────────┐
    │ get_product_store │  → ProductStore set up by the lifespan
    └───────────────────┘

Usage:
------
    @router.get("/catalog")
    async def list_products(store: ProductStore = Depends(get_product_store)):
        return await store.list_all()

==============================================================================
"""

from __future__ import annotations

import logging

from catalog_api.catalog import ProductStore, get_store
from catalog_api.core.exceptions import store_not_ready


# Module logger
logger = logging.getLogger(__name__)


def get_product_store() -> ProductStore:
    """
    FastAPI dependency returning the active product store.
    
    Raises:
        AppException: STORE_NOT_READY if the application has not started
    """
    store = get_store()
    if store is None:
        logger.warning("Product store requested before initialization")
        raise store_not_ready()
    return store
