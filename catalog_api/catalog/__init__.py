"""
==============================================================================
Catalog Package - Product Storage
==============================================================================

Product records kept in a single Redis hash.

Classes:
--------
- Product: Pydantic model for products
- ProductStore: Abstract storage contract
- RedisProductStore: Hash-backed implementation with seeding

==============================================================================
"""

from .models import Product
from .codec import serialize_product, deserialize_product
from .seed import SEED_PRODUCTS
from .repository import (
    PRODUCTS_HASH_KEY,
    ProductStore,
    RedisProductStore,
    get_store,
    init_store,
    reset_store,
)

__all__ = [
    "Product",
    "serialize_product",
    "deserialize_product",
    "SEED_PRODUCTS",
    "PRODUCTS_HASH_KEY",
    "ProductStore",
    "RedisProductStore",
    "get_store",
    "init_store",
    "reset_store",
]
