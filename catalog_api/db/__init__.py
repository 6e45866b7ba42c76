"""
==============================================================================
Database Package
==============================================================================

Redis infrastructure for the catalog.

Architecture:
------------
├── connection.py - RedisManager class, shared async client
└── init_db.py    - CatalogInitializer for startup seeding

==============================================================================
"""

from .connection import RedisManager, get_redis_manager
from .init_db import CatalogInitializer, init_catalog

__all__ = [
    "RedisManager",
    "get_redis_manager",
    "CatalogInitializer",
    "init_catalog",
]
