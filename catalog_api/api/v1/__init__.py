"""
==============================================================================
API v1 Endpoints
==============================================================================

Routers:
--------
- health: Health check endpoints
- catalog: Product catalog

==============================================================================
"""

from . import health, catalog

__all__ = ["health", "catalog"]
