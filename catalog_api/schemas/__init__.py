"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Request and response schemas for the HTTP API.

==============================================================================
"""

from .common import MessageResponse
from .product import (
    ProductCreate,
    ProductUpdate,
    ProductDetailResponse,
    ProductListResponse,
)

__all__ = [
    "MessageResponse",
    "ProductCreate",
    "ProductUpdate",
    "ProductDetailResponse",
    "ProductListResponse",
]
