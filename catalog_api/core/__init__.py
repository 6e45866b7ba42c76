"""
==============================================================================
Core Package
==============================================================================

Core utilities and infrastructure for the application.

Modules:
--------
- exceptions: AppException class and error factory functions
- dependencies: FastAPI dependency injection functions

Usage:
------
    from catalog_api.core import exceptions
    raise exceptions.product_not_found(product_id)

``dependencies`` imports the catalog package, which itself raises errors
from ``exceptions``, so it is imported by module path only.

==============================================================================
"""

from .exceptions import (
    AppException,
    register_exception_handlers,
)

__all__ = [
    "AppException",
    "register_exception_handlers",
]
