"""
Application Exception Handling

Single AppException class for all application errors with FastAPI integration.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from redis.exceptions import RedisError


logger = logging.getLogger(__name__)


class AppException(Exception):
    """
    Unified application exception for all error scenarios.
    
    Provides consistent error response format across the entire API.
    
    Usage:
        raise AppException("Product not found", "PRODUCT_NOT_FOUND", 404)
        raise AppException("Corrupt entry", "CORRUPT_PRODUCT_DATA", 500, {"field": "42"})
    
    Error Codes:
        Catalog:
            - INVALID_ARGUMENT (400)
            - PRODUCT_NOT_FOUND (404)
            - CORRUPT_PRODUCT_DATA (500)
        
        Store:
            - STORE_NOT_READY (503)
            - STORE_UNAVAILABLE (503)
    """
    
    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.
        
        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "PRODUCT_NOT_FOUND")
            status_code: HTTP status code (default: 400)
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }
        
        if self.details:
            error_dict["error"]["details"] = self.details
        
        return error_dict


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Converts AppException to consistent JSON error response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def redis_exception_handler(request: Request, exc: RedisError) -> JSONResponse:
    """
    Report a failure to reach the backing store.
    
    The store layer lets redis errors through untouched; this is the one
    place they are translated into an HTTP response.
    """
    logger.error(f"Redis error on {request.method} {request.url.path}: {exc!r}")
    return await app_exception_handler(request, store_unavailable(str(exc)))


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.
    
    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RedisError, redis_exception_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def invalid_argument(argument: str, reason: str) -> AppException:
    """Create invalid argument exception."""
    return AppException(
        f"Invalid argument '{argument}': {reason}",
        "INVALID_ARGUMENT",
        400,
        {"argument": argument, "reason": reason}
    )


def product_not_found(product_id: Optional[str] = None) -> AppException:
    """Create product not found exception."""
    details = {"product_id": product_id} if product_id else {}
    return AppException("Product not found", "PRODUCT_NOT_FOUND", 404, details)


def corrupt_product_data(field: Optional[str], reason: str) -> AppException:
    """Create exception for a stored product value that cannot be decoded."""
    details = {"reason": reason}
    if field is not None:
        details["field"] = field
    return AppException(
        "Stored product data could not be deserialized",
        "CORRUPT_PRODUCT_DATA",
        500,
        details
    )


def store_not_ready() -> AppException:
    """Create store not initialized exception."""
    return AppException(
        "Product store not initialized",
        "STORE_NOT_READY",
        503
    )


def store_unavailable(reason: str) -> AppException:
    """Create backing store unreachable exception."""
    return AppException(
        "Product store is unavailable",
        "STORE_UNAVAILABLE",
        503,
        {"reason": reason}
    )
