"""
==============================================================================
Health Check Endpoints
==============================================================================

System health status endpoints for monitoring and orchestration.

==============================================================================
"""

from fastapi import APIRouter, Depends
from redis.exceptions import RedisError

from catalog_api.catalog import PRODUCTS_HASH_KEY, get_store
from catalog_api.db.connection import RedisManager, get_redis_manager


router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""
    
    def __init__(self, redis_manager: RedisManager):
        self._redis_manager = redis_manager
    
    async def check_redis(self) -> str:
        """Check Redis connectivity."""
        if await self._redis_manager.verify_connection():
            return "healthy"
        return "unhealthy"
    
    async def check_catalog(self) -> dict:
        """Check store status and count products."""
        if get_store() is None:
            return {"status": "not_ready", "products": 0}
        try:
            count = await self._redis_manager.client.hlen(PRODUCTS_HASH_KEY)
        except RedisError:
            return {"status": "unavailable", "products": 0}
        return {"status": "healthy", "products": count}
    
    async def get_health(self) -> dict:
        """Get full health status."""
        redis_status = await self.check_redis()
        catalog_info = await self.check_catalog()
        
        overall = "healthy" if redis_status == "healthy" else "degraded"
        
        return {
            "status": overall,
            "components": {
                "api": "healthy",
                "redis": redis_status,
                "catalog": catalog_info["status"]
            },
            "details": {
                "products_stored": catalog_info["products"]
            }
        }


@router.get("")
async def health_check(redis_manager: RedisManager = Depends(get_redis_manager)):
    """
    Health check endpoint.
    
    Returns system status including API, Redis, and catalog.
    """
    controller = HealthController(redis_manager)
    return await controller.get_health()


@router.get("/ready")
async def readiness_check():
    """Readiness probe: true once the product store is set up."""
    return {"ready": get_store() is not None}


@router.get("/live")
async def liveness_check():
    """Liveness probe for container orchestration."""
    return {"alive": True}
