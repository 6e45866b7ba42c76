"""
==============================================================================
Catalog API - Application Entry Point
==============================================================================

FastAPI application serving a product catalog stored in Redis.

Startup:
--------
1. Create (or reuse) the Redis client
2. Set up the product store on that client
3. Seed the catalog if the products hash is empty

Seeding is awaited before the application accepts requests. If it fails,
startup fails.

Usage:
------
    # Development
    uvicorn catalog_api.main:app --reload
    
    # Production
    uvicorn catalog_api.main:app --host 0.0.0.0 --port 8000

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog_api.config import get_settings
from catalog_api.core.exceptions import register_exception_handlers
from catalog_api.catalog import init_store, reset_store
from catalog_api.db import RedisManager, init_catalog
from catalog_api.api.router import api_router


# ============================================================================
# LOGGING SETUP
# ============================================================================

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

logger = logging.getLogger(__name__)


# ============================================================================
# APPLICATION FACTORY
# ============================================================================

class Application:
    """
    FastAPI application factory and manager.
    
    Handles application lifecycle including:
    - Redis client setup and teardown
    - Catalog seeding
    - Middleware, routers and exception handlers
    """
    
    def __init__(self):
        self._settings = get_settings()
        self._redis_manager = RedisManager()
        self._app = self._create_app()
    
    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version="1.0.0",
            description="Product catalog backed by a Redis hash",
            lifespan=self._lifespan,
            docs_url="/docs",
            redoc_url="/redoc",
        )
        
        self._configure_middleware(app)
        register_exception_handlers(app)
        app.include_router(api_router)
        
        return app
    
    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        await self._startup()
        try:
            yield
        finally:
            await self._shutdown()
    
    async def _startup(self) -> None:
        """Application startup tasks."""
        logger.info("=" * 60)
        logger.info(f"🚀 Starting {self._settings.app_name}")
        logger.info("=" * 60)
        
        store = init_store(self._redis_manager.client)
        
        if self._settings.seed_on_startup:
            await init_catalog(store)
        else:
            logger.info("Catalog seeding disabled by configuration")
        
        logger.info(f"✅ {self._settings.app_name} ready")
        logger.info(f"📖 API Docs: http://{self._settings.host}:{self._settings.port}/docs")
    
    async def _shutdown(self) -> None:
        """Application shutdown tasks."""
        logger.info("🛑 Shutting down...")
        reset_store()
        await self._redis_manager.close()
        logger.info("✅ Shutdown complete")
    
    def _configure_middleware(self, app: FastAPI) -> None:
        """Configure application middleware."""
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origins_list,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    
    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

application = Application()
app = application.app


# ============================================================================
# ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(
        "catalog_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
