"""
==============================================================================
Application Settings Module
==============================================================================

Configuration for the catalog service using Pydantic Settings.

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables
2. .env file
3. Default values

The Redis connection is the only external resource the service needs.
The name of the products hash is NOT configurable; see
``catalog_api.catalog.repository.PRODUCTS_HASH_KEY``.

==============================================================================
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    Attributes:
        app_name: Display name for the application
        app_env: Environment mode (development/staging/production)
        debug: Enable debug mode for verbose logging
        host: Server bind address
        port: Server port number
        redis_url: Connection URL of the Redis instance holding the catalog
        redis_socket_timeout: Seconds to wait on a Redis socket operation
        redis_health_check_interval: Seconds between idle connection checks
        seed_on_startup: Seed an empty catalog when the application starts
        cors_origins: Allowed CORS origins (JSON array string)
    
    Example:
        >>> settings = Settings(redis_url="redis://cache:6379/0")
        >>> settings.is_production
        False
    """
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )
    
    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    app_name: str = Field(
        default="Catalog API",
        description="Display name for the application"
    )
    
    app_env: str = Field(
        default="development",
        description="Environment mode: development, staging, production"
    )
    
    debug: bool = Field(
        default=False,
        description="Enable debug mode for verbose logging"
    )
    
    # =========================================================================
    # SERVER SETTINGS
    # =========================================================================
    host: str = Field(
        default="0.0.0.0",
        description="Server bind address"
    )
    
    port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Server port number"
    )
    
    # =========================================================================
    # REDIS SETTINGS
    # =========================================================================
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL"
    )
    
    redis_socket_timeout: float = Field(
        default=5.0,
        gt=0,
        description="Socket timeout for Redis commands in seconds"
    )
    
    redis_health_check_interval: int = Field(
        default=30,
        ge=0,
        description="Interval in seconds for idle connection health checks"
    )
    
    # =========================================================================
    # CATALOG SETTINGS
    # =========================================================================
    seed_on_startup: bool = Field(
        default=True,
        description="Populate the seed catalog when the products hash is empty"
    )
    
    # =========================================================================
    # CORS SETTINGS
    # =========================================================================
    cors_origins: str = Field(
        default='["*"]',
        description="Allowed CORS origins as JSON array string"
    )
    
    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, value: str) -> str:
        """
        Validate and normalize application environment.
        
        Unknown values fall back to ``development``.
        """
        valid_envs = {"development", "staging", "production"}
        normalized = value.lower().strip()
        
        if normalized not in valid_envs:
            logger.warning(
                f"Unknown environment '{value}', defaulting to 'development'"
            )
            return "development"
        
        return normalized
    
    @field_validator("redis_url")
    @classmethod
    def validate_redis_url(cls, value: str) -> str:
        """Only redis://, rediss:// and unix:// URLs are understood by the client."""
        value = value.strip()
        if not value.startswith(("redis://", "rediss://", "unix://")):
            raise ValueError(
                f"Unsupported Redis URL scheme: {value!r}. "
                "Expected redis://, rediss:// or unix://"
            )
        return value
    
    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"
    
    @property
    def cors_origins_list(self) -> List[str]:
        """
        Parse CORS origins from JSON string to list.
        
        Returns:
            List of allowed origin strings
        """
        try:
            origins = json.loads(self.cors_origins)
            if isinstance(origins, list):
                return origins
            return ["*"]
        except json.JSONDecodeError:
            logger.warning(
                f"Invalid CORS origins JSON: {self.cors_origins}, "
                "defaulting to ['*']"
            )
            return ["*"]
    
    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"app_env={self.app_env!r}, "
            f"debug={self.debug})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance (singleton pattern).
    
    Returns:
        Global Settings instance
    """
    settings = Settings()
    
    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")
    
    return settings
