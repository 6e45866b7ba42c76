"""
==============================================================================
Settings Tests
==============================================================================

==============================================================================
"""

import pytest
from pydantic import ValidationError

from catalog_api.config import Settings


class TestSettings:
    """Tests for environment-driven configuration."""
    
    def test_defaults(self):
        """Test defaults point at a local Redis and seed on startup."""
        settings = Settings(_env_file=None)
        assert settings.redis_url == "redis://localhost:6379/0"
        assert settings.seed_on_startup is True
    
    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch):
        """Test environment variables override defaults."""
        monkeypatch.setenv("REDIS_URL", "redis://cache:6380/2")
        monkeypatch.setenv("SEED_ON_STARTUP", "false")
        
        settings = Settings(_env_file=None)
        
        assert settings.redis_url == "redis://cache:6380/2"
        assert settings.seed_on_startup is False
    
    def test_unknown_environment_falls_back(self):
        """Test an unknown app_env is normalized to development."""
        assert Settings(_env_file=None, app_env=" QA ").app_env == "development"
        assert Settings(_env_file=None, app_env="Production").is_production
    
    def test_rejects_non_redis_url(self):
        """Test the Redis URL scheme is validated."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, redis_url="http://localhost:6379")
    
    def test_cors_origins_parsing(self):
        """Test CORS origins fall back to wildcard on bad JSON."""
        assert Settings(_env_file=None, cors_origins='["http://a"]').cors_origins_list == ["http://a"]
        assert Settings(_env_file=None, cors_origins="not json").cors_origins_list == ["*"]
