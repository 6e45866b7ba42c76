"""
==============================================================================
API Integration Tests
==============================================================================

Tests for REST API endpoints.

==============================================================================
"""

from unittest.mock import AsyncMock

import fakeredis
import pytest
from fastapi.testclient import TestClient
from redis.exceptions import ConnectionError as RedisConnectionError

from catalog_api.catalog import PRODUCTS_HASH_KEY
from catalog_api.db.connection import RedisManager


PIXEL = {
    "name": "Pixel 8",
    "summary": "Google phone",
    "description": "Seventh-generation Tensor phone.",
    "imageFile": "product-7.png",
    "price": "599.00",
    "category": "Smart Phone",
}


class TestHealthEndpoints:
    """Tests for health check endpoints."""
    
    def test_health_check(self, client: TestClient):
        """Test health check reports Redis and catalog status."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["components"]["redis"] == "healthy"
        assert data["details"]["products_stored"] == 6
    
    def test_readiness_probe(self, client: TestClient):
        """Test readiness probe."""
        response = client.get("/api/v1/health/ready")
        assert response.status_code == 200
        assert response.json()["ready"] is True
    
    def test_liveness_probe(self, client: TestClient):
        """Test liveness probe."""
        response = client.get("/api/v1/health/live")
        assert response.status_code == 200
        assert response.json()["alive"] is True


class TestCatalogReadEndpoints:
    """Tests for catalog queries."""
    
    def test_list_seeded_catalog(self, client: TestClient):
        """Test startup seeds six products."""
        response = client.get("/api/v1/catalog")
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["total"] == 6
        assert {p["category"] for p in data["products"]} == {
            "Smart Phone", "White Appliances", "Home Kitchen"
        }
    
    def test_get_product(self, client: TestClient):
        """Test fetching a product by id."""
        response = client.get("/api/v1/catalog/602d2149e773f2a3990b47f5")
        assert response.status_code == 200
        product = response.json()["product"]
        assert product["name"] == "IPhone X"
        assert product["imageFile"] == "product-1.png"
        assert product["price"] == "950.00"
    
    def test_get_product_not_found(self, client: TestClient):
        """Test an unknown id is a 404."""
        response = client.get("/api/v1/catalog/unknown")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "PRODUCT_NOT_FOUND"
    
    def test_get_by_category(self, client: TestClient):
        """Test category filter."""
        response = client.get("/api/v1/catalog/category/Smart Phone")
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert sorted(p["name"] for p in data["products"]) == [
            "HTC U11+ Plus", "IPhone X", "Samsung 10"
        ]
    
    def test_get_by_name(self, client: TestClient):
        """Test name filter."""
        response = client.get("/api/v1/catalog/name/LG G7 ThinQ")
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["products"][0]["id"] == "602d2149e773f2a3990b47fa"
    
    def test_get_by_name_no_match(self, client: TestClient):
        """Test an unmatched name is an empty list, not an error."""
        response = client.get("/api/v1/catalog/name/Nokia 3310")
        assert response.status_code == 200
        assert response.json()["products"] == []
    
    def test_labels_with_slashes(self, client: TestClient):
        """Test names and categories containing slashes can be queried back."""
        created = client.post(
            "/api/v1/catalog",
            json={**PIXEL, "name": "A/B", "category": "X/Y"}
        ).json()["product"]
        
        by_name = client.get("/api/v1/catalog/name/A/B")
        by_category = client.get("/api/v1/catalog/category/X%2FY")
        
        assert by_name.status_code == 200
        assert [p["id"] for p in by_name.json()["products"]] == [created["id"]]
        assert by_category.status_code == 200
        assert [p["id"] for p in by_category.json()["products"]] == [created["id"]]
    
    def test_corrupt_entry_is_server_error(self, client: TestClient, redis_server):
        """Test a corrupt stored value surfaces as a 500."""
        raw = fakeredis.FakeRedis(server=redis_server, decode_responses=True)
        raw.hset(PRODUCTS_HASH_KEY, "broken", "{not json")
        
        response = client.get("/api/v1/catalog")
        
        assert response.status_code == 500
        assert response.json()["error"]["code"] == "CORRUPT_PRODUCT_DATA"


class TestCatalogWriteEndpoints:
    """Tests for catalog mutations."""
    
    def test_create_product(self, client: TestClient):
        """Test creating a product assigns a new id."""
        response = client.post("/api/v1/catalog", json={**PIXEL, "id": "ignored"})
        assert response.status_code == 201
        product = response.json()["product"]
        assert product["id"] and product["id"] != "ignored"
        assert product["price"] == "599.00"
        
        phones = client.get("/api/v1/catalog/category/Smart Phone").json()
        assert phones["total"] == 4
    
    def test_create_product_validation(self, client: TestClient):
        """Test a negative price is rejected."""
        response = client.post("/api/v1/catalog", json={**PIXEL, "price": "-1"})
        assert response.status_code == 422
    
    def test_update_product(self, client: TestClient):
        """Test updating a product's description."""
        created = client.post("/api/v1/catalog", json=PIXEL).json()["product"]
        
        response = client.put(
            "/api/v1/catalog",
            json={**created, "description": "Updated"}
        )
        
        assert response.status_code == 200
        assert response.json()["product"]["id"] == created["id"]
        fetched = client.get(f"/api/v1/catalog/{created['id']}").json()["product"]
        assert fetched["description"] == "Updated"
    
    def test_update_requires_id(self, client: TestClient):
        """Test an update body without id is rejected."""
        response = client.put("/api/v1/catalog", json=PIXEL)
        assert response.status_code == 422
    
    def test_delete_product(self, client: TestClient):
        """Test deleting existing and unknown ids."""
        response = client.delete("/api/v1/catalog/602d2149e773f2a3990b47f6")
        assert response.status_code == 200
        assert response.json()["success"] is True
        assert client.get("/api/v1/catalog/602d2149e773f2a3990b47f6").status_code == 404
        
        response = client.delete("/api/v1/catalog/never-existed")
        assert response.status_code == 200
        assert response.json()["success"] is True


class TestStoreFailures:
    """Tests for backing store outages."""
    
    def test_connection_error_is_service_unavailable(
        self,
        client: TestClient,
        monkeypatch: pytest.MonkeyPatch
    ):
        """Test a Redis connection failure surfaces as a 503."""
        monkeypatch.setattr(
            RedisManager().client,
            "hgetall",
            AsyncMock(side_effect=RedisConnectionError("connection refused"))
        )
        
        response = client.get("/api/v1/catalog")
        
        assert response.status_code == 503
        assert response.json()["error"]["code"] == "STORE_UNAVAILABLE"
