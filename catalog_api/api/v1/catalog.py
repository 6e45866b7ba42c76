"""
==============================================================================
Catalog Endpoints
==============================================================================

REST surface over the product store.

Routes:
-------
    GET    /catalog                      all products
    GET    /catalog/{id}                 one product (404 if absent)
    GET    /catalog/name/{name}          products with this exact name
    GET    /catalog/category/{category}  products in this category

Name and category may contain slashes, so both use the path converter.
    POST   /catalog                      create (id assigned by the store)
    PUT    /catalog                      replace, creating if absent
    DELETE /catalog/{id}                 delete (always succeeds)

==============================================================================
"""

from typing import Optional

from fastapi import APIRouter, Depends

from catalog_api.catalog import Product, ProductStore
from catalog_api.core import exceptions
from catalog_api.core.dependencies import get_product_store
from catalog_api.schemas import (
    MessageResponse,
    ProductCreate,
    ProductDetailResponse,
    ProductListResponse,
    ProductUpdate,
)


router = APIRouter(prefix="/catalog", tags=["Catalog"])


class ProductController:
    """Controller for catalog operations."""
    
    def __init__(self, store: ProductStore):
        self._store = store
    
    async def list_products(self) -> ProductListResponse:
        return ProductListResponse.create(await self._store.list_all())
    
    async def get_product(self, product_id: str) -> ProductDetailResponse:
        product = await self._store.get_by_id(product_id)
        return self._detail(product, product_id)
    
    async def get_by_name(self, name: str) -> ProductListResponse:
        return ProductListResponse.create(await self._store.get_by_name(name))
    
    async def get_by_category(self, category: str) -> ProductListResponse:
        return ProductListResponse.create(await self._store.get_by_category(category))
    
    async def create_product(self, body: ProductCreate) -> ProductDetailResponse:
        created = await self._store.create(body.to_product())
        return self._detail(created, None)
    
    async def update_product(self, body: ProductUpdate) -> ProductDetailResponse:
        updated = await self._store.update(body.to_product())
        return self._detail(updated, body.id)
    
    async def delete_product(self, product_id: str) -> MessageResponse:
        await self._store.delete(product_id)
        return MessageResponse(message=f"Product '{product_id}' deleted")
    
    @staticmethod
    def _detail(product: Optional[Product], product_id: Optional[str]) -> ProductDetailResponse:
        # A write read back as None means a concurrent delete won the race.
        if product is None:
            raise exceptions.product_not_found(product_id)
        return ProductDetailResponse(product=product)


@router.get("", response_model=ProductListResponse)
async def list_products(store: ProductStore = Depends(get_product_store)):
    """List every product in the catalog."""
    return await ProductController(store).list_products()


@router.get("/name/{name:path}", response_model=ProductListResponse)
async def get_products_by_name(name: str, store: ProductStore = Depends(get_product_store)):
    """Get products with an exact (case-sensitive) name."""
    return await ProductController(store).get_by_name(name)


@router.get("/category/{category:path}", response_model=ProductListResponse)
async def get_products_by_category(category: str, store: ProductStore = Depends(get_product_store)):
    """Get products in a category (case-sensitive)."""
    return await ProductController(store).get_by_category(category)


@router.get("/{product_id}", response_model=ProductDetailResponse)
async def get_product(product_id: str, store: ProductStore = Depends(get_product_store)):
    """Get a product by id."""
    return await ProductController(store).get_product(product_id)


@router.post("", response_model=ProductDetailResponse, status_code=201)
async def create_product(body: ProductCreate, store: ProductStore = Depends(get_product_store)):
    """Create a product. The store assigns its id."""
    return await ProductController(store).create_product(body)


@router.put("", response_model=ProductDetailResponse)
async def update_product(body: ProductUpdate, store: ProductStore = Depends(get_product_store)):
    """Replace a product, creating it if the id is unknown."""
    return await ProductController(store).update_product(body)


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(product_id: str, store: ProductStore = Depends(get_product_store)):
    """Delete a product. Unknown ids are not an error."""
    return await ProductController(store).delete_product(product_id)
