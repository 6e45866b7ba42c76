"""
==============================================================================
Product Schemas Module
==============================================================================

Request and response bodies for the catalog endpoints.

Field names are camelCase in JSON, matching the stored document.

==============================================================================
"""

from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from catalog_api.catalog import Product


class ProductCreate(BaseModel):
    """
    Body of a create request.
    
    An ``id`` in the body is ignored; the store assigns one.
    """
    
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )
    
    name: str = Field(..., min_length=1, description="Product name")
    summary: str = Field(default="", description="Short summary")
    description: str = Field(default="", description="Long description")
    image_file: str = Field(default="", description="Image asset reference")
    price: Decimal = Field(..., ge=0, description="Unit price")
    category: str = Field(..., min_length=1, description="Category label")
    
    def to_product(self) -> Product:
        """Build the domain model from the request body."""
        return Product(**self.model_dump())


class ProductUpdate(ProductCreate):
    """Body of an update request. Replaces the whole product."""
    
    id: str = Field(..., min_length=1, description="Identifier of the product to replace")


class ProductDetailResponse(BaseModel):
    """Single product response."""
    success: bool = Field(default=True)
    product: Product


class ProductListResponse(BaseModel):
    """Product list response."""
    success: bool = Field(default=True)
    total: int = Field(ge=0)
    products: List[Product]
    
    @classmethod
    def create(cls, products: List[Product]) -> "ProductListResponse":
        """Wrap a list of products with its count."""
        return cls(total=len(products), products=products)
