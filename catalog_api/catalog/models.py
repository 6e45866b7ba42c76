"""
==============================================================================
Product Models Module
==============================================================================

Pydantic model for catalog items.

Attribute names are snake_case in Python and camelCase on the wire
(``image_file`` <-> ``imageFile``). Both spellings are accepted on input.

==============================================================================
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Product(BaseModel):
    """
    Product record stored in the catalog.
    
    Attributes:
        id: Store-assigned identifier, immutable once created
        name: Display name (not unique)
        summary: Short description
        description: Long-form description
        image_file: Reference to an external image asset
        price: Non-negative fixed-point price, currency-agnostic
        category: Free-form classification label (not unique)
    """
    
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
    
    id: Optional[str] = Field(default=None, description="Product identifier")
    name: str = Field(..., description="Product name")
    summary: str = Field(default="", description="Short summary")
    description: str = Field(default="", description="Long description")
    image_file: str = Field(default="", description="Image asset reference")
    price: Decimal = Field(..., ge=0, description="Unit price")
    category: str = Field(..., description="Category label")
