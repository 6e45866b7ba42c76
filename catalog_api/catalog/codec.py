"""
==============================================================================
Product Serialization Module
==============================================================================

Converts products to and from the JSON documents stored as values of the
products hash.

Document Format:
---------------
    {
      "id": "602d2149e773f2a3990b47f5",
      "name": "IPhone X",
      "summary": "...",
      "description": "...",
      "imageFile": "product-1.png",
      "price": "950.00",
      "category": "Smart Phone"
    }

``price`` is written as a decimal string. Numeric prices are also accepted
when reading and are parsed straight into ``Decimal``, never through float.

==============================================================================
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from typing import Optional

from pydantic import ValidationError

from catalog_api.core import exceptions
from .models import Product


# Module logger
logger = logging.getLogger(__name__)


def serialize_product(product: Product) -> str:
    """
    Serialize a product to its stored JSON document.
    
    Args:
        product: Product to serialize
        
    Returns:
        JSON text with camelCase keys and an exact decimal price
    """
    return json.dumps(product.model_dump(mode="json", by_alias=True))


def deserialize_product(raw: str, field: Optional[str] = None) -> Product:
    """
    Parse a stored JSON document back into a product.
    
    Args:
        raw: Stored value
        field: Hash field the value was read from (for error reporting)
        
    Returns:
        Decoded Product
        
    Raises:
        AppException: CORRUPT_PRODUCT_DATA if the value is not a valid
            product document or carries no identifier
    """
    try:
        data = json.loads(raw, parse_float=Decimal)
        product = Product.model_validate(data)
    except (TypeError, ValueError, ValidationError) as e:
        logger.error(f"Corrupt product entry {field!r}: {e}")
        raise exceptions.corrupt_product_data(field, str(e)) from e
    
    if not product.id:
        logger.error(f"Product entry {field!r} has no id")
        raise exceptions.corrupt_product_data(field, "missing id")
    
    return product
