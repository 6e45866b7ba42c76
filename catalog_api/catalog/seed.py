"""
Seed catalog written to an empty products hash.

Identifiers are fixed so that re-seeding overwrites the same fields with
the same values.
"""

from decimal import Decimal
from typing import Tuple

from .models import Product


_PHONE_SUMMARY = (
    "This phone is the company's biggest change to its flagship smartphone "
    "in years. It includes a borderless."
)

_LOREM = (
    "Lorem ipsum dolor sit amet, consectetur adipisicing elit. Ut, tenetur "
    "natus doloremque laborum quos iste ipsum rerum obcaecati impedit odit "
    "illo dolorum ab tempora nihil dicta earum fugiat. Temporibus, voluptatibus."
)

_DESCRIPTION = f"{_LOREM} {_LOREM}"


SEED_PRODUCTS: Tuple[Product, ...] = (
    Product(
        id="602d2149e773f2a3990b47f5",
        name="IPhone X",
        summary=_PHONE_SUMMARY,
        description=_DESCRIPTION,
        image_file="product-1.png",
        price=Decimal("950.00"),
        category="Smart Phone",
    ),
    Product(
        id="602d2149e773f2a3990b47f6",
        name="Samsung 10",
        summary=_PHONE_SUMMARY,
        description=_DESCRIPTION,
        image_file="product-2.png",
        price=Decimal("840.00"),
        category="Smart Phone",
    ),
    Product(
        id="602d2149e773f2a3990b47f7",
        name="Huawei Plus",
        summary=_PHONE_SUMMARY,
        description=_DESCRIPTION,
        image_file="product-3.png",
        price=Decimal("650.00"),
        category="White Appliances",
    ),
    Product(
        id="602d2149e773f2a3990b47f8",
        name="Xiaomi Mi 9",
        summary=_PHONE_SUMMARY,
        description=_DESCRIPTION,
        image_file="product-4.png",
        price=Decimal("470.00"),
        category="White Appliances",
    ),
    Product(
        id="602d2149e773f2a3990b47f9",
        name="HTC U11+ Plus",
        summary=_PHONE_SUMMARY,
        description=_DESCRIPTION,
        image_file="product-5.png",
        price=Decimal("380.00"),
        category="Smart Phone",
    ),
    Product(
        id="602d2149e773f2a3990b47fa",
        name="LG G7 ThinQ",
        summary=_PHONE_SUMMARY,
        description=_DESCRIPTION,
        image_file="product-6.png",
        price=Decimal("240.00"),
        category="Home Kitchen",
    ),
)
