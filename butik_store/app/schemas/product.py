"""
Pydantic models for the product catalogue.

A product belongs to exactly one ``Category`` and carries a
non-negative unit price.  Orders hold references to ``Product``
objects, so a price change is reflected in the total of every order
that contains the product.
"""

from enum import Enum

from pydantic import BaseModel, Field

from .base import new_id


class Category(str, Enum):
    """Product categories for the store."""

    # Technology
    ELECTRONICS = "ELECTRONICS"
    COMPUTERS = "COMPUTERS"
    SMARTPHONES = "SMARTPHONES"
    ACCESSORIES = "ACCESSORIES"
    WEARABLES = "WEARABLES"
    GAMING = "GAMING"

    # Office & work
    OFFICE_SUPPLIES = "OFFICE_SUPPLIES"
    FURNITURE = "FURNITURE"
    STATIONERY = "STATIONERY"
    PRINTERS = "PRINTERS"

    # Home & lifestyle
    HOME_APPLIANCES = "HOME_APPLIANCES"
    KITCHEN = "KITCHEN"
    DECOR = "DECOR"
    LIGHTING = "LIGHTING"

    # Clothing & personal
    FASHION = "FASHION"
    SHOES = "SHOES"
    BEAUTY = "BEAUTY"
    SPORTS = "SPORTS"
    HEALTH = "HEALTH"

    # Misc
    TOYS = "TOYS"
    BOOKS = "BOOKS"
    AUTOMOTIVE = "AUTOMOTIVE"
    GARDEN = "GARDEN"
    STORAGE = "STORAGE"
    PHOTOGRAPHY = "PHOTOGRAPHY"
    NETWORK = "NETWORK"
    PET_SUPPLIES = "PET_SUPPLIES"


class Product(BaseModel):
    """Schema for a catalogue product."""

    id: str = Field(default_factory=new_id, frozen=True, description="Short opaque identifier")
    name: str = Field(..., examples=["Laptop 15\""])
    category: Category = Field(..., examples=[Category.COMPUTERS])
    price: float = Field(..., ge=0, examples=[1199.0], description="Unit price, never negative")

    model_config = {
        "validate_assignment": True,
    }
