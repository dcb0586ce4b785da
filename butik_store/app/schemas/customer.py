"""
Pydantic model for customers.

A customer is referenced by orders through its ``id`` only; the
relation is not stored on the customer side.
"""

from pydantic import BaseModel, Field

from .base import new_id


class Customer(BaseModel):
    id: str = Field(default_factory=new_id, frozen=True, description="Short opaque identifier")
    name: str = Field(..., examples=["Alice"])
    city: str = Field(..., examples=["Stockholm"])

    model_config = {
        "validate_assignment": True,
    }
