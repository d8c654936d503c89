"""Pydantic schemas for request and response models.

The receipt schemas mirror the wire format exactly: money amounts and
dates stay strings at the boundary and are only interpreted by the rule
engine, which tolerates values it cannot parse. Decoding is therefore
deliberately loose about *content* and strict about *types*: a missing
or ``null`` field becomes an empty value, but a number where a string
is expected is rejected.
"""

from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Item(BaseModel):
    """Individual line item on a receipt."""

    model_config = ConfigDict(populate_by_name=True)

    short_description: str = Field(default="", alias="shortDescription")
    price: str = ""

    @field_validator("short_description", "price", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class Receipt(BaseModel):
    """A submitted purchase receipt."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "retailer": "Target",
                "purchaseDate": "2022-01-01",
                "purchaseTime": "13:01",
                "items": [
                    {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
                    {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
                ],
                "total": "18.74",
            }
        },
    )

    retailer: str = ""
    purchase_date: str = Field(default="", alias="purchaseDate")
    purchase_time: str = Field(default="", alias="purchaseTime")
    items: List[Item] = Field(default_factory=list)
    total: str = ""

    @field_validator("retailer", "purchase_date", "purchase_time", "total", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("items", mode="before")
    @classmethod
    def _null_items(cls, value: Any) -> Any:
        return [] if value is None else value


class ReceiptProcessResponse(BaseModel):
    """Identifier minted for an accepted receipt."""

    id: str


class ReceiptPointsResponse(BaseModel):
    """Points awarded to a previously processed receipt."""

    points: int
