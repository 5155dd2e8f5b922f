"""Pydantic models for the Fortnox resources the client exposes."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_pascal


class Currency(str, Enum):
    NOK = "NOK"
    SEK = "SEK"
    DKK = "DKK"
    ISK = "ISK"
    GBP = "GBP"


class FortnoxModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)

    def to_wire(self) -> dict:
        """Dump with wire names, leaving out optional fields that are unset."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Article(FortnoxModel):
    article_number: str
    description: str


class Customer(FortnoxModel):
    customer_number: Optional[str] = None
    name: str
    address1: str
    address2: Optional[str] = None
    zip_code: str
    city: str
    country_code: str
    comments: Optional[str] = None
    email: Optional[str] = None
    phone1: Optional[str] = None


def _quantity_text(value: Any) -> Any:
    # The cancel endpoint reports quantities as JSON numbers.
    if isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return value


class OrderRow(FortnoxModel):
    article_number: Optional[str] = None
    ordered_quantity: str
    delivered_quantity: str
    description: str
    price: float

    @field_validator("ordered_quantity", "delivered_quantity", mode="before")
    @classmethod
    def _coerce_quantity(cls, value: Any) -> Any:
        return _quantity_text(value)


class Order(FortnoxModel):
    document_number: Optional[str] = None
    customer_number: str
    order_rows: List[OrderRow] = Field(default_factory=list)
    currency: Currency
    vat_included: bool = Field(alias="VATIncluded")
    comments: Optional[str] = None
    delivery_date: date
    order_date: date


__all__ = ["Article", "Currency", "Customer", "FortnoxModel", "Order", "OrderRow"]
