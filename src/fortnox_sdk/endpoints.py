"""Request builders for the supported Fortnox resources.

Each builder is a pure function returning an :class:`Endpoint`; nothing
here touches the network.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, Type, TypeVar
from urllib.parse import quote

from .envelopes import ResourceDecoder, wrap
from .errors import ParseError, SerializationError
from .models import Article, Customer, FortnoxModel, Order

M = TypeVar("M", bound=FortnoxModel)


@dataclass(frozen=True)
class Endpoint(Generic[M]):
    method: str
    path: str
    response_key: str
    model: Type[M]
    body: Optional[Dict[str, Any]] = None

    def decoder(self) -> ResourceDecoder[M]:
        return ResourceDecoder(self.response_key, self.model)


def _segment(value: str, what: str) -> str:
    if value is None or not str(value).strip():
        raise ParseError(f"A {what} is required.")
    return quote(str(value), safe="")


def add_customer(customer: Customer) -> Endpoint[Customer]:
    return Endpoint("POST", "/customers", "Customer", Customer, wrap("Customer", customer))


def get_customer(customer_number: str) -> Endpoint[Customer]:
    return Endpoint("GET", f"/customers/{_segment(customer_number, 'customer number')}", "Customer", Customer)


def add_order(order: Order) -> Endpoint[Order]:
    return Endpoint("POST", "/orders", "Order", Order, wrap("Order", order))


def get_order(document_number: str) -> Endpoint[Order]:
    return Endpoint("GET", f"/orders/{_segment(document_number, 'document number')}", "Order", Order)


def edit_order(order: Order) -> Endpoint[Order]:
    if not order.document_number:
        raise SerializationError("Cannot edit an order with no document number.")
    path = f"/orders/{_segment(order.document_number, 'document number')}"
    return Endpoint("PUT", path, "Order", Order, wrap("Order", order))


def cancel_order(document_number: str) -> Endpoint[Order]:
    path = f"/orders/{_segment(document_number, 'document number')}/cancel"
    return Endpoint("PUT", path, "Order", Order, {})


def get_article(article_number: str) -> Endpoint[Article]:
    return Endpoint("GET", f"/articles/{_segment(article_number, 'article number')}", "Article", Article)


__all__ = [
    "Endpoint",
    "add_customer",
    "add_order",
    "cancel_order",
    "edit_order",
    "get_article",
    "get_customer",
    "get_order",
]
