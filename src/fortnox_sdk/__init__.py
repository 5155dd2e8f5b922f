"""Fortnox Python SDK."""

from .config import ClientConfig
from .error_codes import ApiErrorCode
from .errors import (
    ApiError,
    FortnoxError,
    NetworkError,
    ParseError,
    SerializationError,
    ThrottlingError,
    UnspecifiedError,
)
from .gateway import Gateway
from .models import Article, Currency, Customer, Order, OrderRow

__all__ = [
    "ApiError",
    "ApiErrorCode",
    "Article",
    "ClientConfig",
    "Currency",
    "Customer",
    "FortnoxError",
    "Gateway",
    "NetworkError",
    "Order",
    "OrderRow",
    "ParseError",
    "SerializationError",
    "ThrottlingError",
    "UnspecifiedError",
]
