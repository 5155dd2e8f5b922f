"""Async client for the Fortnox REST API."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Optional, TypeVar

import httpx

from . import endpoints
from .config import ClientConfig
from .endpoints import Endpoint
from .errors import UnspecifiedError
from .interpreter import interpret
from .models import Article, Customer, Order
from .retry import RetryController, RetryPolicy, Sleep
from .transport import Transport

logger = logging.getLogger("fortnox.gateway")

T = TypeVar("T")

Decode = Callable[[str], T]


class Gateway:
    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._config = config
        try:
            policy = RetryPolicy(
                max_attempts=config.max_attempts,
                initial_delay=config.initial_delay,
                multiplier=config.backoff_multiplier,
                jitter=config.backoff_jitter,
            )
        except ValueError as exc:
            raise UnspecifiedError(f"Invalid retry settings ({exc}).") from exc
        self._retry = RetryController(policy, sleep=sleep)
        self._transport = Transport(config, transport=transport)

    async def __aenter__(self) -> "Gateway":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def _attempt(self, method: str, path: str, decode: Decode[T], body: Optional[Any]) -> T:
        status, text = await self._transport.send(method, path, body)
        return interpret(status, text, decode)

    async def _dispatch(self, method: str, path: str, decode: Decode[T], body: Optional[Any] = None) -> T:
        logger.debug("Dispatching %s %s", method, path)
        return await self._retry.run(
            lambda: self._attempt(method, path, decode, body),
            label=f"{method} {path}",
        )

    async def get(self, path: str, decode: Decode[T]) -> T:
        return await self._dispatch("GET", path, decode)

    async def post(self, path: str, body: Any, decode: Decode[T]) -> T:
        return await self._dispatch("POST", path, decode, body)

    async def put(self, path: str, body: Any, decode: Decode[T]) -> T:
        return await self._dispatch("PUT", path, decode, body)

    async def execute(self, endpoint: Endpoint[Any]) -> Any:
        return await self._dispatch(endpoint.method, endpoint.path, endpoint.decoder(), endpoint.body)

    async def add_customer(self, customer: Customer) -> Customer:
        return await self.execute(endpoints.add_customer(customer))

    async def get_customer(self, customer_number: str) -> Customer:
        return await self.execute(endpoints.get_customer(customer_number))

    async def add_order(self, order: Order) -> Order:
        return await self.execute(endpoints.add_order(order))

    async def get_order(self, document_number: str) -> Order:
        return await self.execute(endpoints.get_order(document_number))

    async def edit_order(self, order: Order) -> Order:
        return await self.execute(endpoints.edit_order(order))

    async def cancel_order(self, document_number: str) -> Order:
        return await self.execute(endpoints.cancel_order(document_number))

    async def get_article(self, article_number: str) -> Article:
        return await self.execute(endpoints.get_article(article_number))

    async def aclose(self) -> None:
        await self._transport.aclose()


__all__ = ["Gateway"]
