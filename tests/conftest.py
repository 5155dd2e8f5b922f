from __future__ import annotations

import json
from dataclasses import replace
from typing import Callable, List

import httpx
import pytest

from fortnox_sdk.config import ClientConfig
from fortnox_sdk.gateway import Gateway

ORDER_BODY = {
    "Order": {
        "DocumentNumber": "1",
        "CustomerNumber": "2",
        "OrderRows": [],
        "Currency": "SEK",
        "VATIncluded": True,
        "DeliveryDate": "2024-01-01",
        "OrderDate": "2024-01-01",
    }
}


class SleepRecorder:
    def __init__(self) -> None:
        self.calls: List[float] = []

    async def __call__(self, delay: float) -> None:
        self.calls.append(delay)


class RecordingHandler:
    """MockTransport handler that replays queued responses and logs requests."""

    def __init__(self, responses: List[httpx.Response]) -> None:
        self._responses = list(responses)
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if len(self._responses) == 1:
            return self._responses[0]
        return self._responses.pop(0)

    def bodies(self) -> list:
        return [json.loads(r.content) if r.content else None for r in self.requests]


@pytest.fixture()
def config() -> ClientConfig:
    return ClientConfig(access_token="token-123", client_secret="secret-456")


@pytest.fixture()
def sleeper() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture()
def make_gateway(config: ClientConfig, sleeper: SleepRecorder) -> Callable[..., Gateway]:
    def factory(handler: Callable[[httpx.Request], httpx.Response], **overrides) -> Gateway:
        cfg = replace(config, **overrides)
        return Gateway(cfg, transport=httpx.MockTransport(handler), sleep=sleeper)

    return factory
