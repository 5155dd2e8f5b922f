"""Authenticated HTTP transport for the Fortnox API."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional, Tuple

import httpx

from .config import ClientConfig
from .errors import NetworkError, SerializationError, UnspecifiedError

logger = logging.getLogger("fortnox.transport")

UNREADABLE_BODY = "Could not retrieve body text."


def _valid_header_value(value: str) -> bool:
    return all(ch == "\t" or 32 <= ord(ch) < 127 for ch in value)


class Transport:
    """Single-attempt request sender.

    The underlying ``httpx.AsyncClient`` is configured once and never
    mutated, so one instance can serve any number of concurrent requests.
    """

    def __init__(self, config: ClientConfig, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self._config = config
        headers = self._headers()
        try:
            base_url = httpx.URL(config.base_url)
        except (httpx.InvalidURL, TypeError) as exc:
            raise UnspecifiedError(f"Could not create HTTP client ({exc}).") from exc
        if base_url.scheme != "https":
            raise UnspecifiedError(f"Could not create HTTP client (base URL {config.base_url!r} is not https).")
        try:
            self._client = httpx.AsyncClient(
                base_url=base_url,
                headers=headers,
                timeout=config.timeout,
                transport=transport,
            )
        except (TypeError, ValueError) as exc:
            raise UnspecifiedError(f"Could not create HTTP client ({exc}).") from exc

    def _headers(self) -> Dict[str, str]:
        for name, value in (("Access-Token", self._config.access_token), ("Client-Secret", self._config.client_secret)):
            if not _valid_header_value(value):
                raise UnspecifiedError(f"Could not create auth header (invalid {name} value).")
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": self._config.user_agent,
            "Access-Token": self._config.access_token,
            "Client-Secret": self._config.client_secret,
        }

    async def send(self, method: str, path: str, body: Optional[Any] = None) -> Tuple[int, str]:
        """Perform one HTTP exchange and return ``(status, body text)``."""
        content = None
        if body is not None:
            try:
                content = json.dumps(body, separators=(",", ":"))
            except (TypeError, ValueError) as exc:
                raise SerializationError(f"Could not serialize request body ({exc}).") from exc

        try:
            request = self._client.build_request(method, path, content=content)
        except httpx.InvalidURL as exc:
            raise NetworkError(f"Could not send request ({exc}).") from exc
        if request.url.scheme != "https":
            raise NetworkError(f"Could not send request (refusing non-https URL {request.url}).")

        try:
            response = await self._client.send(request, stream=True)
        except httpx.HTTPError as exc:
            logger.warning("Request failed method=%s path=%s error=%s", method, path, exc)
            raise NetworkError(f"Could not send request ({exc}).") from exc

        # Body read failures keep the status; only the text is replaced.
        try:
            await response.aread()
            text = response.text
        except httpx.HTTPError as exc:
            logger.warning("Unreadable body method=%s path=%s status=%s error=%s", method, path, response.status_code, exc)
            text = UNREADABLE_BODY
        finally:
            await response.aclose()
        logger.debug("Response method=%s path=%s status=%s", method, path, response.status_code)
        return response.status_code, text

    async def aclose(self) -> None:
        await self._client.aclose()


__all__ = ["Transport", "UNREADABLE_BODY"]
