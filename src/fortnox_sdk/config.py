"""Configuration objects for the Fortnox client."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .errors import UnspecifiedError

DEFAULT_BASE_URL = "https://api.fortnox.se/3"


@dataclass(frozen=True)
class ClientConfig:
    access_token: str
    client_secret: str
    client_id: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 60.0
    max_attempts: int = 5
    initial_delay: float = 0.1
    backoff_multiplier: float = 2.0
    backoff_jitter: bool = False
    user_agent: str = "fortnox-sdk-python/0.1.0"

    def __repr__(self) -> str:
        return (
            f"ClientConfig(base_url={self.base_url!r}, timeout={self.timeout}, "
            f"max_attempts={self.max_attempts}, initial_delay={self.initial_delay})"
        )

    @classmethod
    def from_env(cls) -> "ClientConfig":
        token = os.environ.get("FORTNOX_ACCESS_TOKEN")
        secret = os.environ.get("FORTNOX_CLIENT_SECRET")
        if not token or not secret:
            raise UnspecifiedError("FORTNOX_ACCESS_TOKEN and FORTNOX_CLIENT_SECRET must be configured.")

        try:
            timeout = float(os.environ.get("FORTNOX_TIMEOUT", "60"))
            max_attempts = int(os.environ.get("FORTNOX_MAX_ATTEMPTS", "5"))
            initial_delay = float(os.environ.get("FORTNOX_INITIAL_DELAY", "0.1"))
        except ValueError as exc:
            raise UnspecifiedError(f"Invalid numeric Fortnox setting ({exc}).") from exc

        jitter = os.environ.get("FORTNOX_BACKOFF_JITTER", "false").strip().lower() in ("1", "true", "yes", "on")

        return cls(
            access_token=token,
            client_secret=secret,
            client_id=os.environ.get("FORTNOX_CLIENT_ID") or None,
            base_url=os.environ.get("FORTNOX_BASE_URL", DEFAULT_BASE_URL),
            timeout=timeout,
            max_attempts=max_attempts,
            initial_delay=initial_delay,
            backoff_jitter=jitter,
        )


__all__ = ["ClientConfig", "DEFAULT_BASE_URL"]
