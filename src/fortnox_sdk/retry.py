"""Exponential backoff for throttled requests."""

from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, TypeVar

from .errors import ThrottlingError

logger = logging.getLogger("fortnox.retry")

T = TypeVar("T")

Sleep = Callable[[float], Awaitable[None]]


@dataclass(frozen=True)
class RetryPolicy:
    max_attempts: int = 5
    initial_delay: float = 0.1
    multiplier: float = 2.0
    jitter: bool = False

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.initial_delay < 0:
            raise ValueError("initial_delay must not be negative")

    def delays(self) -> list[float]:
        """Waits inserted between attempts when every attempt is throttled."""
        return [self.initial_delay * self.multiplier**n for n in range(self.max_attempts - 1)]


class RetryController:
    """Re-runs an attempt while it raises :class:`ThrottlingError`.

    Any other exception, and any successful result, ends the loop at once.
    The delay starts at ``initial_delay`` and is multiplied after every
    wait; it has no ceiling. Jitter, when enabled, scales each wait by a
    factor drawn from [0.75, 1.25).
    """

    def __init__(
        self,
        policy: RetryPolicy,
        *,
        sleep: Sleep = asyncio.sleep,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._policy = policy
        self._sleep = sleep
        self._rng = rng or random.Random()

    @property
    def policy(self) -> RetryPolicy:
        return self._policy

    def _wait_for(self, delay: float) -> float:
        if not self._policy.jitter:
            return delay
        return delay * (0.75 + self._rng.random() / 2)

    async def run(self, attempt: Callable[[], Awaitable[T]], *, label: str = "request") -> T:
        delay = self._policy.initial_delay
        for number in range(1, self._policy.max_attempts + 1):
            try:
                return await attempt()
            except ThrottlingError:
                if number >= self._policy.max_attempts:
                    logger.error("Throttled on all %s attempts for %s", number, label)
                    raise
                wait = self._wait_for(delay)
                logger.warning(
                    "Throttled on attempt %s/%s for %s; retrying in %.3fs",
                    number,
                    self._policy.max_attempts,
                    label,
                    wait,
                )
                await self._sleep(wait)
                delay *= self._policy.multiplier
        raise ThrottlingError()  # pragma: no cover - loop always returns or raises


__all__ = ["RetryController", "RetryPolicy", "Sleep"]
