"""Exception hierarchy raised by the Fortnox client."""

from __future__ import annotations

from .error_codes import ApiErrorCode


class FortnoxError(Exception):
    """Base class for every failure produced by the client."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class UnspecifiedError(FortnoxError):
    """Construction-time or otherwise unclassified failure."""


class ParseError(FortnoxError):
    """Caller input could not be parsed before anything was sent."""


class SerializationError(FortnoxError):
    """A request body could not be encoded or a response body decoded."""


class NetworkError(FortnoxError):
    """The HTTP exchange did not complete (DNS, connect, TLS, timeout)."""


class ApiError(FortnoxError):
    """Non-2xx response other than 429, carrying the remote error code."""

    def __init__(self, code: ApiErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code

    def __repr__(self) -> str:
        return f"ApiError(code={self.code.name}, message={self.message!r})"


class ThrottlingError(FortnoxError):
    """HTTP 429. Retried by the gateway until the attempt bound is spent."""

    def __init__(self, message: str = "Throttling.") -> None:
        super().__init__(message)


__all__ = [
    "FortnoxError",
    "UnspecifiedError",
    "ParseError",
    "SerializationError",
    "NetworkError",
    "ApiError",
    "ThrottlingError",
]
