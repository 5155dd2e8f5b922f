"""Classifies a raw HTTP status and body into a value or an error."""

from __future__ import annotations

from typing import Callable, TypeVar

from pydantic import ValidationError

from .envelopes import ErrorInformation
from .errors import ApiError, SerializationError, ThrottlingError

T = TypeVar("T")

TOO_MANY_REQUESTS = 429


def interpret(status: int, text: str, decode: Callable[[str], T]) -> T:
    if 200 <= status <= 299:
        try:
            return decode(text)
        except (ValidationError, ValueError) as exc:
            raise SerializationError(f'Could not deserialize response from "{text}" ({exc}).') from exc

    if status == TOO_MANY_REQUESTS:
        raise ThrottlingError()

    info = ErrorInformation.decode(status, text).error_information
    raise ApiError(info.code, info.message)


__all__ = ["interpret", "TOO_MANY_REQUESTS"]
