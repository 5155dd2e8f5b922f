"""Request and response envelopes shared by every endpoint.

Fortnox wraps each resource under a single PascalCase key, e.g.
``{"Order": {...}}``, and reports failures as
``{"ErrorInformation": {"Error": 1, "Message": "...", "Code": 2000106}}``.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, Generic, Type, TypeVar

from pydantic import BaseModel, Field, ValidationError, create_model, field_validator

from .error_codes import ApiErrorCode
from .errors import SerializationError
from .models import FortnoxModel

T = TypeVar("T", bound=BaseModel)


class ApiErrorBody(BaseModel):
    error: int = Field(alias="Error")
    message: str = Field(alias="Message")
    code: ApiErrorCode = Field(alias="Code")

    @field_validator("code", mode="before")
    @classmethod
    def _fallback_code(cls, value: Any) -> ApiErrorCode:
        return ApiErrorCode.parse(value)


class ErrorInformation(BaseModel):
    error_information: ApiErrorBody = Field(alias="ErrorInformation")

    @classmethod
    def unknown(cls, status: int, text: str) -> "ErrorInformation":
        body = ApiErrorBody.model_construct(
            error=0,
            message=f"Unknown error ({status}: {text})",
            code=ApiErrorCode.UNKNOWN,
        )
        return cls.model_construct(error_information=body)

    @classmethod
    def decode(cls, status: int, text: str) -> "ErrorInformation":
        try:
            return cls.model_validate_json(text)
        except ValidationError:
            return cls.unknown(status, text)


@lru_cache(maxsize=None)
def _envelope_model(key: str, model: Type[BaseModel]) -> Type[BaseModel]:
    return create_model(
        f"{key}Envelope",
        payload=(model, Field(alias=key)),
    )


class ResourceDecoder(Generic[T]):
    """Decodes ``{"<key>": {...}}`` response text into ``model``."""

    def __init__(self, key: str, model: Type[T]) -> None:
        self.key = key
        self.model = model
        self._envelope = _envelope_model(key, model)

    def __call__(self, text: str) -> T:
        return self._envelope.model_validate_json(text).payload  # type: ignore[attr-defined]

    def __repr__(self) -> str:
        return f"ResourceDecoder({self.key!r}, {self.model.__name__})"


def wrap(key: str, resource: FortnoxModel) -> Dict[str, Any]:
    try:
        return {key: resource.to_wire()}
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Could not serialize {key} ({exc}).") from exc


__all__ = ["ApiErrorBody", "ErrorInformation", "ResourceDecoder", "wrap"]
