"""Result-based construction of Pydantic models."""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ValidationError

from randomsources.result import Failure, Result, Success


TModel = TypeVar("TModel", bound=BaseModel)

__all__: list[str] = ["validate_model", "validate_json"]


def validate_model(model_cls: type[TModel], **data: object) -> Result[TModel, ValidationError]:
    """
    Construct ``model_cls`` from keyword data, surfacing validation errors as a Failure.

    Pydantic raises internally; the exception is caught here, at the boundary,
    so callers can stay expression-oriented.
    """
    try:
        return Success(model_cls(**data))
    except ValidationError as exc:
        return Failure(exc)


def validate_json(model_cls: type[TModel], raw: str | bytes) -> Result[TModel, ValidationError]:
    """Parse and validate a JSON document into ``model_cls``."""
    try:
        return Success(model_cls.model_validate_json(raw))
    except ValidationError as exc:
        return Failure(exc)
