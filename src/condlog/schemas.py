"""Pydantic models for condition payloads coming from a query builder."""

from __future__ import annotations

from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from condlog.errors import ConditionError


class ConditionModel(BaseModel):
    """One query-builder condition.

    ``not`` is accepted as an alias of ``negate``; unrelated keys such as
    ``uid`` or ``type`` are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    source: str
    relation: str
    target: str = ""
    negate: bool = Field(default=False, alias="not")

    @field_validator("target", mode="before")
    @classmethod
    def _target_text(cls, value: Any) -> Any:
        # heading levels and similar targets arrive as JSON numbers
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            if isinstance(value, float) and value.is_integer():
                value = int(value)
            return str(value)
        return value

    @field_validator("source", "relation")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must be non-empty")
        return value


def parse_condition(data: Any) -> ConditionModel:
    try:
        return ConditionModel.model_validate(data)
    except ValidationError as exc:
        raise ConditionError(f"Invalid condition payload: {_summary(exc)}") from exc


def parse_conditions(items: Iterable[Any]) -> list[ConditionModel]:
    models: list[ConditionModel] = []
    for index, item in enumerate(items):
        try:
            models.append(ConditionModel.model_validate(item))
        except ValidationError as exc:
            raise ConditionError(f"Invalid condition at index {index}: {_summary(exc)}") from exc
    return models


def condition_json_schema() -> dict[str, Any]:
    """JSON schema of a condition payload, keyed by the wire names."""

    return ConditionModel.model_json_schema(by_alias=True)


def _summary(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {error.get('msg')}")
    return "; ".join(parts)
