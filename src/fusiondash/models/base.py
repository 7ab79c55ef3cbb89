"""Base class for entity rows read from the store."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class Entity(BaseModel):
    """A normalized row, validated once at the store boundary.

    Unknown columns are ignored. A ``None`` coming back for a column that has a
    non-null default (SQLite NULLs, sparse snapshot rows) is replaced by that
    default, so composers never see ``None`` where a string or number is
    declared.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is not None or info.field_name is None:
            return value
        field = cls.model_fields[info.field_name]
        if field.is_required():
            return value
        return field.get_default(call_default_factory=True)
