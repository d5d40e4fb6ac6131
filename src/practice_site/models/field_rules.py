"""
Field rule models for client-side form validation.

A FieldRule is the declarative contract for one form input. Rules are
authored per page, never change once the form is defined, and can be
loaded from the camelCase JSON shape used by the page scripts.
"""

import re
from typing import Callable, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

CheckKind = Literal["required", "pattern", "length", "custom"]


class FieldRule(BaseModel):
    """Validation contract for a single form input."""

    field_id: str = Field(..., alias="fieldId", min_length=1, description="Input id, unique within a form")
    label: str | None = Field(default=None, description="Human-readable field name")
    required: bool = Field(default=False, description="Whether an empty value fails")
    pattern: str | None = Field(default=None, description="Regex the whole value must match")
    min_length: int | None = Field(default=None, alias="minLength", ge=0)
    max_length: int | None = Field(default=None, alias="maxLength", ge=0)
    custom_check: Callable[[str], bool] | None = Field(
        default=None,
        alias="customCheck",
        exclude=True,
        description="Predicate over the raw value",
    )
    error_message: str = Field(
        default="Invalid value",
        alias="errorMessage",
        description="Fallback message for any failed check",
    )

    # Per-check overrides
    required_message: str | None = Field(default=None, alias="requiredMessage")
    pattern_message: str | None = Field(default=None, alias="patternMessage")
    length_message: str | None = Field(default=None, alias="lengthMessage")
    custom_message: str | None = Field(default=None, alias="customMessage")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("pattern")
    @classmethod
    def pattern_compiles(cls, v: str | None) -> str | None:
        if v is not None:
            try:
                re.compile(v)
            except re.error as e:
                raise ValueError(f"Invalid pattern {v!r}: {e}") from e
        return v

    @model_validator(mode="after")
    def length_bounds_ordered(self) -> "FieldRule":
        if (
            self.min_length is not None
            and self.max_length is not None
            and self.min_length > self.max_length
        ):
            raise ValueError(
                f"min_length ({self.min_length}) exceeds max_length ({self.max_length})"
            )
        return self

    @property
    def compiled_pattern(self) -> re.Pattern[str] | None:
        """Compiled form of ``pattern`` (the re module caches compilation)."""
        return re.compile(self.pattern) if self.pattern is not None else None

    @property
    def has_length_bounds(self) -> bool:
        return self.min_length is not None or self.max_length is not None

    def message_for(self, kind: CheckKind) -> str:
        """Get the message shown when the given check fails."""
        override = {
            "required": self.required_message,
            "pattern": self.pattern_message,
            "length": self.length_message,
            "custom": self.custom_message,
        }[kind]
        return override if override is not None else self.error_message
