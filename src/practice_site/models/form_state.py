"""
Form state models.

A FormState is the snapshot produced by one validation pass. It is
recreated on every submit attempt and never persisted.
"""

from pydantic import BaseModel, Field, model_validator


class FieldState(BaseModel):
    """Validation outcome for one field."""

    value: str = Field(..., description="Raw value that was validated")
    valid: bool = Field(..., description="Whether the value satisfies every rule")
    message: str | None = Field(default=None, description="Error message if invalid")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def message_matches_validity(self) -> "FieldState":
        if self.valid and self.message is not None:
            raise ValueError("A valid field cannot carry an error message")
        if not self.valid and self.message is None:
            raise ValueError("An invalid field needs an error message")
        return self


class FormState(BaseModel):
    """Result of validating a form, keyed by field id in declaration order."""

    fields: dict[str, FieldState] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @property
    def is_valid(self) -> bool:
        """True when every field is valid."""
        return all(state.valid for state in self.fields.values())

    @property
    def invalid_fields(self) -> list[str]:
        """Ids of invalid fields in declaration order."""
        return [field_id for field_id, state in self.fields.items() if not state.valid]

    @property
    def first_error(self) -> str | None:
        """Message of the first invalid field, for pages with one error region."""
        for state in self.fields.values():
            if not state.valid:
                return state.message
        return None

    def get_field(self, field_id: str) -> FieldState:
        """Get the state of a single field."""
        return self.fields[field_id]

    def to_error_dict(self) -> dict[str, str]:
        """Convert errors to a dict mapping field ids to error messages."""
        return {
            field_id: state.message
            for field_id, state in self.fields.items()
            if state.message is not None
        }

    def __bool__(self) -> bool:
        return self.is_valid
