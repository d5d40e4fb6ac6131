"""Dialog result model."""

from enum import Enum

from pydantic import BaseModel, Field


class DialogKind(str, Enum):
    """Kind of native browser dialog."""

    ALERT = "alert"
    CONFIRM = "confirm"
    PROMPT = "prompt"


class DialogResult(BaseModel):
    """Outcome of the most recently closed dialog."""

    kind: DialogKind
    message: str = Field(..., description="Text the dialog displayed")
    accepted: bool = Field(..., description="Whether the user pressed OK")
    input_value: str | None = Field(
        default=None, description="Text entered into a prompt, None otherwise"
    )

    model_config = {"frozen": True}
