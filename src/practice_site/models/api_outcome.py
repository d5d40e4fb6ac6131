"""Mock API outcome model."""

from typing import Any

from pydantic import BaseModel, Field


class ApiOutcome(BaseModel):
    """What the API demo page renders after a (fake) request."""

    ok: bool = Field(..., description="Whether the request succeeded")
    status: int = Field(..., description="HTTP-style status code")
    records: list[dict[str, Any]] = Field(default_factory=list, description="Fixture records")
    error: str | None = Field(default=None, description="Error text for failed requests")
