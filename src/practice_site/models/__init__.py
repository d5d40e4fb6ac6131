"""
Data models for the practice site.

This module contains Pydantic models for:
- Field rules (declarative validation contracts)
- Form state (validation snapshots)
- Dialog results
- Mock API outcomes
"""

from practice_site.models.api_outcome import ApiOutcome
from practice_site.models.dialog_result import DialogKind, DialogResult
from practice_site.models.field_rules import FieldRule
from practice_site.models.form_state import FieldState, FormState

__all__ = [
    # Validation
    "FieldRule",
    "FieldState",
    "FormState",
    # Dialogs
    "DialogKind",
    "DialogResult",
    # Mock API
    "ApiOutcome",
]
