"""Generic multi-field form page controller."""

import logging
from typing import Mapping, Sequence

from practice_site.models.field_rules import FieldRule
from practice_site.models.form_state import FieldState, FormState
from practice_site.pages.base import Navigator, PageController
from practice_site.validation import CONTACT_FORM_RULES, validate, validate_field

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Form submitted successfully!"


class FormsPage(PageController):
    """Contact form validated field by field and on submit."""

    path = "/forms/"

    def __init__(self, navigator: Navigator, rules: Sequence[FieldRule] = CONTACT_FORM_RULES):
        super().__init__(navigator)
        self.rules = tuple(rules)
        self._rules_by_id = {rule.field_id: rule for rule in self.rules}
        if len(self._rules_by_id) != len(self.rules):
            raise ValueError("Duplicate field id in form rules")
        self._reset()

    def submit(self, values: Mapping[str, str]) -> FormState:
        self._require_mounted()

        state = validate(self.rules, values)
        self.state = state
        self.field_errors = state.to_error_dict()
        self.submitted = state.is_valid
        self.success_message = SUCCESS_MESSAGE if state.is_valid else None

        logger.info("Form submitted (valid=%s)", state.is_valid)
        return state

    def change(self, field_id: str, value: str) -> FieldState:
        """
        Validate one input as the user edits it.

        Editing discards the last submission's FormState.

        Raises:
            ValueError: If the form has no field with this id.
        """
        self._require_mounted()

        rule = self._rules_by_id.get(field_id)
        if rule is None:
            raise ValueError(f"Unknown field id for this form: {field_id!r}")

        field_state = validate_field(rule, value)
        self.state = None
        self.submitted = False
        self.success_message = None
        if field_state.valid:
            self.field_errors.pop(field_id, None)
        else:
            self.field_errors[field_id] = field_state.message
        return field_state

    def on_teardown(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self.state: FormState | None = None
        self.field_errors: dict[str, str] = {}
        self.submitted = False
        self.success_message: str | None = None
