"""Login page controller."""

import logging
from typing import Sequence

from practice_site.config import get_config
from practice_site.models.field_rules import FieldRule
from practice_site.models.form_state import FormState
from practice_site.pages.base import Navigator, PageController
from practice_site.validation import LOGIN_RULES, validate

logger = logging.getLogger(__name__)


class LoginPage(PageController):
    """
    Login form with username and password.

    Every field error is exposed through ``field_errors``; the page's single
    banner shows only the first one. A valid submission navigates to the
    welcome page.
    """

    path = "/auth/login.html"

    def __init__(
        self,
        navigator: Navigator,
        rules: Sequence[FieldRule] = LOGIN_RULES,
        welcome_path: str | None = None,
    ):
        super().__init__(navigator)
        self.rules = tuple(rules)
        self.welcome_path = welcome_path or get_config().welcome_path
        self.state: FormState | None = None
        self.field_errors: dict[str, str] = {}
        self.error_banner: str | None = None

    def submit(self, username: str, password: str) -> FormState:
        """Validate the credentials and navigate on success."""
        self._require_mounted()

        state = validate(self.rules, {"username": username, "password": password})
        self.state = state
        self.field_errors = state.to_error_dict()
        self.error_banner = state.first_error

        if state.is_valid:
            logger.info("Login form valid; redirecting to %s", self.welcome_path)
            self.navigate(self.welcome_path)
        else:
            logger.info("Login form invalid: %s", ", ".join(state.invalid_fields))
        return state

    def on_teardown(self) -> None:
        self.state = None
        self.field_errors = {}
        self.error_banner = None
