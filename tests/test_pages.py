"""Tests for page controllers."""

import pytest

from practice_site.config import PACKAGED_SITE_DIR
from practice_site.dialogs import ScriptedDialogPort
from practice_site.errors import PageNotMountedError
from practice_site.fixtures import FixtureLoader
from practice_site.pages import (
    AlertsPage,
    ApiPage,
    DynamicPage,
    FormsPage,
    LoginPage,
)
from practice_site.pages.dynamic import CONTENT_BLOCK


class TestLoginPage:
    """Tests for the login page."""

    def test_requires_mount(self, navigator):
        with pytest.raises(PageNotMountedError):
            LoginPage(navigator).submit("a", "b")

    def test_empty_credentials_stay_on_page(self, navigator):
        page = LoginPage(navigator).mount()
        state = page.submit("", "")

        assert not state.is_valid
        assert page.field_errors == {
            "username": "Username is required",
            "password": "Password is required",
        }
        assert page.error_banner == "Username is required"
        assert navigator.history == ["/"]
        assert page.mounted

    def test_valid_credentials_navigate_to_welcome(self, navigator):
        page = LoginPage(navigator).mount()
        state = page.submit("test@example.com", "password123")

        assert state.is_valid
        assert navigator.current == "/auth/welcome.html"
        assert not page.mounted

    def test_custom_welcome_path(self, navigator):
        page = LoginPage(navigator, welcome_path="/home").mount()
        page.submit("test@example.com", "password123")
        assert navigator.current == "/home"

    def test_resubmit_replaces_errors(self, navigator):
        page = LoginPage(navigator).mount()
        page.submit("", "")
        page.submit("bob", "password123")
        assert page.field_errors == {"username": "Invalid email format"}
        assert page.error_banner == "Invalid email format"


class TestFormsPage:
    """Tests for the forms page."""

    VALID = {"name": "Alice", "email": "user@example.com"}

    def test_valid_submission(self, navigator):
        page = FormsPage(navigator).mount()
        state = page.submit(self.VALID)

        assert state.is_valid
        assert page.submitted
        assert page.success_message == "Form submitted successfully!"
        assert page.field_errors == {}

    def test_invalid_email(self, navigator):
        page = FormsPage(navigator).mount()
        page.submit({**self.VALID, "email": "not-an-email"})

        assert not page.submitted
        assert page.success_message is None
        assert page.field_errors == {"email": "Invalid email format"}

    def test_change_discards_form_state(self, navigator):
        page = FormsPage(navigator).mount()
        page.submit(self.VALID)

        field_state = page.change("email", "oops")
        assert not field_state.valid
        assert page.state is None
        assert not page.submitted
        assert page.field_errors == {"email": "Invalid email format"}

        page.change("email", "user@example.com")
        assert page.field_errors == {}

    def test_change_unknown_field(self, navigator):
        page = FormsPage(navigator).mount()
        with pytest.raises(ValueError, match="nickname"):
            page.change("nickname", "x")

    def test_teardown_clears_state(self, navigator):
        page = FormsPage(navigator).mount()
        page.submit({})
        page.teardown()
        page.teardown()

        assert page.field_errors == {}
        assert page.state is None
        with pytest.raises(PageNotMountedError):
            page.submit(self.VALID)


class TestDynamicPage:
    """Tests for the dynamic content page."""

    def test_single_load(self, navigator, scheduler):
        page = DynamicPage(navigator, scheduler, delay=2.0, jitter=0.0).mount()
        assert page.visible_text is None

        assert page.click_load()
        assert page.visible_text == "Loading..."

        scheduler.advance(2.0)
        assert page.visible_text == CONTENT_BLOCK
        assert page.controller.load_count == 1

    def test_rapid_clicks_load_once(self, navigator, scheduler):
        page = DynamicPage(navigator, scheduler, delay=2.0, jitter=0.0).mount()
        page.click_load()
        assert not page.click_load()

        scheduler.advance(2.0)
        assert page.controller.load_count == 1

    def test_navigation_cancels_pending_load(self, navigator, scheduler):
        page = DynamicPage(navigator, scheduler, delay=2.0, jitter=0.0).mount()
        page.click_load()
        page.navigate("/")

        scheduler.advance(2.0)
        assert page.controller.load_count == 0
        assert navigator.current == "/"


class TestAlertsPage:
    """Tests for the alerts page."""

    def test_alert(self, navigator):
        port = ScriptedDialogPort()
        page = AlertsPage(navigator, port).mount()
        assert page.click_alert() == "You successfully clicked an alert"
        assert port.shown[-1][1] == "I am a JS Alert"

    def test_confirm(self, navigator):
        port = ScriptedDialogPort()
        port.queue_confirm(True)
        port.queue_confirm(False)
        page = AlertsPage(navigator, port).mount()

        assert page.click_confirm() == "You clicked: Ok"
        assert page.click_confirm() == "You clicked: Cancel"
        assert page.dialogs.last_result.accepted is False

    def test_prompt(self, navigator):
        port = ScriptedDialogPort()
        port.queue_prompt("hello")
        port.queue_prompt(None)
        page = AlertsPage(navigator, port).mount()

        assert page.click_prompt() == "You entered: hello"
        assert page.click_prompt() == "You entered: null"


class TestApiPage:
    """Tests for the mock API page."""

    def test_fetch_users(self, navigator):
        page = ApiPage(navigator, FixtureLoader(PACKAGED_SITE_DIR)).mount()
        outcome = page.fetch_users()

        assert outcome.ok
        assert outcome.status == 200
        assert len(outcome.records) == 5
        assert {"id", "name", "email"} <= set(outcome.records[0])

    def test_fetch_broken(self, navigator):
        page = ApiPage(navigator, FixtureLoader(PACKAGED_SITE_DIR)).mount()
        outcome = page.fetch_broken()

        assert not outcome.ok
        assert outcome.status == 500
        assert outcome.error == "Internal Server Error"
        assert page.outcome is outcome
