"""
practice-site: a static training website for browser automation.

The pages exercise common UI widgets (forms, tables, drag-and-drop,
iframes, shadow DOM, alerts, upload/download, a mock API). This package
holds the behavior behind those pages as a headless model, plus a small
server for local practice.

Simple Usage:
    from practice_site import validate, LOGIN_RULES

    state = validate(LOGIN_RULES, {"username": "", "password": ""})
    state.is_valid        # False
    state.first_error     # "Username is required"

Page Controllers:
    from practice_site import HistoryNavigator, LoginPage

    navigator = HistoryNavigator()
    page = LoginPage(navigator).mount()
    page.submit("test@example.com", "password123")
    navigator.current     # "/auth/welcome.html"

Serving the site:
    python run_site_server.py --port 8000
"""

from practice_site.dialogs import (
    DialogPort,
    DialogTrigger,
    ScriptedDialogPort,
)
from practice_site.dynamic import (
    AsyncioScheduler,
    ContentState,
    DynamicContentController,
)
from practice_site.errors import (
    DialogScriptError,
    FixtureError,
    PageNotMountedError,
    PracticeSiteError,
)
from practice_site.fixtures import FixtureLoader
from practice_site.models import (
    ApiOutcome,
    DialogKind,
    DialogResult,
    FieldRule,
    FieldState,
    FormState,
)
from practice_site.pages import (
    AlertsPage,
    ApiPage,
    DynamicPage,
    FormsPage,
    HistoryNavigator,
    LoginPage,
)
from practice_site.validation import (
    CONTACT_FORM_RULES,
    LOGIN_RULES,
    make_rule,
    validate,
    validate_field,
)

__all__ = [
    # Validation
    "validate",
    "validate_field",
    "make_rule",
    "LOGIN_RULES",
    "CONTACT_FORM_RULES",
    "FieldRule",
    "FieldState",
    "FormState",
    # Dynamic content
    "AsyncioScheduler",
    "ContentState",
    "DynamicContentController",
    # Dialogs
    "DialogKind",
    "DialogPort",
    "DialogResult",
    "DialogTrigger",
    "ScriptedDialogPort",
    # Pages
    "AlertsPage",
    "ApiPage",
    "DynamicPage",
    "FormsPage",
    "HistoryNavigator",
    "LoginPage",
    # Mock API
    "ApiOutcome",
    "FixtureLoader",
    # Errors
    "PracticeSiteError",
    "PageNotMountedError",
    "DialogScriptError",
    "FixtureError",
]

__version__ = "0.1.0"
