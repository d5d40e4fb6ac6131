"""
Client-side validation engine for the site's forms.
"""

from practice_site.validation.engine import validate, validate_field
from practice_site.validation.rule_sets import (
    CONTACT_FORM_RULES,
    LOGIN_RULES,
    make_rule,
)

__all__ = [
    "validate",
    "validate_field",
    "make_rule",
    "LOGIN_RULES",
    "CONTACT_FORM_RULES",
]
