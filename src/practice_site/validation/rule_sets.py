"""
Field rules for the site's forms.

These mirror the checks in the login and forms pages' inline scripts.
"""

from typing import Any

from practice_site.models.field_rules import FieldRule
from practice_site.validation.constants import (
    EMAIL_PATTERN,
    INTEGER_PATTERN,
    INVALID_EMAIL_MESSAGE,
    INVALID_PHONE_MESSAGE,
    LENGTH_TEMPLATE,
    MAX_LENGTH_TEMPLATE,
    MIN_LENGTH_TEMPLATE,
    PHONE_PATTERN,
    REQUIRED_TEMPLATE,
)

MIN_AGE = 18
MAX_AGE = 120


def make_rule(field_id: str, label: str, **kwargs: Any) -> FieldRule:
    """
    Build a FieldRule, filling unset messages from the default templates.

    Args:
        field_id: Input id.
        label: Human-readable name used in messages.
        **kwargs: Any other FieldRule field.
    """
    min_length = kwargs.get("min_length")
    max_length = kwargs.get("max_length")

    kwargs.setdefault("required_message", REQUIRED_TEMPLATE.format(label=label))
    if min_length is not None and max_length is not None:
        kwargs.setdefault(
            "length_message",
            LENGTH_TEMPLATE.format(label=label, min_length=min_length, max_length=max_length),
        )
    elif min_length is not None:
        kwargs.setdefault("length_message", MIN_LENGTH_TEMPLATE.format(label=label, min_length=min_length))
    elif max_length is not None:
        kwargs.setdefault("length_message", MAX_LENGTH_TEMPLATE.format(label=label, max_length=max_length))
    kwargs.setdefault("error_message", f"Invalid {label.lower()}")

    return FieldRule(field_id=field_id, label=label, **kwargs)


def is_allowed_age(value: str) -> bool:
    """Whole number of years (ASCII digits) within the accepted range."""
    value = value.strip()
    if not (value.isascii() and value.isdigit()):
        return False
    return MIN_AGE <= int(value) <= MAX_AGE


LOGIN_RULES: tuple[FieldRule, ...] = (
    make_rule(
        "username",
        "Username",
        required=True,
        pattern=EMAIL_PATTERN,
        pattern_message=INVALID_EMAIL_MESSAGE,
    ),
    make_rule(
        "password",
        "Password",
        required=True,
        min_length=6,
    ),
)

CONTACT_FORM_RULES: tuple[FieldRule, ...] = (
    make_rule("name", "Name", required=True, min_length=2, max_length=50),
    make_rule(
        "email",
        "Email",
        required=True,
        pattern=EMAIL_PATTERN,
        pattern_message=INVALID_EMAIL_MESSAGE,
    ),
    make_rule("phone", "Phone", pattern=PHONE_PATTERN, pattern_message=INVALID_PHONE_MESSAGE),
    make_rule(
        "age",
        "Age",
        pattern=INTEGER_PATTERN,
        pattern_message="Age must be a whole number",
        custom_check=is_allowed_age,
        custom_message=f"Age must be between {MIN_AGE} and {MAX_AGE}",
    ),
    make_rule("message", "Message", max_length=500),
)
