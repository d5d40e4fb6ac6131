"""
Validation engine.

Evaluates declarative FieldRules against raw input values. Pure: callers
apply the returned FormState to whatever displays it.

Checks run in a fixed order and the first failure wins:
required -> pattern -> length -> custom.
"""

import logging
from typing import Mapping, Sequence

from practice_site.models.field_rules import CheckKind, FieldRule
from practice_site.models.form_state import FieldState, FormState

logger = logging.getLogger(__name__)


def validate_field(rule: FieldRule, value: str | None) -> FieldState:
    """
    Validate a single value against its rule.

    Empty optional fields are always valid; pattern, length and custom
    checks only apply to non-empty input.

    Args:
        rule: The field's validation contract.
        value: Raw input value. None is treated as an empty string.

    Returns:
        FieldState for the value.
    """
    raw = "" if value is None else value
    trimmed = raw.strip()

    if not trimmed:
        if rule.required:
            return _invalid(rule, raw, "required")
        return FieldState(value=raw, valid=True)

    pattern = rule.compiled_pattern
    if pattern is not None and pattern.fullmatch(trimmed) is None:
        return _invalid(rule, raw, "pattern")

    if rule.has_length_bounds:
        length = len(trimmed)
        if rule.min_length is not None and length < rule.min_length:
            return _invalid(rule, raw, "length")
        if rule.max_length is not None and length > rule.max_length:
            return _invalid(rule, raw, "length")

    if rule.custom_check is not None and not rule.custom_check(raw):
        return _invalid(rule, raw, "custom")

    return FieldState(value=raw, valid=True)


def validate(rules: Sequence[FieldRule], values: Mapping[str, str | None]) -> FormState:
    """
    Validate form values against a list of rules.

    Fields are evaluated in the order the rules were declared. Values for
    fields without a rule are ignored; fields without a value are treated
    as empty.

    Args:
        rules: Field rules for the form. Field ids must be unique.
        values: Mapping of field id to raw input value.

    Returns:
        FormState with one entry per rule.

    Raises:
        ValueError: If two rules share a field id.
    """
    fields: dict[str, FieldState] = {}

    for rule in rules:
        if rule.field_id in fields:
            raise ValueError(f"Duplicate field id in form rules: {rule.field_id!r}")
        fields[rule.field_id] = validate_field(rule, values.get(rule.field_id))

    return FormState(fields=fields)


def _invalid(rule: FieldRule, value: str, kind: CheckKind) -> FieldState:
    message = rule.message_for(kind)
    logger.debug("Field %s failed %s check: %s", rule.field_id, kind, message)
    return FieldState(value=value, valid=False, message=message)
