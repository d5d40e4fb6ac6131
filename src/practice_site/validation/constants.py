"""
Constants for the validation engine.

Patterns and message templates shared by the page rule sets and the
client-side scripts in the static site. Keep the two in sync.
"""

# Simple email shape: something@something.tld
EMAIL_PATTERN = r"[^\s@]+@[^\s@]+\.[^\s@]+"

# Optional leading +, then 7-15 ASCII digits
PHONE_PATTERN = r"\+?[0-9]{7,15}"

# Whole numbers only, ASCII digits
INTEGER_PATTERN = r"[0-9]+"

# Default message templates
REQUIRED_TEMPLATE = "{label} is required"
LENGTH_TEMPLATE = "{label} must be between {min_length} and {max_length} characters"
MIN_LENGTH_TEMPLATE = "{label} must be at least {min_length} characters"
MAX_LENGTH_TEMPLATE = "{label} must be at most {max_length} characters"

INVALID_EMAIL_MESSAGE = "Invalid email format"
INVALID_PHONE_MESSAGE = "Invalid phone number"
