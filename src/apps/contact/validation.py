"""Contact form validation."""

import re

from .state import ContactForm

MISSING_FIELDS_MESSAGE = "Please fill in your name, email and a short message."
INVALID_EMAIL_MESSAGE = "Please enter a valid email address."

# Searched, not anchored: any value containing an address-like run passes.
EMAIL_PATTERN: re.Pattern[str] = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")


def validate_contact(form: ContactForm) -> str | None:
    """Return the first validation error for ``form``, or None if it is valid."""
    if not form.name or not form.email or not form.remarks:
        return MISSING_FIELDS_MESSAGE
    if not EMAIL_PATTERN.search(form.email):
        return INVALID_EMAIL_MESSAGE
    return None
