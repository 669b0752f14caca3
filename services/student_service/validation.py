"""Field predicates for student records."""

from __future__ import annotations

import re
from typing import TypeGuard

from email_validator import EmailNotValidError, validate_email

_REGISTRATION_NUMBER = re.compile(r"S\d{3}")
_LETTERS_AND_WHITESPACE = re.compile(r"[a-zA-Z\s]+")
_CONTACT = re.compile(r"\d{3}-\d{7}")

MIN_ADDRESS_LENGTH = 3


def is_not_blank(value: str | None) -> TypeGuard[str]:
    return value is not None and bool(value.strip())


def is_registration_number(value: str) -> bool:
    """``S`` followed by exactly three digits, e.g. ``S001``."""
    return _REGISTRATION_NUMBER.fullmatch(value) is not None


def is_letters_and_whitespace(value: str) -> bool:
    return _LETTERS_AND_WHITESPACE.fullmatch(value) is not None


def has_min_length(value: str, min_length: int = MIN_ADDRESS_LENGTH) -> bool:
    return len(value) >= min_length


def is_contact_number(value: str) -> bool:
    """Three digits, a dash, seven digits: ``071-1234567``."""
    return _CONTACT.fullmatch(value) is not None


def is_email(value: str) -> bool:
    """
    Syntax-only address check.

    Dotless domains (``a@b``) and ``.test`` domains are accepted; other
    reserved names such as ``localhost`` are still rejected.
    """
    try:
        validate_email(
            value,
            check_deliverability=False,
            globally_deliverable=False,
            test_environment=True,
        )
    except EmailNotValidError:
        return False
    return True
