"""Field predicates for course records."""

from __future__ import annotations

import re
from typing import TypeGuard

_LETTERS = re.compile(r"[A-Za-z]+")
_LETTERS_AND_SPACES = re.compile(r"[A-Za-z ]+")


def is_not_blank(value: str | None) -> TypeGuard[str]:
    return value is not None and bool(value.strip())


def is_letters_only(value: str) -> bool:
    return _LETTERS.fullmatch(value) is not None


def is_letters_and_spaces(value: str) -> bool:
    return _LETTERS_AND_SPACES.fullmatch(value) is not None
