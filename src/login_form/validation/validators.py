"""
Built-in field validation rules.

Each rule is a small frozen dataclass bound to a field name. Calling
``validate(value)`` returns an error value on failure and ``None`` on
success; nothing is raised and nothing is mutated, so a rule can be
evaluated on every keystroke.

Rules are deliberately narrow so they compose: only
``RequiredFieldValidation`` cares about emptiness. ``EmailValidation``
accepts the empty string and leaves "missing" to the required rule.

Example:
    >>> RequiredFieldValidation("email").validate("")
    RequiredFieldError(message='Required field')
    >>> MinLengthValidation("password", 5).validate("secret") is None
    True
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from login_form.validation.errors import InvalidFieldError, RequiredFieldError

# Structural check only (local part, "@", dotted domain with a 2+ letter TLD).
# Deliverability is the server's problem.
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}")


@dataclass(frozen=True)
class RequiredFieldValidation:
    """Rejects empty values."""

    field: str

    def validate(self, value: str) -> RequiredFieldError | None:
        return None if value else RequiredFieldError()


@dataclass(frozen=True)
class EmailValidation:
    """Rejects non-empty values that are not shaped like an email address."""

    field: str

    def validate(self, value: str) -> InvalidFieldError | None:
        if not value or EMAIL_PATTERN.fullmatch(value):
            return None
        return InvalidFieldError()


@dataclass(frozen=True)
class MinLengthValidation:
    """
    Rejects values shorter than ``min_length`` characters.

    A ``min_length`` of 0 accepts every value, including the empty string.
    """

    field: str
    min_length: int

    def validate(self, value: str) -> InvalidFieldError | None:
        if len(value) < self.min_length:
            return InvalidFieldError()
        return None
