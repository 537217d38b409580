"""
Field validation errors.

These exceptions are never raised by the validators. A validator *returns*
one of them to describe why a value was rejected, and returns ``None`` when
the value is acceptable. Keeping them as exception types gives each error a
readable ``str()`` and lets callers raise them if they ever need to.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class FieldValidationError(Exception):
    """
    Base class for errors reported by a field validation rule.

    Attributes:
        message: Human-readable message shown next to the field.
    """

    message: str = "Invalid field"

    def __str__(self) -> str:
        return self.message


@dataclass
class RequiredFieldError(FieldValidationError):
    """The field was left empty."""

    message: str = "Required field"


@dataclass
class InvalidFieldError(FieldValidationError):
    """The field has a value, but not an acceptable one."""

    message: str = "Invalid field"
