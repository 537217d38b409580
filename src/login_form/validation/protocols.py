"""
Structural interfaces for the validation layer.

``FieldValidation`` is the unit rule (one field, one check). ``Validation``
is what the login form depends on: something that can tell it the current
error message for a field value.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FieldValidation(Protocol):
    """A single validation rule bound to one field name."""

    field: str

    def validate(self, value: str) -> Exception | None:
        """Return an error describing why *value* is rejected, or None."""
        ...


class Validation(Protocol):
    """Resolves the error message for a field value ("" when valid)."""

    def validate(self, field_name: str, value: str) -> str: ...
