"""
Fluent builder for per-field rule lists.

Usage::

    validators = ValidationBuilder.field("password").required().min(5).build()

Each chain configures exactly one field. ``field()`` is the entry point and
always starts from an empty rule list; ``build()`` hands back an immutable
tuple, so whatever the builder does afterwards cannot change it.

Rule order is significant: the composite validator reports the *first*
failing rule, so ``required()`` usually comes first to make "missing" win
over "too short".
"""

from __future__ import annotations

from login_form.validation.protocols import FieldValidation
from login_form.validation.validators import (
    EmailValidation,
    MinLengthValidation,
    RequiredFieldValidation,
)


class ValidationBuilder:
    """Accumulates validation rules for a single field name."""

    def __init__(self, field_name: str, validations: list[FieldValidation] | None = None) -> None:
        self.field_name = field_name
        self.validations: list[FieldValidation] = list(validations or [])

    @classmethod
    def field(cls, field_name: str) -> ValidationBuilder:
        """Start a fresh chain for *field_name*."""
        return cls(field_name, [])

    def required(self) -> ValidationBuilder:
        self.validations.append(RequiredFieldValidation(self.field_name))
        return self

    def email(self) -> ValidationBuilder:
        self.validations.append(EmailValidation(self.field_name))
        return self

    def min(self, length: int) -> ValidationBuilder:
        self.validations.append(MinLengthValidation(self.field_name, length))
        return self

    def build(self) -> tuple[FieldValidation, ...]:
        """Return the accumulated rules in the order they were added."""
        return tuple(self.validations)
