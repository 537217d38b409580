"""
Composite validator: the ``Validation`` the login form talks to.

The composite indexes a flat list of field rules by field name and, for a
given field and value, returns the message of the first rule that fails.
It keeps no state between calls, so the answer for a value never depends
on what was validated before it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from login_form.validation.protocols import FieldValidation

logger = logging.getLogger(__name__)


class ValidationComposite:
    """
    First-error-wins validation over ordered per-field rule lists.

    Attributes:
        rules: Mapping of field name to its rules, in registration order.

    Example:
        composite = ValidationComposite.build([
            *ValidationBuilder.field("email").required().email().build(),
            *ValidationBuilder.field("password").required().min(5).build(),
        ])
        composite.validate("email", "")  # "Required field"
        composite.validate("email", "user@example.com")  # ""
    """

    def __init__(self, validators: Iterable[FieldValidation]) -> None:
        self.rules: dict[str, tuple[FieldValidation, ...]] = {}
        for validator in validators:
            self.rules[validator.field] = (*self.rules.get(validator.field, ()), validator)

    @classmethod
    def build(cls, validators: Iterable[FieldValidation]) -> ValidationComposite:
        return cls(validators)

    def validate(self, field_name: str, value: str) -> str:
        """
        Validate *value* against every rule registered for *field_name*.

        Args:
            field_name: Field to look up. Unknown fields have no rules.
            value: Current value of the field.

        Returns:
            The message of the first failing rule, or ``""`` when every
            rule passes (or there are none).
        """
        for validator in self.rules.get(field_name, ()):
            error = validator.validate(value)
            if error is not None:
                logger.debug("Field %r rejected by %s", field_name, type(validator).__name__)
                return str(error)
        return ""
