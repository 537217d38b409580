"""
Field validation for the login form.

Rules are built per field with ``ValidationBuilder`` and combined into a
``ValidationComposite``, which reports the first failing rule per field.
"""

from login_form.validation.builder import ValidationBuilder
from login_form.validation.composite import ValidationComposite
from login_form.validation.errors import (
    FieldValidationError,
    InvalidFieldError,
    RequiredFieldError,
)
from login_form.validation.protocols import FieldValidation, Validation
from login_form.validation.validators import (
    EmailValidation,
    MinLengthValidation,
    RequiredFieldValidation,
)

__all__ = [
    "EmailValidation",
    "FieldValidation",
    "FieldValidationError",
    "InvalidFieldError",
    "MinLengthValidation",
    "RequiredFieldError",
    "RequiredFieldValidation",
    "Validation",
    "ValidationBuilder",
    "ValidationComposite",
]
