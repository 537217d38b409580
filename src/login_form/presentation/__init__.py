"""
Presentation layer: the login form state machine and its Textual screen.

``LoginForm`` is toolkit independent and carries all the behaviour;
``LoginScreen`` only renders it and forwards input events.
"""

from login_form.presentation.form import FieldStatus, LoginForm
from login_form.presentation.navigation import (
    LANDING_ROUTE,
    SIGNUP_ROUTE,
    MemoryHistory,
    Navigator,
)
from login_form.presentation.screen import LoginScreen

__all__ = [
    "LANDING_ROUTE",
    "SIGNUP_ROUTE",
    "FieldStatus",
    "LoginForm",
    "LoginScreen",
    "MemoryHistory",
    "Navigator",
]
