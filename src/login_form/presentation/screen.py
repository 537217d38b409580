"""
Login screen.

This module provides the Textual screen that renders a ``LoginForm``. The
screen holds no state of its own: every input change is forwarded to the
form, and the widgets are re-rendered whenever the form notifies.

Widgets (by id):
    #email, #password             inputs
    #email-status, #password-status
                                  red/green indicator; the validation
                                  message is the tooltip
    #submit                       disabled while invalid or loading
    #spinner                      visible while loading
    #main-error                   last authentication failure
    #signup                       always available
"""

from __future__ import annotations

from collections.abc import Callable

from textual import on, work
from textual.app import ComposeResult
from textual.containers import Center, Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button, Input, Label, LoadingIndicator, Static

from login_form.presentation.form import FIELDS, LoginForm


class LoginScreen(Screen):
    """
    Email/password login form.

    CSS Classes:
        .login-box: The container for the login form.
        .login-title: The "Login" heading.
        .login-label: Labels for input fields.
        .login-row: An input and its status indicator.
        .login-input: The input fields.
        .login-status: The status indicators.
        .login-button: The submit and signup buttons.
        .login-error: Main error message display.
    """

    CSS = """
    LoginScreen {
        align: center middle;
    }

    .login-box {
        width: 64;
        height: auto;
        border: solid green;
        padding: 1 2;
    }

    .login-title {
        text-align: center;
        text-style: bold;
        color: $accent;
        padding-bottom: 1;
    }

    .login-label {
        padding-top: 1;
    }

    .login-row {
        height: auto;
    }

    .login-input {
        width: 1fr;
    }

    .login-status {
        width: 4;
        padding: 1 0 0 1;
    }

    .login-button {
        width: 100%;
        margin-top: 1;
    }

    #spinner {
        height: 1;
        margin-top: 1;
    }

    .login-error {
        color: $error;
        text-align: center;
        padding-top: 1;
    }
    """

    def __init__(self, form: LoginForm) -> None:
        super().__init__()
        self.form = form
        self._unsubscribe_form: Callable[[], None] | None = None

    def compose(self) -> ComposeResult:
        with Center():
            with Vertical(classes="login-box"):
                yield Static("Login", classes="login-title")
                yield Label("Email:", classes="login-label")
                with Horizontal(classes="login-row"):
                    yield Input(
                        placeholder="Enter your email",
                        id="email",
                        classes="login-input",
                    )
                    yield Static("", id="email-status", classes="login-status")
                yield Label("Password:", classes="login-label")
                with Horizontal(classes="login-row"):
                    yield Input(
                        placeholder="Enter your password",
                        password=True,
                        id="password",
                        classes="login-input",
                    )
                    yield Static("", id="password-status", classes="login-status")
                yield Button("Sign in", variant="primary", id="submit", classes="login-button")
                yield Button("Create account", id="signup", classes="login-button")
                yield LoadingIndicator(id="spinner")
                yield Static("", id="main-error", classes="login-error")

    def on_mount(self) -> None:
        self._unsubscribe_form = self.form.subscribe(self.render_form)
        self.render_form(self.form)
        self.query_one("#email", Input).focus()

    def on_unmount(self) -> None:
        if self._unsubscribe_form is not None:
            self._unsubscribe_form()
            self._unsubscribe_form = None

    def render_form(self, form: LoginForm) -> None:
        """Copy the form state onto the widgets."""
        for field_name in FIELDS:
            status = form.status(field_name)
            widget = self.query_one(f"#{field_name}-status", Static)
            widget.update(status.indicator)
            widget.tooltip = status.title

        self.query_one("#submit", Button).disabled = form.submit_disabled
        self.query_one("#spinner", LoadingIndicator).display = form.is_loading

        main_error = self.query_one("#main-error", Static)
        main_error.update(form.main_error)
        main_error.display = bool(form.main_error)

    # -------------------------------------------------------------------------
    # Event handlers
    # -------------------------------------------------------------------------

    @on(Input.Changed)
    def handle_input_changed(self, event: Input.Changed) -> None:
        if event.input.id in FIELDS:
            self.form.set_field(event.input.id, event.value)

    @on(Input.Submitted)
    def handle_input_submitted(self, event: Input.Submitted) -> None:
        """
        Handle Enter key in input fields.

        Enter in the email field moves to the password field; Enter in the
        password field submits.
        """
        if event.input.id == "email":
            self.query_one("#password", Input).focus()
        elif event.input.id == "password":
            self.submit_form()

    @on(Button.Pressed, "#submit")
    def handle_submit_button(self) -> None:
        self.submit_form()

    @on(Button.Pressed, "#signup")
    def handle_signup_button(self) -> None:
        self.form.go_to_signup()

    @work(thread=False)
    async def submit_form(self) -> None:
        """Run the submit lifecycle without blocking the message loop."""
        await self.form.submit()
