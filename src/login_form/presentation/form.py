"""
Login form state machine.

``LoginForm`` owns everything the login screen displays: the two field
values, their error messages, the loading flag and the top-level error. It
is UI-toolkit agnostic; the Textual screen feeds it input events and
re-renders when it notifies.

Lifecycle:
    Idle        field edits keep the form here; errors are recomputed
                synchronously on every change
    Submitting  entered only when the guard passes (not loading, no field
                errors); exactly one authentication call is in flight
    Success     token persisted, navigation to the landing route; the form
                stays in the loading state because the screen goes away
    Failure     back to Idle with ``main_error`` set to the failure message

Example:
    form = LoginForm(
        validation=make_login_validation(),
        authentication=authentication,
        storage=JsonFileStorage(config.token_path),
        navigator=MemoryHistory(),
    )
    form.set_email("user@example.com")
    form.set_password("hunter22")
    await form.submit()
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from login_form.auth.errors import AuthenticationError
from login_form.auth.models import Authentication, AuthenticationParams
from login_form.presentation.navigation import LANDING_ROUTE, SIGNUP_ROUTE, Navigator
from login_form.storage import ACCESS_TOKEN_KEY, SetStorage
from login_form.validation.protocols import Validation

logger = logging.getLogger(__name__)

# Fields the form tracks, in display order.
FIELDS = ("email", "password")

VALID_FIELD_TITLE = "All good!"
ERROR_INDICATOR = "🔴"
OK_INDICATOR = "🟢"


@dataclass(frozen=True)
class FieldStatus:
    """
    What the screen shows next to an input.

    Attributes:
        title: The validation error, or a short success text.
        indicator: A red or green dot.
    """

    title: str
    indicator: str


class LoginForm:
    """
    State and submit lifecycle of the login form.

    Attributes:
        email: Current email input.
        password: Current password input.
        email_error: Validation message for ``email`` ("" when valid).
        password_error: Validation message for ``password`` ("" when valid).
        main_error: Message of the last authentication failure.
        is_loading: True while an authentication call is outstanding (and
            after it succeeds).
    """

    def __init__(
        self,
        validation: Validation,
        authentication: Authentication,
        storage: SetStorage,
        navigator: Navigator,
    ) -> None:
        self.validation = validation
        self.authentication = authentication
        self.storage = storage
        self.navigator = navigator

        self.email = ""
        self.password = ""
        self.email_error = ""
        self.password_error = ""
        self.main_error = ""
        self.is_loading = False

        self._listeners: list[Callable[[LoginForm], None]] = []

        # Errors must describe the initial (empty) values too
        self._revalidate()

    # -------------------------------------------------------------------------
    # Observation
    # -------------------------------------------------------------------------

    def subscribe(self, listener: Callable[[LoginForm], None]) -> Callable[[], None]:
        """
        Call *listener* with the form after every state change.

        Returns:
            A function that removes the listener again. Calling it more than
            once is harmless.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # -------------------------------------------------------------------------
    # Derived state
    # -------------------------------------------------------------------------

    @property
    def submit_disabled(self) -> bool:
        return self.is_loading or bool(self.email_error) or bool(self.password_error)

    def error_for(self, field_name: str) -> str:
        """Return the current validation message for *field_name*."""
        self._check_field(field_name)
        return str(getattr(self, f"{field_name}_error"))

    def status(self, field_name: str) -> FieldStatus:
        error = self.error_for(field_name)
        if error:
            return FieldStatus(title=error, indicator=ERROR_INDICATOR)
        return FieldStatus(title=VALID_FIELD_TITLE, indicator=OK_INDICATOR)

    # -------------------------------------------------------------------------
    # Field changes
    # -------------------------------------------------------------------------

    def set_field(self, field_name: str, value: str) -> None:
        """
        Update a field and recompute both field errors.

        Args:
            field_name: "email" or "password".
            value: The new input value.

        Raises:
            ValueError: If *field_name* is not a tracked field.
        """
        self._check_field(field_name)
        setattr(self, field_name, value)
        self._revalidate()
        self._notify()

    def set_email(self, value: str) -> None:
        self.set_field("email", value)

    def set_password(self, value: str) -> None:
        self.set_field("password", value)

    def _revalidate(self) -> None:
        self.email_error = self.validation.validate("email", self.email)
        self.password_error = self.validation.validate("password", self.password)
        logger.debug(
            "Revalidated form: email_error=%r password_error=%r",
            self.email_error,
            self.password_error,
        )

    @staticmethod
    def _check_field(field_name: str) -> None:
        if field_name not in FIELDS:
            raise ValueError(f"Unknown form field: {field_name!r}")

    # -------------------------------------------------------------------------
    # Submission
    # -------------------------------------------------------------------------

    async def submit(self) -> bool:
        """
        Authenticate with the current credentials.

        The call is skipped silently when a previous submit is still loading
        or when either field has a validation error; the field statuses
        already tell the user why.

        On success the access token is stored under ``"accessToken"`` and
        the navigator is sent to the landing route. On an
        ``AuthenticationError`` the loading flag is cleared and the error
        message becomes ``main_error``. Any other exception, including one
        raised while storing the token or navigating, clears the loading
        flag and propagates.

        Returns:
            True if an authentication call was made, False if the guard
            blocked the submit.
        """
        if self.submit_disabled:
            logger.debug("Submit ignored (loading=%s)", self.is_loading)
            return False

        # Set before the first await so a second submit sees it
        self.is_loading = True
        self._notify()

        params = AuthenticationParams(email=self.email, password=self.password)
        logger.info("Submitting login")

        try:
            account = await self.authentication.auth(params)
        except AuthenticationError as error:
            logger.warning("Login failed: %s", error)
            self.is_loading = False
            self.main_error = str(error)
            self._notify()
            return True
        except Exception:
            self.is_loading = False
            self._notify()
            raise

        try:
            self.storage.set(ACCESS_TOKEN_KEY, account.access_token)
            logger.info("Login succeeded, navigating to %s", LANDING_ROUTE)
            self.navigator.replace_route(LANDING_ROUTE)
        except Exception:
            logger.warning("Login succeeded but could not be completed")
            self.is_loading = False
            self._notify()
            raise
        return True

    def go_to_signup(self) -> None:
        """Send the user to the registration route. Never gated."""
        self.navigator.push_route(SIGNUP_ROUTE)
