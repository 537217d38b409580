"""Tests for the composition root."""

from login_form.auth.remote import RemoteAuthentication
from login_form.config import Config
from login_form.factories import (
    PASSWORD_MIN_LENGTH,
    make_login_form,
    make_login_validation,
    make_remote_authentication,
)
from login_form.presentation.form import LoginForm
from login_form.validation.validators import (
    EmailValidation,
    MinLengthValidation,
    RequiredFieldValidation,
)
from tests.mocks import AuthenticationSpy, HttpPostClientSpy, NavigatorSpy, StorageSpy


class TestMakeLoginValidation:
    """Tests for the login form's rule set."""

    def test_email_rules(self):
        validation = make_login_validation()

        assert validation.rules["email"] == (
            RequiredFieldValidation("email"),
            EmailValidation("email"),
        )

    def test_password_rules(self):
        validation = make_login_validation()

        assert validation.rules["password"] == (
            RequiredFieldValidation("password"),
            MinLengthValidation("password", PASSWORD_MIN_LENGTH),
        )

    def test_password_min_length(self):
        validation = make_login_validation()

        assert validation.validate("password", "1234") == "Invalid field"
        assert validation.validate("password", "12345") == ""


class TestMakeRemoteAuthentication:
    def test_targets_login_path(self, config: Config):
        http_client = HttpPostClientSpy()

        authentication = make_remote_authentication(http_client, config)

        assert isinstance(authentication, RemoteAuthentication)
        assert authentication.url == config.login_path
        assert authentication.http_client is http_client


class TestMakeLoginForm:
    def test_wires_collaborators(self):
        authentication = AuthenticationSpy()
        storage = StorageSpy()
        navigator = NavigatorSpy()

        form = make_login_form(authentication, storage, navigator)

        assert isinstance(form, LoginForm)
        assert form.authentication is authentication
        assert form.storage is storage
        assert form.navigator is navigator
        assert form.submit_disabled is True
