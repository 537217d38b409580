"""
Test doubles for the login form's collaborators.

Spies record how they were called; stubs return canned answers. All of them
satisfy the protocols the production code depends on structurally.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

from login_form.api.protocols import HttpResponse, HttpStatusCode
from login_form.auth.models import AccountModel, AuthenticationParams
from tests.constants import TEST_ACCESS_TOKEN


@dataclass
class FieldValidationSpy:
    """Field rule that returns whatever ``error`` is set to."""

    field: str
    error: Exception | None = None
    calls: list[str] = field(default_factory=list)

    def validate(self, value: str) -> Exception | None:
        self.calls.append(value)
        return self.error


@dataclass
class ValidationStub:
    """Reports ``error_message`` for every field."""

    error_message: str = ""
    calls: list[tuple[str, str]] = field(default_factory=list)

    def validate(self, field_name: str, value: str) -> str:
        self.calls.append((field_name, value))
        return self.error_message


@dataclass
class AuthenticationSpy:
    """
    Records auth calls.

    Set ``error`` to make calls fail. Set ``gate`` to an ``asyncio.Event`` to
    hold calls open until the test releases it.
    """

    account: AccountModel = field(default_factory=lambda: AccountModel(TEST_ACCESS_TOKEN))
    error: Exception | None = None
    gate: asyncio.Event | None = None
    params: AuthenticationParams | None = None
    calls_count: int = 0

    async def auth(self, params: AuthenticationParams) -> AccountModel:
        self.params = params
        self.calls_count += 1
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.account


@dataclass
class StorageSpy:
    """In-memory ``SetStorage`` that records every write. Set ``error`` to make writes fail."""

    calls: list[tuple[str, str]] = field(default_factory=list)
    error: Exception | None = None

    def set(self, key: str, value: str) -> None:
        if self.error is not None:
            raise self.error
        self.calls.append((key, value))


@dataclass
class NavigatorSpy:
    """Records navigation requests as ("replace" | "push", path) pairs."""

    calls: list[tuple[str, str]] = field(default_factory=list)

    def replace_route(self, path: str) -> None:
        self.calls.append(("replace", path))

    def push_route(self, path: str) -> None:
        self.calls.append(("push", path))


@dataclass
class HttpPostClientSpy:
    """Records the last POST and answers with ``response``."""

    response: HttpResponse = field(default_factory=lambda: HttpResponse(HttpStatusCode.OK))
    url: str | None = None
    body: dict[str, Any] | None = None

    async def post(self, url: str, body: dict[str, Any] | None = None) -> HttpResponse:
        self.url = url
        self.body = body
        return self.response
