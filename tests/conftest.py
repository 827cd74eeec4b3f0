"""Shared pytest fixtures and configuration for the twilio-browse test suite.

Guidelines
----------
* No internet access in any test.
* ``requests`` is mocked at the infra boundary.
* Core menus are driven by :class:`FakePrompter` — no terminal.
* Tests must not depend on OS state or the current date.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import date
from typing import Any

import pytest

from twilio_browse.config import Settings
from twilio_browse.core.models import CANCELLED, Answer, Answered, DateRange

ACCOUNT_SID = "AC" + "0" * 32


class FakePrompter:
    """Scripted :class:`~twilio_browse.core.protocols.Prompter`.

    The script is a sequence of ``(kind, answer)`` pairs replayed in
    order.  ``select`` answers may be given as the option label (or as an
    index); ``CANCELLED`` dismisses any prompt.  Everything shown is
    recorded in :attr:`messages`.
    """

    def __init__(self, *script: tuple[str, Any]) -> None:
        self._script = list(script)
        self.messages: list[str] = []
        self.prompts: list[tuple[str, str]] = []
        self.options: list[list[str]] = []
        self.date_ranges: list[DateRange | None] = []

    @property
    def remaining(self) -> list[tuple[str, Any]]:
        return list(self._script)

    def _next(self, kind: str, message: str) -> Any:
        self.prompts.append((kind, message))
        if not self._script:
            raise AssertionError(f"Unexpected {kind} prompt: {message!r}")
        expected_kind, value = self._script.pop(0)
        if expected_kind != kind:
            raise AssertionError(
                f"Expected a {expected_kind} prompt, got {kind}: {message!r}"
            )
        return value

    def select(self, message: str, options: Sequence[str]) -> Answer[int]:
        value = self._next("select", message)
        self.options.append(list(options))
        if value is CANCELLED:
            return CANCELLED
        if isinstance(value, int):
            return Answered(value)
        if value not in options:
            raise AssertionError(f"{value!r} is not among {list(options)!r}")
        return Answered(list(options).index(value))

    def confirm(self, message: str) -> Answer[bool]:
        value = self._next("confirm", message)
        return CANCELLED if value is CANCELLED else Answered(bool(value))

    def text(
        self,
        message: str,
        *,
        placeholder: str = "",
        validator: Callable[[str], bool | str] | None = None,
    ) -> Answer[str]:
        value = self._next("text", message)
        if value is CANCELLED:
            return CANCELLED
        if validator is not None:
            assert validator(value) is True, f"validator rejected {value!r}"
        return Answered(value)

    def date(self, message: str, date_range: DateRange | None = None) -> Answer[date]:
        value = self._next("date", message)
        self.date_ranges.append(date_range)
        return CANCELLED if value is CANCELLED else Answered(value)

    def show(self, message: str = "") -> None:
        self.messages.append(message)


@pytest.fixture()
def make_prompter() -> Callable[..., FakePrompter]:
    """Factory: ``make_prompter(("select", "Back"), ("confirm", True), ...)``."""
    return FakePrompter


@pytest.fixture()
def settings() -> Settings:
    return Settings(account_sid=ACCOUNT_SID, auth_token="secret-token")
