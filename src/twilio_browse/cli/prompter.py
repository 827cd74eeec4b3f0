"""questionary-backed implementation of the core ``Prompter`` protocol.

This module is responsible for:

* Rendering select / confirm / text prompts via questionary.
* Rendering date prompts as validated ``YYYY-MM-DD`` text input.
* Printing navigation output through a Rich console on stdout.
* Translating questionary's ``None`` (Esc / Ctrl+C) into ``CANCELLED``
  and a closed input stream into :class:`InputChannelClosedError`.

No navigation logic lives here.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import date
from typing import Any

from twilio_browse.cli.console import get_rich_console
from twilio_browse.core.models import CANCELLED, Answer, Answered, DateRange
from twilio_browse.exceptions import EnvironmentError, InputChannelClosedError

DATE_FORMAT_HINT: str = "YYYY-MM-DD"


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


# ---------------------------------------------------------------------------
# Date parsing / validation (pure)
# ---------------------------------------------------------------------------

def _parse_date(value: str) -> date | None:
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        return None


def build_date_validator(date_range: DateRange | None) -> Callable[[str], bool | str]:
    """Return a questionary validator accepting only dates in *date_range*."""

    def validate(value: str) -> bool | str:
        parsed = _parse_date(value)
        if parsed is None:
            return f"Enter a date as {DATE_FORMAT_HINT}"
        if date_range is not None and not date_range.contains(parsed):
            return (
                f"Choose a date between {date_range.minimum_date.isoformat()} "
                f"and {date_range.maximum_date.isoformat()}"
            )
        return True

    return validate


def _date_instruction(date_range: DateRange | None) -> str:
    if date_range is None:
        return f"({DATE_FORMAT_HINT})"
    return (
        f"({DATE_FORMAT_HINT}, {date_range.minimum_date.isoformat()} "
        f"to {date_range.maximum_date.isoformat()})"
    )


# ---------------------------------------------------------------------------
# Prompter
# ---------------------------------------------------------------------------

class QuestionaryPrompter:
    """Interactive terminal prompter.

    Satisfies :class:`~twilio_browse.core.protocols.Prompter`
    structurally — no explicit inheritance required.
    """

    def __init__(self) -> None:
        self._questionary: Any = _import_questionary()
        self._console: Any = get_rich_console(stderr=False)

    def select(self, message: str, options: Sequence[str]) -> Answer[int]:
        choices = [
            self._questionary.Choice(title=label, value=index)
            for index, label in enumerate(options)
        ]
        return self._ask(
            self._questionary.select(
                message,
                choices=choices,
                use_arrow_keys=True,
                use_shortcuts=False,
            )
        )

    def confirm(self, message: str) -> Answer[bool]:
        return self._ask(self._questionary.confirm(message, default=False))

    def text(
        self,
        message: str,
        *,
        placeholder: str = "",
        validator: Callable[[str], bool | str] | None = None,
    ) -> Answer[str]:
        kwargs: dict[str, Any] = {}
        if validator is not None:
            kwargs["validate"] = validator
        if placeholder:
            kwargs["instruction"] = placeholder
        answer = self._ask(self._questionary.text(message, **kwargs))
        if isinstance(answer, Answered):
            return Answered(str(answer.value).strip())
        return answer

    def date(self, message: str, date_range: DateRange | None = None) -> Answer[date]:
        answer = self._ask(
            self._questionary.text(
                f"{message} {_date_instruction(date_range)}",
                validate=build_date_validator(date_range),
            )
        )
        if not isinstance(answer, Answered):
            return answer
        parsed = _parse_date(str(answer.value))
        if parsed is None:
            return CANCELLED
        return Answered(parsed)

    def show(self, message: str = "") -> None:
        self._console.print(message, markup=False, highlight=False)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _ask(question: Any) -> Answer[Any]:
        """Run *question*; ``None`` (Esc / Ctrl+C) becomes ``CANCELLED``."""
        try:
            value = question.ask()
        except EOFError as exc:
            raise InputChannelClosedError(
                "The input stream was closed.",
                hint="twilio-browse needs an interactive terminal.",
            ) from exc
        if value is None:
            return CANCELLED
        return Answered(value)
