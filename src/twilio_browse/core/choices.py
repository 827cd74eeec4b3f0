"""Choice resolution — turn labelled options into tri-state outcomes.

Every menu in the browser goes through :func:`choose_from`: the caller's
options are shown first, followed by the reserved Back and Exit entries.
The answer is mapped back to ``Selected(value)``, ``Control.BACK`` or
``Control.EXIT``.  Dismissing the prompt counts as Back.

Labels must be unique within one call; duplicates are a caller bug and are
not detected here.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum
from typing import TypeVar

from twilio_browse.core.models import (
    ACTION_LABELS,
    ANY_FILTER,
    CANCELLED,
    CONTROL_LABELS,
    Answer,
    Answered,
    Cancelled,
    ChoiceOutcome,
    Control,
    FilterOutcome,
    Selected,
    Specific,
)
from twilio_browse.core.protocols import Prompter

T = TypeVar("T")
A = TypeVar("A", bound=Enum)
E = TypeVar("E", bound=Enum)

RESERVED_CONTROLS: tuple[Control, ...] = (Control.BACK, Control.EXIT)

ANY_LABEL: str = "Any"


def choose_from(
    prompter: Prompter,
    message: str,
    entries: Sequence[tuple[str, T]],
) -> ChoiceOutcome[T]:
    """Prompt for one of *entries* (``(label, value)`` pairs)."""
    options = [label for label, _ in entries]
    options.extend(CONTROL_LABELS[control] for control in RESERVED_CONTROLS)

    answer = prompter.select(message, options)
    if isinstance(answer, Cancelled):
        return Control.BACK

    index = answer.value
    if index < len(entries):
        return Selected(entries[index][1])
    return RESERVED_CONTROLS[index - len(entries)]


def choose(
    prompter: Prompter,
    message: str,
    labels: Sequence[str],
) -> ChoiceOutcome[str]:
    """Prompt for one of *labels*; ``Selected`` carries the chosen label."""
    return choose_from(prompter, message, [(label, label) for label in labels])


def choose_action(
    prompter: Prompter,
    message: str,
    actions: Iterable[A],
) -> ChoiceOutcome[A]:
    """Prompt for one of *actions*, labelled through :data:`ACTION_LABELS`."""
    return choose_from(prompter, message, [(ACTION_LABELS[action], action) for action in actions])


def choose_filter(
    prompter: Prompter,
    message: str,
    values: Iterable[E],
) -> Answer[FilterOutcome[E]]:
    """Offer "Any" plus every member of *values*.

    Enum members are labelled with their value, which is also the
    representation the remote API expects.
    """
    members = list(values)
    options = [ANY_LABEL, *(str(member.value) for member in members)]

    answer = prompter.select(message, options)
    if isinstance(answer, Cancelled):
        return CANCELLED
    if answer.value == 0:
        return Answered(ANY_FILTER)
    return Answered(Specific(members[answer.value - 1]))
