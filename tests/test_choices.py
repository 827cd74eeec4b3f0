"""Tests for choice resolution (core/choices.py)."""

from __future__ import annotations

import pytest

from twilio_browse.core.choices import choose, choose_action, choose_filter, choose_from
from twilio_browse.core.models import (
    ANY_FILTER,
    CANCELLED,
    Answered,
    Control,
    ConversationAction,
    ConversationState,
    Selected,
    Specific,
)

LABELS = ["(IS1) alpha", "(IS2) beta", "(IS3) gamma"]


class TestChoose:
    @pytest.mark.parametrize("index", range(len(LABELS)))
    def test_index_yields_selected_label(self, make_prompter, index: int) -> None:
        prompter = make_prompter(("select", index))
        assert choose(prompter, "Pick:", LABELS) == Selected(LABELS[index])

    def test_reserved_entries_are_appended(self, make_prompter) -> None:
        prompter = make_prompter(("select", 0))
        choose(prompter, "Pick:", LABELS)
        assert prompter.options[0] == [*LABELS, "Back", "Exit"]

    def test_back_label_yields_back(self, make_prompter) -> None:
        prompter = make_prompter(("select", "Back"))
        assert choose(prompter, "Pick:", LABELS) is Control.BACK

    def test_exit_label_yields_exit(self, make_prompter) -> None:
        prompter = make_prompter(("select", "Exit"))
        assert choose(prompter, "Pick:", LABELS) is Control.EXIT

    def test_cancel_yields_back(self, make_prompter) -> None:
        prompter = make_prompter(("select", CANCELLED))
        assert choose(prompter, "Pick:", LABELS) is Control.BACK

    def test_empty_labels_only_offer_controls(self, make_prompter) -> None:
        prompter = make_prompter(("select", "Exit"))
        assert choose(prompter, "Pick:", []) is Control.EXIT
        assert prompter.options[0] == ["Back", "Exit"]


class TestChooseFrom:
    def test_maps_label_back_to_value(self, make_prompter) -> None:
        prompter = make_prompter(("select", "second"))
        outcome = choose_from(prompter, "Pick:", [("first", 10), ("second", 20)])
        assert outcome == Selected(20)


class TestChooseAction:
    def test_labels_come_from_display_table(self, make_prompter) -> None:
        prompter = make_prompter(("select", "List Conversations"))
        outcome = choose_action(prompter, "Select an action:", ConversationAction)
        assert outcome == Selected(ConversationAction.LIST)
        assert prompter.options[0] == [
            "Get Conversation",
            "List Conversations",
            "Delete Conversation",
            "Delete all Conversations",
            "Back",
            "Exit",
        ]

    def test_exit_is_never_selected(self, make_prompter) -> None:
        prompter = make_prompter(("select", "Exit"))
        assert choose_action(prompter, "Select:", ConversationAction) is Control.EXIT


class TestChooseFilter:
    def test_any(self, make_prompter) -> None:
        prompter = make_prompter(("select", "Any"))
        assert choose_filter(prompter, "Filter?", ConversationState) == Answered(ANY_FILTER)

    def test_specific_value_from_enumeration(self, make_prompter) -> None:
        prompter = make_prompter(("select", "closed"))
        outcome = choose_filter(prompter, "Filter?", ConversationState)
        assert outcome == Answered(Specific(ConversationState.CLOSED))
        assert prompter.options[0] == ["Any", "active", "inactive", "closed"]

    def test_cancel(self, make_prompter) -> None:
        prompter = make_prompter(("select", CANCELLED))
        assert choose_filter(prompter, "Filter?", ConversationState) is CANCELLED
