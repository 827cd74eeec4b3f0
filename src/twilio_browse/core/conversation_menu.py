"""Interactive menu for Twilio Conversations.

Conversations are addressed by SID rather than picked from a cached list,
so this menu is a flat action loop: Get, List (with date and state
filters), Delete and Delete all.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from twilio_browse.core.choices import choose_action, choose_filter
from twilio_browse.core.dates import date_range_filters, select_date_range, utc_today
from twilio_browse.core.formatting import (
    CANCELED_NOTICE,
    NO_RESOURCES_FOUND,
    conversation_line,
    details,
    found_message,
    not_found_message,
)
from twilio_browse.core.models import (
    CANCELLED,
    Answer,
    Answered,
    Cancelled,
    Control,
    Conversation,
    ConversationAction,
    ConversationState,
    ResourceAction,
    Selected,
    Specific,
)
from twilio_browse.core.navigation import confirm_destructive, delete_confirmation
from twilio_browse.core.pagination import fetch_all
from twilio_browse.core.protocols import BulkDeleteClient, Prompter
from twilio_browse.exceptions import ResourceNotFoundError

logger = logging.getLogger(__name__)

KIND: str = "Conversation"

SID_PREFIX: str = "CH"
SID_LENGTH: int = 34

DELETE_ALL_CONFIRMATIONS: tuple[str, ...] = (
    "Are you sure you wish to delete **all** Conversations? (Yes / No)",
    "Are you double sure? There is no going back. (Yes / No)",
)


def validate_conversation_sid(value: str) -> bool | str:
    """Accept ``CH`` + 32 characters, else return the error message."""
    if value.startswith(SID_PREFIX) and len(value) == SID_LENGTH:
        return True
    return "Conversation SID should be 34 characters in length"


class ConversationMenu:
    """Action loop over the Conversations of one account.

    Parameters
    ----------
    prompter:
        Prompt backend.
    client:
        Conversations client.
    today:
        Clock used to bound date filters; UTC today by default.
    """

    def __init__(
        self,
        prompter: Prompter,
        client: BulkDeleteClient[Conversation],
        *,
        today: Callable[[], date] = utc_today,
    ) -> None:
        self._prompter = prompter
        self._client = client
        self._today = today

    def run(self) -> Control:
        while True:
            outcome = choose_action(self._prompter, "Select an action:", ConversationAction)
            if not isinstance(outcome, Selected):
                return outcome

            action = outcome.value
            if action is ConversationAction.GET:
                result = self.get_conversation()
            elif action is ConversationAction.LIST:
                result = self.list_conversations()
            elif action is ConversationAction.DELETE:
                result = self.delete_conversation()
            else:
                result = self.delete_all_conversations()

            if result is Control.EXIT:
                return Control.EXIT

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def get_conversation(self) -> Control:
        """Fetch one conversation by SID and offer actions on it."""
        sid = self._prompt_sid()
        if isinstance(sid, Cancelled):
            return Control.BACK

        try:
            conversation = self._client.get(sid.value)
        except ResourceNotFoundError:
            self._prompter.show(not_found_message(KIND, sid.value))
            self._prompter.show()
            return Control.BACK

        self._prompter.show(details(conversation))
        self._prompter.show()

        outcome = choose_action(self._prompter, "Select an action:", [ResourceAction.DELETE])
        if not isinstance(outcome, Selected):
            return outcome
        self._delete_after_confirmation(conversation.sid)
        return Control.BACK

    def list_conversations(self) -> Control:
        """Prompt for filters, fetch every page and print one line per item."""
        filters = self._prompt_list_filters()
        if isinstance(filters, Cancelled):
            self._prompter.show("Listing canceled.")
            self._prompter.show()
            return Control.BACK

        self._prompter.show("Fetching conversations...")
        conversations = fetch_all(self._client, filters.value)

        if not conversations:
            self._prompter.show(NO_RESOURCES_FOUND)
        else:
            self._prompter.show(found_message(len(conversations)))
            for conversation in conversations:
                self._prompter.show(conversation_line(conversation))
        self._prompter.show()
        return Control.BACK

    def delete_conversation(self) -> Control:
        sid = self._prompt_sid()
        if isinstance(sid, Cancelled):
            self._prompter.show(CANCELED_NOTICE)
            self._prompter.show()
            return Control.BACK
        self._delete_after_confirmation(sid.value)
        return Control.BACK

    def delete_all_conversations(self) -> Control:
        """Delete every conversation (optionally in one state) after two confirmations."""
        state = choose_filter(self._prompter, "Delete Conversations in which state?", ConversationState)
        if isinstance(state, Cancelled):
            self._prompter.show(CANCELED_NOTICE)
            self._prompter.show()
            return Control.BACK

        if not confirm_destructive(self._prompter, DELETE_ALL_CONFIRMATIONS):
            return Control.BACK

        filters = _state_filter(state.value)
        self._prompter.show("Proceeding with deletion. Please wait...")
        self._client.delete_all(filters or None)
        logger.info("Deleted all conversations matching %s", filters or "no filter")
        self._prompter.show("All Conversations deleted.")
        self._prompter.show()
        return Control.BACK

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _prompt_sid(self) -> Answer[str]:
        return self._prompter.text(
            "Please provide a conversation SID:",
            placeholder="CH...",
            validator=validate_conversation_sid,
        )

    def _prompt_list_filters(self) -> Answer[dict[str, str]]:
        """Collect the optional date range and state filter.

        Cancelling any prompt abandons the listing; a partially chosen date
        range is never used.
        """
        filters: dict[str, str] = {}

        wants_dates = self._prompter.confirm(
            "Would you like to filter between specified dates? (Yes / No)",
        )
        if isinstance(wants_dates, Cancelled):
            return CANCELLED
        if wants_dates.value:
            date_range = select_date_range(self._prompter, today=self._today())
            if isinstance(date_range, Cancelled):
                return CANCELLED
            filters.update(date_range_filters(date_range.value))

        state = choose_filter(self._prompter, "Filter by state?", ConversationState)
        if isinstance(state, Cancelled):
            return CANCELLED
        filters.update(_state_filter(state.value))
        return Answered(filters)

    def _delete_after_confirmation(self, sid: str) -> None:
        if not confirm_destructive(self._prompter, [delete_confirmation(KIND)]):
            return

        self._prompter.show("Deleting Conversation...")
        try:
            self._client.delete(sid)
        except ResourceNotFoundError:
            self._prompter.show(not_found_message(KIND, sid))
        else:
            logger.info("Deleted conversation %s", sid)
            self._prompter.show("Conversation deleted.")
        self._prompter.show()


def _state_filter(outcome: object) -> dict[str, str]:
    if isinstance(outcome, Specific):
        return {"State": outcome.value.value}
    return {}
