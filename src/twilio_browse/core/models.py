"""Domain models for twilio-browse.

Two families live here:

* Navigation values — actions, choice outcomes, prompt answers, filter
  outcomes, date ranges and result pages.  These are the vocabulary of the
  navigation engine.
* Resource records — minimal, frozen views of the remote Twilio resources
  the browser can show and delete.

Apart from :class:`NavigationContext` every model is a frozen dataclass
with no behaviour beyond data access and validation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Reserved controls
# ---------------------------------------------------------------------------

class Control(Enum):
    """Reserved menu entries, also returned by every menu loop.

    ``BACK`` returns control to the invoking loop.  ``EXIT`` unwinds every
    enclosing loop up to the CLI, which ends the process.
    """

    BACK = "back"
    EXIT = "exit"


CONTROL_LABELS: dict[Control, str] = {
    Control.BACK: "Back",
    Control.EXIT: "Exit",
}


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------

class ResourceKind(Enum):
    """Top-level resource families offered by the browser."""

    CONVERSATIONS = "conversations"
    SYNC = "sync"


class ConversationAction(Enum):
    GET = "get"
    LIST = "list"
    DELETE = "delete"
    DELETE_ALL = "delete_all"


class ResourceAction(Enum):
    """Actions available once a single resource is in context."""

    LIST_DETAILS = "list_details"
    DELETE = "delete"


ACTION_LABELS: dict[Enum, str] = {
    ResourceKind.CONVERSATIONS: "Conversations",
    ResourceKind.SYNC: "Sync",
    ConversationAction.GET: "Get Conversation",
    ConversationAction.LIST: "List Conversations",
    ConversationAction.DELETE: "Delete Conversation",
    ConversationAction.DELETE_ALL: "Delete all Conversations",
    ResourceAction.LIST_DETAILS: "List Details",
    ResourceAction.DELETE: "Delete",
}
"""Display name of every action; menus never stringify enum members."""


# ---------------------------------------------------------------------------
# Choice / prompt outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Selected(Generic[T]):
    """The user picked one of the caller-supplied options."""

    value: T


ChoiceOutcome = Union[Selected[T], Control]
"""Tri-state result of a selection prompt: ``Selected``, Back or Exit."""


@dataclass(frozen=True, slots=True)
class Answered(Generic[T]):
    """A prompt completed with *value*."""

    value: T


@dataclass(frozen=True, slots=True)
class Cancelled:
    """A prompt was dismissed (Esc / Ctrl+C) without an answer."""


CANCELLED = Cancelled()

Answer = Union[Answered[T], Cancelled]
"""Result of every :class:`~twilio_browse.core.protocols.Prompter` call."""


@dataclass(frozen=True, slots=True)
class AnyFilter:
    """No filter requested."""


ANY_FILTER = AnyFilter()


@dataclass(frozen=True, slots=True)
class Specific(Generic[T]):
    """Filter on one value drawn from a known enumeration."""

    value: T


FilterOutcome = Union[AnyFilter, Specific[T]]


# ---------------------------------------------------------------------------
# Date ranges
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DateRange:
    """Inclusive calendar-date bounds for a date prompt."""

    minimum_date: date
    maximum_date: date

    def __post_init__(self) -> None:
        if self.minimum_date > self.maximum_date:
            raise ValueError(
                f"minimum_date {self.minimum_date} is after "
                f"maximum_date {self.maximum_date}"
            )

    def contains(self, value: date) -> bool:
        return self.minimum_date <= value <= self.maximum_date


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ResourcePage(Generic[T]):
    """One page of a remote listing.

    ``next_cursor`` is opaque to the core: it is handed back to the client
    verbatim to fetch the following page, and ``None`` marks the last page.
    """

    items: tuple[T, ...]
    next_cursor: str | None = None


# ---------------------------------------------------------------------------
# Navigation context
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class NavigationContext(Generic[T]):
    """Resource list cached at menu entry plus the current selection.

    Owned by exactly one browser invocation.  ``fixed`` marks a context
    built around a single resource supplied by the caller, in which case
    there is no list to return to.
    """

    resources: list[T]
    index: int | None = None
    fixed: bool = False

    @property
    def selected(self) -> T:
        if self.index is None:
            raise LookupError("No resource is selected.")
        return self.resources[self.index]

    def remove_selected(self) -> T:
        """Drop the selected entry from the cache and clear the selection."""
        if self.index is None:
            raise LookupError("No resource is selected.")
        removed = self.resources.pop(self.index)
        self.index = None
        return removed


# ---------------------------------------------------------------------------
# Resource records
# ---------------------------------------------------------------------------

class ConversationState(Enum):
    """Remote conversation states accepted by the ``State`` list filter."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    CLOSED = "closed"


@dataclass(frozen=True, slots=True)
class Conversation:
    sid: str
    account_sid: str
    chat_service_sid: str
    unique_name: str | None
    friendly_name: str | None
    state: str
    date_created: str
    date_updated: str
    attributes: str = "{}"


@dataclass(frozen=True, slots=True)
class SyncService:
    sid: str
    unique_name: str | None
    friendly_name: str | None
    date_created: str
    date_updated: str


@dataclass(frozen=True, slots=True)
class SyncDocument:
    sid: str
    service_sid: str
    unique_name: str | None
    revision: str
    date_created: str
    date_updated: str
    date_expires: str | None = None
    data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class SyncMap:
    sid: str
    service_sid: str
    unique_name: str | None
    revision: str
    date_created: str
    date_updated: str
    date_expires: str | None = None


@dataclass(frozen=True, slots=True)
class SyncMapItem:
    key: str
    map_sid: str
    service_sid: str
    revision: str
    date_created: str
    date_updated: str
    date_expires: str | None = None
    data: dict[str, Any] = field(default_factory=dict)
