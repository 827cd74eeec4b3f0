"""Core layer — the interactive resource-navigation engine.

Rules
-----
* No ``print()`` calls; output goes through the injected ``Prompter``.
* No filesystem or network I/O; remote calls go through injected clients.
* No imports from ``cli`` or ``infra``.
"""

from twilio_browse.core.conversation_menu import ConversationMenu
from twilio_browse.core.models import (
    Answered,
    CANCELLED,
    Cancelled,
    Control,
    DateRange,
    ResourcePage,
    Selected,
)
from twilio_browse.core.navigation import ChildMenu, ResourceBrowser
from twilio_browse.core.pagination import fetch_all
from twilio_browse.core.protocols import (
    BulkDeleteClient,
    PagedClient,
    Prompter,
    ResourceClient,
    SyncApi,
)
from twilio_browse.core.sync_menu import SyncMenu

__all__: list[str] = [
    "CANCELLED",
    "Answered",
    "BulkDeleteClient",
    "Cancelled",
    "ChildMenu",
    "Control",
    "ConversationMenu",
    "DateRange",
    "PagedClient",
    "Prompter",
    "ResourceBrowser",
    "ResourceClient",
    "ResourcePage",
    "Selected",
    "SyncApi",
    "SyncMenu",
    "fetch_all",
]
