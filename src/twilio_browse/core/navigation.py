"""Generic resource-navigation engine.

:class:`ResourceBrowser` drives one resource kind through three states:

``MenuRoot``
    No resource selected; the user picks one from the list fetched (all
    pages) when the browser started.  Back returns to the caller.
``MenuSelected``
    One resource is in context; the user opens a child menu, lists its
    details or deletes it.  Back returns to ``MenuRoot``, or to the caller
    when the resource was supplied directly.
``SubMenu``
    A child browser is running; when it returns, ``MenuSelected`` resumes.

Exit may be chosen in any state and is returned up the stack as
``Control.EXIT`` without touching any further state.

Destructive actions always go through :func:`confirm_destructive`.  A
delete that finds the resource already gone is reported and treated as
done; every other remote failure propagates.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from twilio_browse.core.choices import choose, choose_from
from twilio_browse.core.formatting import (
    CANCELED_NOTICE,
    NO_RESOURCES_FOUND,
    details,
    found_message,
    not_found_message,
)
from twilio_browse.core.models import (
    ACTION_LABELS,
    Cancelled,
    Control,
    NavigationContext,
    ResourceAction,
    Selected,
)
from twilio_browse.core.pagination import fetch_all
from twilio_browse.core.protocols import Prompter, ResourceClient
from twilio_browse.exceptions import ResourceNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def confirm_destructive(prompter: Prompter, messages: Sequence[str]) -> bool:
    """Ask every confirmation in *messages* in turn.

    Returns ``True`` only when each one is answered Yes.  The first No or
    dismissal stops the sequence and shows the canceled notice.
    """
    for message in messages:
        answer = prompter.confirm(message)
        if isinstance(answer, Cancelled) or not answer.value:
            prompter.show(CANCELED_NOTICE)
            prompter.show()
            return False
    return True


def delete_confirmation(kind: str) -> str:
    return f"Are you sure you wish to delete the {kind}? (Yes / No)"


@dataclass(frozen=True, slots=True)
class ChildMenu(Generic[T]):
    """A nested resource kind reachable from a selected resource."""

    label: str
    open: Callable[[T], Control]


MenuEntry = Union[ChildMenu[T], ResourceAction]


class ResourceBrowser(Generic[T]):
    """Interactive browser for one resource kind.

    Parameters
    ----------
    prompter:
        Prompt backend.
    client:
        Remote client for this resource kind.
    kind:
        Singular display name (``"Sync Service"``).
    plural:
        Plural display name (``"Sync Services"``).
    identify:
        Returns the identifier passed to ``client.delete``.
    describe:
        Returns the (unique) label shown in the selection menu.
    children:
        Child menus offered ahead of List Details and Delete.
    id_name:
        What the identifier is called in messages (``"SID"``, ``"key"``).
    """

    def __init__(
        self,
        prompter: Prompter,
        client: ResourceClient[T],
        *,
        kind: str,
        plural: str,
        identify: Callable[[T], str],
        describe: Callable[[T], str],
        children: Sequence[ChildMenu[T]] = (),
        id_name: str = "SID",
    ) -> None:
        self._prompter = prompter
        self._client = client
        self.kind = kind
        self.plural = plural
        self._identify = identify
        self._describe = describe
        self._children = tuple(children)
        self._id_name = id_name

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def run(self, resource: T | None = None) -> Control:
        """Browse the kind; start at *resource* when one is supplied."""
        if resource is not None:
            context = NavigationContext([resource], index=0, fixed=True)
        else:
            self._prompter.show(f"Fetching {self.plural}...")
            resources = fetch_all(self._client)
            if not resources:
                self._prompter.show(NO_RESOURCES_FOUND)
                self._prompter.show()
                return Control.BACK
            self._prompter.show(found_message(len(resources)))
            context = NavigationContext(resources)

        while True:
            if context.index is None:
                outcome = self._choose_resource(context)
                if not isinstance(outcome, Selected):
                    return outcome
                context.index = outcome.value

            if self._browse_selected(context) is Control.EXIT:
                return Control.EXIT
            if context.fixed:
                return Control.BACK
            if not context.resources:
                self._prompter.show(f"No {self.plural} remaining.")
                self._prompter.show()
                return Control.BACK
            context.index = None

    # ------------------------------------------------------------------
    # States
    # ------------------------------------------------------------------

    def _choose_resource(self, context: NavigationContext[T]) -> Control | Selected[int]:
        """Pick a cached resource by its label; answers its index in the cache.

        Labels embed the resource identifier, so they are unique.
        """
        labels = [self._describe(resource) for resource in context.resources]
        outcome = choose(self._prompter, f"Choose a {self.kind}:", labels)
        if not isinstance(outcome, Selected):
            return outcome
        return Selected(labels.index(outcome.value))

    def _browse_selected(self, context: NavigationContext[T]) -> Control:
        """Loop over actions on the selected resource.

        Returns ``Control.BACK`` when the user backs out or the resource
        was deleted, ``Control.EXIT`` when Exit was chosen anywhere below.
        """
        entries: list[tuple[str, MenuEntry[T]]] = [(child.label, child) for child in self._children]
        entries.extend((ACTION_LABELS[action], action) for action in ResourceAction)

        while True:
            resource = context.selected
            outcome = choose_from(self._prompter, "Select an action:", entries)
            if not isinstance(outcome, Selected):
                return outcome

            entry = outcome.value
            if isinstance(entry, ChildMenu):
                logger.debug("Opening %s for %s %s", entry.label, self.kind, self._identify(resource))
                if entry.open(resource) is Control.EXIT:
                    return Control.EXIT
            elif entry is ResourceAction.LIST_DETAILS:
                self._prompter.show(details(resource))
                self._prompter.show()
            elif entry is ResourceAction.DELETE:
                if self._delete(context):
                    return Control.BACK

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def _delete(self, context: NavigationContext[T]) -> bool:
        """Delete the selected resource after confirmation.

        Returns ``True`` when the resource is gone (deleted now or already
        absent) and has been removed from the cache.
        """
        if not confirm_destructive(self._prompter, [delete_confirmation(self.kind)]):
            return False

        resource_id = self._identify(context.selected)
        self._prompter.show(f"Deleting {self.kind}...")
        try:
            self._client.delete(resource_id)
        except ResourceNotFoundError:
            logger.info("%s %s was already deleted", self.kind, resource_id)
            self._prompter.show(not_found_message(self.kind, resource_id, self._id_name))
        else:
            logger.info("Deleted %s %s", self.kind, resource_id)
            self._prompter.show(f"{self.kind} deleted.")
        self._prompter.show()

        context.remove_selected()
        return True
