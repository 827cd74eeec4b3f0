"""Interactive menus for Twilio Sync.

Navigation tree::

    Sync Services ─┬─ Documents
                   └─ Maps ── Map Items

Every level is a :class:`~twilio_browse.core.navigation.ResourceBrowser`.
A child level receives only the selected parent record, never the
parent's cached list.
"""

from __future__ import annotations

from twilio_browse.core.formatting import (
    document_label,
    map_item_label,
    map_label,
    not_found_message,
    sync_service_label,
)
from twilio_browse.core.models import (
    Control,
    SyncDocument,
    SyncMap,
    SyncMapItem,
    SyncService,
)
from twilio_browse.core.navigation import ChildMenu, ResourceBrowser
from twilio_browse.core.protocols import Prompter, SyncApi
from twilio_browse.exceptions import ResourceNotFoundError


class SyncMenu:
    """Builds and runs the browsers of the Sync navigation tree."""

    def __init__(self, prompter: Prompter, api: SyncApi) -> None:
        self._prompter = prompter
        self._api = api

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def services(self, service: SyncService | None = None) -> Control:
        """Browse all Sync Services, or only *service* when supplied."""
        browser: ResourceBrowser[SyncService] = ResourceBrowser(
            self._prompter,
            self._api.services(),
            kind="Sync Service",
            plural="Sync Services",
            identify=lambda item: item.sid,
            describe=sync_service_label,
            children=(
                ChildMenu("Documents", self.documents),
                ChildMenu("Maps", self.maps),
            ),
        )
        return browser.run(service)

    def open_service(self, service_sid: str) -> Control:
        """Fetch one Sync Service by SID and browse it as a fixed context."""
        try:
            service = self._api.services().get(service_sid)
        except ResourceNotFoundError:
            self._prompter.show(not_found_message("Sync Service", service_sid))
            self._prompter.show()
            return Control.BACK
        return self.services(service)

    # ------------------------------------------------------------------
    # Child levels
    # ------------------------------------------------------------------

    def documents(self, service: SyncService) -> Control:
        browser: ResourceBrowser[SyncDocument] = ResourceBrowser(
            self._prompter,
            self._api.documents(service.sid),
            kind="Document",
            plural="Documents",
            identify=lambda item: item.sid,
            describe=document_label,
        )
        return browser.run()

    def maps(self, service: SyncService) -> Control:
        def open_items(sync_map: SyncMap) -> Control:
            return self.map_items(service, sync_map)

        browser: ResourceBrowser[SyncMap] = ResourceBrowser(
            self._prompter,
            self._api.maps(service.sid),
            kind="Map",
            plural="Maps",
            identify=lambda item: item.sid,
            describe=map_label,
            children=(ChildMenu("Map Items", open_items),),
        )
        return browser.run()

    def map_items(self, service: SyncService, sync_map: SyncMap) -> Control:
        browser: ResourceBrowser[SyncMapItem] = ResourceBrowser(
            self._prompter,
            self._api.map_items(service.sid, sync_map.sid),
            kind="Map Item",
            plural="Map Items",
            identify=lambda item: item.key,
            describe=map_item_label,
            id_name="key",
        )
        return browser.run()
