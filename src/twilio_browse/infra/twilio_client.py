"""Twilio-backed implementations of the core resource-client protocols.

Each collection (Conversations, Sync Services, Documents, Maps, Map
Items) is served by a :class:`TwilioCollection` bound to its URL, the key
under which list responses carry their records, and a parser producing the
matching domain model.  Twilio's ``meta.next_page_url`` is used verbatim
as the pagination cursor.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, Generic, TypeVar
from urllib.parse import quote

from twilio_browse.config import Settings
from twilio_browse.core.models import (
    Conversation,
    ResourcePage,
    SyncDocument,
    SyncMap,
    SyncMapItem,
    SyncService,
)
from twilio_browse.core.pagination import fetch_all
from twilio_browse.exceptions import RemoteFailureError, ResourceNotFoundError
from twilio_browse.infra.http import TwilioHttpClient

logger = logging.getLogger(__name__)

T = TypeVar("T")

CONVERSATIONS_URL: str = "https://conversations.twilio.com/v1/Conversations"
SYNC_SERVICES_URL: str = "https://sync.twilio.com/v1/Services"

PAGE_SIZE: int = 50


class TwilioCollection(Generic[T]):
    """get / list / next_page / delete over one Twilio collection URL.

    Satisfies :class:`~twilio_browse.core.protocols.ResourceClient`
    structurally.
    """

    def __init__(
        self,
        http: TwilioHttpClient,
        url: str,
        list_key: str,
        parse: Callable[[dict[str, Any]], T],
    ) -> None:
        self._http = http
        self.url = url
        self._list_key = list_key
        self._parse = parse
        self._visited_cursors: set[str] = set()

    def get(self, resource_id: str) -> T:
        payload = self._http.request("GET", self._resource_url(resource_id))
        if payload is None:
            raise RemoteFailureError(f"Empty response for {self._resource_url(resource_id)}")
        return self._parse(payload)

    def list(self, filters: Mapping[str, str] | None = None) -> ResourcePage[T]:
        """Fetch the first page; starts a new listing."""
        params = {"PageSize": str(PAGE_SIZE)}
        params.update(filters or {})
        self._visited_cursors.clear()
        return self._page(self._http.request("GET", self.url, params=params))

    def next_page(self, cursor: str) -> ResourcePage[T]:
        """Fetch the page at *cursor*.

        Raises
        ------
        RemoteFailureError
            If *cursor* was already followed since the last :meth:`list`.
        """
        if cursor in self._visited_cursors:
            raise RemoteFailureError(
                "Pagination returned a cursor that was already visited.",
                raw=cursor,
            )
        self._visited_cursors.add(cursor)
        return self._page(self._http.request("GET", cursor))

    def delete(self, resource_id: str) -> None:
        self._http.request("DELETE", self._resource_url(resource_id))
        logger.debug("Deleted %s", self._resource_url(resource_id))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _resource_url(self, resource_id: str) -> str:
        return f"{self.url}/{quote(resource_id, safe='')}"

    def _page(self, payload: dict[str, Any] | None) -> ResourcePage[T]:
        """Convert a list response into a :class:`ResourcePage`."""
        if payload is None:
            raise RemoteFailureError(f"Empty list response from {self.url}")

        raw_items: object = payload.get(self._list_key)
        if not isinstance(raw_items, list):
            raise RemoteFailureError(
                f"List response from {self.url} has no '{self._list_key}' array",
                raw=payload,
            )

        if not all(isinstance(entry, dict) for entry in raw_items):
            raise RemoteFailureError(
                f"List response from {self.url} has a malformed '{self._list_key}' entry",
                raw=payload,
            )

        meta: object = payload.get("meta")
        next_url = meta.get("next_page_url") if isinstance(meta, dict) else None

        return ResourcePage(
            items=tuple(self._parse(entry) for entry in raw_items),
            next_cursor=str(next_url) if next_url else None,
        )


class ConversationsClient(TwilioCollection[Conversation]):
    """Conversations collection with bulk deletion."""

    def __init__(self, http: TwilioHttpClient) -> None:
        super().__init__(http, CONVERSATIONS_URL, "conversations", parse_conversation)

    def delete_all(self, filters: Mapping[str, str] | None = None) -> None:
        """Delete every conversation matching *filters*.

        The full listing is fetched first; conversations that disappear in
        the meantime are skipped.
        """
        conversations = fetch_all(self, filters)
        logger.info("Deleting %d conversation(s)", len(conversations))
        for conversation in conversations:
            try:
                self.delete(conversation.sid)
            except ResourceNotFoundError:
                logger.info("Conversation %s was already deleted", conversation.sid)


class TwilioSyncApi:
    """Factory for the nested Sync collections.

    Satisfies :class:`~twilio_browse.core.protocols.SyncApi` structurally.
    """

    def __init__(self, http: TwilioHttpClient) -> None:
        self._http = http

    def services(self) -> TwilioCollection[SyncService]:
        return TwilioCollection(self._http, SYNC_SERVICES_URL, "services", parse_sync_service)

    def documents(self, service_sid: str) -> TwilioCollection[SyncDocument]:
        return TwilioCollection(
            self._http,
            f"{SYNC_SERVICES_URL}/{service_sid}/Documents",
            "documents",
            parse_sync_document,
        )

    def maps(self, service_sid: str) -> TwilioCollection[SyncMap]:
        return TwilioCollection(
            self._http,
            f"{SYNC_SERVICES_URL}/{service_sid}/Maps",
            "maps",
            parse_sync_map,
        )

    def map_items(self, service_sid: str, map_sid: str) -> TwilioCollection[SyncMapItem]:
        return TwilioCollection(
            self._http,
            f"{SYNC_SERVICES_URL}/{service_sid}/Maps/{map_sid}/Items",
            "items",
            parse_sync_map_item,
        )


class TwilioClient:
    """Entry point wiring the HTTP transport to every resource client."""

    def __init__(self, settings: Settings, http: TwilioHttpClient | None = None) -> None:
        self._http = http or TwilioHttpClient(settings)
        self.conversations = ConversationsClient(self._http)
        self.sync = TwilioSyncApi(self._http)


# ---------------------------------------------------------------------------
# Raw-dict → domain-model parsers (pure)
# ---------------------------------------------------------------------------

def _str(raw: dict[str, Any], key: str, default: str = "") -> str:
    value = raw.get(key)
    return default if value is None else str(value)


def _optional_str(raw: dict[str, Any], key: str) -> str | None:
    value = raw.get(key)
    return None if value is None else str(value)


def _data(raw: dict[str, Any]) -> dict[str, Any]:
    value = raw.get("data")
    return dict(value) if isinstance(value, dict) else {}


def parse_conversation(raw: dict[str, Any]) -> Conversation:
    return Conversation(
        sid=_str(raw, "sid"),
        account_sid=_str(raw, "account_sid"),
        chat_service_sid=_str(raw, "chat_service_sid"),
        unique_name=_optional_str(raw, "unique_name"),
        friendly_name=_optional_str(raw, "friendly_name"),
        state=_str(raw, "state", "active"),
        date_created=_str(raw, "date_created"),
        date_updated=_str(raw, "date_updated"),
        attributes=_str(raw, "attributes", "{}"),
    )


def parse_sync_service(raw: dict[str, Any]) -> SyncService:
    return SyncService(
        sid=_str(raw, "sid"),
        unique_name=_optional_str(raw, "unique_name"),
        friendly_name=_optional_str(raw, "friendly_name"),
        date_created=_str(raw, "date_created"),
        date_updated=_str(raw, "date_updated"),
    )


def parse_sync_document(raw: dict[str, Any]) -> SyncDocument:
    return SyncDocument(
        sid=_str(raw, "sid"),
        service_sid=_str(raw, "service_sid"),
        unique_name=_optional_str(raw, "unique_name"),
        revision=_str(raw, "revision"),
        date_created=_str(raw, "date_created"),
        date_updated=_str(raw, "date_updated"),
        date_expires=_optional_str(raw, "date_expires"),
        data=_data(raw),
    )


def parse_sync_map(raw: dict[str, Any]) -> SyncMap:
    return SyncMap(
        sid=_str(raw, "sid"),
        service_sid=_str(raw, "service_sid"),
        unique_name=_optional_str(raw, "unique_name"),
        revision=_str(raw, "revision"),
        date_created=_str(raw, "date_created"),
        date_updated=_str(raw, "date_updated"),
        date_expires=_optional_str(raw, "date_expires"),
    )


def parse_sync_map_item(raw: dict[str, Any]) -> SyncMapItem:
    return SyncMapItem(
        key=_str(raw, "key"),
        map_sid=_str(raw, "map_sid"),
        service_sid=_str(raw, "service_sid"),
        revision=_str(raw, "revision"),
        date_created=_str(raw, "date_created"),
        date_updated=_str(raw, "date_updated"),
        date_expires=_optional_str(raw, "date_expires"),
        data=_data(raw),
    )
