"""Plain-text rendering of resources and status lines.

Pure transforms — no I/O.  Menus hand the resulting strings to
:meth:`Prompter.show <twilio_browse.core.protocols.Prompter.show>`.
"""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from typing import Any

from twilio_browse.core.models import (
    Conversation,
    SyncDocument,
    SyncMap,
    SyncMapItem,
    SyncService,
)

CANCELED_NOTICE: str = "Operation canceled. No changes were made."
NO_RESOURCES_FOUND: str = "No resources found."


def found_message(count: int) -> str:
    """``"Found N resources."`` status line; the wording is fixed for every count."""
    return f"Found {count} resources."


def not_found_message(kind: str, resource_id: str, id_name: str = "SID") -> str:
    return f"A {kind} with {id_name} '{resource_id}' was not found."


def conversation_line(conversation: Conversation) -> str:
    """One listing line: ``(CH…) unique-name - state`` or ``CH… - state``."""
    if conversation.unique_name:
        return f"({conversation.sid}) {conversation.unique_name} - {conversation.state}"
    return f"{conversation.sid} - {conversation.state}"


def _sid_label(sid: str, unique_name: str | None, friendly_name: str | None = None) -> str:
    name = unique_name or friendly_name
    return f"({sid}) {name}" if name else sid


def sync_service_label(service: SyncService) -> str:
    return _sid_label(service.sid, service.unique_name, service.friendly_name)


def document_label(document: SyncDocument) -> str:
    return _sid_label(document.sid, document.unique_name)


def map_label(sync_map: SyncMap) -> str:
    return _sid_label(sync_map.sid, sync_map.unique_name)


def map_item_label(item: SyncMapItem) -> str:
    return item.key


def _render_value(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, (dict, list)):
        return json.dumps(value, indent=2, sort_keys=True)
    return str(value)


def details(resource: object) -> str:
    """Render every field of a resource record as ``name: value`` lines."""
    if not is_dataclass(resource) or isinstance(resource, type):
        return str(resource)
    fields = asdict(resource)
    width = max((len(name) for name in fields), default=0)
    return "\n".join(f"{name:<{width}}  {_render_value(value)}" for name, value in fields.items())
