"""Protocols (interfaces) consumed by the core layer.

These define the contracts that the CLI and infrastructure adapters must
satisfy.  Core code depends ONLY on these protocols — never on concrete
implementations — so every menu can be driven by scripted fakes in tests.
"""

from __future__ import annotations

import datetime
from collections.abc import Callable, Mapping, Sequence
from typing import Protocol, TypeVar

from twilio_browse.core.models import (
    Answer,
    DateRange,
    ResourcePage,
    SyncDocument,
    SyncMap,
    SyncMapItem,
    SyncService,
)

T = TypeVar("T")

Validator = Callable[[str], "bool | str"]
"""Return ``True`` to accept the input, or an error message to reject it."""


class Prompter(Protocol):
    """Contract for interactive prompt backends.

    Every prompt returns an :data:`~twilio_browse.core.models.Answer`:
    ``Answered(value)`` or ``CANCELLED`` when the user backs out.  No
    exception crosses this boundary except
    :class:`~twilio_browse.exceptions.InputChannelClosedError`, which is
    fatal.
    """

    def select(self, message: str, options: Sequence[str]) -> Answer[int]:
        """Single-select among *options*; answers the chosen index."""
        ...  # pragma: no cover

    def confirm(self, message: str) -> Answer[bool]:
        """Yes / No question."""
        ...  # pragma: no cover

    def text(
        self,
        message: str,
        *,
        placeholder: str = "",
        validator: Validator | None = None,
    ) -> Answer[str]:
        """Free-text input, re-prompted until *validator* accepts it."""
        ...  # pragma: no cover

    def date(
        self,
        message: str,
        date_range: DateRange | None = None,
    ) -> Answer[datetime.date]:
        """Calendar date input; out-of-range input is rejected before returning."""
        ...  # pragma: no cover

    def show(self, message: str = "") -> None:
        """Output channel for status lines and results."""
        ...  # pragma: no cover


class PagedClient(Protocol[T]):
    """Contract for cursor-paginated listings of one resource kind."""

    def list(self, filters: Mapping[str, str] | None = None) -> ResourcePage[T]:
        """Fetch the first page matching *filters*.

        Raises
        ------
        ClassifiedError
            When the remote call fails.
        """
        ...  # pragma: no cover

    def next_page(self, cursor: str) -> ResourcePage[T]:
        """Fetch the page identified by *cursor* exactly as received."""
        ...  # pragma: no cover


class ResourceClient(PagedClient[T], Protocol[T]):
    """Contract for get / list / delete on one resource kind.

    Implementations raise
    :class:`~twilio_browse.exceptions.ResourceNotFoundError` when the
    resource is absent and
    :class:`~twilio_browse.exceptions.RemoteFailureError` for everything
    else.
    """

    def get(self, resource_id: str) -> T:
        ...  # pragma: no cover

    def delete(self, resource_id: str) -> None:
        ...  # pragma: no cover


class BulkDeleteClient(ResourceClient[T], Protocol[T]):
    """A :class:`ResourceClient` that can also delete every matching resource."""

    def delete_all(self, filters: Mapping[str, str] | None = None) -> None:
        ...  # pragma: no cover


class SyncApi(Protocol):
    """Factory for the nested Sync resource clients."""

    def services(self) -> ResourceClient[SyncService]:
        ...  # pragma: no cover

    def documents(self, service_sid: str) -> ResourceClient[SyncDocument]:
        ...  # pragma: no cover

    def maps(self, service_sid: str) -> ResourceClient[SyncMap]:
        ...  # pragma: no cover

    def map_items(self, service_sid: str, map_sid: str) -> ResourceClient[SyncMapItem]:
        ...  # pragma: no cover
