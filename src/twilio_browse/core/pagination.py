"""Eager aggregation of cursor-paginated listings.

:func:`fetch_all` is all or nothing: the whole result set is materialised
before it is returned, and a failure on any page propagates unchanged with
every previously fetched page discarded.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TypeVar

from twilio_browse.core.protocols import PagedClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


def fetch_all(
    client: PagedClient[T],
    filters: Mapping[str, str] | None = None,
) -> list[T]:
    """Fetch every page of a listing and return the items in response order.

    Follow-up pages are requested with the cursor exactly as the previous
    page returned it; *filters* apply to the first request only.

    Raises
    ------
    ClassifiedError
        Propagated unchanged from whichever page fetch failed.
    """
    page = client.list(filters)
    results: list[T] = list(page.items)
    pages = 1

    while page.next_cursor:
        logger.debug("Fetching page %d: %s", pages + 1, page.next_cursor)
        page = client.next_page(page.next_cursor)
        results.extend(page.items)
        pages += 1

    logger.debug("Fetched %d item(s) across %d page(s)", len(results), pages)
    return results
