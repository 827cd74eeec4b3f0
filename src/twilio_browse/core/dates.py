"""Date and date-range selection for filtered listings.

A start/end pair is always constrained: the start date must fall within
the last year, and the end date between the chosen start date and today.
Nothing partial ever leaves this module — if either prompt is cancelled
the whole range is abandoned.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, timezone

from twilio_browse.core.models import Answer, Answered, Cancelled, DateRange
from twilio_browse.core.protocols import Prompter

logger = logging.getLogger(__name__)

START_DATE_LOOKBACK: timedelta = timedelta(days=365)

START_DATE_MESSAGE: str = "Choose a start date:"
END_DATE_MESSAGE: str = "Choose an end date:"


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def default_start_range(today: date) -> DateRange:
    """Range offered for a start date: the year up to and including *today*."""
    return DateRange(minimum_date=today - START_DATE_LOOKBACK, maximum_date=today)


def select_date(
    prompter: Prompter,
    message: str,
    date_range: DateRange | None = None,
) -> Answer[date]:
    """Prompt for a date, never returning one outside *date_range*.

    The prompter is expected to reject out-of-range input itself; any
    answer that still falls outside the range is discarded and the user is
    asked again.
    """
    while True:
        answer = prompter.date(message, date_range)
        if isinstance(answer, Cancelled) or date_range is None:
            return answer
        if date_range.contains(answer.value):
            return answer

        logger.warning(
            "Discarding out-of-range date %s (allowed %s to %s)",
            answer.value,
            date_range.minimum_date,
            date_range.maximum_date,
        )
        prompter.show(
            f"Please choose a date between {date_range.minimum_date.isoformat()} "
            f"and {date_range.maximum_date.isoformat()}."
        )


def select_date_range(prompter: Prompter, today: date | None = None) -> Answer[DateRange]:
    """Prompt for a start date, then an end date bounded by it."""
    today = today or utc_today()

    start = select_date(prompter, START_DATE_MESSAGE, default_start_range(today))
    if isinstance(start, Cancelled):
        return start

    end = select_date(
        prompter,
        END_DATE_MESSAGE,
        DateRange(minimum_date=start.value, maximum_date=today),
    )
    if isinstance(end, Cancelled):
        return end

    return Answered(DateRange(minimum_date=start.value, maximum_date=end.value))


def date_range_filters(date_range: DateRange) -> dict[str, str]:
    """Render *date_range* as ``StartDate`` / ``EndDate`` list parameters."""
    return {
        "StartDate": f"{date_range.minimum_date.isoformat()}T00:00:00Z",
        "EndDate": f"{date_range.maximum_date.isoformat()}T23:59:59Z",
    }
