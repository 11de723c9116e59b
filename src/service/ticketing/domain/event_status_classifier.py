"""
Client-side event status derivation.

"Today" is the caller's local calendar day: the timezone of `now` when it is
aware, the process timezone otherwise. Events are compared by calendar day,
never by time of day, so an event is Ongoing for its whole start day even
before its nominal start time.

Multi-timezone deployments will see events change status at the viewer's
midnight, not the venue's.
"""

from datetime import date, datetime, tzinfo
from typing import Optional

from src.service.ticketing.domain.enum.event_status import EventStatus


def _calendar_day(value: date | datetime, tz: Optional[tzinfo]) -> date:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            # tz=None converts to the process local timezone
            value = value.astimezone(tz)
        return value.date()
    return value


def classify(
    now: datetime,
    event_date: date | datetime,
    end_date: Optional[date | datetime] = None,
    *,
    backend_status: EventStatus,
) -> EventStatus:
    if backend_status is EventStatus.DRAFT:
        return EventStatus.DRAFT

    tz = now.tzinfo
    today = now.date()
    start_day = _calendar_day(event_date, tz)

    if start_day == today:
        return EventStatus.ONGOING

    end_day = _calendar_day(end_date, tz) if end_date is not None else None
    if end_day is not None and start_day <= today <= end_day:
        return EventStatus.ONGOING

    if start_day > today:
        return EventStatus.UPCOMING

    # start_day < today and the event has no day left
    return EventStatus.COMPLETED
