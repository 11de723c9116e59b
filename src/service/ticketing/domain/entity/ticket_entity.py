from datetime import date, datetime, time
from typing import Optional

import attrs


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValueError(f'Ticket {attribute.name} cannot be empty')


@attrs.define(frozen=True)
class TicketEntity:
    """
    A booked ticket as held by the backend.

    `is_activated` is the only field the activation protocol changes, and only
    the backend changes it. Everything else is a snapshot taken at booking time.
    """

    sno: str = attrs.field(validator=_validate_non_empty_string)
    is_activated: bool
    event_id: str
    event_name: str
    user_name: str
    email: str
    qr_code_url: str = ''
    event_date: Optional[date] = None
    event_time: Optional[time] = None
    id: Optional[str] = None
    phone: Optional[str] = None
    member_count: int = 1
    package_id: Optional[str] = None
    total_amount: float = 0.0
    updated_at: Optional[datetime] = None

    def matches_search(self, term: str) -> bool:
        needle = term.lower()
        return (
            needle in self.user_name.lower()
            or needle in self.event_name.lower()
            or needle in self.sno.lower()
        )
