"""
Backend JSON (snake_case) -> domain entities.

Fallbacks mirror what the admin console has always displayed for records
created by older backend versions: `EVENT-{id}` when the serial is missing,
`Unknown Event` when the event name is missing, inactive when the flag is
missing.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from src.service.ticketing.domain.enum.event_status import EventStatus


UNKNOWN_EVENT_NAME = 'Unknown Event'


def parse_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if not value or not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


_TRUE_STRINGS = {'true', '1', 'yes'}
_FALSE_STRINGS = {'false', '0', 'no', ''}


def parse_flag(value: Any) -> bool:
    """Backend boolean, also in string or 0/1 form. Missing is False; anything else raises."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ValueError(f'Not a boolean flag: {value!r}')


def _local(value: datetime) -> datetime:
    return value.astimezone() if value.tzinfo is not None else value


def _package_id(payload: Dict[str, Any]) -> Optional[str]:
    selected = payload.get('selected_package')
    if isinstance(selected, dict) and selected.get('id') is not None:
        return str(selected['id'])
    if payload.get('package_id') is not None:
        return str(payload['package_id'])
    return None


def to_ticket_entity(payload: Dict[str, Any], event: Optional[EventEntity] = None) -> TicketEntity:
    booking_id = payload.get('id')
    event_ref = payload.get('event', event.id if event else '')

    event_name = payload.get('event_name') or (event.title if event else UNKNOWN_EVENT_NAME)
    event_at = parse_datetime(payload.get('event_date')) or (event.date if event else None)
    event_at = _local(event_at) if event_at else None

    return TicketEntity(
        id=str(booking_id) if booking_id is not None else None,
        sno=payload.get('sno') or f'EVENT-{booking_id}',
        is_activated=parse_flag(payload.get('is_activated')),
        event_id=str(event_ref) if event_ref is not None else '',
        event_name=event_name,
        event_date=event_at.date() if event_at else None,
        event_time=event_at.time() if event_at else None,
        user_name=payload.get('user_name') or '',
        email=payload.get('email') or '',
        qr_code_url=payload.get('qr_code_url') or '',
        phone=payload.get('phone') or None,
        member_count=int(payload.get('member_count') or 1),
        package_id=_package_id(payload),
        total_amount=float(payload.get('total_amount') or 0.0),
        updated_at=parse_datetime(payload.get('updated_at')),
    )


def to_event_status(value: Any) -> EventStatus:
    try:
        return EventStatus(str(value).capitalize())
    except ValueError:
        # Unknown labels are re-derived from dates by the classifier
        return EventStatus.UPCOMING


def to_event_entity(payload: Dict[str, Any]) -> EventEntity:
    event_date = parse_datetime(payload.get('date'))
    if event_date is None:
        raise ValueError(f'Event {payload.get("id")} has no valid date')

    return EventEntity(
        id=str(payload['id']),
        slug=payload.get('slug') or '',
        title=payload.get('title') or '',
        date=event_date,
        end_date=parse_datetime(payload.get('end_date')),
        start_time=payload.get('start_time'),
        end_time=payload.get('end_time'),
        location=payload.get('location') or '',
        category=payload.get('category') or '',
        tags=list(payload.get('tags') or []),
        is_published=parse_flag(payload.get('is_published', payload.get('isPublished'))),
        status=to_event_status(payload.get('status')),
    )
