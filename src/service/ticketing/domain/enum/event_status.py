"""
Event Status Enum - Domain Value Object

`DRAFT` is assigned by the backend. The other three are derived on the client
from the event's dates (see event_status_classifier).
"""

from enum import Enum


class EventStatus(Enum):
    """Event status as shown in the admin console"""

    UPCOMING = 'Upcoming'
    ONGOING = 'Ongoing'
    COMPLETED = 'Completed'
    DRAFT = 'Draft'
