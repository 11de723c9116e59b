from datetime import datetime
from typing import List, Optional

import attrs

from src.service.ticketing.domain.enum.event_status import EventStatus


@attrs.define(frozen=True)
class EventEntity:
    id: str
    title: str
    date: datetime
    status: EventStatus
    slug: str = ''
    end_date: Optional[datetime] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    location: str = ''
    category: str = ''
    tags: List[str] = attrs.field(factory=list)
    is_published: bool = False
