from datetime import datetime
from typing import Callable, List

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.enum.event_status import EventStatus
from src.service.ticketing.domain.event_status_classifier import classify


_DASHBOARD_STATUSES = (EventStatus.ONGOING, EventStatus.UPCOMING)


def local_now() -> datetime:
    return datetime.now().astimezone()


class ListUpcomingOngoingEventsUseCase:
    """
    Dashboard list of events happening today or later.

    Each event's status is re-derived from its dates against the injected
    clock; drafts keep their backend status and are left out.
    """

    def __init__(
        self,
        event_query_repo: IEventQueryRepo,
        clock: Callable[[], datetime] = local_now,
    ) -> None:
        self.event_query_repo = event_query_repo
        self.clock = clock

    @Logger.io
    async def execute(self, *, limit: int = 10) -> List[EventEntity]:
        now = self.clock()
        events = await self.event_query_repo.list_upcoming_ongoing()

        classified = [
            attrs.evolve(
                event,
                status=classify(
                    now, event.date, event.end_date, backend_status=event.status
                ),
            )
            for event in events
        ]
        return [event for event in classified if event.status in _DASHBOARD_STATUSES][:limit]
