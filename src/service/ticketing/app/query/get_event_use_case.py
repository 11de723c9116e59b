from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.ticketing.domain.entity.event_entity import EventEntity


class GetEventUseCase:
    def __init__(self, event_query_repo: IEventQueryRepo) -> None:
        self.event_query_repo = event_query_repo

    @Logger.io
    async def get_by_id(self, *, event_id: str) -> EventEntity:
        event = await self.event_query_repo.get_by_id(event_id=event_id)

        if event is None:
            Logger.base.warning(f'[GET_EVENT] Event {event_id} not found')
            raise NotFoundError('Event not found')

        return event
