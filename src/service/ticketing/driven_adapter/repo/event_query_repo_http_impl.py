from typing import Any, List, Optional

import httpx

from src.platform.constant.api_endpoint import EVENT_GET, EVENT_UPCOMING_ONGOING
from src.platform.http.api_client import build_path, decode_json_body, send_request
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.driven_adapter.mapper.payload_mapper import to_event_entity


class EventQueryRepoHttpImpl(IEventQueryRepo):
    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    @Logger.io
    async def get_by_id(self, *, event_id: str) -> Optional[EventEntity]:
        response = await send_request(self.client, 'GET', build_path(EVENT_GET, event_id=event_id))
        if response.status_code == httpx.codes.NOT_FOUND:
            return None
        return to_event_entity(decode_json_body(response, dict))

    @Logger.io
    async def list_upcoming_ongoing(self) -> List[EventEntity]:
        response = await send_request(self.client, 'GET', EVENT_UPCOMING_ONGOING)
        items: List[Any] = decode_json_body(response, list)

        events = []
        for item in items:
            if not isinstance(item, dict):
                Logger.base.warning(f'[EVENTS] Skipping non-object event entry: {item!r}')
                continue
            try:
                events.append(to_event_entity(item))
            except (KeyError, ValueError) as e:
                Logger.base.warning(f'[EVENTS] Skipping malformed event {item.get("id")}: {e}')
        return events
