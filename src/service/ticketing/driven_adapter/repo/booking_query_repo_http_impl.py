from typing import Any, Dict, List, Optional

import httpx

from src.platform.constant.api_endpoint import (
    BOOKING_BY_HOST,
    BOOKING_BY_SNO,
    BOOKING_LIST,
    EVENT_BOOKINGS,
)
from src.platform.exception.exceptions import TransientNetworkError
from src.platform.http.api_client import build_path, decode_json_body, send_request
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from src.service.ticketing.driven_adapter.mapper.payload_mapper import to_ticket_entity


class BookingQueryRepoHttpImpl(IBookingQueryRepo):
    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    async def _list(self, path: str) -> List[TicketEntity]:
        response = await send_request(self.client, 'GET', path)
        items: List[Any] = decode_json_body(response, list)

        if any(not isinstance(item, dict) for item in items):
            raise TransientNetworkError(f'GET {path} returned a non-object booking', 502)
        return [self._to_entity(item, path) for item in items]

    @staticmethod
    def _to_entity(payload: Dict[str, Any], path: str) -> TicketEntity:
        try:
            return to_ticket_entity(payload)
        except (TypeError, ValueError) as e:
            raise TransientNetworkError(f'GET {path} returned a malformed booking: {e}', 502) from e

    @Logger.io
    async def get_by_sno(self, *, sno: str) -> Optional[TicketEntity]:
        path = build_path(BOOKING_BY_SNO, sno=sno)
        response = await send_request(self.client, 'GET', path)
        if response.status_code == httpx.codes.NOT_FOUND:
            return None
        return self._to_entity(decode_json_body(response, dict), path)

    @Logger.io
    async def list_all(self) -> List[TicketEntity]:
        return await self._list(BOOKING_LIST)

    @Logger.io
    async def list_by_host(self, *, host_id: str) -> List[TicketEntity]:
        return await self._list(build_path(BOOKING_BY_HOST, host_id=host_id))

    @Logger.io
    async def list_by_event(self, *, event_id: str) -> List[TicketEntity]:
        return await self._list(build_path(EVENT_BOOKINGS, event_id=event_id))
