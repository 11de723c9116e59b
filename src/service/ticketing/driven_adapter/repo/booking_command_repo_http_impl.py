import attrs
import httpx
import orjson

from src.platform.constant.api_endpoint import BOOKING_SCAN, EVENT_REGISTER
from src.platform.exception.exceptions import DomainError, ToggleFailedError
from src.platform.http.api_client import (
    build_path,
    decode_json,
    response_detail,
    send_request,
)
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from src.service.ticketing.domain.value_object.registration import Registration
from src.service.ticketing.driven_adapter.mapper.payload_mapper import to_ticket_entity


class BookingCommandRepoHttpImpl(IBookingCommandRepo):
    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    @Logger.io
    async def toggle_activation_by_sno(self, *, sno: str) -> TicketEntity:
        response = await send_request(
            self.client, 'POST', build_path(BOOKING_SCAN, sno=sno), json={}
        )

        if not response.is_success:
            raise ToggleFailedError(
                f'Backend refused to toggle ticket {sno} ({response.status_code})',
                response.status_code,
                detail=response_detail(response),
            )

        # Success status with an unusable body: the new state is unknown
        try:
            payload = decode_json(response)
        except orjson.JSONDecodeError as e:
            raise ToggleFailedError(
                f'Toggle response for ticket {sno} is not JSON',
                response.status_code,
                detail=response.text,
            ) from e

        booking = payload.get('booking') if isinstance(payload, dict) else None
        if not isinstance(booking, dict):
            raise ToggleFailedError(
                f'Toggle response for ticket {sno} carried no booking record',
                response.status_code,
                detail=payload,
            )
        try:
            return to_ticket_entity(booking)
        except (TypeError, ValueError) as e:
            raise ToggleFailedError(
                f'Toggle response for ticket {sno} carried a malformed booking: {e}',
                response.status_code,
                detail=payload,
            ) from e

    @Logger.io
    async def register(self, *, event: EventEntity, registration: Registration) -> TicketEntity:
        body = attrs.asdict(registration)
        body['selected_package'] = registration.selected_package or {}

        response = await send_request(
            self.client, 'POST', build_path(EVENT_REGISTER, event_id=event.id), json=body
        )
        if not response.is_success:
            raise DomainError(
                f'Registration for event {event.id} failed: {response_detail(response)}',
                response.status_code,
            )
        return to_ticket_entity(decode_json(response), event=event)
