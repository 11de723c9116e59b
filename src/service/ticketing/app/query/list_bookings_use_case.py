from typing import List, Optional

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity


class ListBookingsUseCase:
    """
    Booking list behind the schedule table.

    Scope: an event's bookings when `event_id` is given, otherwise a host's
    bookings, otherwise every booking. `package_id` narrows an event's
    bookings to one package; `search` matches user name, event name or serial.
    """

    def __init__(self, booking_query_repo: IBookingQueryRepo):
        self.booking_query_repo = booking_query_repo

    @Logger.io
    async def execute(
        self,
        *,
        host_id: Optional[str] = None,
        event_id: Optional[str] = None,
        package_id: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[TicketEntity]:
        if event_id is not None:
            bookings = await self.booking_query_repo.list_by_event(event_id=event_id)
        elif host_id is not None:
            bookings = await self.booking_query_repo.list_by_host(host_id=host_id)
        else:
            bookings = await self.booking_query_repo.list_all()

        if package_id is not None:
            bookings = [b for b in bookings if b.package_id == package_id]

        if search and search.strip():
            term = search.strip()
            bookings = [b for b in bookings if b.matches_search(term)]

        return bookings
