from src.platform.exception.exceptions import TicketNotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity


class GetBookingUseCase:
    def __init__(self, booking_query_repo: IBookingQueryRepo):
        self.booking_query_repo = booking_query_repo

    @Logger.io
    async def get_by_sno(self, *, sno: str) -> TicketEntity:
        ticket = await self.booking_query_repo.get_by_sno(sno=sno)

        if ticket is None:
            raise TicketNotFoundError(sno)

        return ticket
