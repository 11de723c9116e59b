from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from src.service.ticketing.domain.value_object.registration import Registration


class RegisterForEventUseCase:
    def __init__(self, *, booking_command_repo: IBookingCommandRepo) -> None:
        self.booking_command_repo = booking_command_repo

    @Logger.io
    async def execute(self, *, event: EventEntity, registration: Registration) -> TicketEntity:
        registration.validate()

        ticket = await self.booking_command_repo.register(event=event, registration=registration)

        Logger.base.info(f'[REGISTER] Ticket {ticket.sno} issued for event {event.id}')
        return ticket
