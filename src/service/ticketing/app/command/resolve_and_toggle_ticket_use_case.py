from src.platform.exception.exceptions import DomainError, TicketNotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.dto.ticket_activation_result import TicketActivationResult
from src.service.ticketing.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.ticketing.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.ticketing.domain.enum.activation_transition import ActivationTransition


class ResolveAndToggleTicketUseCase:
    """
    Resolve a ticket by serial and flip its activation on the backend.

    Flow:
    1. Look the ticket up by serial (TicketNotFoundError if missing)
    2. Toggle activation on the backend, unconditionally
    3. Return the record the backend echoed

    The toggle is never sent without a confirmed lookup, and the new
    `is_activated` value is never computed locally: two devices scanning the
    same ticket both succeed and the backend decides the final state.
    No retries; the caller decides based on the error type.
    """

    def __init__(
        self,
        *,
        booking_query_repo: IBookingQueryRepo,
        booking_command_repo: IBookingCommandRepo,
    ) -> None:
        self.booking_query_repo = booking_query_repo
        self.booking_command_repo = booking_command_repo

    @Logger.io
    async def execute(self, *, sno: str) -> TicketActivationResult:
        if not sno or not sno.strip():
            raise DomainError('Ticket serial is required')

        ticket = await self.booking_query_repo.get_by_sno(sno=sno)
        if ticket is None:
            raise TicketNotFoundError(sno)

        updated = await self.booking_command_repo.toggle_activation_by_sno(sno=sno)

        result = TicketActivationResult(
            ticket=updated,
            transition=ActivationTransition.from_echoed_state(updated.is_activated),
            previous_is_activated=ticket.is_activated,
        )
        if result.previous_is_activated == updated.is_activated:
            Logger.base.warning(
                f'[SCAN] Ticket {sno} was toggled concurrently, backend now reports '
                f'is_activated={updated.is_activated}'
            )
        Logger.base.info(f'[SCAN] Ticket {sno} {result.transition.value}')
        return result
