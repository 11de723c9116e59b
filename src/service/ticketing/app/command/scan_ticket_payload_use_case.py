from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.resolve_and_toggle_ticket_use_case import (
    ResolveAndToggleTicketUseCase,
)
from src.service.ticketing.app.dto.ticket_activation_result import TicketActivationResult
from src.service.ticketing.domain.qr_payload_parser import read_scan_payload


class ScanTicketPayloadUseCase:
    """Turn a camera scan or typed-in code into one activation toggle."""

    def __init__(self, *, resolve_and_toggle: ResolveAndToggleTicketUseCase) -> None:
        self.resolve_and_toggle = resolve_and_toggle

    @Logger.io
    async def execute(self, *, raw: str) -> TicketActivationResult:
        parsed = read_scan_payload(raw)
        if parsed is None or not parsed.serial:
            raise DomainError('The scanned code does not contain a ticket number')

        Logger.base.info(f'[SCAN] Read {parsed.form.value} payload, serial={parsed.serial}')
        return await self.resolve_and_toggle.execute(sno=parsed.serial)
