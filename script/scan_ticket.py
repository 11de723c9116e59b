#!/usr/bin/env python
"""
Ticket scan script for door staff.

Takes whatever the QR reader (or a person) produced, toggles the ticket's
activation on the backend and prints the state the backend reports.

Usage:
    python script/scan_ticket.py "https://event.example.com/activate/T-042"
    python script/scan_ticket.py "evt7:T-042:Jane Doe"
    python script/scan_ticket.py T-042
"""

import asyncio
import sys

from src.platform.config.di import cleanup, container
from src.platform.exception.exceptions import (
    DomainError,
    TicketNotFoundError,
    ToggleFailedError,
    TransientNetworkError,
)
from src.service.ticketing.domain.qr_payload_parser import build_activation_url


EXIT_INVALID_PAYLOAD = 1
EXIT_NOT_FOUND = 2
EXIT_TRANSIENT = 3
EXIT_TOGGLE_FAILED = 4


async def scan(raw: str) -> int:
    use_case = container.scan_ticket_payload_use_case()
    settings = container.config_service()

    try:
        result = await use_case.execute(raw=raw)
    except TicketNotFoundError as e:
        print(f'❌ Ticket not found: {e.sno}')
        return EXIT_NOT_FOUND
    except TransientNetworkError as e:
        print(f'⚠️  Could not reach the ticket service ({e.message}). Please scan again.')
        return EXIT_TRANSIENT
    except ToggleFailedError as e:
        print(f'❌ Activation failed: {e.message}')
        return EXIT_TOGGLE_FAILED
    except DomainError as e:
        print(f'❌ Invalid code: {e.message}')
        return EXIT_INVALID_PAYLOAD

    ticket = container.ticket_view_cache().apply(result)
    headline = 'Ticket Activated!' if ticket.is_activated else 'Ticket Deactivated!'
    print(headline)
    print(f'  Ticket:  {ticket.sno}')
    print(f'  Event:   {ticket.event_name} {ticket.event_date or ""} {ticket.event_time or ""}')
    print(f'  Holder:  {ticket.user_name} <{ticket.email}>')
    print(f'  Link:    {build_activation_url(settings.FRONTEND_URL, ticket.sno)}')
    return 0


async def main() -> int:
    if len(sys.argv) < 2:
        print('Usage: python script/scan_ticket.py <qr payload or ticket number>')
        return EXIT_INVALID_PAYLOAD

    try:
        return await scan(' '.join(sys.argv[1:]))
    finally:
        await cleanup()


if __name__ == '__main__':
    sys.exit(asyncio.run(main()))
