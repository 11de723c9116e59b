"""
Ticket View Cache

Local copy of tickets for list/detail screens. It is never consulted by the
activation use case; it only records what the backend has already confirmed.

- remember(): store records from a list/detail fetch
- apply(): replace a record with the one echoed by a successful toggle
- invalidate()/clear(): drop entries the screen must re-fetch
"""

from typing import Dict, Iterable, List, Optional

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.dto.ticket_activation_result import TicketActivationResult
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity


class TicketViewCache:
    def __init__(self) -> None:
        self._tickets: Dict[str, TicketEntity] = {}

    def __len__(self) -> int:
        return len(self._tickets)

    def __contains__(self, sno: object) -> bool:
        return sno in self._tickets

    def get(self, sno: str) -> Optional[TicketEntity]:
        return self._tickets.get(sno)

    def all(self) -> List[TicketEntity]:
        return list(self._tickets.values())

    def remember(self, tickets: Iterable[TicketEntity]) -> None:
        for ticket in tickets:
            self._tickets[ticket.sno] = ticket

    def apply(self, result: TicketActivationResult) -> TicketEntity:
        ticket = result.ticket
        self._tickets[ticket.sno] = ticket
        Logger.base.debug(
            f'[VIEW_CACHE] {ticket.sno} -> is_activated={ticket.is_activated}'
        )
        return ticket

    def invalidate(self, sno: str) -> None:
        self._tickets.pop(sno, None)

    def clear(self) -> None:
        self._tickets.clear()
