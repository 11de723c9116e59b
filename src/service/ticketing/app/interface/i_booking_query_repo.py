from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.ticketing.domain.entity.ticket_entity import TicketEntity


class IBookingQueryRepo(ABC):
    """Repository interface for booking read operations"""

    @abstractmethod
    async def get_by_sno(self, *, sno: str) -> Optional[TicketEntity]:
        """Return None when the backend has no ticket for `sno`."""
        pass

    @abstractmethod
    async def list_all(self) -> List[TicketEntity]:
        pass

    @abstractmethod
    async def list_by_host(self, *, host_id: str) -> List[TicketEntity]:
        pass

    @abstractmethod
    async def list_by_event(self, *, event_id: str) -> List[TicketEntity]:
        pass
