from abc import ABC, abstractmethod

from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from src.service.ticketing.domain.value_object.registration import Registration


class IBookingCommandRepo(ABC):
    """Repository interface for booking write operations"""

    @abstractmethod
    async def toggle_activation_by_sno(self, *, sno: str) -> TicketEntity:
        """
        Flip `is_activated` on the backend and return the record it echoes.

        Raises ToggleFailedError when the backend refuses, TransientNetworkError
        when the request never got an answer.
        """
        pass

    @abstractmethod
    async def register(self, *, event: EventEntity, registration: Registration) -> TicketEntity:
        pass
