from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.ticketing.domain.entity.event_entity import EventEntity


class IEventQueryRepo(ABC):
    """Repository interface for event read operations"""

    @abstractmethod
    async def get_by_id(self, *, event_id: str) -> Optional[EventEntity]:
        pass

    @abstractmethod
    async def list_upcoming_ongoing(self) -> List[EventEntity]:
        pass
