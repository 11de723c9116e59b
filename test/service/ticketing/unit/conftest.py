"""
Unit test fixtures

Provides reusable test doubles for the repository interfaces. Unit tests
never build an HTTP client.
"""

from typing import List, Optional
from unittest.mock import AsyncMock

import pytest

from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity


class RepositoryMocks:
    """
    Mock repositories container for testing use cases

    Organizes related mock repositories in one place for easier test setup.

    Example:
        ```python
        mocks = repository_mocks(looked_up=inactive_ticket, toggled=active_ticket)
        use_case = ResolveAndToggleTicketUseCase(
            booking_query_repo=mocks.booking_query_repo,
            booking_command_repo=mocks.booking_command_repo,
        )
        result = await use_case.execute(sno='T-001')
        ```
    """

    def __init__(
        self,
        *,
        looked_up: Optional[TicketEntity] = None,
        toggled: Optional[TicketEntity] = None,
        bookings: Optional[List[TicketEntity]] = None,
        events: Optional[List[EventEntity]] = None,
        event: Optional[EventEntity] = None,
    ):
        """
        Initialize mock repositories with test data

        Args:
            looked_up: Ticket returned by get_by_sno (None simulates a 404)
            toggled: Ticket echoed by toggle_activation_by_sno and register
            bookings: Tickets returned by every list_* query
            events: Events returned by list_upcoming_ongoing
            event: Event returned by get_by_id
        """
        self.bookings = bookings or []
        self.events = events or []

        # Booking query repo
        self.booking_query_repo = AsyncMock()
        self.booking_query_repo.get_by_sno = AsyncMock(return_value=looked_up)
        self.booking_query_repo.list_all = AsyncMock(return_value=self.bookings)
        self.booking_query_repo.list_by_host = AsyncMock(return_value=self.bookings)
        self.booking_query_repo.list_by_event = AsyncMock(return_value=self.bookings)

        # Booking command repo
        self.booking_command_repo = AsyncMock()
        self.booking_command_repo.toggle_activation_by_sno = AsyncMock(return_value=toggled)
        self.booking_command_repo.register = AsyncMock(return_value=toggled)

        # Event query repo
        self.event_query_repo = AsyncMock()
        self.event_query_repo.list_upcoming_ongoing = AsyncMock(return_value=self.events)
        self.event_query_repo.get_by_id = AsyncMock(return_value=event)


@pytest.fixture
def repository_mocks() -> type[RepositoryMocks]:
    return RepositoryMocks
