"""
Test Configuration and Fixtures

This module provides:
- Test environment variables, set before any application module is imported
- Shared ticket/event factories
- An httpx.AsyncClient wired to an in-process MockTransport for adapter tests

Architecture:
- Unit tests (test/**/unit/): AsyncMock repositories, no HTTP at all
- Integration tests (test/**/integration/): real httpx repositories against
  MockTransport handlers that record every request
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru configuration read these at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ['DEBUG'] = 'true'
    os.environ['API_BASE_URL'] = 'http://testserver'
    os.environ['FRONTEND_URL'] = 'https://event.example.com'
    os.environ['HTTP_TIMEOUT_SECONDS'] = '2'


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import AsyncGenerator, Callable  # noqa: E402
from datetime import date, time  # noqa: E402
from typing import Any  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.core_setting import Settings  # noqa: E402
from src.platform.http.api_client import create_api_client  # noqa: E402
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity  # noqa: E402


def make_ticket(**overrides: Any) -> TicketEntity:
    fields: dict[str, Any] = {
        'id': '1',
        'sno': 'T-001',
        'is_activated': False,
        'event_id': '7',
        'event_name': 'Tech Summit',
        'event_date': date(2025, 3, 10),
        'event_time': time(18, 30),
        'user_name': 'Jane Doe',
        'email': 'jane@example.com',
        'qr_code_url': 'https://event.example.com/activate/T-001',
    }
    fields.update(overrides)
    return TicketEntity(**fields)


def make_booking_payload(**overrides: Any) -> dict[str, Any]:
    """Booking JSON as the backend sends it (snake_case)."""
    payload: dict[str, Any] = {
        'id': 1,
        'sno': 'T-001',
        'event': 7,
        'event_name': 'Tech Summit',
        'event_date': '2025-03-10T18:30:00',
        'user_name': 'Jane Doe',
        'email': 'jane@example.com',
        'phone': '555-0100',
        'member_count': 2,
        'selected_package': {'id': 'vip', 'title': 'VIP'},
        'total_amount': 120.0,
        'qr_code_url': 'https://event.example.com/activate/T-001',
        'is_activated': False,
        'updated_at': '2025-03-01T09:00:00+00:00',
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def ticket_factory() -> Callable[..., TicketEntity]:
    return make_ticket


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def routes() -> dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]]:
    """(method, path) -> handler. Tests register the backend behavior they need."""
    return {}


@pytest.fixture
async def api_client(
    routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]],
    recorded_requests: list[httpx.Request],
) -> AsyncGenerator[httpx.AsyncClient, None]:
    def dispatch(request: httpx.Request) -> httpx.Response:
        recorded_requests.append(request)
        handler = routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={'detail': 'Not found'})
        return handler(request)

    client = create_api_client(Settings(), transport=httpx.MockTransport(dispatch))
    yield client
    await client.aclose()


@pytest.fixture
def booking_payload() -> Callable[..., dict[str, Any]]:
    return make_booking_payload
