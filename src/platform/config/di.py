"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.http.api_client import create_api_client
from src.service.ticketing.app.command.register_for_event_use_case import RegisterForEventUseCase
from src.service.ticketing.app.command.resolve_and_toggle_ticket_use_case import (
    ResolveAndToggleTicketUseCase,
)
from src.service.ticketing.app.command.scan_ticket_payload_use_case import (
    ScanTicketPayloadUseCase,
)
from src.service.ticketing.app.query.get_booking_use_case import GetBookingUseCase
from src.service.ticketing.app.query.get_event_use_case import GetEventUseCase
from src.service.ticketing.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.ticketing.app.query.list_upcoming_ongoing_events_use_case import (
    ListUpcomingOngoingEventsUseCase,
)
from src.service.ticketing.driven_adapter.repo.booking_command_repo_http_impl import (
    BookingCommandRepoHttpImpl,
)
from src.service.ticketing.driven_adapter.repo.booking_query_repo_http_impl import (
    BookingQueryRepoHttpImpl,
)
from src.service.ticketing.driven_adapter.repo.event_query_repo_http_impl import (
    EventQueryRepoHttpImpl,
)
from src.service.ticketing.driven_adapter.state.ticket_view_cache import TicketViewCache


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # One pooled HTTP client per process (closed by cleanup())
    api_client = providers.Singleton(create_api_client, settings=config_service)

    # Repositories (stateless, share the client)
    booking_query_repo = providers.Singleton(BookingQueryRepoHttpImpl, client=api_client)
    booking_command_repo = providers.Singleton(BookingCommandRepoHttpImpl, client=api_client)
    event_query_repo = providers.Singleton(EventQueryRepoHttpImpl, client=api_client)

    # Presentation-side cache, separate from the activation flow
    ticket_view_cache = providers.Singleton(TicketViewCache)

    # Command use cases
    resolve_and_toggle_ticket_use_case = providers.Factory(
        ResolveAndToggleTicketUseCase,
        booking_query_repo=booking_query_repo,
        booking_command_repo=booking_command_repo,
    )
    scan_ticket_payload_use_case = providers.Factory(
        ScanTicketPayloadUseCase,
        resolve_and_toggle=resolve_and_toggle_ticket_use_case,
    )
    register_for_event_use_case = providers.Factory(
        RegisterForEventUseCase,
        booking_command_repo=booking_command_repo,
    )

    # Query use cases
    get_booking_use_case = providers.Factory(
        GetBookingUseCase, booking_query_repo=booking_query_repo
    )
    list_bookings_use_case = providers.Factory(
        ListBookingsUseCase, booking_query_repo=booking_query_repo
    )
    get_event_use_case = providers.Factory(GetEventUseCase, event_query_repo=event_query_repo)
    list_upcoming_ongoing_events_use_case = providers.Factory(
        ListUpcomingOngoingEventsUseCase, event_query_repo=event_query_repo
    )


container = Container()


async def cleanup() -> None:
    await container.api_client().aclose()
    container.reset_singletons()
