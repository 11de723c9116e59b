"""Application layer interfaces (Ports)"""

from src.service.ticketing.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.ticketing.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo

__all__ = ['IBookingCommandRepo', 'IBookingQueryRepo', 'IEventQueryRepo']
