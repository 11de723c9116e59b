"""Application layer DTOs"""

from src.service.ticketing.app.dto.ticket_activation_result import TicketActivationResult

__all__ = ['TicketActivationResult']
