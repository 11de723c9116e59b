"""Ticketing Domain Value Objects"""

from src.service.ticketing.domain.value_object.registration import Registration

__all__ = ['Registration']
