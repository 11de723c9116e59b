"""Ticketing Domain Enums"""

from src.service.ticketing.domain.enum.activation_transition import ActivationTransition
from src.service.ticketing.domain.enum.event_status import EventStatus
from src.service.ticketing.domain.enum.scan_payload_form import ScanPayloadForm

__all__ = ['ActivationTransition', 'EventStatus', 'ScanPayloadForm']
