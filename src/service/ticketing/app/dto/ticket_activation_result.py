"""Ticket activation result DTO."""

import attrs

from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from src.service.ticketing.domain.enum.activation_transition import ActivationTransition


@attrs.define(frozen=True)
class TicketActivationResult:
    """
    Outcome of one scan.

    `ticket` is the record exactly as the toggle endpoint echoed it and is the
    only authoritative state. `transition` is a display label derived from it.
    `previous_is_activated` is what the lookup saw and may already be stale:
    when it equals `ticket.is_activated`, another device toggled in between.
    """

    ticket: TicketEntity
    transition: ActivationTransition
    previous_is_activated: bool

    @property
    def is_activated(self) -> bool:
        return self.ticket.is_activated
