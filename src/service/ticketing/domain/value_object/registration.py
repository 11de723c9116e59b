from typing import Any, Dict, List, Optional

import attrs

from src.platform.exception.exceptions import DomainError


@attrs.define(frozen=True)
class Registration:
    """Attendee details submitted when booking a ticket for an event."""

    user_name: str
    email: str
    phone: str = ''
    member_count: int = 1
    selected_package: Optional[Dict[str, Any]] = None
    food_preference: str = ''
    additional_members: List[Dict[str, Any]] = attrs.field(factory=list)
    total_amount: float = 0.0

    def validate(self) -> None:
        if not self.user_name.strip():
            raise DomainError('user_name is required')
        if not self.email.strip() or '@' not in self.email:
            raise DomainError('A valid email is required')
        if self.member_count < 1:
            raise DomainError('member_count must be at least 1')
        if self.total_amount < 0:
            raise DomainError('total_amount cannot be negative')
