from typing import Any


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    retryable: bool = False

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class TicketNotFoundError(NotFoundError):
    """The serial does not resolve to any ticket. Retrying the same serial is pointless."""

    def __init__(self, sno: str) -> None:
        self.sno = sno
        super().__init__(f'Ticket {sno} not found')


class TransientNetworkError(CustomBaseError):
    """Transport failure, timeout or unexpected backend status. Callers may offer a retry."""

    retryable = True

    def __init__(self, message: str, status_code: int = 503) -> None:
        super().__init__(message, status_code)


class ToggleFailedError(CustomBaseError):
    """The backend refused the toggle. The ticket state is whatever it was before the attempt."""

    def __init__(self, message: str, status_code: int, detail: Any = None) -> None:
        self.detail = detail
        super().__init__(message, status_code)
