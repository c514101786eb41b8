"""Domain error codes for the cinema module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    ROOM_NOT_FOUND = "ROOM_NOT_FOUND"
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    SESSION_CONFLICT = "SESSION_CONFLICT"
    INVALID_TICKET_VALUE = "INVALID_TICKET_VALUE"
    INVALID_DATE = "INVALID_DATE"
    INVALID_TIME = "INVALID_TIME"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class NotFoundError(DomainError):
    """A lookup that must produce a result found nothing."""


class InvalidArgumentError(DomainError):
    """A request was rejected because of its arguments."""


class ParseError(DomainError):
    """An external string representation could not be parsed."""


class RoomNotFoundError(NotFoundError):
    """Raised when a room is not found."""

    def __init__(self, room_id: int) -> None:
        super().__init__(
            code=ErrorCode.ROOM_NOT_FOUND,
            message=f"Room {room_id} not found",
        )
        self.room_id = room_id


class SessionNotFoundError(InvalidArgumentError):
    """Raised when updating or removing a session that does not exist."""

    def __init__(self, session_id: int) -> None:
        super().__init__(
            code=ErrorCode.SESSION_NOT_FOUND,
            message=f"Session {session_id} not found",
        )
        self.session_id = session_id


class SessionConflictError(InvalidArgumentError):
    """Raised when a room already has a session at the same date and time."""

    def __init__(self, room_id: int, conflicting_id: int) -> None:
        super().__init__(
            code=ErrorCode.SESSION_CONFLICT,
            message="Room already has a session at this date and time",
        )
        self.room_id = room_id
        self.conflicting_id = conflicting_id


class InvalidTicketValueError(InvalidArgumentError):
    """Raised when a ticket value is negative or not a number."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_VALUE,
            message="Ticket value must be a non-negative amount",
        )


class InvalidDateError(ParseError):
    """Raised when a date string is not in dd-mm-yyyy format."""

    def __init__(self, value: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DATE,
            message="Invalid date format, expected dd-mm-yyyy",
        )
        self.value = value


class InvalidTimeError(ParseError):
    """Raised when a time string is not in HH:MM format."""

    def __init__(self, value: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TIME,
            message="Invalid time format, expected HH:MM",
        )
        self.value = value
