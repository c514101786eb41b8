"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from datetime import date, time

from cinema.domain import Capacity, Money, Movie, Room, Session


class RoomStore(ABC):
    """Interface for room registry operations."""

    @abstractmethod
    def list_rooms(self) -> list[Room]:
        """Return all rooms ordered by id ascending."""
        ...

    @abstractmethod
    def get_room(self, room_id: int) -> Room | None:
        """Return a room by ID, or None if not found."""
        ...

    @abstractmethod
    def create_room(self, total_seats: Capacity) -> Room:
        """Create a room with the next room ID."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Drop every room and restart ID numbering at 1."""
        ...


class SessionStore(ABC):
    """Interface for session registry operations."""

    @abstractmethod
    def list_sessions(self) -> list[Session]:
        """Return all sessions in insertion order."""
        ...

    @abstractmethod
    def get_session(self, session_id: int) -> Session | None:
        """Return a session by ID, or None if not found."""
        ...

    @abstractmethod
    def find_by_slot(
        self,
        room_id: int,
        show_date: date,
        show_time: time,
        exclude_id: int | None = None,
    ) -> Session | None:
        """Return the session occupying a room at a date and time, if any."""
        ...

    @abstractmethod
    def create_session(
        self,
        show_date: date,
        show_time: time,
        room: Room,
        movie: Movie,
        ticket_value: Money,
    ) -> Session:
        """Store a new session under the next session ID."""
        ...

    @abstractmethod
    def delete_session(self, session_id: int) -> Session | None:
        """Remove a session by ID and return it, or None if not found."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Drop every session and restart ID numbering at 1."""
        ...
