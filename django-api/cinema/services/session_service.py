"""Session service - scheduling rules for screenings.

The session registry is authoritative. Every add, update and remove also
moves the session in its room's lineup so the two views never drift. The
room a caller passes in is resolved by id to the registered room, and only
that registered object is stored on the session.
"""

import logging
from datetime import date, time
from decimal import Decimal
from threading import RLock

from cinema.domain.errors import (
    InvalidDateError,
    InvalidTicketValueError,
    InvalidTimeError,
    SessionConflictError,
    SessionNotFoundError,
)
from cinema.domain.models import Movie, Room, Session
from cinema.domain.value_objects import Money, parse_show_date, parse_show_time
from cinema.services.room_service import RoomService
from cinema.stores.interfaces import SessionStore

logger = logging.getLogger(__name__)

TicketValue = Decimal | int | float | str


class SessionService:
    """Service for session create/read/update/delete."""

    def __init__(
        self,
        store: SessionStore,
        rooms: RoomService,
        lock: "RLock | None" = None,
    ) -> None:
        self._store = store
        self._rooms = rooms
        self._lock = lock or RLock()

    def get_all_sessions(self) -> list[Session]:
        """Return all sessions in insertion order."""
        with self._lock:
            return self._store.list_sessions()

    def get_session_by_id(self, session_id: int) -> Session | None:
        """Return a session by ID, or None when there is none."""
        with self._lock:
            return self._store.get_session(session_id)

    def add_session(
        self,
        date_string: str,
        time_string: str,
        room: Room,
        movie: Movie,
        ticket_value: TicketValue,
    ) -> Session:
        """Schedule a new session.

        Raises:
            InvalidDateError: If date_string is not dd-mm-yyyy.
            InvalidTimeError: If time_string is not HH:MM.
            InvalidTicketValueError: If ticket_value is negative or not a number.
            RoomNotFoundError: If the room is not part of this cinema.
            SessionConflictError: If the room already has a session at that
                date and time.
        """
        show_date, show_time, price = self._parse(date_string, time_string, ticket_value)

        with self._lock:
            room = self._rooms.get_room_by_id(room.id)
            self._ensure_slot_free(room, show_date, show_time)
            session = self._store.create_session(show_date, show_time, room, movie, price)
            self._rooms.add_session_to_room(room.id, session)

        logger.info("Scheduled %r", session)
        return session

    def update_session(
        self,
        session_id: int,
        date_string: str,
        time_string: str,
        room: Room,
        movie: Movie,
        ticket_value: TicketValue,
    ) -> Session:
        """Replace every field of an existing session, keeping its id.

        Raises:
            SessionNotFoundError: If no session has this id.
            InvalidDateError: If date_string is not dd-mm-yyyy.
            InvalidTimeError: If time_string is not HH:MM.
            InvalidTicketValueError: If ticket_value is negative or not a number.
            RoomNotFoundError: If the room is not part of this cinema.
            SessionConflictError: If another session already holds the new slot.
        """
        with self._lock:
            session = self._store.get_session(session_id)
            if session is None:
                logger.warning("Update rejected, session %s does not exist", session_id)
                raise SessionNotFoundError(session_id)

            show_date, show_time, price = self._parse(date_string, time_string, ticket_value)
            room = self._rooms.get_room_by_id(room.id)
            self._ensure_slot_free(room, show_date, show_time, exclude_id=session_id)

            if session.room is not room:
                self._rooms.add_session_to_room(room.id, session)
                self._rooms.withdraw_session(session)

            session.date = show_date
            session.time = show_time
            session.room = room
            session.movie = movie
            session.ticket_value = price

        logger.info("Updated %r", session)
        return session

    def remove_session(self, session_id: int) -> Session:
        """Remove a session and return it.

        Raises:
            SessionNotFoundError: If no session has this id.
        """
        with self._lock:
            session = self._store.delete_session(session_id)
            if session is None:
                logger.warning("Removal rejected, session %s does not exist", session_id)
                raise SessionNotFoundError(session_id)
            self._rooms.withdraw_session(session)

        logger.info("Removed %r", session)
        return session

    def remove_all_sessions(self) -> None:
        """Administrative: empty the registry and every room lineup."""
        with self._lock:
            self._store.clear()
            self._rooms.clear_lineups()
        logger.info("Removed all sessions")

    def _ensure_slot_free(
        self,
        room: Room,
        show_date: date,
        show_time: time,
        exclude_id: int | None = None,
    ) -> None:
        existing = self._store.find_by_slot(room.id, show_date, show_time, exclude_id)
        if existing is not None:
            logger.warning(
                "Slot conflict in room %s on %s at %s with session %s",
                room.id,
                show_date,
                show_time,
                existing.id,
            )
            raise SessionConflictError(room.id, existing.id)

    @staticmethod
    def _parse(
        date_string: str,
        time_string: str,
        ticket_value: TicketValue,
    ) -> tuple[date, time, Money]:
        try:
            show_date = parse_show_date(date_string)
        except (TypeError, ValueError, AttributeError):
            raise InvalidDateError(date_string) from None
        try:
            show_time = parse_show_time(time_string)
        except (TypeError, ValueError, AttributeError):
            raise InvalidTimeError(time_string) from None
        try:
            price = Money.of(ticket_value)
        except (TypeError, ValueError):
            raise InvalidTicketValueError() from None
        return show_date, show_time, price
