"""Room service - lookups over the fixed room pool and lineup changes."""

import logging
from threading import RLock

from cinema.domain.errors import RoomNotFoundError
from cinema.domain.models import Room, Session
from cinema.stores.interfaces import RoomStore

logger = logging.getLogger(__name__)


class RoomService:
    """Service for room operations."""

    def __init__(self, store: RoomStore, lock: "RLock | None" = None) -> None:
        self._store = store
        self._lock = lock or RLock()

    def get_all_rooms(self) -> list[Room]:
        """Return every room, ordered by id."""
        with self._lock:
            return self._store.list_rooms()

    def get_room_by_id(self, room_id: int) -> Room:
        """Return a room by ID.

        Raises:
            RoomNotFoundError: If no room has this id.
        """
        with self._lock:
            room = self._store.get_room(room_id)
        if room is None:
            raise RoomNotFoundError(room_id)
        return room

    def get_sessions_for_room(self, room_id: int) -> list[Session]:
        """Return the room's lineup in screening order.

        Raises:
            RoomNotFoundError: If no room has this id.
        """
        with self._lock:
            return list(self.get_room_by_id(room_id).sessions)

    def add_session_to_room(self, room_id: int, session: Session) -> None:
        """Append a session to the end of a room's lineup.

        The slot constraint is not checked here; SessionService owns it.

        Raises:
            RoomNotFoundError: If no room has this id.
        """
        with self._lock:
            room = self.get_room_by_id(room_id)
            room.sessions.append(session)
        logger.debug("Session %s queued in room %s", session.id, room_id)

    def remove_next_session_from_room(self, room_id: int) -> Session | None:
        """Pop the earliest-added session from a room's lineup.

        Returns None and leaves the room untouched when the lineup is empty.

        Raises:
            RoomNotFoundError: If no room has this id.
        """
        with self._lock:
            room = self.get_room_by_id(room_id)
            if not room.sessions:
                return None
            session = room.sessions.pop(0)
        logger.debug("Session %s left the lineup of room %s", session.id, room_id)
        return session

    def withdraw_session(self, session: Session) -> None:
        """Remove a session from its room's lineup if it is queued there."""
        with self._lock:
            lineup = session.room.sessions
            if session in lineup:
                lineup.remove(session)

    def clear_lineups(self) -> None:
        with self._lock:
            for room in self._store.list_rooms():
                room.sessions.clear()
