"""Owns every registry of one cinema and the services over them."""

import logging
from collections.abc import Sequence
from threading import RLock

from cinema.domain import Capacity
from cinema.services.room_service import RoomService
from cinema.services.session_service import SessionService
from cinema.stores.memory_store import IdSequence, InMemoryRoomStore, InMemorySessionStore

logger = logging.getLogger(__name__)

DEFAULT_ROOM_SEATS: tuple[int, ...] = (200, 150, 120, 100, 80)


class CinemaContext:
    """Stores, id counters and services for a single cinema.

    Build one at startup and hand it to whoever needs the services.
    """

    def __init__(self, room_seats: Sequence[int] = DEFAULT_ROOM_SEATS) -> None:
        self._room_seats = tuple(room_seats)
        self._lock = RLock()
        self.room_ids = IdSequence()
        self.session_ids = IdSequence()
        self.room_store = InMemoryRoomStore(self.room_ids)
        self.session_store = InMemorySessionStore(self.session_ids)
        self.rooms = RoomService(self.room_store, self._lock)
        self.sessions = SessionService(self.session_store, self.rooms, self._lock)

    @classmethod
    def create(cls, room_seats: Sequence[int] | None = None) -> "CinemaContext":
        """Return a context with its rooms seeded."""
        context = cls(DEFAULT_ROOM_SEATS if room_seats is None else room_seats)
        context.seed_rooms()
        return context

    def seed_rooms(self) -> None:
        with self._lock:
            for seats in self._room_seats:
                self.room_store.create_room(Capacity(seats))
        logger.info("Seeded %d rooms", len(self._room_seats))

    def reset(self) -> None:
        """Administrative/test-only: drop all state and restart numbering at 1.

        Rooms handed out before the reset must not be used afterwards.
        """
        with self._lock:
            self.session_store.clear()
            self.room_store.clear()
            self.seed_rooms()
        logger.info("Cinema context reset")
