"""In-memory implementation of the room and session stores.

State lives for the lifetime of the owning context. Stores do no locking;
the services serialize access.
"""

from datetime import date, time

from cinema.domain import Capacity, Money, Movie, Room, Session
from cinema.stores.interfaces import RoomStore, SessionStore


class IdSequence:
    """Monotonically increasing integer IDs starting at 1."""

    def __init__(self) -> None:
        self._last = 0

    def next(self) -> int:
        self._last += 1
        return self._last

    def reset(self) -> None:
        self._last = 0


class InMemoryRoomStore(RoomStore):
    """Room registry backed by a list."""

    def __init__(self, ids: IdSequence | None = None) -> None:
        self._ids = ids or IdSequence()
        self._rooms: list[Room] = []

    def list_rooms(self) -> list[Room]:
        return list(self._rooms)

    def get_room(self, room_id: int) -> Room | None:
        for room in self._rooms:
            if room.id == room_id:
                return room
        return None

    def create_room(self, total_seats: Capacity) -> Room:
        room = Room(id=self._ids.next(), total_seats=total_seats)
        self._rooms.append(room)
        return room

    def clear(self) -> None:
        self._rooms.clear()
        self._ids.reset()


class InMemorySessionStore(SessionStore):
    """Flat session registry across all rooms, kept in insertion order."""

    def __init__(self, ids: IdSequence | None = None) -> None:
        self._ids = ids or IdSequence()
        self._sessions: list[Session] = []

    def list_sessions(self) -> list[Session]:
        return list(self._sessions)

    def get_session(self, session_id: int) -> Session | None:
        for session in self._sessions:
            if session.id == session_id:
                return session
        return None

    def find_by_slot(
        self,
        room_id: int,
        show_date: date,
        show_time: time,
        exclude_id: int | None = None,
    ) -> Session | None:
        wanted = (room_id, show_date, show_time)
        for session in self._sessions:
            if session.id != exclude_id and session.slot == wanted:
                return session
        return None

    def create_session(
        self,
        show_date: date,
        show_time: time,
        room: Room,
        movie: Movie,
        ticket_value: Money,
    ) -> Session:
        session = Session(
            id=self._ids.next(),
            date=show_date,
            time=show_time,
            room=room,
            movie=movie,
            ticket_value=ticket_value,
        )
        self._sessions.append(session)
        return session

    def delete_session(self, session_id: int) -> Session | None:
        session = self.get_session(session_id)
        if session is not None:
            self._sessions.remove(session)
        return session

    def clear(self) -> None:
        self._sessions.clear()
        self._ids.reset()
