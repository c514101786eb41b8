from cinema.stores.interfaces import RoomStore, SessionStore
from cinema.stores.memory_store import IdSequence, InMemoryRoomStore, InMemorySessionStore

__all__ = [
    "RoomStore",
    "SessionStore",
    "IdSequence",
    "InMemoryRoomStore",
    "InMemorySessionStore",
]
