from cinema.handlers.views import (
    RoomDetailView,
    RoomListView,
    RoomNextSessionView,
    RoomSessionListView,
    SessionDetailView,
    SessionListView,
)

__all__ = [
    "RoomListView",
    "RoomDetailView",
    "RoomSessionListView",
    "RoomNextSessionView",
    "SessionListView",
    "SessionDetailView",
]
