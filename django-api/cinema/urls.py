from django.urls import path

from cinema.handlers import (
    RoomDetailView,
    RoomListView,
    RoomNextSessionView,
    RoomSessionListView,
    SessionDetailView,
    SessionListView,
)

urlpatterns = [
    path("rooms", RoomListView.as_view(), name="room-list"),
    path("rooms/<int:room_id>", RoomDetailView.as_view(), name="room-detail"),
    path(
        "rooms/<int:room_id>/sessions",
        RoomSessionListView.as_view(),
        name="room-session-list",
    ),
    path(
        "rooms/<int:room_id>/sessions/next",
        RoomNextSessionView.as_view(),
        name="room-next-session",
    ),
    path("sessions", SessionListView.as_view(), name="session-list"),
    path("sessions/<int:session_id>", SessionDetailView.as_view(), name="session-detail"),
]
