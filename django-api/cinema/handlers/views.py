"""HTTP handlers for rooms and sessions.

Payload shape is checked by the serializers; scheduling rules stay in the
services. Domain errors become JSON error bodies with a status per error code.
"""

from django.apps import apps
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from cinema.domain.errors import DomainError, ErrorCode
from cinema.handlers.serializers import (
    MovieSerializer,
    RoomSerializer,
    SessionInputSerializer,
    SessionSerializer,
)
from cinema.services.context import CinemaContext

ERROR_STATUS = {
    ErrorCode.ROOM_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.SESSION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.SESSION_CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_TICKET_VALUE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_DATE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_TIME: status.HTTP_400_BAD_REQUEST,
}


def get_context() -> CinemaContext:
    return apps.get_app_config("cinema").context


def error_response(code: str, message: str, http_status: int, **extra) -> Response:
    return Response({"error": {"code": code, "message": message, **extra}}, status=http_status)


def domain_error_response(exc: DomainError) -> Response:
    return error_response(exc.code.value, exc.message, ERROR_STATUS[exc.code])


class CinemaAPIView(APIView):
    """Base view that turns domain errors into JSON error responses."""

    def handle_exception(self, exc: Exception) -> Response:
        if isinstance(exc, DomainError):
            return domain_error_response(exc)
        return super().handle_exception(exc)

    def validated_session_input(self, request: Request) -> dict | Response:
        serializer = SessionInputSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response(
                "INVALID_PAYLOAD",
                "Request body is invalid",
                status.HTTP_400_BAD_REQUEST,
                fields=serializer.errors,
            )
        data = serializer.validated_data
        rooms = get_context().rooms
        return {
            "date_string": data["date"],
            "time_string": data["time"],
            "room": rooms.get_room_by_id(data["room_id"]),
            "movie": MovieSerializer().create(data["movie"]),
            "ticket_value": data["ticket_value"],
        }


class RoomListView(CinemaAPIView):
    """Handler for GET /api/rooms"""

    def get(self, request: Request) -> Response:
        rooms = get_context().rooms.get_all_rooms()
        return Response(RoomSerializer(rooms, many=True).data)


class RoomDetailView(CinemaAPIView):
    """Handler for GET /api/rooms/{room_id}"""

    def get(self, request: Request, room_id: int) -> Response:
        room = get_context().rooms.get_room_by_id(room_id)
        return Response(RoomSerializer(room).data)


class RoomSessionListView(CinemaAPIView):
    """Handler for GET /api/rooms/{room_id}/sessions"""

    def get(self, request: Request, room_id: int) -> Response:
        sessions = get_context().rooms.get_sessions_for_room(room_id)
        return Response(SessionSerializer(sessions, many=True).data)


class RoomNextSessionView(CinemaAPIView):
    """Handler for DELETE /api/rooms/{room_id}/sessions/next"""

    def delete(self, request: Request, room_id: int) -> Response:
        session = get_context().rooms.remove_next_session_from_room(room_id)
        if session is None:
            return Response(status=status.HTTP_204_NO_CONTENT)
        return Response(SessionSerializer(session).data)


class SessionListView(CinemaAPIView):
    """Handler for GET/POST /api/sessions"""

    def get(self, request: Request) -> Response:
        sessions = get_context().sessions.get_all_sessions()
        return Response(SessionSerializer(sessions, many=True).data)

    def post(self, request: Request) -> Response:
        arguments = self.validated_session_input(request)
        if isinstance(arguments, Response):
            return arguments
        session = get_context().sessions.add_session(**arguments)
        return Response(SessionSerializer(session).data, status=status.HTTP_201_CREATED)


class SessionDetailView(CinemaAPIView):
    """Handler for GET/PUT/DELETE /api/sessions/{session_id}"""

    def get(self, request: Request, session_id: int) -> Response:
        session = get_context().sessions.get_session_by_id(session_id)
        if session is None:
            return error_response(
                ErrorCode.SESSION_NOT_FOUND.value,
                "Session not found",
                status.HTTP_404_NOT_FOUND,
            )
        return Response(SessionSerializer(session).data)

    def put(self, request: Request, session_id: int) -> Response:
        arguments = self.validated_session_input(request)
        if isinstance(arguments, Response):
            return arguments
        session = get_context().sessions.update_session(session_id, **arguments)
        return Response(SessionSerializer(session).data)

    def delete(self, request: Request, session_id: int) -> Response:
        session = get_context().sessions.remove_session(session_id)
        return Response(SessionSerializer(session).data)
