from cinema.services.context import CinemaContext
from cinema.services.room_service import RoomService
from cinema.services.session_service import SessionService

__all__ = ["CinemaContext", "RoomService", "SessionService"]
