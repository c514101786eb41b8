from cinema.domain.models import Movie, Room, Session
from cinema.domain.value_objects import Capacity, Money

__all__ = [
    "Movie",
    "Room",
    "Session",
    "Money",
    "Capacity",
]
