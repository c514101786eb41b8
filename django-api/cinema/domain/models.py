"""Domain models representing in-memory state.

Rooms and sessions are entities compared by identity; a session is updated in
place so every holder of a reference sees the change. Movies are plain values.
"""

from dataclasses import dataclass, field
from datetime import date, time

from cinema.domain.value_objects import Capacity, Money


@dataclass(frozen=True)
class Movie:
    """Descriptive metadata about a film."""

    title: str
    genre: str
    duration_minutes: int
    classification: str
    synopsis: str

    def __post_init__(self) -> None:
        if self.duration_minutes <= 0:
            raise ValueError("Movie duration must be positive")


@dataclass(eq=False)
class Room:
    """A screening room with its lineup of sessions in screening order."""

    id: int
    total_seats: Capacity
    sessions: list["Session"] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"Room(id={self.id}, total_seats={self.total_seats.value})"


@dataclass(eq=False)
class Session:
    """A screening of a movie in a room at a given date and time."""

    id: int
    date: date
    time: time
    room: Room
    movie: Movie
    ticket_value: Money

    @property
    def slot(self) -> tuple[int, date, time]:
        """The (room id, date, time) triple that must be unique."""
        return (self.room.id, self.date, self.time)

    def __repr__(self) -> str:
        return (
            f"Session(id={self.id}, room={self.room.id}, "
            f"date={self.date.isoformat()}, time={self.time:%H:%M}, "
            f"movie={self.movie.title!r})"
        )
