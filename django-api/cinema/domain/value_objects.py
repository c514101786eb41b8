"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from typing import Self

DATE_FORMAT = "%d-%m-%Y"
TIME_FORMAT = "%H:%M"


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if not self.amount.is_finite():
            raise ValueError("Money amount must be a finite number")
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def of(cls, value: Decimal | int | float | str) -> Self:
        # floats go through str() so 30.1 stays 30.1 rather than its binary expansion
        if isinstance(value, float):
            value = str(value)
        try:
            return cls(amount=Decimal(value))
        except InvalidOperation as exc:
            raise ValueError(f"Invalid money amount: {value!r}") from exc

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class Capacity:
    """Positive integer representing a room's seat count."""

    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError("Capacity must be positive")


def parse_show_date(value: str) -> date:
    """Parse a day-month-year string such as ``12-10-2025``."""
    return datetime.strptime(value.strip(), DATE_FORMAT).date()


def parse_show_time(value: str) -> time:
    """Parse an hour:minute string such as ``14:00``."""
    return datetime.strptime(value.strip(), TIME_FORMAT).time()
