"""Monday to Sunday week window used by the weekly hour cap."""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Union

from domain.exceptions import InvalidDateError

DateLike = Union[date, datetime, str]

_END_OF_DAY = time(23, 59, 59, 999000)


def to_date(value: DateLike) -> date:
    """
    Coerce a date, datetime or ISO-8601 string to a calendar date.

    Raises:
        InvalidDateError: If the value cannot be interpreted as a date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError as exc:
            raise InvalidDateError(value) from exc
    raise InvalidDateError(value)


@dataclass(frozen=True)
class WeekWindow:
    """
    Immutable Monday 00:00:00.000 to Sunday 23:59:59.999 window.

    Attributes:
        start: Monday at midnight
        end: Sunday at 23:59:59.999
    """

    start: datetime
    end: datetime

    @property
    def first_day(self) -> date:
        return self.start.date()

    @property
    def last_day(self) -> date:
        return self.end.date()

    def contains(self, value: DateLike) -> bool:
        """Check whether a date falls inside the window (inclusive)."""
        return self.first_day <= to_date(value) <= self.last_day

    def __str__(self) -> str:
        return f"{self.first_day.isoformat()} - {self.last_day.isoformat()}"


def week_bounds(value: DateLike) -> WeekWindow:
    """
    Compute the Monday to Sunday window containing a date.

    Sunday belongs to the week that started six days earlier.

    Args:
        value: Date, datetime or ISO-8601 string

    Returns:
        WeekWindow for that week

    Raises:
        InvalidDateError: If the value cannot be parsed
    """
    day = to_date(value)
    monday = day - timedelta(days=day.weekday())
    sunday = monday + timedelta(days=6)
    return WeekWindow(
        start=datetime.combine(monday, time.min),
        end=datetime.combine(sunday, _END_OF_DAY),
    )
