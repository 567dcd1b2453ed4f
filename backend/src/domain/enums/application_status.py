"""Application and booking states."""

from enum import Enum


class ApplicationStatus(str, Enum):
    """
    Status of a worker's application.

    Persisted as plain text, so further states can be added here
    without a schema migration.
    """

    CONFIRMED = "confirmed"
    REJECTED = "rejected"

    def __str__(self) -> str:
        return self.value


class BookingStatus(str, Enum):
    """Status of a booking."""

    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"

    def __str__(self) -> str:
        return self.value
