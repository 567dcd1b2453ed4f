"""Lifecycle states of a job posting."""

from enum import Enum


class JobStatus(str, Enum):
    """
    States of a posting.

    Only OPEN postings accept applications; the other states are terminal
    for discovery but never invalidate bookings made earlier.
    """

    OPEN = "open"
    FILLED = "filled"
    EXPIRED = "expired"
    DELISTED = "delisted"

    @property
    def is_terminal(self) -> bool:
        return self is not JobStatus.OPEN

    def __str__(self) -> str:
        return self.value
