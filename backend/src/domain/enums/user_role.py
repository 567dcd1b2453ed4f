"""Roles a user can hold in the marketplace."""

from enum import Enum


class UserRole(str, Enum):
    """Which side of the marketplace a user is on."""

    SUPERVISOR = "supervisor"
    LABOR = "labor"

    def __str__(self) -> str:
        return self.value
