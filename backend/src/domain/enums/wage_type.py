"""How the wage of a posting is quoted."""

from enum import Enum


class WageType(str, Enum):
    """Wage quoted per hour or per day of work."""

    HOURLY = "hourly"
    DAILY = "daily"

    def __str__(self) -> str:
        return self.value
