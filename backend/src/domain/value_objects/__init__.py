"""Domain Value Objects - Immutable objects without identity."""

from .week_window import WeekWindow, week_bounds, to_date
from .system_rates import SystemRates

__all__ = ["WeekWindow", "week_bounds", "to_date", "SystemRates"]
