"""Weekly hours of confirmed bookings per worker."""

from domain.repositories import IBookingRepository
from domain.value_objects import week_bounds
from domain.value_objects.week_window import DateLike

WEEKLY_HOUR_LIMIT = 50.0


class HoursLedger:
    """
    Read-only view of how many hours a worker is booked for in a week.

    The ledger reads through whatever booking repository it is given, so
    one built on the repository of an open transaction sees exactly what
    that transaction will commit against.
    """

    def __init__(self, booking_repository: IBookingRepository):
        self.booking_repo = booking_repository

    async def weekly_hours(self, labor_id: str, target_date: DateLike) -> float:
        """
        Sum confirmed booking hours in the Monday to Sunday week of a date.

        Args:
            labor_id: Worker identifier
            target_date: Any date inside the week of interest

        Returns:
            Total booked hours for that week

        Raises:
            InvalidDateError: If target_date cannot be parsed
        """
        window = week_bounds(target_date)
        bookings = await self.booking_repo.list_by_labor(labor_id)
        return sum(
            booking.duration_hours
            for booking in bookings
            if window.contains(booking.job_date)
        )
