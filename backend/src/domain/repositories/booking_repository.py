"""Booking repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from domain.entities import Booking
from domain.enums import BookingStatus


class IBookingRepository(ABC):
    """Abstract repository interface for Booking entity."""

    @abstractmethod
    async def create(self, booking: Booking) -> Booking:
        """
        Create a new booking.

        Args:
            booking: Booking to create

        Returns:
            Created Booking
        """
        pass

    @abstractmethod
    async def list_by_labor(
        self,
        labor_id: str,
        status: BookingStatus = BookingStatus.CONFIRMED,
    ) -> list[Booking]:
        """
        List a worker's bookings in a given status.

        Args:
            labor_id: Worker identifier
            status: Booking status to match

        Returns:
            Bookings in storage order
        """
        pass

    @abstractmethod
    async def list_by_supervisor(
        self,
        supervisor_id: str,
        status: BookingStatus = BookingStatus.CONFIRMED,
    ) -> list[Booking]:
        """List bookings on a supervisor's postings in a given status."""
        pass

    @abstractmethod
    async def get_by_application(self, application_id: UUID) -> Optional[Booking]:
        """Retrieve the confirmed booking paired with an application."""
        pass

    @abstractmethod
    async def update_status(self, booking_id: UUID, status: BookingStatus) -> bool:
        """
        Change the status of a booking.

        Returns:
            True if the booking exists, False otherwise
        """
        pass
