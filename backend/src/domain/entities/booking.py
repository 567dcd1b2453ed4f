"""Booking entity - the unit counted against the weekly hour cap."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from domain.entities.job_listing import JobListing
from domain.enums import BookingStatus


@dataclass
class Booking:
    """
    Confirmed work commitment of one worker on one posting.

    Job details are copied at confirmation time, so later edits to the
    posting never change an existing booking.
    """

    job_id: UUID
    labor_id: str
    supervisor_id: str
    job_title: str
    location_name: str
    job_date: date
    duration_hours: float
    wage_amount: Decimal
    status: BookingStatus = BookingStatus.CONFIRMED
    application_id: Optional[UUID] = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        self.status = BookingStatus(self.status)

    @classmethod
    def snapshot_of(
        cls,
        job: JobListing,
        labor_id: str,
        application_id: Optional[UUID] = None,
    ) -> "Booking":
        """
        Create a confirmed booking from the current state of a posting.

        Args:
            job: Posting being booked
            labor_id: Worker taking the job
            application_id: Application this booking confirms, if any

        Returns:
            New confirmed Booking
        """
        return cls(
            job_id=job.id,
            labor_id=labor_id,
            supervisor_id=job.supervisor_id,
            job_title=job.title,
            location_name=job.location_name,
            job_date=job.required_date,
            duration_hours=job.duration_hours,
            wage_amount=job.wage_amount,
            application_id=application_id,
        )

    @property
    def is_confirmed(self) -> bool:
        return self.status == BookingStatus.CONFIRMED

    def cancel(self) -> None:
        """Mark the booking as cancelled."""
        self.status = BookingStatus.CANCELLED

    def __str__(self) -> str:
        return f"Booking(job={self.job_id}, labor={self.labor_id}, date={self.job_date})"
