"""Job posting entity."""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from domain.enums import JobStatus, WageType
from domain.exceptions import ValidationError
from domain.value_objects import to_date

DEFAULT_EXPIRY_DAYS = 7


def utc_now() -> datetime:
    """Current instant in UTC."""
    return datetime.now(timezone.utc)


@dataclass
class JobListing:
    """
    Entity representing a supervisor's job posting.

    Capacity counters and status are only changed through the capacity
    controller and the lifecycle operations; everything else is set at
    creation time.
    """

    supervisor_id: str
    title: str
    location_name: str
    wage_type: WageType
    wage_amount: Decimal
    required_date: date
    duration_hours: float
    laborers_required: int
    description: str = ""
    id: UUID = field(default_factory=uuid4)

    # Display details carried over from the posting form
    location_details: Optional[str] = None
    work_type: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    supervisor_name: Optional[str] = None
    supervisor_phone: Optional[str] = None

    # Capacity and lifecycle
    laborers_applied: int = 0
    status: JobStatus = JobStatus.OPEN
    is_listed: bool = True
    created_at: datetime = field(default_factory=utc_now)
    expires_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Normalize and validate posting fields."""
        self.wage_type = WageType(self.wage_type)
        self.status = JobStatus(self.status)
        self.required_date = to_date(self.required_date)
        if not isinstance(self.wage_amount, Decimal):
            self.wage_amount = Decimal(str(self.wage_amount))
        if self.expires_at is None:
            self.expires_at = self.created_at + timedelta(days=DEFAULT_EXPIRY_DAYS)

        if not self.supervisor_id:
            raise ValidationError("Supervisor id is required")
        if not self.title or not self.title.strip():
            raise ValidationError("Job title cannot be empty")
        if not self.location_name or not self.location_name.strip():
            raise ValidationError("Location cannot be empty")
        if self.wage_amount < 0:
            raise ValidationError("Wage amount cannot be negative")
        if self.duration_hours <= 0:
            raise ValidationError("Duration must be greater than zero")
        if self.laborers_required < 1:
            raise ValidationError("At least one laborer must be required")
        if not 0 <= self.laborers_applied <= self.laborers_required:
            raise ValidationError("Applied count must be between 0 and laborers required")

    @property
    def remaining_capacity(self) -> int:
        """Number of workers the posting can still accept."""
        return self.laborers_required - self.laborers_applied

    @property
    def is_full(self) -> bool:
        return self.laborers_applied >= self.laborers_required

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Check whether the expiry instant has passed."""
        return (now or utc_now()) > self.expires_at

    def is_accepting(self, now: Optional[datetime] = None) -> bool:
        """Check whether the posting can take another worker."""
        return (
            not self.status.is_terminal
            and not self.is_full
            and not self.is_expired(now)
        )

    def is_visible(self, now: Optional[datetime] = None) -> bool:
        """Check whether the posting belongs in the discovery feed."""
        return (
            not self.status.is_terminal
            and self.is_listed
            and not self.is_expired(now)
        )

    def __str__(self) -> str:
        return (
            f"JobListing(id={self.id}, title={self.title}, "
            f"{self.laborers_applied}/{self.laborers_required})"
        )
