"""Job posting SQLAlchemy model."""

from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4
from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Date,
    Float,
    Integer,
    Numeric,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.session import Base
from infrastructure.database.models.types import UTCDateTime


class JobModel(Base):
    """SQLAlchemy model for job postings."""
    
    __tablename__ = "jobs"
    __table_args__ = (
        CheckConstraint(
            "laborers_applied >= 0 AND laborers_applied <= laborers_required",
            name="ck_jobs_applied_within_capacity",
        ),
    )
    
    # Primary key
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    
    # Owner
    supervisor_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    supervisor_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    supervisor_phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    
    # Description
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, default="", nullable=False)
    work_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    location_name: Mapped[str] = mapped_column(String(255), nullable=False)
    location_details: Mapped[str | None] = mapped_column(String(500), nullable=True)
    
    # Wage
    wage_type: Mapped[str] = mapped_column(String(20), nullable=False)
    wage_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    
    # Schedule
    required_date: Mapped[date] = mapped_column(Date, nullable=False)
    start_time: Mapped[str | None] = mapped_column(String(10), nullable=True)
    end_time: Mapped[str | None] = mapped_column(String(10), nullable=True)
    duration_hours: Mapped[float] = mapped_column(Float, nullable=False)
    
    # Capacity
    laborers_required: Mapped[int] = mapped_column(Integer, nullable=False)
    laborers_applied: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    
    # Lifecycle
    status: Mapped[str] = mapped_column(String(20), default="open", nullable=False, index=True)
    is_listed: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    expires_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        default=lambda: datetime.now(timezone.utc),
        nullable=False
    )
    
    def __repr__(self) -> str:
        return f"<JobModel(id={self.id}, status={self.status})>"
