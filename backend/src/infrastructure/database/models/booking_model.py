"""Booking SQLAlchemy model."""

from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4
from sqlalchemy import Date, Float, ForeignKey, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.session import Base
from infrastructure.database.models.types import UTCDateTime


class BookingModel(Base):
    """SQLAlchemy model for bookings."""
    
    __tablename__ = "bookings"
    
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    
    job_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("jobs.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    application_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        ForeignKey("job_applications.id", ondelete="SET NULL"),
        nullable=True,
        index=True
    )
    labor_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    supervisor_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    
    # Snapshot of the posting at confirmation time
    job_title: Mapped[str] = mapped_column(String(255), nullable=False)
    location_name: Mapped[str] = mapped_column(String(255), nullable=False)
    job_date: Mapped[date] = mapped_column(Date, nullable=False)
    duration_hours: Mapped[float] = mapped_column(Float, nullable=False)
    wage_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    
    status: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        default=lambda: datetime.now(timezone.utc),
        nullable=False
    )
    
    def __repr__(self) -> str:
        return f"<BookingModel(id={self.id}, labor_id={self.labor_id}, job_date={self.job_date})>"
