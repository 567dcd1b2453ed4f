"""Job application SQLAlchemy model."""

from datetime import datetime, timezone
from uuid import UUID, uuid4
from sqlalchemy import ForeignKey, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.session import Base
from infrastructure.database.models.types import UTCDateTime


class ApplicationModel(Base):
    """SQLAlchemy model for job applications."""
    
    __tablename__ = "job_applications"
    __table_args__ = (
        UniqueConstraint("job_id", "labor_id", name="uq_job_applications_job_labor"),
    )
    
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    
    job_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("jobs.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    labor_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    supervisor_id: Mapped[str] = mapped_column(String(128), nullable=False)
    
    # Plain text so new states need no migration
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    applied_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        default=lambda: datetime.now(timezone.utc),
        nullable=False
    )
    
    def __repr__(self) -> str:
        return f"<ApplicationModel(id={self.id}, status={self.status})>"
