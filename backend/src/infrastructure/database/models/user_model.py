"""User profile SQLAlchemy model."""

from datetime import datetime, timezone
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.session import Base
from infrastructure.database.models.types import UTCDateTime


class UserModel(Base):
    """SQLAlchemy model for user profiles."""
    
    __tablename__ = "users"
    
    # External uid from the login provider
    id: Mapped[str] = mapped_column(String(128), primary_key=True)
    
    phone_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    role: Mapped[str] = mapped_column(String(20), nullable=False)
    
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        default=lambda: datetime.now(timezone.utc),
        nullable=False
    )
    
    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, role={self.role})>"
