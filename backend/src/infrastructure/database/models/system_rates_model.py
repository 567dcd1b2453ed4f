"""System rates and per-worker guard SQLAlchemy models."""

from datetime import datetime, timezone
from decimal import Decimal
from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.session import Base
from infrastructure.database.models.types import UTCDateTime


class SystemRatesModel(Base):
    """SQLAlchemy model for the singleton rates row."""
    
    __tablename__ = "system_config"
    
    # Always "rates"
    key: Mapped[str] = mapped_column(String(50), primary_key=True)
    
    min_wage_per_hour: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    last_updated: Mapped[datetime] = mapped_column(
        UTCDateTime,
        default=lambda: datetime.now(timezone.utc),
        nullable=False
    )
    
    def __repr__(self) -> str:
        return f"<SystemRatesModel(min_wage_per_hour={self.min_wage_per_hour})>"


class LaborGuardModel(Base):
    """
    One row per worker, updated at the start of every transaction that
    books hours for that worker. The row lock serializes such transactions.
    """
    
    __tablename__ = "labor_guards"
    
    labor_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    version: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    
    def __repr__(self) -> str:
        return f"<LaborGuardModel(labor_id={self.labor_id}, version={self.version})>"
