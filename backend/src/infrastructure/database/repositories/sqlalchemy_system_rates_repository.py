"""SQLAlchemy implementation of system rates repository."""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from domain.repositories import ISystemRatesRepository
from domain.value_objects import SystemRates
from infrastructure.database.models import SystemRatesModel

RATES_KEY = "rates"


class SQLAlchemySystemRatesRepository(ISystemRatesRepository):
    """Stores the rates in a single keyed row."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def get(self) -> Optional[SystemRates]:
        """Retrieve the stored rates."""
        model = await self.session.get(SystemRatesModel, RATES_KEY)
        if model is None:
            return None
        return SystemRates(
            min_wage_per_hour=model.min_wage_per_hour,
            last_updated=model.last_updated,
        )

    async def save(self, rates: SystemRates) -> SystemRates:
        """Insert or replace the rates row."""
        model = await self.session.get(SystemRatesModel, RATES_KEY)
        if model is None:
            model = SystemRatesModel(key=RATES_KEY)
            self.session.add(model)
        model.min_wage_per_hour = rates.min_wage_per_hour
        model.last_updated = rates.last_updated
        await self.session.flush()
        return rates
