"""Read the current system wage rates."""

from decimal import Decimal

from application.services import UnitOfWorkFactory
from application.use_cases.base_use_case import BaseUseCase, DEFAULT_MAX_RETRIES
from domain.repositories import IUnitOfWork
from domain.value_objects import SystemRates

DEFAULT_MIN_WAGE_PER_HOUR = Decimal("60")


async def current_rates(uow: IUnitOfWork, fallback_min_wage: Decimal) -> SystemRates:
    """Stored rates, or the fallback rate when none were ever stored."""
    rates = await uow.rates.get()
    if rates is None:
        return SystemRates(min_wage_per_hour=fallback_min_wage)
    return rates


class GetSystemRatesUseCase(BaseUseCase):
    """Return the rates used for the minimum wage floor."""

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        fallback_min_wage: Decimal = DEFAULT_MIN_WAGE_PER_HOUR,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ):
        super().__init__(uow_factory, max_retries)
        self.fallback_min_wage = fallback_min_wage

    async def execute(self) -> SystemRates:
        return await self._transaction(
            lambda uow: current_rates(uow, self.fallback_min_wage)
        )
