"""Read models for bookings."""

from application.use_cases.base_use_case import BaseUseCase
from domain.entities import Booking
from domain.repositories import IUnitOfWork


class GetLaborBookingsUseCase(BaseUseCase):
    """A worker's confirmed bookings, latest job date first."""

    async def execute(self, labor_id: str) -> list[Booking]:
        async def load(uow: IUnitOfWork) -> list[Booking]:
            bookings = await uow.bookings.list_by_labor(labor_id)
            return sorted(bookings, key=lambda b: b.job_date.toordinal(), reverse=True)

        return await self._transaction(load)


class GetSupervisorBookingsUseCase(BaseUseCase):
    """Confirmed bookings on a supervisor's postings, newest first."""

    async def execute(self, supervisor_id: str) -> list[Booking]:
        async def load(uow: IUnitOfWork) -> list[Booking]:
            bookings = await uow.bookings.list_by_supervisor(supervisor_id)
            return sorted(bookings, key=lambda b: b.created_at.timestamp(), reverse=True)

        return await self._transaction(load)
