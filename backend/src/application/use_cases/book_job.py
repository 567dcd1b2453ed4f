"""Direct booking without an application record (deprecated)."""

import warnings
from datetime import datetime, timezone
from uuid import UUID

from application.services import CapacityController, HoursLedger
from application.use_cases.apply_for_job import (
    ApplicationResult,
    ApplyForJobUseCase,
    SUCCESS_MESSAGE,
    ensure_within_weekly_limit,
    find_job,
)
from domain.entities import Booking
from domain.repositories import IUnitOfWork


class BookJobUseCase(ApplyForJobUseCase):
    """
    Legacy single-step booking.

    Runs the weekly cap and capacity checks and commits a booking plus the
    counter update, but keeps no application record and does not check for
    duplicates. Kept only for old clients; use ApplyForJobUseCase instead.
    """

    async def execute(self, job_id: UUID, labor_id: str) -> ApplicationResult:
        """Book a worker directly onto a posting."""
        warnings.warn(
            "BookJobUseCase is deprecated; use ApplyForJobUseCase",
            DeprecationWarning,
            stacklevel=2,
        )
        self.logger.warning(f"Deprecated direct booking used for job {job_id} by labor {labor_id}")
        result = await self._transaction(lambda uow: self._book(uow, job_id, labor_id))
        self.logger.info(f"✅ Labor {labor_id} booked directly on job {job_id}")
        return result

    async def _book(self, uow: IUnitOfWork, job_id: UUID, labor_id: str) -> ApplicationResult:
        now = datetime.now(timezone.utc)
        await uow.lock_labor(labor_id)
        job = await find_job(uow, job_id)

        await ensure_within_weekly_limit(
            HoursLedger(uow.bookings), labor_id, job, self.weekly_hour_limit
        )
        CapacityController.check_capacity(job, now)

        laborers_applied = await CapacityController(uow.jobs).increment_applied(job.id, now)
        booking = await uow.bookings.create(Booking.snapshot_of(job, labor_id))

        return ApplicationResult(
            success=True,
            message=SUCCESS_MESSAGE,
            booking=booking,
            laborers_applied=laborers_applied,
        )
