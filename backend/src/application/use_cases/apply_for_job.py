"""Apply for a job - the central booking workflow."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from application.services import (
    CapacityController,
    HoursLedger,
    UnitOfWorkFactory,
    WEEKLY_HOUR_LIMIT,
)
from application.use_cases.base_use_case import BaseUseCase, DEFAULT_MAX_RETRIES
from domain.entities import Booking, JobApplication, JobListing
from domain.exceptions import (
    AlreadyAppliedError,
    DomainError,
    NotFoundError,
    SafetyLimitExceededError,
    StorageError,
)
from domain.repositories import IUnitOfWork
from infrastructure.config import log_context

SUCCESS_MESSAGE = "Job booked successfully! You're all set."


@dataclass
class ApplicationResult:
    """Outcome of a successful application or booking."""

    success: bool
    message: str
    booking: Booking
    application: Optional[JobApplication] = None
    laborers_applied: Optional[int] = None


async def ensure_within_weekly_limit(
    ledger: HoursLedger,
    labor_id: str,
    job: JobListing,
    limit: float,
) -> float:
    """
    Check that booking the job keeps the worker under the weekly cap.

    Returns:
        Projected weekly total including the job

    Raises:
        SafetyLimitExceededError: If the projected total exceeds the limit
    """
    current_hours = await ledger.weekly_hours(labor_id, job.required_date)
    projected = current_hours + job.duration_hours
    if projected > limit:
        raise SafetyLimitExceededError(projected_hours=projected, limit=limit)
    return projected


async def find_job(uow: IUnitOfWork, job_id: UUID) -> JobListing:
    """Load a posting or raise NotFoundError."""
    job = await uow.jobs.get_by_id(job_id)
    if job is None:
        raise NotFoundError("Job", job_id)
    return job


class ApplyForJobUseCase(BaseUseCase):
    """
    Apply a worker to a posting and book them on success.

    Every application that passes the checks is confirmed immediately.
    The checks and the writes happen in one transaction that first locks
    the worker, so two concurrent applications by the same worker see
    each other's bookings, and the posting counter is only ever moved by
    a guarded UPDATE.

    Order of checks:
        1. duplicate application   -> AlreadyAppliedError
        2. weekly hour cap         -> SafetyLimitExceededError
        3. remaining capacity      -> CapacityExceededError
    """

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        weekly_hour_limit: float = WEEKLY_HOUR_LIMIT,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ):
        super().__init__(uow_factory, max_retries)
        self.weekly_hour_limit = weekly_hour_limit

    async def execute(self, job_id: UUID, labor_id: str) -> ApplicationResult:
        """
        Apply for a job.

        Args:
            job_id: Posting to apply for
            labor_id: Applying worker

        Returns:
            ApplicationResult with the confirmed application and booking

        Raises:
            NotFoundError, AlreadyAppliedError, SafetyLimitExceededError,
            CapacityExceededError, StorageError
        """
        context = log_context(job_id=job_id, labor_id=labor_id)
        self.logger.info(f"🔄 Labor {labor_id} applying for job {job_id}", extra=context)
        try:
            result = await self._transaction(
                lambda uow: self._apply(uow, job_id, labor_id)
            )
        except StorageError as e:
            self.logger.error(
                f"❌ Application failed for job {job_id}: {e.__cause__!r}",
                exc_info=True,
                extra=context,
            )
            raise
        except DomainError as e:
            self.logger.info(
                f"⚠️ Application refused ({e.code}) for job {job_id}, labor {labor_id}",
                extra=log_context(job_id=job_id, labor_id=labor_id, code=e.code),
            )
            raise

        self.logger.info(
            f"✅ Labor {labor_id} booked on job {job_id} "
            f"({result.laborers_applied} applied)",
            extra=context,
        )
        return result

    async def _apply(self, uow: IUnitOfWork, job_id: UUID, labor_id: str) -> ApplicationResult:
        now = datetime.now(timezone.utc)
        await uow.lock_labor(labor_id)
        job = await find_job(uow, job_id)

        if await uow.applications.find(job.id, labor_id) is not None:
            raise AlreadyAppliedError(job.id, labor_id)

        await ensure_within_weekly_limit(
            HoursLedger(uow.bookings), labor_id, job, self.weekly_hour_limit
        )
        CapacityController.check_capacity(job, now)

        application = await uow.applications.create(
            JobApplication(
                job_id=job.id,
                labor_id=labor_id,
                supervisor_id=job.supervisor_id,
            )
        )
        laborers_applied = await CapacityController(uow.jobs).increment_applied(job.id, now)
        booking = await uow.bookings.create(
            Booking.snapshot_of(job, labor_id, application_id=application.id)
        )

        return ApplicationResult(
            success=True,
            message=SUCCESS_MESSAGE,
            booking=booking,
            application=application,
            laborers_applied=laborers_applied,
        )
