"""Supervisor review of applications."""

from datetime import datetime, timezone
from uuid import UUID

from application.services import CapacityController, HoursLedger, UnitOfWorkFactory, WEEKLY_HOUR_LIMIT
from application.use_cases.apply_for_job import ensure_within_weekly_limit, find_job
from application.use_cases.base_use_case import BaseUseCase, DEFAULT_MAX_RETRIES
from domain.entities import Booking, JobApplication
from domain.enums import ApplicationStatus
from domain.exceptions import NotFoundError
from domain.repositories import IUnitOfWork


async def find_application(uow: IUnitOfWork, application_id: UUID) -> JobApplication:
    """Load an application or raise NotFoundError."""
    application = await uow.applications.get_by_id(application_id)
    if application is None:
        raise NotFoundError("Application", application_id)
    return application


class AcceptApplicationUseCase(BaseUseCase):
    """
    Confirm an application that is not confirmed yet.

    Confirming books the worker, so the same weekly cap and capacity
    guards as the apply workflow run in the same transaction. Accepting an
    application that is already confirmed changes nothing.
    """

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        weekly_hour_limit: float = WEEKLY_HOUR_LIMIT,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ):
        super().__init__(uow_factory, max_retries)
        self.weekly_hour_limit = weekly_hour_limit

    async def execute(self, application_id: UUID) -> JobApplication:
        """
        Accept an application.

        Args:
            application_id: Application UUID

        Returns:
            The confirmed application
        """
        application = await self._transaction(lambda uow: self._accept(uow, application_id))
        self.logger.info(f"Application {application_id} confirmed")
        return application

    async def _accept(self, uow: IUnitOfWork, application_id: UUID) -> JobApplication:
        application = await find_application(uow, application_id)
        if application.is_confirmed:
            return application

        now = datetime.now(timezone.utc)
        await uow.lock_labor(application.labor_id)
        job = await find_job(uow, application.job_id)

        await ensure_within_weekly_limit(
            HoursLedger(uow.bookings), application.labor_id, job, self.weekly_hour_limit
        )
        CapacityController.check_capacity(job, now)

        await uow.applications.update_status(application.id, ApplicationStatus.CONFIRMED)
        await CapacityController(uow.jobs).increment_applied(job.id, now)
        await uow.bookings.create(
            Booking.snapshot_of(job, application.labor_id, application_id=application.id)
        )

        application.status = ApplicationStatus.CONFIRMED
        return application


class RejectApplicationUseCase(BaseUseCase):
    """
    Reject an application.

    When the application was confirmed, its booking is cancelled and the
    slot on the posting is given back.
    """

    async def execute(self, application_id: UUID) -> JobApplication:
        """
        Reject an application.

        Args:
            application_id: Application UUID

        Returns:
            The rejected application
        """
        application = await self._transaction(lambda uow: self._reject(uow, application_id))
        self.logger.info(f"Application {application_id} rejected")
        return application

    async def _reject(self, uow: IUnitOfWork, application_id: UUID) -> JobApplication:
        application = await find_application(uow, application_id)
        if application.status == ApplicationStatus.REJECTED:
            return application

        await uow.applications.update_status(application.id, ApplicationStatus.REJECTED)
        if application.is_confirmed:
            booking = await uow.bookings.get_by_application(application.id)
            if booking is not None:
                booking.cancel()
                await uow.bookings.update_status(booking.id, booking.status)
            await CapacityController(uow.jobs).release_slot(application.job_id)

        application.status = ApplicationStatus.REJECTED
        return application
