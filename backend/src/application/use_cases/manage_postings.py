"""Create postings and manage their visibility."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from typing import Optional, Union
from uuid import UUID

from application.services import CapacityController, UnitOfWorkFactory
from application.use_cases.base_use_case import BaseUseCase, DEFAULT_MAX_RETRIES
from application.use_cases.get_system_rates import DEFAULT_MIN_WAGE_PER_HOUR, current_rates
from domain.entities import JobListing
from domain.entities.job_listing import DEFAULT_EXPIRY_DAYS
from domain.enums import WageType
from domain.repositories import IUnitOfWork
from domain.services import validate_offer


class CreateJobPostingUseCase(BaseUseCase):
    """
    Publish a new posting.

    The offered wage is checked against the floor derived from the
    current system rates before anything is written.
    """

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        expiry_days: int = DEFAULT_EXPIRY_DAYS,
        fallback_min_wage: Decimal = DEFAULT_MIN_WAGE_PER_HOUR,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ):
        super().__init__(uow_factory, max_retries)
        self.expiry_days = expiry_days
        self.fallback_min_wage = fallback_min_wage

    async def execute(
        self,
        supervisor_id: str,
        title: str,
        location_name: str,
        wage_type: WageType,
        wage_amount: Union[Decimal, int, float],
        required_date: Union[date, str],
        duration_hours: float,
        laborers_required: int,
        description: str = "",
        expires_at: Optional[datetime] = None,
        location_details: Optional[str] = None,
        work_type: Optional[str] = None,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
        supervisor_name: Optional[str] = None,
        supervisor_phone: Optional[str] = None,
    ) -> JobListing:
        """
        Create a posting.

        Returns:
            The stored posting, open and listed

        Raises:
            ValidationError: If a field is invalid
            WageBelowMinimumError: If the wage is below the floor
        """
        now = datetime.now(timezone.utc)
        job = JobListing(
            supervisor_id=supervisor_id,
            title=title,
            description=description,
            location_name=location_name,
            location_details=location_details,
            work_type=work_type,
            wage_type=wage_type,
            wage_amount=wage_amount,
            required_date=required_date,
            start_time=start_time,
            end_time=end_time,
            duration_hours=duration_hours,
            laborers_required=laborers_required,
            supervisor_name=supervisor_name,
            supervisor_phone=supervisor_phone,
            created_at=now,
            expires_at=expires_at or now + timedelta(days=self.expiry_days),
        )

        async def create(uow: IUnitOfWork) -> JobListing:
            rates = await current_rates(uow, self.fallback_min_wage)
            validate_offer(rates, job.wage_type, job.duration_hours, job.wage_amount)
            return await uow.jobs.create(job)

        created = await self._transaction(create)
        self.logger.info(f"✅ Job {created.id} posted by supervisor {supervisor_id}")
        return created


class ToggleJobListingUseCase(BaseUseCase):
    """Show or hide a posting in the discovery feed."""

    async def execute(self, job_id: UUID, is_listed: bool) -> None:
        await self._transaction(
            lambda uow: CapacityController(uow.jobs).set_listing(job_id, is_listed)
        )
        self.logger.info(f"Job {job_id} listing set to {is_listed}")


class DelistJobPostingUseCase(BaseUseCase):
    """Soft-delete a posting. Existing bookings stay valid."""

    async def execute(self, job_id: UUID) -> None:
        await self._transaction(lambda uow: CapacityController(uow.jobs).delist(job_id))
        self.logger.info(f"Job {job_id} delisted")
