"""SQLAlchemy implementation of job posting repository."""

from datetime import datetime
from typing import Optional
from uuid import UUID
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import JobListing
from domain.enums import JobStatus, WageType
from domain.repositories import IJobRepository
from infrastructure.database.models import JobModel


class SQLAlchemyJobRepository(IJobRepository):
    """Concrete implementation of IJobRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def create(self, job: JobListing) -> JobListing:
        """Create a new posting in the database."""
        model = self._entity_to_model(job)
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._model_to_entity(model)

    async def get_by_id(self, job_id: UUID) -> Optional[JobListing]:
        """Retrieve a posting by ID, bypassing the identity map."""
        stmt = (
            select(JobModel)
            .where(JobModel.id == job_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._model_to_entity(model)

    async def list_by_status(
        self,
        status: JobStatus,
        is_listed: Optional[bool] = None,
    ) -> list[JobListing]:
        """List postings in a status."""
        stmt = (
            select(JobModel)
            .where(JobModel.status == JobStatus(status).value)
            .execution_options(populate_existing=True)
        )
        if is_listed is not None:
            stmt = stmt.where(JobModel.is_listed == is_listed)
        result = await self.session.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def list_by_supervisor(self, supervisor_id: str) -> list[JobListing]:
        """List postings owned by a supervisor."""
        stmt = (
            select(JobModel)
            .where(JobModel.supervisor_id == supervisor_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def set_listing(self, job_id: UUID, is_listed: bool) -> bool:
        """Change the listing flag of a posting."""
        stmt = (
            update(JobModel)
            .where(JobModel.id == job_id)
            .values(is_listed=is_listed)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0

    async def set_status(
        self,
        job_id: UUID,
        status: JobStatus,
        is_listed: Optional[bool] = None,
    ) -> bool:
        """Change the status of a posting."""
        values: dict = {"status": JobStatus(status).value}
        if is_listed is not None:
            values["is_listed"] = is_listed
        stmt = (
            update(JobModel)
            .where(JobModel.id == job_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0

    async def try_increment_applied(self, job_id: UUID, now: datetime) -> bool:
        """Take one slot with a single guarded UPDATE."""
        stmt = (
            update(JobModel)
            .where(
                JobModel.id == job_id,
                JobModel.status == JobStatus.OPEN.value,
                JobModel.laborers_applied < JobModel.laborers_required,
                JobModel.expires_at >= now,
            )
            .values(laborers_applied=JobModel.laborers_applied + 1)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def decrement_applied(self, job_id: UUID) -> bool:
        """Give back one slot with a single guarded UPDATE."""
        stmt = (
            update(JobModel)
            .where(JobModel.id == job_id, JobModel.laborers_applied > 0)
            .values(laborers_applied=JobModel.laborers_applied - 1)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def expire_overdue(self, now: datetime) -> int:
        """Expire every open posting past its expiry in one statement."""
        stmt = (
            update(JobModel)
            .where(
                JobModel.status == JobStatus.OPEN.value,
                JobModel.expires_at < now,
            )
            .values(status=JobStatus.EXPIRED.value)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    def _entity_to_model(self, entity: JobListing) -> JobModel:
        """Convert domain entity to ORM model."""
        return JobModel(
            id=entity.id,
            supervisor_id=entity.supervisor_id,
            supervisor_name=entity.supervisor_name,
            supervisor_phone=entity.supervisor_phone,
            title=entity.title,
            description=entity.description,
            work_type=entity.work_type,
            location_name=entity.location_name,
            location_details=entity.location_details,
            wage_type=entity.wage_type.value,
            wage_amount=entity.wage_amount,
            required_date=entity.required_date,
            start_time=entity.start_time,
            end_time=entity.end_time,
            duration_hours=entity.duration_hours,
            laborers_required=entity.laborers_required,
            laborers_applied=entity.laborers_applied,
            status=entity.status.value,
            is_listed=entity.is_listed,
            expires_at=entity.expires_at,
            created_at=entity.created_at,
        )

    def _model_to_entity(self, model: JobModel) -> JobListing:
        """Convert ORM model to domain entity."""
        return JobListing(
            id=model.id,
            supervisor_id=model.supervisor_id,
            supervisor_name=model.supervisor_name,
            supervisor_phone=model.supervisor_phone,
            title=model.title,
            description=model.description,
            work_type=model.work_type,
            location_name=model.location_name,
            location_details=model.location_details,
            wage_type=WageType(model.wage_type),
            wage_amount=model.wage_amount,
            required_date=model.required_date,
            start_time=model.start_time,
            end_time=model.end_time,
            duration_hours=model.duration_hours,
            laborers_required=model.laborers_required,
            laborers_applied=model.laborers_applied,
            status=JobStatus(model.status),
            is_listed=model.is_listed,
            expires_at=model.expires_at,
            created_at=model.created_at,
        )
