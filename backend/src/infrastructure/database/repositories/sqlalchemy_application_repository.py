"""SQLAlchemy implementation of job application repository."""

from typing import Optional
from uuid import UUID
from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import JobApplication
from domain.enums import ApplicationStatus
from domain.exceptions import AlreadyAppliedError
from domain.repositories import IApplicationRepository
from infrastructure.database.models import ApplicationModel


class SQLAlchemyApplicationRepository(IApplicationRepository):
    """Concrete implementation of IApplicationRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def create(self, application: JobApplication) -> JobApplication:
        """Create an application; the unique constraint rejects duplicates."""
        model = self._entity_to_model(application)
        self.session.add(model)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise AlreadyAppliedError(application.job_id, application.labor_id) from exc
        await self.session.refresh(model)
        return self._model_to_entity(model)

    async def get_by_id(self, application_id: UUID) -> Optional[JobApplication]:
        """Retrieve an application by ID."""
        stmt = (
            select(ApplicationModel)
            .where(ApplicationModel.id == application_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._model_to_entity(model)

    async def find(self, job_id: UUID, labor_id: str) -> Optional[JobApplication]:
        """Retrieve the application of a worker for a posting."""
        stmt = select(ApplicationModel).where(
            ApplicationModel.job_id == job_id,
            ApplicationModel.labor_id == labor_id,
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._model_to_entity(model)

    async def list_by_job(self, job_id: UUID) -> list[JobApplication]:
        """List applications for a posting."""
        stmt = select(ApplicationModel).where(ApplicationModel.job_id == job_id)
        result = await self.session.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def list_by_labor(self, labor_id: str) -> list[JobApplication]:
        """List a worker's applications, newest first."""
        stmt = (
            select(ApplicationModel)
            .where(ApplicationModel.labor_id == labor_id)
            .order_by(ApplicationModel.applied_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def update_status(
        self,
        application_id: UUID,
        status: ApplicationStatus,
    ) -> bool:
        """Change the status of an application."""
        stmt = (
            update(ApplicationModel)
            .where(ApplicationModel.id == application_id)
            .values(status=ApplicationStatus(status).value)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0

    def _entity_to_model(self, entity: JobApplication) -> ApplicationModel:
        """Convert domain entity to ORM model."""
        return ApplicationModel(
            id=entity.id,
            job_id=entity.job_id,
            labor_id=entity.labor_id,
            supervisor_id=entity.supervisor_id,
            status=entity.status.value,
            applied_at=entity.applied_at,
        )

    def _model_to_entity(self, model: ApplicationModel) -> JobApplication:
        """Convert ORM model to domain entity."""
        return JobApplication(
            id=model.id,
            job_id=model.job_id,
            labor_id=model.labor_id,
            supervisor_id=model.supervisor_id,
            status=ApplicationStatus(model.status),
            applied_at=model.applied_at,
        )
