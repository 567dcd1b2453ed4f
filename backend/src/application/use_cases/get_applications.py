"""Read models for applications."""

from uuid import UUID

from application.use_cases.base_use_case import BaseUseCase
from domain.entities import JobApplication


class GetJobApplicationsUseCase(BaseUseCase):
    """All applications received by a posting."""

    async def execute(self, job_id: UUID) -> list[JobApplication]:
        return await self._transaction(lambda uow: uow.applications.list_by_job(job_id))


class GetLaborApplicationsUseCase(BaseUseCase):
    """All applications of a worker, newest first."""

    async def execute(self, labor_id: str) -> list[JobApplication]:
        return await self._transaction(lambda uow: uow.applications.list_by_labor(labor_id))
