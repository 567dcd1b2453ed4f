"""Read models for postings, including the discovery feed."""

from datetime import datetime, timezone
from uuid import UUID

from application.services import CapacityController
from application.use_cases.apply_for_job import find_job
from application.use_cases.base_use_case import BaseUseCase
from domain.entities import JobListing
from domain.enums import JobStatus
from domain.repositories import IUnitOfWork


def newest_first(jobs: list[JobListing]) -> list[JobListing]:
    """Stable sort on creation time, newest first."""
    return sorted(jobs, key=lambda job: job.created_at.timestamp(), reverse=True)


class GetOpenJobsUseCase(BaseUseCase):
    """
    The job feed shown to workers.

    Every call first runs the expiry sweep, then returns postings that are
    open, listed and not past their expiry, newest first. Nothing is
    cached between calls.
    """

    async def execute(self) -> list[JobListing]:
        return await self._transaction(self._open_jobs)

    async def _open_jobs(self, uow: IUnitOfWork) -> list[JobListing]:
        now = datetime.now(timezone.utc)
        await CapacityController(uow.jobs).expire_overdue(now)
        jobs = await uow.jobs.list_by_status(JobStatus.OPEN, is_listed=True)
        return newest_first([job for job in jobs if job.is_visible(now)])


class GetJobUseCase(BaseUseCase):
    """Fetch one posting by id."""

    async def execute(self, job_id: UUID) -> JobListing:
        return await self._transaction(lambda uow: find_job(uow, job_id))


class GetSupervisorJobsUseCase(BaseUseCase):
    """All postings of a supervisor in any status, newest first."""

    async def execute(self, supervisor_id: str) -> list[JobListing]:
        async def load(uow: IUnitOfWork) -> list[JobListing]:
            return newest_first(await uow.jobs.list_by_supervisor(supervisor_id))

        return await self._transaction(load)
