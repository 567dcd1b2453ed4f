"""Capacity and lifecycle transitions of postings."""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from domain.entities import JobListing
from domain.enums import JobStatus
from domain.exceptions import CapacityExceededError, NotFoundError
from domain.repositories import IJobRepository
from infrastructure.config import get_logger, log_context


class CapacityController:
    """
    Owns every change to a posting's counters and status.

    open -> filled    when the last slot is taken (also unlists)
    open -> expired   by the expiry sweep
    open -> delisted  by the owner
    """

    def __init__(self, job_repository: IJobRepository):
        self.job_repo = job_repository
        self.logger = get_logger(self.__class__.__name__)

    @staticmethod
    def check_capacity(job: JobListing, now: Optional[datetime] = None) -> None:
        """
        Raise if the posting cannot take another worker.

        Raises:
            CapacityExceededError: If the posting is full, closed or expired
        """
        if job.is_accepting(now):
            return
        if job.is_full or job.status == JobStatus.FILLED:
            raise CapacityExceededError(job.id)
        raise CapacityExceededError(
            job.id, "Sorry, this job is no longer accepting applications."
        )

    async def increment_applied(self, job_id: UUID, now: Optional[datetime] = None) -> int:
        """
        Take one slot of a posting.

        The increment is a single guarded UPDATE; the counts are then
        re-read inside the same transaction to decide the filled transition.

        Args:
            job_id: Posting UUID
            now: Current instant

        Returns:
            New applied count

        Raises:
            CapacityExceededError: If no slot was left
            NotFoundError: If the posting does not exist
        """
        now = now or datetime.now(timezone.utc)
        if not await self.job_repo.try_increment_applied(job_id, now):
            raise CapacityExceededError(job_id)

        job = await self.job_repo.get_by_id(job_id)
        if job is None:
            raise NotFoundError("Job", job_id)

        if job.is_full:
            await self.job_repo.set_status(job_id, JobStatus.FILLED, is_listed=False)
            self.logger.info(
                f"Job {job_id} filled ({job.laborers_applied}/{job.laborers_required})",
                extra=log_context(job_id=job_id),
            )

        return job.laborers_applied

    async def release_slot(self, job_id: UUID) -> bool:
        """
        Give back one slot after a confirmed application is withdrawn.

        A filled posting that has room again goes back to open and listed
        in the same transaction. Expired and delisted postings stay closed.

        Returns:
            False if there was no taken slot to give back
        """
        if not await self.job_repo.decrement_applied(job_id):
            return False

        job = await self.job_repo.get_by_id(job_id)
        if (
            job is not None
            and job.status == JobStatus.FILLED
            and job.remaining_capacity > 0
            and not job.is_expired()
        ):
            await self.job_repo.set_status(job_id, JobStatus.OPEN, is_listed=True)
            self.logger.info(
                f"Job {job_id} reopened ({job.remaining_capacity} slot(s) free)",
                extra=log_context(job_id=job_id),
            )
        return True

    async def expire_overdue(self, now: Optional[datetime] = None) -> int:
        """
        Expire every open posting whose expiry has passed.

        Idempotent; failures propagate to the caller.

        Returns:
            Number of postings expired by this sweep
        """
        expired = await self.job_repo.expire_overdue(now or datetime.now(timezone.utc))
        if expired:
            self.logger.info(f"Expired {expired} overdue job(s)")
        return expired

    async def delist(self, job_id: UUID) -> None:
        """Soft-delete a posting; its bookings stay valid."""
        if not await self.job_repo.set_status(job_id, JobStatus.DELISTED):
            raise NotFoundError("Job", job_id)

    async def set_listing(self, job_id: UUID, is_listed: bool) -> None:
        """Show or hide a posting in the feed without changing its status."""
        if not await self.job_repo.set_listing(job_id, is_listed):
            raise NotFoundError("Job", job_id)
