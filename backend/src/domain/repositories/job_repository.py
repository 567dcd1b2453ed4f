"""Job posting repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from domain.entities import JobListing
from domain.enums import JobStatus


class IJobRepository(ABC):
    """
    Abstract repository interface for JobListing entity.

    Counter updates are single conditional statements so that concurrent
    callers can never push a posting past its capacity.
    """

    @abstractmethod
    async def create(self, job: JobListing) -> JobListing:
        """
        Create a new posting.

        Args:
            job: JobListing entity to create

        Returns:
            Created JobListing
        """
        pass

    @abstractmethod
    async def get_by_id(self, job_id: UUID) -> Optional[JobListing]:
        """
        Retrieve a posting by ID, always re-reading the stored row.

        Args:
            job_id: Posting UUID

        Returns:
            JobListing if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_by_status(
        self,
        status: JobStatus,
        is_listed: Optional[bool] = None,
    ) -> list[JobListing]:
        """
        List postings in a given status, optionally filtered by visibility.

        Args:
            status: Posting status to match
            is_listed: If given, only postings with this listing flag

        Returns:
            Matching postings in storage order
        """
        pass

    @abstractmethod
    async def list_by_supervisor(self, supervisor_id: str) -> list[JobListing]:
        """List all postings owned by a supervisor."""
        pass

    @abstractmethod
    async def set_listing(self, job_id: UUID, is_listed: bool) -> bool:
        """
        Change the visibility flag of a posting.

        Returns:
            True if the posting exists, False otherwise
        """
        pass

    @abstractmethod
    async def set_status(
        self,
        job_id: UUID,
        status: JobStatus,
        is_listed: Optional[bool] = None,
    ) -> bool:
        """
        Change the status of a posting.

        Args:
            job_id: Posting UUID
            status: New status
            is_listed: New listing flag, unchanged if None

        Returns:
            True if the posting exists, False otherwise
        """
        pass

    @abstractmethod
    async def try_increment_applied(self, job_id: UUID, now: datetime) -> bool:
        """
        Atomically take one slot of an open, unexpired posting.

        Args:
            job_id: Posting UUID
            now: Current instant, compared with the expiry

        Returns:
            True if a slot was taken, False if none was left
        """
        pass

    @abstractmethod
    async def decrement_applied(self, job_id: UUID) -> bool:
        """
        Atomically give back one slot, never going below zero.

        Returns:
            True if a slot was released
        """
        pass

    @abstractmethod
    async def expire_overdue(self, now: datetime) -> int:
        """
        Move every open posting whose expiry has passed to expired.

        Args:
            now: Current instant

        Returns:
            Number of postings expired
        """
        pass
