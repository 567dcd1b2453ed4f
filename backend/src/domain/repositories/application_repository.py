"""Job application repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from domain.entities import JobApplication
from domain.enums import ApplicationStatus


class IApplicationRepository(ABC):
    """
    Abstract repository interface for JobApplication entity.

    Storage enforces one application per (job, worker) pair.
    """

    @abstractmethod
    async def create(self, application: JobApplication) -> JobApplication:
        """
        Create a new application.

        Args:
            application: JobApplication to create

        Returns:
            Created JobApplication

        Raises:
            AlreadyAppliedError: If the worker already applied to the job
        """
        pass

    @abstractmethod
    async def get_by_id(self, application_id: UUID) -> Optional[JobApplication]:
        """Retrieve an application by ID."""
        pass

    @abstractmethod
    async def find(self, job_id: UUID, labor_id: str) -> Optional[JobApplication]:
        """
        Retrieve the application of a worker for a posting.

        Args:
            job_id: Posting UUID
            labor_id: Worker identifier

        Returns:
            JobApplication if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_by_job(self, job_id: UUID) -> list[JobApplication]:
        """List all applications for a posting."""
        pass

    @abstractmethod
    async def list_by_labor(self, labor_id: str) -> list[JobApplication]:
        """List all applications of a worker, newest first."""
        pass

    @abstractmethod
    async def update_status(
        self,
        application_id: UUID,
        status: ApplicationStatus,
    ) -> bool:
        """
        Change the status of an application.

        Returns:
            True if the application exists, False otherwise
        """
        pass
