"""Unit of work interface - one transaction over all repositories."""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional

from domain.repositories.application_repository import IApplicationRepository
from domain.repositories.booking_repository import IBookingRepository
from domain.repositories.job_repository import IJobRepository
from domain.repositories.system_rates_repository import ISystemRatesRepository
from domain.repositories.user_repository import IUserRepository


class IUnitOfWork(ABC):
    """
    Abstract transactional boundary around the repositories.

    Usage:
        async with uow_factory() as uow:
            job = await uow.jobs.get_by_id(job_id)
            ...
            await uow.commit()

    Leaving the block without commit() rolls everything back.
    Storage failures surface as StorageError.
    """

    users: IUserRepository
    jobs: IJobRepository
    applications: IApplicationRepository
    bookings: IBookingRepository
    rates: ISystemRatesRepository

    @abstractmethod
    async def __aenter__(self) -> "IUnitOfWork":
        pass

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Commit the transaction."""
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Roll back the transaction."""
        pass

    @abstractmethod
    async def lock_labor(self, labor_id: str) -> None:
        """
        Serialize this transaction with every other transaction that
        locks the same worker, until commit or rollback.

        Args:
            labor_id: Worker identifier
        """
        pass
