"""SQLAlchemy unit of work - one session, one transaction."""

from types import TracebackType
from typing import Optional

from sqlalchemy import update
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from domain.exceptions import StorageError
from domain.repositories import IUnitOfWork
from infrastructure.config import get_logger
from infrastructure.database.models import LaborGuardModel
from infrastructure.database.repositories import (
    SQLAlchemyApplicationRepository,
    SQLAlchemyBookingRepository,
    SQLAlchemyJobRepository,
    SQLAlchemySystemRatesRepository,
    SQLAlchemyUserRepository,
)

logger = get_logger(__name__)


def _to_storage_error(exc: DBAPIError) -> StorageError:
    # constraint violations fail the same way on every retry
    retryable = not isinstance(exc, IntegrityError)
    return StorageError(retryable=retryable)


class SQLAlchemyUnitOfWork(IUnitOfWork):
    """Concrete implementation of IUnitOfWork over an AsyncSession."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        """Initialize with the factory that opens sessions."""
        self.session_factory = session_factory
        self.session: Optional[AsyncSession] = None

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        self.session = self.session_factory()
        self.users = SQLAlchemyUserRepository(self.session)
        self.jobs = SQLAlchemyJobRepository(self.session)
        self.applications = SQLAlchemyApplicationRepository(self.session)
        self.bookings = SQLAlchemyBookingRepository(self.session)
        self.rates = SQLAlchemySystemRatesRepository(self.session)
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        try:
            await self.session.rollback()
            await self.session.close()
        except DBAPIError as cleanup_exc:
            if exc is None:
                raise _to_storage_error(cleanup_exc) from cleanup_exc
            logger.warning(f"Rollback failed after {exc_type.__name__}: {cleanup_exc}")

        if isinstance(exc, DBAPIError):
            raise _to_storage_error(exc) from exc

    async def commit(self) -> None:
        """Commit the transaction."""
        try:
            await self.session.commit()
        except DBAPIError as exc:
            raise _to_storage_error(exc) from exc

    async def rollback(self) -> None:
        """Roll back the transaction."""
        await self.session.rollback()

    async def lock_labor(self, labor_id: str) -> None:
        """Bump the worker's guard row, creating it on first use."""
        stmt = (
            update(LaborGuardModel)
            .where(LaborGuardModel.labor_id == labor_id)
            .values(version=LaborGuardModel.version + 1)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount:
            return

        try:
            async with self.session.begin_nested():
                self.session.add(LaborGuardModel(labor_id=labor_id, version=1))
        except IntegrityError:
            # another transaction created the row first; wait for its lock
            await self.session.execute(stmt)
