"""Base class for use cases that run against the store."""

from typing import Awaitable, Callable, TypeVar

from application.services import UnitOfWorkFactory, run_in_transaction
from domain.repositories import IUnitOfWork
from infrastructure.config import get_logger

T = TypeVar("T")

DEFAULT_MAX_RETRIES = 3


class BaseUseCase:
    """
    Base class for all use cases.
    
    Provides the unit of work factory, the retry policy and a logger.
    """
    
    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ):
        """
        Initialize base use case.
        
        Args:
            uow_factory: Opens a new unit of work per transaction
            max_retries: Extra attempts after a retryable storage failure
        """
        self.uow_factory = uow_factory
        self.max_retries = max_retries
        self.logger = get_logger(self.__class__.__name__)
    
    async def _transaction(self, work: Callable[[IUnitOfWork], Awaitable[T]]) -> T:
        """Run work in a committed transaction with retries."""
        return await run_in_transaction(
            self.uow_factory,
            work,
            self.max_retries,
            self.logger,
        )
