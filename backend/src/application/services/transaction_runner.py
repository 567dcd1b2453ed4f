"""Retry loop around unit-of-work transactions."""

from logging import Logger
from typing import Awaitable, Callable, TypeVar

from domain.exceptions import StorageError
from domain.repositories import IUnitOfWork

T = TypeVar("T")

UnitOfWorkFactory = Callable[[], IUnitOfWork]


async def run_in_transaction(
    uow_factory: UnitOfWorkFactory,
    work: Callable[[IUnitOfWork], Awaitable[T]],
    max_retries: int,
    logger: Logger,
) -> T:
    """
    Run work inside a fresh transaction and commit it.

    Domain errors abort without retrying. Retryable storage errors repeat
    the whole transaction up to max_retries more times.

    Args:
        uow_factory: Opens a new unit of work
        work: Coroutine function receiving the open unit of work
        max_retries: Extra attempts after the first failure
        logger: Logger for retry warnings

    Returns:
        Whatever work returned

    Raises:
        StorageError: When attempts are exhausted or the error is permanent
    """
    attempt = 0
    while True:
        attempt += 1
        try:
            async with uow_factory() as uow:
                result = await work(uow)
                await uow.commit()
                return result
        except StorageError as exc:
            if not exc.retryable or attempt > max_retries:
                raise
            logger.warning(f"Transaction attempt {attempt} failed, retrying: {exc.__cause__!r}")
