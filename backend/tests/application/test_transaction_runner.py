"""Tests for the retrying transaction runner."""

import logging

import pytest
from application.services import run_in_transaction
from domain.exceptions import CapacityExceededError, StorageError

logger = logging.getLogger("test")


class FakeUnitOfWork:
    """Unit of work that records commits and can fail on commit."""

    def __init__(self, outcomes: list):
        self.outcomes = outcomes
        self.commits = 0
        self.exits = 0

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.exits += 1

    async def commit(self):
        outcome = self.outcomes.pop(0)
        if outcome is not None:
            raise outcome
        self.commits += 1


class TestRunInTransaction:
    """Test retry behavior."""

    async def test_success_commits_once(self):
        uow = FakeUnitOfWork([None])

        async def work(u):
            return "done"

        assert await run_in_transaction(lambda: uow, work, 3, logger) == "done"
        assert uow.commits == 1

    async def test_retryable_failure_is_retried(self):
        """Test that a transient failure repeats the whole transaction."""
        uow = FakeUnitOfWork([StorageError(), StorageError(), None])
        calls = []

        async def work(u):
            calls.append(1)
            return len(calls)

        assert await run_in_transaction(lambda: uow, work, 3, logger) == 3
        assert uow.exits == 3

    async def test_gives_up_after_max_retries(self):
        uow = FakeUnitOfWork([StorageError() for _ in range(3)])

        async def work(u):
            return None

        with pytest.raises(StorageError):
            await run_in_transaction(lambda: uow, work, 2, logger)
        assert uow.outcomes == []

    async def test_permanent_failure_is_not_retried(self):
        uow = FakeUnitOfWork([StorageError(retryable=False), None])

        async def work(u):
            return None

        with pytest.raises(StorageError):
            await run_in_transaction(lambda: uow, work, 3, logger)
        assert len(uow.outcomes) == 1

    async def test_domain_errors_are_not_retried(self):
        """Test that a refusal aborts on the first attempt."""
        uow = FakeUnitOfWork([None])
        calls = []

        async def work(u):
            calls.append(1)
            raise CapacityExceededError("job-1")

        with pytest.raises(CapacityExceededError):
            await run_in_transaction(lambda: uow, work, 3, logger)
        assert len(calls) == 1
