"""Integration tests for SQLAlchemyUnitOfWork."""

import pytest
from sqlalchemy import select, text
from domain.entities import UserProfile
from domain.exceptions import StorageError
from infrastructure.database.models import LaborGuardModel


class TestUnitOfWork:
    """Test commit, rollback and error translation."""

    async def test_uncommitted_work_is_rolled_back(self, uow_factory):
        """Test that leaving the block without commit discards changes."""
        async with uow_factory() as uow:
            await uow.users.create(UserProfile(id="user-1"))

        async with uow_factory() as uow:
            assert await uow.users.get_by_id("user-1") is None

    async def test_driver_errors_become_retryable_storage_errors(self, uow_factory):
        with pytest.raises(StorageError) as exc_info:
            async with uow_factory() as uow:
                await uow.session.execute(text("SELECT * FROM no_such_table"))

        assert exc_info.value.retryable is True

    async def test_constraint_violations_are_permanent(self, uow_factory):
        """Test that integrity errors are not worth retrying."""
        async with uow_factory() as uow:
            await uow.users.create(UserProfile(id="user-1"))
            await uow.commit()

        with pytest.raises(StorageError) as exc_info:
            async with uow_factory() as uow:
                await uow.users.create(UserProfile(id="user-1"))

        assert exc_info.value.retryable is False

    async def test_lock_labor_creates_and_bumps_guard(self, uow_factory):
        async with uow_factory() as uow:
            await uow.lock_labor("labor-1")
            await uow.commit()
        async with uow_factory() as uow:
            await uow.lock_labor("labor-1")
            await uow.commit()

        async with uow_factory() as uow:
            result = await uow.session.execute(
                select(LaborGuardModel.version).where(LaborGuardModel.labor_id == "labor-1")
            )
            version = result.scalar_one()

        assert version == 2
