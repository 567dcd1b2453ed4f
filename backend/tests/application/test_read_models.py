"""Tests for booking, application, user and rates reads."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest
from application.use_cases import (
    ApplyForJobUseCase,
    CreateUserProfileUseCase,
    GetJobApplicationsUseCase,
    GetLaborApplicationsUseCase,
    GetLaborBookingsUseCase,
    GetSupervisorBookingsUseCase,
    GetSystemRatesUseCase,
    GetUserProfileUseCase,
    UpdateUserRoleUseCase,
)
from domain.enums import UserRole
from domain.exceptions import NotFoundError
from domain.value_objects import SystemRates


class TestBookingReads:
    """Test booking lists."""

    async def test_labor_bookings_latest_job_date_first(self, uow_factory, create_job):
        apply = ApplyForJobUseCase(uow_factory)
        early = await create_job(required_date=date(2026, 3, 2))
        late = await create_job(required_date=date(2026, 3, 6))
        middle = await create_job(required_date=date(2026, 3, 4))
        for job in (early, late, middle):
            await apply.execute(job.id, "labor-1")

        bookings = await GetLaborBookingsUseCase(uow_factory).execute("labor-1")

        assert [b.job_id for b in bookings] == [late.id, middle.id, early.id]

    async def test_supervisor_bookings_newest_first(self, uow_factory, create_job):
        apply = ApplyForJobUseCase(uow_factory)
        job = await create_job()
        first = await apply.execute(job.id, "labor-1")
        second = await apply.execute(job.id, "labor-2")

        bookings = await GetSupervisorBookingsUseCase(uow_factory).execute("sup-1")

        assert [b.id for b in bookings] == [second.booking.id, first.booking.id]

    async def test_no_bookings(self, uow_factory):
        assert await GetLaborBookingsUseCase(uow_factory).execute("labor-9") == []


class TestApplicationReads:
    """Test application lists."""

    async def test_applications_per_job_and_worker(self, uow_factory, create_job):
        apply = ApplyForJobUseCase(uow_factory)
        job = await create_job()
        other = await create_job()
        await apply.execute(job.id, "labor-1")
        await apply.execute(job.id, "labor-2")
        await apply.execute(other.id, "labor-1")

        per_job = await GetJobApplicationsUseCase(uow_factory).execute(job.id)
        per_labor = await GetLaborApplicationsUseCase(uow_factory).execute("labor-1")

        assert {a.labor_id for a in per_job} == {"labor-1", "labor-2"}
        assert [a.job_id for a in per_labor] == [other.id, job.id]


class TestUserProfiles:
    """Test user registration and role changes."""

    async def test_create_and_get(self, uow_factory):
        await CreateUserProfileUseCase(uow_factory).execute("user-1", UserRole.SUPERVISOR, "+15550100")

        profile = await GetUserProfileUseCase(uow_factory).execute("user-1")

        assert profile.role == UserRole.SUPERVISOR
        assert profile.phone_number == "+15550100"

    async def test_create_existing_merges(self, uow_factory):
        """Test that registering again keeps the phone number and updates the role."""
        create = CreateUserProfileUseCase(uow_factory)
        first = await create.execute("user-1", UserRole.LABOR, "+15550100")

        merged = await create.execute("user-1", UserRole.SUPERVISOR)

        assert merged.role == UserRole.SUPERVISOR
        assert merged.phone_number == "+15550100"
        assert merged.created_at == first.created_at

    async def test_update_role(self, uow_factory):
        await CreateUserProfileUseCase(uow_factory).execute("user-1", UserRole.LABOR)
        updated = await UpdateUserRoleUseCase(uow_factory).execute("user-1", UserRole.SUPERVISOR)
        assert updated.is_supervisor is True

    async def test_unknown_user(self, uow_factory):
        with pytest.raises(NotFoundError):
            await GetUserProfileUseCase(uow_factory).execute("nobody")
        with pytest.raises(NotFoundError):
            await UpdateUserRoleUseCase(uow_factory).execute("nobody", UserRole.LABOR)


class TestSystemRates:
    """Test rates reads."""

    async def test_fallback_when_nothing_stored(self, uow_factory):
        rates = await GetSystemRatesUseCase(uow_factory).execute()
        assert rates.min_wage_per_hour == Decimal("60")

    async def test_custom_fallback(self, uow_factory):
        rates = await GetSystemRatesUseCase(uow_factory, fallback_min_wage=Decimal("75")).execute()
        assert rates.min_wage_per_hour == Decimal("75")

    async def test_stored_rates(self, uow_factory):
        updated = datetime(2026, 1, 1, tzinfo=timezone.utc)
        async with uow_factory() as uow:
            await uow.rates.save(SystemRates(min_wage_per_hour=Decimal("65.50"), last_updated=updated))
            await uow.commit()

        rates = await GetSystemRatesUseCase(uow_factory).execute()

        assert rates.min_wage_per_hour == Decimal("65.50")
        assert rates.last_updated == updated
