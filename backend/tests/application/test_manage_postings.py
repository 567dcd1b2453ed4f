"""Tests for posting creation and visibility changes."""

from datetime import date, timedelta
from decimal import Decimal
from uuid import uuid4

import pytest
from application.use_cases import (
    ApplyForJobUseCase,
    CreateJobPostingUseCase,
    DelistJobPostingUseCase,
    GetSupervisorBookingsUseCase,
    ToggleJobListingUseCase,
)
from domain.enums import JobStatus, WageType
from domain.exceptions import NotFoundError, ValidationError, WageBelowMinimumError
from domain.value_objects import SystemRates

POSTING = dict(
    supervisor_id="sup-1",
    title="Concrete pour",
    location_name="Harbor Plaza",
    wage_type=WageType.DAILY,
    required_date=date(2026, 3, 4),
    duration_hours=8,
    laborers_required=4,
)


@pytest.fixture
def create_use_case(uow_factory) -> CreateJobPostingUseCase:
    return CreateJobPostingUseCase(uow_factory)


class TestCreatePosting:
    """Test posting creation and the minimum wage floor."""

    async def test_compliant_posting_is_stored(self, create_use_case, load_job):
        """Test that 480 for an 8 hour day meets the default 60/hour floor."""
        job = await create_use_case.execute(wage_amount=480, **POSTING)

        stored = await load_job(job.id)
        assert stored.wage_amount == Decimal("480")
        assert stored.status == JobStatus.OPEN
        assert stored.is_listed is True
        assert stored.laborers_applied == 0
        assert stored.expires_at - stored.created_at == timedelta(days=7)

    async def test_low_wage_is_refused(self, create_use_case, uow_factory):
        """Test that nothing is stored when the wage is below the floor."""
        with pytest.raises(WageBelowMinimumError):
            await create_use_case.execute(wage_amount=400, **POSTING)

        async with uow_factory() as uow:
            assert await uow.jobs.list_by_supervisor("sup-1") == []

    async def test_stored_rates_take_precedence(self, create_use_case, uow_factory):
        """Test that a stored rate of 70/hour raises the daily floor to 560."""
        async with uow_factory() as uow:
            await uow.rates.save(SystemRates(min_wage_per_hour=Decimal("70")))
            await uow.commit()

        with pytest.raises(WageBelowMinimumError) as exc_info:
            await create_use_case.execute(wage_amount=480, **POSTING)
        assert exc_info.value.minimum == Decimal("560")

    async def test_hourly_wage_checked_against_rate(self, create_use_case):
        posting = dict(POSTING, wage_type=WageType.HOURLY)
        job = await create_use_case.execute(wage_amount=60, **posting)
        assert job.wage_type == WageType.HOURLY

        with pytest.raises(WageBelowMinimumError):
            await create_use_case.execute(wage_amount=55, **posting)

    async def test_invalid_fields_are_refused(self, create_use_case):
        with pytest.raises(ValidationError):
            await create_use_case.execute(wage_amount=480, **dict(POSTING, laborers_required=0))

    async def test_custom_expiry(self, uow_factory):
        use_case = CreateJobPostingUseCase(uow_factory, expiry_days=2)
        job = await use_case.execute(wage_amount=480, **POSTING)
        assert job.expires_at - job.created_at == timedelta(days=2)

    async def test_optional_details_are_kept(self, create_use_case, load_job):
        job = await create_use_case.execute(
            wage_amount=480,
            location_details="Gate B",
            work_type="Concrete",
            start_time="07:00",
            end_time="15:00",
            supervisor_name="Dana",
            supervisor_phone="+15550100",
            **POSTING,
        )
        stored = await load_job(job.id)
        assert stored.location_details == "Gate B"
        assert stored.start_time == "07:00"
        assert stored.supervisor_phone == "+15550100"


class TestListingChanges:
    """Test toggling and delisting."""

    async def test_toggle_listing(self, uow_factory, create_job, load_job):
        job = await create_job()
        use_case = ToggleJobListingUseCase(uow_factory)

        await use_case.execute(job.id, False)
        assert (await load_job(job.id)).is_listed is False

        await use_case.execute(job.id, True)
        assert (await load_job(job.id)).is_listed is True

    async def test_toggle_unknown_job(self, uow_factory):
        with pytest.raises(NotFoundError):
            await ToggleJobListingUseCase(uow_factory).execute(uuid4(), False)

    async def test_delist_keeps_bookings(self, uow_factory, create_job, load_job):
        """Test that delisting closes the posting but bookings stay."""
        job = await create_job()
        await ApplyForJobUseCase(uow_factory).execute(job.id, "labor-1")

        await DelistJobPostingUseCase(uow_factory).execute(job.id)

        assert (await load_job(job.id)).status == JobStatus.DELISTED
        bookings = await GetSupervisorBookingsUseCase(uow_factory).execute("sup-1")
        assert len(bookings) == 1

    async def test_delist_unknown_job(self, uow_factory):
        with pytest.raises(NotFoundError):
            await DelistJobPostingUseCase(uow_factory).execute(uuid4())
