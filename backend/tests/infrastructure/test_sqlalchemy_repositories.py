"""Integration tests for the SQLAlchemy repositories on SQLite."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest
from domain.entities import Booking, JobApplication, UserProfile
from domain.enums import BookingStatus, JobStatus, UserRole
from domain.exceptions import AlreadyAppliedError


class TestJobRepository:
    """Test guarded updates on postings."""

    async def test_round_trip_keeps_utc_instants(self, create_job, load_job):
        """Test that instants come back timezone-aware and unchanged."""
        expires = datetime(2026, 3, 9, 12, 30, tzinfo=timezone.utc)
        job = await create_job(expires_at=expires)

        stored = await load_job(job.id)

        assert stored.expires_at == expires
        assert stored.expires_at.tzinfo is not None
        assert stored.required_date == date(2026, 3, 4)

    async def test_increment_stops_at_capacity(self, uow_factory, create_job):
        job = await create_job(laborers_required=1)
        now = datetime.now(timezone.utc)

        async with uow_factory() as uow:
            assert await uow.jobs.try_increment_applied(job.id, now) is True
            assert await uow.jobs.try_increment_applied(job.id, now) is False
            assert (await uow.jobs.get_by_id(job.id)).laborers_applied == 1

    async def test_increment_refuses_expired_and_closed(self, uow_factory, create_job):
        expired = await create_job(expires_at=datetime.now(timezone.utc) - timedelta(hours=1))
        closed = await create_job(status=JobStatus.DELISTED)
        now = datetime.now(timezone.utc)

        async with uow_factory() as uow:
            assert await uow.jobs.try_increment_applied(expired.id, now) is False
            assert await uow.jobs.try_increment_applied(closed.id, now) is False

    async def test_decrement_never_goes_negative(self, uow_factory, create_job):
        job = await create_job()
        async with uow_factory() as uow:
            assert await uow.jobs.decrement_applied(job.id) is False

    async def test_expire_overdue_counts_only_open(self, uow_factory, create_job, load_job):
        """Test that the sweep touches only open postings past expiry."""
        past = datetime.now(timezone.utc) - timedelta(hours=1)
        overdue = await create_job(expires_at=past)
        await create_job(expires_at=past, status=JobStatus.FILLED)
        await create_job()

        async with uow_factory() as uow:
            assert await uow.jobs.expire_overdue(datetime.now(timezone.utc)) == 1
            await uow.commit()

        assert (await load_job(overdue.id)).status == JobStatus.EXPIRED

    async def test_list_by_status_and_listing(self, uow_factory, create_job):
        listed = await create_job()
        await create_job(is_listed=False)

        async with uow_factory() as uow:
            jobs = await uow.jobs.list_by_status(JobStatus.OPEN, is_listed=True)
            every_open = await uow.jobs.list_by_status(JobStatus.OPEN)

        assert [j.id for j in jobs] == [listed.id]
        assert len(every_open) == 2


class TestApplicationRepository:
    """Test the one-application-per-worker constraint."""

    async def test_duplicate_insert_raises_already_applied(self, uow_factory, create_job):
        job = await create_job()
        async with uow_factory() as uow:
            await uow.applications.create(JobApplication(job.id, "labor-1", job.supervisor_id))
            await uow.commit()

        async with uow_factory() as uow:
            with pytest.raises(AlreadyAppliedError):
                await uow.applications.create(JobApplication(job.id, "labor-1", job.supervisor_id))

    async def test_find(self, uow_factory, create_job):
        job = await create_job()
        async with uow_factory() as uow:
            created = await uow.applications.create(JobApplication(job.id, "labor-1", job.supervisor_id))
            assert (await uow.applications.find(job.id, "labor-1")).id == created.id
            assert await uow.applications.find(job.id, "labor-2") is None


class TestBookingRepository:
    """Test booking queries."""

    async def test_cancelled_bookings_are_not_listed(self, uow_factory, create_job):
        job = await create_job(wage_amount=Decimal("612.50"))
        async with uow_factory() as uow:
            booking = await uow.bookings.create(Booking.snapshot_of(job, "labor-1"))
            await uow.bookings.update_status(booking.id, BookingStatus.CANCELLED)
            await uow.commit()

        async with uow_factory() as uow:
            assert await uow.bookings.list_by_labor("labor-1") == []
            cancelled = await uow.bookings.list_by_labor("labor-1", BookingStatus.CANCELLED)

        assert cancelled[0].wage_amount == Decimal("612.50")


class TestUserAndRatesRepositories:
    """Test users and the rates singleton."""

    async def test_user_create_and_update(self, uow_factory):
        async with uow_factory() as uow:
            await uow.users.create(UserProfile(id="user-1"))
            profile = await uow.users.get_by_id("user-1")
            profile.change_role(UserRole.SUPERVISOR)
            await uow.users.update(profile)
            await uow.commit()

        async with uow_factory() as uow:
            assert (await uow.users.get_by_id("user-1")).role == UserRole.SUPERVISOR

    async def test_rates_missing_then_saved(self, uow_factory, rates):
        async with uow_factory() as uow:
            assert await uow.rates.get() is None
            await uow.rates.save(rates)
            await uow.commit()

        async with uow_factory() as uow:
            assert (await uow.rates.get()).min_wage_per_hour == Decimal("60")
