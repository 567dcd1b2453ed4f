"""Pytest configuration and shared fixtures."""

from datetime import date
from decimal import Decimal
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from domain.entities import Booking, JobListing
from domain.enums import WageType
from domain.value_objects import SystemRates
from infrastructure.database import (
    SQLAlchemyUnitOfWork,
    build_engine,
    build_session_factory,
    create_tables,
)

# A Wednesday; its week runs Monday 2026-03-02 to Sunday 2026-03-08
WORK_DATE = date(2026, 3, 4)


def build_job(**overrides) -> JobListing:
    """Build a valid posting, overriding any field."""
    fields = dict(
        supervisor_id="sup-1",
        title="Site cleanup",
        location_name="Riverside Tower",
        wage_type=WageType.DAILY,
        wage_amount=Decimal("600"),
        required_date=WORK_DATE,
        duration_hours=8,
        laborers_required=3,
    )
    fields.update(overrides)
    return JobListing(**fields)


@pytest.fixture
def job_factory():
    """Fixture returning the posting builder."""
    return build_job


@pytest.fixture
def rates() -> SystemRates:
    """Fixture for the default minimum wage of 60 per hour."""
    return SystemRates(min_wage_per_hour=Decimal("60"))


@pytest_asyncio.fixture
async def engine(tmp_path):
    """Fresh SQLite database file per test."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'labormatch.db'}")
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def uow_factory(session_factory):
    """Factory opening a new unit of work on the test database."""
    return lambda: SQLAlchemyUnitOfWork(session_factory)


@pytest.fixture
def create_job(uow_factory):
    """Store a posting and return it."""

    async def _create(**overrides) -> JobListing:
        async with uow_factory() as uow:
            job = await uow.jobs.create(build_job(**overrides))
            await uow.commit()
        return job

    return _create


@pytest.fixture
def load_job(uow_factory):
    """Read a posting back from the database."""

    async def _load(job_id) -> JobListing:
        async with uow_factory() as uow:
            return await uow.jobs.get_by_id(job_id)

    return _load


@pytest.fixture
def book_hours(uow_factory):
    """Store a confirmed booking of a worker on a given date."""

    async def _book(labor_id: str, job_date: date, hours: float) -> Booking:
        async with uow_factory() as uow:
            job = await uow.jobs.create(
                build_job(required_date=job_date, duration_hours=hours, wage_type=WageType.HOURLY)
            )
            booking = await uow.bookings.create(Booking.snapshot_of(job, labor_id))
            await uow.commit()
        return booking

    return _book


@pytest.fixture
def app(uow_factory):
    """FastAPI application wired to the test database."""
    from main import app as fastapi_app
    from presentation.api.v1.dependencies import get_uow_factory

    fastapi_app.dependency_overrides[get_uow_factory] = lambda: uow_factory

    yield fastapi_app

    fastapi_app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
