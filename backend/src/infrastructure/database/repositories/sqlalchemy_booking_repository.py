"""SQLAlchemy implementation of booking repository."""

from typing import Optional
from uuid import UUID
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import Booking
from domain.enums import BookingStatus
from domain.repositories import IBookingRepository
from infrastructure.database.models import BookingModel


class SQLAlchemyBookingRepository(IBookingRepository):
    """Concrete implementation of IBookingRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def create(self, booking: Booking) -> Booking:
        """Create a new booking in the database."""
        model = self._entity_to_model(booking)
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._model_to_entity(model)

    async def list_by_labor(
        self,
        labor_id: str,
        status: BookingStatus = BookingStatus.CONFIRMED,
    ) -> list[Booking]:
        """List a worker's bookings in a status."""
        stmt = select(BookingModel).where(
            BookingModel.labor_id == labor_id,
            BookingModel.status == BookingStatus(status).value,
        )
        result = await self.session.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def list_by_supervisor(
        self,
        supervisor_id: str,
        status: BookingStatus = BookingStatus.CONFIRMED,
    ) -> list[Booking]:
        """List bookings on a supervisor's postings in a status."""
        stmt = select(BookingModel).where(
            BookingModel.supervisor_id == supervisor_id,
            BookingModel.status == BookingStatus(status).value,
        )
        result = await self.session.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def get_by_application(self, application_id: UUID) -> Optional[Booking]:
        """Retrieve the confirmed booking paired with an application."""
        stmt = select(BookingModel).where(
            BookingModel.application_id == application_id,
            BookingModel.status == BookingStatus.CONFIRMED.value,
        )
        result = await self.session.execute(stmt)
        model = result.scalars().first()

        if model is None:
            return None

        return self._model_to_entity(model)

    async def update_status(self, booking_id: UUID, status: BookingStatus) -> bool:
        """Change the status of a booking."""
        stmt = (
            update(BookingModel)
            .where(BookingModel.id == booking_id)
            .values(status=BookingStatus(status).value)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0

    def _entity_to_model(self, entity: Booking) -> BookingModel:
        """Convert domain entity to ORM model."""
        return BookingModel(
            id=entity.id,
            job_id=entity.job_id,
            application_id=entity.application_id,
            labor_id=entity.labor_id,
            supervisor_id=entity.supervisor_id,
            job_title=entity.job_title,
            location_name=entity.location_name,
            job_date=entity.job_date,
            duration_hours=entity.duration_hours,
            wage_amount=entity.wage_amount,
            status=entity.status.value,
            created_at=entity.created_at,
        )

    def _model_to_entity(self, model: BookingModel) -> Booking:
        """Convert ORM model to domain entity."""
        return Booking(
            id=model.id,
            job_id=model.job_id,
            application_id=model.application_id,
            labor_id=model.labor_id,
            supervisor_id=model.supervisor_id,
            job_title=model.job_title,
            location_name=model.location_name,
            job_date=model.job_date,
            duration_hours=model.duration_hours,
            wage_amount=model.wage_amount,
            status=BookingStatus(model.status),
            created_at=model.created_at,
        )
