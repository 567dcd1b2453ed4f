"""Booking read endpoints."""

from fastapi import APIRouter, Depends

from application.use_cases import GetLaborBookingsUseCase, GetSupervisorBookingsUseCase
from presentation.api.v1.dependencies import (
    get_labor_bookings_use_case,
    get_supervisor_bookings_use_case,
)
from presentation.schemas import BookingResponse

router = APIRouter(tags=["bookings"])


@router.get("/labor/{labor_id}/bookings", response_model=list[BookingResponse])
async def labor_bookings(
    labor_id: str,
    use_case: GetLaborBookingsUseCase = Depends(get_labor_bookings_use_case),
) -> list[BookingResponse]:
    """A worker's confirmed bookings, latest job date first."""
    bookings = await use_case.execute(labor_id)
    return [BookingResponse.model_validate(b) for b in bookings]


@router.get("/supervisors/{supervisor_id}/bookings", response_model=list[BookingResponse])
async def supervisor_bookings(
    supervisor_id: str,
    use_case: GetSupervisorBookingsUseCase = Depends(get_supervisor_bookings_use_case),
) -> list[BookingResponse]:
    """Confirmed bookings on a supervisor's postings, newest first."""
    bookings = await use_case.execute(supervisor_id)
    return [BookingResponse.model_validate(b) for b in bookings]
