"""System configuration endpoints."""

from fastapi import APIRouter, Depends

from application.use_cases import GetSystemRatesUseCase
from presentation.api.v1.dependencies import get_system_rates_use_case
from presentation.schemas import SystemRatesResponse

router = APIRouter(prefix="/system", tags=["system"])


@router.get("/rates", response_model=SystemRatesResponse)
async def system_rates(
    use_case: GetSystemRatesUseCase = Depends(get_system_rates_use_case),
) -> SystemRatesResponse:
    """Current minimum wage rates."""
    rates = await use_case.execute()
    return SystemRatesResponse.model_validate(rates)
