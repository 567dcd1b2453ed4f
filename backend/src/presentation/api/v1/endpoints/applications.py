"""Application and booking endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from application.use_cases import (
    AcceptApplicationUseCase,
    ApplyForJobUseCase,
    BookJobUseCase,
    GetJobApplicationsUseCase,
    GetLaborApplicationsUseCase,
    RejectApplicationUseCase,
)
from presentation.api.v1.dependencies import (
    get_accept_use_case,
    get_apply_use_case,
    get_book_use_case,
    get_job_applications_use_case,
    get_labor_applications_use_case,
    get_reject_use_case,
)
from presentation.schemas import (
    ApplicationResponse,
    ApplyRequest,
    ApplyResponse,
    ErrorResponse,
)

router = APIRouter(tags=["applications"])

REFUSALS = {
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
    503: {"model": ErrorResponse},
}


@router.post(
    "/jobs/{job_id}/applications",
    response_model=ApplyResponse,
    status_code=status.HTTP_201_CREATED,
    responses=REFUSALS,
)
async def apply_for_job(
    job_id: UUID,
    request: ApplyRequest,
    use_case: ApplyForJobUseCase = Depends(get_apply_use_case),
) -> ApplyResponse:
    """
    Apply for a posting.

    A successful application is confirmed and booked in the same step.
    """
    result = await use_case.execute(job_id, request.labor_id)
    return ApplyResponse.model_validate(result)


@router.post(
    "/jobs/{job_id}/bookings",
    response_model=ApplyResponse,
    status_code=status.HTTP_201_CREATED,
    responses=REFUSALS,
    deprecated=True,
)
async def book_job(
    job_id: UUID,
    request: ApplyRequest,
    use_case: BookJobUseCase = Depends(get_book_use_case),
) -> ApplyResponse:
    """Direct booking without an application record. Use the applications route."""
    result = await use_case.execute(job_id, request.labor_id)
    return ApplyResponse.model_validate(result)


@router.get("/jobs/{job_id}/applications", response_model=list[ApplicationResponse])
async def job_applications(
    job_id: UUID,
    use_case: GetJobApplicationsUseCase = Depends(get_job_applications_use_case),
) -> list[ApplicationResponse]:
    applications = await use_case.execute(job_id)
    return [ApplicationResponse.model_validate(a) for a in applications]


@router.get("/labor/{labor_id}/applications", response_model=list[ApplicationResponse])
async def labor_applications(
    labor_id: str,
    use_case: GetLaborApplicationsUseCase = Depends(get_labor_applications_use_case),
) -> list[ApplicationResponse]:
    applications = await use_case.execute(labor_id)
    return [ApplicationResponse.model_validate(a) for a in applications]


@router.post(
    "/applications/{application_id}/accept",
    response_model=ApplicationResponse,
    responses=REFUSALS,
)
async def accept_application(
    application_id: UUID,
    use_case: AcceptApplicationUseCase = Depends(get_accept_use_case),
) -> ApplicationResponse:
    application = await use_case.execute(application_id)
    return ApplicationResponse.model_validate(application)


@router.post(
    "/applications/{application_id}/reject",
    response_model=ApplicationResponse,
    responses=REFUSALS,
)
async def reject_application(
    application_id: UUID,
    use_case: RejectApplicationUseCase = Depends(get_reject_use_case),
) -> ApplicationResponse:
    """Reject an application, releasing its booking if it had one."""
    application = await use_case.execute(application_id)
    return ApplicationResponse.model_validate(application)
