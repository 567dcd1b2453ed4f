"""Job posting endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from application.use_cases import (
    CreateJobPostingUseCase,
    DelistJobPostingUseCase,
    GetJobUseCase,
    GetOpenJobsUseCase,
    GetSupervisorJobsUseCase,
    ToggleJobListingUseCase,
)
from presentation.api.v1.dependencies import (
    get_create_posting_use_case,
    get_delist_use_case,
    get_job_use_case,
    get_open_jobs_use_case,
    get_supervisor_jobs_use_case,
    get_toggle_listing_use_case,
)
from presentation.schemas import CreateJobRequest, JobResponse, ListingRequest

router = APIRouter(tags=["jobs"])


@router.post("/jobs", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
    request: CreateJobRequest,
    use_case: CreateJobPostingUseCase = Depends(get_create_posting_use_case),
) -> JobResponse:
    """Publish a posting. The wage must meet the minimum wage floor."""
    job = await use_case.execute(**request.model_dump())
    return JobResponse.model_validate(job)


@router.get("/jobs/open", response_model=list[JobResponse])
async def open_jobs(
    use_case: GetOpenJobsUseCase = Depends(get_open_jobs_use_case),
) -> list[JobResponse]:
    """Discovery feed: open, listed, unexpired postings, newest first."""
    jobs = await use_case.execute()
    return [JobResponse.model_validate(job) for job in jobs]


@router.get("/jobs/{job_id}", response_model=JobResponse)
async def get_job(
    job_id: UUID,
    use_case: GetJobUseCase = Depends(get_job_use_case),
) -> JobResponse:
    job = await use_case.execute(job_id)
    return JobResponse.model_validate(job)


@router.patch("/jobs/{job_id}/listing", status_code=status.HTTP_204_NO_CONTENT)
async def toggle_listing(
    job_id: UUID,
    request: ListingRequest,
    use_case: ToggleJobListingUseCase = Depends(get_toggle_listing_use_case),
) -> None:
    """Show or hide a posting in the feed."""
    await use_case.execute(job_id, request.is_listed)


@router.delete("/jobs/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delist_job(
    job_id: UUID,
    use_case: DelistJobPostingUseCase = Depends(get_delist_use_case),
) -> None:
    """Soft-delete a posting."""
    await use_case.execute(job_id)


@router.get("/supervisors/{supervisor_id}/jobs", response_model=list[JobResponse])
async def supervisor_jobs(
    supervisor_id: str,
    use_case: GetSupervisorJobsUseCase = Depends(get_supervisor_jobs_use_case),
) -> list[JobResponse]:
    jobs = await use_case.execute(supervisor_id)
    return [JobResponse.model_validate(job) for job in jobs]
