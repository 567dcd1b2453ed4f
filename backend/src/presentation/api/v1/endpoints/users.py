"""User profile endpoints."""

from fastapi import APIRouter, Depends, status

from application.use_cases import (
    CreateUserProfileUseCase,
    GetUserProfileUseCase,
    UpdateUserRoleUseCase,
)
from presentation.api.v1.dependencies import (
    get_create_user_use_case,
    get_update_role_use_case,
    get_user_use_case,
)
from presentation.schemas import CreateUserRequest, UpdateRoleRequest, UserResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: CreateUserRequest,
    use_case: CreateUserProfileUseCase = Depends(get_create_user_use_case),
) -> UserResponse:
    """Register a user, or merge into the existing profile."""
    profile = await use_case.execute(
        user_id=request.id,
        role=request.role,
        phone_number=request.phone_number,
    )
    return UserResponse.model_validate(profile)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    use_case: GetUserProfileUseCase = Depends(get_user_use_case),
) -> UserResponse:
    profile = await use_case.execute(user_id)
    return UserResponse.model_validate(profile)


@router.patch("/{user_id}/role", response_model=UserResponse)
async def update_role(
    user_id: str,
    request: UpdateRoleRequest,
    use_case: UpdateUserRoleUseCase = Depends(get_update_role_use_case),
) -> UserResponse:
    profile = await use_case.execute(user_id, request.role)
    return UserResponse.model_validate(profile)
