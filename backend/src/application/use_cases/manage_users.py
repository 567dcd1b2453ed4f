"""User profile use cases."""

from typing import Optional

from application.use_cases.base_use_case import BaseUseCase
from domain.entities import UserProfile
from domain.enums import UserRole
from domain.exceptions import NotFoundError
from domain.repositories import IUnitOfWork


class CreateUserProfileUseCase(BaseUseCase):
    """
    Register a user after login.

    Registering an id that already exists merges the new phone number and
    role into the stored profile and keeps its creation time.
    """

    async def execute(
        self,
        user_id: str,
        role: UserRole,
        phone_number: Optional[str] = None,
    ) -> UserProfile:
        profile = UserProfile(id=user_id, role=role, phone_number=phone_number)

        async def save(uow: IUnitOfWork) -> UserProfile:
            existing = await uow.users.get_by_id(profile.id)
            if existing is None:
                return await uow.users.create(profile)
            existing.change_role(profile.role)
            if profile.phone_number:
                existing.phone_number = profile.phone_number
            return await uow.users.update(existing)

        return await self._transaction(save)


class GetUserProfileUseCase(BaseUseCase):
    """Fetch a user profile by id."""

    async def execute(self, user_id: str) -> UserProfile:
        async def load(uow: IUnitOfWork) -> UserProfile:
            profile = await uow.users.get_by_id(user_id)
            if profile is None:
                raise NotFoundError("User", user_id)
            return profile

        return await self._transaction(load)


class UpdateUserRoleUseCase(BaseUseCase):
    """Switch a user between supervisor and labor."""

    async def execute(self, user_id: str, role: UserRole) -> UserProfile:
        async def change(uow: IUnitOfWork) -> UserProfile:
            profile = await uow.users.get_by_id(user_id)
            if profile is None:
                raise NotFoundError("User", user_id)
            profile.change_role(role)
            return await uow.users.update(profile)

        updated = await self._transaction(change)
        self.logger.info(f"User {user_id} role changed to {updated.role}")
        return updated
