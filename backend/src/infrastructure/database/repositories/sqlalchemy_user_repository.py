"""SQLAlchemy implementation of user repository."""

from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import UserProfile
from domain.enums import UserRole
from domain.repositories import IUserRepository
from infrastructure.database.models import UserModel


class SQLAlchemyUserRepository(IUserRepository):
    """Concrete implementation of IUserRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    async def create(self, user_profile: UserProfile) -> UserProfile:
        """Create a new user profile in the database."""
        model = self._entity_to_model(user_profile)
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._model_to_entity(model)
    
    async def get_by_id(self, user_id: str) -> Optional[UserProfile]:
        """Retrieve a user profile by ID."""
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    async def update(self, user_profile: UserProfile) -> UserProfile:
        """Update an existing user profile."""
        stmt = select(UserModel).where(UserModel.id == user_profile.id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        
        if model is None:
            raise ValueError(f"User profile {user_profile.id} not found")
        
        model.phone_number = user_profile.phone_number
        model.role = user_profile.role.value
        await self.session.flush()
        await self.session.refresh(model)
        
        return self._model_to_entity(model)
    
    def _entity_to_model(self, entity: UserProfile) -> UserModel:
        """Convert domain entity to ORM model."""
        return UserModel(
            id=entity.id,
            phone_number=entity.phone_number,
            role=entity.role.value,
            created_at=entity.created_at,
        )
    
    def _model_to_entity(self, model: UserModel) -> UserProfile:
        """Convert ORM model to domain entity."""
        return UserProfile(
            id=model.id,
            phone_number=model.phone_number,
            role=UserRole(model.role),
            created_at=model.created_at,
        )
