from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from swaproom.database import Base

ModelType = TypeVar("ModelType", bound=Base)
PydanticType = TypeVar("PydanticType", bound=BaseModel)


class BaseRepository(Generic[ModelType, PydanticType]):
    """Generic base repository with common CRUD operations.

    Write methods take ``commit``: pass ``commit=False`` to only flush, leaving
    the caller to commit several writes as one transaction.
    """

    def __init__(self, db: AsyncSession, model_class: Any):
        self.db = db
        self.model_class = model_class

    async def get_by_id(self, id: int) -> Optional[PydanticType]:
        """Get a single record by ID."""
        db_model = await self._get_model(id)
        return self._to_pydantic(db_model) if db_model else None

    async def create(self, db_model: ModelType, commit: bool = True) -> PydanticType:
        """Insert a new record and return it with database-assigned values."""
        self.db.add(db_model)
        await self.db.flush()
        if commit:
            await self.db.commit()
        await self.db.refresh(db_model)
        return self._to_pydantic(db_model)

    async def update_fields(
        self, id: int, commit: bool = True, **fields: Any
    ) -> Optional[PydanticType]:
        """Update columns of an existing record; None when it does not exist."""
        db_model = await self._get_model(id)

        if not db_model:
            return None

        for field, value in fields.items():
            if hasattr(db_model, field):
                setattr(db_model, field, value)

        await self.db.flush()
        if commit:
            await self.db.commit()
        await self.db.refresh(db_model)
        return self._to_pydantic(db_model)

    async def delete(self, id: int, commit: bool = True) -> bool:
        """Delete a record by ID."""
        db_model = await self._get_model(id)

        if not db_model:
            return False

        await self.db.delete(db_model)
        await self.db.flush()
        if commit:
            await self.db.commit()
        return True

    async def _get_model(self, id: int) -> Optional[ModelType]:
        query = select(self.model_class).where(self.model_class.id == id)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    def _to_pydantic(self, db_model: ModelType) -> PydanticType:
        """Convert SQLAlchemy model to Pydantic model.

        This should be overridden in subclasses for specific conversion logic.
        """
        raise NotImplementedError
