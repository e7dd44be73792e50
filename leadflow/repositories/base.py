"""
Base repository with generic CRUD operations.
"""
import uuid
from typing import TypeVar, Generic, Type, Optional, List, Dict, Any
from datetime import datetime, timezone

from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy import func

ModelType = TypeVar("ModelType", bound=SQLModel)


class BaseRepository(Generic[ModelType]):
    """
    Generic repository with CRUD operations.
    Inherit and specify the model class.

    Mutating methods commit by default. Pass ``commit=False`` to only flush,
    leaving the caller to commit several writes as one transaction.
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        self.model = model
        self.session = session

    async def _save(self, db_obj: ModelType, commit: bool) -> ModelType:
        self.session.add(db_obj)
        if commit:
            await self.session.commit()
            await self.session.refresh(db_obj)
        else:
            await self.session.flush()
        return db_obj

    async def create(self, obj_in: dict, commit: bool = True) -> ModelType:
        """Create a new record."""
        db_obj = self.model(**obj_in)
        return await self._save(db_obj, commit)

    async def get(self, id: uuid.UUID) -> Optional[ModelType]:
        """Get a record by ID."""
        return await self.session.get(self.model, id)

    async def get_by_field(self, field: str, value: Any) -> Optional[ModelType]:
        """Get a record by a specific field."""
        query = select(self.model).where(getattr(self.model, field) == value)
        result = await self.session.exec(query)
        return result.first()

    def _scoped(self, query, owner_id: Optional[uuid.UUID]):
        # None means all-access; otherwise only records assigned to owner_id
        if owner_id is not None and hasattr(self.model, "assigned_to"):
            query = query.where(self.model.assigned_to == owner_id)
        return query

    async def list(
        self,
        owner_id: Optional[uuid.UUID] = None,
        order_by: str = "created_at",
        order_desc: bool = False
    ) -> List[ModelType]:
        """List records, optionally only those assigned to owner_id."""
        query = self._scoped(select(self.model), owner_id)

        if hasattr(self.model, order_by):
            order_column = getattr(self.model, order_by)
            query = query.order_by(order_column.desc() if order_desc else order_column)

        result = await self.session.exec(query)
        return list(result.all())

    async def update(self, id: uuid.UUID, obj_in: dict, commit: bool = True) -> Optional[ModelType]:
        """Merge non-null fields into a record."""
        db_obj = await self.get(id)
        if not db_obj:
            return None

        for field, value in obj_in.items():
            if hasattr(db_obj, field) and value is not None:
                setattr(db_obj, field, value)

        if hasattr(db_obj, 'updated_at'):
            db_obj.updated_at = datetime.now(timezone.utc)

        return await self._save(db_obj, commit)

    async def delete(self, id: uuid.UUID) -> bool:
        """Delete a record."""
        db_obj = await self.get(id)
        if not db_obj:
            return False

        await self.session.delete(db_obj)
        await self.session.commit()
        return True

    async def count(self, owner_id: Optional[uuid.UUID] = None) -> int:
        """Count records."""
        query = self._scoped(select(func.count()).select_from(self.model), owner_id)
        result = await self.session.exec(query)
        return result.one()

    async def count_by(self, field: str, owner_id: Optional[uuid.UUID] = None) -> Dict[str, int]:
        """Count records grouped by a column; only values that occur are returned."""
        column = getattr(self.model, field)
        query = self._scoped(select(column, func.count()).group_by(column), owner_id)
        result = await self.session.exec(query)
        return {value: count for value, count in result.all()}
