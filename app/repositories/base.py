"""
Base repository with generic CRUD operations.

All entity-specific repositories inherit from this.
"""
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import BaseModel

# Generic type for SQLAlchemy models
ModelType = TypeVar("ModelType", bound=BaseModel)


def dialect_insert(db: AsyncSession, model: Type[BaseModel]):
    """
    INSERT construct that supports ON CONFLICT for the session's backend.

    PostgreSQL in production, SQLite in the test suite.
    """
    if db.get_bind().dialect.name == "sqlite":
        return sqlite.insert(model)
    return postgresql.insert(model)


class BaseRepository(Generic[ModelType]):
    """
    Base repository providing standard CRUD operations.

    Usage:
        class UserRepository(BaseRepository[User]):
            def __init__(self):
                super().__init__(User)
    """

    def __init__(self, model: Type[ModelType]):
        self.model = model
        self.pk = model.__mapper__.primary_key[0]

    async def get_by_id(
        self,
        db: AsyncSession,
        id: int,
    ) -> Optional[ModelType]:
        """Get a single record by primary key."""
        result = await db.execute(
            select(self.model).where(self.pk == id)
        )
        return result.scalar_one_or_none()

    async def get_many(
        self,
        db: AsyncSession,
        *where: Any,
        order_by: Any = None,
    ) -> List[ModelType]:
        """Get records matching all ``where`` clauses."""
        query = select(self.model).where(*where)
        query = query.order_by(order_by if order_by is not None else self.pk)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def create(
        self,
        db: AsyncSession,
        **kwargs: Any,
    ) -> ModelType:
        """Create a new record."""
        instance = self.model(**kwargs)
        db.add(instance)
        await db.flush()
        await db.refresh(instance)
        return instance

    async def update(
        self,
        db: AsyncSession,
        instance: ModelType,
        **kwargs: Any,
    ) -> ModelType:
        """Update an existing record."""
        for key, value in kwargs.items():
            if hasattr(instance, key):
                setattr(instance, key, value)
        await db.flush()
        await db.refresh(instance)
        return instance

    async def delete(
        self,
        db: AsyncSession,
        id: int,
    ) -> bool:
        """Hard delete a record by primary key."""
        result = await db.execute(
            delete(self.model).where(self.pk == id)
        )
        return result.rowcount > 0
