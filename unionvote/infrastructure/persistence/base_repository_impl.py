"""Base repository implementation for infrastructure layer."""

import logging

from typing import Any, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from unionvote.domain.entities.base import BaseEntity
from unionvote.domain.repositories.base import BaseRepository
from unionvote.infrastructure.exceptions import DatabaseError


logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseEntity)


class BaseRepositoryImpl(BaseRepository[T]):
    """Base repository implementation using an AsyncSession.

    Provides the generic read/create/delete operations shared by the
    concrete repositories. Every database error is wrapped into a
    DatabaseError carrying the failing operation's context.

    Type Parameters:
        T: Domain entity type that extends BaseEntity

    Note:
        Subclasses must implement _to_entity() and _to_model().
        一覧の並び順を変える場合は_default_orderをオーバーライドすること。
    """

    def __init__(
        self,
        session: AsyncSession,
        entity_class: type[T],
        model_class: type[Any],
    ):
        self.session = session
        self.entity_class = entity_class
        self.model_class = model_class

    def _default_order(self) -> list[Any]:
        """get_allの並び順."""
        return [self.model_class.id]

    async def get_by_id(self, entity_id: str) -> T | None:
        """Get entity by ID.

        populate_existingで毎回DBの値を読み直すため、同じセッション内で
        再読み込みしても古い状態が返らない。
        """
        try:
            query = (
                select(self.model_class)
                .where(self.model_class.id == entity_id)
                .execution_options(populate_existing=True)
            )
            result = await self.session.execute(query)
            model = result.scalars().first()
            return self._to_entity(model) if model else None
        except SQLAlchemyError as e:
            logger.error(f"Database error getting {self.model_class.__name__}: {e}")
            raise DatabaseError(
                f"Failed to get {self.entity_class.__name__} by ID",
                {"id": entity_id, "error": str(e)},
            ) from e

    async def get_all(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[T]:
        """Get all entities with optional pagination."""
        try:
            query = select(self.model_class).order_by(*self._default_order())
            if offset:
                query = query.offset(offset)
            if limit:
                query = query.limit(limit)

            result = await self.session.execute(query)
            return [self._to_entity(model) for model in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error(f"Database error listing {self.model_class.__name__}: {e}")
            raise DatabaseError(
                f"Failed to list {self.entity_class.__name__}", {"error": str(e)}
            ) from e

    async def create(self, entity: T) -> T:
        """Create a new entity."""
        try:
            model = self._to_model(entity)
            self.session.add(model)
            await self.session.flush()
            await self.session.commit()
            return self._to_entity(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error creating {self.model_class.__name__}: {e}")
            await self.session.rollback()
            raise DatabaseError(
                f"Failed to create {self.entity_class.__name__}",
                {"entity": str(entity), "error": str(e)},
            ) from e

    async def delete(self, entity_id: str) -> bool:
        """Delete an entity by ID."""
        try:
            result = await self.session.execute(
                delete(self.model_class).where(self.model_class.id == entity_id)
            )
            await self.session.commit()
            return result.rowcount > 0  # type: ignore[attr-defined]
        except SQLAlchemyError as e:
            logger.error(f"Database error deleting {self.model_class.__name__}: {e}")
            await self.session.rollback()
            raise DatabaseError(
                f"Failed to delete {self.entity_class.__name__}",
                {"id": entity_id, "error": str(e)},
            ) from e

    async def count(self) -> int:
        """Count total number of entities."""
        try:
            query = select(func.count()).select_from(self.model_class)
            result = await self.session.execute(query)
            count = result.scalar()
            return count if count is not None else 0
        except SQLAlchemyError as e:
            logger.error(f"Database error counting {self.model_class.__name__}: {e}")
            raise DatabaseError(
                f"Failed to count {self.entity_class.__name__}", {"error": str(e)}
            ) from e

    def _to_entity(self, model: Any) -> T:
        """Convert database model to domain entity."""
        raise NotImplementedError("Subclass must implement _to_entity")

    def _to_model(self, entity: T) -> Any:
        """Convert domain entity to database model."""
        raise NotImplementedError("Subclass must implement _to_model")
