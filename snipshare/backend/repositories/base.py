"""
Base Repository.

Base class for repositories with primary-key lookups and guarded writes.
"""

from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from snipshare.backend.core.exceptions import ConflictError, DatabaseError
from snipshare.backend.core.logging import get_logger
from snipshare.backend.models.base import Base

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository with common persistence operations.

    Repositories never validate input; they persist what the service hands
    them and translate driver errors into application errors.

    Subclasses should set the model class:

        class SnippetRepository(BaseRepository[Snippet]):
            model = Snippet
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, id: str) -> ModelType | None:
        """Get a single record by ID, returning None if not found."""
        result = await self.session.execute(
            select(self.model).where(self.model.id == str(id))
        )
        return result.scalar_one_or_none()

    async def save(self, instance: ModelType) -> ModelType:
        """
        Insert or overwrite a record by primary key.

        The flush runs inside a SAVEPOINT, so a constraint violation only
        discards this write and leaves the surrounding transaction usable.

        Raises:
            ConflictError: On a unique or integrity constraint violation
            DatabaseError: For other database errors
        """
        try:
            async with self.session.begin_nested():
                self.session.add(instance)
                await self.session.flush()
        except IntegrityError as e:
            logger.warning(
                "Database integrity error",
                extra={"model": self.model.__name__, "error": str(e.orig)},
            )
            raise ConflictError(f"{self.model.__name__} conflicts with an existing record") from e
        except SQLAlchemyError as e:
            logger.error(
                "Database error",
                extra={"model": self.model.__name__, "operation": "save", "error": str(e)},
            )
            raise DatabaseError(f"Failed to save {self.model.__name__}") from e
        return instance

    async def delete(self, instance: ModelType) -> None:
        """
        Delete a record permanently.

        Raises:
            DatabaseError: If the delete fails
        """
        try:
            await self.session.delete(instance)
            await self.session.flush()
        except SQLAlchemyError as e:
            logger.error(
                "Database error",
                extra={"model": self.model.__name__, "operation": "delete", "error": str(e)},
            )
            raise DatabaseError(f"Failed to delete {self.model.__name__}") from e
