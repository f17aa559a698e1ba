"""
Snippet Repository.

Data access layer for snippets. Exposes exactly the lookups the snippet
service needs: by id, by share token, and by owner.
"""

from typing import Protocol

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from snipshare.backend.models.snippet import Snippet
from snipshare.backend.repositories.base import BaseRepository


class SnippetStore(Protocol):
    """Storage contract the snippet service depends on."""

    async def save(self, snippet: Snippet) -> Snippet: ...

    async def find_by_id(self, id: str) -> Snippet | None: ...

    async def find_by_share_token(self, token: str) -> Snippet | None: ...

    async def find_by_owner_id(
        self,
        owner_id: str,
        is_public: bool | None = None,
    ) -> list[Snippet]: ...

    async def count_by_owner_id(self, owner_id: str) -> int: ...

    async def delete(self, snippet: Snippet) -> None: ...


class SnippetRepository(BaseRepository[Snippet]):
    """
    SQLAlchemy implementation of SnippetStore.

    ``save`` raises ConflictError when the unique index on share_token
    rejects an insert.
    """

    model = Snippet

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def find_by_share_token(self, token: str) -> Snippet | None:
        """
        Get a snippet by its share token.

        Exact, case-sensitive match. Visibility is not consulted.
        """
        result = await self.session.execute(
            select(Snippet).where(Snippet.share_token == token)
        )
        return result.scalar_one_or_none()

    async def find_by_owner_id(
        self,
        owner_id: str,
        is_public: bool | None = None,
    ) -> list[Snippet]:
        """
        Get all snippets of an owner, oldest first.

        Args:
            owner_id: Owner identifier (exact match)
            is_public: Optional visibility filter

        Returns:
            Snippets ordered by created_at, then id
        """
        query = select(Snippet).where(Snippet.owner_id == owner_id)
        if is_public is not None:
            query = query.where(Snippet.is_public == is_public)
        result = await self.session.execute(
            query.order_by(Snippet.created_at.asc(), Snippet.id.asc())
        )
        return list(result.scalars().all())

    async def count_by_owner_id(self, owner_id: str) -> int:
        """Get the number of snippets an owner has."""
        result = await self.session.execute(
            select(func.count())
            .select_from(Snippet)
            .where(Snippet.owner_id == owner_id)
        )
        return result.scalar_one()
