"""
Snippet Service.

Business logic layer for snippets. Owns every rule about the snippet
lifecycle: field validation, id and timestamp assignment, share-token
allocation, and the owner check that gates updates and deletes.

Reads by id and by share token are unauthenticated and ignore
``is_public``: anyone holding the id or the token may read the snippet.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from snipshare.backend.core.config import get_app_config
from snipshare.backend.core.config_schema import SnippetsSchema
from snipshare.backend.core.exceptions import (
    ConflictError,
    NotFoundError,
    TokenExhaustedError,
)
from snipshare.backend.core.security import (
    generate_share_token,
    generate_snippet_id,
    require_owner,
)
from snipshare.backend.core.utils import utc_now
from snipshare.backend.models.snippet import LANGUAGE_MAX_LENGTH, TITLE_MAX_LENGTH, Snippet
from snipshare.backend.repositories.snippet import SnippetRepository
from snipshare.backend.schemas.snippet import SnippetCreate, SnippetUpdate
from snipshare.backend.services.base import BaseService


class SnippetService(BaseService):
    """
    Service for snippet business logic.

    Stateless between requests; all state lives in the repository.
    """

    def __init__(
        self,
        session: AsyncSession,
        config: SnippetsSchema | None = None,
    ) -> None:
        super().__init__(session)
        self.repo = SnippetRepository(session)
        self.config = config or get_app_config().snippets

    async def create_snippet(self, data: SnippetCreate, owner_id: str) -> Snippet:
        """
        Create a new snippet owned by the caller.

        A fresh share token is drawn for every attempt. When the store
        rejects a token as a duplicate the insert is retried, up to
        ``share_token.max_attempts`` attempts in total.

        Args:
            data: Snippet fields
            owner_id: Caller's owner identifier

        Returns:
            Persisted snippet

        Raises:
            ValidationError: If title, language or owner are invalid
            TokenExhaustedError: If every attempt collided
        """
        self._validate_required({"owner_id": owner_id}, ["owner_id"])
        self._validate_fields(data)

        token_config = self.config.share_token
        snippet_id = generate_snippet_id()
        now = utc_now()

        self._log_operation("Creating snippet", owner_id=owner_id, language=data.language)

        for attempt in range(1, token_config.max_attempts + 1):
            snippet = Snippet(
                id=snippet_id,
                title=data.title,
                content=data.content,
                language=data.language,
                owner_id=owner_id,
                is_public=data.is_public,
                share_token=generate_share_token(token_config.length),
                created_at=now,
                updated_at=now,
            )
            try:
                saved = await self.repo.save(snippet)
            except ConflictError:
                self._logger.warning(
                    "Share token collision",
                    extra={"attempt": attempt, "max_attempts": token_config.max_attempts},
                )
                continue

            self._log_operation("Snippet created", snippet_id=saved.id, attempt=attempt)
            return saved

        self._logger.error(
            "Share token attempts exhausted",
            extra={"owner_id": owner_id, "max_attempts": token_config.max_attempts},
        )
        raise TokenExhaustedError(
            f"Could not allocate a unique share token after {token_config.max_attempts} attempts"
        )

    async def get_snippet(self, snippet_id: str) -> Snippet:
        """
        Get a snippet by ID. No ownership check.

        Raises:
            NotFoundError: If snippet not found
        """
        snippet = await self.repo.find_by_id(snippet_id)
        if snippet is None:
            raise NotFoundError("Snippet not found")
        return snippet

    async def get_snippet_by_share_token(self, token: str) -> Snippet:
        """
        Get a snippet by its share token, regardless of visibility.

        Raises:
            NotFoundError: If no snippet holds exactly this token
        """
        self._log_debug("Resolving share token")
        snippet = await self.repo.find_by_share_token(token)
        if snippet is None:
            raise NotFoundError("Snippet not found")
        return snippet

    async def list_snippets_by_owner(
        self,
        owner_id: str,
        is_public: bool | None = None,
    ) -> list[Snippet]:
        """
        List an owner's snippets, oldest first.

        Args:
            owner_id: Owner identifier
            is_public: Optional visibility filter

        Returns:
            Possibly empty list of snippets
        """
        self._log_debug("Listing snippets", owner_id=owner_id, is_public=is_public)
        return await self.repo.find_by_owner_id(owner_id, is_public=is_public)

    async def count_snippets_by_owner(self, owner_id: str) -> int:
        """Count an owner's snippets."""
        return await self.repo.count_by_owner_id(owner_id)

    async def update_snippet(
        self,
        snippet_id: str,
        data: SnippetUpdate,
        owner_id: str,
    ) -> Snippet:
        """
        Replace the editable fields of a snippet owned by the caller.

        id, owner_id, share_token and created_at are never touched;
        updated_at is refreshed.

        Raises:
            NotFoundError: If snippet not found
            AuthorizationError: If the caller is not the owner
            ValidationError: If the new fields are invalid
        """
        snippet = await self.get_snippet(snippet_id)
        require_owner(snippet.owner_id, owner_id, "update")
        self._validate_fields(data)

        self._log_operation("Updating snippet", snippet_id=snippet_id)

        snippet.title = data.title
        snippet.content = data.content
        snippet.language = data.language
        snippet.is_public = data.is_public
        snippet.updated_at = utc_now()

        return await self.repo.save(snippet)

    async def delete_snippet(self, snippet_id: str, owner_id: str) -> None:
        """
        Permanently delete a snippet owned by the caller.

        Raises:
            NotFoundError: If snippet not found
            AuthorizationError: If the caller is not the owner
        """
        snippet = await self.get_snippet(snippet_id)
        require_owner(snippet.owner_id, owner_id, "delete")

        self._log_operation("Deleting snippet", snippet_id=snippet_id)
        await self.repo.delete(snippet)

    def _validate_fields(self, data: SnippetCreate) -> None:
        # Title may not be blank; its raw length is what is stored.
        self._validate_required(
            {"title": data.title, "language": data.language},
            ["title", "language"],
        )
        self._validate_string_length(
            data.title, "title", max_length=TITLE_MAX_LENGTH,
        )
        self._validate_string_length(
            data.language, "language", max_length=LANGUAGE_MAX_LENGTH,
        )
