"""
Snippets API Endpoints.

REST API endpoints for snippet management and share-link resolution.

The caller's owner id arrives in the X-User-Id header (see
core.dependencies.get_owner_id). Reads by id or share token need no
identity.
"""

from fastapi import APIRouter, Query

from snipshare.backend.core.dependencies import DbSession, OwnerId, RequestId
from snipshare.backend.schemas.base import ApiResponse, ResponseMetadata
from snipshare.backend.schemas.snippet import (
    SnippetCountResponse,
    SnippetCreate,
    SnippetResponse,
    SnippetUpdate,
)
from snipshare.backend.services.snippet import SnippetService

router = APIRouter()


def _envelope(data, request_id: str) -> ApiResponse:
    return ApiResponse(data=data, metadata=ResponseMetadata(request_id=request_id))


@router.post(
    "",
    response_model=ApiResponse[SnippetResponse],
    status_code=201,
    summary="Create a snippet",
    description="Create a snippet owned by the caller. A share token is assigned server-side.",
)
async def create_snippet(
    data: SnippetCreate,
    db: DbSession,
    owner_id: OwnerId,
    request_id: RequestId,
) -> ApiResponse[SnippetResponse]:
    """Create a new snippet."""
    service = SnippetService(db)
    snippet = await service.create_snippet(data, owner_id)
    return _envelope(SnippetResponse.model_validate(snippet), request_id)


@router.get(
    "/my",
    response_model=ApiResponse[list[SnippetResponse]],
    summary="List my snippets",
    description="List every snippet owned by the caller, oldest first.",
)
async def list_my_snippets(
    db: DbSession,
    owner_id: OwnerId,
    request_id: RequestId,
    is_public: bool | None = Query(
        default=None,
        description="Only return snippets with this visibility",
    ),
) -> ApiResponse[list[SnippetResponse]]:
    """List the caller's snippets."""
    service = SnippetService(db)
    snippets = await service.list_snippets_by_owner(owner_id, is_public=is_public)
    return _envelope(
        [SnippetResponse.model_validate(snippet) for snippet in snippets],
        request_id,
    )


@router.get(
    "/my/count",
    response_model=ApiResponse[SnippetCountResponse],
    summary="Count my snippets",
)
async def count_my_snippets(
    db: DbSession,
    owner_id: OwnerId,
    request_id: RequestId,
) -> ApiResponse[SnippetCountResponse]:
    """Count the caller's snippets."""
    service = SnippetService(db)
    count = await service.count_snippets_by_owner(owner_id)
    return _envelope(SnippetCountResponse(owner_id=owner_id, count=count), request_id)


@router.get(
    "/share/{token}",
    response_model=ApiResponse[SnippetResponse],
    summary="Open a share link",
    description="Get a snippet by its share token. Visibility is not checked.",
)
async def get_snippet_by_share_token(
    token: str,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[SnippetResponse]:
    """Resolve a share token."""
    service = SnippetService(db)
    snippet = await service.get_snippet_by_share_token(token)
    return _envelope(SnippetResponse.model_validate(snippet), request_id)


@router.get(
    "/{snippet_id}",
    response_model=ApiResponse[SnippetResponse],
    summary="Get a snippet",
    description="Get a single snippet by ID.",
)
async def get_snippet(
    snippet_id: str,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[SnippetResponse]:
    """Get a snippet by ID."""
    service = SnippetService(db)
    snippet = await service.get_snippet(snippet_id)
    return _envelope(SnippetResponse.model_validate(snippet), request_id)


@router.put(
    "/{snippet_id}",
    response_model=ApiResponse[SnippetResponse],
    summary="Update a snippet",
    description="Replace title, content, language and visibility. Owner only.",
)
async def update_snippet(
    snippet_id: str,
    data: SnippetUpdate,
    db: DbSession,
    owner_id: OwnerId,
    request_id: RequestId,
) -> ApiResponse[SnippetResponse]:
    """Update a snippet."""
    service = SnippetService(db)
    snippet = await service.update_snippet(snippet_id, data, owner_id)
    return _envelope(SnippetResponse.model_validate(snippet), request_id)


@router.delete(
    "/{snippet_id}",
    status_code=204,
    summary="Delete a snippet",
    description="Permanently delete a snippet. Owner only.",
)
async def delete_snippet(
    snippet_id: str,
    db: DbSession,
    owner_id: OwnerId,
) -> None:
    """Delete a snippet."""
    service = SnippetService(db)
    await service.delete_snippet(snippet_id, owner_id)
