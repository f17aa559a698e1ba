"""
FastAPI Dependencies.

Shared dependencies for request handling.
"""

import uuid
from typing import Annotated

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from snipshare.backend.core.database import get_db_session
from snipshare.backend.core.exceptions import AuthenticationError

# Type alias for database session dependency
DbSession = Annotated[AsyncSession, Depends(get_db_session)]


async def get_request_id(x_request_id: str | None = Header(None)) -> str:
    """
    Extract or generate request ID from headers.

    Used for request tracing and correlation.
    """
    return x_request_id or str(uuid.uuid4())


RequestId = Annotated[str, Depends(get_request_id)]


async def get_owner_id(x_user_id: str | None = Header(None)) -> str:
    """
    Get the caller's owner identifier.

    Identity is resolved upstream and forwarded in the X-User-Id header.
    The value is opaque and passed through untouched.

    Raises:
        AuthenticationError: If the header is missing or blank
    """
    if x_user_id is None or not x_user_id.strip():
        raise AuthenticationError("X-User-Id header is required")
    return x_user_id


OwnerId = Annotated[str, Depends(get_owner_id)]
