"""
Security Utilities.

Share-token generation and caller identity checks.

Share tokens are short public identifiers used in share links
(``/api/v1/snippets/share/<token>``). They are drawn from a fresh UUID4,
which the standard library sources from ``os.urandom``, rendered as
lowercase hex and truncated. At 8 hex characters the space is 16**8
(about 4.3e9) values, so collisions become plausible past roughly 1e5
tokens. Uniqueness is therefore enforced by the unique index on
``snippets.share_token``; callers must retry on conflict.
"""

import uuid

from snipshare.backend.core.exceptions import AuthorizationError
from snipshare.backend.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_SHARE_TOKEN_LENGTH = 8


def generate_share_token(length: int = DEFAULT_SHARE_TOKEN_LENGTH) -> str:
    """
    Generate a URL-safe share token.

    Args:
        length: Number of hex characters to keep (at most 32)

    Returns:
        Lowercase hex string of the requested length
    """
    if not 1 <= length <= 32:
        raise ValueError("Share token length must be between 1 and 32")
    return uuid.uuid4().hex[:length]


def generate_snippet_id() -> str:
    """Generate a primary identifier for a new snippet."""
    return str(uuid.uuid4())


def require_owner(resource_owner_id: str, caller_owner_id: str, action: str) -> None:
    """
    Ensure the caller owns the resource.

    Owner ids are opaque: the comparison is exact, with no case folding or
    trimming.

    Raises:
        AuthorizationError: If the ids differ
    """
    if resource_owner_id != caller_owner_id:
        logger.warning(
            "Ownership check failed",
            extra={"action": action, "caller": caller_owner_id},
        )
        raise AuthorizationError(f"You don't have permission to {action} this snippet")
