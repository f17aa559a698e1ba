"""
API Version 1 Router.

Aggregates all v1 endpoint routers.
"""

from fastapi import APIRouter

from snipshare.backend.api.v1.endpoints import snippets

router = APIRouter()

router.include_router(snippets.router, prefix="/snippets", tags=["snippets"])
