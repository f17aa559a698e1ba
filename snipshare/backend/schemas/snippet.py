"""
Snippet Schemas.

Pydantic schemas for snippet API request/response validation.

Request schemas only reject structurally bad payloads; the snippet
service re-validates every rule so it holds for non-HTTP callers too.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from snipshare.backend.models.snippet import LANGUAGE_MAX_LENGTH, TITLE_MAX_LENGTH


class SnippetCreate(BaseModel):
    """Schema for creating a new snippet."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=TITLE_MAX_LENGTH,
        description="Snippet title",
        examples=["hello.py"],
    )
    content: str = Field(
        default="",
        description="Snippet body, any length, may be empty",
        examples=["print(1)"],
    )
    language: str = Field(
        ...,
        min_length=1,
        max_length=LANGUAGE_MAX_LENGTH,
        description="Language token",
        examples=["python"],
    )
    is_public: bool = Field(
        default=True,
        description="Advisory visibility flag; does not gate share links",
    )


class SnippetUpdate(SnippetCreate):
    """
    Schema for updating a snippet.

    Updates are full replacements of the editable fields, validated
    exactly like creation.
    """


class SnippetResponse(BaseModel):
    """Schema for a snippet in API responses. Same shape for every reader."""

    id: str = Field(description="Snippet unique identifier")
    title: str = Field(description="Snippet title")
    content: str = Field(description="Snippet body")
    language: str = Field(description="Language token")
    owner_id: str = Field(description="Owner identifier")
    is_public: bool = Field(description="Advisory visibility flag")
    share_token: str = Field(description="Public share token")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)


class SnippetCountResponse(BaseModel):
    """Number of snippets owned by the caller."""

    owner_id: str
    count: int
