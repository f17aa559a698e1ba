"""
Snippet Model.

Database model for code snippets, the only persisted entity.
"""

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from snipshare.backend.models.base import Base, TimestampMixin, UUIDMixin

TITLE_MAX_LENGTH = 255
LANGUAGE_MAX_LENGTH = 64


class Snippet(UUIDMixin, TimestampMixin, Base):
    """
    Snippet database model.

    A unit of text owned by one identity and readable by anyone holding its
    id or share token. ``share_token`` carries a unique index: the database
    is the final arbiter of token uniqueness.
    """

    __tablename__ = "snippets"

    title: Mapped[str] = mapped_column(
        String(TITLE_MAX_LENGTH),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )
    language: Mapped[str] = mapped_column(
        String(LANGUAGE_MAX_LENGTH),
        nullable=False,
    )
    owner_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
    )
    is_public: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
    )
    share_token: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        unique=True,
    )

    def __repr__(self) -> str:
        return f"<Snippet(id={self.id}, title={self.title!r}, owner_id={self.owner_id!r})>"
