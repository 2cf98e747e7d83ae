"""
Note Model.

Database model for notes, the only entity the service manages.
"""

from sqlalchemy import SmallInteger, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from notekeeper.models.base import Base, TimestampMixin


class Note(TimestampMixin, Base):
    """
    Note database model.

    The id is a UUID string assigned by the repository before insert.
    ``published`` is stored as a small integer flag (0 = false).
    """

    __tablename__ = "notes"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
    )
    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
    )
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    category: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        default="",
        server_default="",
    )
    published: Mapped[int] = mapped_column(
        SmallInteger,
        nullable=False,
        default=0,
        server_default="0",
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r})>"
