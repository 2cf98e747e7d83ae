"""
Note Schemas.

Pydantic schemas for note request validation and response shaping.
"""

from pydantic import BaseModel, ConfigDict, Field

from notekeeper.core.utils import format_timestamp
from notekeeper.models.note import Note
from notekeeper.schemas.base import SuccessEnvelope


class NoteCreate(BaseModel):
    """Schema for creating a new note."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Note title, unique across all notes",
        examples=["Shopping list"],
    )
    content: str = Field(
        ...,
        min_length=1,
        description="Note content",
        examples=["Milk, eggs, bread"],
    )
    category: str | None = Field(
        default=None,
        max_length=100,
        description="Optional category, stored as an empty string when omitted",
    )


class NoteUpdate(BaseModel):
    """Schema for a partial update. Omitted fields keep their stored values."""

    title: str | None = Field(
        default=None,
        min_length=1,
        max_length=255,
        description="Note title",
    )
    content: str | None = Field(
        default=None,
        min_length=1,
        description="Note content",
    )
    category: str | None = Field(
        default=None,
        max_length=100,
        description="Note category",
    )
    published: bool | None = Field(
        default=None,
        description="Publication flag",
    )


# (MAX_PAGE - 1) * MAX_LIMIT must fit a signed 64-bit OFFSET.
MAX_PAGE = 1_000_000_000
MAX_LIMIT = 1000


class FilterOptions(BaseModel):
    """Resolved pagination for list requests."""

    page: int = Field(default=1, ge=1, le=MAX_PAGE)
    limit: int = Field(default=10, ge=1, le=MAX_LIMIT)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class NoteResponse(BaseModel):
    """Public representation of a note."""

    id: str = Field(description="Note unique identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    category: str = Field(description="Note category")
    published: bool = Field(description="Whether the note is published")
    created_at: str = Field(description="Creation timestamp (UTC)")
    updated_at: str = Field(description="Last update timestamp (UTC)")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_record(cls, note: Note) -> "NoteResponse":
        """
        Build the public form of a stored note.

        The stored small-integer flag becomes a bool and timestamps are
        rendered in the wire format. Records read back from the database
        always carry timestamps; a record without them was never persisted.

        Raises:
            RuntimeError: If either timestamp is missing
        """
        if note.created_at is None or note.updated_at is None:
            raise RuntimeError(
                f"Note {note.id} has no storage timestamps; it was never read back from the database"
            )

        return cls(
            id=note.id,
            title=note.title,
            content=note.content,
            category=note.category,
            published=note.published != 0,
            created_at=format_timestamp(note.created_at),
            updated_at=format_timestamp(note.updated_at),
        )


class NoteData(BaseModel):
    note: NoteResponse


class NoteEnvelope(SuccessEnvelope):
    """Single note response: {"status": "success", "data": {"note": {...}}}."""

    data: NoteData

    @classmethod
    def from_record(cls, note: Note) -> "NoteEnvelope":
        return cls(data=NoteData(note=NoteResponse.from_record(note)))


class NoteListEnvelope(SuccessEnvelope):
    """List response: {"status": "success", "results": N, "notes": [...]}."""

    results: int
    notes: list[NoteResponse]

    @classmethod
    def from_records(cls, notes: list[Note]) -> "NoteListEnvelope":
        shaped = [NoteResponse.from_record(note) for note in notes]
        return cls(results=len(shaped), notes=shaped)
