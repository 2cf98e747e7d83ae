"""
Note Service.

Business logic layer for notes: pagination defaults, required-field
checks and logging around the repository calls.
"""

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from notekeeper.core.exceptions import ValidationError
from notekeeper.models.note import Note
from notekeeper.repositories.note import NoteRepository
from notekeeper.schemas.note import FilterOptions, NoteCreate, NoteUpdate
from notekeeper.services.base import BaseService

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


class NoteService(BaseService):
    """Service for note business logic."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = NoteRepository(self.gateway)

    async def list_notes(
        self,
        page: int | None = None,
        limit: int | None = None,
    ) -> list[Note]:
        """
        List one page of notes.

        Args:
            page: 1-based page number, defaults to 1
            limit: Page size, defaults to 10

        Returns:
            Notes ordered by ID

        Raises:
            ValidationError: If page or limit is out of range
        """
        try:
            options = FilterOptions(
                page=page if page is not None else DEFAULT_PAGE,
                limit=limit if limit is not None else DEFAULT_LIMIT,
            )
        except PydanticValidationError as e:
            fields = sorted({str(err["loc"][0]) for err in e.errors()})
            raise ValidationError(
                f"Invalid pagination: {', '.join(fields)}",
                details={"out_of_range": fields},
            ) from e

        self._log_debug(
            "Listing notes",
            page=options.page,
            limit=options.limit,
        )
        return await self.repo.get_all(limit=options.limit, offset=options.offset)

    async def create_note(self, data: NoteCreate) -> Note:
        """
        Create a new note.

        Raises:
            ValidationError: If title or content is blank
            ConflictError: If the title is already taken
        """
        self._validate_required(data.model_dump(), ["title", "content"])
        self._log_operation("Creating note", title=data.title)

        note = await self.repo.create(
            title=data.title,
            content=data.content,
            category=data.category,
        )

        self._log_debug("Note created", note_id=note.id)
        return note

    async def get_note(self, note_id: str) -> Note:
        """
        Get a note by ID.

        Raises:
            NotFoundError: If note not found
        """
        return await self.repo.get_by_id(note_id)

    async def update_note(self, note_id: str, data: NoteUpdate) -> Note:
        """
        Apply a partial update. An empty update is allowed.

        Raises:
            ValidationError: If a supplied title or content is blank
            NotFoundError: If note not found
            ConflictError: If the new title is already taken
        """
        self._validate_not_blank({"title": data.title, "content": data.content})

        update_data = data.model_dump(exclude_none=True)
        self._log_operation(
            "Updating note",
            note_id=note_id,
            fields=sorted(update_data),
        )

        return await self.repo.update(note_id, **update_data)

    async def delete_note(self, note_id: str) -> None:
        """
        Delete a note.

        Raises:
            NotFoundError: If note not found
        """
        self._log_operation("Deleting note", note_id=note_id)
        await self.repo.delete(note_id)
