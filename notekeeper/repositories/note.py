"""
Note Repository.

Data access layer for notes. Every operation is expressed as SQLAlchemy
statements, so all values reach the database as bound parameters.
"""

from uuid import uuid4

from sqlalchemy import delete, insert, select, update

from notekeeper.core.exceptions import NotFoundError
from notekeeper.core.storage import StorageError
from notekeeper.models.note import Note
from notekeeper.repositories.base import BaseRepository


def new_note_id() -> str:
    """Generate the identifier for a note about to be inserted."""
    return str(uuid4())


class NoteRepository(BaseRepository[Note]):
    """
    Repository for the notes table.

    Update is read-merge-write without a version column: a concurrent
    delete between the read and the write surfaces as NotFoundError, and
    a concurrent update may be overwritten.
    """

    model = Note
    conflict_message = "note with that title already exists"

    async def get_all(self, limit: int = 10, offset: int = 0) -> list[Note]:
        """
        Get one page of notes ordered by ID.

        Args:
            limit: Maximum number of notes to return
            offset: Number of notes to skip

        Returns:
            Notes in ascending ID order, possibly empty
        """
        statement = (
            select(Note)
            .order_by(Note.id.asc())
            .limit(limit)
            .offset(offset)
            .execution_options(populate_existing=True)
        )
        try:
            return await self.gateway.fetch_all(statement)
        except StorageError as exc:
            self._raise_for(exc, operation="get_all")

    async def create(
        self,
        title: str,
        content: str,
        category: str | None = None,
    ) -> Note:
        """
        Insert a new unpublished note and return it as stored.

        Raises:
            ConflictError: If a note with this title already exists
            DatabaseError: On any other storage failure
        """
        note_id = new_note_id()
        statement = insert(Note).values(
            id=note_id,
            title=title,
            content=content,
            category=category or "",
            published=0,
        )
        try:
            await self.gateway.execute(statement)
        except StorageError as exc:
            self._raise_for(exc, operation="create")

        return await self.get_by_id(note_id)

    async def update(
        self,
        id: str,
        *,
        title: str | None = None,
        content: str | None = None,
        category: str | None = None,
        published: bool | None = None,
    ) -> Note:
        """
        Apply a partial update. Arguments left as None keep the stored value.

        Raises:
            NotFoundError: If the note does not exist, or vanished before the write
            ConflictError: If the new title belongs to another note
            DatabaseError: On any other storage failure
        """
        current = await self.get_by_id(id)

        if published is None:
            published = current.published != 0

        statement = (
            update(Note)
            .where(Note.id == id)
            .values(
                title=title if title is not None else current.title,
                content=content if content is not None else current.content,
                category=category if category is not None else current.category,
                published=int(published),
            )
            .execution_options(synchronize_session=False)
        )
        try:
            affected = await self.gateway.execute(statement)
        except StorageError as exc:
            self._raise_for(exc, id=id, operation="update")

        if affected == 0:
            raise NotFoundError(self.not_found_message(id))

        return await self.get_by_id(id)

    async def delete(self, id: str) -> None:
        """
        Delete a note by ID.

        Raises:
            NotFoundError: If no note has this ID
            DatabaseError: On any other storage failure
        """
        statement = (
            delete(Note)
            .where(Note.id == id)
            .execution_options(synchronize_session=False)
        )
        try:
            affected = await self.gateway.execute(statement)
        except StorageError as exc:
            self._raise_for(exc, id=id, operation="delete")

        if affected == 0:
            raise NotFoundError(self.not_found_message(id))
