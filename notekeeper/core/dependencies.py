"""
FastAPI Dependencies.

Shared dependencies for request handling.
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from notekeeper.core.database import get_db_session

# Type alias for database session dependency
DbSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_note_id(
    note_id: UUID = Path(description="Note identifier (UUID)"),
) -> str:
    """
    Parse the note ID path parameter.

    Anything that is not a UUID fails request validation, so malformed
    IDs never reach the service layer.
    """
    return str(note_id)


NoteId = Annotated[str, Depends(get_note_id)]
