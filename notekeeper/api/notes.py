"""
Notes API Endpoints.

REST API endpoints for note management.
"""

from fastapi import APIRouter, Query, Response

from notekeeper.core.dependencies import DbSession, NoteId
from notekeeper.schemas.note import (
    MAX_LIMIT,
    MAX_PAGE,
    NoteCreate,
    NoteEnvelope,
    NoteListEnvelope,
    NoteUpdate,
)
from notekeeper.services.note import DEFAULT_LIMIT, DEFAULT_PAGE, NoteService

router = APIRouter()


@router.get(
    "",
    response_model=NoteListEnvelope,
    summary="List notes",
    description="Get one page of notes ordered by ID.",
)
async def list_notes(
    db: DbSession,
    page: int = Query(
        default=DEFAULT_PAGE, ge=1, le=MAX_PAGE, description="1-based page number"
    ),
    limit: int = Query(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT, description="Page size"),
) -> NoteListEnvelope:
    """List notes."""
    service = NoteService(db)
    notes = await service.list_notes(page=page, limit=limit)
    return NoteListEnvelope.from_records(notes)


@router.post(
    "",
    response_model=NoteEnvelope,
    summary="Create a note",
    description="Create a new note. Titles must be unique.",
)
async def create_note(data: NoteCreate, db: DbSession) -> NoteEnvelope:
    """Create a new note."""
    service = NoteService(db)
    note = await service.create_note(data)
    return NoteEnvelope.from_record(note)


@router.get(
    "/{note_id}",
    response_model=NoteEnvelope,
    summary="Get a note",
    description="Get a single note by ID.",
)
async def get_note(note_id: NoteId, db: DbSession) -> NoteEnvelope:
    """Get a note by ID."""
    service = NoteService(db)
    note = await service.get_note(note_id)
    return NoteEnvelope.from_record(note)


@router.patch(
    "/{note_id}",
    response_model=NoteEnvelope,
    summary="Update a note",
    description="Update an existing note. Only provided fields are changed.",
)
async def update_note(note_id: NoteId, data: NoteUpdate, db: DbSession) -> NoteEnvelope:
    """Update a note."""
    service = NoteService(db)
    note = await service.update_note(note_id, data)
    return NoteEnvelope.from_record(note)


@router.delete(
    "/{note_id}",
    status_code=204,
    response_class=Response,
    summary="Delete a note",
    description="Permanently delete a note.",
)
async def delete_note(note_id: NoteId, db: DbSession) -> Response:
    """Delete a note."""
    service = NoteService(db)
    await service.delete_note(note_id)
    return Response(status_code=204)
