"""
Unit Tests for Note Service.

Tests the NoteService business logic with mocked dependencies.
"""

from unittest.mock import AsyncMock, patch

import pytest

from notekeeper.core.exceptions import ConflictError, NotFoundError, ValidationError
from notekeeper.schemas.note import NoteCreate, NoteUpdate
from notekeeper.services.note import NoteService


@pytest.fixture
def service():
    """Create NoteService with a mocked session."""
    return NoteService(AsyncMock())


class TestNoteServiceList:
    """Tests for listing notes."""

    @pytest.mark.asyncio
    async def test_defaults_to_first_page_of_ten(self, service):
        """Should use limit=10, page=1 when nothing is given."""
        with patch.object(service.repo, "get_all", return_value=[]) as mock_get:
            await service.list_notes()

            mock_get.assert_called_once_with(limit=10, offset=0)

    @pytest.mark.asyncio
    async def test_computes_offset_from_page(self, service):
        """Offset should be (page - 1) * limit."""
        with patch.object(service.repo, "get_all", return_value=[]) as mock_get:
            await service.list_notes(page=3, limit=2)

            mock_get.assert_called_once_with(limit=2, offset=4)

    @pytest.mark.asyncio
    async def test_returns_repository_rows(self, service, make_note):
        """Should return whatever the repository returns."""
        notes = [make_note(), make_note(id="other")]

        with patch.object(service.repo, "get_all", return_value=notes):
            assert await service.list_notes() == notes

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("page", "limit", "field"),
        [(10**20, 2, "page"), (1, 10**20, "limit"), (0, 10, "page")],
    )
    async def test_out_of_range_paging_rejected(self, service, page, limit, field):
        """Out-of-range paging should fail validation before any storage call."""
        with patch.object(service.repo, "get_all") as mock_get:
            with pytest.raises(ValidationError) as exc_info:
                await service.list_notes(page=page, limit=limit)

        assert exc_info.value.details == {"out_of_range": [field]}
        mock_get.assert_not_called()


class TestNoteServiceCreate:
    """Tests for note creation."""

    @pytest.mark.asyncio
    async def test_create_note_success(self, service, make_note):
        """Should pass title, content and category to the repository."""
        note = make_note()

        with patch.object(service.repo, "create", return_value=note) as mock_create:
            data = NoteCreate(title="Groceries", content="Milk, eggs", category="home")
            result = await service.create_note(data)

            mock_create.assert_called_once_with(
                title="Groceries",
                content="Milk, eggs",
                category="home",
            )
            assert result is note

    @pytest.mark.asyncio
    async def test_create_note_without_category(self, service, make_note):
        """Category should be passed as None when omitted."""
        with patch.object(service.repo, "create", return_value=make_note()) as mock_create:
            await service.create_note(NoteCreate(title="Groceries", content="Milk"))

            assert mock_create.call_args.kwargs["category"] is None

    @pytest.mark.asyncio
    async def test_blank_title_rejected_before_storage(self, service):
        """Whitespace-only title should raise ValidationError."""
        with patch.object(service.repo, "create") as mock_create:
            with pytest.raises(ValidationError) as exc_info:
                await service.create_note(NoteCreate(title="   ", content="Milk"))

            assert exc_info.value.details == {"missing_fields": ["title"]}
            mock_create.assert_not_called()

    @pytest.mark.asyncio
    async def test_conflict_propagates(self, service):
        """ConflictError from the repository should not be masked."""
        with patch.object(
            service.repo,
            "create",
            side_effect=ConflictError("note with that title already exists"),
        ):
            with pytest.raises(ConflictError):
                await service.create_note(NoteCreate(title="Groceries", content="Milk"))


class TestNoteServiceGet:
    """Tests for getting notes."""

    @pytest.mark.asyncio
    async def test_get_note_success(self, service, make_note):
        """Should return note when found."""
        note = make_note()

        with patch.object(service.repo, "get_by_id", return_value=note):
            assert await service.get_note(note.id) is note

    @pytest.mark.asyncio
    async def test_get_note_not_found(self, service):
        """Should raise NotFoundError when note doesn't exist."""
        with patch.object(
            service.repo, "get_by_id", side_effect=NotFoundError("Note not found")
        ):
            with pytest.raises(NotFoundError):
                await service.get_note("nonexistent")


class TestNoteServiceUpdate:
    """Tests for updating notes."""

    @pytest.mark.asyncio
    async def test_passes_only_supplied_fields(self, service, make_note):
        """Should forward only the fields present in the request."""
        with patch.object(service.repo, "update", return_value=make_note()) as mock_update:
            await service.update_note("note-123", NoteUpdate(category="work"))

            mock_update.assert_called_once_with("note-123", category="work")

    @pytest.mark.asyncio
    async def test_empty_update_is_allowed(self, service, make_note):
        """An empty body should still go through the repository update."""
        note = make_note()

        with patch.object(service.repo, "update", return_value=note) as mock_update:
            result = await service.update_note("note-123", NoteUpdate())

            mock_update.assert_called_once_with("note-123")
            assert result is note

    @pytest.mark.asyncio
    async def test_published_false_is_forwarded(self, service, make_note):
        """published=False is a real value, not an omission."""
        with patch.object(service.repo, "update", return_value=make_note()) as mock_update:
            await service.update_note("note-123", NoteUpdate(published=False))

            mock_update.assert_called_once_with("note-123", published=False)

    @pytest.mark.asyncio
    async def test_blank_content_rejected(self, service):
        """A supplied whitespace-only content should raise ValidationError."""
        with patch.object(service.repo, "update") as mock_update:
            with pytest.raises(ValidationError):
                await service.update_note("note-123", NoteUpdate(content="  "))

            mock_update.assert_not_called()


class TestNoteServiceDelete:
    """Tests for deleting notes."""

    @pytest.mark.asyncio
    async def test_delete_note_success(self, service):
        """Should delete note via repository."""
        with patch.object(service.repo, "delete", return_value=None) as mock_delete:
            await service.delete_note("note-123")

            mock_delete.assert_called_once_with("note-123")

    @pytest.mark.asyncio
    async def test_delete_note_not_found(self, service):
        """Should propagate NotFoundError."""
        with patch.object(
            service.repo, "delete", side_effect=NotFoundError("Note not found")
        ):
            with pytest.raises(NotFoundError):
                await service.delete_note("nonexistent")
