"""
Base Repository.

Base class for repositories: holds the storage gateway and turns
classified storage failures into application exceptions.
"""

from typing import Generic, NoReturn, TypeVar

from sqlalchemy import select

from notekeeper.core.exceptions import ConflictError, DatabaseError, NotFoundError
from notekeeper.core.logging import get_logger
from notekeeper.core.storage import StorageError, StorageErrorKind, StorageGateway
from notekeeper.models.base import Base

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository with shared lookups and error translation.

    Subclasses set the model class and the messages used for
    not-found and conflict outcomes:

        class UserRepository(BaseRepository[User]):
            model = User
    """

    model: type[ModelType]
    conflict_message: str = "Resource already exists"

    def __init__(self, gateway: StorageGateway) -> None:
        self.gateway = gateway

    def not_found_message(self, id: str) -> str:
        return f"{self.model.__name__} with ID: {id} not found"

    async def get_by_id(self, id: str) -> ModelType:
        """
        Get a single record by ID, always reloading it from storage.

        Raises:
            NotFoundError: If no record has this ID
            DatabaseError: On any other storage failure
        """
        statement = (
            select(self.model)
            .where(self.model.id == id)
            .execution_options(populate_existing=True)
        )
        try:
            return await self.gateway.fetch_one(statement)
        except StorageError as exc:
            self._raise_for(exc, id=id, operation="get_by_id")

    def _raise_for(
        self,
        exc: StorageError,
        *,
        operation: str,
        id: str | None = None,
    ) -> NoReturn:
        """Translate a StorageError into the matching application exception."""
        if exc.kind is StorageErrorKind.NOT_FOUND:
            raise NotFoundError(self.not_found_message(id or "")) from exc

        if exc.kind is StorageErrorKind.UNIQUE_VIOLATION:
            logger.warning(
                "Uniqueness violation",
                extra={"operation": operation, "model": self.model.__name__},
            )
            raise ConflictError(self.conflict_message) from exc

        logger.error(
            "Database error",
            extra={
                "operation": operation,
                "model": self.model.__name__,
                "kind": exc.kind.value,
                "error": exc.detail,
            },
        )
        raise DatabaseError(f"Database error: {exc.detail}") from exc
