"""
Base Service.

Base class for services. Services own the business rules and call
repositories; they never build SQL themselves.

Usage:
    from notekeeper.services.base import BaseService

    class UserService(BaseService):
        def __init__(self, session: AsyncSession) -> None:
            super().__init__(session)
            self.repo = UserRepository(self.gateway)
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from notekeeper.core.exceptions import ValidationError
from notekeeper.core.logging import get_logger
from notekeeper.core.storage import StorageGateway


class BaseService:
    """
    Base class for all services.

    Provides:
    - A storage gateway bound to the request's session
    - Logging context
    - Common validation patterns
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize the service with a database session.

        Args:
            session: SQLAlchemy async session for this request
        """
        self._session = session
        self._gateway = StorageGateway(session)
        self._logger = get_logger(self.__class__.__module__)

    @property
    def session(self) -> AsyncSession:
        """Get the database session."""
        return self._session

    @property
    def gateway(self) -> StorageGateway:
        """Get the storage gateway."""
        return self._gateway

    def _validate_required(
        self,
        fields: dict[str, Any],
        field_names: list[str],
    ) -> None:
        """
        Validate that required fields are present and not blank.

        Raises:
            ValidationError: If any required field is missing or empty
        """
        missing = []
        for name in field_names:
            value = fields.get(name)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(name)

        if missing:
            raise ValidationError(
                f"Required fields missing: {', '.join(missing)}",
                details={"missing_fields": missing},
            )

    def _validate_not_blank(self, fields: dict[str, Any]) -> None:
        """
        Validate that every supplied string field has visible content.

        None values are skipped; they mean "not supplied".

        Raises:
            ValidationError: If a supplied field is blank
        """
        blank = [
            name for name, value in fields.items()
            if isinstance(value, str) and not value.strip()
        ]
        if blank:
            raise ValidationError(
                f"Fields must not be blank: {', '.join(blank)}",
                details={"blank_fields": blank},
            )

    def _log_operation(self, operation: str, **context: Any) -> None:
        """Log a service operation with context."""
        self._logger.info(
            operation,
            extra={"service": self.__class__.__name__, **context},
        )

    def _log_debug(self, message: str, **context: Any) -> None:
        """Log debug information."""
        self._logger.debug(
            message,
            extra={"service": self.__class__.__name__, **context},
        )
