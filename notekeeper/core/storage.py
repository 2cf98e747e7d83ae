"""
Storage Gateway.

Thin layer over an AsyncSession that executes SQLAlchemy statements and
reports failures as a StorageError with an explicit StorageErrorKind.

Classification relies on exception types and driver error codes only.
Socket-level OSErrors raised while connecting count as CONNECTIVITY.
Driver codes checked:
    - SQLSTATE 23505 (PostgreSQL: asyncpg, psycopg)
    - SQLite extended codes SQLITE_CONSTRAINT_UNIQUE / _PRIMARYKEY
    - MySQL errno 1062 (duplicate entry)

Usage:
    gateway = StorageGateway(session)
    rows = await gateway.fetch_all(select(Note).limit(10))
    note = await gateway.fetch_one(select(Note).where(Note.id == note_id))
    affected = await gateway.execute(delete(Note).where(Note.id == note_id))
"""

from enum import Enum
from typing import Any

from sqlalchemy.exc import (
    DBAPIError,
    DisconnectionError,
    IntegrityError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
    TimeoutError as PoolTimeoutError,
)
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from notekeeper.core.logging import get_logger

logger = get_logger(__name__)

UNIQUE_VIOLATION_SQLSTATE = "23505"
SQLITE_UNIQUE_ERRORCODES = frozenset({1555, 2067})
SQLITE_UNIQUE_ERRORNAMES = frozenset({
    "SQLITE_CONSTRAINT_PRIMARYKEY",
    "SQLITE_CONSTRAINT_UNIQUE",
})
MYSQL_DUPLICATE_ENTRY = 1062


class StorageErrorKind(Enum):
    """Classified storage failure."""

    NOT_FOUND = "not_found"
    UNIQUE_VIOLATION = "unique_violation"
    CONNECTIVITY = "connectivity"
    OTHER = "other"


class StorageError(Exception):
    """
    Raised by StorageGateway for every failed statement.

    Attributes:
        kind: Classified failure kind
        detail: Driver-reported message, without SQL text or parameters
    """

    def __init__(self, kind: StorageErrorKind, detail: str) -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(f"{kind.value}: {detail}")


def _is_unique_violation(orig: BaseException | None) -> bool:
    """Check a DBAPI exception for a uniqueness violation by error code."""
    if orig is None:
        return False

    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if isinstance(sqlstate, str):
        return sqlstate == UNIQUE_VIOLATION_SQLSTATE

    sqlite_code = getattr(orig, "sqlite_errorcode", None)
    if isinstance(sqlite_code, int):
        return (
            sqlite_code in SQLITE_UNIQUE_ERRORCODES
            or getattr(orig, "sqlite_errorname", None) in SQLITE_UNIQUE_ERRORNAMES
        )

    args = getattr(orig, "args", ())
    return bool(args) and args[0] == MYSQL_DUPLICATE_ENTRY


def classify_error(exc: SQLAlchemyError) -> StorageErrorKind:
    """Map a SQLAlchemy exception to a StorageErrorKind."""
    if isinstance(exc, IntegrityError):
        if _is_unique_violation(exc.orig):
            return StorageErrorKind.UNIQUE_VIOLATION
        return StorageErrorKind.OTHER

    if isinstance(exc, DBAPIError) and exc.connection_invalidated:
        return StorageErrorKind.CONNECTIVITY

    if isinstance(
        exc,
        (OperationalError, InterfaceError, DisconnectionError, PoolTimeoutError),
    ):
        return StorageErrorKind.CONNECTIVITY

    return StorageErrorKind.OTHER


def describe_error(exc: SQLAlchemyError) -> str:
    """
    Driver-level description of a failure.

    DBAPIError's own str() embeds the SQL and bound parameters,
    so only the wrapped driver exception is rendered.
    """
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return type(exc).__name__


class StorageGateway:
    """
    Executes statements against the store on behalf of repositories.

    The session is injected per request; the gateway never opens,
    commits, or closes it.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def fetch_all(self, statement: Executable) -> list[Any]:
        """Execute a SELECT and return every entity row."""
        result = await self._execute(statement)
        return list(result.scalars().all())

    async def fetch_one(self, statement: Executable) -> Any:
        """
        Execute a SELECT expected to match exactly one row.

        Raises:
            StorageError: NOT_FOUND when no row matches
        """
        result = await self._execute(statement)
        row = result.scalars().first()
        if row is None:
            raise StorageError(StorageErrorKind.NOT_FOUND, "no matching row")
        return row

    async def execute(self, statement: Executable) -> int:
        """Execute an INSERT, UPDATE or DELETE and return the affected row count."""
        result = await self._execute(statement)
        return result.rowcount

    async def _execute(self, statement: Executable) -> Any:
        try:
            return await self.session.execute(statement)
        except SQLAlchemyError as exc:
            kind = classify_error(exc)
            detail = describe_error(exc)
            logger.debug(
                "Storage statement failed",
                extra={"kind": kind.value, "error": detail},
            )
            raise StorageError(kind, detail) from exc
        except OSError as exc:
            # Refused or dropped sockets at connect time arrive unwrapped
            logger.debug(
                "Storage connection failed",
                extra={"kind": StorageErrorKind.CONNECTIVITY.value, "error": str(exc)},
            )
            raise StorageError(StorageErrorKind.CONNECTIVITY, str(exc)) from exc
