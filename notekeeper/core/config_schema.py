"""
Settings file schemas.

One top-level model per file in config/settings/. Every model forbids
unknown keys, so a typo in a YAML file fails at load time with the file
name and the offending key instead of being silently ignored.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class _StrictBase(BaseModel):
    model_config = ConfigDict(extra="forbid")


# =============================================================================
# application.yaml
# =============================================================================


class ServerSchema(_StrictBase):
    """Address uvicorn binds when started through run.py."""

    host: str
    port: int = Field(ge=1, le=65535)


class CorsSchema(_StrictBase):
    """Allowed browser origins. An empty list disables CORS handling."""

    origins: list[str]


class ApplicationSchema(_StrictBase):
    name: str
    version: str
    description: str
    environment: str
    debug: bool
    server: ServerSchema
    cors: CorsSchema


# =============================================================================
# database.yaml
# =============================================================================


class DatabaseSchema(_StrictBase):
    """
    Notes database connection and pool settings.

    ``driver`` is a SQLAlchemy async dialect string such as
    ``postgresql+asyncpg``. The password is not here; it comes from
    config/.env. ``create_tables`` runs ``create_all`` for the notes
    table at startup.
    """

    driver: str
    host: str
    port: int = Field(ge=1, le=65535)
    name: str
    user: str
    pool_size: int = Field(ge=1)
    max_overflow: int = Field(ge=0)
    pool_timeout: int = Field(ge=0)
    pool_recycle: int
    echo: bool
    create_tables: bool


# =============================================================================
# logging.yaml
# =============================================================================


class ConsoleHandlerSchema(_StrictBase):
    enabled: bool


class FileHandlerSchema(_StrictBase):
    """Rotating JSONL file. ``path`` is relative to the project root."""

    enabled: bool
    path: str
    max_bytes: int = Field(ge=0)
    backup_count: int = Field(ge=0)


class HandlersSchema(_StrictBase):
    console: ConsoleHandlerSchema
    file: FileHandlerSchema


class LoggingSchema(_StrictBase):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    format: Literal["json", "console"]
    handlers: HandlersSchema
