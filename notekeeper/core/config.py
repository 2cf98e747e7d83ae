"""
Configuration for notekeeper.

Everything non-secret lives in YAML under config/settings/ and is checked
against the schemas in config_schema when first loaded:

    application.yaml   - service name/version, bind address, CORS origins
    database.yaml      - connection target, pool sizing, table bootstrap
    logging.yaml       - level, renderer, console and JSONL file handlers

The database password is the only secret. It is read from config/.env
(DB_PASSWORD) or the process environment, and joined with database.yaml
by get_database_url().

Paths are resolved from the directory holding the .project_root marker,
so the service and run.py work from any subdirectory of the checkout.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from notekeeper.core.config_schema import (
    ApplicationSchema,
    DatabaseSchema,
    LoggingSchema,
)

PROJECT_MARKER = ".project_root"
SETTINGS_DIR = Path("config") / "settings"
ENV_FILE = Path("config") / ".env"


def find_project_root() -> Path:
    """Walk up from the working directory to the one holding .project_root."""
    current = Path.cwd()
    for candidate in (current, *current.parents):
        if (candidate / PROJECT_MARKER).exists():
            return candidate
    raise RuntimeError(
        f"Project root not found: no {PROJECT_MARKER} in {current} or its parents."
    )


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Read one settings file as a dict. An empty file yields {}."""
    config_path = find_project_root() / SETTINGS_DIR / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


class Settings(BaseSettings):
    """Secrets for notekeeper. Environment variables override config/.env."""

    db_password: str

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def _load_validated(schema_cls: type[BaseModel], filename: str) -> Any:
    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration in {filename}:\n{e}") from e


class AppConfig:
    """
    Validated view over the three settings files.

    All files are read in the constructor, so a bad file fails fast at
    startup (or on the first get_app_config() call) rather than on the
    first request that touches it.
    """

    def __init__(self) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml")
        self._database = _load_validated(DatabaseSchema, "database.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")

    @property
    def application(self) -> ApplicationSchema:
        return self._application

    @property
    def database(self) -> DatabaseSchema:
        return self._database

    @property
    def logging(self) -> LoggingSchema:
        return self._logging


@lru_cache
def get_settings() -> Settings:
    """Secrets, loaded once per process."""
    return Settings(_env_file=str(find_project_root() / ENV_FILE))


@lru_cache
def get_app_config() -> AppConfig:
    """YAML settings, loaded once per process."""
    return AppConfig()


def get_database_url() -> str:
    """
    Build the SQLAlchemy URL for the notes database.

    The driver string comes straight from database.yaml
    (``postgresql+asyncpg`` by default).
    """
    db = get_app_config().database
    password = get_settings().db_password
    return f"{db.driver}://{db.user}:{password}@{db.host}:{db.port}/{db.name}"
