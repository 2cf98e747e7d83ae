# SQLAlchemy models package
from notekeeper.models.base import Base
from notekeeper.models.note import Note

__all__ = ["Base", "Note"]
