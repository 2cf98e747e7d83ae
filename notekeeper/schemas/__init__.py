# Pydantic schemas package
from notekeeper.schemas.base import (
    ErrorEnvelope,
    FieldError,
    MessageEnvelope,
    SuccessEnvelope,
)

__all__ = [
    "ErrorEnvelope",
    "FieldError",
    "MessageEnvelope",
    "SuccessEnvelope",
]
