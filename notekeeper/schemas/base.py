"""
Base Schemas.

Response envelopes shared by every endpoint.

Success:  {"status": "success", ...payload}
Failure:  {"status": "fail" | "error", "message": "..."}

"fail" marks expected client-facing conditions (not found, conflict,
invalid input); "error" marks unexpected server-side failures.
"""

from typing import Literal

from pydantic import BaseModel

ErrorStatus = Literal["fail", "error"]


class SuccessEnvelope(BaseModel):
    """Base for all success responses; subclasses add the payload fields."""

    status: Literal["success"] = "success"


class MessageEnvelope(SuccessEnvelope):
    """Success response carrying only a message."""

    message: str


class FieldError(BaseModel):
    """One request validation problem."""

    field: str
    message: str
    type: str


class ErrorEnvelope(BaseModel):
    """Standard error response."""

    status: ErrorStatus
    message: str
    errors: list[FieldError] | None = None
