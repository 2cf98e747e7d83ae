"""
Health Check Endpoint.

Liveness only: answers without touching the database.
"""

from fastapi import APIRouter

from notekeeper.schemas.base import MessageEnvelope

router = APIRouter()

HEALTH_MESSAGE = "OK"


@router.get("/health", response_model=MessageEnvelope)
async def health_check() -> MessageEnvelope:
    """Return 200 while the process is running."""
    return MessageEnvelope(message=HEALTH_MESSAGE)
