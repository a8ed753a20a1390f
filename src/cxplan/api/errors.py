"""IDTA-compliant error bodies for cxplan.

The PlannedProduction endpoint answers rejections with empty bodies. Failures
outside that contract (unhandled exceptions) use the Result/Message structure
from IDTA-01002 Part 2.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from enum import Enum

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class MessageType(str, Enum):
    """Type of message in error response."""

    ERROR = "Error"
    WARNING = "Warning"
    INFO = "Info"
    EXCEPTION = "Exception"


class Message(BaseModel):
    """IDTA-compliant error message."""

    model_config = {"extra": "forbid", "populate_by_name": True}

    code: str
    message_type: MessageType = Field(alias="messageType")
    text: str
    timestamp: str | None = None


class Result(BaseModel):
    """IDTA-compliant result wrapper for errors."""

    model_config = {"extra": "forbid"}

    messages: list[Message]


def error_result(code: str, text: str, message_type: MessageType = MessageType.ERROR) -> Result:
    """Build a single-message Result stamped with the current time."""
    return Result(
        messages=[
            Message(
                code=code,
                messageType=message_type,
                text=text,
                timestamp=datetime.now(UTC).isoformat(),
            )
        ]
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Exception handler for unexpected errors."""
    logger.error(f"Unhandled error on {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=error_result(
            "InternalServerError",
            "An unexpected error occurred",
            MessageType.EXCEPTION,
        ).model_dump(by_alias=True),
    )
