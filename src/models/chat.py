"""
Request and Response models for the Chat API.

These Pydantic models define the contract between client and server.
Every /api/chat response is exactly one of ChatSuccessResponse or
ChatErrorResponse, and every error response carries an ErrorCode.
"""
from datetime import datetime
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorCode(str, Enum):
    """Closed set of error codes returned by the gateway."""

    # Client input errors, detected before the provider is called
    EMPTY_MESSAGE = "EMPTY_MESSAGE"
    INVALID_MODEL = "INVALID_MODEL"

    # Provider failures, derived from the upstream error text
    QUOTA_EXCEEDED = "QUOTA_EXCEEDED"
    API_KEY_INVALID = "API_KEY_INVALID"
    CONTENT_BLOCKED = "CONTENT_BLOCKED"
    TIMEOUT = "TIMEOUT"
    NETWORK_ERROR = "NETWORK_ERROR"
    MODEL_NOT_FOUND = "MODEL_NOT_FOUND"

    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class ChatRequest(BaseModel):
    """
    Request model for the /api/chat endpoint.

    Both fields are optional at the schema level so that a missing or
    blank message is reported as EMPTY_MESSAGE instead of a schema error.

    Attributes:
        message: The user's text, forwarded to the model as-is.
        model: Gemini model identifier; the preferred model when omitted.
            An explicit null is rejected as INVALID_MODEL.
    """
    message: Optional[str] = Field(
        default=None,
        description="The user's message",
        examples=["Explain recursion in two sentences"]
    )
    model: Optional[str] = Field(
        default=None,
        description="Gemini model to use; must be one of the supported models",
        examples=["gemini-2.5-flash"]
    )


class ChatSuccessResponse(BaseModel):
    """Successful /api/chat response carrying the model's reply."""
    success: Literal[True] = True
    reply: str = Field(..., description="The model's reply, untransformed")


class ChatErrorResponse(BaseModel):
    """
    Failed /api/chat response.

    `details` holds the raw upstream error text and is only populated
    in development.
    """
    model_config = ConfigDict(populate_by_name=True)

    success: Literal[False] = False
    error: str = Field(..., description="User-facing error message")
    error_code: ErrorCode = Field(..., alias="errorCode")
    details: Optional[str] = None


class HealthResponse(BaseModel):
    """Response model for the /api/health endpoint."""
    status: str = Field(default="healthy")
    version: str
    timestamp: datetime = Field(default_factory=datetime.utcnow)
