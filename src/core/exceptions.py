"""
Custom Exceptions - Application-specific error classes.

This module defines a hierarchy of exceptions for clean error handling:
- Each exception has a status code and error code from the taxonomy
- Used by the API layer to build the uniform error envelope
- Raw upstream details are only exposed in development
"""
from typing import Optional

from src.models.chat import ChatErrorResponse, ErrorCode


class ChatGatewayException(Exception):
    """
    Base exception for all gateway errors.

    Subclass this for specific error types.
    """
    status_code: int = 500
    error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_response(self, include_details: bool = False) -> ChatErrorResponse:
        """Build the error envelope for this exception."""
        return ChatErrorResponse(
            error=self.message,
            error_code=self.error_code,
            details=self.details if include_details else None,
        )

    def to_dict(self, include_details: bool = False) -> dict:
        """Convert to error response dict, omitting absent details."""
        return self.to_response(include_details).model_dump(
            mode="json", by_alias=True, exclude_none=True
        )


class EmptyMessageError(ChatGatewayException):
    """Raised when the message is missing or only whitespace."""
    status_code = 400
    error_code = ErrorCode.EMPTY_MESSAGE

    def __init__(self, message: str = "Message cannot be empty"):
        super().__init__(message)


class InvalidModelError(ChatGatewayException):
    """Raised when the requested model is not in the catalog."""
    status_code = 400
    error_code = ErrorCode.INVALID_MODEL

    def __init__(self, model: Optional[str] = None):
        super().__init__("Model is not available", details=f"model={model}")
        self.model = model


class ProviderRequestError(ChatGatewayException):
    """
    Raised when the Gemini call fails.

    Status and error code come from the classification of the
    upstream error; the raw upstream text is kept as details.
    """

    def __init__(
        self,
        error_code: ErrorCode,
        status_code: int,
        message: str,
        details: Optional[str] = None,
    ):
        super().__init__(message, details=details)
        self.error_code = error_code
        self.status_code = status_code
