"""
Models module - Pydantic schemas for the gateway's HTTP contract.

This module defines:
- Request models: Input for /api/chat
- Response models: Success and error envelopes, health payload
- ErrorCode: the closed error taxonomy
"""
from src.models.chat import (
    ErrorCode,
    ChatRequest,
    ChatSuccessResponse,
    ChatErrorResponse,
    HealthResponse,
)

__all__ = [
    "ErrorCode",
    "ChatRequest",
    "ChatSuccessResponse",
    "ChatErrorResponse",
    "HealthResponse",
]
