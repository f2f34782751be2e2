"""
Services module - Business logic and orchestration.

Services contain the core application logic:
- No HTTP concerns (those belong in api/)
- Orchestrate validation, the LLM call and error classification
"""
from src.services.chat_service import ChatService

__all__ = [
    "ChatService",
]
