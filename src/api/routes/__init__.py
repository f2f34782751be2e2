"""
API Routes module - Endpoint definitions.

Each file in this module defines routes for a specific domain:
- chat.py     : Message relay to Gemini
- health.py   : Health check endpoint
"""
from src.api.routes.chat import router as chat_router
from src.api.routes.health import router as health_router

__all__ = [
    "chat_router",
    "health_router",
]
