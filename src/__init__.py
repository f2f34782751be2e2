"""
Source code root package.

This package contains all application source code organized by responsibility:
- api/       : FastAPI routes and HTTP handling
- core/      : Configuration, logging, validation and error types
- services/  : Business logic and orchestration
- llm/       : Gemini integration, model catalog and error classification
- models/    : Pydantic models for request/response schemas
- ui/        : Front end helpers (gateway client, markdown rendering)
"""

__version__ = "1.0.0"
