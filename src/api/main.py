"""
FastAPI Application Entry Point.

This module creates and configures the FastAPI application instance.
It handles:
1. Application initialization
2. Router registration
3. Middleware configuration (audit with security headers, CORS)
4. Exception handlers that turn every failure into the error envelope
5. Startup/shutdown events

Run with: uvicorn src.api.main:app --port 3000
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src import __version__
from src.core.config import get_settings
from src.core.logging_config import setup_logging, get_logger
from src.core.exceptions import (
    ChatGatewayException,
    EmptyMessageError,
    InvalidModelError,
)
from src.core.audit import AuditMiddleware, record_error_code
from src.api.routes import chat_router, health_router
from src.llm.catalog import AVAILABLE_MODELS
from src.llm.error_classifier import UNKNOWN_ERROR_CLASSIFICATION
from src.models.chat import ChatErrorResponse


# Initialize logging before anything else
settings = get_settings()
setup_logging(settings.log_level, settings.log_dir)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Logs the effective configuration on startup; there are no
    resources to open or close.
    """
    logger.info(f"Starting {settings.app_name} v{__version__} in {settings.app_env} mode")
    logger.info(f"Default model: {settings.default_model}")
    logger.info(f"Available models: {', '.join(sorted(AVAILABLE_MODELS))}")

    yield  # Application runs here

    logger.info(f"Shutting down {settings.app_name}")


app = FastAPI(
    title="Gemini Chat Relay API",
    description="""
    A minimal relay between a chat front end and Google Gemini.

    ## Features

    - **Single-turn chat**: one message in, one reply out
    - **Model selection**: choose among the supported Gemini models
    - **Stable error codes**: provider failures are classified into a fixed set
    """,
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ============================================================
# Middleware Configuration (Order matters!)
# ============================================================

app.add_middleware(AuditMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)
if "*" in settings.cors_origins:
    logger.warning("CORS configured to allow all origins")


# ============================================================
# Exception Handlers
# ============================================================

def _include_details() -> bool:
    """Raw error details are only returned in development."""
    return get_settings().is_development()


@app.exception_handler(ChatGatewayException)
async def chat_gateway_exception_handler(request: Request, exc: ChatGatewayException):
    """Handle all custom gateway exceptions."""
    record_error_code(request, exc.error_code)
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(include_details=_include_details())
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """
    Map malformed request bodies onto the error taxonomy.

    Errors on the `model` field become INVALID_MODEL; anything else
    (wrong message type, missing or non-JSON body) leaves no usable
    message and becomes EMPTY_MESSAGE.
    """
    fields = {
        error["loc"][1]
        for error in exc.errors()
        if len(error.get("loc", ())) > 1
    }
    logger.warning(f"Malformed request to {request.url.path}: fields={sorted(map(str, fields))}")

    if "model" in fields and "message" not in fields:
        error = InvalidModelError()
    else:
        error = EmptyMessageError()

    record_error_code(request, error.error_code)
    return JSONResponse(
        status_code=error.status_code,
        content=error.to_dict(include_details=False)
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Handle uncaught exceptions globally.

    This ensures all errors return the same envelope as classified
    provider failures. Detailed error information is only included
    in development mode.
    """
    logger.exception(f"Unhandled exception: {exc}")
    record_error_code(request, UNKNOWN_ERROR_CLASSIFICATION.error_code)

    body = ChatErrorResponse(
        error=UNKNOWN_ERROR_CLASSIFICATION.message,
        error_code=UNKNOWN_ERROR_CLASSIFICATION.error_code,
        details=str(exc) if _include_details() else None,
    )
    return JSONResponse(
        status_code=UNKNOWN_ERROR_CLASSIFICATION.status_code,
        content=body.model_dump(mode="json", by_alias=True, exclude_none=True)
    )


# ============================================================
# Routers
# ============================================================

app.include_router(health_router)
app.include_router(chat_router)


# ============================================================
# Root Endpoint
# ============================================================

@app.get("/", include_in_schema=False)
async def root():
    """Small service index."""
    return {
        "message": "Gemini Chat Relay API",
        "version": __version__,
        "documentation": "/docs",
        "health": "/api/health"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development()
    )
