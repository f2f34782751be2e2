"""
Audit Middleware - one log line per gateway request.

Each line records what a chat request asked for and how it ended:

    POST /api/chat status=400 model=gpt-4 errorCode=INVALID_MODEL duration=3.1ms

The chat route stores the requested model on `request.state`, and the
exception handlers store the error code, so the middleware only has to
read them back. Health checks are logged at DEBUG. Every response also
gets the hardening headers in SECURITY_HEADERS and an X-Response-Time.
"""
import time
from typing import Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from src.core.logging_config import get_logger
from src.models.chat import ErrorCode

logger = get_logger(__name__)

HEALTH_PATHS = frozenset({"/api/health"})

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}


def record_model(request: Request, model: Optional[str]) -> None:
    """Remember the model a chat request resolved to, for the audit line."""
    request.state.model = model


def record_error_code(request: Request, error_code: ErrorCode) -> None:
    """Remember the error code a request failed with, for the audit line."""
    request.state.error_code = ErrorCode(error_code).value


class AuditMiddleware(BaseHTTPMiddleware):
    """Logs the audit line and decorates the response headers."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            # Only reached when no handler turned the error into a response
            record_error_code(request, ErrorCode.UNKNOWN_ERROR)
            self._log(request, 500, time.perf_counter() - start)
            raise

        duration = time.perf_counter() - start
        self._log(request, response.status_code, duration)

        response.headers["X-Response-Time"] = f"{duration * 1000:.1f}ms"
        for header, value in SECURITY_HEADERS.items():
            response.headers[header] = value
        return response

    def _log(self, request: Request, status_code: int, duration: float) -> None:
        path = request.url.path
        if path in HEALTH_PATHS:
            logger.debug(f"{request.method} {path} status={status_code}")
            return

        model = getattr(request.state, "model", None)
        error_code = getattr(request.state, "error_code", None)

        if status_code >= 500:
            log_fn = logger.error
        elif status_code >= 400:
            log_fn = logger.warning
        else:
            log_fn = logger.info

        log_fn(
            f"{request.method} {path} status={status_code} "
            f"model={model or '-'} errorCode={error_code or '-'} "
            f"duration={duration * 1000:.1f}ms"
        )
