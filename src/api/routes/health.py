"""
Health Check Routes - Liveness endpoint.

Used by load balancers, container health checks and the Streamlit front end
to check that the gateway is up. Gemini connectivity is not checked.
"""
from datetime import datetime

from fastapi import APIRouter

from src import __version__
from src.core.logging_config import get_logger
from src.models.chat import HealthResponse

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api/health",
    tags=["Health"],
)


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description="Returns 200 OK with a static payload while the gateway is running."
)
async def health_check() -> HealthResponse:
    """Perform a basic liveness check."""
    logger.debug("Health check requested")

    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.utcnow()
    )
