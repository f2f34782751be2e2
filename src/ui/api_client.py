"""
Gateway Client - HTTP calls from the front end to the chat gateway.

The client never raises: transport failures (gateway unreachable, timeouts,
non-JSON bodies) are turned into a NETWORK_ERROR response shaped like the
gateway's own error envelope, so the UI has a single rendering path.
"""
import os
from typing import Any, Dict, Optional

import requests

from src.core.logging_config import get_logger
from src.models.chat import ErrorCode

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3000")
REQUEST_TIMEOUT_SECONDS = int(os.getenv("REQUEST_TIMEOUT_SECONDS", "120"))

logger = get_logger(__name__)


def network_error_response(error: Exception) -> Dict[str, Any]:
    """Build a failure response for a request that never got an answer."""
    return {
        "success": False,
        "error": str(error),
        "errorCode": ErrorCode.NETWORK_ERROR.value,
    }


class GatewayClient:
    """
    Thin wrapper around the gateway's HTTP API.

    Example:
        >>> client = GatewayClient("http://localhost:3000")
        >>> client.send_message("Hello")
        {'success': True, 'reply': 'Hi there!', 'status': 200}
    """

    def __init__(self, base_url: str = API_BASE_URL, timeout: int = REQUEST_TIMEOUT_SECONDS):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def send_message(self, message: str, model: Optional[str] = None) -> Dict[str, Any]:
        """
        Send a message to the gateway.

        Args:
            message: The user's message
            model: Gemini model to use; the gateway default if None

        Returns:
            The gateway's JSON response with the HTTP status added
            under "status", or a synthesized NETWORK_ERROR response
        """
        payload: Dict[str, Any] = {"message": message}
        if model:
            payload["model"] = model

        try:
            response = requests.post(
                f"{self.base_url}/api/chat",
                json=payload,
                timeout=self.timeout
            )
            data = response.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.error(f"Gateway request failed: {e}")
            return network_error_response(e)

        if not isinstance(data, dict):
            return network_error_response(ValueError("Unexpected response from gateway"))

        data["status"] = response.status_code
        return data

    def check_health(self) -> bool:
        """Check if the gateway is reachable and healthy."""
        try:
            response = requests.get(f"{self.base_url}/api/health", timeout=10)
        except requests.exceptions.RequestException:
            return False
        return response.status_code == 200
