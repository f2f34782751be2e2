"""
LLM Client for Google Gemini integration.

This module provides a thin interface to the Gemini API. It handles:
- API client initialization
- A single non-streaming generate call per request
- Surfacing safety blocks as errors the classifier recognizes

Errors raised by the underlying SDK are not caught here; the service
layer classifies them.
"""
from typing import Optional

import google.generativeai as genai

from src.core.config import get_settings
from src.core.logging_config import get_logger

logger = get_logger(__name__)

# Finish reasons for a candidate the API withheld or cut off on policy grounds
BLOCKED_FINISH_REASONS = frozenset({
    "SAFETY",
    "RECITATION",
    "BLOCKLIST",
    "PROHIBITED_CONTENT",
    "SPII",
    "IMAGE_SAFETY",
})


class LLMClient:
    """
    Client for generating text with Google Gemini models.

    Example:
        >>> client = LLMClient()
        >>> client.generate("Say hello", model="gemini-2.5-flash")
        'Hello!'
    """

    def __init__(self, api_key: Optional[str] = None):
        """
        Configure the Gemini SDK.

        Args:
            api_key: Gemini API key. Read from settings if not provided.
        """
        if api_key is None:
            api_key = get_settings().gemini_api_key

        genai.configure(api_key=api_key)
        logger.info("Gemini LLM client initialized")

    def generate(self, message: str, model: str) -> str:
        """
        Send one prompt to a Gemini model and return the reply text.

        Args:
            message: The user's message, used as the whole prompt
            model: Gemini model identifier

        Returns:
            The model's reply text

        Raises:
            LLMError: If the prompt or the reply was blocked
            Exception: Any error raised by the Gemini SDK, unchanged
        """
        model_instance = genai.GenerativeModel(model_name=model)

        logger.debug(f"Calling Gemini: model={model}, message_length={len(message)}")
        response = model_instance.generate_content(message)

        self._raise_if_blocked(response)

        return response.text

    def _raise_if_blocked(self, response) -> None:
        """
        Turn safety blocks into an explicit error.

        Accessing `response.text` on a blocked or empty response raises a
        generic SDK error whose text reads like a bad credential, so blocks
        are checked first. A candidate that stops with no parts is treated
        as blocked whatever its finish reason.
        """
        feedback = getattr(response, "prompt_feedback", None)
        block_reason = getattr(feedback, "block_reason", None)
        if block_reason:
            reason = getattr(block_reason, "name", str(block_reason))
            raise LLMError(f"Prompt blocked by Gemini safety filters ({reason})")

        candidates = getattr(response, "candidates", None)
        if not candidates:
            raise LLMError("Response blocked: Gemini returned no candidates")

        finish_reason = getattr(candidates[0], "finish_reason", None)
        reason = getattr(finish_reason, "name", str(finish_reason))
        if reason in BLOCKED_FINISH_REASONS:
            raise LLMError(f"Response blocked by Gemini (finish_reason={reason})")

        content = getattr(candidates[0], "content", None)
        if not getattr(content, "parts", None):
            raise LLMError(f"Response blocked: Gemini returned no content (finish_reason={reason})")


class LLMError(Exception):
    """
    Custom exception for failures detected by the client itself.

    SDK errors are propagated as-is; this covers responses that came
    back but cannot be used.
    """
    pass
