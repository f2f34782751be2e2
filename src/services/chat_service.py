"""
Chat Service - Business logic for relaying one message to Gemini.

This service orchestrates the chat flow:
1. Validates the message and resolves the model
2. Calls the LLM once, without history
3. Returns the reply untransformed, or classifies the failure

Routes stay thin; the service can be tested without HTTP.
"""
from typing import Optional

from src.core.config import get_settings
from src.core.exceptions import ProviderRequestError
from src.core.logging_config import get_logger
from src.core.validators import validate_message, validate_model
from src.llm.client import LLMClient
from src.llm.error_classifier import classify_error, describe_error
from src.models.chat import ChatRequest, ChatSuccessResponse

logger = get_logger(__name__)


class ChatService:
    """
    Service for handling single-turn chat requests.

    Every request is independent; nothing is remembered between calls.

    Example:
        >>> service = ChatService()
        >>> service.process_message(ChatRequest(message="Hello!")).reply
        'Hello! How can I help you today?'
    """

    def __init__(
        self,
        llm_client: Optional[LLMClient] = None,
        default_model: Optional[str] = None,
    ):
        """
        Initialize the chat service.

        Args:
            llm_client: Client used to reach Gemini. Created from
                settings if not provided.
            default_model: Model used when a request names none.
                Read from settings if not provided.
        """
        self.llm_client = llm_client or LLMClient()
        self.default_model = default_model or get_settings().default_model
        logger.info(f"ChatService initialized (default model: {self.default_model})")

    def requested_model(self, request: ChatRequest) -> Optional[str]:
        """The model a request asks for; the default only when the field is omitted."""
        if "model" in request.model_fields_set:
            return request.model
        return self.default_model

    def process_message(self, request: ChatRequest) -> ChatSuccessResponse:
        """
        Relay a user message to Gemini and return the reply.

        Args:
            request: The chat request containing the message and
                optional model.

        Returns:
            ChatSuccessResponse with the model's reply.

        Raises:
            EmptyMessageError: If the message is blank. Gemini is not called.
            InvalidModelError: If the model is null or unsupported. Gemini is not called.
            ProviderRequestError: If the Gemini call fails.
        """
        message = validate_message(request.message)
        model = validate_model(self.requested_model(request))

        logger.info(f"Processing message: model={model}, message_length={len(message)}")

        try:
            reply = self.llm_client.generate(message=message, model=model)
        except Exception as e:
            classification = classify_error(e)
            error_text = describe_error(e)
            logger.error(
                f"Gemini call failed: model={model}, "
                f"classified={classification.error_code.value}, error={error_text}"
            )
            raise ProviderRequestError(
                error_code=classification.error_code,
                status_code=classification.status_code,
                message=classification.message,
                details=error_text,
            ) from e

        logger.info(f"Message processed: model={model}, reply_length={len(reply)}")

        return ChatSuccessResponse(reply=reply)
