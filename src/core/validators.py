"""
Input Validators - Request validation for the chat endpoint.

Validation happens before the provider is contacted:
- Message must contain something other than whitespace
- Model must be part of the catalog
"""
from typing import Optional

from src.core.exceptions import EmptyMessageError, InvalidModelError
from src.core.logging_config import get_logger
from src.llm.catalog import is_supported_model

logger = get_logger(__name__)


def validate_message(message: Optional[str]) -> str:
    """
    Validate a user message.

    The message is returned unchanged; trimming is only used to decide
    whether it is empty.

    Args:
        message: Raw user message, possibly None

    Returns:
        The message to forward to the model

    Raises:
        EmptyMessageError: If the message is missing or blank
    """
    if not message or not message.strip():
        raise EmptyMessageError()

    return message


def validate_model(model: Optional[str]) -> str:
    """
    Validate the requested model.

    An explicit null is not a model; only an omitted field falls back
    to the default, and that happens before this check.

    Args:
        model: Model identifier taken from the request

    Returns:
        The model identifier to call

    Raises:
        InvalidModelError: If the model is None or not in the catalog
    """
    if model is None or not is_supported_model(model):
        logger.warning(f"Rejected unsupported model: {model!r}")
        raise InvalidModelError(model)

    return model
