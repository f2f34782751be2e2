"""
Provider Error Classifier - Map upstream failures to the error taxonomy.

The Gemini client raises errors whose text is not a stable contract, so
classification is a best-effort keyword match over the lowercased error
text. Rules are evaluated in order and the first match wins; anything
unrecognized becomes UNKNOWN_ERROR.

Example:
    >>> classify_error(Exception("429 Resource has been exhausted (e.g. check quota)."))
    ErrorClassification(error_code=<ErrorCode.QUOTA_EXCEEDED: 'QUOTA_EXCEEDED'>, ...)
"""
from dataclasses import dataclass
from typing import Tuple, Union

from src.core.logging_config import get_logger
from src.models.chat import ErrorCode

logger = get_logger(__name__)


@dataclass(frozen=True)
class ErrorClassification:
    """A taxonomy entry: error code, HTTP status and user-facing message."""
    error_code: ErrorCode
    status_code: int
    message: str


@dataclass(frozen=True)
class ClassificationRule:
    """Matches when any keyword occurs in the lowercased error text."""
    keywords: Tuple[str, ...]
    classification: ErrorClassification

    def matches(self, error_text: str) -> bool:
        return any(keyword in error_text for keyword in self.keywords)


# Order matters: first match wins
CLASSIFICATION_RULES: Tuple[ClassificationRule, ...] = (
    ClassificationRule(
        keywords=("quota", "exhausted", "rate limit"),
        classification=ErrorClassification(
            error_code=ErrorCode.QUOTA_EXCEEDED,
            status_code=429,
            message="Gemini is at capacity right now, please try again later",
        ),
    ),
    ClassificationRule(
        keywords=("api key", "invalid", "unauthenticated"),
        classification=ErrorClassification(
            error_code=ErrorCode.API_KEY_INVALID,
            status_code=401,
            message="API key is invalid or expired",
        ),
    ),
    ClassificationRule(
        keywords=("blocked", "safety", "harmful"),
        classification=ErrorClassification(
            error_code=ErrorCode.CONTENT_BLOCKED,
            status_code=400,
            message="Your message could not be processed because it was flagged by the safety policy",
        ),
    ),
    ClassificationRule(
        keywords=("timeout", "deadline"),
        classification=ErrorClassification(
            error_code=ErrorCode.TIMEOUT,
            status_code=408,
            message="Request timed out, please try again later",
        ),
    ),
    ClassificationRule(
        keywords=("network", "connection"),
        classification=ErrorClassification(
            error_code=ErrorCode.NETWORK_ERROR,
            status_code=503,
            message="Could not connect to the Gemini service",
        ),
    ),
    ClassificationRule(
        keywords=("model", "not found"),
        classification=ErrorClassification(
            error_code=ErrorCode.MODEL_NOT_FOUND,
            status_code=404,
            message="The requested Gemini model is not available",
        ),
    ),
)

UNKNOWN_ERROR_CLASSIFICATION = ErrorClassification(
    error_code=ErrorCode.UNKNOWN_ERROR,
    status_code=500,
    message="An error occurred while processing the request",
)

# Codes the classifier can produce from provider text
PROVIDER_ERROR_CODES = frozenset(
    rule.classification.error_code for rule in CLASSIFICATION_RULES
)


def describe_error(error: Union[BaseException, str, None]) -> str:
    """
    Get the text of an error, never raising.

    Args:
        error: An exception, a plain error string, or None

    Returns:
        The error text, or an empty string if it cannot be obtained
    """
    if error is None:
        return ""
    if isinstance(error, str):
        return error
    try:
        return str(error)
    except Exception:
        logger.debug(f"Could not stringify {type(error).__name__}")
        return ""


def classify_error(error: Union[BaseException, str, None]) -> ErrorClassification:
    """
    Classify a provider failure into the error taxonomy.

    Args:
        error: The exception raised by the provider client, or its text

    Returns:
        The classification of the first matching rule, or the
        UNKNOWN_ERROR classification if nothing matches
    """
    error_text = describe_error(error).lower()

    for rule in CLASSIFICATION_RULES:
        if rule.matches(error_text):
            return rule.classification

    return UNKNOWN_ERROR_CLASSIFICATION
