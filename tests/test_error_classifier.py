"""Tests for classifying Gemini failures into the error taxonomy."""
import pytest

from src.llm.error_classifier import (
    CLASSIFICATION_RULES,
    PROVIDER_ERROR_CODES,
    UNKNOWN_ERROR_CLASSIFICATION,
    classify_error,
)
from src.models.chat import ErrorCode


class TestClassificationTable:
    """Each keyword maps to its taxonomy entry."""

    @pytest.mark.parametrize(
        "error_text, expected_code, expected_status",
        [
            ("429 Resource has been exhausted (e.g. check quota).", ErrorCode.QUOTA_EXCEEDED, 429),
            ("You hit the Rate Limit", ErrorCode.QUOTA_EXCEEDED, 429),
            ("API key invalid", ErrorCode.API_KEY_INVALID, 401),
            ("Request had UNAUTHENTICATED credentials", ErrorCode.API_KEY_INVALID, 401),
            ("Prompt blocked by Gemini safety filters (SAFETY)", ErrorCode.CONTENT_BLOCKED, 400),
            ("harmful content detected", ErrorCode.CONTENT_BLOCKED, 400),
            ("504 Deadline Exceeded", ErrorCode.TIMEOUT, 408),
            ("read timeout", ErrorCode.TIMEOUT, 408),
            ("Network is unreachable", ErrorCode.NETWORK_ERROR, 503),
            ("Connection reset by peer", ErrorCode.NETWORK_ERROR, 503),
            ("404 models/gemini-9 is not found", ErrorCode.MODEL_NOT_FOUND, 404),
            ("Not Found", ErrorCode.MODEL_NOT_FOUND, 404),
        ],
    )
    def test_keyword_mapping(self, error_text, expected_code, expected_status) -> None:
        result = classify_error(Exception(error_text))

        assert result.error_code == expected_code
        assert result.status_code == expected_status

    def test_unrecognized_error_is_unknown(self) -> None:
        result = classify_error(Exception("disk full"))

        assert result == UNKNOWN_ERROR_CLASSIFICATION
        assert result.error_code == ErrorCode.UNKNOWN_ERROR
        assert result.status_code == 500

    def test_accepts_plain_strings(self) -> None:
        assert classify_error("QUOTA").error_code == ErrorCode.QUOTA_EXCEEDED


class TestPriorityOrder:
    """First matching rule wins."""

    def test_rate_limit_beats_every_other_keyword(self) -> None:
        text = "Rate Limit: invalid api key, blocked, timeout, network, model not found"

        assert classify_error(text).error_code == ErrorCode.QUOTA_EXCEEDED

    def test_invalid_beats_safety(self) -> None:
        assert classify_error("invalid request blocked").error_code == ErrorCode.API_KEY_INVALID

    def test_timeout_beats_connection(self) -> None:
        assert classify_error("connection timeout").error_code == ErrorCode.TIMEOUT

    def test_rules_are_in_documented_order(self) -> None:
        codes = [rule.classification.error_code for rule in CLASSIFICATION_RULES]

        assert codes == [
            ErrorCode.QUOTA_EXCEEDED,
            ErrorCode.API_KEY_INVALID,
            ErrorCode.CONTENT_BLOCKED,
            ErrorCode.TIMEOUT,
            ErrorCode.NETWORK_ERROR,
            ErrorCode.MODEL_NOT_FOUND,
        ]
        assert PROVIDER_ERROR_CODES == frozenset(codes)


class TestNeverRaises:
    """Classification degrades to UNKNOWN_ERROR instead of raising."""

    def test_none(self) -> None:
        assert classify_error(None).error_code == ErrorCode.UNKNOWN_ERROR

    def test_empty_message(self) -> None:
        assert classify_error(Exception()).error_code == ErrorCode.UNKNOWN_ERROR

    def test_unprintable_exception(self) -> None:
        class Unprintable(Exception):
            def __str__(self) -> str:
                raise RuntimeError("no text")

        assert classify_error(Unprintable()).error_code == ErrorCode.UNKNOWN_ERROR
