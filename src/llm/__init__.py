"""
LLM module - Language model integration.

This module handles all LLM interactions:
- catalog.py          : The supported Gemini models
- client.py           : API calls to Gemini
- error_classifier.py : Classification of provider failures

The Gemini client is not re-exported here. Importing it loads the Gemini
SDK, and the front end only needs the catalog; import it from
src.llm.client.
"""
from src.llm.catalog import AVAILABLE_MODELS, PREFERRED_MODEL, is_supported_model
from src.llm.error_classifier import (
    ErrorClassification,
    CLASSIFICATION_RULES,
    PROVIDER_ERROR_CODES,
    classify_error,
)

__all__ = [
    "AVAILABLE_MODELS",
    "PREFERRED_MODEL",
    "is_supported_model",
    "ErrorClassification",
    "CLASSIFICATION_RULES",
    "PROVIDER_ERROR_CODES",
    "classify_error",
]
