"""
Model catalog - the Gemini models the gateway is allowed to call.

The catalog is fixed at import time and never mutated; requests naming
any other model are rejected before the provider is contacted.
"""
from typing import FrozenSet

PREFERRED_MODEL = "gemini-2.5-flash"

AVAILABLE_MODELS: FrozenSet[str] = frozenset({
    "gemini-2.5-flash",
    "gemini-2.0-flash",
    "gemini-1.5-pro",
    "gemini-1.5-flash",
})


def is_supported_model(model: str) -> bool:
    """Check whether a model identifier is in the catalog."""
    return model in AVAILABLE_MODELS
