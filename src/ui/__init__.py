"""
UI module - Front end helpers shared by the Streamlit app.

- api_client.py : HTTP client for the gateway
- renderer.py   : Markdown subset rendering and error display text
"""
from src.ui.api_client import GatewayClient
from src.ui.renderer import render_markdown, format_error_message

__all__ = [
    "GatewayClient",
    "render_markdown",
    "format_error_message",
]
