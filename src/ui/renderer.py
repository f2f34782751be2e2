"""
Reply Renderer - Markdown subset to HTML, and error display text.

Gemini replies are rendered through a deliberately narrow markdown subset.
Each line goes through these passes, in order:

1. HTML-escape the raw line
2. List items: "1. text", "- text" or "* text" -> <li>text</li>
3. Bold: **text** -> <strong>text</strong>
4. Italic: *text* -> <em>text</em>

Lines are then joined with <br>. Bold runs before italic so the
single-asterisk pattern cannot eat half of a double-asterisk span.
Nested constructs are not parsed.

Known limitation: code spans are not part of the subset, so a backtick
span is escaped like any other text: "`x<y`" becomes "`x&lt;y`". st.markdown
then reads the backticks as a code span, and code spans show entities
literally, so the user sees "x&lt;y" instead of "x<y".
"""
import html
import re
from typing import Optional

from src.models.chat import ErrorCode

LIST_ITEM_TEMPLATE = '<li style="margin-left: 20px;">{}</li>'

_NUMBERED_ITEM = re.compile(r"^\d+\.\s+(.+)$")
_BULLET_ITEM = re.compile(r"^[-*]\s+(.+)$")
_BOLD = re.compile(r"\*\*(.+?)\*\*")
_ITALIC = re.compile(r"\*(.+?)\*")

# Errors whose gateway message is already meant for the user
DISPLAYABLE_ERROR_CODES = frozenset(code.value for code in (
    ErrorCode.QUOTA_EXCEEDED,
    ErrorCode.API_KEY_INVALID,
    ErrorCode.CONTENT_BLOCKED,
    ErrorCode.TIMEOUT,
    ErrorCode.NETWORK_ERROR,
    ErrorCode.MODEL_NOT_FOUND,
))


def render_inline(text: str) -> str:
    """Apply bold then italic substitution to already-escaped text."""
    text = _BOLD.sub(r"<strong>\1</strong>", text)
    return _ITALIC.sub(r"<em>\1</em>", text)


def render_line(line: str) -> str:
    """Render a single line, wrapping list items."""
    line = html.escape(line, quote=False)

    match = _NUMBERED_ITEM.match(line) or _BULLET_ITEM.match(line)
    if match:
        return LIST_ITEM_TEMPLATE.format(render_inline(match.group(1)))

    return render_inline(line)


def render_markdown(text: str) -> str:
    """
    Render a Gemini reply as HTML.

    Args:
        text: Reply text using the supported markdown subset

    Returns:
        HTML fragment

    Example:
        >>> render_markdown("**bold** and *italic*\\n- item")
        '<strong>bold</strong> and <em>italic</em><br><li style="margin-left: 20px;">item</li>'
    """
    if not text:
        return ""
    return "<br>".join(render_line(line) for line in text.split("\n"))


def format_error_message(
    error_code: Optional[str],
    message: str,
    status_code: Optional[int] = None,
) -> str:
    """
    Choose the text shown for a failed chat request.

    Provider errors the gateway already phrased for the user are shown
    verbatim. Anything else is prefixed with an "Error <status>" label,
    using the HTTP status of the response when it is known.

    Args:
        error_code: The errorCode from the gateway response
        message: The error message from the gateway response
        status_code: HTTP status of the gateway response, if any

    Returns:
        Display text
    """
    if error_code in DISPLAYABLE_ERROR_CODES:
        return message

    label = f"Error {status_code}" if status_code else "Error"
    return f"{label} - {message}"
