"""
Chat Routes - API endpoint relaying a message to Gemini.

POST /api/chat validates the request, makes one Gemini call and returns
either {success: true, reply} or the uniform error envelope. Errors are
raised as ChatGatewayException and rendered by the handlers in main.py.
"""
from fastapi import APIRouter, Depends, Request

from src.core.audit import record_model
from src.core.logging_config import get_logger
from src.models.chat import ChatRequest, ChatSuccessResponse, ChatErrorResponse
from src.services.chat_service import ChatService

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api/chat",
    tags=["Chat"],
    responses={
        400: {"model": ChatErrorResponse, "description": "Empty message, unsupported model or blocked content"},
        401: {"model": ChatErrorResponse, "description": "Gemini API key invalid"},
        404: {"model": ChatErrorResponse, "description": "Gemini model not found"},
        408: {"model": ChatErrorResponse, "description": "Gemini request timed out"},
        429: {"model": ChatErrorResponse, "description": "Gemini quota exhausted"},
        500: {"model": ChatErrorResponse, "description": "Unknown error"},
        503: {"model": ChatErrorResponse, "description": "Cannot reach Gemini"},
    }
)

_chat_service: ChatService | None = None


def get_chat_service() -> ChatService:
    """Get or create the chat service instance."""
    global _chat_service
    if _chat_service is None:
        _chat_service = ChatService()
    return _chat_service


@router.post(
    "",
    response_model=ChatSuccessResponse,
    summary="Send a message to Gemini",
    description="""
    Send a single message to a Gemini model and get its reply.

    - `message` is required and must not be blank.
    - `model` is optional; it defaults to the preferred model and must be
      one of the supported Gemini models.

    There is no conversation memory: each request is answered on its own.
    """
)
def send_message(
    request: ChatRequest,
    raw_request: Request,
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatSuccessResponse:
    """
    Process a user message and return Gemini's reply.

    Declared sync so the blocking Gemini call runs in the threadpool.
    """
    record_model(raw_request, chat_service.requested_model(request))
    return chat_service.process_message(request)
