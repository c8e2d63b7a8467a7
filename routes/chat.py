"""
Route handlers for chat operations.
Handles the /api/chat endpoint (multipart form in, JSON envelope out).
"""
from typing import Optional

import openai
from fastapi import APIRouter, File, Form, UploadFile, status
from fastapi.responses import JSONResponse

from models.api_models import ChatResponse
from services.chat_service import ChatService
from services.generation_service import GenerationService
from utils.constants import CONTENT_POLICY_CODE, ErrorMessages
from utils.errors import ChatBridgeError
from utils.http_client import get_openai_client
from utils.logger import app_logger

router = APIRouter()


def send_error(status_code: int, message: str) -> JSONResponse:
    """Build the {error} envelope."""
    return JSONResponse(status_code=status_code, content={"error": message})


def map_provider_error(e: openai.APIError) -> JSONResponse:
    """Translate a provider error that survived the retry budget. Provider text is never forwarded."""
    if e.code == CONTENT_POLICY_CODE:
        return send_error(status.HTTP_400_BAD_REQUEST, ErrorMessages.CONTENT_POLICY)

    if isinstance(e, openai.APIStatusError):
        if e.status_code == 401:
            return send_error(e.status_code, ErrorMessages.INVALID_API_KEY)
        if e.status_code == 429:
            return send_error(e.status_code, ErrorMessages.RATE_LIMIT)
        return send_error(e.status_code or status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorMessages.MODEL_ERROR)

    if isinstance(e, openai.APIConnectionError):
        return send_error(status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorMessages.NETWORK_ERROR)

    return send_error(status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorMessages.MODEL_ERROR)


@router.post("/api/chat", response_model=ChatResponse, response_model_exclude_none=True)
async def chat(
    message: Optional[str] = Form(None),
    history: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
):
    """
    Chat endpoint: classify the requested modality and generate text, an image or speech.
    """
    try:
        ChatService.ensure_configured()

        attachment_size = None
        if file is not None:
            attachment_size = file.size
            app_logger.info(f"Attachment received: {file.filename} ({file.content_type}, {attachment_size} bytes)")

        generator = GenerationService(get_openai_client())
        return await ChatService.process_turn(
            generator,
            message,
            history_json=history,
            attachment_size=attachment_size,
        )

    except ChatBridgeError as e:
        app_logger.error(f"Chat error ({e.status_code}): {e.message}")
        return send_error(e.status_code, e.message)
    except openai.APIError as e:
        app_logger.error(f"Provider error: {type(e).__name__}")
        return map_provider_error(e)
    except Exception as e:
        app_logger.error(f"Chat error: {str(e)}")
        return send_error(status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorMessages.PROCESSING_ERROR)
