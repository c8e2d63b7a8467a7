"""
Chat service containing the request dispatch logic.
Handles validation, history parsing, modality dispatch and response normalization.
"""
import asyncio
import json
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from config import Config
from models.api_models import ChatResponse, HistoryMessage
from models.chat_models import ResponseType
from services.generation_service import GenerationService
from services.intent_classifier import IntentClassifier
from utils.constants import AUDIO_RESPONSE_CONTENT, IMAGE_RESPONSE_CONTENT, ErrorMessages
from utils.errors import (
    EmptyResponseError,
    MissingAPIKeyError,
    RequestTimeoutError,
    ValidationError,
)
from utils.logger import app_logger
from utils.retry import RetryPolicy, retry_with_backoff


class ChatService:
    """Service for handling a single chat turn."""

    @staticmethod
    def ensure_configured() -> None:
        """Fail fast when the provider key is missing."""
        if not Config.is_configured():
            app_logger.error("CRITICAL: OPENAI_API_KEY not set in .env file!")
            raise MissingAPIKeyError()

    @staticmethod
    def validate_message(message: Optional[str]) -> str:
        """Return the trimmed message or raise when it is empty."""
        if not isinstance(message, str) or not message.strip():
            raise ValidationError(ErrorMessages.INVALID_REQUEST)
        return message.strip()

    @staticmethod
    def validate_attachment_size(size: Optional[int]) -> None:
        if size is not None and size > Config.MAX_ATTACHMENT_BYTES:
            app_logger.warning(f"Attachment rejected: {size} bytes exceeds {Config.MAX_ATTACHMENT_BYTES}")
            raise ValidationError(ErrorMessages.MEDIA_ERROR)

    @staticmethod
    def parse_history(history_json: Optional[str]) -> list[dict]:
        """
        Parse the JSON-encoded history field.

        Non-object entries are dropped and unknown roles become "user".

        Raises:
            ValidationError: if the payload is not a JSON array
        """
        if not history_json:
            return []

        try:
            parsed = json.loads(history_json)
        except json.JSONDecodeError:
            app_logger.warning("History payload is not valid JSON")
            raise ValidationError(ErrorMessages.INVALID_HISTORY)

        if not isinstance(parsed, list):
            app_logger.warning(f"History payload is a {type(parsed).__name__}, expected a list")
            raise ValidationError(ErrorMessages.INVALID_HISTORY)

        history = []
        for entry in parsed:
            if not isinstance(entry, dict):
                continue
            try:
                msg = HistoryMessage(role=entry.get("role"), content=entry.get("content"))
            except PydanticValidationError:
                raise ValidationError(ErrorMessages.INVALID_HISTORY)
            history.append(msg.model_dump())

        return history

    @staticmethod
    def prepare_messages(history: list[dict], prompt: str) -> list[dict]:
        """History (most recent turns only) followed by the current user turn."""
        if len(history) > Config.MAX_HISTORY_MESSAGES:
            app_logger.info(f"Trimming history from {len(history)} to {Config.MAX_HISTORY_MESSAGES} messages")
            history = history[-Config.MAX_HISTORY_MESSAGES:]
        return [*history, {"role": "user", "content": prompt}]

    @staticmethod
    async def dispatch(
        generator: GenerationService,
        response_type: ResponseType,
        prompt: str,
        messages: list[dict],
        policy: RetryPolicy | None = None,
    ) -> ChatResponse:
        """Invoke the generation routine for `response_type` through the retry wrapper."""
        if response_type == ResponseType.IMAGE:
            image_url = await retry_with_backoff(
                lambda: generator.generate_image(prompt), policy, label="Image generation"
            )
            return ChatResponse(type="image", content=IMAGE_RESPONSE_CONTENT, url=image_url)

        if response_type == ResponseType.AUDIO:
            speech = await retry_with_backoff(
                lambda: generator.generate_speech(messages), policy, label="Speech generation"
            )
            return ChatResponse(type="audio", content=AUDIO_RESPONSE_CONTENT, url=speech.url)

        text = await retry_with_backoff(
            lambda: generator.generate_text(messages), policy, label="Text generation"
        )
        return ChatResponse(type="text", content=text)

    @staticmethod
    def normalize(response: ChatResponse) -> ChatResponse:
        """Every branch must carry non-empty content; media branches also need a URL."""
        if not response.content or not response.content.strip():
            raise EmptyResponseError()
        if response.type != ResponseType.TEXT.value and not response.url:
            raise EmptyResponseError()
        return response

    @staticmethod
    async def process_turn(
        generator: GenerationService,
        message: Optional[str],
        history_json: Optional[str] = None,
        attachment_size: Optional[int] = None,
        policy: RetryPolicy | None = None,
        timeout: float | None = None,
    ) -> ChatResponse:
        """
        Run one turn: validate, classify, dispatch, normalize.

        Raises:
            ChatBridgeError subclasses for mapped failures; provider errors that
            survive the retry budget propagate unchanged
        """
        prompt = ChatService.validate_message(message)
        history = ChatService.parse_history(history_json)
        ChatService.validate_attachment_size(attachment_size)

        response_type = IntentClassifier.classify(prompt)
        app_logger.info(f"Request classified as '{response_type.value}' ({len(history)} history messages)")

        messages = ChatService.prepare_messages(history, prompt)

        try:
            response = await asyncio.wait_for(
                ChatService.dispatch(generator, response_type, prompt, messages, policy),
                timeout=timeout if timeout is not None else Config.REQUEST_TIMEOUT,
            )
        except asyncio.TimeoutError:
            app_logger.error("Request exceeded the execution ceiling")
            raise RequestTimeoutError()

        return ChatService.normalize(response)
