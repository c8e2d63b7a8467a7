"""
Client-side chat session manager.
Owns the in-memory chat list and sends each turn to the /api/chat endpoint.
"""
import json
import re
from typing import Callable, Optional

import httpx

from client.attachments import Attachment
from config import Config
from models.chat_models import Chat, Media, Message, ResponseType, Role
from utils.constants import (
    TITLE_MAX_LENGTH,
    TITLE_SUFFIX,
    TITLE_WORD_COUNT,
    ClientNotices,
    ErrorMessages,
    Patterns,
)
from utils.http_client import HTTPClientManager
from utils.logger import client_logger

CHAT_ENDPOINT = "/api/chat"


def generate_chat_title(message: str) -> str:
    """Short messages are used as-is, questions up to the first "?", anything else by its first words."""
    if len(message) < TITLE_MAX_LENGTH:
        return message

    question_match = re.match(Patterns.TITLE_QUESTION, message, re.IGNORECASE)
    if question_match:
        return question_match.group(0)[:TITLE_MAX_LENGTH] + TITLE_SUFFIX

    return " ".join(message.split(" ")[:TITLE_WORD_COUNT]) + TITLE_SUFFIX


class ChatSessionManager:
    """
    In-memory chat state with optimistic updates.

    Chats are kept sorted by most recent update. State lives only as long as
    the manager; nothing is persisted.
    """

    def __init__(
        self,
        base_url: str = Config.BRIDGE_URL,
        http_client: Optional[httpx.AsyncClient] = None,
        notify: Optional[Callable[[str], None]] = None,
    ):
        self._owns_client = http_client is None
        self._http = http_client or HTTPClientManager.create_bridge_client(base_url)
        self._notify = notify or client_logger.warning
        self._chats: list[Chat] = []
        self.current_chat_id: Optional[str] = None
        self.is_loading = False

    async def __aenter__(self) -> "ChatSessionManager":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this manager created it."""
        if self._owns_client:
            await self._http.aclose()

    @property
    def chats(self) -> list[Chat]:
        return list(self._chats)

    @property
    def current_chat(self) -> Optional[Chat]:
        if self.current_chat_id is None:
            return None
        return self._find(self.current_chat_id)

    def _find(self, chat_id: str) -> Optional[Chat]:
        return next((chat for chat in self._chats if chat.id == chat_id), None)

    def _sort(self) -> None:
        self._chats.sort(key=lambda chat: chat.updated_at, reverse=True)

    def create_chat(self) -> Chat:
        """Create an empty chat and make it current."""
        chat = Chat()
        self._chats.insert(0, chat)
        self._sort()
        self.current_chat_id = chat.id
        client_logger.debug(f"Created chat {chat.id}")
        return chat

    def select_chat(self, chat_id: str) -> Chat:
        chat = self._find(chat_id)
        if chat is None:
            raise KeyError(chat_id)
        self.current_chat_id = chat_id
        return chat

    def delete_chat(self, chat_id: str) -> None:
        """Remove a chat; the selection is cleared only if it pointed at this chat."""
        self._chats = [chat for chat in self._chats if chat.id != chat_id]
        if self.current_chat_id == chat_id:
            self.current_chat_id = None

    async def send_message(self, text: str, attachment: Optional[Attachment] = None) -> Optional[Message]:
        """
        Send one turn and append the assistant's reply.

        The user message is appended before the request is made. Failures are
        reported through `notify` and leave the chat as it is.

        Returns:
            The assistant message, or None if the turn was rejected or failed
        """
        if not text.strip() and attachment is None:
            self._notify(ClientNotices.EMPTY_MESSAGE)
            return None

        if self.is_loading:
            self._notify(ClientNotices.REQUEST_IN_FLIGHT)
            return None

        chat = self.current_chat or self.create_chat()

        if attachment is not None and attachment.size > Config.MAX_ATTACHMENT_BYTES:
            self._notify(ClientNotices.ATTACHMENT_TOO_LARGE)
            return None

        form = {
            "message": text,
            "history": json.dumps(chat.history_snapshot()),
        }
        files = None
        if attachment is not None:
            files = {"file": (attachment.filename, attachment.content, attachment.content_type)}

        user_message = Message(role=Role.USER, content=text)
        if attachment is not None:
            user_message.media = Media(type=attachment.media_type, url=attachment.to_data_url())

        if not chat.messages:
            chat.title = generate_chat_title(text)
        chat.append(user_message)
        self._sort()

        self.is_loading = True
        try:
            response = await self._http.post(CHAT_ENDPOINT, data=form, files=files)

            if not response.is_success:
                self._notify(self._error_from(response))
                return None

            data = response.json()
            if not isinstance(data, dict):
                client_logger.error(f"Chat response was a {type(data).__name__}, expected an object")
                self._notify(ClientNotices.REQUEST_FAILED)
                return None
        except httpx.HTTPError as e:
            client_logger.error(f"Chat request failed: {e}")
            self._notify(ErrorMessages.NETWORK_ERROR)
            return None
        except ValueError:
            client_logger.error("Chat response was not valid JSON")
            self._notify(ClientNotices.REQUEST_FAILED)
            return None
        finally:
            self.is_loading = False

        assistant_message = Message(role=Role.ASSISTANT, content=data.get("content", ""))
        if data.get("type") in (ResponseType.IMAGE.value, ResponseType.AUDIO.value):
            assistant_message.media = Media(type=ResponseType(data["type"]), url=data.get("url", ""))

        chat.append(assistant_message)
        self._sort()
        return assistant_message

    @staticmethod
    def _error_from(response: httpx.Response) -> str:
        try:
            payload = response.json()
        except ValueError:
            return ClientNotices.REQUEST_FAILED
        if not isinstance(payload, dict):
            return ClientNotices.REQUEST_FAILED
        return payload.get("error") or ClientNotices.REQUEST_FAILED
