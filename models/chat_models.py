"""
Data models for chat processing.
Contains the response modality, generation results and client-side chat state.
"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from utils.constants import DEFAULT_CHAT_TITLE


class ResponseType(str, Enum):
    """Output modality of a generated response."""
    TEXT = "text"
    IMAGE = "image"
    AUDIO = "audio"


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


@dataclass
class SpeechResult:
    """Synthesized speech and the text it was generated from."""
    url: str
    text: str


@dataclass
class Media:
    """Media reference attached to a message."""
    type: ResponseType
    url: str


@dataclass
class Message:
    """A single chat message."""
    role: Role
    content: str
    media: Optional[Media] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def to_history(self) -> dict:
        """Reduce to the role/content pair sent as model context."""
        return {"role": self.role.value, "content": self.content}


@dataclass
class Chat:
    """
    A conversation held in memory by the client session manager.
    Messages are append-only; the title is set once, on the first user message.
    """
    title: str = DEFAULT_CHAT_TITLE
    messages: list[Message] = field(default_factory=list)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def append(self, message: Message) -> None:
        """Append a message and bump the update timestamp."""
        self.messages.append(message)
        self.updated_at = datetime.now()

    def history_snapshot(self) -> list[dict]:
        """Role/content view of the messages so far."""
        return [message.to_history() for message in self.messages]
