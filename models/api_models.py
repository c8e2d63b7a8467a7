"""
Pydantic data models for API requests and responses.
"""
from typing import Any, Literal, Optional
from pydantic import BaseModel, field_validator


class HistoryMessage(BaseModel):
    """Role/content pair sent as model context."""
    role: Literal["user", "assistant"]
    content: str = ""

    @field_validator("role", mode="before")
    @classmethod
    def coerce_role(cls, value: Any) -> str:
        """Unrecognized roles are treated as user turns."""
        return value if value in ("user", "assistant") else "user"

    @field_validator("content", mode="before")
    @classmethod
    def coerce_content(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)


class ChatResponse(BaseModel):
    """Normalized response envelope."""
    type: Literal["text", "image", "audio"]
    content: str
    url: Optional[str] = None


class ErrorResponse(BaseModel):
    """Error envelope."""
    error: str
