"""
Attachments picked or recorded on the client before they are sent with a message.
"""
import base64
from dataclasses import dataclass

from config import Config
from models.chat_models import ResponseType
from utils.constants import ClientNotices

RECORDING_CONTENT_TYPE = "audio/webm"


class AttachmentError(Exception):
    """Attachment rejected before sending; the message is shown to the user."""

    def __init__(self, notice: str):
        self.notice = notice
        super().__init__(notice)


@dataclass
class Attachment:
    """A file or recording attached to an outgoing message."""
    filename: str
    content: bytes
    content_type: str

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def media_type(self) -> ResponseType:
        """Images are tagged as image media, everything else as audio."""
        if self.content_type.startswith("image/"):
            return ResponseType.IMAGE
        return ResponseType.AUDIO

    def to_data_url(self) -> str:
        encoded = base64.b64encode(self.content).decode("ascii")
        return f"data:{self.content_type};base64,{encoded}"


def load_upload(filename: str, content: bytes, content_type: str) -> Attachment:
    """
    Accept a file picked for inline upload.

    Raises:
        AttachmentError: if the file exceeds the inline upload ceiling or is not an image
    """
    if len(content) > Config.MAX_INLINE_UPLOAD_BYTES:
        raise AttachmentError(ClientNotices.UPLOAD_TOO_LARGE)
    if not content_type.startswith("image/"):
        raise AttachmentError(ClientNotices.UNSUPPORTED_UPLOAD)
    return Attachment(filename=filename, content=content, content_type=content_type)


def from_recording(content: bytes, filename: str = "recording.webm") -> Attachment:
    """Wrap bytes captured from the microphone."""
    return Attachment(filename=filename, content=content, content_type=RECORDING_CONTENT_TYPE)
