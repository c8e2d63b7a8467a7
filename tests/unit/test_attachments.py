import base64

import pytest

from client.attachments import AttachmentError, from_recording, load_upload
from config import Config
from models.chat_models import ResponseType
from utils.constants import ClientNotices


def test_load_upload_accepts_images_within_inline_ceiling():
    attachment = load_upload("cat.png", b"\x89PNG", "image/png")

    assert attachment.media_type == ResponseType.IMAGE
    assert attachment.size == 4
    assert attachment.to_data_url() == "data:image/png;base64," + base64.b64encode(b"\x89PNG").decode()


def test_load_upload_rejects_files_above_inline_ceiling():
    """Given an image above the inline ceiling, load_upload should reject it even though it is under the send ceiling."""
    content = b"0" * (Config.MAX_INLINE_UPLOAD_BYTES + 1)
    assert len(content) < Config.MAX_ATTACHMENT_BYTES

    with pytest.raises(AttachmentError) as exc_info:
        load_upload("big.png", content, "image/png")
    assert exc_info.value.notice == ClientNotices.UPLOAD_TOO_LARGE


def test_load_upload_rejects_non_images():
    with pytest.raises(AttachmentError) as exc_info:
        load_upload("notes.pdf", b"%PDF", "application/pdf")
    assert exc_info.value.notice == ClientNotices.UNSUPPORTED_UPLOAD


def test_load_upload_reports_size_before_type():
    """Given a non-image above the inline ceiling, load_upload should report the size problem."""
    content = b"0" * (Config.MAX_INLINE_UPLOAD_BYTES + 1)

    with pytest.raises(AttachmentError) as exc_info:
        load_upload("notes.pdf", content, "application/pdf")
    assert exc_info.value.notice == ClientNotices.UPLOAD_TOO_LARGE


def test_from_recording_is_tagged_as_audio():
    attachment = from_recording(b"webm bytes")

    assert attachment.content_type == "audio/webm"
    assert attachment.media_type == ResponseType.AUDIO
    assert attachment.filename == "recording.webm"
