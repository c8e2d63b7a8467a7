import base64
from types import SimpleNamespace

MOCK_IMAGE_B64 = base64.b64encode(b"\x89PNG fake image bytes").decode("ascii")

MOCK_AUDIO_BYTES = b"ID3 fake mp3 bytes"

MOCK_TEXT_REPLY = "Paris is the capital of France."

MOCK_SPEECH_REPLY = "Once upon a time, a <small> cat #1 sang softly."


def completion(content):
    """Chat completion object as returned by the SDK."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def image_response(b64_json):
    return SimpleNamespace(data=[SimpleNamespace(b64_json=b64_json)])


def speech_response(content):
    return SimpleNamespace(content=content)
