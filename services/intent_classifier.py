"""
Intent classification: decide whether a prompt asks for text, an image or speech.
"""
import re

from models.chat_models import ResponseType
from utils.constants import Patterns
from utils.logger import app_logger


class IntentClassifier:
    """Ordered, first-match-wins pattern dispatcher."""

    # Audio is checked before image so prompts matching both resolve to speech
    PATTERN_GROUPS: list[tuple[ResponseType, list[re.Pattern]]] = [
        (ResponseType.AUDIO, [re.compile(p, re.IGNORECASE | re.ASCII) for p in Patterns.AUDIO_INTENT]),
        (ResponseType.IMAGE, [re.compile(p, re.IGNORECASE | re.ASCII) for p in Patterns.IMAGE_INTENT]),
    ]

    @staticmethod
    def classify(prompt: str) -> ResponseType:
        """Return the output modality requested by `prompt`, defaulting to text."""
        normalized = prompt.lower()

        for response_type, patterns in IntentClassifier.PATTERN_GROUPS:
            for pattern in patterns:
                if pattern.search(normalized):
                    app_logger.debug(f"Intent '{response_type.value}' matched pattern '{pattern.pattern}'")
                    return response_type

        return ResponseType.TEXT
