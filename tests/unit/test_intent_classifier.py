import pytest

from models.chat_models import ResponseType
from services.intent_classifier import IntentClassifier


@pytest.mark.parametrize("prompt", [
    "draw a picture of a cat",
    "Generate an illustration of a lighthouse at dusk",
    "Can you show the solar system as an image?",
    "a photo of mountains in winter",
])
def test_classify_detects_image_requests(prompt):
    """Given an image-style prompt, when classify is called, it should return image."""
    assert IntentClassifier.classify(prompt) == ResponseType.IMAGE


@pytest.mark.parametrize("prompt", [
    "Please narrate a short story",
    "convert this sentence into speech",
    "How does a cello sound",
    "say hello in French",
])
def test_classify_detects_audio_requests(prompt):
    """Given a speech-style prompt, when classify is called, it should return audio."""
    assert IntentClassifier.classify(prompt) == ResponseType.AUDIO


@pytest.mark.parametrize("prompt", [
    "generate an image and a voice for my character",
    "read me a story about a picture of a dog",
    "make a drawing with sound effects",
])
def test_classify_prefers_audio_when_both_groups_match(prompt):
    """Given a prompt matching both audio and image patterns, classify should return audio."""
    assert any(p.search(prompt.lower()) for p in IntentClassifier.PATTERN_GROUPS[1][1])
    assert IntentClassifier.classify(prompt) == ResponseType.AUDIO


@pytest.mark.parametrize("prompt", [
    "What is the capital of France?",
    "Explain the theory of relativity.",
    "picture",
    "",
])
def test_classify_defaults_to_text(prompt):
    """Given a prompt matching no pattern, classify should return text."""
    assert IntentClassifier.classify(prompt) == ResponseType.TEXT


def test_classify_is_case_insensitive():
    assert IntentClassifier.classify("DRAW A PICTURE OF A CAT") == ResponseType.IMAGE


@pytest.mark.parametrize("prompt, expected", [
    ("ésay hello", ResponseType.AUDIO),
    ("ñdraw a picture of a cat", ResponseType.IMAGE),
])
def test_classify_treats_non_ascii_letters_as_word_boundaries(prompt, expected):
    """Given a keyword glued to an accented letter, classify should still see the keyword."""
    assert IntentClassifier.classify(prompt) == expected
