"""
Constants, user-facing messages and system prompts for the Media Chat Bridge application.
"""

TEXT_SYSTEM_PROMPT = (
    "You are a helpful assistant. Maintain context from the conversation history "
    "and provide relevant responses based on the entire discussion."
)

SPEECH_SYSTEM_PROMPT = (
    "Generate a natural, conversational response that maintains context from the "
    "entire conversation history. Keep it concise and engaging."
)

IMAGE_PROMPT_TEMPLATE = "Create a safe, appropriate image of: {prompt}"

IMAGE_RESPONSE_CONTENT = "Here's the image you requested:"
AUDIO_RESPONSE_CONTENT = "Generated speech response:"

DEFAULT_CHAT_TITLE = "New Chat"
TITLE_MAX_LENGTH = 30
TITLE_WORD_COUNT = 4
TITLE_SUFFIX = "..."


class ErrorMessages:
    """Human-readable messages returned in the {error} envelope."""
    MISSING_API_KEY = "Missing OpenAI API key in server configuration."
    INVALID_REQUEST = "Invalid request format or empty message."
    PROCESSING_ERROR = "An error occurred while processing your request."
    MEDIA_ERROR = "Unable to process the uploaded media. Please try again."
    NO_RESPONSE = "Unable to generate a response. Please try again."
    MODEL_ERROR = "The language model is currently unavailable. Please try again later."
    NETWORK_ERROR = "Network connection error. Please check your connection and try again."
    RATE_LIMIT = "Rate limit exceeded. Please try again in a moment."
    INVALID_API_KEY = "Invalid API key. Please check your OpenAI API key configuration."
    CONTENT_POLICY = "Your request could not be processed due to content policy restrictions."
    INVALID_HISTORY = "Invalid conversation history format."
    TIMEOUT = "The request took too long to complete. Please try again."


class ClientNotices:
    """Notices surfaced by the client session manager."""
    EMPTY_MESSAGE = "Please enter a message or upload a file"
    ATTACHMENT_TOO_LARGE = "File size exceeds 10MB limit"
    UPLOAD_TOO_LARGE = "File size exceeds 5MB limit"
    UNSUPPORTED_UPLOAD = "Only image files can be uploaded"
    REQUEST_IN_FLIGHT = "Please wait for the current response to finish"
    REQUEST_FAILED = "Failed to get response"


# Provider error code for safety rejections
CONTENT_POLICY_CODE = "content_policy_violation"


# Regular expression patterns
class Patterns:
    """Regular expression patterns for intent detection, sanitization and titles."""

    AUDIO_INTENT = [
        r"\b(speak|say|pronounce|read|narrate)\b.+",
        r"\b(convert|transform)\b.+\b(to|into)\b.+\b(speech|audio|voice)\b",
        r"\b(generate|create|make)\b.+\b(audio|speech|voice|sound)\b",
        r"how does.+sound\b",
        r"\b(tell|read).+\b(me|us|out loud)\b",
    ]

    IMAGE_INTENT = [
        r"\b(draw|create|generate|make)\b.+\b(picture|image|photo|artwork|visual|drawing|illustration)\b",
        r"\b(show|display|visualize)\b.+\b(as|in|with)\b.+\b(image|picture|photo|drawing)\b",
        r"\b(picture|image|photo|drawing|artwork)\b.+\b(of|showing|depicting)\b",
    ]

    UNSAFE_PROMPT_CHARS = r"[^\w\s.,!?'-]"

    TITLE_QUESTION = r"^(what|who|how|why|when|where|can|could|would|will|should|is|are|do|does|did).+?\?"
