"""
Domain exceptions mapped to the {error} envelope at the endpoint boundary.
"""
from fastapi import status

from utils.constants import ErrorMessages


class ChatBridgeError(Exception):
    """Base error carrying a client-safe message and an HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = ErrorMessages.PROCESSING_ERROR

    def __init__(self, message: str | None = None, status_code: int | None = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(ChatBridgeError):
    """Bad or missing input. Never retried."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = ErrorMessages.INVALID_REQUEST


class MissingAPIKeyError(ChatBridgeError):
    default_message = ErrorMessages.MISSING_API_KEY


class InvalidCredentialsError(ChatBridgeError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = ErrorMessages.INVALID_API_KEY


class RateLimitExceededError(ChatBridgeError):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    default_message = ErrorMessages.RATE_LIMIT


class ContentPolicyError(ChatBridgeError):
    """Request rejected by the provider's safety system."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = ErrorMessages.CONTENT_POLICY


class EmptyResponseError(ChatBridgeError):
    """Provider returned an empty or unexpected payload."""
    default_message = ErrorMessages.NO_RESPONSE


class RequestTimeoutError(ChatBridgeError):
    default_message = ErrorMessages.TIMEOUT
