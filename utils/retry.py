"""
Bounded retry with exponential backoff for provider calls.
"""
import asyncio
from dataclasses import dataclass, field
from typing import Awaitable, Callable, TypeVar

import openai

from config import Config
from utils.constants import CONTENT_POLICY_CODE
from utils.errors import (
    ChatBridgeError,
    ContentPolicyError,
    EmptyResponseError,
    InvalidCredentialsError,
    RateLimitExceededError,
)
from utils.logger import app_logger

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """Retry bounds. Delays are in seconds."""
    max_retries: int = field(default_factory=lambda: Config.RETRY_MAX_RETRIES)
    initial_delay: float = field(default_factory=lambda: Config.RETRY_INITIAL_DELAY)
    max_delay: float = field(default_factory=lambda: Config.RETRY_MAX_DELAY)

    def delay_for(self, retry_index: int) -> float:
        """Delay before retry number `retry_index` (0-based)."""
        return min(self.initial_delay * (2 ** retry_index), self.max_delay)


def classify_provider_error(error: Exception) -> ChatBridgeError | None:
    """
    Map a provider error that must not be retried to its domain error.

    Returns:
        The domain error to raise, or None when the error is retryable
    """
    if isinstance(error, EmptyResponseError):
        return None
    if isinstance(error, ChatBridgeError):
        return error

    if isinstance(error, openai.APIStatusError):
        if error.status_code == 401:
            return InvalidCredentialsError()
        if error.status_code == 429:
            return RateLimitExceededError()

    if isinstance(error, openai.APIError) and error.code == CONTENT_POLICY_CODE:
        return ContentPolicyError()

    return None


async def retry_with_backoff(
    operation: Callable[[], Awaitable[T]],
    policy: RetryPolicy | None = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    label: str = "provider call",
) -> T:
    """
    Run `operation`, retrying transient failures with exponential backoff.

    Args:
        operation: Zero-argument coroutine factory, called once per attempt
        policy: Retry bounds, defaults to the configured policy
        sleep: Awaitable used to wait between attempts
        label: Name used in log lines

    Returns:
        Result of the first successful attempt

    Raises:
        InvalidCredentialsError, RateLimitExceededError, ContentPolicyError:
            immediately, without further attempts
        Exception: the last error once the retry budget is exhausted
    """
    policy = policy or RetryPolicy()
    retry_index = 0

    while True:
        try:
            return await operation()
        except Exception as e:
            fatal = classify_provider_error(e)
            if fatal is not None:
                app_logger.error(f"{label} failed with non-retryable error: {type(e).__name__}")
                if fatal is e:
                    raise
                raise fatal from e

            if retry_index >= policy.max_retries:
                app_logger.error(f"{label} failed after {retry_index + 1} attempts: {type(e).__name__}")
                raise

            delay = policy.delay_for(retry_index)
            app_logger.warning(
                f"{label} attempt {retry_index + 1} failed ({type(e).__name__}), retrying in {delay:.1f}s"
            )
            await sleep(delay)
            retry_index += 1
