"""
HTTP client utilities with connection pooling.
Provides reusable httpx clients for the provider SDK and the chat session client.
"""
from functools import lru_cache

import httpx
from openai import AsyncOpenAI

from config import Config
from utils.logger import app_logger


class HTTPClientManager:
    """Manages shared httpx clients with connection pooling."""

    _provider_client: httpx.AsyncClient | None = None

    @classmethod
    def get_provider_client(cls) -> httpx.AsyncClient:
        """
        Get or create the shared httpx client used underneath AsyncOpenAI.

        Features:
        - Connection pooling (reuses TCP connections to the provider)
        - Provider-specific timeout

        Returns:
            Configured httpx.AsyncClient for provider calls
        """
        if cls._provider_client is None:
            limits = httpx.Limits(
                max_connections=20,
                max_keepalive_connections=10,
                keepalive_expiry=30.0
            )

            cls._provider_client = httpx.AsyncClient(
                timeout=Config.PROVIDER_TIMEOUT,
                limits=limits,
            )

        return cls._provider_client

    @staticmethod
    def create_bridge_client(base_url: str) -> httpx.AsyncClient:
        """
        Create an httpx client for talking to the /api/chat endpoint.

        The caller owns the returned client and must close it.
        """
        return httpx.AsyncClient(base_url=base_url, timeout=Config.BRIDGE_TIMEOUT)

    @classmethod
    async def close_all(cls) -> None:
        """
        Close all managed clients and clean up connections.
        """
        if cls._provider_client is not None:
            await cls._provider_client.aclose()
            cls._provider_client = None
        get_openai_client.cache_clear()


@lru_cache(maxsize=1)
def get_openai_client() -> AsyncOpenAI:
    """Return a singleton OpenAI client sharing the pooled provider connection.

    Retries are handled by utils.retry, so the SDK's own retries are disabled.
    """
    app_logger.debug("Initializing OpenAI client")
    return AsyncOpenAI(
        api_key=Config.OPENAI_API_KEY,
        http_client=HTTPClientManager.get_provider_client(),
        max_retries=0,
    )
