"""Async client for an OpenAI-compatible chat-completion backend.

This module provides an async wrapper around openai.AsyncOpenAI pointed at a
locally hosted inference server (Ollama, Docker Model Runner). The client is
designed to be created once at startup and reused; it holds no per-call state.
"""

import logging

import openai

from mcp_local_llm.backend.types import CompletionRequest
from mcp_local_llm.config import LocalLLMSettings
from mcp_local_llm.errors import BackendError, BackendUnreachableError

logger = logging.getLogger(__name__)


class BackendClient:
    """Async client for the local chat-completion endpoint.

    SDK exceptions are translated into BackendUnreachableError (connection
    refused, timeout) and BackendError (error status, malformed body), with
    the original exception chained. Retries are disabled.

    Attributes:
        base_url: The backend base URL (e.g., "http://localhost:11434/v1")
        _client: The underlying openai.AsyncOpenAI instance
    """

    def __init__(self, settings: LocalLLMSettings) -> None:
        """Initialize the backend client.

        Args:
            settings: Application settings providing base_url, api_key and
                      request_timeout
        """
        self.base_url = settings.base_url
        self._client = openai.AsyncOpenAI(
            base_url=settings.base_url,
            api_key=settings.api_key,
            timeout=settings.request_timeout,
            max_retries=0,
        )
        logger.info(f"BackendClient initialized with base_url: {self.base_url}")

    async def create_completion(self, request: CompletionRequest) -> str | None:
        """Send one chat-completion request and return the first choice's text.

        Args:
            request: The fully built completion request

        Returns:
            str | None: The first choice's message content, or None when the
                        backend returned no choices or no content

        Raises:
            BackendUnreachableError: If the backend can't be reached
            BackendError: If the backend returns an error or malformed response
        """
        logger.debug(
            f"Sending completion: model={request.model}, "
            f"messages={len(request.messages)}, max_tokens={request.max_tokens}, "
            f"temperature={request.temperature}"
        )
        try:
            response = await self._client.chat.completions.create(
                **request.to_payload()
            )
        except openai.APIConnectionError as e:
            # Also covers APITimeoutError
            logger.error(f"Backend unreachable at {self.base_url}: {e}")
            raise BackendUnreachableError(
                f"Cannot reach backend at {self.base_url}: {e}"
            ) from e
        except openai.APIStatusError as e:
            logger.error(f"Backend returned {e.status_code}: {e.message}")
            raise BackendError(
                f"Backend returned {e.status_code}: {e.message}"
            ) from e
        except openai.APIError as e:
            logger.error(f"Backend request failed: {e}")
            raise BackendError(f"Backend request failed: {e}") from e

        choices = getattr(response, "choices", None)
        if choices is None:
            raise BackendError("Malformed completion response: missing 'choices'")
        if not choices:
            logger.debug("Completion returned no choices")
            return None

        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        logger.debug(
            f"Completion received: content_length={len(content) if content else 0}"
        )
        return content

    async def list_models(self) -> list[str]:
        """List the model identifiers the backend serves.

        Returns:
            list[str]: Model ids in the order the backend reports them

        Raises:
            BackendUnreachableError: If the backend can't be reached
            BackendError: If the backend returns an error response
        """
        try:
            model_ids = [model.id async for model in self._client.models.list()]
        except openai.APIConnectionError as e:
            logger.warning(f"Failed to list models at {self.base_url}: {e}")
            raise BackendUnreachableError(
                f"Cannot reach backend at {self.base_url}: {e}"
            ) from e
        except openai.APIStatusError as e:
            logger.warning(f"Model listing returned {e.status_code}: {e.message}")
            raise BackendError(
                f"Backend returned {e.status_code}: {e.message}"
            ) from e
        except openai.APIError as e:
            logger.warning(f"Model listing failed: {e}")
            raise BackendError(f"Model listing failed: {e}") from e

        logger.debug(f"Retrieved {len(model_ids)} models from backend")
        return model_ids

    async def check_connection(self) -> bool:
        """Check if the backend is reachable.

        Returns:
            bool: True if the models endpoint answers, False otherwise
        """
        try:
            await self.list_models()
            logger.debug("Backend connection check: successful")
            return True
        except Exception as e:
            logger.warning(f"Backend connection check failed: {e}")
            return False

    async def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.close()
        logger.debug("BackendClient closed")
