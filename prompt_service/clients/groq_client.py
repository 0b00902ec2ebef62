"""HTTP client for the Groq chat-completions API (OpenAI-compatible)."""

import logging
from typing import Dict, List, Optional

import httpx

from prompt_service.domain.message import Message
from prompt_service.exceptions import UpstreamError
from prompt_service.interfaces.completion_gateway import ICompletionGateway

logger = logging.getLogger(__name__)


class GroqCompletionClient(ICompletionGateway):
    """
    Completion gateway backed by Groq's ``/chat/completions`` endpoint.

    Every call is bounded by ``timeout``; failures surface immediately as
    UpstreamError with no retry and no fallback model.
    """

    def __init__(self, base_url: str, api_key: str, timeout: float = 60.0):
        """
        Initialize Groq client.

        Args:
            base_url: API base URL (e.g., https://api.groq.com/openai/v1)
            api_key: Groq API key sent as a bearer token
            timeout: Per-request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.client = httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """Close HTTP client."""
        await self.client.aclose()

    def _get_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json"
        }

    async def complete(
        self,
        messages: List[Message],
        model: str,
        temperature: float,
        max_tokens: int
    ) -> Optional[str]:
        """
        Request a single completion.

        Args:
            messages: Role-tagged message sequence
            model: Model identifier
            temperature: Sampling temperature
            max_tokens: Completion token limit

        Returns:
            Text of the first choice (None if the provider returned no content)

        Raises:
            UpstreamError: On timeout, transport error, non-2xx status or
                malformed response body
        """
        url = f"{self.base_url}/chat/completions"
        payload = {
            "model": model,
            "messages": [m.to_dict() for m in messages],
            "temperature": temperature,
            "max_tokens": max_tokens,
        }

        logger.info(f"Requesting completion: model={model}, messages={len(messages)}")

        try:
            response = await self.client.post(url, json=payload, headers=self._get_headers())
            response.raise_for_status()
            data = response.json()
        except httpx.TimeoutException as e:
            logger.error(f"Completion request timed out: {e}")
            raise UpstreamError(f"Completion provider timed out: {e}")
        except httpx.HTTPStatusError as e:
            logger.error(f"Completion request failed: HTTP {e.response.status_code}")
            raise UpstreamError(
                f"Completion provider error: {e.response.status_code} - {e.response.text}"
            )
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Completion request failed: {e}")
            raise UpstreamError(f"Completion provider request failed: {e}")

        try:
            choices = data.get("choices") or []
            if not choices:
                return None
            return (choices[0].get("message") or {}).get("content")
        except AttributeError as e:
            raise UpstreamError(f"Malformed completion response: {e}")
