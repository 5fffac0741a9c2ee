"""
Completion API client.

Endpoint: POST {OPENAI_API_URL}
Headers: Authorization: Bearer <key>, Content-Type: application/json
Body: {"model": ..., "messages": [{"role", "content"}, ...], "temperature": ...}
Text: choices[0].message.content

Any failure (transport error, non-2xx, body without content) is raised as
ExternalServiceError. Callers decide what to fall back to.
"""

from typing import Dict, List, Optional
import logging
import os

import httpx

from life_manage.errors import ExternalServiceError

logger = logging.getLogger(__name__)

OPENAI_API_URL = os.getenv("OPENAI_API_URL", "https://api.openai.com/v1/chat/completions")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-3.5-turbo")
OPENAI_TIMEOUT_SECONDS = float(os.getenv("OPENAI_TIMEOUT_SECONDS", "60"))


class CompletionClient:
    """Single-attempt chat completion calls. No retries."""

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        api_url: str = OPENAI_API_URL,
        model: str = OPENAI_MODEL,
        timeout_s: float = OPENAI_TIMEOUT_SECONDS,
    ):
        self._client = http_client
        self.api_url = api_url
        self.model = model
        self.timeout_s = timeout_s

    async def complete(
        self,
        messages: List[Dict[str, str]],
        *,
        api_key: str,
        temperature: float = 0.7,
    ) -> str:
        """Send one chat completion request and return the text of the first choice."""
        body = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature,
        }
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

        try:
            if self._client is not None:
                response = await self._post(self._client, headers, body)
            else:
                async with httpx.AsyncClient() as client:
                    response = await self._post(client, headers, body)
        except httpx.HTTPError as e:
            raise ExternalServiceError(f"Completion request failed: {e.__class__.__name__}")

        try:
            data = response.json()
        except ValueError:
            data = None

        if not response.is_success:
            message = None
            if isinstance(data, dict) and isinstance(data.get("error"), dict):
                message = data["error"].get("message")
            raise ExternalServiceError(
                message or f"Completion API returned HTTP {response.status_code}",
                status=response.status_code,
            )

        content = self._extract_content(data)
        if content is None:
            raise ExternalServiceError("Completion API response had no content", status=response.status_code)
        return content

    async def _post(self, client: httpx.AsyncClient, headers: Dict[str, str], body: Dict) -> httpx.Response:
        return await client.post(
            self.api_url,
            headers=headers,
            json=body,
            timeout=httpx.Timeout(self.timeout_s, connect=10.0),
        )

    @staticmethod
    def _extract_content(data) -> Optional[str]:
        if not isinstance(data, dict):
            return None
        choices = data.get("choices") or []
        if not choices or not isinstance(choices[0], dict):
            return None
        message = choices[0].get("message") or {}
        content = message.get("content")
        return content if isinstance(content, str) else None
