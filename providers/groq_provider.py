"""
Groq LLM provider for the AI analysis mode.

Alternative to the offline analyzer: sends the snippet to a chat-completions
endpoint in JSON mode and returns a verdict of the same shape.
"""

import asyncio
import json
import logging
import re
from typing import Any, Optional

import httpx
from pydantic import ValidationError
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from bigo.config import settings
from bigo.models import AIVerdict
from bigo.prompts import SYSTEM_PROMPT, build_analysis_prompt

logger = logging.getLogger("bigo.providers.groq")

NOTATION_PATTERN = re.compile(r"O\([^)]+\)")


class GroqAPIError(Exception):
    """Exception for Groq API errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class MalformedResponseError(GroqAPIError):
    """Raised when the model reply is not valid JSON."""

    def __init__(self, content: str):
        self.content = content
        super().__init__(f"Failed to parse JSON response: {content[:200]}...", status_code=502)


class ProviderUnavailableError(GroqAPIError):
    """Raised when AI analysis is not configured."""

    def __init__(self, message: str = "AI analysis is currently unavailable"):
        super().__init__(message, status_code=503)


class GroqProvider:
    """
    Groq LLM provider with JSON mode support.
    """

    BASE_URL = "https://api.groq.com/openai/v1/chat/completions"
    RATE_LIMIT_BACKOFF_SECONDS = 2.0

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Groq provider.

        Args:
            api_key: API key, defaults to GROQ_API_KEY from settings
            model: Model name, defaults to GROQ_MODEL from settings
            transport: Optional httpx transport (used by tests)

        Raises:
            ProviderUnavailableError: If no API key is configured
        """
        self.api_key = api_key if api_key is not None else settings.GROQ_API_KEY
        if not self.api_key or not self.api_key.strip():
            raise ProviderUnavailableError()

        self.model = model or settings.GROQ_MODEL
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(settings.GROQ_TIMEOUT_SECONDS),
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        try:
            error = response.json().get("error", {})
        except ValueError:
            return response.text
        if isinstance(error, dict):
            return error.get("message") or response.text
        return str(error) or response.text

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        retry=retry_if_exception_type((httpx.TimeoutException, httpx.NetworkError)),
        reraise=True,
    )
    async def _make_request(
        self,
        messages: list[dict[str, str]],
    ) -> dict[str, Any]:
        """
        Make API request to Groq with JSON mode enabled.

        Args:
            messages: Chat messages

        Returns:
            API response dict

        Raises:
            GroqAPIError: On any non-200 response
        """
        client = await self._get_client()

        payload = {
            "model": self.model,
            "messages": messages,
            "max_tokens": settings.MAX_TOKENS,
            "temperature": settings.TEMPERATURE,
            "response_format": {"type": "json_object"},
        }

        response = await client.post(self.BASE_URL, json=payload)

        if response.status_code == 429:
            # Rate limit - wait and retry once
            await asyncio.sleep(self.RATE_LIMIT_BACKOFF_SECONDS)
            response = await client.post(self.BASE_URL, json=payload)

        if response.status_code == 401:
            raise GroqAPIError(
                "Invalid API key: check that your Groq API key is correct and has not expired",
                status_code=401,
            )
        if response.status_code == 429:
            raise GroqAPIError(
                "Rate limit exceeded: please try again in a few moments",
                status_code=429,
            )
        if response.status_code != 200:
            raise GroqAPIError(
                f"API error ({response.status_code}): {self._error_detail(response)}",
                status_code=response.status_code,
            )

        return response.json()

    async def complete_json(
        self,
        prompt: str,
        system_prompt: str,
    ) -> dict[str, Any]:
        """
        Get JSON completion from Groq.

        Args:
            prompt: User prompt
            system_prompt: System prompt

        Returns:
            Parsed JSON dict

        Raises:
            GroqAPIError: If the service is unreachable or the reply is empty or not JSON
        """
        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": prompt},
        ]

        try:
            response = await self._make_request(messages)
        except httpx.HTTPError as e:
            logger.error(f"Groq request failed after retries: {e!r}")
            raise GroqAPIError(
                f"Network error: could not connect to the AI service ({e})",
                status_code=502,
            )

        try:
            content = (response["choices"][0]["message"]["content"] or "").strip()
        except (KeyError, IndexError, TypeError):
            raise GroqAPIError("No response from AI model", status_code=502)
        if not content:
            raise GroqAPIError("No response from AI model", status_code=502)

        try:
            return json.loads(content)
        except json.JSONDecodeError:
            # Try to extract JSON from response
            start = content.find("{")
            end = content.rfind("}") + 1
            if start != -1 and end > start:
                try:
                    return json.loads(content[start:end])
                except json.JSONDecodeError:
                    pass

            raise MalformedResponseError(content)

    async def analyze(self, code: str) -> AIVerdict:
        """
        Analyze time complexity with the LLM.

        Args:
            code: Source code to analyze (any language)

        Returns:
            AIVerdict with notation, explanation and steps

        Raises:
            ValueError: If code is empty
            GroqAPIError: If the API call fails or the reply has no notation
        """
        if not code or not code.strip():
            raise ValueError("Code cannot be empty")

        try:
            data = await self.complete_json(
                prompt=build_analysis_prompt(code.strip()),
                system_prompt=SYSTEM_PROMPT,
            )
        except MalformedResponseError as e:
            match = NOTATION_PATTERN.search(e.content)
            if match:
                logger.warning("Malformed AI response, falling back to notation %s", match.group(0))
                return AIVerdict(
                    notation=match.group(0),
                    explanation="Parsed from malformed response",
                    steps=["Could not parse full response"],
                )
            raise

        if not isinstance(data, dict) or not data.get("notation"):
            raise GroqAPIError("Missing 'notation' field in response", status_code=502)

        try:
            return AIVerdict.model_validate(data)
        except ValidationError as e:
            raise GroqAPIError(f"Invalid analysis in response: {e}", status_code=502)
