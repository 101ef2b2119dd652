"""Clients for text generation services."""

from typing import Optional

from google import genai
from google.genai import errors as genai_errors
from google.genai import types
from loguru import logger

from .errors import HTTPClientError, LLMError
from .http_client import AsyncHTTPClient
from .parsers.interfaces import HTTPClientProtocol

OPENROUTER_URL = "https://openrouter.ai/api/v1/chat/completions"


class GeminiClient:
    """Google Gemini client using the ``google-genai`` SDK."""

    def __init__(self, api_key: str, model: str = "gemini-2.5-flash"):
        """
        Initialize Gemini client.

        Args:
            api_key: Gemini API key
            model: Model id, e.g. "gemini-2.5-flash"
        """
        if not api_key:
            raise LLMError("Gemini API key is required")

        self.model = model
        self._client = genai.Client(api_key=api_key)

    async def complete(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> str:
        """
        Generate a single completion.

        Returns:
            Response text

        Raises:
            LLMError: If the request fails or the response has no text
        """
        config = types.GenerateContentConfig(
            system_instruction=system_prompt,
            temperature=temperature,
            max_output_tokens=max_tokens,
        )

        logger.debug(f"Gemini request: model={self.model}, prompt_chars={len(prompt)}")

        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=config,
            )
        except genai_errors.APIError as e:
            logger.error(f"Gemini request failed: {e}")
            raise LLMError(f"Gemini request failed: {e}") from e

        text = response.text
        if not text:
            raise LLMError("Gemini returned an empty response")

        logger.debug(f"Gemini response: {len(text)} chars")
        return text


class OpenRouterClient:
    """OpenRouter chat completions client."""

    def __init__(
        self,
        api_key: str,
        model: str = "google/gemini-2.5-flash",
        http_client: Optional[HTTPClientProtocol] = None,
    ):
        """
        Initialize OpenRouter client.

        Args:
            api_key: OpenRouter API key
            model: Model name in OpenRouter format
            http_client: HTTP client (a new one is created if omitted)
        """
        if not api_key:
            raise LLMError("OpenRouter API key is required")

        self.api_key = api_key
        self.model = model
        self.http_client = http_client or AsyncHTTPClient(impersonate=None)

    async def complete(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> str:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        payload: dict = {"model": self.model, "messages": messages}
        if temperature is not None:
            payload["temperature"] = temperature
        if max_tokens is not None:
            payload["max_tokens"] = max_tokens

        logger.debug(f"OpenRouter request: model={self.model}, prompt_chars={len(prompt)}")

        try:
            data = await self.http_client.post_json(
                OPENROUTER_URL,
                payload,
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
            )
        except HTTPClientError as e:
            raise LLMError(f"OpenRouter request failed: {e}") from e

        try:
            text = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise LLMError(f"Unexpected OpenRouter response: {data}") from e

        if not text:
            raise LLMError("OpenRouter returned an empty response")
        return text
