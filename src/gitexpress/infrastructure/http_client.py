"""Async HTTP client built on curl_cffi."""

import json
from typing import Any

from curl_cffi import CurlError
from curl_cffi.requests import AsyncSession
from loguru import logger

from .errors import HTTPClientError

DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


class AsyncHTTPClient:
    """Thin async wrapper around ``curl_cffi`` with browser impersonation."""

    def __init__(self, timeout: float = 30.0, impersonate: str | None = "chrome"):
        """
        Initialize HTTP client.

        Args:
            timeout: Per-request timeout in seconds
            impersonate: Browser fingerprint passed to curl_cffi (None to disable)
        """
        self.timeout = timeout
        self.impersonate = impersonate

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        json_body: Any = None,
    ) -> tuple[int, str]:
        """
        Send a request and return ``(status_code, body)``.

        Raises:
            HTTPClientError: On transport failure or a non-2xx status
        """
        request_headers = {"User-Agent": DEFAULT_USER_AGENT}
        if headers:
            request_headers.update(headers)

        logger.debug(f"{method} {url}")

        try:
            # A fresh session per call keeps curl handles out of closed event loops
            async with AsyncSession() as session:
                response = await session.request(
                    method,
                    url,
                    headers=request_headers,
                    json=json_body,
                    timeout=self.timeout,
                    impersonate=self.impersonate,
                )
        except CurlError as e:
            logger.error(f"Request failed: {method} {url}: {e}")
            raise HTTPClientError(f"Request to {url} failed: {e}", url=url) from e

        status = response.status_code
        if status >= 400:
            logger.debug(f"{method} {url} -> {status}")
            raise HTTPClientError(
                f"{method} {url} returned HTTP {status}", status_code=status, url=url
            )

        return status, response.text

    async def get_text(self, url: str, headers: dict[str, str] | None = None) -> str:
        """Get text content from URL."""
        _, body = await self.request("GET", url, headers=headers)
        return body

    async def get_json(self, url: str, headers: dict[str, str] | None = None) -> Any:
        _, body = await self.request("GET", url, headers=headers)
        return self._decode(body, url)

    async def post_json(
        self, url: str, payload: Any, headers: dict[str, str] | None = None
    ) -> Any:
        _, body = await self.request("POST", url, headers=headers, json_body=payload)
        return self._decode(body, url)

    async def put_json(
        self, url: str, payload: Any, headers: dict[str, str] | None = None
    ) -> Any:
        _, body = await self.request("PUT", url, headers=headers, json_body=payload)
        return self._decode(body, url)

    @staticmethod
    def _decode(body: str, url: str) -> Any:
        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse JSON from {url}: {e}")
            raise HTTPClientError(f"Failed to parse JSON response from {url}", url=url) from e
