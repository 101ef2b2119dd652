"""Codeforces REST API client."""

from typing import Any

from loguru import logger

from gitexpress.domain.exceptions import ProblemSourceError

from .errors import HTTPClientError
from .http_client import AsyncHTTPClient

CODEFORCES_URL = "https://codeforces.com"
API_URL = f"{CODEFORCES_URL}/api"


class CodeforcesApiClient:
    """Client for the public Codeforces API."""

    def __init__(self, http_client: AsyncHTTPClient):
        self.http_client = http_client

    async def fetch_problemset_problems(self) -> list[dict[str, Any]]:
        """
        Fetch the full problem set.

        Raises:
            ProblemSourceError: If the request fails or status is not "OK"
        """
        url = f"{API_URL}/problemset.problems"
        try:
            response = await self.http_client.get_json(url)
        except HTTPClientError as e:
            raise ProblemSourceError(f"Codeforces request failed: {e}") from e

        if not isinstance(response, dict) or response.get("status") != "OK":
            comment = response.get("comment") if isinstance(response, dict) else None
            logger.error(f"Codeforces API error: {comment}")
            raise ProblemSourceError("Codeforces API error")

        problems = response.get("result", {}).get("problems", [])
        logger.debug(f"Fetched {len(problems)} Codeforces problems")
        return problems

    @staticmethod
    def build_problem_url(contest_id: int | str, index: str) -> str:
        return f"{CODEFORCES_URL}/problemset/problem/{contest_id}/{index}"
