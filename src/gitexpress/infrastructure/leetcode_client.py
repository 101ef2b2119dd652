"""LeetCode GraphQL client."""

from typing import Any

from loguru import logger

from gitexpress.domain.exceptions import ProblemSourceError

from .errors import HTTPClientError
from .parsers.interfaces import HTTPClientProtocol

LEETCODE_URL = "https://leetcode.com"
GRAPHQL_URL = f"{LEETCODE_URL}/graphql"

DAILY_QUERY = """
query questionOfToday {
    activeDailyCodingChallengeQuestion {
        date
        link
        question {
            questionId
            questionFrontendId
            title
            titleSlug
            difficulty
            topicTags {
                name
            }
        }
    }
}
"""

DETAIL_QUERY = """
query getQuestionDetail($titleSlug: String!) {
    question(titleSlug: $titleSlug) {
        questionId
        questionFrontendId
        title
        titleSlug
        content
        difficulty
        likes
        dislikes
        categoryTitle
        topicTags {
            name
            slug
        }
        codeSnippets {
            lang
            langSlug
            code
        }
        sampleTestCase
        exampleTestcases
        hints
        stats
    }
}
"""


class LeetCodeClient:
    """Client for LeetCode's public GraphQL endpoint."""

    def __init__(self, http_client: HTTPClientProtocol):
        self.http_client = http_client

    async def query(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Run a GraphQL query and return its ``data`` object.

        Raises:
            ProblemSourceError: On HTTP failure or a response without ``data``
        """
        try:
            response = await self.http_client.post_json(
                GRAPHQL_URL,
                {"query": query, "variables": variables or {}},
                headers={"Content-Type": "application/json", "Referer": LEETCODE_URL},
            )
        except HTTPClientError as e:
            raise ProblemSourceError(f"LeetCode request failed: {e}") from e

        data = response.get("data") if isinstance(response, dict) else None
        if data is None:
            errors = response.get("errors") if isinstance(response, dict) else None
            logger.error(f"LeetCode GraphQL returned no data: {errors}")
            raise ProblemSourceError("Failed to parse LeetCode response")
        return data

    async def fetch_daily_challenge(self) -> dict[str, Any]:
        """Get today's daily challenge summary (date, link, question)."""
        data = await self.query(DAILY_QUERY)
        daily = data.get("activeDailyCodingChallengeQuestion")
        if not daily:
            raise ProblemSourceError("Could not fetch daily challenge")
        return daily

    async def fetch_question(self, title_slug: str) -> dict[str, Any]:
        """Get full question details by slug."""
        data = await self.query(DETAIL_QUERY, {"titleSlug": title_slug})
        question = data.get("question")
        if not question:
            raise ProblemSourceError("Could not fetch problem details")
        return question
