"""Parser for extracting statement text from Codeforces problem pages."""

from typing import Optional

from bs4 import BeautifulSoup
from loguru import logger

from gitexpress.domain.exceptions import ParsingError
from gitexpress.domain.models.parsing import ProblemPageData
from gitexpress.infrastructure.codeforces_client import CodeforcesApiClient

from .interfaces import HTTPClientProtocol


class ProblemPageParser:
    """Parser for extracting data from Codeforces problem HTML pages."""

    def __init__(self, http_client: Optional[HTTPClientProtocol] = None):
        """
        Initialize parser.

        Args:
            http_client: Async HTTP client instance
        """
        self.http_client = http_client

    async def parse_problem_page(self, contest_id: int, index: str) -> ProblemPageData:
        """
        Fetch and parse a problem page.

        Raises:
            ParsingError: If the page cannot be fetched or parsed
        """
        url = CodeforcesApiClient.build_problem_url(contest_id, index)
        logger.debug(f"Parsing problem page: {url}")

        if not self.http_client:
            raise ParsingError(f"HTTP client not initialized for {url}")

        try:
            html = await self.http_client.get_text(url)
        except Exception as e:
            raise ParsingError(f"Failed to fetch problem page {url}: {e}") from e

        return self.parse_html(html, contest_id, index)

    def parse_html(self, html: str, contest_id: int, index: str) -> ProblemPageData:
        soup = BeautifulSoup(html, "lxml")

        if soup.find("div", class_="problem-statement") is None:
            raise ParsingError(f"No problem statement found for {contest_id}{index}")

        return ProblemPageData(
            contest_id=contest_id,
            index=index,
            description=self._extract_description(soup),
            time_limit=self._extract_limit(soup, "time-limit", "time limit per test"),
            memory_limit=self._extract_limit(soup, "memory-limit", "memory limit per test"),
            sample_tests=self._extract_sample_tests(soup),
        )

    def _extract_limit(self, soup: BeautifulSoup, css_class: str, label: str) -> Optional[str]:
        """Extract a header limit, e.g. "2 seconds" from "time limit per test2 seconds"."""
        header = soup.select_one("div.problem-statement > div.header")
        if not header:
            return None

        limit = header.find("div", class_=css_class)
        if not limit:
            return None

        text = limit.get_text(strip=True)
        if label in text.lower():
            text = text.lower().replace(label, "").strip()
        return text

    def _extract_description(self, soup: BeautifulSoup) -> Optional[str]:
        """Extract the statement sections, without the header."""
        problem_statement = soup.find("div", class_="problem-statement")
        if not problem_statement:
            return None

        text_parts = []

        # The legend is the first direct child div without a class
        for div in problem_statement.find_all("div", recursive=False):
            if not div.get("class"):
                legend = div.get_text(separator="\n", strip=True)
                if legend:
                    text_parts.append(legend)
                break

        for section_class in ["input-specification", "output-specification", "note"]:
            section = problem_statement.find("div", class_=section_class)
            if section:
                section_text = section.get_text(separator="\n", strip=True)
                if section_text:
                    text_parts.append(section_text)

        if text_parts:
            return "\n\n".join(text_parts)

        return problem_statement.get_text(separator="\n", strip=True)

    def _extract_sample_tests(self, soup: BeautifulSoup) -> Optional[str]:
        """Return sample input/output pairs as plain text."""
        sample = soup.find("div", class_="sample-test")
        if not sample:
            return None

        parts = []
        for block in sample.find_all("div", class_=["input", "output"]):
            pre = block.find("pre")
            if not pre:
                continue
            title = block.find("div", class_="title")
            label = title.get_text(strip=True) if title else ""
            body = pre.get_text(separator="\n", strip=True)
            parts.append(f"{label}\n{body}")

        return "\n\n".join(parts) if parts else None
