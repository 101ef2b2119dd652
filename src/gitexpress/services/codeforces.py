"""Service for the Codeforces problem of the day."""

import json
from dataclasses import replace
from pathlib import Path
from typing import Any, Optional

from loguru import logger

from gitexpress.domain.models import ProblemRecord, ProblemSource
from gitexpress.domain.selection import pick_daily, today_iso
from gitexpress.infrastructure.codeforces_client import CodeforcesApiClient
from gitexpress.infrastructure.parsers import ProblemPageParserProtocol


def build_problem_record(problem: dict[str, Any], date: str) -> ProblemRecord:
    contest_id = problem.get("contestId")
    index = problem.get("index", "")

    return ProblemRecord(
        source=ProblemSource.CODEFORCES,
        problem_id=f"{contest_id}{index}",
        title=problem.get("name", ""),
        difficulty_label=str(problem.get("rating") or "Unrated"),
        tags=tuple(problem.get("tags") or []),
        external_url=CodeforcesApiClient.build_problem_url(contest_id, index),
        date=date,
        contest_id=contest_id,
        index=index,
        rating=problem.get("rating"),
    )


def format_summary(record: ProblemRecord) -> dict[str, Any]:
    """Compact JSON-ready view of a Codeforces problem."""
    return {
        "platform": ProblemSource.CODEFORCES.value,
        "contestId": record.contest_id,
        "index": record.index,
        "title": record.title,
        "difficulty": record.rating or "Unrated",
        "tags": list(record.tags),
        "url": record.external_url,
    }


class CodeforcesDailyService:
    """Picks the same Codeforces problem for everyone on a given date."""

    def __init__(
        self,
        api_client: CodeforcesApiClient,
        page_parser: Optional[ProblemPageParserProtocol] = None,
    ):
        """
        Initialize service.

        Args:
            api_client: Codeforces API client
            page_parser: Optional parser used to fetch the statement text
        """
        self.api_client = api_client
        self.page_parser = page_parser

    async def get_daily_problem(self, date: str | None = None) -> ProblemRecord:
        """
        Get the daily problem for ``date`` (today in UTC by default).

        The statement is fetched best-effort; if the page cannot be parsed
        the record is returned without a description.
        """
        if date is None:
            date = today_iso()
        logger.info(f"Fetching Codeforces daily problem for {date}")

        problems = await self.api_client.fetch_problemset_problems()
        record = build_problem_record(pick_daily(problems, date), date)

        if self.page_parser is not None and record.contest_id is not None:
            try:
                page = await self.page_parser.parse_problem_page(record.contest_id, record.index)
                record = replace(
                    record,
                    description_text=page.description or record.description_text,
                    test_cases_text=page.sample_tests or record.test_cases_text,
                    time_limit=page.time_limit,
                    memory_limit=page.memory_limit,
                )
            except Exception as e:
                logger.warning(f"Failed to parse problem page data: {e}")

        logger.info(f"Codeforces daily: {record.problem_id} {record.title} ({record.difficulty_label})")
        return record

    async def save_to_file(self, path: Path = Path("codeforces-daily.json")) -> ProblemRecord:
        record = await self.get_daily_problem()

        Path(path).write_text(
            json.dumps(format_summary(record), indent=2, ensure_ascii=False), encoding="utf-8"
        )
        logger.info(f"Saved to {path}")
        return record

