"""API routes for daily problems."""

from datetime import date as date_type

from litestar import Controller, get
from litestar.status_codes import HTTP_200_OK
from loguru import logger

from gitexpress.api.schemas.problem import ProblemResponse
from gitexpress.domain.exceptions import ValidationError
from gitexpress.domain.models import ProblemRecord
from gitexpress.services import CodeforcesDailyService, LeetCodeDailyService


def _to_response(record: ProblemRecord) -> ProblemResponse:
    return ProblemResponse(
        source=record.source.value,
        problem_id=record.problem_id,
        title=record.title,
        difficulty=record.difficulty_label,
        tags=list(record.tags),
        url=record.external_url,
        description=record.description_text,
        test_cases=record.test_cases_text,
        hints=list(record.hints),
        date=record.date,
    )


class DailyController(Controller):
    """Controller for daily problem lookups."""

    path = "/daily"

    @get("/leetcode", status_code=HTTP_200_OK)
    async def get_leetcode(self, leetcode_service: LeetCodeDailyService) -> ProblemResponse:
        """Today's LeetCode daily challenge."""
        logger.debug("API request for LeetCode daily")
        return _to_response(await leetcode_service.get_daily_problem())

    @get("/codeforces", status_code=HTTP_200_OK)
    async def get_codeforces(
        self,
        codeforces_service: CodeforcesDailyService,
        date: str | None = None,
    ) -> ProblemResponse:
        """
        Codeforces problem of the day.

        Query parameters:
        - date: optional ISO date (YYYY-MM-DD), defaults to today (UTC)
        """
        logger.debug(f"API request for Codeforces daily: date={date}")

        if date is not None:
            try:
                date_type.fromisoformat(date)
            except ValueError as e:
                raise ValidationError(f"Invalid date {date!r}, expected YYYY-MM-DD") from e

        return _to_response(await codeforces_service.get_daily_problem(date))
