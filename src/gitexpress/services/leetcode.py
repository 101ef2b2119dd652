"""Service for LeetCode's daily coding challenge."""

import json
from pathlib import Path
from typing import Any

from loguru import logger

from gitexpress.domain.exceptions import ProblemSourceError
from gitexpress.domain.markup import html_to_text
from gitexpress.domain.models import CodeSnippet, ProblemRecord, ProblemSource
from gitexpress.infrastructure.leetcode_client import LEETCODE_URL, LeetCodeClient

DIVIDER = "═" * 70
SUB_DIVIDER = "─" * 70

DIFFICULTY_EMOJI = {
    "Easy": "🟢",
    "Medium": "🟡",
    "Hard": "🔴",
}


def difficulty_emoji(difficulty: str) -> str:
    return DIFFICULTY_EMOJI.get(difficulty, "⚪")


def build_problem_record(daily: dict[str, Any], details: dict[str, Any]) -> ProblemRecord:
    """Fold the daily summary and question details into a ``ProblemRecord``."""
    snippets = tuple(
        CodeSnippet(lang=s.get("lang", ""), lang_slug=s.get("langSlug", ""), code=s.get("code", ""))
        for s in details.get("codeSnippets") or []
    )

    return ProblemRecord(
        source=ProblemSource.LEETCODE,
        problem_id=str(details.get("questionFrontendId", "")),
        title=details.get("title", ""),
        difficulty_label=details.get("difficulty", ""),
        tags=tuple(tag["name"] for tag in details.get("topicTags") or []),
        description_text=html_to_text(details.get("content")),
        test_cases_text=details.get("exampleTestcases") or details.get("sampleTestCase") or None,
        hints=tuple(html_to_text(hint) for hint in details.get("hints") or []),
        external_url=f"{LEETCODE_URL}{daily.get('link', '')}",
        date=daily.get("date"),
        likes=details.get("likes"),
        dislikes=details.get("dislikes"),
        code_snippets=snippets,
    )


def format_report(record: ProblemRecord) -> str:
    """Human-readable text report of a LeetCode problem."""
    lines = [
        "",
        DIVIDER,
        f"🎯 LEETCODE DAILY CHALLENGE - {record.date}",
        DIVIDER,
        "",
        f"📌 Problem #{record.problem_id}: {record.title}",
        f"🔗 Link: {record.external_url}",
        f"📊 Difficulty: {difficulty_emoji(record.difficulty_label)} {record.difficulty_label}",
        f"👍 Likes: {record.likes} | 👎 Dislikes: {record.dislikes}",
        f"🏷️  Topics: {', '.join(record.tags)}",
        "",
        SUB_DIVIDER,
        "📝 PROBLEM DESCRIPTION",
        SUB_DIVIDER,
        record.description_text,
        "",
        SUB_DIVIDER,
        "🧪 TEST CASES",
        SUB_DIVIDER,
        record.test_cases_text or "No test cases available",
        "",
    ]

    if record.hints:
        lines += [SUB_DIVIDER, "💡 HINTS", SUB_DIVIDER]
        lines += [f"{i}. {hint}" for i, hint in enumerate(record.hints, start=1)]
        lines.append("")

    lines += [SUB_DIVIDER, "💻 CODE TEMPLATES (All Languages)", SUB_DIVIDER]
    for snippet in record.code_snippets:
        lines += ["", f"┌─── {snippet.lang} ───", snippet.code, "└" + "─" * 50]

    lines += ["", DIVIDER, ""]
    return "\n".join(lines)


def format_data(record: ProblemRecord) -> dict[str, Any]:
    """JSON view of a LeetCode problem, as written to ``leetcode-daily.json``."""
    return {
        "date": record.date,
        "link": record.external_url,
        "problem": {
            "id": record.problem_id,
            "title": record.title,
            "difficulty": record.difficulty_label,
            "description": record.description_text,
            "topics": list(record.tags),
            "likes": record.likes,
            "dislikes": record.dislikes,
        },
        "testCases": record.test_cases_text,
        "hints": list(record.hints),
        "codeSnippets": [
            {"lang": s.lang, "langSlug": s.lang_slug, "code": s.code} for s in record.code_snippets
        ],
    }


class LeetCodeDailyService:
    """Fetches and formats today's LeetCode challenge."""

    def __init__(self, client: LeetCodeClient):
        self.client = client

    async def get_daily_problem(self) -> ProblemRecord:
        logger.info("Fetching today's LeetCode challenge")

        daily = await self.client.fetch_daily_challenge()
        title_slug = (daily.get("question") or {}).get("titleSlug")
        if not title_slug:
            raise ProblemSourceError("Daily challenge has no question slug")

        details = await self.client.fetch_question(title_slug)

        record = build_problem_record(daily, details)
        logger.info(f"LeetCode daily: #{record.problem_id} {record.title} ({record.difficulty_label})")
        return record

    async def save_to_file(
        self,
        text_path: Path = Path("leetcode-daily.txt"),
        json_path: Path = Path("leetcode-daily.json"),
    ) -> ProblemRecord:
        """Write the text report and a JSON copy of today's problem."""
        record = await self.get_daily_problem()

        Path(text_path).write_text(format_report(record), encoding="utf-8")
        logger.info(f"Saved to {text_path}")

        Path(json_path).write_text(
            json.dumps(format_data(record), indent=2, ensure_ascii=False), encoding="utf-8"
        )
        logger.info(f"Saved to {json_path}")
        return record
