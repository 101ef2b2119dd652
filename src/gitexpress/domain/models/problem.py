"""Problem records fetched from daily-problem sources."""

from dataclasses import dataclass, field
from enum import Enum


class ProblemSource(str, Enum):
    """Where a problem comes from."""

    LEETCODE = "LeetCode"
    CODEFORCES = "Codeforces"


@dataclass(frozen=True)
class CodeSnippet:
    """Starter template for one language."""

    lang: str
    lang_slug: str
    code: str


@dataclass(frozen=True)
class ProblemRecord:
    """A single daily problem, fully built before use."""

    source: ProblemSource
    title: str
    difficulty_label: str
    external_url: str
    description_text: str = ""
    test_cases_text: str | None = None
    tags: tuple[str, ...] = ()
    hints: tuple[str, ...] = ()
    problem_id: str = ""
    date: str | None = None
    likes: int | None = None
    dislikes: int | None = None
    contest_id: int | None = None
    index: str | None = None
    rating: int | None = None
    time_limit: str | None = None
    memory_limit: str | None = None
    code_snippets: tuple[CodeSnippet, ...] = field(default_factory=tuple)

    def snippet_for(self, lang_slug: str) -> CodeSnippet | None:
        """Return the starter template for ``lang_slug`` if the source has one."""
        for snippet in self.code_snippets:
            if snippet.lang_slug == lang_slug:
                return snippet
        return None
