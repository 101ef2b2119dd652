"""Value objects for parsed page data."""

from dataclasses import dataclass


@dataclass
class ProblemPageData:
    """Data extracted from a Codeforces problem page."""

    contest_id: int
    index: str
    description: str | None = None
    time_limit: str | None = None
    memory_limit: str | None = None
    sample_tests: str | None = None
