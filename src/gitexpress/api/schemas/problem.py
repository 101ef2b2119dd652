"""Pydantic schemas for daily problem endpoints."""

from pydantic import BaseModel


class ProblemResponse(BaseModel):
    """Response containing a daily problem."""

    source: str
    problem_id: str
    title: str
    difficulty: str
    tags: list[str]
    url: str
    description: str
    test_cases: str | None = None
    hints: list[str] = []
    date: str | None = None
