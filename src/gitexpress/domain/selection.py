"""Deterministic "problem of the day" selection."""

from collections.abc import Sequence
from datetime import datetime, timezone
from typing import TypeVar

from loguru import logger

from .exceptions import EmptyCandidateListError

T = TypeVar("T")


def today_iso() -> str:
    """Current UTC date as ``YYYY-MM-DD``."""
    return datetime.now(timezone.utc).date().isoformat()


def date_seed(date: str) -> int:
    """Sum of the code points of every character in ``date``."""
    return sum(ord(ch) for ch in date)


def pick_daily_index(length: int, date: str | None = None) -> int:
    """Index of the daily pick in a sequence of ``length`` items."""
    if length <= 0:
        raise EmptyCandidateListError()

    if date is None:
        date = today_iso()
    return date_seed(date) % length


def pick_daily(candidates: Sequence[T], date: str | None = None) -> T:
    """
    Pick one candidate for the given date.

    The same date and sequence length always give the same index; the
    candidates themselves are never inspected.

    Raises:
        EmptyCandidateListError: If ``candidates`` is empty
    """
    if date is None:
        date = today_iso()

    index = pick_daily_index(len(candidates), date)
    logger.debug(f"Daily pick for {date}: index {index} of {len(candidates)}")
    return candidates[index]
