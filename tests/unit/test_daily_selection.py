"""Unit tests for deterministic daily selection."""

import pytest

from gitexpress.domain.exceptions import EmptyCandidateListError
from gitexpress.domain.selection import date_seed, pick_daily, pick_daily_index


def test_seed_is_sum_of_code_points():
    """Seed for 2024-01-15 is eight digits plus two dashes."""
    # digits 2,0,2,4,0,1,1,5 -> 8 * 48 + 15; dashes -> 2 * 45
    assert date_seed("2024-01-15") == 489


def test_index_for_known_date():
    assert pick_daily_index(5000, "2024-01-15") == 489
    assert pick_daily_index(100, "2024-01-15") == 89


def test_same_date_same_pick():
    candidates = [f"problem-{i}" for i in range(37)]

    first = pick_daily(candidates, "2025-03-09")
    second = pick_daily(candidates, "2025-03-09")

    assert first == second


def test_pick_ignores_candidate_contents():
    """Only the sequence length matters, not what is in it."""
    a = list(range(10))
    b = ["x"] * 3 + ["y"] * 7

    assert a.index(pick_daily(a, "2024-01-15")) == pick_daily_index(len(b), "2024-01-15")


def test_permuted_digits_collide():
    assert date_seed("2024-01-15") == date_seed("2024-05-11")


def test_empty_candidates_raise():
    with pytest.raises(EmptyCandidateListError):
        pick_daily([], "2024-01-15")


def test_default_date_is_today(monkeypatch):
    monkeypatch.setattr("gitexpress.domain.selection.today_iso", lambda: "2024-01-15")

    assert pick_daily(list(range(5000))) == 489


def test_empty_date_string_is_not_today(monkeypatch):
    monkeypatch.setattr("gitexpress.domain.selection.today_iso", lambda: "2024-01-15")

    assert pick_daily_index(100, "") == 0
    assert pick_daily(list(range(100)), "") == 0


def test_today_is_resolved_once(monkeypatch):
    days = iter(["2024-01-15", "2024-01-16"])
    monkeypatch.setattr("gitexpress.domain.selection.today_iso", lambda: next(days))

    assert pick_daily(list(range(5000))) == 489
    assert next(days) == "2024-01-16"
