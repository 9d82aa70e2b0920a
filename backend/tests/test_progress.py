import pytest

from app.core.constants import WEEKDAYS
from app.core.progress import (
    apply_progress,
    completion,
    completion_rate,
    compute_streak,
    dashboard_stats,
    empty_week,
    format_days,
    normalize_target_days,
)


def week(**done):
    progress = empty_week()
    progress.update(done)
    return progress


def test_streak_stops_at_first_gap():
    assert compute_streak(week(monday=True, tuesday=True, thursday=True)) == 2


def test_streak_zero_without_monday():
    progress = week(tuesday=True, wednesday=True, thursday=True, friday=True, saturday=True)
    assert compute_streak(progress) == 0


def test_streak_full_week():
    assert compute_streak({day: True for day in WEEKDAYS}) == 6


def test_apply_progress_only_touches_one_day():
    before = week(monday=True, friday=True)
    after, streak = apply_progress(before, "tuesday", True)
    assert after == week(monday=True, tuesday=True, friday=True)
    assert streak == 2
    # input map left alone
    assert before["tuesday"] is False


def test_apply_progress_is_idempotent():
    once, s1 = apply_progress(empty_week(), "tuesday", True)
    twice, s2 = apply_progress(once, "tuesday", True)
    assert once == twice
    assert s1 == s2 == 0


def test_apply_progress_fills_missing_keys():
    after, streak = apply_progress({"monday": True}, "saturday", False)
    assert set(after) == set(WEEKDAYS)
    assert streak == 1


def test_apply_progress_rejects_sunday():
    with pytest.raises(ValueError):
        apply_progress(empty_week(), "sunday", True)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, list(WEEKDAYS)),
        ("monday", list(WEEKDAYS)),
        ([], []),
        (["sunday"], list(WEEKDAYS)),
        (["friday", "Monday", "friday"], ["monday", "friday"]),
    ],
)
def test_normalize_target_days(raw, expected):
    assert normalize_target_days(raw) == expected


def test_completion_specific_days_ignores_other_days():
    progress = week(monday=True, tuesday=True, wednesday=True)
    assert completion("specific_days", ["monday", "wednesday", "friday"], 6, progress) == (2, 3)


def test_completion_days_per_week_counts_any_day():
    progress = week(tuesday=True, saturday=True)
    assert completion("days_per_week", ["monday"], 4, progress) == (2, 4)


def test_completion_rate_rounds_half_up():
    assert completion_rate(1, 8) == 13
    assert completion_rate(2, 3) == 67
    assert completion_rate(0, 0) == 0


def test_format_days():
    assert format_days(0) == "0 days"
    assert format_days(1) == "1 day"
    assert format_days(6) == "6 days"


class _Row:
    def __init__(self, progress, done, total, streak):
        self.weekly_progress = progress
        self.completed_days = done
        self.target_total = total
        self.current_streak = streak


def test_dashboard_stats_aggregates():
    rows = [
        _Row(week(monday=True, tuesday=True), 2, 4, 2),
        _Row(empty_week(), 0, 2, 0),
        # over-achiever capped at their target
        _Row({day: True for day in WEEKDAYS}, 6, 3, 6),
    ]
    stats = dashboard_stats(rows)
    assert stats == {
        "total_people": 3,
        "active_goals": 2,
        "week_completion": "56%",
        "streak_record": "6 days",
    }


def test_dashboard_stats_empty():
    assert dashboard_stats([]) == {
        "total_people": 0,
        "active_goals": 0,
        "week_completion": "0%",
        "streak_record": "0 days",
    }


def test_completion_specific_days_with_no_days_chosen():
    done, total = completion("specific_days", [], 6, week(monday=True))
    assert (done, total) == (0, 0)
    assert completion_rate(done, total) == 0
