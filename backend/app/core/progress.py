import math
from typing import Iterable, Mapping

from app.core.constants import (
    MAX_TARGET_COUNT,
    TARGET_SPECIFIC_DAYS,
    WEEKDAYS,
)


def empty_week() -> dict[str, bool]:
    """Fresh progress map with every tracked weekday unchecked."""
    return {day: False for day in WEEKDAYS}


def normalize_target_days(days) -> list[str]:
    """
    Clean a client-supplied list of weekday names.

    Anything that is not a list of known weekdays falls back to the
    full week; an empty list stays empty. Duplicates are dropped and the
    result follows weekday order.
    Example: ['friday', 'Monday', 'friday'] -> ['monday', 'friday']
    """
    if not isinstance(days, (list, tuple)):
        return list(WEEKDAYS)
    wanted = set()
    for d in days:
        if not isinstance(d, str) or d.strip().lower() not in WEEKDAYS:
            return list(WEEKDAYS)
        wanted.add(d.strip().lower())
    return [day for day in WEEKDAYS if day in wanted]


def compute_streak(progress: Mapping[str, bool]) -> int:
    """
    Count completed days from Monday up to the first gap.

    This is a Monday-anchored prefix, not a rolling streak:
      {monday: T, tuesday: T, wednesday: F, thursday: T} -> 2
      {monday: F, tuesday: T, ...} -> 0
    """
    streak = 0
    for day in WEEKDAYS:
        if progress.get(day):
            streak += 1
        else:
            break
    return streak


def apply_progress(
    progress: Mapping[str, bool] | None, day: str, completed: bool
) -> tuple[dict[str, bool], int]:
    """Set one day's flag and return (new progress map, recomputed streak)."""
    if day not in WEEKDAYS:
        raise ValueError(f"Unknown weekday: {day!r}")
    updated = empty_week()
    for d in WEEKDAYS:
        updated[d] = bool((progress or {}).get(d, False))
    updated[day] = bool(completed)
    return updated, compute_streak(updated)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def completion(
    target_type: str,
    target_days: Iterable[str] | None,
    target_count: int | None,
    progress: Mapping[str, bool],
) -> tuple[int, int]:
    """
    Return (completed_days, target_total) for one person.

    specific_days counts only the chosen days; days_per_week counts any
    completed day against targetCount.
    """
    if target_type == TARGET_SPECIFIC_DAYS:
        wanted = set(target_days or ())
        chosen = [d for d in WEEKDAYS if d in wanted]
        done = sum(1 for d in chosen if progress.get(d))
        return done, len(chosen)
    done = sum(1 for d in WEEKDAYS if progress.get(d))
    return done, target_count or MAX_TARGET_COUNT


def completion_rate(completed_days: int, target_total: int) -> int:
    """Percentage of the weekly target reached, e.g. 3 of 4 -> 75."""
    if target_total <= 0:
        return 0
    return _round_half_up(completed_days * 100 / target_total)


def format_days(n: int) -> str:
    return "1 day" if n == 1 else f"{n} days"


def dashboard_stats(people) -> dict:
    """
    Aggregate figures for the dashboard header.

    `people` are read models exposing weekly_progress, completed_days,
    target_total and current_streak.
    """
    people = list(people)
    done = 0
    total = 0
    active = 0
    best = 0
    for p in people:
        done += min(p.completed_days, p.target_total)
        total += p.target_total
        if any(p.weekly_progress.values()):
            active += 1
        best = max(best, p.current_streak)
    return {
        "total_people": len(people),
        "active_goals": active,
        "week_completion": f"{completion_rate(done, total)}%",
        "streak_record": format_days(best),
    }
