#!/usr/bin/env python3
"""
Seed a demo week into the habit tracker API.

Creates a handful of people with different target types, ticks off the days
each has already done this week, and posts a couple of announcements.

Usage examples:
  - Against a local backend:
      python scripts/seed_demo_week.py --base-url http://localhost:8000
  - Up to a given weekday (default: today, Sunday counts as the full week):
      python scripts/seed_demo_week.py --base-url http://localhost:8000 --through thursday
"""

from __future__ import annotations

import argparse
import datetime as dt
import sys
from typing import Dict, List

try:
    import requests  # type: ignore
except Exception as exc:  # pragma: no cover
    print("This script requires the 'requests' package.\nInstall with: pip install requests", file=sys.stderr)
    raise


WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday"]

PEOPLE: List[Dict] = [
    {"name": "Alex", "goal": "Run 5k", "emoji": "🏃", "targetType": "specific_days",
     "targetDays": ["monday", "wednesday", "friday"]},
    {"name": "Sam", "goal": "Read 30 minutes", "emoji": "📚", "targetType": "days_per_week",
     "targetCount": 4},
    {"name": "Jordan", "goal": "No sugar", "targetType": "specific_days"},
]

# Which days each person (by index) skipped
SKIPPED = {0: {"wednesday"}, 1: {"tuesday", "thursday"}, 2: set()}

ANNOUNCEMENTS = [
    {"title": "Welcome", "content": "New week, fresh streaks.", "author": "Coach"},
    {"title": "Check-in Friday", "content": "Short group check-in after lunch.",
     "author": "Coach", "isImportant": True},
]


def request_json(method: str, base_url: str, path: str, payload: dict) -> dict:
    url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    r = requests.request(method, url, json=payload, timeout=15)
    if r.status_code >= 300:
        raise RuntimeError(f"{method} {path} -> HTTP {r.status_code}: {r.text}")
    return r.json()


def days_through(last_day: str) -> List[str]:
    return WEEKDAYS[: WEEKDAYS.index(last_day) + 1]


def default_through(today: dt.date) -> str:
    # Sunday is not tracked; treat it as the end of the week
    return WEEKDAYS[min(today.weekday(), len(WEEKDAYS) - 1)]


def seed(base_url: str, through: str) -> None:
    for idx, payload in enumerate(PEOPLE):
        person = request_json("POST", base_url, "api/people", payload)
        for day in days_through(through):
            if day in SKIPPED.get(idx, set()):
                continue
            person = request_json(
                "PATCH",
                base_url,
                "api/people/progress",
                {"personId": person["id"], "day": day, "completed": True},
            )
        print(f"{person['name']}: streak {person['currentStreak']}, {person['completionRate']}% of target")

    for payload in ANNOUNCEMENTS:
        request_json("POST", base_url, "api/announcements", payload)


def main() -> None:
    ap = argparse.ArgumentParser(description="Seed demo people, progress and announcements")
    ap.add_argument("--base-url", required=True, help="API base URL (e.g., http://localhost:8000)")
    ap.add_argument("--through", choices=WEEKDAYS, default=None, help="Last weekday to mark (default: today)")
    args = ap.parse_args()

    through = args.through or default_through(dt.date.today())
    seed(args.base_url, through)

    print(f"Seed complete: {len(PEOPLE)} people through {through}, {len(ANNOUNCEMENTS)} announcements.")


if __name__ == "__main__":
    main()
