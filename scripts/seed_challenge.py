#!/usr/bin/env python3
"""
Seed a demo 20-day study challenge into the Study Tracker API.

Pattern per day:
  - flashcards: steady ~30/day with a lighter day every 4th day
  - hours: 4.0 on study days, 2.5 on the lighter days
  - percent complete: climbs ~5% per day, capped at 100

Usage examples:
  - Against a local dev server:
      python scripts/seed_challenge.py --base-url http://localhost:8000
  - Only the first 12 days, ending today:
      python scripts/seed_challenge.py --base-url http://localhost:8000 --days 12
"""

from __future__ import annotations

import argparse
import datetime as dt
import sys
from typing import Tuple

import requests


def day_plan(index: int) -> Tuple[int, float, int]:
    """Return (flashcards, hours, percent) for the 0-based challenge day."""
    light = index % 4 == 3
    cards = 18 if light else 30
    hours = 2.5 if light else 4.0
    percent = min(100, 5 * (index + 1))
    return cards, hours, percent


def post_json(base_url: str, path: str, payload: dict) -> dict:
    url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    r = requests.post(url, json=payload, timeout=15)
    if r.status_code >= 300:
        raise RuntimeError(f"{path} -> HTTP {r.status_code}: {r.text}")
    return r.json()


def main() -> None:
    ap = argparse.ArgumentParser(description="Seed daily progress for a demo challenge")
    ap.add_argument("--base-url", required=True, help="API base URL (e.g., http://localhost:8000)")
    ap.add_argument("--days", type=int, default=20, help="Number of days to seed, ending today")
    args = ap.parse_args()

    if args.days < 1:
        print("--days must be >= 1", file=sys.stderr)
        sys.exit(2)

    today = dt.date.today()
    start = today - dt.timedelta(days=args.days - 1)

    for i in range(args.days):
        cards, hours, percent = day_plan(i)
        post_json(
            args.base_url,
            "daily-progress",
            {
                "date": (start + dt.timedelta(days=i)).isoformat(),
                "flashcards_done": cards,
                "hours_studied": hours,
                "percent_complete": percent,
            },
        )

    summary = requests.get(f"{args.base_url.rstrip('/')}/daily-progress/summary", timeout=15).json()["summary"]
    print(
        f"Seed complete: {args.days} days, {summary['total_flashcards']} cards, "
        f"{summary['total_hours']:.1f}h, {summary['current_percent']}%"
    )


if __name__ == "__main__":
    main()
