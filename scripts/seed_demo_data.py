#!/usr/bin/env python3
"""
Seed a running Baby Care Tracker API with a day of demo records.

Everything lives in process memory on the server, so this needs to be
re-run after every restart.

Usage:
    python scripts/seed_demo_data.py
    python scripts/seed_demo_data.py --base-url http://127.0.0.1:8083 --date 2024-03-05
"""
import argparse
import os
from datetime import date, datetime, time, timedelta

import httpx
from dotenv import load_dotenv


# Load environment variables
load_dotenv()

DEFAULT_BASE_URL = os.getenv(
    "BABYCARE_API_URL",
    f"http://{os.getenv('BABYCARE_API_HOST', '127.0.0.1')}:{os.getenv('BABYCARE_API_PORT', '8083')}",
)


def _at(day: date, hour: int, minute: int = 0) -> str:
    return datetime.combine(day, time(hour, minute)).isoformat()


def demo_records(day: date) -> dict[str, list[dict]]:
    """Build the demo payloads for one day, keyed by API resource."""
    key = day.isoformat()
    previous = day - timedelta(days=1)
    return {
        "feedings": [
            {"datetime": _at(day, 6), "type": "breast", "duration": 20, "side": "left"},
            {"datetime": _at(day, 9, 15), "type": "formula", "quantity": 120},
            {"datetime": _at(day, 12, 30), "type": "mixed", "quantity": 60, "duration": 10, "side": "right"},
        ],
        "sleep": [
            {"startTime": _at(previous, 22), "endTime": _at(day, 5, 30), "quality": "good"},
            {"startTime": _at(day, 10), "endTime": _at(day, 11, 20), "quality": "excellent"},
        ],
        "meals": [
            {"date": key, "mealType": "breakfast", "description": "Porridge with banana"},
            {"date": key, "mealType": "lunch", "description": "Pumpkin puree", "notes": "First time"},
            {"date": key, "mealType": "afternoon_snack", "description": "Apple slices"},
        ],
        "tasks": [
            {"date": key, "title": "Change diapers", "category": "diaper", "completed": True},
            {"date": key, "title": "Evening bath", "category": "bath", "priority": "low"},
            {"date": key, "title": "Pediatrician check-up", "category": "appointment", "priority": "high"},
        ],
        "notes": [
            {"datetime": _at(day, 8), "title": "First smile", "content": "Smiled at the dog.", "category": "milestone"},
            {"datetime": _at(day, 14), "content": "Slight rash on the left cheek.", "category": "concern"},
        ],
    }


def seed(client: httpx.Client, day: date) -> dict[str, int]:
    """
    Post the demo records through the API.

    Args:
        client: HTTP client whose base URL points at the API
        day: Calendar day to place the records on

    Returns:
        Number of records created per resource
    """
    created = {}
    for resource, payloads in demo_records(day).items():
        for payload in payloads:
            response = client.post(f"/api/{resource}", json=payload)
            response.raise_for_status()
        created[resource] = len(payloads)
    return created


def main():
    """Seed the API with demo data."""
    parser = argparse.ArgumentParser(description="Seed the Baby Care Tracker API with demo records")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="API base URL")
    parser.add_argument("--date", default=None, help="Day to seed (YYYY-MM-DD), defaults to today")
    args = parser.parse_args()

    day = date.fromisoformat(args.date) if args.date else date.today()

    print("=" * 60)
    print("Baby Care Tracker Demo Seeding Script")
    print("=" * 60)
    print(f"\nAPI: {args.base_url}")
    print(f"Day: {day.isoformat()}\n")

    with httpx.Client(base_url=args.base_url, timeout=10.0) as client:
        try:
            created = seed(client, day)
        except httpx.HTTPError as e:
            print(f"  ERROR: {e}")
            raise SystemExit(1)

    for resource, count in created.items():
        print(f"  {resource}: {count} created")

    print("\n" + "=" * 60)
    print(f"Complete! Total records: {sum(created.values())}")
    print("=" * 60)


if __name__ == "__main__":
    main()
