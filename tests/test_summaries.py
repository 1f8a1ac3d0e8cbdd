"""
Unit tests for the dashboard summary services and routes.

Usage:
    pytest tests/test_summaries.py -v
"""
from datetime import date, datetime, timedelta

from server.babycare_api.models import (
    FeedingCreate,
    MealCreate,
    NoteCreate,
    SleepSessionCreate,
    TaskCreate,
)
from server.babycare_api.services.summaries import (
    build_daily_summary,
    build_weekly_summary,
    hours_until_next_feeding,
)

USER = "default-user"


class TestHoursUntilNextFeeding:
    """Test the next-feeding countdown."""

    def test_no_feeding_logged(self):
        assert hours_until_next_feeding(None, datetime(2024, 3, 5, 12)) == 0

    def test_just_fed(self):
        now = datetime(2024, 3, 5, 12, 0)
        assert hours_until_next_feeding(now, now) == 3

    def test_partial_hour_rounds_up(self):
        """1h10m after a feeding, 1h50m remain, shown as 2."""
        last = datetime(2024, 3, 5, 12, 0)
        assert hours_until_next_feeding(last, last + timedelta(hours=1, minutes=10)) == 2

    def test_overdue_is_zero(self):
        last = datetime(2024, 3, 5, 12, 0)
        assert hours_until_next_feeding(last, last + timedelta(hours=5)) == 0

    def test_custom_interval(self):
        last = datetime(2024, 3, 5, 12, 0)
        assert hours_until_next_feeding(last, last + timedelta(hours=1), interval_hours=4) == 3


class TestBuildDailySummary:
    """Test the dashboard aggregate."""

    def test_counts(self, store):
        day = date(2024, 3, 5)
        store.feedings.create(USER, FeedingCreate(datetime=datetime(2024, 3, 5, 6), type="breast"))
        last = store.feedings.create(USER, FeedingCreate(datetime=datetime(2024, 3, 5, 10), type="formula"))
        store.sleep_sessions.create(
            USER,
            SleepSessionCreate(start_time=datetime(2024, 3, 5, 13), end_time=datetime(2024, 3, 5, 14, 30)),
        )
        store.sleep_sessions.create(USER, SleepSessionCreate(start_time=datetime(2024, 3, 5, 19)))
        store.tasks.create(USER, TaskCreate(date="2024-03-05", title="Bath", category="bath", completed=True))
        store.tasks.create(USER, TaskCreate(date="2024-03-05", title="Diaper", category="diaper"))

        sessions = store.sleep_sessions.list(USER, date="2024-03-05")
        summary = build_daily_summary(
            day,
            feedings=store.feedings.list(USER, date="2024-03-05"),
            sleep_sessions=sessions,
            tasks=store.tasks.list(USER, date="2024-03-05"),
            recent_notes=[],
            now=datetime(2024, 3, 5, 11, 30),
            ongoing_sleep=sessions,
        )

        assert summary.date == "2024-03-05"
        assert summary.feedings_count == 2
        assert summary.last_feeding_at == last.datetime
        assert summary.next_feeding_in_hours == 2
        assert summary.sleep_sessions_count == 2
        assert summary.total_sleep_minutes == 90
        assert summary.ongoing_sleep_sessions == 1
        assert summary.tasks_completed == 1
        assert summary.tasks_total == 2

    def test_latest_feeding_from_previous_day(self):
        from server.babycare_api.models import Feeding

        yesterday = Feeding(
            id="f1",
            user_id=USER,
            created_at=datetime(2024, 3, 4, 23),
            datetime=datetime(2024, 3, 4, 23, 0),
            type="formula",
        )

        summary = build_daily_summary(
            date(2024, 3, 5),
            feedings=[],
            sleep_sessions=[],
            tasks=[],
            recent_notes=[],
            now=datetime(2024, 3, 5, 0, 30),
            latest_feeding=yesterday,
        )

        assert summary.feedings_count == 0
        assert summary.next_feeding_in_hours == 2

    def test_empty_day(self):
        summary = build_daily_summary(
            date(2024, 3, 5), feedings=[], sleep_sessions=[], tasks=[], recent_notes=[], now=datetime(2024, 3, 5, 12)
        )
        assert summary.last_feeding_at is None
        assert summary.next_feeding_in_hours == 0
        assert summary.tasks_total == 0


class TestBuildWeeklySummary:
    """Test the seven-day progress aggregate."""

    def test_window_and_totals(self, store):
        store.feedings.create(USER, FeedingCreate(datetime=datetime(2024, 3, 5, 6), type="breast"))
        store.feedings.create(USER, FeedingCreate(datetime=datetime(2024, 3, 5, 9), type="breast"))
        store.feedings.create(USER, FeedingCreate(datetime=datetime(2024, 3, 1, 9), type="formula"))
        # Outside the window
        store.feedings.create(USER, FeedingCreate(datetime=datetime(2024, 2, 20, 9), type="mixed"))
        store.sleep_sessions.create(
            USER,
            SleepSessionCreate(start_time=datetime(2024, 3, 4, 21), end_time=datetime(2024, 3, 5, 6)),
        )
        # Still sleeping, not counted
        store.sleep_sessions.create(USER, SleepSessionCreate(start_time=datetime(2024, 3, 5, 13)))
        store.meals.create(USER, MealCreate(date="2024-03-03", meal_type="lunch", description="Rice"))

        summary = build_weekly_summary(
            date(2024, 3, 5),
            feedings=store.feedings.list(USER),
            sleep_sessions=store.sleep_sessions.list(USER),
            meals=store.meals.list(USER),
        )

        assert summary.start == "2024-02-28"
        assert summary.end == "2024-03-05"
        assert [d.date for d in summary.days][0] == "2024-02-28"
        assert len(summary.days) == 7

        by_date = {d.date: d for d in summary.days}
        assert by_date["2024-03-05"].feedings == 2
        assert by_date["2024-03-05"].weekday == "Tue"
        assert by_date["2024-03-04"].sleep_hours == 9.0
        assert by_date["2024-03-05"].sleep_hours == 0.0
        assert by_date["2024-03-03"].meals == 1

        assert summary.total_feedings == 3
        assert summary.total_sleep_hours == 9.0
        assert summary.total_meals == 1
        assert summary.avg_feedings_per_day == round(3 / 7, 2)
        assert summary.feeding_types == {"breast": 2, "formula": 1}


class TestSummaryRoutes:
    """Test the summary endpoints end to end."""

    def test_daily_summary(self, client):
        client.post("/api/feedings", json={"datetime": "2024-03-05T08:00:00", "type": "breast"})
        client.post("/api/tasks", json={"date": "2024-03-05", "title": "Bath", "category": "bath"})
        for hour in range(8, 13):
            client.post("/api/notes", json={"datetime": f"2024-03-05T{hour:02d}:00:00", "content": f"n{hour}"})

        response = client.get("/api/summary/daily", params={"date": "2024-03-05"})

        assert response.status_code == 200
        data = response.json()
        assert data["date"] == "2024-03-05"
        assert data["feedingsCount"] == 1
        assert data["lastFeedingAt"] == "2024-03-05T08:00:00"
        # Long past, so the next feeding is already due
        assert data["nextFeedingInHours"] == 0
        assert data["tasksTotal"] == 1
        assert [n["content"] for n in data["recentNotes"]] == ["n12", "n11", "n10"]

    def test_daily_summary_defaults_to_today(self, client):
        response = client.get("/api/summary/daily")

        assert response.status_code == 200
        assert response.json()["date"] == date.today().isoformat()

    def test_weekly_summary(self, client):
        client.post("/api/meals", json={"date": "2024-03-05", "mealType": "dinner", "description": "Soup"})

        response = client.get("/api/summary/weekly", params={"end": "2024-03-05"})

        assert response.status_code == 200
        data = response.json()
        assert data["start"] == "2024-02-28"
        assert data["totalMeals"] == 1
        assert data["days"][-1]["meals"] == 1

    def test_impossible_date_returns_400(self, client):
        response = client.get("/api/summary/weekly", params={"end": "2024-02-31"})
        assert response.status_code == 400
