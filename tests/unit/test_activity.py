"""Unit tests for the activity log and heatmap."""

from __future__ import annotations

import pytest

from tenx.schemas.schemas import ActivityLogEntry, Course, ResearchPaper, Task
from tenx.services.activity import activity_for_date, activity_level, heatmap_month, log_activity

DAY = "2024-02-10"


class TestLogActivity:
    def test_same_day_accumulates_in_one_entry(self):
        log = log_activity([], "tasks", today=DAY)
        log = log_activity(log, "tasks", today=DAY)

        assert len(log) == 1
        assert log[0].tasks == 2

    def test_articles_read_uses_camel_category(self):
        log = log_activity([], "articlesRead", delta=3, today=DAY)

        assert log[0].articles_read == 3
        assert log[0].model_dump(by_alias=True)["articlesRead"] == 3

    def test_new_day_gets_its_own_entry(self):
        log = log_activity([], "papers", today="2024-02-09")
        log = log_activity(log, "papers", today=DAY)

        assert [e.date for e in log] == ["2024-02-09", DAY]

    def test_input_log_is_not_mutated(self):
        original = [ActivityLogEntry(date=DAY, resources=1)]
        updated = log_activity(original, "resources", today=DAY)

        assert original[0].resources == 1
        assert updated[0].resources == 2

    def test_unknown_category_rejected(self):
        with pytest.raises(ValueError, match="Unknown activity category"):
            log_activity([], "sleeping", today=DAY)

    def test_non_positive_delta_rejected(self):
        with pytest.raises(ValueError, match="must be positive"):
            log_activity([ActivityLogEntry(date=DAY, tasks=2)], "tasks", delta=-1, today=DAY)


class TestActivityForDate:
    def test_combines_documents_and_log(self):
        tasks = [
            Task(id=1, date=DAY, completed=True),
            Task(id=2, date=DAY, completed=False),
            Task(id=3, date="2024-02-11", completed=True),
        ]
        courses = [
            Course.model_validate(
                {
                    "topics": [
                        {
                            "completed": True,
                            "completedDate": DAY,
                            "subtopics": [
                                {"completed": True, "completedDate": DAY},
                                {"completed": True, "completedDate": "2024-02-01"},
                            ],
                        }
                    ]
                }
            )
        ]
        papers = [ResearchPaper(last_updated=DAY), ResearchPaper(last_updated="2024-02-01")]
        log = [ActivityLogEntry(date=DAY, resources=2, articles_read=4, tasks=99)]

        activity = activity_for_date(DAY, log, tasks, courses, papers)

        assert activity.tasks == 1
        assert activity.curriculum == 2
        assert activity.papers == 1
        assert activity.resources == 2
        assert activity.articles_read == 4
        assert activity.total == 10

    def test_empty_day(self):
        assert activity_for_date(DAY, [], [], [], []).total == 0


@pytest.mark.parametrize(
    ("total", "level"),
    [(0, 0), (1, 1), (2, 1), (3, 2), (5, 2), (6, 3), (8, 3), (9, 4), (12, 4), (13, 5), (40, 5)],
)
def test_activity_level_thresholds(total, level):
    assert activity_level(total) == level


class TestHeatmap:
    def test_february_2024_layout(self):
        weeks = heatmap_month(2024, 2, [], [], [], [], today="2024-02-29")

        assert all(len(week) == 7 for week in weeks)
        # Feb 1st 2024 is a Thursday.
        assert weeks[0][:4] == [None, None, None, None]
        assert weeks[0][4].day == 1
        cells = [c for week in weeks for c in week if c is not None]
        assert len(cells) == 29
        assert [c.date for c in cells if c.is_today] == ["2024-02-29"]

    def test_levels_follow_activity(self):
        log = [ActivityLogEntry(date=DAY, resources=6)]

        weeks = heatmap_month(2024, 2, log, [], [], [], today="2024-03-01")

        cells = {c.date: c for week in weeks for c in week if c is not None}
        assert cells[DAY].level == 3
        assert cells[DAY].activity.resources == 6
        assert cells["2024-02-11"].level == 0
