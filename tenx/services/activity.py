"""
Per-day activity log and the heatmap built on top of it.

The log is a list of ActivityLogEntry keyed by date. Logging is purely
additive: callers invoke it once per qualifying event.
"""

from __future__ import annotations

import calendar
from collections.abc import Sequence
from datetime import date

from tenx.core.dates import today_iso
from tenx.schemas.schemas import (
    ActivityCategory,
    ActivityLogEntry,
    Course,
    DayActivity,
    HeatmapCell,
    ResearchPaper,
    Task,
)

_FIELDS: dict[str, str] = {
    "tasks": "tasks",
    "curriculum": "curriculum",
    "papers": "papers",
    "resources": "resources",
    "articlesRead": "articles_read",
}

# Upper bound of total activity for levels 1..4; anything above is level 5.
_LEVEL_BOUNDS = (2, 5, 8, 12)


def log_activity(
    log: Sequence[ActivityLogEntry],
    category: ActivityCategory,
    delta: int = 1,
    today: str | None = None,
) -> list[ActivityLogEntry]:
    """Add ``delta`` to today's counter for ``category``, creating the entry if needed."""
    if category not in _FIELDS:
        raise ValueError(f"Unknown activity category: {category}")
    if delta < 1:
        raise ValueError(f"Activity delta must be positive, got {delta}")

    today = today or today_iso()
    entries = [e.model_copy() for e in log]
    entry = next((e for e in entries if e.date == today), None)
    if entry is None:
        entry = ActivityLogEntry(date=today)
        entries.append(entry)

    attr = _FIELDS[category]
    setattr(entry, attr, getattr(entry, attr) + delta)
    return entries


def activity_for_date(
    day: str,
    log: Sequence[ActivityLogEntry],
    tasks: Sequence[Task],
    courses: Sequence[Course],
    papers: Sequence[ResearchPaper],
) -> DayActivity:
    result = DayActivity()
    result.tasks = sum(1 for t in tasks if t.date == day and t.completed)

    for course in courses:
        for topic in course.topics:
            if topic.completed and topic.completed_date == day:
                result.curriculum += 1
            result.curriculum += sum(
                1 for s in topic.subtopics if s.completed and s.completed_date == day
            )

    result.papers = sum(1 for p in papers if p.last_updated == day)

    entry = next((e for e in log if e.date == day), None)
    if entry is not None:
        result.resources = entry.resources
        result.articles_read = entry.articles_read

    result.total = result.tasks + result.curriculum + result.papers + result.resources + result.articles_read
    return result


def activity_level(total: int) -> int:
    """Heatmap intensity 0-5."""
    if total <= 0:
        return 0
    for level, bound in enumerate(_LEVEL_BOUNDS, start=1):
        if total <= bound:
            return level
    return 5


def heatmap_month(
    year: int,
    month: int,
    log: Sequence[ActivityLogEntry],
    tasks: Sequence[Task],
    courses: Sequence[Course],
    papers: Sequence[ResearchPaper],
    today: str | None = None,
) -> list[list[HeatmapCell | None]]:
    """Sunday-first weeks of 7 cells; days outside the month are None."""
    today = today or today_iso()
    weeks: list[list[HeatmapCell | None]] = []

    for week in calendar.Calendar(firstweekday=calendar.SUNDAY).monthdayscalendar(year, month):
        row: list[HeatmapCell | None] = []
        for day in week:
            if day == 0:
                row.append(None)
                continue
            iso = date(year, month, day).isoformat()
            activity = activity_for_date(iso, log, tasks, courses, papers)
            row.append(
                HeatmapCell(
                    date=iso,
                    day=day,
                    level=activity_level(activity.total),
                    activity=activity,
                    is_today=iso == today,
                )
            )
        weeks.append(row)

    return weeks
