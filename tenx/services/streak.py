"""
Consecutive fully-completed-day counter.

recompute_streak runs after every completion-affecting mutation. It is
evaluated lazily: a day that goes uncompleted with no further mutations is
only noticed on the next call, whenever that happens.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from tenx.core.dates import previous_day, today_iso
from tenx.core.logging import get_logger
from tenx.schemas.schemas import Course, ResearchPaper, StreakState, Subtopic, Task

logger = get_logger(__name__)


def course_items_on(courses: Iterable[Course], day: str) -> list[Subtopic]:
    """Topics and subtopics scheduled for ``day``."""
    items: list[Subtopic] = []
    for course in courses:
        for topic in course.topics:
            if topic.date == day:
                items.append(topic)
            items.extend(s for s in topic.subtopics if s.date == day)
    return items


def papers_due_on(papers: Iterable[ResearchPaper], day: str) -> list[ResearchPaper]:
    """Papers whose reading window covers ``day``. No start date means not scheduled."""
    return [
        p
        for p in papers
        if p.start_date and p.start_date <= day and (not p.end_date or p.end_date >= day)
    ]


def recompute_streak(
    tasks: Sequence[Task],
    current: StreakState,
    courses: Sequence[Course] = (),
    papers: Sequence[ResearchPaper] = (),
    news_read_ids: Sequence[str] = (),
    today: str | None = None,
) -> StreakState:
    """Return the new streak state; ``current`` is never mutated.

    News reads are passive and never count as an obligation, ``news_read_ids``
    is accepted so callers can pass the full user state.
    """
    today = today or today_iso()
    yesterday = previous_day(today)

    if current.last_date == today:
        return current

    today_tasks = [t for t in tasks if t.date == today]
    today_items = course_items_on(courses, today)
    due_papers = papers_due_on(papers, today)

    tasks_ok = all(t.completed for t in today_tasks)
    courses_ok = all(i.completed for i in today_items)
    papers_ok = all(p.last_updated == today for p in due_papers)
    has_activity = bool(today_tasks or today_items or due_papers)

    if has_activity and tasks_ok and courses_ok and papers_ok:
        if current.last_date == yesterday or current.count == 0:
            updated = StreakState(count=current.count + 1, last_date=today)
        else:
            updated = StreakState(count=1, last_date=today)
        logger.info("streak_day_qualified", previous=current.count, count=updated.count, date=today)
        return updated

    if current.last_date != yesterday:
        if current.count:
            logger.info("streak_reset", previous=current.count, last_date=current.last_date)
        return StreakState(count=0, last_date=current.last_date)

    return current
