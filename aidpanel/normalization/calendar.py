"""Calendar normalizers: events, project tasks and case hearings.

Each normalizer returns ``None`` for a record without a date; the caller
drops it from the calendar while the record stays visible elsewhere.
"""

import logging
from collections.abc import Iterable

from aidpanel.models.enums import CalendarEventType
from aidpanel.models.records import Event, Hearing, LegalCase, Project, Task
from aidpanel.models.views import CalendarEvent

logger = logging.getLogger(__name__)


def normalize_event(event: Event) -> CalendarEvent | None:
    if event.event_date is None:
        logger.debug("Event %s has no date, excluded from calendar", event.id)
        return None
    return CalendarEvent(
        id=f"event-{event.id}",
        title=event.title,
        date=event.event_date,
        type=CalendarEventType.EVENT,
        link=f"/etkinlikler/{event.id}",
        details=f"Saat: {event.time or '-'}, Konum: {event.location or '-'}",
    )


def normalize_task(project: Project, task: Task) -> CalendarEvent | None:
    if task.due_date is None:
        logger.debug("Task %s of project %s has no due date, excluded from calendar", task.id, project.id)
        return None
    return CalendarEvent(
        id=f"task-{project.id}-{task.id}",
        title=task.title,
        date=task.due_date,
        type=CalendarEventType.TASK,
        link=f"/projeler/{project.id}",
        details=f"Proje: {project.name}",
    )


def normalize_hearing(case: LegalCase, hearing: Hearing) -> CalendarEvent | None:
    if hearing.hearing_date is None:
        logger.debug("Hearing %s of case %s has no date, excluded from calendar", hearing.id, case.id)
        return None
    return CalendarEvent(
        id=f"hearing-{case.id}-{hearing.id}",
        title=case.subject,
        date=hearing.hearing_date,
        type=CalendarEventType.HEARING,
        link=f"/hukuki-yardim/{case.id}",
        details=f"Saat: {hearing.time or '-'}, Müvekkil: {case.client}",
    )


class CalendarNormalizer:
    """Flattens events, project tasks and case hearings into calendar events."""

    def normalize(
        self,
        events: Iterable[Event],
        projects: Iterable[Project],
        cases: Iterable[LegalCase],
    ) -> list[CalendarEvent]:
        """Return one calendar event per dated source record, in fetch order.

        Events come first, then tasks project by project, then hearings case
        by case. Records without a date are skipped.
        """
        candidates: list[CalendarEvent | None] = []
        candidates.extend(normalize_event(event) for event in events)
        for project in projects:
            candidates.extend(normalize_task(project, task) for task in project.tasks)
        for case in cases:
            candidates.extend(normalize_hearing(case, hearing) for hearing in case.hearings)
        return [item for item in candidates if item is not None]
