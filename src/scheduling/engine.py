"""Keeps a task's start date, due date, deadline and predecessor consistent.

The derivation is a pure function that is re-applied after every edit of one
of the scheduling fields. It never fails: inconsistent dates are repaired in
place rather than reported, and a predecessor id that does not resolve is
treated as if no predecessor had been chosen.
"""

import logging
from collections.abc import Iterable
from datetime import date

from src.scheduling.dates import add_days, next_weekday
from src.scheduling.schemas import (
    Predecessor,
    PredecessorLookup,
    Schedule,
    ScheduleDraft,
    ScheduleField,
)

logger = logging.getLogger(__name__)


def resolve_predecessor(
    predecessor_id: int | None, lookup: PredecessorLookup
) -> Predecessor | None:
    if predecessor_id is None:
        return None
    predecessor = lookup(predecessor_id)
    if predecessor is None:
        logger.debug("Predecessor %s not found, ignoring it", predecessor_id)
    return predecessor


def follow_start(
    start_date: date, due_date: date | None, deadline_days: int | None
) -> date | None:
    """Due date to keep after the start date was moved forward by a predecessor."""
    if deadline_days is not None:
        return add_days(start_date, deadline_days)
    if due_date is not None and due_date <= start_date:
        # Only the due date can move without breaking the predecessor order
        return add_days(start_date, 1)
    return due_date


def derive_schedule(
    draft: ScheduleDraft,
    lookup: PredecessorLookup,
    changed_fields: Iterable[ScheduleField] = (),
) -> Schedule:
    """Return the corrected start and due dates for ``draft``.

    Rules, in order:

    1. A deadline recomputes ``due_date = start_date + deadline_days``.
    2. ``start_date >= due_date`` clamps the start to the day before the due date.
    3. A start on or before the predecessor's due date moves to the day after it.

    When ``predecessor_id`` is among ``changed_fields`` the start date is first
    set to the day after the predecessor's due date, skipping weekends.
    """
    start_date = draft.start_date
    due_date = draft.due_date
    predecessor = resolve_predecessor(draft.predecessor_id, lookup)

    if predecessor is not None and ScheduleField.PREDECESSOR_ID in set(changed_fields):
        start_date = next_weekday(add_days(predecessor.due_date, 1))
        due_date = follow_start(start_date, due_date, draft.deadline_days)
        logger.debug(
            "Predecessor %s selected, start moved to %s", predecessor.id, start_date
        )

    if draft.deadline_days is not None and start_date is not None:
        due_date = add_days(start_date, draft.deadline_days)

    if start_date is not None and due_date is not None and start_date >= due_date:
        start_date = add_days(due_date, -1)
        logger.debug("Start date clamped to %s", start_date)

    if (
        predecessor is not None
        and start_date is not None
        and start_date <= predecessor.due_date
    ):
        start_date = add_days(predecessor.due_date, 1)
        logger.debug(
            "Start date moved after predecessor %s to %s", predecessor.id, start_date
        )
        due_date = follow_start(start_date, due_date, draft.deadline_days)

    return Schedule(start_date=start_date, due_date=due_date)
