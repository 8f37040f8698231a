from datetime import date

import pytest

from src.scheduling.engine import derive_schedule
from src.scheduling.schemas import Schedule, ScheduleDraft, ScheduleField
from src.tasks.schemas import Task


def make_task(task_id: int, start_date: date, due_date: date) -> Task:
    return Task(
        id=task_id,
        task_code="100",
        title=f"Task {task_id}",
        start_date=start_date,
        due_date=due_date,
        created_at="2024-01-01T12:00:00Z",
    )


@pytest.fixture
def tasks() -> dict[int, Task]:
    return {
        1: make_task(1, date(2024, 1, 1), date(2024, 1, 5)),  # due Friday
        2: make_task(2, date(2024, 1, 1), date(2024, 1, 9)),  # due Tuesday
    }


@pytest.fixture
def lookup(tasks: dict[int, Task]):
    return tasks.get


def test_deadline_derives_due_date(lookup) -> None:
    schedule = derive_schedule(
        ScheduleDraft(start_date=date(2024, 1, 5), deadline_days=3), lookup
    )

    assert schedule == Schedule(start_date=date(2024, 1, 5), due_date=date(2024, 1, 8))


def test_deadline_overrides_entered_due_date(lookup) -> None:
    schedule = derive_schedule(
        ScheduleDraft(
            start_date=date(2024, 1, 10),
            due_date=date(2024, 2, 1),
            deadline_days=2,
        ),
        lookup,
        [ScheduleField.DUE_DATE],
    )

    assert schedule.due_date == date(2024, 1, 12)


@pytest.mark.parametrize("deadline_days", [1, 7, 30, 365])
def test_deadline_holds_for_any_positive_duration(lookup, deadline_days: int) -> None:
    start_date = date(2024, 3, 1)
    schedule = derive_schedule(
        ScheduleDraft(start_date=start_date, deadline_days=deadline_days), lookup
    )

    assert schedule.due_date is not None
    assert (schedule.due_date - start_date).days == deadline_days
    assert schedule.start_date < schedule.due_date


def test_deadline_without_start_date_keeps_due_date(lookup) -> None:
    schedule = derive_schedule(
        ScheduleDraft(due_date=date(2024, 1, 10), deadline_days=3), lookup
    )

    assert schedule == Schedule(start_date=None, due_date=date(2024, 1, 10))


@pytest.mark.parametrize(
    "start_date",
    [date(2024, 1, 10), date(2024, 1, 15)],
    ids=["same-day", "after-due"],
)
def test_start_on_or_after_due_is_clamped(lookup, start_date: date) -> None:
    schedule = derive_schedule(
        ScheduleDraft(start_date=start_date, due_date=date(2024, 1, 10)), lookup
    )

    assert schedule == Schedule(start_date=date(2024, 1, 9), due_date=date(2024, 1, 10))


def test_start_before_predecessor_due_is_advanced(lookup) -> None:
    schedule = derive_schedule(
        ScheduleDraft(
            start_date=date(2024, 1, 3),
            due_date=date(2024, 1, 20),
            predecessor_id=2,
        ),
        lookup,
        [ScheduleField.START_DATE],
    )

    assert schedule == Schedule(start_date=date(2024, 1, 10), due_date=date(2024, 1, 20))


def test_advance_past_predecessor_does_not_skip_weekends(lookup) -> None:
    # Predecessor 1 is due on a Friday; only a fresh selection skips the weekend
    schedule = derive_schedule(
        ScheduleDraft(
            start_date=date(2024, 1, 2),
            due_date=date(2024, 1, 20),
            predecessor_id=1,
        ),
        lookup,
        [ScheduleField.START_DATE],
    )

    assert schedule.start_date == date(2024, 1, 6)


def test_fresh_predecessor_skips_weekend(lookup) -> None:
    schedule = derive_schedule(
        ScheduleDraft(
            start_date=date(2024, 1, 2),
            due_date=date(2024, 1, 20),
            predecessor_id=1,
        ),
        lookup,
        [ScheduleField.PREDECESSOR_ID],
    )

    assert schedule.start_date == date(2024, 1, 8)
    assert schedule.start_date.weekday() == 0


def test_fresh_predecessor_on_weekday_keeps_next_day(lookup) -> None:
    schedule = derive_schedule(
        ScheduleDraft(
            start_date=date(2024, 1, 2),
            due_date=date(2024, 1, 20),
            predecessor_id=2,
        ),
        lookup,
        [ScheduleField.PREDECESSOR_ID],
    )

    assert schedule.start_date == date(2024, 1, 10)


def test_fresh_predecessor_moves_start_later_as_well_as_earlier(lookup) -> None:
    schedule = derive_schedule(
        ScheduleDraft(
            start_date=date(2024, 1, 15),
            due_date=date(2024, 1, 20),
            predecessor_id=2,
        ),
        lookup,
        [ScheduleField.PREDECESSOR_ID],
    )

    assert schedule.start_date == date(2024, 1, 10)


def test_fresh_predecessor_rederives_due_from_deadline(lookup) -> None:
    schedule = derive_schedule(
        ScheduleDraft(
            start_date=date(2024, 1, 2),
            due_date=date(2024, 1, 4),
            deadline_days=2,
            predecessor_id=1,
        ),
        lookup,
        [ScheduleField.PREDECESSOR_ID],
    )

    assert schedule == Schedule(start_date=date(2024, 1, 8), due_date=date(2024, 1, 10))


def test_predecessor_shift_past_due_moves_due_date(lookup) -> None:
    schedule = derive_schedule(
        ScheduleDraft(
            start_date=date(2024, 1, 2),
            due_date=date(2024, 1, 4),
            predecessor_id=2,
        ),
        lookup,
    )

    assert schedule == Schedule(start_date=date(2024, 1, 10), due_date=date(2024, 1, 11))


def test_fresh_predecessor_past_due_date_keeps_weekday_start(lookup) -> None:
    schedule = derive_schedule(
        ScheduleDraft(
            start_date=date(2024, 1, 2),
            due_date=date(2024, 1, 4),
            predecessor_id=1,
        ),
        lookup,
        [ScheduleField.PREDECESSOR_ID],
    )

    assert schedule == Schedule(start_date=date(2024, 1, 8), due_date=date(2024, 1, 9))


def test_unresolvable_predecessor_is_ignored(lookup) -> None:
    draft = ScheduleDraft(
        start_date=date(2024, 1, 2),
        due_date=date(2024, 1, 4),
        predecessor_id=99,
    )

    schedule = derive_schedule(draft, lookup, [ScheduleField.PREDECESSOR_ID])

    assert schedule == Schedule(start_date=date(2024, 1, 2), due_date=date(2024, 1, 4))


def test_missing_dates_are_left_alone(lookup) -> None:
    schedule = derive_schedule(ScheduleDraft(predecessor_id=1), lookup)

    assert schedule == Schedule(start_date=None, due_date=None)


@pytest.mark.parametrize(
    "draft",
    [
        ScheduleDraft(start_date=date(2024, 1, 5), deadline_days=3),
        ScheduleDraft(start_date=date(2024, 1, 12), due_date=date(2024, 1, 10)),
        ScheduleDraft(
            start_date=date(2024, 1, 1), due_date=date(2024, 1, 3), predecessor_id=2
        ),
        ScheduleDraft(
            start_date=date(2024, 1, 1),
            due_date=date(2024, 1, 3),
            deadline_days=4,
            predecessor_id=1,
        ),
    ],
)
def test_reapplying_derivation_is_a_no_op(lookup, draft: ScheduleDraft) -> None:
    first = derive_schedule(draft, lookup)
    second = derive_schedule(
        draft.model_copy(
            update={"start_date": first.start_date, "due_date": first.due_date}
        ),
        lookup,
    )

    assert second == first
    assert first.start_date < first.due_date
