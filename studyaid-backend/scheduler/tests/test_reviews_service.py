import pytest
from datetime import timedelta
from django.db import IntegrityError, transaction

from scheduler.data import repos
from scheduler.data.models import ReviewSchedule
from scheduler.domain.errors import InvalidDifficulty, ScheduleNotFound
from scheduler.services.reviews import (
    delete_review,
    list_due,
    list_due_with_notes,
    list_scheduled,
    record_review,
)
from studyaid.models import Note

USER = 1
OTHER_USER = 2


def _assert_dates_consistent(sched):
    assert sched.next_review_date == sched.last_reviewed + timedelta(days=sched.interval_days)
    assert sched.next_review_date >= sched.last_reviewed


@pytest.mark.django_db
def test_first_second_third_review_scenario(clock):
    first, created = record_review(USER, 10, "Cells", 3, clock=clock)
    assert created is True
    assert (first.interval_days, first.repetition_count) == (1, 1)
    assert first.ease_factor == pytest.approx(2.5)
    assert first.created_at == clock.now()
    _assert_dates_consistent(first)

    clock.advance(days=1)
    second, created = record_review(USER, 10, "Cells", 2, clock=clock)
    assert created is False
    assert (second.interval_days, second.repetition_count) == (3, 2)
    assert second.ease_factor == pytest.approx(2.6)
    _assert_dates_consistent(second)

    clock.advance(days=3)
    third, _ = record_review(USER, 10, "Cells", 5, clock=clock)
    assert (third.interval_days, third.repetition_count) == (4, 3)
    assert third.ease_factor == pytest.approx(2.4)
    assert third.difficulty_level == 5
    _assert_dates_consistent(third)

    stored = ReviewSchedule.objects.get(user_id=USER, note_id=10)
    assert stored.repetition_count == 3
    assert stored.last_reviewed == clock.now()
    assert stored.next_review_date == clock.now() + timedelta(days=4)


@pytest.mark.django_db
def test_one_record_per_pair_reflecting_latest_review(clock):
    record_review(USER, 10, "Cells", 3, clock=clock)
    clock.advance(hours=2)
    record_review(USER, 10, "Renamed topic", 1, clock=clock)

    rows = ReviewSchedule.objects.filter(user_id=USER, note_id=10)
    assert rows.count() == 1
    sched = rows.get()
    assert sched.difficulty_level == 1
    assert sched.interval_days == 3
    assert sched.last_reviewed == clock.now()
    # topic is copied once at creation
    assert sched.topic == "Cells"
    # created_at never moves
    assert sched.created_at == clock.now() - timedelta(hours=2)


@pytest.mark.django_db
def test_repetition_count_increments_by_one_and_ease_stays_bounded(clock):
    counts, eases = [], []
    for difficulty in [1] * 6 + [5] * 10:
        sched, _ = record_review(USER, 11, "Loops", difficulty, clock=clock)
        counts.append(sched.repetition_count)
        eases.append(sched.ease_factor)
        clock.advance(days=sched.interval_days)

    assert counts == list(range(1, 17))
    assert all(1.3 <= e <= 3.0 for e in eases)
    assert eases[5] == pytest.approx(3.0)
    assert eases[-1] == pytest.approx(1.3)


@pytest.mark.django_db
@pytest.mark.parametrize("difficulty", [0, 6, -1, None, "hard"])
def test_invalid_difficulty_rejected_before_store_access(clock, difficulty):
    with pytest.raises(InvalidDifficulty):
        record_review(USER, 12, "Vectors", difficulty, clock=clock)

    assert not ReviewSchedule.objects.exists()


@pytest.mark.django_db
def test_failed_computation_leaves_record_untouched(clock, monkeypatch):
    before, _ = record_review(USER, 13, "Atoms", 3, clock=clock)

    def broken(*args, **kwargs):
        raise RuntimeError("bad state")

    monkeypatch.setattr(repos, "schedule_next", broken)
    clock.advance(days=1)
    with pytest.raises(RuntimeError):
        record_review(USER, 13, "Atoms", 1, clock=clock)

    after = ReviewSchedule.objects.get(pk=before.pk)
    assert after.repetition_count == 1
    assert after.difficulty_level == 3
    assert after.last_reviewed == before.last_reviewed


@pytest.mark.django_db
def test_store_enforces_pair_uniqueness(clock):
    record_review(USER, 14, "Sets", 3, clock=clock)

    with pytest.raises(IntegrityError):
        with transaction.atomic():
            ReviewSchedule.objects.create(user_id=USER, note_id=14, difficulty_level=2)


@pytest.mark.django_db
def test_concurrent_first_review_updates_winning_row(clock, monkeypatch):
    # Another request inserted the row between our lookup and our insert
    record_review(USER, 15, "Graphs", 3, clock=clock)

    real_lock = repos._lock_schedule
    calls = []

    def stale_then_real(user_id, note_id):
        calls.append((user_id, note_id))
        if len(calls) == 1:
            raise ReviewSchedule.DoesNotExist
        return real_lock(user_id, note_id)

    monkeypatch.setattr(repos, "_lock_schedule", stale_then_real)
    sched, created = record_review(USER, 15, "Graphs", 2, clock=clock)

    assert created is False
    assert sched.repetition_count == 2
    assert sched.interval_days == 3
    assert ReviewSchedule.objects.filter(user_id=USER, note_id=15).count() == 1


@pytest.mark.django_db
def test_list_due_returns_only_due_records_oldest_first(clock):
    start = clock.now()
    record_review(USER, 20, "A", 3, clock=clock)          # due start + 1d
    clock.advance(hours=1)
    record_review(USER, 21, "B", 3, clock=clock)          # due start + 1d 1h
    clock.current = start
    record_review(USER, 22, "C", 3, clock=clock)
    record_review(USER, 22, "C", 1, clock=clock)          # due start + 3d
    record_review(OTHER_USER, 20, "A", 3, clock=clock)

    clock.current = start + timedelta(hours=12)
    assert list_due(USER, clock=clock) == []

    clock.current = start + timedelta(days=2)
    due = list_due(USER, clock=clock)
    assert [s.note_id for s in due] == [20, 21]
    assert all(s.next_review_date <= clock.now() for s in due)

    # exactly at the due moment counts as due
    clock.current = start + timedelta(days=3)
    assert [s.note_id for s in list_due(USER, clock=clock)] == [20, 21, 22]


@pytest.mark.django_db
def test_list_scheduled_returns_everything_in_date_order(clock):
    start = clock.now()
    record_review(USER, 30, "Late", 3, clock=clock)
    record_review(USER, 30, "Late", 1, clock=clock)       # start + 3d
    record_review(USER, 31, "Soon", 4, clock=clock)       # start + 1d
    clock.advance(hours=3)
    record_review(USER, 32, "Middle", 5, clock=clock)     # start + 1d 3h
    record_review(OTHER_USER, 33, "Elsewhere", 3, clock=clock)

    clock.current = start
    scheduled = list_scheduled(USER)
    assert [s.note_id for s in scheduled] == [31, 32, 30]
    dates = [s.next_review_date for s in scheduled]
    assert dates == sorted(dates)


@pytest.mark.django_db
def test_due_reviews_carry_note_content(clock):
    note = Note.objects.create(user_id=USER, topic="Optics", content="Snell's law")
    record_review(USER, note.pk, note.topic, 3, clock=clock)
    record_review(USER, 9999, "Deleted note", 3, clock=clock)

    clock.advance(days=1)
    rows = list_due_with_notes(USER, clock=clock)

    contents = {sched.note_id: content for sched, content in rows}
    assert contents == {note.pk: "Snell's law", 9999: None}


@pytest.mark.django_db
def test_delete_returns_prior_state(clock):
    created, _ = record_review(USER, 40, "Waves", 2, clock=clock)

    deleted = delete_review(USER, 40)

    assert deleted.pk == created.pk
    assert deleted.topic == "Waves"
    assert deleted.repetition_count == 1
    assert not ReviewSchedule.objects.filter(user_id=USER, note_id=40).exists()


@pytest.mark.django_db
def test_delete_missing_pair_signals_not_found_and_mutates_nothing(clock):
    kept, _ = record_review(USER, 41, "Kept", 3, clock=clock)
    note = Note.objects.create(user_id=USER, topic="Kept", content="text")

    with pytest.raises(ScheduleNotFound):
        delete_review(USER, 42)
    with pytest.raises(ScheduleNotFound):
        delete_review(OTHER_USER, 41)

    assert ReviewSchedule.objects.get(pk=kept.pk).repetition_count == 1
    assert Note.objects.filter(pk=note.pk).exists()


@pytest.mark.django_db
def test_long_running_schedule_is_capped_at_one_year(clock):
    record_review(USER, 50, "Veteran", 1, clock=clock)
    ReviewSchedule.objects.filter(user_id=USER, note_id=50).update(
        repetition_count=646, ease_factor=3.0
    )

    sched, created = record_review(USER, 50, "Veteran", 1, clock=clock)

    assert created is False
    assert sched.repetition_count == 647
    assert sched.interval_days == 365
    assert sched.next_review_date == clock.now() + timedelta(days=365)
