import pytest

from app.core.constants import WEEKDAYS
from app.core.errors import NotFound
from app.schemas.announcement import AnnouncementCreate
from app.schemas.person import PersonCreate, PersonUpdate, ProgressUpdate


def make_person(storage, **overrides):
    payload = {"name": "Alex", "goal": "Run 5k"}
    payload.update(overrides)
    return storage.create_person(PersonCreate(**payload))


def test_create_person_defaults(storage):
    person = make_person(storage)
    assert person.id > 0
    assert person.emoji == "🔥"
    assert person.target_type == "specific_days"
    assert person.target_days == list(WEEKDAYS)
    assert person.target_count == 6
    assert person.current_streak == 0
    assert person.weekly_progress == {day: False for day in WEEKDAYS}


def test_list_people_ordered_by_id(storage):
    ids = [make_person(storage, name=n).id for n in ("A", "B", "C")]
    assert [p.id for p in storage.list_people()] == sorted(ids)


def test_update_progress_recomputes_streak(storage):
    person = make_person(storage)
    for day in ("monday", "tuesday", "thursday"):
        person = storage.update_progress(ProgressUpdate(person_id=person.id, day=day, completed=True))
    assert person.current_streak == 2

    person = storage.update_progress(ProgressUpdate(person_id=person.id, day="wednesday", completed=True))
    assert person.current_streak == 4

    person = storage.update_progress(ProgressUpdate(person_id=person.id, day="monday", completed=False))
    assert person.current_streak == 0
    assert person.weekly_progress["tuesday"] is True


def test_update_progress_idempotent(storage):
    person = make_person(storage)
    update = ProgressUpdate(person_id=person.id, day="tuesday", completed=True)
    once = storage.update_progress(update)
    twice = storage.update_progress(update)
    assert once.weekly_progress == twice.weekly_progress
    assert once.current_streak == twice.current_streak == 0


def test_update_progress_refreshes_updated_at(storage):
    person = make_person(storage)
    updated = storage.update_progress(ProgressUpdate(person_id=person.id, day="monday", completed=True))
    assert updated.updated_at >= person.updated_at
    assert storage.list_people()[0].current_streak == 1


def test_update_progress_missing_person(storage):
    with pytest.raises(NotFound):
        storage.update_progress(ProgressUpdate(person_id=999, day="monday", completed=True))


def test_update_person_merges_editable_fields(storage):
    person = make_person(storage)
    storage.update_progress(ProgressUpdate(person_id=person.id, day="monday", completed=True))
    changes = PersonUpdate.model_validate(
        {"goal": "Run 10k", "targetType": "days_per_week", "targetCount": 3, "currentStreak": 5}
    )
    updated = storage.update_person(person.id, changes)
    assert updated.name == "Alex"
    assert updated.goal == "Run 10k"
    assert updated.target_type == "days_per_week"
    assert updated.target_count == 3
    # derived fields are not writable
    assert updated.current_streak == 1
    assert updated.weekly_progress["monday"] is True


def test_update_person_missing(storage):
    with pytest.raises(NotFound):
        storage.update_person(42, PersonUpdate(name="Nobody"))


def test_delete_person_twice(storage):
    person = make_person(storage)
    storage.delete_person(person.id)
    assert storage.list_people() == []
    with pytest.raises(NotFound):
        storage.delete_person(person.id)


def test_announcements_newest_first(storage):
    created = [
        storage.create_announcement(AnnouncementCreate(title=t, content="c", author="a"))
        for t in ("t1", "t2", "t3")
    ]
    assert [a.title for a in storage.list_announcements()] == ["t3", "t2", "t1"]
    assert all(a.is_important is False for a in created)


def test_delete_announcement(storage):
    a = storage.create_announcement(
        AnnouncementCreate(title="Hi", content="Hello", author="Coach", is_important=True)
    )
    assert a.is_important is True
    storage.delete_announcement(a.id)
    assert storage.list_announcements() == []
    with pytest.raises(NotFound) as exc:
        storage.delete_announcement(a.id)
    assert str(exc.value) == "Announcement not found"
