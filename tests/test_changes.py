import pytest

from scenestage.changes import (
    ChangeTracker,
    Create,
    Delete,
    ObjectKind,
    SceneChange,
    Update,
)


def test_tracker_records_in_order():
    tracker = ChangeTracker()
    tracker.create(ObjectKind.MATRIX, 0, "m")
    tracker.update(ObjectKind.LOCATION, 1, "l")
    tracker.delete(ObjectKind.VISUAL, 2)
    assert tracker.take_all() == [
        SceneChange(ObjectKind.MATRIX, Create(0, "m")),
        SceneChange(ObjectKind.LOCATION, Update(1, "l")),
        SceneChange(ObjectKind.VISUAL, Delete(2)),
    ]


def test_take_all_empties_tracker():
    tracker = ChangeTracker()
    tracker.create(ObjectKind.MATRIX, 0, "m")
    assert len(tracker.take_all()) == 1
    assert tracker.take_all() == []
    assert len(tracker) == 0


def test_take_all_returns_independent_list():
    tracker = ChangeTracker()
    tracker.create(ObjectKind.MATRIX, 0, "a")
    taken = tracker.take_all()
    tracker.create(ObjectKind.MATRIX, 1, "b")
    assert taken == [SceneChange(ObjectKind.MATRIX, Create(0, "a"))]


@pytest.mark.parametrize("kind", list(ObjectKind))
def test_delete_is_destructive(kind):
    change = SceneChange(kind, Delete(7))
    assert change.destructive_change() == (kind, 7)


@pytest.mark.parametrize("change", [Create(3, "x"), Update(3, "y")])
def test_create_and_update_are_not_destructive(change):
    assert SceneChange(ObjectKind.LOCATION, change).destructive_change() is None


def test_destructive_changes_from_tracker():
    tracker = ChangeTracker()
    tracker.create(ObjectKind.VISUAL, 4, "v")
    tracker.delete(ObjectKind.VISUAL, 4)
    tracker.delete(ObjectKind.MATRIX, 9)
    freed = [c.destructive_change() for c in tracker.take_all()]
    freed = [f for f in freed if f is not None]
    assert freed == [(ObjectKind.VISUAL, 4), (ObjectKind.MATRIX, 9)]