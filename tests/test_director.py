import gc
import queue

import pytest

from scenestage.changes import Create, Delete, ObjectKind, Update
from scenestage.director import Director
from scenestage.objects import Location, Matrix


class _Recorder:
    def __init__(self):
        self.batches = []

    def __call__(self, changes):
        self.batches.append(changes)


@pytest.fixture
def recorder():
    return _Recorder()


def test_stage_records_create_on_action(recorder):
    director = Director(recorder)
    matrix = Matrix.identity()
    handle = director.stage(matrix)
    director.action()
    assert len(recorder.batches) == 1
    (change,) = recorder.batches[0]
    assert change.kind is ObjectKind.MATRIX
    assert change.change == Create(handle.id(), matrix)


def test_action_without_changes_does_not_notify(recorder):
    director = Director(recorder)
    director.action()
    assert recorder.batches == []


def test_ids_are_contiguous_per_kind(recorder):
    director = Director(recorder)
    m0 = director.stage(Matrix.identity())
    m1 = director.stage(Matrix.identity())
    loc = director.stage(Location.from_matrix(m0))
    assert [m0.id(), m1.id()] == [0, 1]
    assert loc.id() == 0


def test_dropped_handle_frees_id(recorder):
    director = Director(recorder)
    handle = director.stage(Matrix.identity())
    first_id = handle.id()
    del handle
    gc.collect()
    director.action()
    kinds = [type(c.change) for c in recorder.batches[0]]
    assert kinds == [Create, Delete]
    assert recorder.batches[0][1].change == Delete(first_id)
    again = director.stage(Matrix.identity())
    assert again.id() == first_id


def test_id_not_freed_before_action(recorder):
    director = Director(recorder)
    handle = director.stage(Matrix.identity())
    first_id = handle.id()
    del handle
    gc.collect()
    other = director.stage(Matrix.identity())
    assert other.id() != first_id


def test_update_is_forwarded(recorder):
    director = Director(recorder)
    handle = director.stage(Matrix.identity())
    director.action()
    replacement = Matrix(((2, 0, 0, 0), (0, 2, 0, 0), (0, 0, 2, 0), (0, 0, 0, 1)))
    handle.update(replacement)
    director.action()
    assert recorder.batches[1][0].change == Update(handle.id(), replacement)


def test_changes_arrive_in_order(recorder):
    director = Director(recorder)
    matrix = director.stage(Matrix.identity())
    location = director.stage(Location.from_matrix(matrix))
    director.action()
    assert [c.kind for c in recorder.batches[0]] == [ObjectKind.MATRIX, ObjectKind.LOCATION]
    assert recorder.batches[0][1].change.value.matrix == matrix.id()
    assert location.kind is ObjectKind.LOCATION


def test_stage_rejects_non_scene_object(recorder):
    director = Director(recorder)
    with pytest.raises(TypeError):
        director.stage("not an object")


def test_notify_error_propagates():
    def failing(changes):
        raise RuntimeError("renderer gone")

    director = Director(failing)
    _handle = director.stage(Matrix.identity())
    with pytest.raises(RuntimeError, match="renderer gone"):
        director.action()


def test_from_sender_puts_batches_into_queue():
    channel = queue.Queue(maxsize=1)
    director = Director.from_sender(channel)
    handle = director.stage(Matrix.identity())
    director.action()
    batch = channel.get_nowait()
    assert [c.change.id for c in batch] == [handle.id()]


def test_from_sender_full_queue_raises():
    channel = queue.Queue(maxsize=1)
    director = Director.from_sender(channel)
    _a = director.stage(Matrix.identity())
    director.action()
    _b = director.stage(Matrix.identity())
    with pytest.raises(queue.Full):
        director.action()