"""Reference handles to staged scene objects."""

from __future__ import annotations

import weakref
from typing import Any, ClassVar, Generic, Protocol, TypeVar

from scenestage.changes import ChangeTracker, ObjectKind
from scenestage.ids import Id


class SceneObject(Protocol):
    """An object that can be staged: it splits into what is kept and what is uploaded."""

    kind: ClassVar[ObjectKind]

    def split(self) -> tuple[Any, Any]: ...


T = TypeVar("T", bound=SceneObject)


def _kind_of(value: object) -> ObjectKind:
    kind = getattr(type(value), "kind", None)
    if not isinstance(kind, ObjectKind):
        raise TypeError(f"{type(value).__name__} is not a scene object")
    return kind


class Handle(Generic[T]):
    """A shared reference to a staged object.

    Creating a handle records a creation; updating records an update; when the
    last reference goes away a deletion is recorded.
    """

    def __init__(self, id: Id, value: T, change_tracker: ChangeTracker) -> None:
        kind = _kind_of(value)
        keep, change = value.split()
        change_tracker.create(kind, id, change)
        self._id = id
        self._kind = kind
        self._tracker = change_tracker
        self._keep = keep
        weakref.finalize(self, change_tracker.delete, kind, id)

    def id(self) -> Id:
        return self._id

    @property
    def kind(self) -> ObjectKind:
        return self._kind

    def update(self, value: T) -> None:
        """Replace the value the handle refers to."""
        kind = _kind_of(value)
        if kind is not self._kind:
            raise TypeError(
                f"cannot update a {self._kind.value} handle with a {kind.value} object"
            )
        keep, change = value.split()
        self._tracker.update(self._kind, self._id, change)
        self._keep = keep

    def __repr__(self) -> str:
        return f"Handle({self._kind.value}, id={self._id})"