"""Scene changes and the tracker that collects them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar, Union

from scenestage.ids import Id

T = TypeVar("T")


class ObjectKind(Enum):
    """The kinds of objects that can be staged in a scene."""

    MATRIX = "matrix"
    LOCATION = "location"
    VISUAL = "visual"


@dataclass(frozen=True)
class Create(Generic[T]):
    """An object was created with the given render value."""

    id: Id
    value: T


@dataclass(frozen=True)
class Update(Generic[T]):
    """An object's render value was replaced."""

    id: Id
    value: T


@dataclass(frozen=True)
class Delete:
    """An object is gone."""

    id: Id


Change = Union[Create[Any], Update[Any], Delete]


@dataclass(frozen=True)
class SceneChange:
    """A change to one object of a specific kind."""

    kind: ObjectKind
    change: Change

    def destructive_change(self) -> tuple[ObjectKind, Id] | None:
        """The kind and id freed by this change, if it deletes an object."""
        if isinstance(self.change, Delete):
            return (self.kind, self.change.id)
        return None


class ChangeTracker:
    """Collects scene changes in order until they are taken."""

    def __init__(self) -> None:
        self._changes: list[SceneChange] = []

    def create(self, kind: ObjectKind, id: Id, value: Any) -> None:
        self._changes.append(SceneChange(kind, Create(id, value)))

    def update(self, kind: ObjectKind, id: Id, value: Any) -> None:
        self._changes.append(SceneChange(kind, Update(id, value)))

    def delete(self, kind: ObjectKind, id: Id) -> None:
        self._changes.append(SceneChange(kind, Delete(id)))

    def take_all(self) -> list[SceneChange]:
        """Return all pending changes and start over with none."""
        changes, self._changes = self._changes, []
        return changes

    def __len__(self) -> int:
        return len(self._changes)

    def __repr__(self) -> str:
        return f"ChangeTracker({self._changes!r})"