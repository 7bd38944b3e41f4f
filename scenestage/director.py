"""The director: stages objects and forwards pooled changes to the renderer."""

from __future__ import annotations

from typing import Any, Callable

from scenestage.changes import ChangeTracker, ObjectKind, SceneChange
from scenestage.handle import Handle
from scenestage.ids import IdGen

NotifyChanges = Callable[[list[SceneChange]], Any]


class Director:
    """The only connection to the renderer.

    It tracks all changes to the scene graph and hands them over on demand,
    so that intermediate states never become visible.
    """

    def __init__(self, notify_changes: NotifyChanges) -> None:
        # One generator per kind keeps the ids of each kind contiguous.
        self._id_generators: dict[ObjectKind, IdGen] = {}
        self._change_tracker = ChangeTracker()
        self._notify_changes = notify_changes

    @classmethod
    def from_sender(cls, sender: Any) -> Director:
        """A director that puts each batch of changes into a queue without waiting."""
        return cls(sender.put_nowait)

    def stage(self, value: Any) -> Handle[Any]:
        """Put an object on the stage and return its handle."""
        kind = getattr(type(value), "kind", None)
        if not isinstance(kind, ObjectKind):
            raise TypeError(f"{type(value).__name__} is not a scene object")
        generator = self._id_generators.setdefault(kind, IdGen())
        return Handle(generator.allocate(), value, self._change_tracker)

    def action(self) -> None:
        """Send all pending changes to the renderer."""
        changes = self._change_tracker.take_all()
        if not changes:
            return

        for change in changes:
            freed = change.destructive_change()
            if freed is None:
                continue
            kind, freed_id = freed
            generator = self._id_generators.get(kind)
            if generator is None:
                raise RuntimeError(
                    f"Internal Error: Freeing an id failed, generator missing for {kind.value}"
                )
            generator.free(freed_id)

        self._notify_changes(changes)