"""Contiguous id allocation with reuse of freed ids."""

from __future__ import annotations

Id = int


class IdGen:
    """Hands out small, contiguous ids and reuses freed ones first."""

    def __init__(self) -> None:
        self._next_id: Id = 0
        self._free_list: list[Id] = []

    def allocate(self) -> Id:
        """Return a free id, preferring the most recently freed one."""
        if self._free_list:
            return self._free_list.pop()
        this_id = self._next_id
        self._next_id += 1
        return this_id

    def free(self, id: Id) -> None:
        """Return an id to the generator for reuse."""
        self._free_list.append(id)

    def __repr__(self) -> str:
        return f"IdGen(next_id={self._next_id}, free={self._free_list!r})"