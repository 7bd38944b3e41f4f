"""The objects that can be staged in a scene: matrices, locations and visuals."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterable, Optional, Sequence, Union

from scenestage.changes import ObjectKind
from scenestage.handle import Handle
from scenestage.ids import Id
from scenestage.shapes import GlyphRun, Quad

Shape = Union[GlyphRun, list[Quad]]


def _require_kind(handle: Any, kind: ObjectKind, what: str) -> None:
    if not isinstance(handle, Handle) or handle.kind is not kind:
        raise TypeError(f"{what} must be a handle to a {kind.value}, got {handle!r}")


def _normalize_shapes(shapes: Union[Shape, Iterable[Shape]]) -> list[Shape]:
    """Accept one shape or a sequence of shapes; a list of quads counts as one shape."""
    if isinstance(shapes, GlyphRun):
        return [shapes]
    items = list(shapes)
    if items and isinstance(items[0], Quad):
        items = [items]
    result: list[Shape] = []
    for shape in items:
        if isinstance(shape, GlyphRun):
            result.append(shape)
        elif isinstance(shape, (list, tuple)) and all(isinstance(q, Quad) for q in shape):
            result.append(list(shape))
        else:
            raise TypeError(f"not a shape: {shape!r}")
    return result


@dataclass(frozen=True)
class Matrix:
    """A 4x4 transformation matrix, stored row by row."""

    rows: tuple[tuple[float, float, float, float], ...]

    kind: ClassVar[ObjectKind] = ObjectKind.MATRIX

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(v) for v in row) for row in self.rows)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("a matrix needs 4 rows of 4 values")
        object.__setattr__(self, "rows", rows)

    @classmethod
    def identity(cls) -> Matrix:
        return cls(tuple(tuple(1.0 if r == c else 0.0 for c in range(4)) for r in range(4)))

    def split(self) -> tuple[None, Matrix]:
        """Nothing is kept; the matrix itself is uploaded."""
        return None, self


@dataclass(frozen=True)
class LocationRenderObj:
    """What the renderer receives for a location: ids only."""

    parent: Optional[Id]
    matrix: Id


@dataclass
class Location:
    """A position in space: a matrix, optionally relative to a parent location."""

    matrix: Handle[Matrix]
    parent: Optional[Handle[Location]] = None

    kind: ClassVar[ObjectKind] = ObjectKind.LOCATION

    def __post_init__(self) -> None:
        _require_kind(self.matrix, ObjectKind.MATRIX, "matrix")
        if self.parent is not None:
            _require_kind(self.parent, ObjectKind.LOCATION, "parent")

    @classmethod
    def from_matrix(cls, matrix: Handle[Matrix]) -> Location:
        """A location without a parent."""
        return cls(matrix=matrix)

    def split(self) -> tuple[Location, LocationRenderObj]:
        """Keep the referenced handles; upload their ids."""
        parent = self.parent.id() if self.parent is not None else None
        return self, LocationRenderObj(parent=parent, matrix=self.matrix.id())


@dataclass
class VisualRenderObj:
    """What the renderer receives for a visual."""

    location: Id
    shapes: list[Shape]


@dataclass
class Visual:
    """A set of shapes that share a common location in space."""

    location: Handle[Location]
    shapes: Sequence[Any] = field(default_factory=list)

    kind: ClassVar[ObjectKind] = ObjectKind.VISUAL

    def __post_init__(self) -> None:
        _require_kind(self.location, ObjectKind.LOCATION, "location")
        self.shapes = _normalize_shapes(self.shapes)

    def split(self) -> tuple[Handle[Location], VisualRenderObj]:
        """Keep the location handle; upload its id with the shapes."""
        return self.location, VisualRenderObj(self.location.id(), list(self.shapes))