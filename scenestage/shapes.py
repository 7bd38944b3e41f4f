"""Shape primitives: glyph runs, quads and their metrics."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Hashable, Sequence

Vector3 = tuple[float, float, float]
Color = tuple[float, float, float, float]
Point = tuple[int, int]
Bounds = tuple[tuple[float, float], tuple[float, float]]

_U16_MAX = 0xFFFF


def _vector3(value: Sequence[float]) -> Vector3:
    components = tuple(float(component) for component in value)
    if len(components) != 3:
        raise ValueError(f"a vector needs 3 components, got {len(components)}")
    return components  # type: ignore[return-value]


def _require_unsigned(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


@dataclass(frozen=True)
class TextWeight:
    """A font weight on the usual 100 to 900 scale."""

    value: int

    THIN: ClassVar[TextWeight]
    EXTRA_LIGHT: ClassVar[TextWeight]
    LIGHT: ClassVar[TextWeight]
    NORMAL: ClassVar[TextWeight]
    MEDIUM: ClassVar[TextWeight]
    SEMI_BOLD: ClassVar[TextWeight]
    BOLD: ClassVar[TextWeight]
    EXTRA_BOLD: ClassVar[TextWeight]
    BLACK: ClassVar[TextWeight]

    def __post_init__(self) -> None:
        if not 0 <= self.value <= _U16_MAX:
            raise ValueError(f"text weight out of range: {self.value}")


TextWeight.THIN = TextWeight(100)
TextWeight.EXTRA_LIGHT = TextWeight(200)
TextWeight.LIGHT = TextWeight(300)
TextWeight.NORMAL = TextWeight(400)
TextWeight.MEDIUM = TextWeight(500)
TextWeight.SEMI_BOLD = TextWeight(600)
TextWeight.BOLD = TextWeight(700)
TextWeight.EXTRA_BOLD = TextWeight(800)
TextWeight.BLACK = TextWeight(900)


@dataclass(frozen=True)
class GlyphRunMetrics:
    """Vertical extent and width of a glyph run in font-size pixels."""

    max_ascent: int
    max_descent: int
    width: int

    def __post_init__(self) -> None:
        _require_unsigned("max_ascent", self.max_ascent)
        _require_unsigned("max_descent", self.max_descent)
        _require_unsigned("width", self.width)

    def size(self) -> tuple[int, int]:
        """Size of the glyph run in font-size pixels."""
        return (self.width, self.max_ascent + self.max_descent)


@dataclass(frozen=True)
class Placement:
    """Where a rasterized glyph image lies relative to its origin."""

    left: int
    top: int
    width: int
    height: int

    def __post_init__(self) -> None:
        _require_unsigned("width", self.width)
        _require_unsigned("height", self.height)


@dataclass(frozen=True)
class RunGlyph:
    """A glyph inside a glyph run."""

    key: Hashable
    hitbox_pos: Point
    hitbox_width: float

    def __post_init__(self) -> None:
        x, y = self.hitbox_pos
        object.__setattr__(self, "hitbox_pos", (int(x), int(y)))

    def pixel_bounds_at(self, offset: tuple[int, int]) -> Bounds:
        """The bounds enclosing one pixel at the offset of the hitbox."""
        dx, dy = offset
        _require_unsigned("offset x", dx)
        _require_unsigned("offset y", dy)
        x = self.hitbox_pos[0] + dx
        y = self.hitbox_pos[1] + dy
        return ((float(x), float(y)), (float(x + 1), float(y + 1)))


@dataclass
class GlyphRun:
    """Glyphs sharing a translation, metrics, color and weight."""

    translation: Vector3
    metrics: GlyphRunMetrics
    text_color: Color
    text_weight: TextWeight
    glyphs: list[RunGlyph] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.translation = _vector3(self.translation)
        self.glyphs = list(self.glyphs)

    def place_glyph(self, glyph: RunGlyph, placement: Placement) -> tuple[Point, Point]:
        """Translate a rasterized glyph's position into the run's coordinate system."""
        hitbox_x, hitbox_y = glyph.hitbox_pos
        left = hitbox_x + placement.left
        top = hitbox_y + self.metrics.max_ascent - placement.top
        right = left + placement.width
        bottom = top + placement.height
        return ((left, top), (right, bottom))


@dataclass
class Quad:
    """Four vertices with one color, visible from both sides."""

    vertices: tuple[Vector3, Vector3, Vector3, Vector3]
    color: Color

    def __post_init__(self) -> None:
        vertices = tuple(_vector3(vertex) for vertex in self.vertices)
        if len(vertices) != 4:
            raise ValueError(f"a quad needs 4 vertices, got {len(vertices)}")
        self.vertices = vertices  # type: ignore[assignment]


@dataclass
class GlyphRunShape:
    """A glyph run placed with a shared model matrix."""

    model_matrix: Any
    run: GlyphRun


@dataclass
class QuadsShape:
    """A list of quads placed with a shared model matrix."""

    model_matrix: Any
    quads: list[Quad] = field(default_factory=list)