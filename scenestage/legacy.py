"""Turning flat lists of shapes into staged scene objects."""

from __future__ import annotations

import queue
from typing import Any, Iterable

from scenestage.changes import SceneChange
from scenestage.director import Director
from scenestage.handle import Handle
from scenestage.objects import Location, Matrix, Visual
from scenestage.shapes import GlyphRunShape, QuadsShape


def bootstrap_scene_changes(shapes: Iterable[Any]) -> list[SceneChange]:
    """The changes that create a scene holding the given shapes."""
    channel: queue.Queue[list[SceneChange]] = queue.Queue(maxsize=1)
    director = Director.from_sender(channel)

    # The visuals must stay alive until the director has run.
    visuals = into_visuals(director, shapes)
    director.action()
    del visuals

    try:
        return channel.get_nowait()
    except queue.Empty:
        return []


def into_visuals(director: Director, shapes: Iterable[Any]) -> list[Handle[Visual]]:
    """Stage one visual per shape; shapes sharing a model matrix object share a location."""
    shapes = list(shapes)
    # Keyed by identity: the shapes list keeps every matrix object alive meanwhile.
    locations: dict[int, Handle[Location]] = {}
    visuals: list[Handle[Visual]] = []

    for shape in shapes:
        if isinstance(shape, GlyphRunShape):
            content: Any = shape.run
        elif isinstance(shape, QuadsShape):
            content = [list(shape.quads)]
        else:
            raise TypeError(f"not a shape: {shape!r}")

        model_matrix = shape.model_matrix
        location = locations.get(id(model_matrix))
        if location is None:
            matrix = model_matrix if isinstance(model_matrix, Matrix) else Matrix(model_matrix)
            location = director.stage(Location.from_matrix(director.stage(matrix)))
            locations[id(model_matrix)] = location

        visuals.append(director.stage(Visual(location, content)))

    return visuals