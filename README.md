# scenestage

`scenestage` holds a scene made of objects that refer to each other through
handles. It does not keep the render data of those objects itself. Every create,
update and delete is recorded as a change. A `Director` pools the changes and
passes them to a renderer callback in a single batch, so the renderer never sees
a half-finished state.

## Concepts

- **Objects** (`scenestage.objects`)
  - `Matrix` is a 4x4 transformation stored row by row. `Matrix.identity()` gives the identity matrix.
  - `Location` is a handle to a matrix, plus an optional handle to a parent
    location. `Location.from_matrix(handle)` builds a location that has no parent.
  - `Visual` is a handle to a location together with its shapes. A shape is a
    `GlyphRun` or a list of `Quad`s. You can pass a single shape or a sequence of
    shapes. A flat list of quads counts as one shape.

  Every object has a `split()` method. It separates what stays alive on the
  client side, such as the handles it refers to, from what is uploaded. Locations
  upload a `LocationRenderObj`, visuals upload a `VisualRenderObj`, and a matrix
  uploads itself. Both render objects carry ids only, never handles.
- **Handles** (`scenestage.handle`)
  - `Director.stage(value)` returns a `Handle`, which records a `Create`.
  - `Handle.update(value)` records an `Update`. It raises `TypeError` if the new
    value is an object of a different kind.
  - A `Delete` is recorded when the handle is garbage collected.
  - A handle keeps alive the handles its object refers to.
- **Ids** (`scenestage.ids`)
  - Each object kind has its own `IdGen`, so the ids within a kind stay
    contiguous.
  - When `Director.action()` sends a batch that contains a delete, the deleted
    id goes back to its generator. The generator hands out that id again before
    it makes a new one.
- **Changes** (`scenestage.changes`)
  - A `SceneChange` pairs an `ObjectKind` (`MATRIX`, `LOCATION` or `VISUAL`)
    with a `Create`, `Update` or `Delete`.
  - `SceneChange.destructive_change()` returns `(kind, id)` for a delete and
    `None` for anything else.
  - `ChangeTracker` collects the changes in order. `take_all()` drains them.

## Usage

```python
from scenestage.director import Director
from scenestage.objects import Location, Matrix, Visual

batches = []
director = Director(batches.append)

matrix = director.stage(Matrix.identity())
location = director.stage(Location.from_matrix(matrix))
visual = director.stage(Visual(location, []))

director.action()          # batches[0] now holds three Create changes
```

When nothing is pending, `action()` does nothing and does not call the callback.

To feed a queue instead, use `Director.from_sender(sender)`. It works with any
object that has a `put_nowait` method, for example `queue.Queue` or
`asyncio.Queue`. Each batch is handed over with `sender.put_nowait(changes)`.

## Shapes

`scenestage.shapes` describes what can be drawn:

- `GlyphRun` holds `RunGlyph` values, along with a translation,
  `GlyphRunMetrics`, a colour and a `TextWeight`.
  - `TextWeight` has named weights from `THIN` (100) to `BLACK` (900).
  - `GlyphRunMetrics.size()` returns `(width, max_ascent + max_descent)`.
- `GlyphRun.place_glyph(glyph, placement)` takes a `Placement` for a rasterised
  glyph image. It returns the top-left and bottom-right corners of that image
  inside the run.
- `RunGlyph.pixel_bounds_at(offset)` gives the bounds of the pixel at `offset`
  from the glyph's hitbox position.
- `Quad` has four vertices and one colour.
- `GlyphRunShape` and `QuadsShape` pair a glyph run or a list of quads with a
  model matrix.

## Flat shape lists

`scenestage.legacy` converts a flat list of `GlyphRunShape` and `QuadsShape`
values into scene objects:

- `into_visuals(director, shapes)` stages one `Visual` for each shape and returns
  the visual handles. Shapes that share the same model matrix object also share
  one staged `Matrix` and one `Location`. A model matrix may be a `Matrix` or its
  rows.
- `bootstrap_scene_changes(shapes)` stages the shapes with a fresh director and
  runs `action()` once. It returns the resulting list of changes.

## Timing

`scenestage.timing.time(name, f)` calls `f` and prints how long the call took,
for example `load: 1.25ms`. It returns the result of `f`.

## What it does not do

`scenestage` only records and hands over changes. It does not:

- draw anything;
- open windows;
- run an event loop;
- rasterise glyphs;
- animate values.

A renderer that consumes the `SceneChange` batches has to be supplied separately.

## Tests

```
pip install -e ".[test]"
pytest
```