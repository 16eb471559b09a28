# ichigo

ichigo is the core of a small engine for 2.5D games built on a voxel
coordinate system. It has two sub-packages:

- `ichigo.geom`: geometry. Integer points and rectangles (`point`), 3D
  integer vectors (`int3`), float vectors (`floats`), axis-aligned boxes
  (`box`), exact small rationals (`rational`), integer-plus-fraction numbers
  (`intfloat`), projections of Z onto the screen plane (`projection`), convex
  polygon tests (`polygon`), integer, rational and float matrices (`matrix`)
  and linear and cubic splines (`spline`).
- `ichigo.engine`: a component tree managed by a `Game` (`game`), with the
  behaviour protocols (`interface`), the `ID`, `Bounds`, `Disables` and
  `Hides` mixins (`traits`), an ordered set (`container`), affine draw
  transforms (`drawopts`) and the components `Actor`, `Anim`/`AnimDef`,
  `Camera`, `SolidRect`, `ImageRef`, `Sheet`, `PrismMap`/`Prism` and
  `DrawDAG`.

Images are read and drawn with Pillow; everything else uses only the standard
library.

## Geometry

```python
from ichigo.geom.point import Point
from ichigo.geom.polygon import polygon_contains
from ichigo.geom.rational import Rat

square = [Point(0, 0), Point(0, 5), Point(5, 5), Point(5, 0)]
polygon_contains(square, Point(2, 3))   # True
polygon_contains(square, Point(6, 6))   # False

str(Rat(1, 2).add(Rat(1, 3)))           # '5/6'
```

Integer division throughout truncates toward zero (`point.idiv`).
`RatMatrix3.inverse` and `Matrix3x4.inverse` raise `SingularMatrixError`
when the determinant is zero.

`LinearSpline` and `CubicSpline` are prepared once with `prepare()` and then
evaluated with `interpolate(x)`. `prepare` sorts the points and raises
`SplineError` when there are no points or two points share an X value.
Outside the range of the points a spline extrapolates linearly. A
`CubicSpline` is a natural spline unless `fixed_preslope` or
`fixed_postslope` is set, in which case `preslope`/`postslope` fix the end
slopes; otherwise `prepare` fills them in.

## Engine

A `Game` holds a `root` component. `load_and_prepare(assets)` loads every
loader in the tree, builds the component database (IDs, parents, children and
behaviour indexes), then prepares every component, descendants first. After
that:

- `component(id)` finds a component by its identifier,
- `parent(c)`, `children(c)`, `path(c)` and `reverse_path(c)` walk the tree,
- `query(ancestor, behaviour, visit_pre, visit_post)` visits every descendant
  with a behaviour, and the components leading to it; raising `Skip` from
  `visit_pre` leaves out that subtree,
- `register(component, parent)` and `unregister(component)` add and remove
  subtrees while the game runs; `register` raises `ValueError` for a missing
  component or parent or a duplicate ID,
- `update()` updates every enabled component, children before parents,
- `draw(screen)` draws the root unless the game is hidden.

Components take part by having the right methods: `scan` to expose children,
`prepare` to receive the game, `update`, `draw`, `hidden`, `disabled`,
`bounding_box`, `collides_with`, `transform` and so on. The protocols in
`ichigo.engine.interface` name these behaviours.

An `Actor` moves one voxel at a time and, at the first voxel where a collider
in its collision domain reports a collision, calls an optional callback and
steps back. A `Camera` can `point_at` a position, keeping its view inside its
child's bounding rectangle. A `DrawDAG` keeps its drawable descendants in a
graph indexed by spatial chunks and draws them in topological order, breaking
any cycle it finds rather than failing. A `PrismMap` is a 3D tile map of
identically shaped prisms, with exact collision against the prism's top
polygon.

`ImageRef.load(assets)` reads an image through `assets.joinpath(path)`, so a
`pathlib.Path` directory works as the asset tree; images are cached per asset
tree and path. `Sheet.sub_image(i)` crops one cell. `Prism.draw` composites
its cell onto a Pillow image through the transform in a `DrawOptions`.

## What it does not do

ichigo has no window, display, input handling or game loop of its own: a
caller calls `update` and `draw` and supplies a Pillow image as the screen.
There are no commands to run, no saving or loading of whole scenes, and
apart from `Prism` no ready-made drawable components such as sprites,
tile maps or background fills.