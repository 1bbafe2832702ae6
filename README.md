# gameworld

Building blocks for simple games, with no rendering code attached. You bring
the drawing; gameworld keeps track of where 2D sprites are, how they move and
animate, and whether they touch. It also reads Wavefront OBJ meshes and MTL
material libraries into plain Python data.

## What is inside

- `gameworld.vector.Vector` – a mutable 3D vector with `length()`,
  `normalized()`, `distance()`, `copy()`, and `+`, `-`, unary `-` and `*` by a
  number. It can be unpacked as `x, y, z = v`.
- `gameworld.color.Color` – an immutable RGBA colour with components in 0–1.
  `Color.from_bytes(r, g, b, a)` takes 0–255 channel values and an alpha
  percentage; `with_alpha()` and `scaled()` return changed copies; `black()`,
  `white()`, `red()`, `green()` and `blue()` give common colours.
- `gameworld.rotation` – `rotate_point(point, rx, ry, rz)` rotates a point by
  angles in degrees (x first, then z, then y); `inverse_rotate_point` turns a
  point back for bounding-box tests; `angle_xz(dx, dz)` gives a heading in the
  XZ plane, where 0 points along +x and 90 along −z.
- `gameworld.materials` – `Material`, `parse_mtl`, `load_mtl` and
  `assign_materials`. The parsed list always starts with the generic default
  material; colour components are clamped to 0–1. `assign_materials` gives
  each group a copy of the material with the same name, or the generic one.
- `gameworld.objfile` – `parse_obj` and `load_obj` triangulate OBJ faces as a
  fan around their first corner into an `ObjMesh` with per-corner `vertices`,
  `normals` and `tex_coords`, split into `Group`s at each `usemtl`. Missing
  normals are filled with flat normals from `face_normals()`.
  `ObjMesh.bounds()` returns the smallest and largest corner of the mesh's box.
  Malformed numbers, out-of-range indices and faces with fewer than three
  corners raise `ObjFormatError`. At most 65535 faces are read, and a face
  uses at most its first 16 corners.
- `gameworld.sprite.Sprite` – a rectangle with a centre, size, rotation,
  movement direction (an angle in degrees) and speed. It has frame animation
  (`play_animation`, `set_frame`, `animation_finished`), removal marking
  (`delete`, `undelete`, `die`, `is_deleted`), `copy_at()`, and hit tests
  against points and other sprites (`hit_test_distance`, `hit_test_point`,
  `hit_test`, `hit_test_front`) using rotated bounding boxes.
- `gameworld.healthbar.HealthBar` – a sprite with bar, background and border
  colours; `fill_width()` clamps `health` to 0–100 and returns the width of
  the filled part.

## Example

```python
from gameworld.sprite import Sprite

ship = Sprite(0, 0, 20, 10)
ship.speed = 50          # units per second
ship.direction = 0       # moving along +x

rock = Sprite(100, 0, 10, 10)

for t in range(1, 3001, 20):   # game time in milliseconds
    ship.update(t)
    if ship.hit_test(rock):
        rock.delete()
        break

print(rock.is_deleted())
```

Time is given in milliseconds, speeds in units per second and angles in
degrees. A sprite's first `update()` call only sets its reference clock;
movement starts with the next call.

## Loading meshes

```python
from gameworld.objfile import load_obj

mesh = load_obj("models/tree.obj")
low, high = mesh.bounds()
print(mesh.triangle_count, [g.material.name for g in mesh.groups])
```

If an OBJ file names a material library with `mtllib`, the library is looked
up in the OBJ file's own directory, or under `models/` when the path names no
directory. When it cannot be read, every group gets the generic material.

## What it does not do

gameworld draws nothing, plays no sound, reads no keyboard or mouse input and
runs no game loop. Meshes are loaded as data only: there is no 3D game-object
class that moves, animates or collides a mesh, so motion and hit tests are
available for 2D sprites alone.

## Running the tests

Install with the `test` extra, then run `pytest`.