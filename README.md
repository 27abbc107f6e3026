# gamemaths

A small pure-Python maths toolkit for games and graphics work. It has no runtime
dependencies.

## What is in it

| Module | Contents |
| --- | --- |
| `gamemaths.vectors` | `Vector2`, `Vector3`, `Vector4` |
| `gamemaths.vector_int` | `Vector3Int` |
| `gamemaths.matrices` | `Matrix2`, `Matrix3`, `Matrix4`, `direction_to_euler_angles`, `euler_angles_to_direction` |
| `gamemaths.matrix_nm` | `MatrixNM`, `MatrixIndexError`, `MatrixArithmeticError` |
| `gamemaths.functions` | `normal_probability_density`, `normal_cdf`, `quicksort`, `solve_quadratic` |
| `gamemaths.interpolation` | `lerp`, `interp_by_fn`, `inverse_lerp`, `bilerp`, `bi_interp_by_fn`, `bi_interp_by_double_fn`, `trilerp`, `tri_interp_by_fn`, `tri_interp_by_triple_fn` |
| `gamemaths.noise` | `simplex2d`, `simplex3d`, `grad3`, `selector_noise_2d`, `selector_noise_3d` |
| `gamemaths.collider_base` | `Collider` (abstract), `RayHitInfo` |
| `gamemaths.bounding_sphere` | `BoundingSphere` |
| `gamemaths.aabb` | `AABoundingBox` |
| `gamemaths.triangle_collider` | `TriangleCollider` |
| `gamemaths.plane_collider` | `PlaneCollider` |
| `gamemaths.mesh_collider` | `MeshCollider` |
| `gamemaths.camera` | `Camera`, `CameraDirections` |
| `gamemaths.noise_testing` | `main`, which backs the `gamemaths-noise` command |

Import from these modules directly. The package's `__init__` only holds the
version.

### Vectors

`Vector2`, `Vector3` and `Vector4` are mutable dataclasses of floats. They
provide the following:

- `+`, `-` and unary `-`.
- `*` and `/` by a scalar.
- `from_any()`, which builds a vector from any iterable of the right length.
- `dot`, `magnitude`, `sqr_magnitude`, `normalise` (in place) and swizzles such as `xy()`.
- Iteration over the components.
- Lexicographic ordering by x, then y, then z, then w.

`Vector2` and `Vector3` also give component-wise products with `*` and
component-wise division with `/`. `Vector3` adds these:

- `cross`, `angle_to`, `outer_product`, `skew_symmetric` and `direction_directions`.
- `extend`, `extend_with` and `truncate`.

Division by zero gives an infinity or NaN instead of raising.

Each vector class has fresh constants such as `Vector3.X`, `Vector3.ZERO`,
`Vector3.ONE` and `Vector3.EPSILON`.

`Vector3Int` is a frozen, hashable vector of 32-bit integers. Its
`from_any(Vector3(...))` floors each component.

### Matrices

`Matrix2`, `Matrix3` and `Matrix4` store their rows as vectors. They support
`+` and `-`. They also support `*` by a scalar, and `Matrix2` and `Matrix3`
support `/` by a scalar.

Use `@` for products:

- matrix `@` matrix
- matrix `@` vector

All three classes can be built with `from_values(...)`, which takes the values
row by row, or with `from_rows(...)`.

They also provide the following:

- `Matrix2` has `det`, `inverted` and `extend`.
- `Matrix3` has these methods:
  - `from_columns`
  - `from_angle_x`, `from_angle_y` and `from_angle_z`
  - `from_angle_and_axis`
  - `from_euler_angles`
  - `euler_angles_from`
  - `from_scale`
  - `transposed`, `determinant`, `inverted`, `extend` and `truncate`
- `Matrix4` has these methods:
  - `perspective_matrix`
  - `transpose` (in place) and `transposed`
  - `determinant` and `inverted`
  - `truncate` and `to_lists`
- `inverted()` returns an unchanged copy when the matrix is singular.

`MatrixNM` is a matrix of any size. It provides these methods:

- `empty` and `from_items` to build one.
- `row`, `column` and `element` to read it.
- `+`, `-`, `@` and scalar `*`.

An out-of-range index raises `MatrixIndexError`. Mismatched shapes raise
`MatrixArithmeticError`.

### Colliders

Every collider has `check_ray(root_position, direction, max_distance=None)`.
It returns a `RayHitInfo` with `hit_position`, `hit_distance` and `hit_normal`,
or `None` if the ray misses.

A ray that starts inside a sphere or a box hits at distance 0. A mesh tests its
triangles nearest first, once the ray has passed its bounding box.

`BoundingSphere.from_points` and `AABoundingBox.from_points` fit bounds to
points. `AABoundingBox.from_spheres` fits a box around spheres. Both classes
also have containment and intersection tests. `BoundingSphere` has
`intersection_volume` and `volume`.

### Interpolation, noise and helpers

All of the interpolation functions clamp their positions to 0..1.

- The `tri_interp_by_*` variants are the exception: they pass the raw position through the shaping function first.
- Interpolation works on numbers or on vectors.

`simplex2d` and `simplex3d` return values in roughly -1..1.

`quicksort` sorts `(key, value)` pairs by key, and equal keys keep their
original order.

`solve_quadratic(a, b, c)` returns a pair of roots, with `None` for each root
that does not exist.

### Camera

`Camera` holds a position, a direction and a mapping from your own control
values to `CameraDirections`.

- `process_input(control, state)` presses or releases a movement.
- `do_move(delta_time)` applies the held movements once the camera is `controllable()`.
- `view_matrix()` returns a `Matrix4`.

## Examples

```python
from gamemaths.vectors import Vector3
from gamemaths.matrices import Matrix3
from gamemaths.bounding_sphere import BoundingSphere

v = Vector3(0.0, 0.0, 1.0).cross((1, 0, 0))        # Vector3(0.0, 1.0, 0.0)

rotation = Matrix3.from_angle_and_axis(0.5, (0, 1, 0))
rotated = rotation @ Vector3(1.0, 0.0, 0.0)

sphere = BoundingSphere((0, 0, 0), 2.5)
hit = sphere.check_ray((5, 0, 0), (-1, 0, 0), 20.0)
if hit is not None:
    print(hit.hit_position, hit.hit_distance)       # [2.5, 0, 0] 2.5
```

```python
from gamemaths.interpolation import lerp, bilerp
from gamemaths.noise import simplex2d
from gamemaths.functions import solve_quadratic

lerp(1.0, 3.0, 0.25)                        # 1.5
bilerp([5.0, 4.0, 3.0, 6.0], (0.1, 0.7))
simplex2d(12.3, 45.6)
solve_quadratic(1.0, -5.0, 6.0)             # (3.0, 2.0)
```

## Command line

`gamemaths-noise` samples 2D simplex noise at random points. It prints each
sample as `x, y: value`, then the largest and smallest values it saw.

```
gamemaths-noise
gamemaths-noise --samples 1000 --seed 42
```

The command takes two options:

- `--samples` sets how many points are sampled. The default is 200.
- `--seed` makes the run repeatable.

## What it does not do

This is a maths library only:

- It draws nothing and opens no window.
- `Camera` reads no keyboard or mouse itself. You feed it control values through `process_input`.
- It has no random-number generators of its own. Use the standard `random` module.

## Running the tests

```
pip install .[test]
pytest
```