"""Transformable sphere primitive.

A Sphere is a canonical sphere in object space (by default the unit sphere
at the origin) carrying a 4x4 transform that places it in world space.
Instead of transforming the sphere, queries transform the *ray* (or the
point) by the inverse transform into object space, solve there, and map
results back.

Ray-sphere intersection solves, in object space:

    |origin + t * direction - center|^2 = radius^2

    a = dot(direction, direction)
    b = 2 * dot(direction, sphere_to_ray)
    c = dot(sphere_to_ray, sphere_to_ray) - radius^2
    discriminant = b^2 - 4ac

A negative discriminant means the ray misses. Otherwise the two roots are
returned in ascending order (they coincide for a tangent ray). Both roots
are kept, including negative ones, so callers can tell whether the ray
starts inside the sphere.

Normals are mapped back to world space with the transpose of the inverse
transform. Under non-uniform scaling the transform itself would skew the
normal away from perpendicular. The inverse transpose also smears the
translation column into w, so w is reset to 0 before normalizing.

Example:
    >>> from raykernel.core.ray import Ray
    >>> from raykernel.core.transform import scaling
    >>> from raykernel.core.tuple import point, vector
    >>> from raykernel.geometry.sphere import Sphere
    >>> sphere = Sphere(transform=scaling(2, 2, 2))
    >>> xs = sphere.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
    >>> [x.t for x in xs]
    [3.0, 7.0]
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field

from raykernel.core.errors import DegenerateDirectionError
from raykernel.core.matrix import Matrix
from raykernel.core.ray import Ray
from raykernel.core.tuple import ORIGIN, Tuple
from raykernel.materials.phong import Material
from raykernel.scene.intersection import Intersection, Intersections


@dataclass(frozen=True)
class Sphere:
    """A sphere in object space placed into the world by a transform.

    Two spheres are equal when origin, radius, transform and material are
    all equal. Identity plays no part.

    Attributes:
        origin: Center of the sphere in object space (a point).
        radius: Object-space radius (positive, conventionally 1.0).
        transform: 4x4 object-to-world transform. Must be invertible for
            intersection and normal queries.
        material: Surface material used for shading.
    """

    origin: Tuple = ORIGIN
    radius: float = 1.0
    transform: Matrix = field(default_factory=lambda: Matrix.identity(4))
    material: Material = field(default_factory=Material)

    def __post_init__(self) -> None:
        if self.radius <= 0.0:
            raise ValueError(f"Sphere radius = {self.radius} must be positive.")
        if self.transform.size != 4:
            raise ValueError(
                f"Sphere transform must be 4x4, got {self.transform.size}x{self.transform.size}"
            )

    def with_transform(self, transform: Matrix) -> Sphere:
        """Return a copy of this sphere with a different transform."""
        return dataclasses.replace(self, transform=transform)

    def with_material(self, material: Material) -> Sphere:
        """Return a copy of this sphere with a different material."""
        return dataclasses.replace(self, material=material)

    def intersect(self, ray: Ray) -> Intersections:
        """Intersect a world-space ray with this sphere.

        Args:
            ray: The ray to test, in world space.

        Returns:
            Either no intersections (miss) or exactly two, sorted ascending
            by t and both referencing this sphere. A tangent ray yields two
            equal values.

        Raises:
            DegenerateDirectionError: If the ray direction has zero length
                in object space.
            NotInvertibleError: If the transform is singular.
        """
        local_ray = ray.transform(self.transform.inverse())
        sphere_to_ray = local_ray.origin - self.origin

        a = local_ray.direction.dot(local_ray.direction)
        if a == 0.0:
            raise DegenerateDirectionError(f"Cannot intersect ray with zero direction: {ray}")
        b = 2.0 * local_ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - self.radius * self.radius

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return Intersections()

        sqrt_d = math.sqrt(discriminant)
        t1 = (-b - sqrt_d) / (2.0 * a)
        t2 = (-b + sqrt_d) / (2.0 * a)
        return Intersections([Intersection(t1, self), Intersection(t2, self)])

    def normal_at(self, world_point: Tuple) -> Tuple:
        """Compute the unit surface normal at a world-space point.

        Args:
            world_point: A point on the sphere's surface, in world space.

        Returns:
            The world-space unit normal vector (w=0).

        Raises:
            NotInvertibleError: If the transform is singular.
        """
        inverse = self.transform.inverse()
        object_point = inverse @ world_point
        object_normal = object_point - self.origin
        world_normal = inverse.transposed() @ object_normal
        # Translation terms of the inverse transpose leak into w
        world_normal = Tuple(world_normal.x, world_normal.y, world_normal.z, 0.0)
        return world_normal.normalized()
