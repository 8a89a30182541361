"""Phong reflection model.

This module implements local illumination from a single point light as
the sum of three terms:

    ambient  = effective_color * ambient
    diffuse  = effective_color * diffuse * dot(light_vector, normal)
    specular = intensity * specular * dot(reflect_vector, eye)^shininess

where effective_color is the surface color blended with the light's
intensity. Diffuse and specular drop to black when the light is behind
the surface, and specular drops to black when the reflection points away
from the eye.

The result is not clamped. Summed contributions can exceed 1.0 (e.g. 1.9
for a white light straight on), and callers that display colors must
clamp them.

Example:
    >>> from raykernel.core.color import WHITE, Color
    >>> from raykernel.core.tuple import point, vector
    >>> from raykernel.materials.phong import Material
    >>> from raykernel.scene.light import PointLight
    >>> light = PointLight(point(0, 0, -10), WHITE)
    >>> Material().lighting(light, point(0, 0, 0), vector(0, 0, -1), vector(0, 0, -1))
    Color(red=1.9, green=1.9, blue=1.9)
"""

from __future__ import annotations

from dataclasses import dataclass

from raykernel.core.color import BLACK, WHITE, Color
from raykernel.core.tuple import Tuple
from raykernel.scene.light import PointLight


@dataclass(frozen=True)
class Material:
    """Phong surface reflectance.

    Attributes:
        color: The surface color.
        ambient: Fraction of background light reflected (>= 0).
        diffuse: Fraction of matte reflection (>= 0).
        specular: Strength of the specular highlight (>= 0).
        shininess: Highlight tightness; larger is smaller and sharper (> 0).
    """

    color: Color = WHITE
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0

    def __post_init__(self) -> None:
        for name in ("ambient", "diffuse", "specular"):
            value = getattr(self, name)
            if value < 0.0:
                raise ValueError(f"Material {name} = {value} is negative.")
        if self.shininess <= 0.0:
            raise ValueError(f"Material shininess = {self.shininess} must be positive.")

    def lighting(
        self,
        light: PointLight,
        position: Tuple,
        eye_vector: Tuple,
        normal_vector: Tuple,
    ) -> Color:
        """Shade a surface point with the Phong model.

        Args:
            light: The point light illuminating the surface.
            position: The world-space point being shaded.
            eye_vector: Unit vector from the point toward the eye.
            normal_vector: Unit surface normal at the point.

        Returns:
            The unclamped sum of ambient, diffuse and specular contributions.

        Raises:
            ZeroMagnitudeError: If the light sits exactly at position.
        """
        effective_color = self.color * light.intensity
        light_vector = (light.position - position).normalized()
        ambient = effective_color * self.ambient

        # Cosine of the angle between light and normal; negative means the
        # light is on the other side of the surface
        light_dot_normal = light_vector.dot(normal_vector)
        if light_dot_normal < 0.0:
            diffuse = BLACK
            specular = BLACK
        else:
            diffuse = effective_color * self.diffuse * light_dot_normal

            # Cosine of the angle between reflection and eye; non-positive
            # means the light reflects away from the eye
            reflect_vector = (-light_vector).reflect(normal_vector)
            reflect_dot_eye = reflect_vector.dot(eye_vector)
            if reflect_dot_eye <= 0.0:
                specular = BLACK
            else:
                factor = reflect_dot_eye**self.shininess
                specular = light.intensity * self.specular * factor

        return ambient + diffuse + specular


def lighting(
    material: Material,
    light: PointLight,
    position: Tuple,
    eye_vector: Tuple,
    normal_vector: Tuple,
) -> Color:
    """Shade a surface point with the given material.

    Function form of Material.lighting.
    """
    return material.lighting(light, position, eye_vector, normal_vector)


DEFAULT_MATERIAL = Material()
