"""Materials module for surface reflectance.

Components:
    phong: Phong material (ambient, diffuse, specular, shininess) and the
        point-light lighting function
"""

from .phong import DEFAULT_MATERIAL, Material, lighting

__all__ = [
    "Material",
    "DEFAULT_MATERIAL",
    "lighting",
]
