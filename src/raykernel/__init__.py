"""Ray-geometry kernel for CPU ray casting with Phong shading.

This package provides the numeric core of a small ray caster:
- Homogeneous-coordinate tuples (points w=1, vectors w=0) and colors
- Square matrices with cofactor-expansion determinant and inverse
- Named affine transforms with fluent composition
- Ray casting against transformed unit spheres
- Sorted intersection collections with hit selection
- Phong local illumination from a point light

Subpackages:
    core: Tuples, colors, matrices, transforms, rays, and the error taxonomy
    geometry: Shape primitives and intersection/normal dispatch
    scene: Intersection records and light sources
    materials: Surface reflectance and the Phong lighting function
    preview: Pixel buffer and image export collaborators
"""

__version__ = "0.1.0"
