"""Intersection records and the sorted Intersections collection.

An Intersection pairs a ray parameter ``t`` with the shape that was struck.
Intersections holds any number of them sorted ascending by ``t`` and
answers which one is the *hit*: the nearest intersection in front of the
ray origin.

Sorting happens once, at construction. ``hit()`` is then just the first
entry with ``t >= 0``; entries with negative ``t`` lie behind the ray
origin and never count as a hit.

The relative order of entries sharing an identical ``t`` is not part of
the contract. Do not rely on it.

Example:
    >>> from raykernel.geometry.sphere import Sphere
    >>> from raykernel.scene.intersection import Intersection, Intersections
    >>> s = Sphere()
    >>> xs = Intersections([Intersection(5, s), Intersection(-3, s), Intersection(2, s)])
    >>> xs.hit().t
    2
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from operator import attrgetter
from typing import TYPE_CHECKING, overload

if TYPE_CHECKING:
    from raykernel.geometry.shape import Shape


@dataclass(frozen=True)
class Intersection:
    """A ray parameter paired with the shape it struck.

    Attributes:
        t: Distance along the ray, in multiples of the ray direction.
        shape: The intersected shape. Compared by value, so two
            intersections with equal t on equal spheres are equal.
    """

    t: float
    shape: Shape


class Intersections:
    """An immutable collection of intersections sorted ascending by t."""

    __slots__ = ("_entries",)

    def __init__(self, intersections: Iterable[Intersection] = ()) -> None:
        self._entries: tuple[Intersection, ...] = tuple(
            sorted(intersections, key=attrgetter("t"))
        )

    @classmethod
    def merge(cls, *collections: Iterable[Intersection]) -> Intersections:
        """Combine several collections (e.g. one per shape) into one sorted collection."""
        return cls(entry for collection in collections for entry in collection)

    def count(self) -> int:
        """Return the number of intersections."""
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @overload
    def __getitem__(self, index: int) -> Intersection: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Intersection, ...]: ...

    def __getitem__(self, index: int | slice) -> Intersection | tuple[Intersection, ...]:
        return self._entries[index]

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intersections):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"Intersections({list(self._entries)!r})"

    def hit(self) -> Intersection | None:
        """Return the intersection with the smallest non-negative t.

        Returns:
            The visible intersection, or None if every t is negative (the
            shape is entirely behind the ray origin) or the collection is
            empty.
        """
        return next((entry for entry in self._entries if entry.t >= 0.0), None)
