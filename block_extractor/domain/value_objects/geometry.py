"""Geometry value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True, slots=True)
class Point3D:
    """3D point in world coordinates."""
    x: float
    y: float
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        """Allow unpacking: x, y, z = point"""
        yield self.x
        yield self.y
        yield self.z

    def is_equal_to(self, other: Point3D, tolerance: float) -> bool:
        """Check equality with an absolute tolerance on each axis.

        A difference of exactly ``tolerance`` still counts as equal.
        """
        return (
            abs(self.x - other.x) <= tolerance and
            abs(self.y - other.y) <= tolerance and
            abs(self.z - other.z) <= tolerance
        )

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __add__(self, other: Point3D) -> Point3D:
        return Point3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Point3D) -> Point3D:
        return Point3D(self.x - other.x, self.y - other.y, self.z - other.z)


ORIGIN = Point3D(0.0, 0.0, 0.0)


@dataclass(frozen=True, slots=True)
class Extents:
    """Axis-aligned bounding box given by its min and max corners."""
    min_point: Point3D
    max_point: Point3D

    def __post_init__(self) -> None:
        for axis, lo, hi in zip("xyz", self.min_point, self.max_point):
            if lo > hi:
                raise ValueError(
                    f"Extents min {axis}={lo} is greater than max {axis}={hi}"
                )

    def translated(self, offset: Point3D) -> Extents:
        return Extents(self.min_point + offset, self.max_point + offset)

    def union(self, other: Extents) -> Extents:
        """Return box containing both boxes."""
        return Extents(
            Point3D(*(min(a, b) for a, b in zip(self.min_point, other.min_point))),
            Point3D(*(max(a, b) for a, b in zip(self.max_point, other.max_point))),
        )

    @classmethod
    def from_points(cls, points: Iterable[Point3D]) -> Extents:
        """Create the tightest box around points."""
        points = list(points)
        if not points:
            raise ValueError("Cannot compute extents of an empty point set")
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        zs = [p.z for p in points]
        return cls(
            Point3D(min(xs), min(ys), min(zs)),
            Point3D(max(xs), max(ys), max(zs)),
        )

    def corners(self) -> tuple[Point3D, ...]:
        """The eight corners, min corner first."""
        lo, hi = self.min_point, self.max_point
        return tuple(
            Point3D(x, y, z)
            for z in (lo.z, hi.z)
            for y in (lo.y, hi.y)
            for x in (lo.x, hi.x)
        )
