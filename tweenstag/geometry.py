# Tweenstag - Geometry
"""
Axis-aligned boxes and rotation helpers shared by the bounding-box engine
and the interaction transforms.

Angles are in degrees, clockwise in screen space (y axis pointing down),
matching SVG's ``rotate()``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

Point = tuple[float, float]


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box (x, y, width, height) in an object's local space."""
    x: float
    y: float
    width: float
    height: float

    @property
    def x2(self) -> float:
        """Right edge x coordinate."""
        return self.x + self.width

    @property
    def y2(self) -> float:
        """Bottom edge y coordinate."""
        return self.y + self.height

    @property
    def center(self) -> Point:
        """Center point of the box."""
        return (self.x + self.width / 2, self.y + self.height / 2)

    @property
    def is_degenerate(self) -> bool:
        """True if the box has neither width nor height."""
        return self.width == 0 and self.height == 0

    def point_at(self, fx: float, fy: float) -> Point:
        """Point at the given fractions of width and height."""
        return (self.x + self.width * fx, self.y + self.height * fy)

    def corners(self) -> list[Point]:
        """Corners in tl, tr, br, bl order."""
        return [
            (self.x, self.y),
            (self.x2, self.y),
            (self.x2, self.y2),
            (self.x, self.y2),
        ]

    def translated(self, dx: float, dy: float) -> 'BoundingBox':
        return BoundingBox(self.x + dx, self.y + dy, self.width, self.height)

    def union(self, other: 'BoundingBox') -> 'BoundingBox':
        """Smallest box containing both boxes."""
        x = min(self.x, other.x)
        y = min(self.y, other.y)
        return BoundingBox(x, y, max(self.x2, other.x2) - x, max(self.y2, other.y2) - y)

    def to_dict(self) -> dict:
        return {'x': self.x, 'y': self.y, 'width': self.width, 'height': self.height}

    @classmethod
    def from_dict(cls, data: dict) -> 'BoundingBox':
        return cls(
            x=data.get('x', 0.0), y=data.get('y', 0.0),
            width=data.get('width', 0.0), height=data.get('height', 0.0),
        )

    @classmethod
    def from_tuple(cls, values: Sequence[float]) -> 'BoundingBox':
        x, y, width, height = values
        return cls(float(x), float(y), float(width), float(height))


def rotation_matrix(degrees: float) -> np.ndarray:
    """2x2 rotation matrix for an angle in degrees."""
    rad = math.radians(degrees)
    cos, sin = math.cos(rad), math.sin(rad)
    return np.array([[cos, -sin], [sin, cos]])


def rotate_point(point: Point, degrees: float, origin: Point = (0.0, 0.0)) -> Point:
    """Rotate a point around an origin."""
    if not degrees:
        return (float(point[0]), float(point[1]))
    offset = np.asarray(point, dtype=float) - origin
    x, y = rotation_matrix(degrees) @ offset + origin
    return (float(x), float(y))


def rotated_corners(box: BoundingBox, rotation: float, origin: Point) -> list[Point]:
    """Get the four corners of a box after rotation around an origin.

    Args:
        box: Box in local (pre-rotation) coordinates
        rotation: Rotation in degrees
        origin: Rotation origin

    Returns:
        Corners in tl, tr, br, bl order
    """
    corners = box.corners()
    if not rotation:
        return corners

    pts = np.asarray(corners, dtype=float) - origin
    rotated = pts @ rotation_matrix(rotation).T + origin
    return [(float(x), float(y)) for x, y in rotated]


def bounds_of_points(points: Iterable[Point]) -> BoundingBox | None:
    """Axis-aligned box around a set of points, or None if there are none."""
    pts = np.asarray(list(points), dtype=float)
    if pts.size == 0:
        return None
    min_x, min_y = pts.min(axis=0)
    max_x, max_y = pts.max(axis=0)
    return BoundingBox(float(min_x), float(min_y), float(max_x - min_x), float(max_y - min_y))
