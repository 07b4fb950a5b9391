"""Intrinsic extent of path geometry and resizing of paths to a box."""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from tweenstag.geometry import BoundingBox, bounds_of_points

from .morph import format_segments
from .parser import normalize_path


def _axis_roots(p0: float, p1: float, p2: float, p3: float) -> list[float]:
    """Parameters in (0, 1) where one coordinate of a cubic has zero slope."""
    a = -p0 + 3 * p1 - 3 * p2 + p3
    b = 2 * (p0 - 2 * p1 + p2)
    c = p1 - p0
    if abs(a) < 1e-12:
        roots = [-c / b] if abs(b) > 1e-12 else []
    else:
        disc = b * b - 4 * a * c
        if disc < 0:
            return []
        sq = math.sqrt(disc)
        roots = [(-b + sq) / (2 * a), (-b - sq) / (2 * a)]
    return [t for t in roots if 0 < t < 1]


def point_on_segment(segment: np.ndarray, t: float) -> np.ndarray:
    """Evaluate a cubic segment at parameter t."""
    p0, p1, p2, p3 = segment
    mt = 1 - t
    return mt ** 3 * p0 + 3 * mt ** 2 * t * p1 + 3 * mt * t ** 2 * p2 + t ** 3 * p3


def segments_bounds(segments: np.ndarray) -> Optional[BoundingBox]:
    """Tight bounding box of cubic segments (end points plus curve extrema)."""
    if len(segments) == 0:
        return None
    points = []
    for seg in segments:
        points.append(seg[0])
        points.append(seg[3])
        for axis in (0, 1):
            for t in _axis_roots(*seg[:, axis]):
                points.append(point_on_segment(seg, t))
    return bounds_of_points(points)


def path_bounds(d) -> Optional[BoundingBox]:
    """Intrinsic bounding box of a path command string, None without geometry."""
    return segments_bounds(normalize_path(d))


def rescale_path(d, width: float, height: float, precision: Optional[int] = None) -> Optional[str]:
    """Resize path geometry to ``width`` x ``height``, centered on (0, 0).

    Returns None when the path has no geometry or zero extent on an axis,
    since such a path cannot be stretched to a target size.
    """
    segments = normalize_path(d)
    box = segments_bounds(segments)
    if box is None or box.width == 0 or box.height == 0:
        return None
    factors = np.array([width / box.width, height / box.height])
    scaled = (segments - np.array(box.center)) * factors
    return format_segments(scaled, precision)
