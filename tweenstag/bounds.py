"""
Bounding boxes of scene objects.

Boxes are in the object's parent space before the object's own rotation.
Groups and clip instances rotate around their own (x, y); every other kind
rotates around the center of its box. The transform engine relies on this
distinction when it keeps pivots and anchors fixed.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Union

from tweenstag.config import settings
from tweenstag.geometry import (
    BoundingBox,
    Point,
    bounds_of_points,
    rotate_point,
    rotated_corners,
)
from tweenstag.models import (
    CircleObject,
    ClipInstanceObject,
    EllipseObject,
    GroupObject,
    LineObject,
    PathObject,
    RectObject,
    SceneObject,
)
from tweenstag.path import path_bounds

# Kinds that rotate around their declared (x, y)
POSITIONED_KINDS = frozenset({'group', 'clip'})

ClipDimensions = Union[
    Mapping[str, BoundingBox],
    Callable[[str], Optional[BoundingBox]],
    None,
]


def lookup_clip_box(clip_dimensions: ClipDimensions, clip_id: str) -> Optional[BoundingBox]:
    """Content box of a clip from a mapping or callable lookup."""
    if clip_dimensions is None:
        return None
    if callable(clip_dimensions):
        return clip_dimensions(clip_id)
    return clip_dimensions.get(clip_id)


def _place(box: BoundingBox, x: float, y: float, scale_x: float, scale_y: float) -> BoundingBox:
    """Scale a content box, then translate it to (x, y)."""
    return bounds_of_points([
        (x + box.x * scale_x, y + box.y * scale_y),
        (x + box.x2 * scale_x, y + box.y2 * scale_y),
    ])


def bounding_box(obj: SceneObject, clip_dimensions: ClipDimensions = None) -> Optional[BoundingBox]:
    """Get an object's unrotated bounding box.

    Args:
        obj: Object to measure
        clip_dimensions: Content boxes of clips by clip id (mapping or callable)

    Returns:
        The box, or None for text, unknown kinds, paths without geometry and
        groups without measurable children
    """
    if isinstance(obj, RectObject):
        return BoundingBox(obj.x, obj.y, obj.width, obj.height)

    if isinstance(obj, CircleObject):
        return BoundingBox(obj.cx - obj.r, obj.cy - obj.r, obj.r * 2, obj.r * 2)

    if isinstance(obj, EllipseObject):
        return BoundingBox(obj.cx - obj.rx, obj.cy - obj.ry, obj.rx * 2, obj.ry * 2)

    if isinstance(obj, LineObject):
        return bounds_of_points([(obj.x1, obj.y1), (obj.x2, obj.y2)])

    if isinstance(obj, PathObject):
        box = path_bounds(obj.d)
        return box.translated(obj.x, obj.y) if box is not None else None

    if isinstance(obj, ClipInstanceObject):
        content = lookup_clip_box(clip_dimensions, obj.clip_id)
        if content is None:
            content = BoundingBox.from_tuple(settings.CLIP_PLACEHOLDER_BOX)
        return _place(content, obj.x, obj.y, obj.scale_x, obj.scale_y)

    if isinstance(obj, GroupObject):
        content = children_bounds(obj.children, clip_dimensions)
        if content is None:
            return None
        return _place(content, obj.x, obj.y, obj.scale_x, obj.scale_y)

    return None


def children_bounds(children, clip_dimensions: ClipDimensions = None) -> Optional[BoundingBox]:
    """Union of the rotated boxes of a list of objects, None if none is measurable."""
    result = None
    for child in children:
        box = world_bounds(child, clip_dimensions)
        if box is None:
            continue
        result = box if result is None else result.union(box)
    return result


def kind_rotation_origin(kind: str, attrs: Mapping[str, Any], box: BoundingBox) -> Point:
    """Rotation origin for an object kind given its attributes and box."""
    if kind in POSITIONED_KINDS:
        return (float(attrs.get('x', 0.0)), float(attrs.get('y', 0.0)))
    return box.center


def rotation_origin(obj: SceneObject, box: BoundingBox) -> Point:
    """Point an object rotates around: (x, y) for containers, box center otherwise."""
    return kind_rotation_origin(obj.kind, obj.attributes(), box)


def world_bounds(obj: SceneObject, clip_dimensions: ClipDimensions = None) -> Optional[BoundingBox]:
    """Axis-aligned box around the object's rotated corners."""
    box = bounding_box(obj, clip_dimensions)
    if box is None:
        return None
    if not obj.rotation:
        return box
    return bounds_of_points(rotated_corners(box, obj.rotation, rotation_origin(obj, box)))


def world_point(obj: SceneObject, box: BoundingBox, fx: float, fy: float) -> Point:
    """Position of a box point (given as width/height fractions) after rotation."""
    return rotate_point(box.point_at(fx, fy), obj.rotation, rotation_origin(obj, box))
