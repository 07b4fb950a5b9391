"""
Resizing objects from a box handle.

The pointer delta is taken into the object's local axes, turned into a new
box size, and the box is placed so the anchor (the side or corner opposite
the handle, or the object's origin in symmetric mode) keeps its world
position. Each kind then maps the new box onto its own attributes.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping, Optional

from tweenstag.bounds import kind_rotation_origin
from tweenstag.config import settings
from tweenstag.geometry import BoundingBox, rotate_point
from tweenstag.path import path_bounds, rescale_path

from .drag import Attributes, as_attributes, drag_delta, number
from .handles import Handle

logger = logging.getLogger(__name__)

SCALABLE_KINDS = frozenset({'rect', 'circle', 'ellipse', 'path', 'group', 'clip'})


def _size_delta(
    box: BoundingBox,
    handle: Handle,
    ldx: float,
    ldy: float,
    symmetric: bool,
    uniform: bool,
) -> tuple[float, float]:
    """Width/height change for a local pointer delta."""
    pos = handle.position
    grows_right, grows_left = 'r' in pos, 'l' in pos
    grows_down, grows_up = 'b' in pos, 't' in pos
    affects_x = grows_right or grows_left
    affects_y = grows_down or grows_up

    dw = (1 if grows_right else -1) * ldx if affects_x else 0.0
    dh = (1 if grows_down else -1) * ldy if affects_y else 0.0

    # Both sides move around the origin
    if symmetric:
        dw *= 2
        dh *= 2

    if uniform:
        sx = (box.width + dw) / box.width if box.width > 0 else 1.0
        sy = (box.height + dh) / box.height if box.height > 0 else 1.0
        if affects_x and affects_y:
            factor = sx if abs(sx - 1) > abs(sy - 1) else sy
        elif affects_x:
            factor = sx
        else:
            factor = sy
        dw = box.width * (factor - 1)
        dh = box.height * (factor - 1)

    return dw, dh


def _anchor_fractions(handle: Handle, attrs: Mapping[str, Any], symmetric: bool) -> tuple[float, float]:
    if symmetric:
        return (number(attrs, 'originX', 0.5), number(attrs, 'originY', 0.5))
    return handle.opposite_fractions


def _apply_box(
    kind: str,
    attrs: Mapping[str, Any],
    box: BoundingBox,
    new_box: BoundingBox,
) -> tuple[dict[str, Any], Optional[BoundingBox]]:
    """Attributes giving ``new_box`` for a kind, plus the box they really produce."""
    if kind == 'rect':
        changes = {'x': new_box.x, 'y': new_box.y, 'width': new_box.width, 'height': new_box.height}
        return changes, new_box

    if kind == 'circle':
        # Stays circular, the larger side wins
        r = max(new_box.width, new_box.height) / 2
        cx, cy = new_box.center
        return {'cx': cx, 'cy': cy, 'r': r}, BoundingBox(cx - r, cy - r, r * 2, r * 2)

    if kind == 'ellipse':
        cx, cy = new_box.center
        changes = {'cx': cx, 'cy': cy, 'rx': new_box.width / 2, 'ry': new_box.height / 2}
        return changes, new_box

    if kind == 'path':
        d = rescale_path(attrs.get('d', ''), new_box.width, new_box.height)
        if d is None:
            return {}, None
        cx, cy = new_box.center
        intrinsic = path_bounds(d)
        result = intrinsic.translated(cx, cy) if intrinsic is not None else new_box
        return {'d': d, 'x': cx, 'y': cy}, result

    if kind in ('group', 'clip'):
        # Content keeps its size; the container scale absorbs the change
        ratio_x = new_box.width / box.width if box.width else 1.0
        ratio_y = new_box.height / box.height if box.height else 1.0
        x, y = number(attrs, 'x'), number(attrs, 'y')
        changes = {
            'x': new_box.x - (box.x - x) * ratio_x,
            'y': new_box.y - (box.y - y) * ratio_y,
            'scaleX': number(attrs, 'scaleX', 1.0) * ratio_x,
            'scaleY': number(attrs, 'scaleY', 1.0) * ratio_y,
        }
        return changes, BoundingBox(new_box.x, new_box.y, box.width * ratio_x, box.height * ratio_y)

    return {}, None


def scale_delta(
    kind: str,
    attrs: Attributes,
    box: Optional[BoundingBox],
    handle: Handle | str,
    dx: float,
    dy: float,
    rotation: float = 0.0,
    symmetric: bool = False,
    uniform: bool = False,
) -> dict[str, Any]:
    """Compute new attributes after dragging a scale handle.

    Args:
        kind: Object kind
        attrs: Current attributes
        box: Current unrotated bounding box
        handle: Dragged handle
        dx: Pointer delta x in world space
        dy: Pointer delta y in world space
        rotation: Object rotation in degrees
        symmetric: Anchor at the object's origin and grow both sides
        uniform: Keep the aspect ratio

    Returns:
        Changed attributes. Line, text and unknown kinds, degenerate boxes and
        paths without extent give an empty delta.
    """
    attrs = as_attributes(attrs)
    if kind not in SCALABLE_KINDS or box is None or box.is_degenerate:
        return {}
    handle = Handle(handle)

    rad = math.radians(rotation)
    cos, sin = math.cos(rad), math.sin(rad)
    ldx = cos * dx + sin * dy
    ldy = -sin * dx + cos * dy

    dw, dh = _size_delta(box, handle, ldx, ldy, symmetric, uniform)
    new_w = max(settings.MIN_SCALE_SIZE, box.width + dw)
    new_h = max(settings.MIN_SCALE_SIZE, box.height + dh)

    fx, fy = _anchor_fractions(handle, attrs, symmetric)
    new_box = BoundingBox(
        box.x + fx * (box.width - new_w),
        box.y + fy * (box.height - new_h),
        new_w,
        new_h,
    )

    changes, result_box = _apply_box(kind, attrs, box, new_box)
    if not changes:
        logger.debug(f"Scale of {kind} skipped, no geometry to resize")
        return {}

    # The rotation origin moves with the box, so re-pin the anchor in world space
    old_anchor = rotate_point(box.point_at(fx, fy), rotation, kind_rotation_origin(kind, attrs, box))
    scaled = {**attrs, **changes}
    new_anchor = rotate_point(
        result_box.point_at(fx, fy), rotation, kind_rotation_origin(kind, scaled, result_box)
    )
    shift_x = old_anchor[0] - new_anchor[0]
    shift_y = old_anchor[1] - new_anchor[1]
    if shift_x or shift_y:
        changes.update(drag_delta(kind, scaled, shift_x, shift_y))
    return changes
