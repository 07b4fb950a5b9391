"""
Rotation around a fixed pivot.

``rotate_delta`` rotates an object to a new angle and moves it so a world
pivot stays under the cursor. ``RotationGesture`` tracks an interactive
rotation: the pivot is either the corner opposite the grabbed handle or
the center of the rotated box, and it can switch mid-gesture without the
object jumping.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Mapping, Optional

import numpy as np

from tweenstag.bounds import (
    POSITIONED_KINDS,
    ClipDimensions,
    bounding_box,
    kind_rotation_origin,
    world_point,
)
from tweenstag.config import settings
from tweenstag.geometry import BoundingBox, Point, rotate_point, rotation_matrix
from tweenstag.models import SceneObject

from .drag import POSITION_KEYS, Attributes, as_attributes, drag_delta, number
from .handles import Handle
from .preview import apply_delta

logger = logging.getLogger(__name__)


def normalize_angle_delta(delta: float) -> float:
    """Wrap an angle difference into [-180, 180)."""
    return (delta + 180.0) % 360.0 - 180.0


def snap_angle(angle: float, step: Optional[float] = None) -> float:
    """Round an angle to the nearest multiple of ``step`` degrees."""
    if step is None:
        step = settings.ROTATION_SNAP_DEGREES
    if step <= 0:
        return angle
    return math.floor(angle / step + 0.5) * step


def pointer_angle(pivot: Point, pointer: Point) -> float:
    """Screen angle in degrees of the pointer as seen from the pivot."""
    return math.degrees(math.atan2(pointer[1] - pivot[1], pointer[0] - pivot[0]))


def rotate_delta(
    kind: str,
    attrs: Attributes,
    box: Optional[BoundingBox],
    pivot: Point,
    new_rotation: float,
) -> dict[str, float]:
    """Rotate an object to ``new_rotation`` keeping ``pivot`` fixed in world space.

    Args:
        kind: Object kind
        attrs: Current attributes
        box: Current unrotated bounding box
        pivot: World point that must not move
        new_rotation: Requested rotation in degrees

    Returns:
        New position attributes plus ``rotation``. Unknown kinds and objects
        without a rotation origin give an empty delta.
    """
    attrs = as_attributes(attrs)
    if kind != 'line' and kind not in POSITION_KEYS:
        return {}
    if box is None and kind not in POSITIONED_KINDS:
        return {}

    old = number(attrs, 'rotation')
    rotation = old + normalize_angle_delta(new_rotation - old)
    origin = np.asarray(kind_rotation_origin(kind, attrs, box))

    # Pivot offset in the old rotated frame, carried into the new one
    local = np.asarray(rotate_point(pivot, -old, tuple(origin))) - origin
    moved_pivot = rotation_matrix(rotation) @ local + origin
    shift = np.asarray(pivot, dtype=float) - moved_pivot

    delta: dict[str, float] = drag_delta(kind, attrs, float(shift[0]), float(shift[1]))
    delta['rotation'] = rotation
    return delta


class PivotMode(str, Enum):
    """What a rotation gesture pivots around."""
    OPPOSITE_CORNER = "opposite-corner"
    CENTER = "center"


@dataclass(frozen=True)
class RotationGesture:
    """State of one interactive rotation.

    The caller keeps the gesture between pointer moves and replaces it
    with the one returned by ``update``.
    """
    obj: SceneObject
    handle: Handle
    mode: PivotMode
    pivot: Point
    start_angle: float
    base_attrs: Mapping[str, Any]
    box: Optional[BoundingBox]
    clip_dimensions: ClipDimensions = None
    preview: Mapping[str, Any] = field(default_factory=dict)

    @property
    def base_rotation(self) -> float:
        return number(self.base_attrs, 'rotation')

    def current_object(self) -> SceneObject:
        """The object with the preview applied."""
        return self.obj.with_attributes(dict(self.preview))

    def update(
        self,
        pointer: Point,
        center_pivot: bool = False,
        free: bool = False,
    ) -> tuple['RotationGesture', dict[str, float]]:
        """Advance the gesture to a new pointer position.

        Args:
            pointer: Pointer position in world space
            center_pivot: Rotate around the box center instead of the opposite corner
            free: Disable angle snapping

        Returns:
            Tuple of (updated gesture, attribute delta against the original object)
        """
        mode = PivotMode.CENTER if center_pivot else PivotMode.OPPOSITE_CORNER
        gesture = self if mode == self.mode else self._rebase(mode, pointer)

        target = gesture.base_rotation + (pointer_angle(gesture.pivot, pointer) - gesture.start_angle)
        if not free:
            target = snap_angle(target)

        delta = rotate_delta(gesture.obj.kind, gesture.base_attrs, gesture.box, gesture.pivot, target)
        preview = apply_delta(gesture.base_attrs, delta)
        return replace(gesture, preview=preview), delta

    def _rebase(self, mode: PivotMode, pointer: Point) -> 'RotationGesture':
        """Restart from the current preview around the pivot of ``mode``."""
        current = self.current_object()
        box = bounding_box(current, self.clip_dimensions)
        pivot = _pivot_for(current, box, self.handle, mode)
        logger.debug(f"Rotation of {current.id} switches pivot to {mode.value}")
        return replace(
            self,
            mode=mode,
            pivot=pivot,
            start_angle=pointer_angle(pivot, pointer),
            base_attrs=current.attributes(),
            box=box,
        )


def _pivot_for(obj: SceneObject, box: BoundingBox, handle: Handle, mode: PivotMode) -> Point:
    if mode == PivotMode.CENTER:
        return world_point(obj, box, 0.5, 0.5)
    return world_point(obj, box, *handle.opposite_fractions)


def begin_rotation(
    obj: SceneObject,
    corner: Handle | str,
    pointer: Point,
    clip_dimensions: ClipDimensions = None,
    center_pivot: bool = False,
) -> Optional[RotationGesture]:
    """Start rotating an object from one of its handles.

    Returns None for objects without a bounding box.
    """
    box = bounding_box(obj, clip_dimensions)
    if box is None:
        return None
    handle = Handle(corner)
    mode = PivotMode.CENTER if center_pivot else PivotMode.OPPOSITE_CORNER
    pivot = _pivot_for(obj, box, handle, mode)
    attrs = obj.attributes()
    return RotationGesture(
        obj=obj,
        handle=handle,
        mode=mode,
        pivot=pivot,
        start_angle=pointer_angle(pivot, pointer),
        base_attrs=attrs,
        box=box,
        clip_dimensions=clip_dimensions,
        preview=attrs,
    )
