"""
Frame resolution: the objects a layer shows at a given frame.

Keyframes hold exact object states. Between a keyframe and its successor
the objects are interpolated by id using the first keyframe's tween and
ease direction. A looping last keyframe tweens back to the first keyframe
across the end of the timeline.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from tweenstag.easing import TweenType, eased_t
from tweenstag.interpolate import interpolate_objects
from tweenstag.models import Keyframe, Layer, SceneObject

logger = logging.getLogger(__name__)


def _tween(a: Keyframe, b: Keyframe, raw_t: float) -> list[SceneObject]:
    """Objects part way from keyframe ``a`` to keyframe ``b``."""
    if raw_t >= 1:
        return list(b.objects)
    t = eased_t(raw_t, a.tween, a.ease_direction)
    # Objects that only exist on b appear once b is reached, never before
    return interpolate_objects(a.objects, b.objects, t, include_incoming=False)


def resolve_frame(layer: Layer, frame: float, total_frames: Optional[int] = None) -> list[SceneObject]:
    """Resolve a layer's objects at a frame.

    Args:
        layer: Layer to resolve
        frame: Target frame (1-based)
        total_frames: Timeline length, needed only for looping keyframes

    Returns:
        Objects at the frame. Keyframe frames return the keyframe's own
        objects; frames before the first keyframe return an empty list.
    """
    active = layer.active_keyframe(frame)
    if active is None:
        return []
    if frame == active.frame or active.tween == TweenType.DISCRETE:
        return list(active.objects)

    successor = layer.next_keyframe(active.frame)
    if successor is not None:
        raw_t = (frame - active.frame) / (successor.frame - active.frame)
        return _tween(active, successor, raw_t)

    if active.loop and total_frames:
        first = layer.keyframes[0]
        if first is not active and first.objects:
            span = (first.frame + total_frames) - active.frame
            if span > 0:
                return _tween(active, first, (frame - active.frame) / span)
            logger.debug(f"Layer {layer.id}: no room to wrap after frame {active.frame}")

    return list(active.objects)


def resolve_layers(
    layers: Sequence[Layer],
    frame: float,
    total_frames: Optional[int] = None,
) -> list[tuple[Layer, list[SceneObject]]]:
    """Resolve all visible layers at a frame.

    Layers are returned bottom-up in compositing order: the last layer of
    ``layers`` is the bottom of the stack and comes first.
    """
    result = []
    for layer in reversed(layers):
        if not layer.visible or not layer.keyframes:
            continue
        result.append((layer, resolve_frame(layer, frame, total_frames)))
    return result
