"""
Tweenstag - Keyframe interpolation and geometric transforms for 2D vector animation
"""

from .config import Settings, settings
from .exceptions import ClipCycleError, PlaybackError, TweenstagError
from .geometry import BoundingBox, rotate_point, rotated_corners
from .easing import EaseDirection, TweenType, apply_direction, eased_t, get_easing
from .models import (
    ObjectKind,
    SceneObject,
    RectObject,
    CircleObject,
    EllipseObject,
    LineObject,
    PathObject,
    TextObject,
    GroupObject,
    ClipInstanceObject,
    Keyframe,
    Layer,
    ClipDefinition,
    Project,
    create_layer,
    get_object_class,
    object_from_dict,
)
from .path import match_segment_counts, morph_path, normalize_path, parse_path
from .interpolate import interpolate_attribute, interpolate_objects
from .resolver import resolve_frame, resolve_layers
from .bounds import bounding_box, rotation_origin, world_bounds, world_point
from .clips import (
    clip_dimensions,
    clip_local_frame,
    find_clip_cycle,
    resolve_clip_instance,
    resolve_scene,
    validate_clip_library,
)
from .transform import (
    Handle,
    PivotMode,
    RotationGesture,
    begin_rotation,
    changed_attributes,
    commit_preview,
    drag_delta,
    normalize_angle_delta,
    rotate_delta,
    scale_delta,
    snap_angle,
)
from .affine import (
    AffineMatrix,
    compose_affine,
    invert_affine,
    local_delta_to_world,
    local_point_to_world,
    world_delta_to_local,
    world_point_to_local,
)
from .playback import PlaybackConfig, PlaybackController, PlaybackState

__all__ = [
    # Configuration and errors
    "Settings",
    "settings",
    "TweenstagError",
    "ClipCycleError",
    "PlaybackError",
    # Geometry
    "BoundingBox",
    "rotate_point",
    "rotated_corners",
    # Easing
    "TweenType",
    "EaseDirection",
    "apply_direction",
    "get_easing",
    "eased_t",
    # Models
    "ObjectKind",
    "SceneObject",
    "RectObject",
    "CircleObject",
    "EllipseObject",
    "LineObject",
    "PathObject",
    "TextObject",
    "GroupObject",
    "ClipInstanceObject",
    "Keyframe",
    "Layer",
    "ClipDefinition",
    "Project",
    "create_layer",
    "get_object_class",
    "object_from_dict",
    # Paths
    "parse_path",
    "normalize_path",
    "match_segment_counts",
    "morph_path",
    # Interpolation and frame resolution
    "interpolate_attribute",
    "interpolate_objects",
    "resolve_frame",
    "resolve_layers",
    # Bounding boxes
    "bounding_box",
    "rotation_origin",
    "world_bounds",
    "world_point",
    # Clips
    "clip_local_frame",
    "resolve_clip_instance",
    "resolve_scene",
    "clip_dimensions",
    "find_clip_cycle",
    "validate_clip_library",
    # Interaction transforms
    "Handle",
    "drag_delta",
    "rotate_delta",
    "snap_angle",
    "normalize_angle_delta",
    "PivotMode",
    "RotationGesture",
    "begin_rotation",
    "scale_delta",
    "changed_attributes",
    "commit_preview",
    # Nested frames
    "AffineMatrix",
    "compose_affine",
    "invert_affine",
    "world_delta_to_local",
    "local_delta_to_world",
    "world_point_to_local",
    "local_point_to_world",
    # Playback
    "PlaybackState",
    "PlaybackConfig",
    "PlaybackController",
]
