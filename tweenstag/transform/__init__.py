"""
Interaction transforms: drag, rotate and scale.

Every function returns the new values of the attributes it changes and
never modifies its inputs. Callers keep the result as a preview and commit
it when the gesture ends.
"""

from .drag import POSITION_KEYS, as_attributes, drag_delta
from .handles import Handle
from .preview import apply_delta, changed_attributes, commit_preview
from .rotate import (
    PivotMode,
    RotationGesture,
    begin_rotation,
    normalize_angle_delta,
    pointer_angle,
    rotate_delta,
    snap_angle,
)
from .scale import SCALABLE_KINDS, scale_delta

__all__ = [
    'Handle',
    'POSITION_KEYS',
    'as_attributes',
    'drag_delta',
    'rotate_delta',
    'normalize_angle_delta',
    'snap_angle',
    'pointer_angle',
    'PivotMode',
    'RotationGesture',
    'begin_rotation',
    'SCALABLE_KINDS',
    'scale_delta',
    'apply_delta',
    'changed_attributes',
    'commit_preview',
]
