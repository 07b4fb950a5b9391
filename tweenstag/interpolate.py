"""
Attribute interpolation between keyframes.

Values are dispatched on their runtime shape: numbers blend linearly, hex
colors blend per channel, path strings morph, and everything else holds
the start value.
"""

from __future__ import annotations

import logging
import re
from numbers import Real
from typing import Any, Optional, Sequence

import numpy as np

from tweenstag.models import SceneObject
from tweenstag.path import morph_path

logger = logging.getLogger(__name__)

HEX_RE = re.compile(r'^#([0-9a-fA-F]{3,8})$')
PATH_RE = re.compile(r'^\s*[Mm]\s*[-+.\d]')


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between two numbers."""
    return a + (b - a) * t


def is_number(value: Any) -> bool:
    """True for real numbers (booleans are not numbers here)."""
    return isinstance(value, Real) and not isinstance(value, bool)


def is_hex_color(value: Any) -> bool:
    """True for ``#rgb``, ``#rgba``, ``#rrggbb`` and ``#rrggbbaa`` strings."""
    if not isinstance(value, str):
        return False
    match = HEX_RE.match(value)
    return match is not None and len(match.group(1)) in (3, 4, 6, 8)


def is_path(value: Any) -> bool:
    """True for strings that start with a move-to and a coordinate."""
    return isinstance(value, str) and PATH_RE.match(value) is not None


def parse_hex(value: str) -> tuple[np.ndarray, bool]:
    """Parse a hex color into RGBA channels (0..255).

    Returns:
        Tuple of (channels, has_alpha). Colors without alpha get 255.
    """
    digits = HEX_RE.match(value).group(1)
    if len(digits) in (3, 4):
        digits = ''.join(ch * 2 for ch in digits)
    has_alpha = len(digits) == 8
    if not has_alpha:
        digits += 'ff'
    channels = np.array([int(digits[i:i + 2], 16) for i in range(0, 8, 2)], dtype=float)
    return channels, has_alpha


def lerp_color(a: str, b: str, t: float) -> str:
    """Blend two hex colors per channel.

    Channels are rounded half up and clamped to 0..255. The result has an
    alpha byte only if either input has one.
    """
    ca, alpha_a = parse_hex(a)
    cb, alpha_b = parse_hex(b)
    mixed = np.clip(np.floor(ca + (cb - ca) * t + 0.5), 0, 255).astype(int)
    if not (alpha_a or alpha_b):
        mixed = mixed[:3]
    return '#' + ''.join(f'{int(c):02x}' for c in mixed)


def interpolate_attribute(a: Any, b: Any, t: float) -> Any:
    """Interpolate a single attribute value.

    Args:
        a: Value at the start keyframe
        b: Value at the end keyframe
        t: Eased interpolation parameter

    Returns:
        The blended value, or ``a`` when the two values cannot be blended
    """
    if a == b:
        return a
    if is_number(a) and is_number(b):
        return lerp(a, b, t)
    if is_hex_color(a) and is_hex_color(b):
        return lerp_color(a, b, t)
    if is_path(a) and is_path(b):
        return morph_path(a, b, t)
    return a


def interpolate_object(a: SceneObject, b: SceneObject, t: float) -> SceneObject:
    """Interpolate one object toward its same-id counterpart.

    The attribute set is the union of both sides; a key present on one side
    only keeps that side's value. The result keeps ``a``'s kind.
    """
    attrs_a = a.attributes()
    attrs_b = b.attributes()
    if a.kind != b.kind:
        logger.debug(f"Object {a.id} changes kind {a.kind} -> {b.kind}, keeping {a.kind}")
    merged: dict[str, Any] = {}
    for key in list(attrs_a) + [k for k in attrs_b if k not in attrs_a]:
        if key not in attrs_b:
            merged[key] = attrs_a[key]
        elif key not in attrs_a:
            merged[key] = attrs_b[key]
        else:
            merged[key] = interpolate_attribute(attrs_a[key], attrs_b[key], t)
    return a.with_attributes(merged)


def interpolate_objects(
    a_objects: Sequence[SceneObject],
    b_objects: Sequence[SceneObject],
    t: float,
    include_incoming: Optional[bool] = None,
) -> list[SceneObject]:
    """Interpolate two keyframe object lists, matching objects by id.

    Objects missing from ``b_objects`` are held. Objects that exist only in
    ``b_objects`` are appended when ``include_incoming`` is set, which by
    default is the case once ``t`` reaches 1.
    """
    if include_incoming is None:
        include_incoming = t >= 1
    by_id = {obj.id: obj for obj in b_objects}
    result = []
    for obj in a_objects:
        target = by_id.get(obj.id)
        result.append(obj if target is None else interpolate_object(obj, target, t))
    if include_incoming:
        known = {obj.id for obj in a_objects}
        result.extend(obj for obj in b_objects if obj.id not in known)
    return result
