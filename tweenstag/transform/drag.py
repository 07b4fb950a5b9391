"""Translation of objects by a pointer delta."""

from __future__ import annotations

from typing import Any, Mapping, Union

from tweenstag.interpolate import is_number
from tweenstag.models import SceneObject

Attributes = Union[SceneObject, Mapping[str, Any]]

# Position fields moved by a drag, per kind
POSITION_KEYS: dict[str, tuple[str, str]] = {
    'rect': ('x', 'y'),
    'text': ('x', 'y'),
    'path': ('x', 'y'),
    'group': ('x', 'y'),
    'clip': ('x', 'y'),
    'circle': ('cx', 'cy'),
    'ellipse': ('cx', 'cy'),
}


def as_attributes(attrs: Attributes) -> Mapping[str, Any]:
    """Attribute mapping of an object, or the mapping itself."""
    if isinstance(attrs, SceneObject):
        return attrs.attributes()
    return attrs


def number(attrs: Mapping[str, Any], key: str, default: float = 0.0) -> float:
    """Numeric attribute value, ``default`` when missing or not a number."""
    value = attrs.get(key)
    return float(value) if is_number(value) else default


def drag_delta(kind: str, attrs: Attributes, dx: float, dy: float) -> dict[str, float]:
    """New position attributes after moving an object by (dx, dy).

    Unknown kinds give an empty delta.
    """
    attrs = as_attributes(attrs)
    if kind == 'line':
        return {
            'x1': number(attrs, 'x1') + dx,
            'y1': number(attrs, 'y1') + dy,
            'x2': number(attrs, 'x2') + dx,
            'y2': number(attrs, 'y2') + dy,
        }
    keys = POSITION_KEYS.get(kind)
    if keys is None:
        return {}
    key_x, key_y = keys
    return {
        key_x: number(attrs, key_x) + dx,
        key_y: number(attrs, key_y) + dy,
    }
