"""
Object and timeline models.

Object kinds:
- RectObject, CircleObject, EllipseObject, LineObject: primitive shapes
- PathObject: vector path with a position offset
- TextObject: text anchored at a point
- GroupObject: children sharing one transform
- ClipInstanceObject: placement of a reusable clip
"""

from typing import Any, Dict, Type

from .base import IDENTITY_FIELDS, ObjectKind, SceneObject, coerce_objects
from .containers import ClipInstanceObject, GroupObject
from .shapes import (
    CircleObject,
    EllipseObject,
    LineObject,
    PathObject,
    RectObject,
    TextObject,
)
from .timeline import ClipDefinition, Keyframe, Layer, Project, create_layer

# Object type registry for deserialization
_OBJECT_REGISTRY: Dict[str, Type[SceneObject]] = {
    'rect': RectObject,
    'circle': CircleObject,
    'ellipse': EllipseObject,
    'line': LineObject,
    'path': PathObject,
    'text': TextObject,
    'group': GroupObject,
    'clip': ClipInstanceObject,
}


def get_object_class(kind: str) -> Type[SceneObject]:
    """Get the object class for a type string.

    Unknown types map to the base SceneObject, which keeps the attributes
    as extras.
    """
    return _OBJECT_REGISTRY.get(kind, SceneObject)


def object_from_dict(data: Any) -> SceneObject:
    """Create an object from a document dictionary (objects pass through)."""
    if isinstance(data, SceneObject):
        return data
    cls = get_object_class(data.get('type', ''))
    return cls.model_validate(data)


__all__ = [
    'ObjectKind',
    'SceneObject',
    'IDENTITY_FIELDS',
    'coerce_objects',
    'RectObject',
    'CircleObject',
    'EllipseObject',
    'LineObject',
    'PathObject',
    'TextObject',
    'GroupObject',
    'ClipInstanceObject',
    'Keyframe',
    'Layer',
    'create_layer',
    'ClipDefinition',
    'Project',
    'get_object_class',
    'object_from_dict',
]
