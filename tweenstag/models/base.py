"""
SceneObject - Base model for all drawable objects and containers.

Provides the properties shared by every object kind:
- Identity: id (stable across keyframes and edits), type
- Transform: rotation, originX, originY
- Appearance: fill, stroke, strokeWidth, opacity

Each object kind is a subclass pinning ``type`` to a Literal and declaring
only its own geometry fields. Attributes that no variant declares are kept
as extras so authored content survives interpolation untouched.

Objects are immutable values: edits produce new objects through
``with_attributes()``.
"""

from enum import Enum
from typing import Any, Mapping, Optional
import uuid

from pydantic import BaseModel, ConfigDict, Field


class ObjectKind(str, Enum):
    """Object type identifiers as they appear in documents."""
    RECT = "rect"
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    LINE = "line"
    PATH = "path"
    TEXT = "text"
    GROUP = "group"
    CLIP = "clip"


# Fields that identify an object rather than describe it
IDENTITY_FIELDS = frozenset({'id', 'kind'})


class SceneObject(BaseModel):
    """
    Base model for all object kinds.

    Serializes to the document format:
    {
        "id": "uuid",
        "type": "rect",
        "rotation": 0,
        ...kind-specific attributes
    }
    """

    model_config = ConfigDict(
        # Allow both snake_case and camelCase input
        populate_by_name=True,
        # Keep authored attributes no variant declares
        extra='allow',
        # Objects are values
        frozen=True,
        use_enum_values=True,
    )

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))

    # Object kind (overridden in subclasses with Literal types)
    kind: str = Field(default='object', alias='type')

    # Rotation in degrees around the kind's rotation origin
    rotation: float = Field(default=0.0)

    # Transform origin as fractions of the bounding box (0.5 when unset)
    origin_x: Optional[float] = Field(default=None, alias='originX')
    origin_y: Optional[float] = Field(default=None, alias='originY')

    # Appearance
    fill: Optional[str] = Field(default=None)
    stroke: Optional[str] = Field(default=None)
    stroke_width: Optional[float] = Field(default=None, alias='strokeWidth')
    opacity: Optional[float] = Field(default=None)

    def attributes(self) -> dict[str, Any]:
        """
        Open attribute mapping of this object.

        Keys use the document (camelCase) names; unset optional attributes
        are omitted, extras are included, id and type are not.
        """
        attrs: dict[str, Any] = {}
        for name, field in type(self).model_fields.items():
            if name in IDENTITY_FIELDS:
                continue
            value = getattr(self, name)
            if value is None:
                continue
            attrs[field.alias or name] = value
        if self.model_extra:
            attrs.update(self.model_extra)
        return attrs

    def with_attributes(self, changes: Mapping[str, Any]) -> 'SceneObject':
        """
        Return a copy of this object with some attributes replaced.

        Args:
            changes: Attribute values keyed by document name

        Returns:
            New object of the same kind and id
        """
        if not changes:
            return self
        data = self.attributes()
        data.update(changes)
        data['id'] = self.id
        data['type'] = self.kind
        return type(self).model_validate(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a document dictionary (camelCase keys)."""
        return self.model_dump(by_alias=True, mode='json', exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'SceneObject':
        """
        Create an object from a document dictionary.

        Dispatches on the ``type`` key, so calling this on the base class
        returns the matching subclass.
        """
        # Import here to avoid circular imports
        from tweenstag.models import object_from_dict

        return object_from_dict(data)

    def is_container(self) -> bool:
        """Check if this object holds or references other objects."""
        return False


def coerce_objects(value: Any) -> Any:
    """Turn a list of dicts and/or objects into a list of SceneObject variants."""
    if not isinstance(value, list):
        return value
    # Import here to avoid circular imports
    from tweenstag.models import object_from_dict

    return [object_from_dict(item) if isinstance(item, dict) else item for item in value]
