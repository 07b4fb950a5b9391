"""
Container variants: groups and clip instances.

Both position their content through their own (x, y), rotation and
scale, and both rotate around (x, y) rather than their box center.
"""

from typing import Any, List, Literal, Optional

from pydantic import Field, SerializeAsAny, field_validator

from .base import SceneObject, coerce_objects


class GroupObject(SceneObject):
    """
    Group of child objects sharing one transform.

    Children are expressed in the group's local coordinates.
    """

    kind: Literal["group"] = Field(default="group", alias="type")

    x: float = Field(default=0.0)
    y: float = Field(default=0.0)
    scale_x: float = Field(default=1.0, alias='scaleX')
    scale_y: float = Field(default=1.0, alias='scaleY')

    children: List[SerializeAsAny[SceneObject]] = Field(default_factory=list)

    @field_validator('children', mode='before')
    @classmethod
    def _coerce_children(cls, v: Any) -> Any:
        """Convert child dicts to their object variants."""
        return coerce_objects(v)

    def is_container(self) -> bool:
        return True


class ClipInstanceObject(SceneObject):
    """
    Placement of a reusable clip.

    The clip plays in sync with the parent timeline unless ``set_frame``
    pins it to one of its own frames.
    """

    kind: Literal["clip"] = Field(default="clip", alias="type")

    x: float = Field(default=0.0)
    y: float = Field(default=0.0)
    scale_x: float = Field(default=1.0, alias='scaleX')
    scale_y: float = Field(default=1.0, alias='scaleY')

    clip_id: str = Field(default='', alias='clipId')
    set_frame: Optional[float] = Field(default=None, alias='setFrame')

    def is_container(self) -> bool:
        return True
