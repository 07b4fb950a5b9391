"""
Primitive shape variants.

Each variant only declares the fields its geometry needs; styling lives
on SceneObject.
"""

from typing import Literal, Optional

from pydantic import Field

from .base import SceneObject


class RectObject(SceneObject):
    """Rectangle given by its top-left corner and size."""

    kind: Literal["rect"] = Field(default="rect", alias="type")

    x: float = Field(default=0.0)
    y: float = Field(default=0.0)
    width: float = Field(default=0.0)
    height: float = Field(default=0.0)


class CircleObject(SceneObject):
    """Circle given by center and radius."""

    kind: Literal["circle"] = Field(default="circle", alias="type")

    cx: float = Field(default=0.0)
    cy: float = Field(default=0.0)
    r: float = Field(default=0.0)


class EllipseObject(SceneObject):
    """Ellipse given by center and radii."""

    kind: Literal["ellipse"] = Field(default="ellipse", alias="type")

    cx: float = Field(default=0.0)
    cy: float = Field(default=0.0)
    rx: float = Field(default=0.0)
    ry: float = Field(default=0.0)


class LineObject(SceneObject):
    """Straight line between two end points."""

    kind: Literal["line"] = Field(default="line", alias="type")

    x1: float = Field(default=0.0)
    y1: float = Field(default=0.0)
    x2: float = Field(default=0.0)
    y2: float = Field(default=0.0)


class PathObject(SceneObject):
    """
    Vector path.

    ``d`` holds the path commands in local coordinates; ``x``/``y`` offset
    the whole path.
    """

    kind: Literal["path"] = Field(default="path", alias="type")

    d: str = Field(default='')
    x: float = Field(default=0.0)
    y: float = Field(default=0.0)


class TextObject(SceneObject):
    """Text anchored at a point. Has no measurable box without font metrics."""

    kind: Literal["text"] = Field(default="text", alias="type")

    x: float = Field(default=0.0)
    y: float = Field(default=0.0)
    text: str = Field(default='')
    font_size: Optional[float] = Field(default=None, alias='fontSize')
