"""
Timeline models: keyframes, layers, clip definitions and the project.

A layer's keyframes are kept sorted by frame number with at most one
keyframe per frame, so lookups can bisect.
"""

from bisect import bisect_right
from typing import Any, Dict, List, Optional
import uuid

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny, field_validator

from tweenstag.config import settings
from tweenstag.easing import EaseDirection, TweenType

from .base import SceneObject, coerce_objects


class Keyframe(BaseModel):
    """
    Exact object state at one frame.

    ``tween`` and ``ease_direction`` describe how the objects move toward
    the next keyframe; ``loop`` makes the last keyframe tween back to the
    first one.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
    )

    frame: int = Field(default=1, ge=1)
    objects: List[SerializeAsAny[SceneObject]] = Field(default_factory=list)
    tween: TweenType = Field(default=TweenType.DISCRETE)
    ease_direction: EaseDirection = Field(default=EaseDirection.IN_OUT, alias='easeDirection')
    loop: bool = Field(default=False)

    @field_validator('objects', mode='before')
    @classmethod
    def _coerce_objects(cls, v: Any) -> Any:
        return coerce_objects(v)

    def object_by_id(self, object_id: str) -> Optional[SceneObject]:
        """Find an object on this keyframe by id."""
        for obj in self.objects:
            if obj.id == object_id:
                return obj
        return None


def _default_keyframes() -> List[Keyframe]:
    return [Keyframe(frame=1)]


class Layer(BaseModel):
    """Timeline layer holding a sorted list of keyframes."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = Field(default='Layer')
    visible: bool = Field(default=True)
    locked: bool = Field(default=False)
    keyframes: List[Keyframe] = Field(default_factory=_default_keyframes)

    @field_validator('keyframes')
    @classmethod
    def _sort_keyframes(cls, v: List[Keyframe]) -> List[Keyframe]:
        """Sort keyframes by frame and reject duplicate frame numbers."""
        ordered = sorted(v, key=lambda kf: kf.frame)
        frames = [kf.frame for kf in ordered]
        duplicates = sorted({f for f in frames if frames.count(f) > 1})
        if duplicates:
            raise ValueError(f"Duplicate keyframe frames: {duplicates}")
        return ordered

    @property
    def frames(self) -> List[int]:
        """Keyframe frame numbers in ascending order."""
        return [kf.frame for kf in self.keyframes]

    def active_keyframe(self, frame: float) -> Optional[Keyframe]:
        """Keyframe with the greatest frame at or before ``frame``."""
        index = bisect_right(self.frames, frame)
        return self.keyframes[index - 1] if index > 0 else None

    def next_keyframe(self, frame: float) -> Optional[Keyframe]:
        """First keyframe strictly after ``frame``."""
        index = bisect_right(self.frames, frame)
        return self.keyframes[index] if index < len(self.keyframes) else None

    def keyframe_at(self, frame: float) -> Optional[Keyframe]:
        """Keyframe placed exactly at ``frame``."""
        for kf in self.keyframes:
            if kf.frame == frame:
                return kf
        return None


def create_layer(name: str = 'Layer') -> Layer:
    """Create a layer with one empty discrete keyframe at frame 1."""
    return Layer(name=name)


def _default_layers() -> List[Layer]:
    return [create_layer('Layer 1')]


class ClipDefinition(BaseModel):
    """Reusable animation with its own layers and frame count."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = Field(default='Clip')
    layers: List[Layer] = Field(default_factory=_default_layers)
    frame_count: int = Field(default=1, ge=1, alias='frameCount')


class Project(BaseModel):
    """Animation document."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(default='Untitled')
    frame_rate: float = Field(default_factory=lambda: settings.DEFAULT_FRAME_RATE, gt=0, alias='frameRate')
    width: int = Field(default=1920, ge=1)
    height: int = Field(default=1080, ge=1)
    total_frames: int = Field(default=60, ge=1, alias='totalFrames')
    layers: List[Layer] = Field(default_factory=_default_layers)
    clips: List[ClipDefinition] = Field(default_factory=list)

    def clip_library(self) -> Dict[str, ClipDefinition]:
        """Clip definitions keyed by id."""
        return {clip.id: clip for clip in self.clips}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a document dictionary (camelCase keys)."""
        return self.model_dump(by_alias=True, mode='json', exclude_none=True)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Project':
        return cls.model_validate(data)
