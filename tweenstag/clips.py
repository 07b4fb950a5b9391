"""
Reusable clips.

A clip instance plays its clip's own layers at a local frame derived from
the parent timeline, or pinned with ``setFrame``. Resolving an instance
yields a group carrying the instance's transform with the clip's resolved
content as children.

Clips must not contain themselves. ``validate_clip_library`` rejects such
libraries when they are authored; at resolve time nesting is additionally
bounded by ``settings.MAX_CLIP_DEPTH``.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Mapping, Optional

from tweenstag.bounds import children_bounds
from tweenstag.config import settings
from tweenstag.exceptions import ClipCycleError
from tweenstag.geometry import BoundingBox
from tweenstag.models import (
    ClipDefinition,
    ClipInstanceObject,
    GroupObject,
    Layer,
    Project,
    SceneObject,
)
from tweenstag.resolver import resolve_layers

logger = logging.getLogger(__name__)

ClipLibrary = Mapping[str, ClipDefinition]


def clip_local_frame(instance: ClipInstanceObject, parent_frame: float, clip: ClipDefinition) -> int:
    """Frame of the clip shown by an instance at a parent frame.

    A pinned instance shows its ``set_frame`` (clamped to the clip); an
    unpinned one loops with the parent timeline.
    """
    count = clip.frame_count
    if instance.set_frame is not None:
        return min(max(int(math.floor(instance.set_frame)), 1), count)
    return (int(math.floor(parent_frame)) - 1) % count + 1


def resolve_clip_instance(
    instance: ClipInstanceObject,
    library: ClipLibrary,
    parent_frame: float,
    depth: int = 0,
) -> GroupObject:
    """Expand a clip instance into a group of its resolved content.

    Args:
        instance: Clip instance to expand
        library: Clip definitions by id
        parent_frame: Frame of the timeline containing the instance
        depth: Current nesting depth

    Returns:
        Group with the instance's id and transform. Unknown clips and
        instances nested too deeply give an empty group.
    """
    children: list[SceneObject] = []
    clip = library.get(instance.clip_id)
    if clip is None:
        logger.debug(f"Clip instance {instance.id} references unknown clip {instance.clip_id!r}")
    elif depth >= settings.MAX_CLIP_DEPTH:
        logger.warning(
            f"Clip {instance.clip_id} nested deeper than {settings.MAX_CLIP_DEPTH} levels, "
            "dropping its content"
        )
    else:
        local = clip_local_frame(instance, parent_frame, clip)
        for _, objects in resolve_layers(clip.layers, local, clip.frame_count):
            children.extend(expand_clips(objects, library, local, depth + 1))

    return GroupObject(
        id=instance.id,
        x=instance.x,
        y=instance.y,
        rotation=instance.rotation,
        scale_x=instance.scale_x,
        scale_y=instance.scale_y,
        origin_x=instance.origin_x,
        origin_y=instance.origin_y,
        opacity=instance.opacity,
        children=children,
    )


def expand_clips(
    objects: Iterable[SceneObject],
    library: ClipLibrary,
    frame: float,
    depth: int = 0,
) -> list[SceneObject]:
    """Replace clip instances (also inside groups) by their resolved groups."""
    result: list[SceneObject] = []
    for obj in objects:
        if isinstance(obj, ClipInstanceObject):
            obj = resolve_clip_instance(obj, library, frame, depth)
        elif isinstance(obj, GroupObject) and obj.children:
            obj = obj.with_attributes({'children': expand_clips(obj.children, library, frame, depth)})
        result.append(obj)
    return result


def resolve_scene(
    project: Project,
    frame: float,
) -> list[tuple[Layer, list[SceneObject]]]:
    """Resolve a project's visible layers at a frame with clips expanded.

    Layers come bottom-up, as from ``resolve_layers``.
    """
    library = project.clip_library()
    return [
        (layer, expand_clips(objects, library, frame))
        for layer, objects in resolve_layers(project.layers, frame, project.total_frames)
    ]


def clip_dimensions(library: ClipLibrary, frame: float = 1) -> dict[str, BoundingBox]:
    """Content box of every clip with measurable content.

    Each clip is measured at its local frame for ``frame``; nested
    instances use the boxes of the clips they reference.
    """
    measured: dict[str, Optional[BoundingBox]] = {}

    def measure(clip_id: str, depth: int) -> Optional[BoundingBox]:
        if clip_id in measured:
            return measured[clip_id]
        clip = library.get(clip_id)
        if clip is None or depth > settings.MAX_CLIP_DEPTH:
            return None
        # Placeholder while measuring, so a self-reference cannot recurse
        measured[clip_id] = None
        local = (int(math.floor(frame)) - 1) % clip.frame_count + 1
        box = None
        for _, objects in resolve_layers(clip.layers, local, clip.frame_count):
            content = children_bounds(objects, lambda ref: measure(ref, depth + 1))
            if content is not None:
                box = content if box is None else box.union(content)
        measured[clip_id] = box
        return box

    result = {}
    for clip_id in library:
        box = measure(clip_id, 0)
        if box is not None:
            result[clip_id] = box
    return result


def _instance_ids(objects: Iterable[SceneObject]) -> set[str]:
    ids = set()
    for obj in objects:
        if isinstance(obj, ClipInstanceObject):
            ids.add(obj.clip_id)
        elif isinstance(obj, GroupObject):
            ids |= _instance_ids(obj.children)
    return ids


def clip_references(clip: ClipDefinition) -> set[str]:
    """Ids of all clips instanced anywhere in a clip."""
    refs = set()
    for layer in clip.layers:
        for kf in layer.keyframes:
            refs |= _instance_ids(kf.objects)
    return refs


def find_clip_cycle(library: ClipLibrary) -> Optional[list[str]]:
    """Find a clip that contains itself, directly or transitively.

    Returns:
        The cycle as a list of clip ids starting and ending with the same
        id, or None
    """
    visiting: list[str] = []
    done: set[str] = set()

    def visit(clip_id: str) -> Optional[list[str]]:
        visiting.append(clip_id)
        for ref in sorted(clip_references(library[clip_id])):
            if ref not in library or ref in done:
                continue
            if ref in visiting:
                return visiting[visiting.index(ref):] + [ref]
            cycle = visit(ref)
            if cycle:
                return cycle
        visiting.pop()
        done.add(clip_id)
        return None

    for clip_id in library:
        if clip_id not in done:
            cycle = visit(clip_id)
            if cycle:
                return cycle
    return None


def validate_clip_library(library: ClipLibrary) -> None:
    """Raise ClipCycleError if any clip contains itself."""
    cycle = find_clip_cycle(library)
    if cycle:
        raise ClipCycleError(cycle)
