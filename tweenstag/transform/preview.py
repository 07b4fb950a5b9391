"""
Gesture previews.

Transforms produce previews while the pointer moves; only on release is the
preview diffed against the original and the changed keys committed.
"""

from typing import Any, Mapping

from tweenstag.models import SceneObject


def apply_delta(attrs: Mapping[str, Any], delta: Mapping[str, Any]) -> dict[str, Any]:
    """Preview attributes: ``attrs`` with ``delta`` applied."""
    return {**attrs, **delta}


def changed_attributes(original: Mapping[str, Any], preview: Mapping[str, Any]) -> dict[str, Any]:
    """Keys of ``preview`` whose values differ from ``original``."""
    return {
        key: value
        for key, value in preview.items()
        if key not in original or original[key] != value
    }


def commit_preview(obj: SceneObject, preview: Mapping[str, Any]) -> SceneObject:
    """Apply a finished gesture's preview to an object.

    Returns the object itself when nothing changed.
    """
    changes = changed_attributes(obj.attributes(), preview)
    if not changes:
        return obj
    return obj.with_attributes(changes)
