"""Segment count matching for path morphing.

Two paths can only be blended point by point when they have the same
number of cubic segments. The shorter list is refined by repeatedly
splitting its longest segment in half, which keeps the added vertices
spread along the geometry instead of piling up at one end.
"""

from __future__ import annotations

import numpy as np


def segment_length(segment: np.ndarray) -> float:
    """Approximate length of a cubic: mean of chord and control polygon."""
    p0, p1, p2, p3 = np.asarray(segment, dtype=float)
    chord = np.linalg.norm(p3 - p0)
    polygon = np.linalg.norm(p1 - p0) + np.linalg.norm(p2 - p1) + np.linalg.norm(p3 - p2)
    return float((chord + polygon) / 2)


def subdivide_segment(segment: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Split a cubic at t=0.5 using De Casteljau's construction."""
    p0, p1, p2, p3 = np.asarray(segment, dtype=float)
    p01 = (p0 + p1) / 2
    p12 = (p1 + p2) / 2
    p23 = (p2 + p3) / 2
    p012 = (p01 + p12) / 2
    p123 = (p12 + p23) / 2
    mid = (p012 + p123) / 2
    return np.array([p0, p01, p012, mid]), np.array([mid, p123, p23, p3])


def match_segment_counts(a: np.ndarray, b: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Bring two segment arrays to the same length.

    The longer array is returned untouched; the shorter one is refined by
    subdividing its currently longest segment until the counts agree.
    Neither input is modified. If one side is empty nothing can be
    subdivided and both are returned as given.

    Args:
        a: Segment array of shape (n, 4, 2)
        b: Segment array of shape (m, 4, 2)

    Returns:
        Tuple of arrays in the same (a, b) order, both of length max(n, m)
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    if len(a) == 0 or len(b) == 0:
        return a, b

    a_is_shorter = len(a) <= len(b)
    shorter, longer = (a, b) if a_is_shorter else (b, a)
    target = len(longer)

    pieces = [seg.copy() for seg in shorter]
    lengths = [segment_length(seg) for seg in pieces]
    while len(pieces) < target:
        idx = int(np.argmax(lengths))
        first, second = subdivide_segment(pieces[idx])
        pieces[idx:idx + 1] = [first, second]
        lengths[idx:idx + 1] = [segment_length(first), segment_length(second)]

    matched = np.asarray(pieces, dtype=float).reshape(-1, 4, 2)
    return (matched, longer) if a_is_shorter else (longer, matched)
