"""Path morphing: blend two path command strings through matched cubics."""

from __future__ import annotations

from typing import Optional

import numpy as np

from tweenstag.config import settings

from .matching import match_segment_counts
from .parser import normalize_path


def format_number(value: float, precision: int) -> str:
    """Fixed-precision number without trailing zeros (``-0`` becomes ``0``)."""
    text = f"{value:.{precision}f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    if text in ('-0', ''):
        text = '0'
    return text


def format_segments(segments: np.ndarray, precision: Optional[int] = None) -> str:
    """Serialize cubic segments as one ``M`` followed by one ``C`` per segment.

    Args:
        segments: Segment array of shape (n, 4, 2)
        precision: Decimals to keep (defaults to settings.PATH_PRECISION)

    Returns:
        Path command string, empty for an empty array
    """
    if len(segments) == 0:
        return ''
    if precision is None:
        precision = settings.PATH_PRECISION

    def pt(p) -> str:
        return f"{format_number(p[0], precision)},{format_number(p[1], precision)}"

    parts = [f"M{pt(segments[0][0])}"]
    for _, cp1, cp2, to in segments:
        parts.append(f"C{pt(cp1)} {pt(cp2)} {pt(to)}")
    return ' '.join(parts)


def interpolate_segments(a: np.ndarray, b: np.ndarray, t: float) -> np.ndarray:
    """Linear blend of two equally long segment arrays."""
    return a + (b - a) * t


def morph_path(path_a: str, path_b: str, t: float) -> str:
    """Interpolate between two path command strings.

    The interval ends are exact: ``t <= 0`` returns ``path_a`` and
    ``t >= 1`` returns ``path_b`` unchanged. If either path has no
    geometry the result snaps to the nearer end.
    """
    if t <= 0:
        return path_a
    if t >= 1:
        return path_b

    segs_a = normalize_path(path_a)
    segs_b = normalize_path(path_b)
    if len(segs_a) == 0 or len(segs_b) == 0:
        return path_a if t < 0.5 else path_b

    matched_a, matched_b = match_segment_counts(segs_a, segs_b)
    return format_segments(interpolate_segments(matched_a, matched_b, t))
