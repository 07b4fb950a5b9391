"""
Vector path geometry.

- parser: command tokenizing and normalization to absolute cubics
- arc: elliptical arc approximation
- matching: segment count matching by subdivision
- morph: blending and serialization
- extent: intrinsic bounds and resizing
"""

from .arc import arc_to_cubics
from .extent import path_bounds, rescale_path, segments_bounds
from .matching import match_segment_counts, segment_length, subdivide_segment
from .morph import format_segments, morph_path
from .parser import PathCommand, normalize_path, parse_path

__all__ = [
    'PathCommand',
    'parse_path',
    'normalize_path',
    'arc_to_cubics',
    'segment_length',
    'subdivide_segment',
    'match_segment_counts',
    'format_segments',
    'morph_path',
    'path_bounds',
    'segments_bounds',
    'rescale_path',
]
