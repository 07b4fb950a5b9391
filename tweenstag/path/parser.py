"""Path command parsing and cubic normalization.

Any path command string is reduced to a uniform array of absolute cubic
Bezier segments so that two paths can be compared and blended point by
point. Segments are stored as a float array of shape ``(n, 4, 2)`` holding
``(from, cp1, cp2, to)`` per row.

Supported commands: ``M L H V C S Q T A Z`` in absolute (upper case) and
relative (lower case) form, with repeated argument groups.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

import numpy as np

from .arc import arc_to_cubics

logger = logging.getLogger(__name__)

Point = tuple[float, float]
Segment = tuple[Point, Point, Point, Point]

CMD_RE = re.compile(r'([MmLlHhVvCcSsQqTtAaZz])([^MmLlHhVvCcSsQqTtAaZz]*)')
NUM_RE = re.compile(r'[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?')

# Arguments consumed per repetition of each command
ARG_COUNTS: dict[str, int] = {
    'M': 2, 'L': 2, 'H': 1, 'V': 1,
    'C': 6, 'S': 4, 'Q': 4, 'T': 2,
    'A': 7, 'Z': 0,
}


@dataclass(frozen=True)
class PathCommand:
    """A single command letter with its flat argument list."""
    letter: str
    args: tuple[float, ...] = ()

    @property
    def relative(self) -> bool:
        return self.letter.islower()

    @property
    def command(self) -> str:
        """Upper-case command letter."""
        return self.letter.upper()


def empty_segments() -> np.ndarray:
    """Segment array with no rows."""
    return np.empty((0, 4, 2), dtype=float)


def parse_path(d) -> list[PathCommand]:
    """Tokenize a path command string.

    Returns an empty list for anything that is not a well-formed path: a
    non-string, an empty string, a path not starting with a move-to, or a
    command whose argument count is not a multiple of its group size.
    """
    if not isinstance(d, str) or not d.strip():
        return []

    commands: list[PathCommand] = []
    for match in CMD_RE.finditer(d):
        letter = match.group(1)
        count = ARG_COUNTS[letter.upper()]
        args = tuple(float(n) for n in NUM_RE.findall(match.group(2)))
        if count == 0:
            commands.append(PathCommand(letter))
            continue
        if not args or len(args) % count:
            logger.debug(f"Malformed path command {letter!r} with {len(args)} args")
            return []
        commands.append(PathCommand(letter, args))

    if not commands or commands[0].command != 'M':
        logger.debug(f"Path does not start with a move-to: {d[:40]!r}")
        return []
    return commands


def line_to_cubic(start: Point, end: Point) -> Segment:
    """Straight line as a cubic with controls at 1/3 and 2/3."""
    dx, dy = end[0] - start[0], end[1] - start[1]
    return (
        start,
        (start[0] + dx / 3, start[1] + dy / 3),
        (start[0] + 2 * dx / 3, start[1] + 2 * dy / 3),
        end,
    )


def quad_to_cubic(start: Point, control: Point, end: Point) -> Segment:
    """Elevate a quadratic Bezier to a cubic."""
    return (
        start,
        (start[0] + 2 / 3 * (control[0] - start[0]), start[1] + 2 / 3 * (control[1] - start[1])),
        (end[0] + 2 / 3 * (control[0] - end[0]), end[1] + 2 / 3 * (control[1] - end[1])),
        end,
    )


def _reflect(control: Point | None, current: Point) -> Point:
    if control is None:
        return current
    return (2 * current[0] - control[0], 2 * current[1] - control[1])


def commands_to_segments(commands: list[PathCommand]) -> list[Segment]:
    """Convert parsed commands into absolute cubic segments."""
    segments: list[Segment] = []
    cur: Point = (0.0, 0.0)
    start: Point = (0.0, 0.0)
    last_cubic: Point | None = None  # second control of the previous C/S
    last_quad: Point | None = None  # control of the previous Q/T

    for cmd in commands:
        a = cmd.args
        ox, oy = cur if cmd.relative else (0.0, 0.0)
        name = cmd.command

        if name == 'M':
            cur = (a[0] + ox, a[1] + oy)
            start = cur
            if cmd.relative:
                ox, oy = cur
            # Extra pairs are implicit line-tos
            for i in range(2, len(a), 2):
                nxt = (a[i] + ox, a[i + 1] + oy)
                segments.append(line_to_cubic(cur, nxt))
                cur = nxt
                if cmd.relative:
                    ox, oy = cur
            last_cubic = last_quad = None

        elif name in ('L', 'H', 'V'):
            step = ARG_COUNTS[name]
            for i in range(0, len(a), step):
                if name == 'L':
                    nxt = (a[i] + ox, a[i + 1] + oy)
                elif name == 'H':
                    nxt = (a[i] + ox, cur[1])
                else:
                    nxt = (cur[0], a[i] + oy)
                segments.append(line_to_cubic(cur, nxt))
                cur = nxt
                if cmd.relative:
                    ox, oy = cur
            last_cubic = last_quad = None

        elif name in ('C', 'S'):
            step = ARG_COUNTS[name]
            for i in range(0, len(a), step):
                if name == 'C':
                    cp1 = (a[i] + ox, a[i + 1] + oy)
                    rest = a[i + 2:i + 6]
                else:
                    cp1 = _reflect(last_cubic, cur)
                    rest = a[i:i + 4]
                cp2 = (rest[0] + ox, rest[1] + oy)
                end = (rest[2] + ox, rest[3] + oy)
                segments.append((cur, cp1, cp2, end))
                last_cubic = cp2
                cur = end
                if cmd.relative:
                    ox, oy = cur
            last_quad = None

        elif name in ('Q', 'T'):
            step = ARG_COUNTS[name]
            for i in range(0, len(a), step):
                if name == 'Q':
                    control = (a[i] + ox, a[i + 1] + oy)
                    end = (a[i + 2] + ox, a[i + 3] + oy)
                else:
                    control = _reflect(last_quad, cur)
                    end = (a[i] + ox, a[i + 1] + oy)
                segments.append(quad_to_cubic(cur, control, end))
                last_quad = control
                cur = end
                if cmd.relative:
                    ox, oy = cur
            last_cubic = None

        elif name == 'A':
            for i in range(0, len(a), 7):
                rx, ry, x_rot, large_arc, sweep = a[i:i + 5]
                end = (a[i + 5] + ox, a[i + 6] + oy)
                segments.extend(arc_to_cubics(cur, rx, ry, x_rot, bool(large_arc), bool(sweep), end))
                cur = end
                if cmd.relative:
                    ox, oy = cur
            last_cubic = last_quad = None

        elif name == 'Z':
            if cur != start:
                segments.append(line_to_cubic(cur, start))
            cur = start
            last_cubic = last_quad = None

    return segments


def normalize_path(d) -> np.ndarray:
    """Parse a path string into an ``(n, 4, 2)`` array of absolute cubics.

    Malformed or empty input yields an array with zero rows.
    """
    segments = commands_to_segments(parse_path(d))
    if not segments:
        return empty_segments()
    return np.asarray(segments, dtype=float).reshape(-1, 4, 2)
