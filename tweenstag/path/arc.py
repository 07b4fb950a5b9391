"""Elliptical arc to cubic Bezier conversion.

Uses the endpoint-to-center conversion from the SVG implementation notes,
then approximates each piece of at most 90 degrees with one cubic.
"""

from __future__ import annotations

import math

Point = tuple[float, float]
Segment = tuple[Point, Point, Point, Point]


def arc_to_cubics(
    start: Point,
    rx: float,
    ry: float,
    x_rotation: float,
    large_arc: bool,
    sweep: bool,
    end: Point,
) -> list[Segment]:
    """Approximate an elliptical arc with cubic segments.

    Args:
        start: Current point
        rx, ry: Ellipse radii (sign ignored, corrected upwards if too small)
        x_rotation: Ellipse x-axis rotation in degrees
        large_arc: Large-arc flag
        sweep: Sweep flag
        end: Arc end point

    Returns:
        List of cubic segments. A zero radius degrades to a straight line;
        identical endpoints produce no segment at all.
    """
    # Import here to avoid circular imports
    from .parser import line_to_cubic

    if start == end:
        return []
    rx, ry = abs(rx), abs(ry)
    if rx == 0 or ry == 0:
        return [line_to_cubic(start, end)]

    phi = math.radians(x_rotation)
    cos_phi, sin_phi = math.cos(phi), math.sin(phi)

    # Step 1: transformed midpoint
    dx = (start[0] - end[0]) / 2
    dy = (start[1] - end[1]) / 2
    x1p = cos_phi * dx + sin_phi * dy
    y1p = -sin_phi * dx + cos_phi * dy

    # Correct out-of-range radii
    lam = (x1p * x1p) / (rx * rx) + (y1p * y1p) / (ry * ry)
    if lam > 1:
        s = math.sqrt(lam)
        rx *= s
        ry *= s

    rx_sq, ry_sq = rx * rx, ry * ry
    num = rx_sq * ry_sq - rx_sq * y1p * y1p - ry_sq * x1p * x1p
    den = rx_sq * y1p * y1p + ry_sq * x1p * x1p
    sq = max(0.0, num / den)
    k = (-1 if large_arc == sweep else 1) * math.sqrt(sq)

    # Step 2: center in the rotated frame, then in user space
    cxp = k * (rx * y1p) / ry
    cyp = -k * (ry * x1p) / rx
    cx = cos_phi * cxp - sin_phi * cyp + (start[0] + end[0]) / 2
    cy = sin_phi * cxp + cos_phi * cyp + (start[1] + end[1]) / 2

    # Step 3: start angle and sweep
    theta1 = math.atan2((y1p - cyp) / ry, (x1p - cxp) / rx)
    d_theta = math.atan2((-y1p - cyp) / ry, (-x1p - cxp) / rx) - theta1
    if sweep and d_theta < 0:
        d_theta += 2 * math.pi
    elif not sweep and d_theta > 0:
        d_theta -= 2 * math.pi

    pieces = max(1, math.ceil(abs(d_theta) / (math.pi / 2) - 1e-9))
    step = d_theta / pieces
    alpha = 4 / 3 * math.tan(step / 4)

    def to_user(px: float, py: float) -> Point:
        return (cos_phi * px - sin_phi * py + cx, sin_phi * px + cos_phi * py + cy)

    segments: list[Segment] = []
    prev = start
    for i in range(pieces):
        a1 = theta1 + i * step
        a2 = a1 + step
        cos1, sin1 = math.cos(a1), math.sin(a1)
        cos2, sin2 = math.cos(a2), math.sin(a2)
        cp1 = to_user(rx * (cos1 - alpha * sin1), ry * (sin1 + alpha * cos1))
        cp2 = to_user(rx * (cos2 + alpha * sin2), ry * (sin2 - alpha * cos2))
        # Land exactly on the requested end point
        to = end if i == pieces - 1 else to_user(rx * cos2, ry * sin2)
        segments.append((prev, cp1, cp2, to))
        prev = to
    return segments
