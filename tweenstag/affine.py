"""
Affine frames for editing inside nested groups and clip instances.

Each entered container contributes translate(x, y) . rotate(rotation) .
scale(scaleX, scaleY). Composing the chain from the outermost container
inward gives the local-to-world matrix of the innermost one.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Union

import numpy as np

from tweenstag.config import settings
from tweenstag.models import SceneObject

logger = logging.getLogger(__name__)

Container = Union[SceneObject, Mapping[str, Any]]


@dataclass(frozen=True)
class AffineMatrix:
    """2x3 affine matrix in SVG order.

    Maps (x, y) to (a*x + c*y + tx, b*x + d*y + ty).
    """
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    @classmethod
    def identity(cls) -> 'AffineMatrix':
        return cls()

    @classmethod
    def translation(cls, tx: float, ty: float) -> 'AffineMatrix':
        return cls(tx=tx, ty=ty)

    @classmethod
    def rotation(cls, degrees: float) -> 'AffineMatrix':
        rad = math.radians(degrees)
        cos, sin = math.cos(rad), math.sin(rad)
        return cls(a=cos, b=sin, c=-sin, d=cos)

    @classmethod
    def scaling(cls, sx: float, sy: Optional[float] = None) -> 'AffineMatrix':
        return cls(a=sx, d=sx if sy is None else sy)

    @classmethod
    def from_array(cls, m: np.ndarray) -> 'AffineMatrix':
        """Create from a 3x3 homogeneous matrix."""
        return cls(
            a=float(m[0, 0]), b=float(m[1, 0]),
            c=float(m[0, 1]), d=float(m[1, 1]),
            tx=float(m[0, 2]), ty=float(m[1, 2]),
        )

    def to_array(self) -> np.ndarray:
        """3x3 homogeneous matrix."""
        return np.array([
            [self.a, self.c, self.tx],
            [self.b, self.d, self.ty],
            [0.0, 0.0, 1.0],
        ])

    def __matmul__(self, other: 'AffineMatrix') -> 'AffineMatrix':
        return AffineMatrix.from_array(self.to_array() @ other.to_array())

    @property
    def determinant(self) -> float:
        return self.a * self.d - self.b * self.c

    def apply(self, x: float, y: float) -> tuple[float, float]:
        """Transform a point."""
        return (self.a * x + self.c * y + self.tx, self.b * x + self.d * y + self.ty)

    def apply_vector(self, dx: float, dy: float) -> tuple[float, float]:
        """Transform a delta (translation ignored)."""
        return (self.a * dx + self.c * dy, self.b * dx + self.d * dy)


def _read(container: Container, *keys: str, default: float) -> float:
    for key in keys:
        value = container.get(key)
        if value is not None:
            return float(value)
    return default


def container_matrix(container: Container) -> AffineMatrix:
    """Local-to-parent matrix of one group or clip instance."""
    if isinstance(container, SceneObject):
        container = container.attributes()
    x = _read(container, 'x', default=0.0)
    y = _read(container, 'y', default=0.0)
    rotation = _read(container, 'rotation', default=0.0)
    sx = _read(container, 'scaleX', 'scale_x', default=1.0)
    sy = _read(container, 'scaleY', 'scale_y', default=1.0)
    return (
        AffineMatrix.translation(x, y)
        @ AffineMatrix.rotation(rotation)
        @ AffineMatrix.scaling(sx, sy)
    )


def compose_affine(container_chain: Iterable[Container]) -> AffineMatrix:
    """Accumulate container transforms, outermost container first."""
    matrix = AffineMatrix.identity()
    for container in container_chain:
        matrix = matrix @ container_matrix(container)
    return matrix


def invert_affine(matrix: AffineMatrix) -> Optional[AffineMatrix]:
    """Inverse of a matrix, or None when it is (near) singular."""
    if abs(matrix.determinant) < settings.SINGULAR_EPSILON:
        return None
    return AffineMatrix.from_array(np.linalg.inv(matrix.to_array()))


def world_delta_to_local(matrix: AffineMatrix, dx: float, dy: float) -> tuple[float, float]:
    """Map a pointer delta from world space into a container's local space.

    A singular frame leaves the delta unconverted.
    """
    inverse = invert_affine(matrix)
    if inverse is None:
        logger.debug("Singular edit frame, passing delta through")
        return (dx, dy)
    return inverse.apply_vector(dx, dy)


def local_delta_to_world(matrix: AffineMatrix, dx: float, dy: float) -> tuple[float, float]:
    return matrix.apply_vector(dx, dy)


def world_point_to_local(matrix: AffineMatrix, x: float, y: float) -> tuple[float, float]:
    """Map a world point into local space (unchanged for a singular frame)."""
    inverse = invert_affine(matrix)
    if inverse is None:
        logger.debug("Singular edit frame, passing point through")
        return (x, y)
    return inverse.apply(x, y)


def local_point_to_world(matrix: AffineMatrix, x: float, y: float) -> tuple[float, float]:
    return matrix.apply(x, y)
