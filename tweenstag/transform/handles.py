"""Selection handles of a bounding box."""

from enum import Enum


class Handle(str, Enum):
    """Scale/rotate handle ids: four corners and four edge midpoints."""
    CORNER_TL = "corner-tl"
    CORNER_TR = "corner-tr"
    CORNER_BL = "corner-bl"
    CORNER_BR = "corner-br"
    EDGE_T = "edge-t"
    EDGE_R = "edge-r"
    EDGE_B = "edge-b"
    EDGE_L = "edge-l"

    @property
    def position(self) -> str:
        """Position part of the id ('tl', 'r', ...)."""
        return self.value.split('-')[1]

    @property
    def is_corner(self) -> bool:
        return self.value.startswith('corner-')

    @property
    def fractions(self) -> tuple[float, float]:
        """Handle location as fractions of the box width and height."""
        pos = self.position
        fx = 1.0 if 'r' in pos else 0.0 if 'l' in pos else 0.5
        fy = 1.0 if 'b' in pos else 0.0 if 't' in pos else 0.5
        return (fx, fy)

    @property
    def opposite_fractions(self) -> tuple[float, float]:
        """Fractions of the point across the box from this handle."""
        fx, fy = self.fractions
        return (1.0 - fx, 1.0 - fy)
