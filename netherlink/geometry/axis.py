"""World axes."""

from __future__ import annotations

from enum import Enum


class Axis(str, Enum):
    """Axis in the world. X and Z are horizontal, Y is vertical."""

    X = "x"  # east/west
    Y = "y"  # up/down
    Z = "z"  # north/south

    @property
    def corner_bit(self) -> int:
        """Bit used for this axis in a corner index (see ``BlockRegion.corners``)."""
        return _CORNER_BITS[self]

    @property
    def is_horizontal(self) -> bool:
        return self is not Axis.Y


ALL_AXES = (Axis.X, Axis.Y, Axis.Z)
HORIZONTAL_AXES = (Axis.X, Axis.Z)

_CORNER_BITS = {Axis.X: 1, Axis.Y: 2, Axis.Z: 4}
