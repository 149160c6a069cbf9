"""Block and world coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from .axis import Axis

# Overworld blocks per nether block along X and Z.
DEFAULT_NETHER_SCALE = 8.0


@dataclass(frozen=True)
class BlockPos:
    """Block coordinates.

    Block coordinates cannot be converted directly between dimensions; they
    must be converted to world coordinates first.
    """

    x: int
    y: int
    z: int

    def __getitem__(self, axis: Axis) -> int:
        return getattr(self, Axis(axis).value)

    def with_axis(self, axis: Axis, value: int) -> BlockPos:
        """Return a copy with the coordinate along *axis* replaced."""
        return replace(self, **{Axis(axis).value: value})

    def euclidean_distance_sq(self, other: BlockPos) -> int:
        """Return the squared Euclidean distance between ``self`` and *other*."""
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return dx * dx + dy * dy + dz * dz

    @classmethod
    def containing(cls, pos: WorldPos) -> BlockPos:
        """Return the block that contains world position *pos* (floor)."""
        return cls(x=math.floor(pos.x), y=math.floor(pos.y), z=math.floor(pos.z))


@dataclass(frozen=True)
class WorldPos:
    """Continuous coordinates within one dimension."""

    x: float
    y: float
    z: float

    def __getitem__(self, axis: Axis) -> float:
        return getattr(self, Axis(axis).value)

    def with_axis(self, axis: Axis, value: float) -> WorldPos:
        """Return a copy with the coordinate along *axis* replaced."""
        return replace(self, **{Axis(axis).value: value})

    @classmethod
    def from_block(cls, pos: BlockPos) -> WorldPos:
        return cls(x=float(pos.x), y=float(pos.y), z=float(pos.z))

    def nether_to_overworld(self, nether_scale: float = DEFAULT_NETHER_SCALE) -> WorldPos:
        return WorldPos(x=self.x * nether_scale, y=self.y, z=self.z * nether_scale)

    def overworld_to_nether(self, nether_scale: float = DEFAULT_NETHER_SCALE) -> WorldPos:
        return WorldPos(x=self.x / nether_scale, y=self.y, z=self.z / nether_scale)

    def __str__(self) -> str:
        return f"{self.x}, {self.y}, {self.z}"
