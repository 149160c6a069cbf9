"""Geometric primitives: axes, positions and cuboid regions."""

from .axis import ALL_AXES, HORIZONTAL_AXES, Axis
from .pos import DEFAULT_NETHER_SCALE, BlockPos, WorldPos
from .ranges import max_range_distance_to, min_range_distance_to, min_range_distance_to_pos
from .region import BlockRegion, WorldRegion

__all__ = [
    "ALL_AXES",
    "Axis",
    "BlockPos",
    "BlockRegion",
    "DEFAULT_NETHER_SCALE",
    "HORIZONTAL_AXES",
    "WorldPos",
    "WorldRegion",
    "max_range_distance_to",
    "min_range_distance_to",
    "min_range_distance_to_pos",
]
