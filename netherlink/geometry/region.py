"""Axis-aligned cuboids of block and world coordinates."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, replace
from typing import Iterator, Optional, Tuple

from .axis import ALL_AXES, Axis
from .pos import DEFAULT_NETHER_SCALE, BlockPos, WorldPos
from .ranges import max_range_distance_to, min_range_distance_to, min_range_distance_to_pos

RegionHalves = Tuple[Optional["BlockRegion"], Optional["BlockRegion"]]


@dataclass(frozen=True)
class BlockRegion:
    """Cuboid of block coordinates. Both ``min`` and ``max`` are inclusive.

    A region may briefly hold swapped bounds while it is being edited; use
    ``normalized_max()`` or ``normalized_min()`` before doing geometry with it.
    """

    min: BlockPos
    max: BlockPos

    @classmethod
    def from_corners(
        cls, min: Tuple[int, int, int], max: Tuple[int, int, int],
    ) -> BlockRegion:
        return cls(min=BlockPos(*min), max=BlockPos(*max))

    @classmethod
    def containing_point(cls, pos: WorldPos) -> BlockRegion:
        """Return the 1x1x1 region holding the block that contains *pos*."""
        block = BlockPos.containing(pos)
        return cls(min=block, max=block)

    # ── Validity ─────────────────────────────────────────────────────────

    def is_valid(self) -> bool:
        return all(self._is_valid_on_axis(axis) for axis in ALL_AXES)

    def _is_valid_on_axis(self, axis: Axis) -> bool:
        return self.min[axis] <= self.max[axis]

    def normalized_max(self) -> BlockRegion:
        """Raise ``max`` where needed so that ``min <= max`` along each axis."""
        return replace(self, max=BlockPos(
            x=max(self.max.x, self.min.x),
            y=max(self.max.y, self.min.y),
            z=max(self.max.z, self.min.z),
        ))

    def normalized_min(self) -> BlockRegion:
        """Lower ``min`` where needed so that ``min <= max`` along each axis."""
        return replace(self, min=BlockPos(
            x=min(self.min.x, self.max.x),
            y=min(self.min.y, self.max.y),
            z=min(self.min.z, self.max.z),
        ))

    # ── Measurements ─────────────────────────────────────────────────────

    def range(self, axis: Axis) -> Tuple[int, int]:
        return (self.min[axis], self.max[axis])

    def size(self, axis: Axis) -> int:
        """Number of blocks spanned along *axis*."""
        return self.max[axis] - self.min[axis] + 1

    @property
    def volume(self) -> int:
        return self.size(Axis.X) * self.size(Axis.Y) * self.size(Axis.Z)

    def is_single_block(self) -> bool:
        return self.min == self.max

    def contains(self, pos: BlockPos) -> bool:
        return all(self.min[axis] <= pos[axis] <= self.max[axis] for axis in ALL_AXES)

    def min_euclidean_distance_sq_to(self, other: BlockRegion) -> int:
        """Smallest squared distance between any point in ``self`` and *other*."""
        total = 0
        for axis in ALL_AXES:
            d = min_range_distance_to(self.range(axis), other.range(axis))
            total += d * d
        return total

    def max_euclidean_distance_sq_to(self, other: BlockRegion) -> int:
        """Largest squared distance from a point in ``self`` to the closest point in *other*."""
        total = 0
        for axis in ALL_AXES:
            d = max_range_distance_to(self.range(axis), other.range(axis))
            total += d * d
        return total

    def min_euclidean_distance_sq_to_point(self, pos: BlockPos) -> int:
        """Squared distance from *pos* to the closest point in ``self``."""
        total = 0
        for axis in ALL_AXES:
            d = min_range_distance_to_pos(self.range(axis), pos[axis])
            total += d * d
        return total

    # ── Iteration ────────────────────────────────────────────────────────

    def iter_positions(self) -> Iterator[BlockPos]:
        """Yield every block in the region, X varying fastest and Z slowest."""
        for z, y, x in itertools.product(
            range(self.min.z, self.max.z + 1),
            range(self.min.y, self.max.y + 1),
            range(self.min.x, self.max.x + 1),
        ):
            yield BlockPos(x=x, y=y, z=z)

    def corners(self) -> Tuple[BlockPos, ...]:
        """Return the 8 corners of the region.

        Corner ``i`` takes ``max`` along X if bit 0 of ``i`` is set, along Y
        if bit 1 is set and along Z if bit 2 is set, otherwise ``min``::

            0: [-, -, -]    4: [-, -, +]
            1: [+, -, -]    5: [+, -, +]
            2: [-, +, -]    6: [-, +, +]
            3: [+, +, -]    7: [+, +, +]
        """
        lo, hi = self.min, self.max
        return tuple(
            BlockPos(
                x=hi.x if i & 1 else lo.x,
                y=hi.y if i & 2 else lo.y,
                z=hi.z if i & 4 else lo.z,
            )
            for i in range(8)
        )

    # ── Splitting ────────────────────────────────────────────────────────

    def _with_bounds(self, axis: Axis, lo: int, hi: int) -> BlockRegion:
        return BlockRegion(
            min=self.min.with_axis(axis, lo),
            max=self.max.with_axis(axis, hi),
        )

    def _if_valid(self, axis: Axis) -> Optional[BlockRegion]:
        return self if self._is_valid_on_axis(axis) else None

    def split_at(self, axis: Axis, coordinate: int) -> RegionHalves:
        """Split the region at ``coordinate + 0.5`` along *axis*.

        Either half is ``None`` when it would be empty.
        """
        lo = self._with_bounds(axis, self.min[axis], min(self.max[axis], coordinate))
        hi = self._with_bounds(axis, max(self.min[axis], coordinate + 1), self.max[axis])
        return (lo._if_valid(axis), hi._if_valid(axis))

    def split_excluding_corners(self, axis: Axis) -> RegionHalves:
        """Split the region in half along *axis*, excluding both end layers."""
        start, end = self.range(axis)
        halfway = start + (end - start) // 2
        lo = self._with_bounds(axis, start + 1, halfway)
        hi = self._with_bounds(axis, halfway + 1, end - 1)
        return (lo._if_valid(axis), hi._if_valid(axis))

    def boundary_layers(self, axis: Axis) -> Tuple[BlockRegion, ...]:
        """Return the one-block-thick end layers along *axis*.

        Together with ``split_excluding_corners`` these cover the region.
        """
        start, end = self.range(axis)
        if start == end:
            return (self,)
        return (
            self._with_bounds(axis, start, start),
            self._with_bounds(axis, end, end),
        )

    def __str__(self) -> str:
        return f"[{self.min.x}, {self.min.y}, {self.min.z}]-[{self.max.x}, {self.max.y}, {self.max.z}]"


@dataclass(frozen=True)
class WorldRegion:
    """Cuboid of world coordinates."""

    min: WorldPos
    max: WorldPos

    @classmethod
    def from_block_region(cls, region: BlockRegion) -> WorldRegion:
        """A block at N occupies [N, N+1), so ``max`` grows by one on each axis."""
        hi = region.max
        return cls(
            min=WorldPos.from_block(region.min),
            max=WorldPos(x=hi.x + 1.0, y=hi.y + 1.0, z=hi.z + 1.0),
        )

    def expanded(self, axis: Axis, below: float = 0.0, above: float = 0.0) -> WorldRegion:
        """Move ``min`` down by *below* and ``max`` up by *above* along *axis*."""
        return WorldRegion(
            min=self.min.with_axis(axis, self.min[axis] - below),
            max=self.max.with_axis(axis, self.max[axis] + above),
        )

    def center(self) -> WorldPos:
        return WorldPos(
            x=(self.min.x + self.max.x) * 0.5,
            y=(self.min.y + self.max.y) * 0.5,
            z=(self.min.z + self.max.z) * 0.5,
        )

    def block_region_containing(self) -> BlockRegion:
        """Return the smallest block region that contains ``self``."""
        return BlockRegion(min=BlockPos.containing(self.min), max=BlockPos.containing(self.max))

    def is_valid(self) -> bool:
        return all(self.min[axis] <= self.max[axis] for axis in ALL_AXES)

    def has_volume(self) -> bool:
        """True when the region has a strictly positive extent on every axis."""
        return all(self.min[axis] < self.max[axis] for axis in ALL_AXES)

    def nether_to_overworld(self, nether_scale: float = DEFAULT_NETHER_SCALE) -> WorldRegion:
        return WorldRegion(
            min=self.min.nether_to_overworld(nether_scale),
            max=self.max.nether_to_overworld(nether_scale),
        )

    def overworld_to_nether(self, nether_scale: float = DEFAULT_NETHER_SCALE) -> WorldRegion:
        return WorldRegion(
            min=self.min.overworld_to_nether(nether_scale),
            max=self.max.overworld_to_nether(nether_scale),
        )
