"""Portal: a rectangular nether portal opening and its teleport geometry."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Optional, Tuple

from pydantic import BaseModel, Field

from netherlink.dimension import Dimension, convert_dimension
from netherlink.geometry import (
    DEFAULT_NETHER_SCALE,
    Axis,
    BlockPos,
    BlockRegion,
    WorldRegion,
    max_range_distance_to,
)

from .entity import Entity
from .ids import format_portal_id, next_portal_id

MIN_PORTAL_WIDTH = 2
MIN_PORTAL_HEIGHT = 3

# Minimum difference between the min and max coordinate along width / height.
_MIN_DW = MIN_PORTAL_WIDTH - 1
_MIN_DH = MIN_PORTAL_HEIGHT - 1

DEFAULT_PORTAL_COLOR = (127, 127, 127)

ColorChannel = Annotated[int, Field(ge=0, le=255)]


class PortalAxis(str, Enum):
    """Horizontal axis perpendicular to the portal's surface.

    This is the axis an entity walks along to pass through the portal, which
    is the opposite of what the game itself calls the portal axis.
    """

    X = "x"  # entered from east/west, width runs north/south
    Z = "z"  # entered from north/south, width runs east/west

    @property
    def as_axis(self) -> Axis:
        return Axis(self.value)

    def other(self) -> PortalAxis:
        return PortalAxis.Z if self is PortalAxis.X else PortalAxis.X


def _clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(value, hi))


class Portal(BaseModel):
    """Portal in an unspecified dimension.

    ``region`` is the block region filled with portal blocks (the opening,
    not the obsidian frame around it).
    """

    id: int = Field(
        default_factory=next_portal_id,
        exclude=True,
        description="Process-local unique ID; regenerated on load.",
    )
    name: str = Field("", description="Human-friendly name.")
    color: Tuple[ColorChannel, ColorChannel, ColorChannel] = Field(
        DEFAULT_PORTAL_COLOR, description="RGB color used to draw the portal.",
    )
    region: BlockRegion
    axis: PortalAxis

    @classmethod
    def new_minimal(cls, pos: BlockPos, axis: PortalAxis, dimension: Dimension) -> Portal:
        """Construct a portal of the smallest legal size with ``min`` at *pos*.

        The portal is moved vertically if needed to stay inside the
        dimension's placeable range.
        """
        y = _clamp(pos.y, dimension.y_min + 1, dimension.y_max - MIN_PORTAL_HEIGHT)
        return cls(
            region=BlockRegion(
                min=BlockPos(x=pos.x, y=y, z=pos.z),
                max=BlockPos(
                    x=pos.x + (_MIN_DW if axis is PortalAxis.Z else 0),
                    y=y + _MIN_DH,
                    z=pos.z + (_MIN_DW if axis is PortalAxis.X else 0),
                ),
            ),
            axis=axis,
        )

    # ── Shape ────────────────────────────────────────────────────────────

    @property
    def width_axis(self) -> Axis:
        return self.axis.other().as_axis

    @property
    def depth_axis(self) -> Axis:
        return self.axis.as_axis

    @property
    def width(self) -> int:
        return self.region.size(self.width_axis)

    @property
    def height(self) -> int:
        return self.region.size(Axis.Y)

    @property
    def display_name(self) -> str:
        return self.name or "<unnamed>"

    def __str__(self) -> str:
        return f"{self.display_name} ({format_portal_id(self.id)}) at {self.region}"

    # ── Teleport geometry ────────────────────────────────────────────────

    def entity_collision_region(self, entity: Entity) -> Optional[WorldRegion]:
        """Return the region where *entity* collides with the portal.

        Returns ``None`` if the entity won't fit in the portal.
        """
        half_width = entity.width / 2.0
        result = WorldRegion.from_block_region(self.region)
        result = result.expanded(Axis.X, below=half_width, above=half_width)
        result = result.expanded(Axis.Z, below=half_width, above=half_width)
        if entity.is_projectile:
            result = result.expanded(Axis.Y, below=entity.height)
        else:
            # Must be inside the frame opening, not just touching its edge.
            result = result.expanded(
                self.width_axis, below=-entity.width, above=-entity.width,
            )
            result = result.expanded(Axis.Y, above=-entity.height)
        return result if result.has_volume() else None

    def destination_region(
        self,
        entity: Entity,
        destination_dimension: Dimension,
        nether_scale: float = DEFAULT_NETHER_SCALE,
    ) -> Optional[BlockRegion]:
        """Return the block region where *entity* may try to arrive.

        *destination_dimension* is the dimension the portal leads to, not the
        one it is in.
        """
        collision = self.entity_collision_region(entity)
        if collision is None:
            return None
        converted = convert_dimension(
            collision, destination_dimension.other(), destination_dimension, nether_scale,
        )
        return converted.block_region_containing()

    # ── Search range ─────────────────────────────────────────────────────

    def is_in_range_of_point(self, pos: BlockPos, dimension: Dimension) -> bool:
        """Whether the portal search from *pos* would find this portal (Y ignored)."""
        r = dimension.portal_search_range
        lo, hi = self.region.min, self.region.max
        return lo.x - r <= pos.x <= hi.x + r and lo.z - r <= pos.z <= hi.z + r

    def is_in_range_of_region(self, region: BlockRegion, dimension: Dimension) -> bool:
        """Whether the portal is within search range of **any** point in *region*."""
        r = dimension.portal_search_range
        lo, hi = self.region.min, self.region.max
        return (
            lo.x <= region.max.x + r
            and lo.z <= region.max.z + r
            and hi.x >= region.min.x - r
            and hi.z >= region.min.z - r
        )

    def is_always_in_range_of_region(self, region: BlockRegion, dimension: Dimension) -> bool:
        """Whether the portal is within search range of **every** point in *region*."""
        r = dimension.portal_search_range
        return all(
            max_range_distance_to(region.range(axis), self.region.range(axis)) <= r
            for axis in (Axis.X, Axis.Z)
        )

    # ── Editing ──────────────────────────────────────────────────────────

    def adjust_min(
        self, new_min: BlockPos, *, dimension: Dimension, lock_size: bool = False,
    ) -> None:
        """Move ``min`` to *new_min*, keeping the portal legal.

        With *lock_size* the whole portal moves; otherwise ``max`` is pushed
        only as far as needed.
        """
        w, h, d = self.width_axis, Axis.Y, self.depth_axis
        lo, hi = self.region.min, self.region.max
        dw, dh, dd = hi[w] - lo[w], hi[h] - lo[h], hi[d] - lo[d]

        # Leave room for the old height.
        lowest_min_y = dimension.y_min + 1
        highest_min_y = max(dimension.y_max - 1 - dh, lowest_min_y)
        lo = new_min.with_axis(h, _clamp(new_min.y, lowest_min_y, highest_min_y))

        if lock_size:
            hi = (
                hi.with_axis(w, lo[w] + dw)
                .with_axis(h, lo[h] + dh)
                .with_axis(d, lo[d] + dd)
            )
        else:
            hi = (
                hi.with_axis(w, max(hi[w], lo[w] + _MIN_DW))
                .with_axis(h, max(hi[h], lo[h] + _MIN_DH))
                .with_axis(d, lo[d])
            )
        self.region = BlockRegion(min=lo, max=hi)

    def adjust_max(
        self, new_max: BlockPos, *, dimension: Dimension, lock_size: bool = False,
    ) -> None:
        """Move ``max`` to *new_max*, keeping the portal legal.

        With *lock_size* the whole portal moves; otherwise ``min`` is pushed
        only as far as needed.
        """
        w, h, d = self.width_axis, Axis.Y, self.depth_axis
        lo, hi = self.region.min, self.region.max
        dw, dh, dd = hi[w] - lo[w], hi[h] - lo[h], hi[d] - lo[d]

        # Leave room for the old height.
        highest_max_y = dimension.y_max - 1
        lowest_max_y = min(dimension.y_min + 1 + dh, highest_max_y)
        hi = new_max.with_axis(h, _clamp(new_max.y, lowest_max_y, highest_max_y))

        if lock_size:
            lo = (
                lo.with_axis(w, hi[w] - dw)
                .with_axis(h, hi[h] - dh)
                .with_axis(d, hi[d] - dd)
            )
        else:
            lo = (
                lo.with_axis(w, min(lo[w], hi[w] - _MIN_DW))
                .with_axis(h, min(lo[h], hi[h] - _MIN_DH))
                .with_axis(d, hi[d])
            )
        self.region = BlockRegion(min=lo, max=hi)

    def adjust_width(self, width: int) -> None:
        """Set the width, keeping ``min`` in place."""
        w = self.width_axis
        width = max(width, MIN_PORTAL_WIDTH)
        lo = self.region.min
        self.region = BlockRegion(min=lo, max=self.region.max.with_axis(w, lo[w] + width - 1))

    def adjust_height(self, height: int, dimension: Dimension) -> None:
        """Set the height, keeping ``min`` in place unless the top would leave the dimension."""
        # The full height of the dimension can't be used because the obsidian
        # frame needs room above and below.
        height = max(height, MIN_PORTAL_HEIGHT)
        min_y = self.region.min.y
        max_y = min_y + height - 1
        ceiling = dimension.y_max - 1
        if max_y > ceiling:
            excess = max_y - ceiling
            max_y -= excess
            min_y = max(min_y - excess, dimension.y_min + 1)
        self.region = BlockRegion(
            min=self.region.min.with_axis(Axis.Y, min_y),
            max=self.region.max.with_axis(Axis.Y, max_y),
        )

    def adjust_axis(self, axis: PortalAxis) -> None:
        """Turn the portal to face *axis*, keeping its width and ``min``."""
        dw = self.region.max[self.width_axis] - self.region.min[self.width_axis]
        self.axis = PortalAxis(axis)
        lo = self.region.min
        hi = (
            self.region.max
            .with_axis(self.width_axis, lo[self.width_axis] + dw)
            .with_axis(self.depth_axis, lo[self.depth_axis])
        )
        self.region = BlockRegion(min=lo, max=hi)
