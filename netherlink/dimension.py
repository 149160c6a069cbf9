"""Dimensions and conversion of coordinates between them."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar, Union

from netherlink.geometry import DEFAULT_NETHER_SCALE, WorldPos, WorldRegion

Convertible = TypeVar("Convertible", bound=Union[WorldPos, WorldRegion])


class Dimension(str, Enum):
    """A world dimension that can hold nether portals."""

    OVERWORLD = "overworld"
    NETHER = "nether"

    def __str__(self) -> str:
        return self.value.capitalize()

    def scale(self, nether_scale: float = DEFAULT_NETHER_SCALE) -> float:
        """Overworld blocks per block of this dimension along X and Z."""
        return nether_scale if self is Dimension.NETHER else 1.0

    @property
    def y_min(self) -> int:
        return 0 if self is Dimension.NETHER else -64

    @property
    def y_max(self) -> int:
        return 255 if self is Dimension.NETHER else 319

    @property
    def portal_search_range(self) -> int:
        """Horizontal distance from a destination block within which a portal
        block is still found by the game's portal search.

        The overworld searches 257x257 columns and the nether 33x33.
        """
        return 16 if self is Dimension.NETHER else 128

    def other(self) -> Dimension:
        return Dimension.OVERWORLD if self is Dimension.NETHER else Dimension.NETHER


def convert_dimension(
    value: Convertible,
    from_dimension: Dimension,
    to_dimension: Dimension,
    nether_scale: float = DEFAULT_NETHER_SCALE,
) -> Convertible:
    """Convert a ``WorldPos`` or ``WorldRegion`` between dimensions."""
    if from_dimension == to_dimension:
        return value
    if to_dimension == Dimension.OVERWORLD:
        return value.nether_to_overworld(from_dimension.scale(nether_scale))
    return value.overworld_to_nether(to_dimension.scale(nether_scale))
