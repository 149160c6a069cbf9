"""World query exception types."""

from __future__ import annotations

from netherlink.geometry import BlockRegion


class InvalidRegionError(ValueError):
    """A query region has ``min > max`` on some axis."""

    def __init__(self, region: BlockRegion) -> None:
        self.region = region
        super().__init__(
            f"Region {region} is not valid: min must be <= max on every axis. "
            "Normalize it before querying."
        )
