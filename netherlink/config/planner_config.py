"""Planner configuration domain model."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from netherlink.geometry import DEFAULT_NETHER_SCALE
from netherlink.portal import PLAYER, Entity
from netherlink.world import World

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class PlannerConfig:
    """Loaded planner configuration."""

    entity: Entity = field(default=PLAYER)
    nether_scale: float = DEFAULT_NETHER_SCALE
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.nether_scale <= 0:
            raise ValueError(f"nether_scale ({self.nether_scale}) must be > 0")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    def build_world(self) -> World:
        """Return an empty world using the configured nether scale."""
        return World(nether_scale=self.nether_scale)

    def configure_logging(self) -> None:
        """Apply ``log_level`` to the ``netherlink`` logger hierarchy."""
        logging.basicConfig(format=_LOG_FORMAT)
        logging.getLogger("netherlink").setLevel(self.log_level)
