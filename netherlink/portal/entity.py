"""Entity hitboxes used to work out where an entity can enter a portal."""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class Entity(BaseModel):
    """Hitbox of a teleporting entity.

    An entity's position is at the bottom center of its hitbox.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    width: float = Field(..., ge=0, description="Hitbox extent along X and Z.")
    height: float = Field(..., ge=0, description="Hitbox extent along Y.")
    is_projectile: bool = Field(
        False,
        description="Projectiles can clip into the portal frame.",
    )


PLAYER = Entity(width=0.6, height=1.8)
ENDER_PEARL = Entity(width=0.25, height=0.25, is_projectile=True)

ENTITY_PRESETS: Dict[str, Entity] = {
    "player": PLAYER,
    "ender_pearl": ENDER_PEARL,
}
