"""Portal entities and the hitboxes that travel through them."""

from .entity import ENDER_PEARL, ENTITY_PRESETS, PLAYER, Entity
from .ids import format_portal_id, next_portal_id
from .portal import MIN_PORTAL_HEIGHT, MIN_PORTAL_WIDTH, Portal, PortalAxis

__all__ = [
    "ENDER_PEARL",
    "ENTITY_PRESETS",
    "Entity",
    "MIN_PORTAL_HEIGHT",
    "MIN_PORTAL_WIDTH",
    "PLAYER",
    "Portal",
    "PortalAxis",
    "format_portal_id",
    "next_portal_id",
]
