"""World aggregate: portals of both dimensions and reachability queries."""

from .errors import InvalidRegionError
from .links import PortalLinkResult, PortalLinks
from .world import World, WorldPortals

__all__ = [
    "InvalidRegionError",
    "PortalLinkResult",
    "PortalLinks",
    "World",
    "WorldPortals",
]
