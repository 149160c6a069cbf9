"""Portal reachability resolution."""

from .reachability import (
    PortalDestinations,
    minima_by_opt_key,
    naive_portal_destinations,
    resolve_portal_destinations,
)

__all__ = [
    "PortalDestinations",
    "minima_by_opt_key",
    "naive_portal_destinations",
    "resolve_portal_destinations",
]
