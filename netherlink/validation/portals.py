"""Portal legality checks: size, vertical placement and region shape."""

from __future__ import annotations

from typing import List

from netherlink.dimension import Dimension
from netherlink.geometry import ALL_AXES
from netherlink.portal import MIN_PORTAL_HEIGHT, MIN_PORTAL_WIDTH, Portal
from netherlink.world import World

from .errors import PortalViolation, ViolationKind


def validate_portal(portal: Portal, dimension: Dimension) -> List[PortalViolation]:
    """Check one portal against the rules the editing operations maintain.

    Returns a list of violations (empty if the portal is legal).
    """
    dimension = Dimension(dimension)
    violations: List[PortalViolation] = []

    def add(kind: ViolationKind, value: int, limit: int) -> None:
        violations.append(PortalViolation(
            portal_id=portal.id,
            portal_name=portal.display_name,
            dimension=str(dimension),
            kind=kind,
            value=value,
            limit=limit,
        ))

    region = portal.region
    for axis in ALL_AXES:
        if region.min[axis] > region.max[axis]:
            add("swapped_bounds", region.min[axis], region.max[axis])
    if violations:
        # Sizes are only checked once the bounds are ordered.
        return violations

    if portal.width < MIN_PORTAL_WIDTH:
        add("width", portal.width, MIN_PORTAL_WIDTH)
    if portal.height < MIN_PORTAL_HEIGHT:
        add("height", portal.height, MIN_PORTAL_HEIGHT)
    if region.min.y < dimension.y_min + 1:
        add("y_min", region.min.y, dimension.y_min + 1)
    if region.max.y > dimension.y_max - 1:
        add("y_max", region.max.y, dimension.y_max - 1)
    depth = region.size(portal.depth_axis)
    if depth != 1:
        add("depth", depth, 1)
    return violations


def validate_world(world: World) -> List[PortalViolation]:
    """Check every portal of both dimensions."""
    violations: List[PortalViolation] = []
    for dimension, portal in world.portals:
        violations.extend(validate_portal(portal, dimension))
    return violations
