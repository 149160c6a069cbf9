"""World: the portals of both dimensions and the queries over them."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from netherlink.dimension import Dimension
from netherlink.geometry import DEFAULT_NETHER_SCALE, BlockRegion, WorldPos
from netherlink.portal import Entity, Portal, format_portal_id
from netherlink.resolver import PortalDestinations, resolve_portal_destinations

from .errors import InvalidRegionError
from .links import PortalLinkResult, PortalLinks


class WorldPortals:
    """Ordered portal lists, one per dimension.

    Order only matters for display; it has no effect on reachability.
    """

    def __init__(
        self,
        overworld: Iterable[Portal] = (),
        nether: Iterable[Portal] = (),
    ) -> None:
        self._portals: Dict[Dimension, List[Portal]] = {
            Dimension.OVERWORLD: list(overworld),
            Dimension.NETHER: list(nether),
        }

    @property
    def overworld(self) -> List[Portal]:
        return self._portals[Dimension.OVERWORLD]

    @property
    def nether(self) -> List[Portal]:
        return self._portals[Dimension.NETHER]

    def __getitem__(self, dimension: Dimension) -> List[Portal]:
        return self._portals[Dimension(dimension)]

    def __iter__(self) -> Iterator[Tuple[Dimension, Portal]]:
        for dimension, portals in self._portals.items():
            for portal in portals:
                yield dimension, portal

    def __len__(self) -> int:
        return sum(len(portals) for portals in self._portals.values())

    def __repr__(self) -> str:
        return f"WorldPortals(overworld={len(self.overworld)}, nether={len(self.nether)})"


class World:
    """Portals of both dimensions plus the test points placed in them.

    Usage::

        world = World()
        portal = world.add_portal(
            Dimension.OVERWORLD, Portal.new_minimal(pos, PortalAxis.X, Dimension.OVERWORLD),
        )
        region = portal.destination_region(PLAYER, Dimension.NETHER)
        world.portal_destinations(Dimension.NETHER, region)
    """

    def __init__(
        self,
        portals: Optional[WorldPortals] = None,
        nether_scale: float = DEFAULT_NETHER_SCALE,
    ) -> None:
        self.portals = portals if portals is not None else WorldPortals()
        self.nether_scale = nether_scale
        self.test_points: Dict[Dimension, List[WorldPos]] = {
            Dimension.OVERWORLD: [],
            Dimension.NETHER: [],
        }
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    # ── Editing ──────────────────────────────────────────────────────────

    def add_portal(self, dimension: Dimension, portal: Portal) -> Portal:
        self.portals[dimension].append(portal)
        self.logger.info("Added portal %s in %s", portal, Dimension(dimension))
        return portal

    def remove_portal(self, portal_id: int) -> Portal:
        """Remove and return the portal with *portal_id*."""
        found = self.find_portal(portal_id)
        if found is None:
            raise KeyError(f"No portal {format_portal_id(portal_id)} in world.")
        dimension, portal = found
        self.portals[dimension].remove(portal)
        self.logger.info("Removed portal %s from %s", portal, dimension)
        return portal

    def find_portal(self, portal_id: int) -> Optional[Tuple[Dimension, Portal]]:
        for dimension, portal in self.portals:
            if portal.id == portal_id:
                return dimension, portal
        return None

    # ── Reachability ─────────────────────────────────────────────────────

    def portals_in_range(
        self, destination_dimension: Dimension, destination_region: BlockRegion,
    ) -> List[Portal]:
        """Portals within search range of at least one point of the region."""
        return [
            p for p in self.portals[destination_dimension]
            if p.is_in_range_of_region(destination_region, destination_dimension)
        ]

    def portal_destinations(
        self, destination_dimension: Dimension, destination_region: BlockRegion,
    ) -> PortalDestinations:
        """Portals an entity arriving anywhere in the region can end up at.

        Raises:
            InvalidRegionError: if the region has ``min > max`` on some axis.
        """
        if not destination_region.is_valid():
            raise InvalidRegionError(destination_region)
        dimension = Dimension(destination_dimension)
        return resolve_portal_destinations(
            self.portals[dimension], dimension, destination_region,
        )

    def entity_destinations(self, dimension: Dimension, point: WorldPos) -> PortalDestinations:
        """Portals an entity arriving exactly at *point* can end up at."""
        return self.portal_destinations(dimension, BlockRegion.containing_point(point))

    def test_point_destinations(
        self, dimension: Dimension,
    ) -> List[Tuple[WorldPos, PortalDestinations]]:
        return [
            (point, self.entity_destinations(dimension, point))
            for point in self.test_points[Dimension(dimension)]
        ]

    # ── Links ────────────────────────────────────────────────────────────

    def portal_link(
        self, portal: Portal, portal_dimension: Dimension, entity: Entity,
    ) -> PortalLinkResult:
        """Where *entity* ends up after walking through *portal*."""
        destination_dimension = Dimension(portal_dimension).other()
        region = portal.destination_region(entity, destination_dimension, self.nether_scale)
        if region is None:
            return PortalLinkResult.entity_wont_fit()
        destinations = self.portal_destinations(destination_dimension, region)
        return PortalLinkResult(
            entity_fits=True,
            destination_ids=tuple(p.id for p in destinations.existing_portals),
            new_portal=destinations.new_portal,
        )

    def portal_links(self, entity: Entity) -> Dict[int, PortalLinks]:
        """Outgoing and incoming links of every portal in the world, keyed by ID."""
        links: Dict[int, PortalLinks] = {
            portal.id: PortalLinks(outgoing=self.portal_link(portal, dimension, entity))
            for dimension, portal in self.portals
        }
        for source_id, link in links.items():
            for destination_id in link.outgoing.destination_ids:
                destination = links.get(destination_id)
                if destination is None:
                    self.logger.error(
                        "No destination portal with id %s", format_portal_id(destination_id),
                    )
                    continue
                destination.incoming.append(source_id)
        return links

    def __repr__(self) -> str:
        return f"World({self.portals!r}, nether_scale={self.nether_scale})"
