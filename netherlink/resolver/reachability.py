"""Reachability resolution: which portals an entity arriving in a region can link to.

For a single arrival point the game scans every portal within the dimension's
search range of that point (a square column, Y ignored) and picks the one
closest by squared Euclidean distance, or generates a new portal when nothing
is in range. An entity arrives somewhere inside a block region, so the result
for a region is the union of the per-point results.

The nearest-portal function is piecewise constant over a region, so instead
of visiting every block the production resolver evaluates the 8 corners of a
region and only subdivides where the corners leave something undecided.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, FrozenSet, Iterable, List, Optional, Sequence, Tuple, TypeVar

from netherlink.dimension import Dimension
from netherlink.geometry import ALL_AXES, HORIZONTAL_AXES, BlockPos, BlockRegion
from netherlink.portal import Portal

logger = logging.getLogger(__name__)

T = TypeVar("T")

# One tuple of winning candidate indices per region corner.
CornerWinners = Tuple[Tuple[int, ...], ...]


@dataclass(frozen=True)
class PortalDestinations:
    """Result of a reachability query.

    ``existing_portals`` holds every portal that is the nearest in-range
    portal (ties included) for at least one point of the queried region, in
    candidate order. ``new_portal`` is set when some point has no portal in
    range, meaning the game would generate a fresh one there.
    """

    existing_portals: Tuple[Portal, ...]
    new_portal: bool

    @property
    def portal_ids(self) -> FrozenSet[int]:
        return frozenset(p.id for p in self.existing_portals)


@dataclass
class _Marks:
    """Accumulator shared by every step of one resolver run."""

    confirmed_reachable: List[bool]
    may_generate_new_portal: bool = False
    steps: int = 0


def minima_by_opt_key(items: Iterable[T], key: Callable[[T], Optional[int]]) -> List[T]:
    """Return every item sharing the lowest key, in input order.

    Items whose key is ``None`` are skipped entirely.
    """
    min_key: Optional[int] = None
    result: List[T] = []
    for item in items:
        k = key(item)
        if k is None:
            continue
        if min_key is None or k < min_key:
            min_key = k
            result = [item]
        elif k == min_key:
            result.append(item)
    return result


def _closest_in_range(
    candidates: Sequence[Portal],
    indices: Iterable[int],
    pos: BlockPos,
    dimension: Dimension,
) -> List[int]:
    """Indices of the in-range candidates nearest to *pos*."""

    def distance(i: int) -> Optional[int]:
        portal = candidates[i]
        if not portal.is_in_range_of_point(pos, dimension):
            return None
        return portal.region.min_euclidean_distance_sq_to_point(pos)

    return minima_by_opt_key(indices, distance)


def _collect(candidates: Sequence[Portal], marks: _Marks) -> PortalDestinations:
    return PortalDestinations(
        existing_portals=tuple(
            portal
            for portal, reachable in zip(candidates, marks.confirmed_reachable)
            if reachable
        ),
        new_portal=marks.may_generate_new_portal,
    )


def naive_portal_destinations(
    candidates: Sequence[Portal],
    destination_dimension: Dimension,
    destination_region: BlockRegion,
) -> PortalDestinations:
    """Reference resolver: evaluate every block of the region individually.

    Exact but O(volume x portals); use ``resolve_portal_destinations`` for
    anything but small regions.
    """
    marks = _Marks(confirmed_reachable=[False] * len(candidates))
    all_indices = range(len(candidates))
    for pos in destination_region.iter_positions():
        winners = _closest_in_range(candidates, all_indices, pos, destination_dimension)
        if not winners:
            marks.may_generate_new_portal = True
        for i in winners:
            marks.confirmed_reachable[i] = True
        marks.steps += 1
    return _collect(candidates, marks)


def resolve_portal_destinations(
    candidates: Sequence[Portal],
    destination_dimension: Dimension,
    destination_region: BlockRegion,
) -> PortalDestinations:
    """Return the portals reachable from anywhere in *destination_region*.

    *candidates* are the portals of *destination_dimension*. The region must
    satisfy ``min <= max`` on every axis.
    """
    marks = _Marks(confirmed_reachable=[False] * len(candidates))
    _mark_reachable_portals(
        destination_dimension,
        destination_region,
        candidates,
        list(range(len(candidates))),
        marks,
    )
    result = _collect(candidates, marks)
    logger.debug(
        "Resolved %s in %s after %d step(s): %d portal(s), new_portal=%s",
        destination_region,
        destination_dimension,
        marks.steps,
        len(result.existing_portals),
        result.new_portal,
    )
    return result


def _mark_reachable_portals(
    dimension: Dimension,
    region: BlockRegion,
    candidates: Sequence[Portal],
    might_be_reachable: List[int],
    marks: _Marks,
) -> None:
    marks.steps += 1

    # Drop portals that are out of range of the whole region.
    might_be_reachable = [
        i for i in might_be_reachable
        if candidates[i].is_in_range_of_region(region, dimension)
    ]

    # A portal in range of every point bounds how far the winner can be
    # anywhere in the region; portals that are always farther never win.
    always_in_range = [
        i for i in might_be_reachable
        if candidates[i].is_always_in_range_of_region(region, dimension)
    ]
    if always_in_range:
        smallest_max_distance = min(
            region.max_euclidean_distance_sq_to(candidates[i].region)
            for i in always_in_range
        )
        might_be_reachable = [
            i for i in might_be_reachable
            if region.min_euclidean_distance_sq_to(candidates[i].region) <= smallest_max_distance
        ]

    closest_at_each_corner: CornerWinners = tuple(
        tuple(_closest_in_range(candidates, might_be_reachable, corner, dimension))
        for corner in region.corners()
    )
    if any(not winners for winners in closest_at_each_corner):
        marks.may_generate_new_portal = True
    for winners in closest_at_each_corner:
        for i in winners:
            marks.confirmed_reachable[i] = True

    if _is_resolved(region, might_be_reachable, bool(always_in_range), marks):
        return

    for subregion in _split(dimension, region, candidates, might_be_reachable,
                            closest_at_each_corner, marks):
        _mark_reachable_portals(dimension, subregion, candidates, might_be_reachable, marks)


def _is_resolved(
    region: BlockRegion,
    might_be_reachable: List[int],
    covered: bool,
    marks: _Marks,
) -> bool:
    """Whether nothing left in *region* can change the result.

    Every possible winner must already be confirmed, and it must be settled
    whether some point lacks an in-range portal: either the flag is already
    set or some portal is in range of the whole region.
    """
    if region.is_single_block():
        return True
    if not all(marks.confirmed_reachable[i] for i in might_be_reachable):
        return False
    return marks.may_generate_new_portal or covered


def _split(
    dimension: Dimension,
    region: BlockRegion,
    candidates: Sequence[Portal],
    might_be_reachable: List[int],
    closest_at_each_corner: CornerWinners,
    marks: _Marks,
) -> List[BlockRegion]:
    """Partition *region* into smaller subregions that cover it exactly."""
    # Halve along an axis where opposite corners disagree. The end layers are
    # kept as their own subregions.
    for axis in ALL_AXES:
        bit = axis.corner_bit
        disagrees = any(
            closest_at_each_corner[c] != closest_at_each_corner[c | bit]
            for c in range(8)
            if not c & bit
        )
        if disagrees:
            layers = region.boundary_layers(axis)
            halves = [h for h in region.split_excluding_corners(axis) if h is not None]
            return [layers[0], *halves, *layers[1:]]

    # Split along a face of a portal that might still be reachable but has
    # not won at any corner yet.
    for i in might_be_reachable:
        if marks.confirmed_reachable[i]:
            continue
        portal_region = candidates[i].region
        for axis in ALL_AXES:
            for coordinate in (portal_region.min[axis] - 1, portal_region.max[axis]):
                lo, hi = region.split_at(axis, coordinate)
                if lo is not None and hi is not None:
                    return [lo, hi]

    # Split along the edge of a portal's search range so that each part is
    # either fully inside or fully outside of it.
    if not marks.may_generate_new_portal:
        r = dimension.portal_search_range
        for i in might_be_reachable:
            portal_region = candidates[i].region
            for axis in HORIZONTAL_AXES:
                for coordinate in (portal_region.min[axis] - r - 1, portal_region.max[axis] + r):
                    lo, hi = region.split_at(axis, coordinate)
                    if lo is not None and hi is not None:
                        return [lo, hi]

    axis = max(ALL_AXES, key=region.size)
    lo, hi = region.split_at(axis, region.min[axis] + (region.size(axis) - 1) // 2)
    return [half for half in (lo, hi) if half is not None]
