"""Tests for the reachability resolver against the per-block reference scan."""

from __future__ import annotations

import logging
import random
from typing import List

import pytest

from netherlink.dimension import Dimension
from netherlink.geometry import BlockPos, BlockRegion
from netherlink.portal import ENDER_PEARL, PLAYER, Portal, PortalAxis
from netherlink.resolver import (
    PortalDestinations,
    minima_by_opt_key,
    naive_portal_destinations,
    resolve_portal_destinations,
)


# ── Helpers ──────────────────────────────────────────────────────────────


def _make_portal(
    min_xyz: tuple[int, int, int],
    max_xyz: tuple[int, int, int],
    axis: PortalAxis,
) -> Portal:
    return Portal(region=BlockRegion.from_corners(min_xyz, max_xyz), axis=axis)


def _random_portal(rng: random.Random, dimension: Dimension, spread: int) -> Portal:
    axis = rng.choice(list(PortalAxis))
    portal = Portal.new_minimal(
        BlockPos(
            x=rng.randint(-spread, spread),
            y=rng.randint(40, 90),
            z=rng.randint(-spread, spread),
        ),
        axis,
        dimension,
    )
    portal.adjust_width(rng.randint(2, 5))
    portal.adjust_height(rng.randint(3, 6), dimension)
    return portal


def _random_portals(
    rng: random.Random, dimension: Dimension, count: int, spread: int,
) -> List[Portal]:
    return [_random_portal(rng, dimension, spread) for _ in range(count)]


def _random_region(rng: random.Random, spread: int) -> BlockRegion:
    x, y, z = rng.randint(-spread, spread), rng.randint(50, 80), rng.randint(-spread, spread)
    return BlockRegion.from_corners(
        (x, y, z),
        (x + rng.randint(0, 10), y + rng.randint(0, 4), z + rng.randint(0, 10)),
    )


def _summary(result: PortalDestinations) -> tuple[frozenset[int], bool]:
    return result.portal_ids, result.new_portal


def _assert_matches_naive(
    candidates: List[Portal], dimension: Dimension, region: BlockRegion,
) -> PortalDestinations:
    expected = naive_portal_destinations(candidates, dimension, region)
    actual = resolve_portal_destinations(candidates, dimension, region)
    assert _summary(actual) == _summary(expected)
    return actual


# ── minima_by_opt_key ────────────────────────────────────────────────────


class TestMinimaByOptKey:

    def test_returns_all_ties_in_order(self):
        items = [
            ("a", 4), ("b", 2), ("c", 1), ("d", None), ("e", None),
            ("f", 3), ("g", 4), ("h", 1), ("i", 6),
        ]
        assert minima_by_opt_key(items, lambda item: item[1]) == [("c", 1), ("h", 1)]

    def test_all_none_gives_empty(self):
        assert minima_by_opt_key([1, 2, 3], lambda item: None) == []

    def test_empty_input(self):
        assert minima_by_opt_key([], lambda item: item) == []


# ── Boundaries ───────────────────────────────────────────────────────────


class TestBoundaries:

    @pytest.mark.parametrize("dimension", list(Dimension))
    def test_no_candidates_generates_new_portal(self, dimension):
        region = BlockRegion.from_corners((0, 64, 0), (5, 66, 5))
        result = resolve_portal_destinations([], dimension, region)
        assert result.existing_portals == ()
        assert result.new_portal is True

    def test_single_candidate_covering_region(self):
        portal = _make_portal((5, 64, 0), (5, 66, 1), PortalAxis.X)
        region = BlockRegion.from_corners((0, 64, 0), (3, 66, 3))
        result = resolve_portal_destinations([portal], Dimension.NETHER, region)
        assert result.existing_portals == (portal,)
        assert result.new_portal is False

    def test_single_block_out_of_range(self):
        portal = _make_portal((100, 64, 0), (100, 66, 1), PortalAxis.X)
        region = BlockRegion.from_corners((0, 64, 0), (0, 64, 0))
        result = resolve_portal_destinations([portal], Dimension.NETHER, region)
        assert result.existing_portals == ()
        assert result.new_portal is True

    def test_equidistant_portals_are_both_reported(self):
        east = _make_portal((5, 64, 0), (5, 66, 1), PortalAxis.X)
        west = _make_portal((-5, 64, 0), (-5, 66, 1), PortalAxis.X)
        region = BlockRegion.from_corners((0, 64, 0), (0, 64, 0))
        result = resolve_portal_destinations([east, west], Dimension.NETHER, region)
        assert result.existing_portals == (east, west)

    def test_result_preserves_candidate_order(self):
        far = _make_portal((10, 64, 0), (10, 66, 1), PortalAxis.X)
        near = _make_portal((-3, 64, 0), (-3, 66, 1), PortalAxis.X)
        region = BlockRegion.from_corners((-2, 64, 0), (9, 64, 0))
        result = _assert_matches_naive([far, near], Dimension.NETHER, region)
        assert result.existing_portals == (far, near)


# ── Regression scenario ──────────────────────────────────────────────────


class TestRegressionScenario:

    REGION = BlockRegion.from_corners((8, 64, 5), (8, 66, 18))

    def _candidates(self) -> List[Portal]:
        return [
            _make_portal((88, 60, -15), (90, 62, -15), PortalAxis.Z),
            _make_portal((0, 64, 0), (0, 66, 1), PortalAxis.X),
        ]

    def test_in_nether(self):
        candidates = self._candidates()
        result = _assert_matches_naive(candidates, Dimension.NETHER, self.REGION)
        # z = 18 is just outside the search range of the near portal.
        assert result.existing_portals == (candidates[1],)
        assert result.new_portal is True

    def test_in_overworld(self):
        candidates = self._candidates()
        result = _assert_matches_naive(candidates, Dimension.OVERWORLD, self.REGION)
        assert result.existing_portals == (candidates[1],)
        assert result.new_portal is False


# ── Properties ───────────────────────────────────────────────────────────


class TestEquivalenceToNaive:

    @pytest.mark.parametrize("seed", range(40))
    @pytest.mark.parametrize("dimension", list(Dimension))
    def test_random_regions(self, seed, dimension):
        rng = random.Random(seed)
        spread = dimension.portal_search_range * 2
        candidates = _random_portals(rng, dimension, rng.randint(0, 8), spread)
        _assert_matches_naive(candidates, dimension, _random_region(rng, spread))

    @pytest.mark.parametrize("seed", range(25))
    @pytest.mark.parametrize("destination", list(Dimension))
    @pytest.mark.parametrize("entity", [PLAYER, ENDER_PEARL], ids=["player", "ender_pearl"])
    def test_portal_destination_regions(self, seed, destination, entity):
        rng = random.Random(1000 + seed)
        source = _random_portal(rng, destination.other(), 20)
        region = source.destination_region(entity, destination)
        assert region is not None
        spread = destination.portal_search_range * 2
        candidates = _random_portals(rng, destination, rng.randint(1, 8), spread)
        _assert_matches_naive(candidates, destination, region)


class TestDeterminism:

    @pytest.mark.parametrize("seed", range(5))
    def test_same_input_same_output(self, seed):
        rng = random.Random(seed)
        candidates = _random_portals(rng, Dimension.NETHER, 6, 32)
        region = _random_region(rng, 32)
        first = resolve_portal_destinations(candidates, Dimension.NETHER, region)
        second = resolve_portal_destinations(candidates, Dimension.NETHER, region)
        assert first == second


class TestMonotonicity:

    @pytest.mark.parametrize("seed", range(15))
    def test_removing_non_winner_keeps_result(self, seed):
        rng = random.Random(seed)
        candidates = _random_portals(rng, Dimension.NETHER, 8, 32)
        region = _random_region(rng, 32)
        before = resolve_portal_destinations(candidates, Dimension.NETHER, region)
        for loser in [p for p in candidates if p.id not in before.portal_ids]:
            remaining = [p for p in candidates if p is not loser]
            after = resolve_portal_destinations(remaining, Dimension.NETHER, region)
            assert _summary(after) == _summary(before)


class TestLogging:

    def test_logs_step_count(self, caplog):
        region = BlockRegion.from_corners((0, 64, 0), (3, 64, 3))
        with caplog.at_level(logging.DEBUG, logger="netherlink.resolver"):
            resolve_portal_destinations([], Dimension.NETHER, region)
        assert any("step(s)" in record.getMessage() for record in caplog.records)
