"""Angular search and dock-approach ranking tests."""
from __future__ import annotations

import math

import pytest

from halite_nav import Location, Move, MoveType, NavigationConfig, Navigator, order_dock_candidates

from conftest import make_map, make_planet, make_ship

ONE_DEGREE = math.pi / 180.0


@pytest.fixture
def navigator() -> Navigator:
    return Navigator(NavigationConfig(forecast_fudge_factor=0.5))


@pytest.fixture
def blocked_field(lone_ship):
    # //1.- A single planet sits squarely on the straight line to (10, 0).
    return make_map(ships=(lone_ship,), planets=(make_planet(1, 5.0, 0.0, 1.0),))


def test_zero_budget_always_gives_up(navigator, lone_ship) -> None:
    game_map = make_map(ships=(lone_ship,))
    move = navigator.navigate_towards(game_map, lone_ship, Location(10.0, 0.0), 7, True, 0, ONE_DEGREE)
    assert move == Move.noop()


def test_open_field_thrusts_straight_at_target(navigator, lone_ship) -> None:
    game_map = make_map(ships=(lone_ship,))
    move = navigator.navigate_towards(game_map, lone_ship, Location(30.0, 40.0), 7, True, 1, ONE_DEGREE)
    assert move.type is MoveType.THRUST
    assert move.ship_id == lone_ship.entity_id
    assert move.thrust == 7
    assert move.angle_deg == 53


def test_thrust_is_truncated_not_rounded(navigator, lone_ship) -> None:
    game_map = make_map(ships=(lone_ship,))
    move = navigator.navigate_towards(game_map, lone_ship, Location(7.8, 0.0), 10, True, 3, ONE_DEGREE)
    assert move.thrust == 7
    assert move.angle_deg == 0


def test_heading_is_clipped_for_southward_targets(navigator, lone_ship) -> None:
    game_map = make_map(ships=(lone_ship,))
    move = navigator.navigate_towards(game_map, lone_ship, Location(0.0, -5.0), 7, True, 1, ONE_DEGREE)
    assert move.angle_deg == 270
    assert move.thrust == 5


def test_disabled_avoidance_flies_through_obstacles(navigator, lone_ship, blocked_field) -> None:
    move = navigator.navigate_towards(blocked_field, lone_ship, Location(10.0, 0.0), 5, False, 1, ONE_DEGREE)
    assert move == Move.thrust_move(lone_ship.entity_id, 5, 0)


@pytest.mark.parametrize("step, heading", [(ONE_DEGREE, 18), (-ONE_DEGREE, 342)])
def test_blocked_path_rotates_until_clear(navigator, lone_ship, blocked_field, step, heading) -> None:
    move = navigator.navigate_towards(blocked_field, lone_ship, Location(10.0, 0.0), 5, True, 30, step)

    assert move.type is MoveType.THRUST
    assert move.thrust == 5
    assert move.angle_deg == heading
    # //2.- The chosen heading must clear the obstacle's inflated disk.
    course = math.radians(move.angle_deg)
    end = Location(10.0 * math.cos(course), 10.0 * math.sin(course))
    obstacle = blocked_field.planets[0]
    assert not navigator.detector.intersects(lone_ship.location, end, obstacle, 0.5)


def test_budget_counts_every_attempt(navigator, lone_ship, blocked_field) -> None:
    # //3.- Eighteen rotations are needed, so the nineteenth attempt is the first clear one.
    target = Location(10.0, 0.0)
    assert navigator.navigate_towards(blocked_field, lone_ship, target, 5, True, 18, ONE_DEGREE).is_noop
    cleared = navigator.navigate_towards(blocked_field, lone_ship, target, 5, True, 19, ONE_DEGREE)
    assert cleared.angle_deg == 18


@pytest.mark.parametrize("budget", [0, 5])
def test_exhausted_search_returns_noop(navigator, lone_ship, blocked_field, budget) -> None:
    move = navigator.navigate_towards(blocked_field, lone_ship, Location(10.0, 0.0), 5, True, budget, ONE_DEGREE)
    assert move.is_noop


def test_search_is_deterministic(navigator, lone_ship, blocked_field) -> None:
    results = {
        navigator.navigate_towards(blocked_field, lone_ship, Location(10.0, 0.0), 5, True, 30, ONE_DEGREE)
        for _ in range(3)
    }
    assert len(results) == 1


def test_order_prefers_heading_closest_to_ideal() -> None:
    west = Move.thrust_move(4, 7, 350)
    east = Move.thrust_move(4, 7, 10)
    assert order_dock_candidates(west, east, 5) == (east, west)
    assert order_dock_candidates(east, west, 5) == (east, west)


def test_order_promotes_the_only_valid_candidate() -> None:
    thrust = Move.thrust_move(4, 3, 90)
    assert order_dock_candidates(Move.noop(), thrust, 90) == (thrust, Move.noop())
    assert order_dock_candidates(thrust, Move.noop(), 90) == (thrust, Move.noop())
    assert order_dock_candidates(Move.noop(), Move.noop(), 0) == (Move.noop(), Move.noop())


def test_order_collapses_identical_courses() -> None:
    first = Move.thrust_move(4, 7, 12)
    second = Move.thrust_move(4, 7, 12)
    assert order_dock_candidates(first, second, 0) == (first, Move.noop())


def test_order_keeps_first_on_equal_deviation() -> None:
    left = Move.thrust_move(4, 7, 20)
    right = Move.thrust_move(4, 7, 340)
    assert order_dock_candidates(left, right, 0) == (left, right)


def test_dock_on_open_field_yields_single_move(lone_ship) -> None:
    navigator = Navigator()
    planet = make_planet(1, 20.0, 0.0, 3.0)
    game_map = make_map(ships=(lone_ship,), planets=(planet,))

    first, second = navigator.navigate_to_dock(game_map, lone_ship, planet, 7)

    # //4.- The aim point sits three units off the surface, at (14, 0).
    assert first == Move.thrust_move(lone_ship.entity_id, 7, 0)
    assert second.is_noop


def test_dock_prefers_the_smaller_detour(navigator, lone_ship) -> None:
    planet = make_planet(1, 20.0, 0.0, 3.0)
    # //5.- Sitting slightly north of the line, the rock is cheaper to pass on the south side.
    rock = make_planet(2, 5.0, 0.5, 1.0)
    game_map = make_map(ships=(lone_ship,), planets=(planet, rock))

    first, second = navigator.navigate_to_dock(game_map, lone_ship, planet, 7)

    assert first == Move.thrust_move(lone_ship.entity_id, 7, 348)
    assert second == Move.thrust_move(lone_ship.entity_id, 7, 24)


def test_dock_returns_noop_pair_when_boxed_in(lone_ship) -> None:
    navigator = Navigator(NavigationConfig(max_navigation_corrections=3))
    planet = make_planet(1, 20.0, 0.0, 3.0)
    wall = make_planet(2, 5.0, 0.0, 4.0)
    game_map = make_map(ships=(lone_ship,), planets=(planet, wall))

    assert navigator.navigate_to_dock(game_map, lone_ship, planet, 7) == (Move.noop(), Move.noop())
