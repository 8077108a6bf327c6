"""Bounded angular search that turns a target point into a safe thrust.

The search aims straight at the target first.  While the straight path is
obstructed it pivots the aim point about the ship by a fixed angular step,
always in the same direction, until the path is clear or the correction
budget runs out.  Docking runs the search once per rotation direction and
ranks the two results so the caller receives a preferred move and a
fallback.
"""

from __future__ import annotations

import logging
import math
from typing import Tuple

from .collision import CollisionDetector
from .config import NavigationConfig
from .entities import Entity, GameMap, Ship
from .geometry import Location, angle_rad_to_deg_clipped, heading_deviation
from .moves import Move

LOGGER = logging.getLogger(__name__)

MovePair = Tuple[Move, Move]


def order_dock_candidates(first: Move, second: Move, ideal_heading: int) -> MovePair:
    """Rank two candidate moves for the same ship.

    Parameters
    ----------
    first, second:
        Results of the positive-step and negative-step searches.
    ideal_heading:
        Integer heading, in degrees, pointing straight at the aim point.

    Returns
    -------
    tuple
        ``(preferred, fallback)``.  A NOOP only leads when both candidates are
        NOOPs, and identical courses collapse into ``(move, NOOP)``.
    """

    # //1.- A single valid candidate always takes the preferred slot.
    if first.is_noop:
        return second, first
    if second.is_noop:
        return first, second
    # //2.- Two identical courses offer no distinct alternative.
    if first.same_course(second):
        return first, Move.noop()
    # //3.- Prefer the course closest to the ideal heading; ties keep the first run.
    if heading_deviation(second.angle_deg, ideal_heading) < heading_deviation(first.angle_deg, ideal_heading):
        return second, first
    return first, second


class Navigator:
    """Produce collision-free thrust commands for individual ships."""

    def __init__(self, config: NavigationConfig | None = None, detector: CollisionDetector | None = None) -> None:
        self._config = config or NavigationConfig()
        self._detector = detector or CollisionDetector(self._config)

    @property
    def config(self) -> NavigationConfig:
        return self._config

    @property
    def detector(self) -> CollisionDetector:
        return self._detector

    def navigate_towards(
        self,
        game_map: GameMap,
        ship: Ship,
        target: Location,
        max_thrust: int,
        avoid_obstacles: bool,
        max_corrections: int,
        angular_step_rad: float,
    ) -> Move:
        """Steer ``ship`` towards ``target``, rotating the aim point around blockers.

        Returns a NOOP when ``max_corrections`` attempts all found the path
        obstructed; that is the expected outcome under congestion.
        """

        aim = target
        for _ in range(max(max_corrections, 0)):
            # //1.- Measure the straight path to the current aim point.
            distance = ship.location.distance_to(aim)
            angle_rad = ship.location.orient_towards_in_rad(aim)
            if avoid_obstacles and self._detector.find_blockers(game_map, ship.location, aim):
                # //2.- Pivot the aim point about the ship, keeping the same distance.
                aim = aim.rotated_about(ship.location, angular_step_rad)
                continue
            # //3.- Truncate the distance; overshooting may land inside the margin.
            thrust = min(int(max_thrust), int(math.floor(distance)))
            return Move.thrust_move(ship.entity_id, thrust, angle_rad_to_deg_clipped(angle_rad))
        LOGGER.debug(
            "ship %s found no clear heading within %d corrections", ship.entity_id, max_corrections
        )
        return Move.noop()

    def navigate_to_dock(self, game_map: GameMap, ship: Ship, dock_target: Entity, max_thrust: int) -> MovePair:
        """Search both rotation directions towards ``dock_target`` and rank the results."""

        config = self._config
        target = ship.location.closest_point(
            dock_target.location, dock_target.radius, config.min_distance_for_closest_point
        )
        step = config.angular_step_radians
        # //4.- Two independent searches, one per rotation direction.
        move_first = self.navigate_towards(
            game_map, ship, target, max_thrust, True, config.max_navigation_corrections, step
        )
        move_second = self.navigate_towards(
            game_map, ship, target, max_thrust, True, config.max_navigation_corrections, -step
        )
        ideal_heading = ship.location.orient_towards_in_deg(target)
        return order_dock_candidates(move_first, move_second, ideal_heading)


__all__ = ["MovePair", "Navigator", "order_dock_candidates"]
