"""Per-turn planner that decides which ships dock and which ones travel."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from .entities import GameMap, Planet
from .moves import Move
from .navigation import MovePair, Navigator

LOGGER = logging.getLogger(__name__)


@dataclass
class TurnPlan:
    """Moves chosen for one turn plus the ranked thrust pairs behind them."""

    moves: List[Move] = field(default_factory=list)
    thrust_candidates: List[MovePair] = field(default_factory=list)


def describe_map(game_map: GameMap, player_id: int) -> str:
    """Summarise the snapshot in a single log-friendly line."""

    return (
        f"width: {game_map.width}; height: {game_map.height}; "
        f"players: {len(game_map.player_ids)}; "
        f"my ships: {len(game_map.ships_of(player_id))}; "
        f"planets: {len(game_map.planets)}"
    )


def _is_eligible(planet: Planet, player_id: int) -> bool:
    # Unowned planets are always open; owned ones only when ours and not full.
    if not planet.owned:
        return True
    return planet.owner_id == player_id and not planet.is_full


def plan_turn(game_map: GameMap, player_id: int, navigator: Navigator) -> TurnPlan:
    """Issue a dock or thrust move for each of the player's undocked ships."""

    config = navigator.config
    plan = TurnPlan()
    for ship in game_map.ships_of(player_id):
        if not ship.is_undocked:
            continue
        # //1.- Target the first planet in snapshot order that can still take the ship.
        planet = next((p for p in game_map.planets if _is_eligible(p, player_id)), None)
        if planet is None:
            continue
        if ship.can_dock(planet, config):
            LOGGER.debug("ship %s docking at planet %s", ship.entity_id, planet.entity_id)
            plan.moves.append(Move.dock(ship.entity_id, planet.entity_id))
            continue
        pair = navigator.navigate_to_dock(game_map, ship, planet, config.max_speed)
        if pair[0].is_noop:
            LOGGER.debug("ship %s holds position this turn", ship.entity_id)
            continue
        plan.thrust_candidates.append(pair)
    # //2.- Forward each ship's preferred move; cross-ship conflicts are not resolved yet.
    # TODO: fall back to pair[1] when a preferred thrust crosses another ship's path.
    plan.moves.extend(pair[0] for pair in plan.thrust_candidates)
    LOGGER.info(
        "player %s planned %d moves (%d thrust)", player_id, len(plan.moves), len(plan.thrust_candidates)
    )
    return plan


__all__ = ["TurnPlan", "describe_map", "plan_turn"]
