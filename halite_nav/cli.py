"""Command line interface for planning moves against a stored snapshot."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from typing import Sequence, TextIO

from .config import NavigationConfig, load_config_from_env
from .entities import GameMap
from .navigation import Navigator
from .snapshot_io import SnapshotError, load_snapshot_from_file
from .strategy import describe_map, plan_turn

LOGGER = logging.getLogger(__name__)

EXIT_USAGE = 2


def create_parser() -> argparse.ArgumentParser:
    # //1.- Construct the top-level parser shared across tests and runtime execution.
    parser = argparse.ArgumentParser(description="Plan collision-free moves for a fleet snapshot")
    parser.add_argument("--max-speed", type=int, help="Thrust cap per move")
    parser.add_argument("--fudge", type=float, help="Extra clearance added to obstacle radii")
    parser.add_argument("--max-corrections", type=int, help="Aim-point rotations before giving up")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    commands = parser.add_subparsers(dest="command", required=True)

    plan = commands.add_parser("plan", help="Plan a whole turn for one player")
    plan.add_argument("snapshot", help="Path to a JSON snapshot")
    plan.add_argument("--player", type=int, required=True, help="Player id to plan for")

    navigate = commands.add_parser("navigate", help="Rank the dock approaches of one ship")
    navigate.add_argument("snapshot", help="Path to a JSON snapshot")
    navigate.add_argument("--ship", type=int, required=True, help="Ship id to steer")
    navigate.add_argument("--planet", type=int, required=True, help="Planet id to approach")
    return parser


def _resolve_config(args: argparse.Namespace) -> NavigationConfig:
    # //2.- Environment values form the base; explicit flags take precedence.
    config = load_config_from_env()
    overrides = {
        "max_speed": args.max_speed,
        "forecast_fudge_factor": args.fudge,
        "max_navigation_corrections": args.max_corrections,
    }
    return dataclasses.replace(config, **{key: value for key, value in overrides.items() if value is not None})


def _run_plan(game_map: GameMap, args: argparse.Namespace, navigator: Navigator, out: TextIO) -> None:
    LOGGER.info(describe_map(game_map, args.player))
    plan = plan_turn(game_map, args.player, navigator)
    for move in plan.moves:
        out.write(json.dumps(move.as_payload()) + "\n")


def _run_navigate(game_map: GameMap, args: argparse.Namespace, navigator: Navigator, out: TextIO) -> None:
    ship = game_map.ship(args.ship)
    planet = game_map.planet(args.planet)
    pair = navigator.navigate_to_dock(game_map, ship, planet, navigator.config.max_speed)
    out.write(json.dumps([move.as_payload() for move in pair]) + "\n")


def run(args: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    """Parse arguments, load the snapshot and print the resulting moves."""

    parser = create_parser()
    parsed = parser.parse_args(args)
    logging.basicConfig(level=parsed.log_level.upper(), format="[%(asctime)s] %(levelname)s %(message)s")
    stream = out if out is not None else sys.stdout
    # //3.- Report bad input on stderr with a usage exit code instead of a traceback.
    try:
        navigator = Navigator(_resolve_config(parsed))
        game_map = load_snapshot_from_file(parsed.snapshot)
        if parsed.command == "plan":
            _run_plan(game_map, parsed, navigator, stream)
        else:
            _run_navigate(game_map, parsed, navigator, stream)
    except (FileNotFoundError, SnapshotError, KeyError, ValueError) as exc:
        LOGGER.error("halite-nav failed: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE
    return 0


def main() -> int:
    """Console script entry point invoked via ``halite-nav``."""

    return run()


if __name__ == "__main__":  # pragma: no cover - exercised by manual runs
    sys.exit(main())
