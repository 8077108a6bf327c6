"""Load per-turn field snapshots from JSON documents.

A snapshot has the shape::

    {
        "width": 240, "height": 160,
        "players": {"0": [{"id": 0, "x": 10, "y": 12}, ...]},
        "planets": [{"id": 3, "x": 50, "y": 40, "radius": 6,
                     "owner": null, "docking_spots": 3, "docked_ships": []}]
    }

Values are coerced to their numeric types and validated; any problem raises
:class:`SnapshotError` naming the offending entry.
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple

from .entities import DockingStatus, GameMap, Planet, Ship
from .geometry import Location

DEFAULT_SHIP_RADIUS = 0.5


class SnapshotError(ValueError):
    """Raised when a snapshot document cannot be turned into a :class:`GameMap`."""


def _ensure_finite(value: Any, label: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise SnapshotError(f"{label} is not numeric: {value!r}") from None
    if not math.isfinite(number):
        raise SnapshotError(f"{label} is not finite: {value!r}")
    return number


def _ensure_int(value: Any, label: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise SnapshotError(f"{label} is not an integer: {value!r}") from None


def _require(entry: Mapping[str, Any], key: str, label: str) -> Any:
    if not isinstance(entry, Mapping):
        raise SnapshotError(f"{label} must be an object")
    try:
        return entry[key]
    except KeyError:
        raise SnapshotError(f"{label} is missing '{key}'") from None


def _radius(entry: Mapping[str, Any], label: str, default: float | None = None) -> float:
    raw = entry.get("radius", default) if default is not None else _require(entry, "radius", label)
    radius = _ensure_finite(raw, f"{label} radius")
    if radius < 0:
        raise SnapshotError(f"{label} radius must be non-negative")
    return radius


def _coerce_ship(entry: Mapping[str, Any], owner_id: int, label: str) -> Ship:
    entity_id = _ensure_int(_require(entry, "id", label), f"{label} id")
    location = Location(
        _ensure_finite(_require(entry, "x", label), f"{label} x"),
        _ensure_finite(_require(entry, "y", label), f"{label} y"),
    )
    raw_status = entry.get("docking_status", DockingStatus.UNDOCKED.value)
    try:
        status = DockingStatus(str(raw_status).lower())
    except ValueError:
        raise SnapshotError(f"{label} has unknown docking status {raw_status!r}") from None
    docked_planet = entry.get("docked_planet")
    return Ship(
        entity_id=entity_id,
        location=location,
        radius=_radius(entry, label, DEFAULT_SHIP_RADIUS),
        health=_ensure_int(entry.get("health", 0), f"{label} health"),
        owner_id=owner_id,
        docking_status=status,
        docked_planet=None if docked_planet is None else _ensure_int(docked_planet, f"{label} docked_planet"),
    )


def _coerce_planet(entry: Mapping[str, Any], label: str) -> Planet:
    entity_id = _ensure_int(_require(entry, "id", label), f"{label} id")
    location = Location(
        _ensure_finite(_require(entry, "x", label), f"{label} x"),
        _ensure_finite(_require(entry, "y", label), f"{label} y"),
    )
    owner = entry.get("owner")
    docked = entry.get("docked_ships", [])
    if not isinstance(docked, list):
        raise SnapshotError(f"{label} docked_ships must be a list")
    return Planet(
        entity_id=entity_id,
        location=location,
        radius=_radius(entry, label),
        health=_ensure_int(entry.get("health", 0), f"{label} health"),
        owner_id=None if owner is None else _ensure_int(owner, f"{label} owner"),
        docking_spots=_ensure_int(entry.get("docking_spots", 0), f"{label} docking_spots"),
        docked_ships=tuple(_ensure_int(ship_id, f"{label} docked ship") for ship_id in docked),
    )


def snapshot_from_mapping(data: Any, source: str = "snapshot") -> GameMap:
    """Build a :class:`GameMap` from already decoded JSON data."""

    if not isinstance(data, Mapping):
        raise SnapshotError(f"{source} must contain an object, got {type(data).__name__}")
    width = _ensure_finite(_require(data, "width", source), f"{source} width")
    height = _ensure_finite(_require(data, "height", source), f"{source} height")

    players = data.get("players", {})
    if not isinstance(players, Mapping):
        raise SnapshotError(f"{source} players must be an object keyed by player id")
    ships: Dict[int, Tuple[Ship, ...]] = {}
    for raw_player, raw_ships in players.items():
        player_id = _ensure_int(raw_player, f"{source} player id")
        if not isinstance(raw_ships, list):
            raise SnapshotError(f"{source} ships of player {player_id} must be a list")
        ships[player_id] = tuple(
            _coerce_ship(entry, player_id, f"{source} player {player_id} ship {index}")
            for index, entry in enumerate(raw_ships)
        )

    raw_planets = data.get("planets", [])
    if not isinstance(raw_planets, list):
        raise SnapshotError(f"{source} planets must be a list")
    planets: List[Planet] = [
        _coerce_planet(entry, f"{source} planet {index}") for index, entry in enumerate(raw_planets)
    ]
    return GameMap(width=width, height=height, ships=ships, planets=tuple(planets))


def load_snapshot_from_file(path_like: Any) -> GameMap:
    """Load and validate a snapshot stored as JSON."""

    path = Path(path_like)
    if not path.exists():
        raise FileNotFoundError(f"Snapshot file '{path}' does not exist")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"Snapshot file '{path}' is not valid JSON: {exc}") from exc
    return snapshot_from_mapping(data, source=f"'{path}'")


__all__ = ["SnapshotError", "load_snapshot_from_file", "snapshot_from_mapping"]
