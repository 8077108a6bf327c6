"""Pytest configuration and shared builders for the navigation tests."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# //1.- Ensure repository root is available on the Python path for package imports.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from halite_nav import DockingStatus, GameMap, Location, Planet, Ship  # noqa: E402


def make_ship(
    entity_id: int,
    x: float,
    y: float,
    *,
    owner_id: int = 0,
    radius: float = 0.5,
    status: DockingStatus = DockingStatus.UNDOCKED,
) -> Ship:
    return Ship(
        entity_id=entity_id,
        location=Location(x, y),
        radius=radius,
        owner_id=owner_id,
        docking_status=status,
    )


def make_planet(
    entity_id: int,
    x: float,
    y: float,
    radius: float,
    *,
    owner_id: int | None = None,
    docking_spots: int = 2,
    docked_ships: tuple[int, ...] = (),
) -> Planet:
    return Planet(
        entity_id=entity_id,
        location=Location(x, y),
        radius=radius,
        owner_id=owner_id,
        docking_spots=docking_spots,
        docked_ships=docked_ships,
    )


def make_map(ships: tuple[Ship, ...] = (), planets: tuple[Planet, ...] = ()) -> GameMap:
    # //2.- Group ships by owner the same way the snapshot loader does.
    grouped: dict[int, tuple[Ship, ...]] = {}
    for ship in ships:
        grouped[ship.owner_id] = grouped.get(ship.owner_id, ()) + (ship,)
    return GameMap(width=240.0, height=160.0, ships=grouped, planets=planets)


@pytest.fixture
def lone_ship() -> Ship:
    return make_ship(0, 0.0, 0.0)
