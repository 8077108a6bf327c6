"""Immutable per-turn snapshot of every body on the field."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Mapping, Optional, Tuple

from .config import NavigationConfig
from .geometry import Location


class DockingStatus(Enum):
    """Docking lifecycle of a ship; only undocked ships may be navigated."""

    UNDOCKED = "undocked"
    DOCKING = "docking"
    DOCKED = "docked"
    UNDOCKING = "undocking"


# //1.- Capture the uniform capability every obstacle exposes to the collision code.
@dataclass(frozen=True)
class Entity:
    entity_id: int
    location: Location
    radius: float
    health: int = 0

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise ValueError(f"entity {self.entity_id} has a negative radius")


@dataclass(frozen=True)
class Ship(Entity):
    owner_id: int = 0
    docking_status: DockingStatus = DockingStatus.UNDOCKED
    docked_planet: Optional[int] = None

    @property
    def is_undocked(self) -> bool:
        return self.docking_status is DockingStatus.UNDOCKED

    def can_dock(self, planet: "Planet", config: NavigationConfig) -> bool:
        """Return ``True`` when the planet is within docking range of this ship."""

        reach = config.ship_radius + config.dock_radius + planet.radius
        return self.location.distance_to(planet.location) <= reach


@dataclass(frozen=True)
class Planet(Entity):
    owner_id: Optional[int] = None
    docking_spots: int = 0
    docked_ships: Tuple[int, ...] = ()

    @property
    def owned(self) -> bool:
        return self.owner_id is not None

    @property
    def is_full(self) -> bool:
        return len(self.docked_ships) >= self.docking_spots


@dataclass(frozen=True)
class GameMap:
    """Snapshot of the field supplied fresh each turn."""

    width: float
    height: float
    ships: Mapping[int, Tuple[Ship, ...]] = field(default_factory=dict)
    planets: Tuple[Planet, ...] = ()

    @property
    def player_ids(self) -> Tuple[int, ...]:
        return tuple(self.ships.keys())

    def ships_of(self, player_id: int) -> Tuple[Ship, ...]:
        return self.ships.get(player_id, ())

    def all_ships(self) -> Iterator[Ship]:
        for player_ships in self.ships.values():
            yield from player_ships

    def all_entities(self) -> Iterator[Entity]:
        """Yield planets first, then the ships of every player."""

        yield from self.planets
        yield from self.all_ships()

    def ship(self, entity_id: int) -> Ship:
        for candidate in self.all_ships():
            if candidate.entity_id == entity_id:
                return candidate
        raise KeyError(f"unknown ship {entity_id}")

    def planet(self, entity_id: int) -> Planet:
        for candidate in self.planets:
            if candidate.entity_id == entity_id:
                return candidate
        raise KeyError(f"unknown planet {entity_id}")


__all__ = ["DockingStatus", "Entity", "GameMap", "Planet", "Ship"]
