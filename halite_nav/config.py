"""Tunable constants shared by the collision detector and the navigator."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass(frozen=True)
class NavigationConfig:
    """Resolved configuration describing how ships are steered each turn."""

    # //1.- Upper bound on the thrust magnitude a single move may request.
    max_speed: int = 7
    # //2.- Extra clearance added to every obstacle radius during path checks.
    forecast_fudge_factor: float = 0.6
    # //3.- Number of aim-point rotations attempted before giving up for the turn.
    max_navigation_corrections: int = 90
    # //4.- Magnitude of each aim-point rotation, one degree by default.
    angular_step_radians: float = math.pi / 180.0
    ship_radius: float = 0.5
    dock_radius: float = 4.0
    # //5.- Stand-off distance kept from a planet surface when approaching it.
    min_distance_for_closest_point: float = 3.0

    def __post_init__(self) -> None:
        if self.max_speed < 0:
            raise ValueError("max_speed must be non-negative")
        if self.forecast_fudge_factor < 0:
            raise ValueError("forecast_fudge_factor must be non-negative")
        if self.max_navigation_corrections < 0:
            raise ValueError("max_navigation_corrections must be non-negative")
        if not 0 < self.angular_step_radians < math.pi:
            raise ValueError("angular_step_radians must be in (0, pi)")
        if self.ship_radius < 0 or self.dock_radius < 0:
            raise ValueError("ship_radius and dock_radius must be non-negative")
        if self.min_distance_for_closest_point < 0:
            raise ValueError("min_distance_for_closest_point must be non-negative")


def load_config_from_env(env: Optional[Mapping[str, str]] = None) -> NavigationConfig:
    """Construct a :class:`NavigationConfig` instance from environment variables."""

    # //1.- Allow dependency injection during testing by accepting a custom mapping.
    source = env if env is not None else os.environ
    defaults = NavigationConfig()
    # //2.- Fall back to the game defaults so the bot works without extra configuration.
    step_deg = float(
        source.get("HALITE_NAV_ANGULAR_STEP_DEG", str(math.degrees(defaults.angular_step_radians)))
    )
    return NavigationConfig(
        max_speed=int(source.get("HALITE_NAV_MAX_SPEED", str(defaults.max_speed))),
        forecast_fudge_factor=float(
            source.get("HALITE_NAV_FUDGE_FACTOR", str(defaults.forecast_fudge_factor))
        ),
        max_navigation_corrections=int(
            source.get("HALITE_NAV_MAX_CORRECTIONS", str(defaults.max_navigation_corrections))
        ),
        angular_step_radians=math.radians(step_deg),
        ship_radius=float(source.get("HALITE_NAV_SHIP_RADIUS", str(defaults.ship_radius))),
        dock_radius=float(source.get("HALITE_NAV_DOCK_RADIUS", str(defaults.dock_radius))),
        min_distance_for_closest_point=float(
            source.get(
                "HALITE_NAV_CLOSEST_POINT_MARGIN", str(defaults.min_distance_for_closest_point)
            )
        ),
    )


__all__ = ["NavigationConfig", "load_config_from_env"]
