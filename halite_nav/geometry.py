"""Planar location helpers used by the navigation core."""

from __future__ import annotations

import math
from dataclasses import dataclass


def round_half_away(value: float) -> int:
    """Round to the nearest integer, pushing exact halves away from zero."""

    # //1.- Python's round() uses banker's rounding; headings must not depend on parity.
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def angle_rad_to_deg_clipped(angle_rad: float) -> int:
    """Convert radians into an integer heading within ``[0, 360)``."""

    degrees = round_half_away(math.degrees(angle_rad))
    # //2.- The modulo of a positive divisor is never negative in Python.
    return degrees % 360


def heading_deviation(a_deg: int, b_deg: int) -> int:
    """Return the smallest absolute angle between two headings in degrees."""

    delta = abs(a_deg - b_deg) % 360
    return min(delta, 360 - delta)


@dataclass(frozen=True)
class Location:
    """Immutable point in continuous field coordinates."""

    x: float
    y: float

    def distance_to(self, other: "Location") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def orient_towards_in_rad(self, other: "Location") -> float:
        """Bearing from this point towards ``other`` in radians."""

        return math.atan2(other.y - self.y, other.x - self.x)

    def orient_towards_in_deg(self, other: "Location") -> int:
        return angle_rad_to_deg_clipped(self.orient_towards_in_rad(other))

    def closest_point(self, target: "Location", target_radius: float, min_distance: float = 0.0) -> "Location":
        """Return the point on the circle around ``target`` that faces this location.

        The circle has radius ``target_radius + min_distance`` so callers can keep
        a stand-off distance from the target's surface.
        """

        radius = target_radius + min_distance
        angle = target.orient_towards_in_rad(self)
        return Location(target.x + radius * math.cos(angle), target.y + radius * math.sin(angle))

    def rotated_about(self, pivot: "Location", angle_rad: float) -> "Location":
        """Pivot this point about ``pivot`` by ``angle_rad`` keeping its distance."""

        distance = pivot.distance_to(self)
        heading = pivot.orient_towards_in_rad(self) + angle_rad
        return Location(pivot.x + math.cos(heading) * distance, pivot.y + math.sin(heading) * distance)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


__all__ = [
    "Location",
    "angle_rad_to_deg_clipped",
    "heading_deviation",
    "round_half_away",
]
