"""Segment versus inflated-disk obstruction checks.

The navigator asks, for every candidate straight-line path, which bodies on
the field would be crossed.  A body blocks a path when the distance from its
centre to the travel segment is no greater than its radius plus a clearance
margin (the fudge factor).  The body sitting on either end of the segment is
never considered: it is the travelling ship itself or the destination.
"""

from __future__ import annotations

from typing import List

import numpy as np

from .config import NavigationConfig
from .entities import Entity, GameMap
from .geometry import Location


def segment_distances(start: Location, target: Location, centers: np.ndarray) -> np.ndarray:
    """Distance from each row of ``centers`` to the segment ``start``-``target``.

    Parameters
    ----------
    start, target:
        End points of the travel segment.
    centers:
        ``(n, 2)`` array of obstacle centres.

    Returns
    -------
    numpy.ndarray
        ``(n,)`` array of closest-approach distances.
    """

    a = np.array(start.as_tuple(), dtype=float)
    ab = np.array(target.as_tuple(), dtype=float) - a
    ap = centers - a
    denom = float(np.dot(ab, ab))
    if denom == 0.0:
        # Start and target coincide; the segment degenerates into a point.
        return np.hypot(ap[:, 0], ap[:, 1])
    t = np.clip(ap @ ab / denom, 0.0, 1.0)
    offset = ap - np.outer(t, ab)
    return np.hypot(offset[:, 0], offset[:, 1])


class CollisionDetector:
    """Decide whether straight travel paths cross any body on the field."""

    def __init__(self, config: NavigationConfig | None = None) -> None:
        self._config = config or NavigationConfig()

    @property
    def config(self) -> NavigationConfig:
        return self._config

    def intersects(self, start: Location, target: Location, obstacle: Entity, fudge_factor: float) -> bool:
        """Return ``True`` when the segment crosses the obstacle's inflated disk."""

        # //1.- The path's own end points are the traveller and its destination.
        if obstacle.location == start or obstacle.location == target:
            return False
        center = np.array([obstacle.location.as_tuple()], dtype=float)
        distance = segment_distances(start, target, center)[0]
        return bool(distance <= obstacle.radius + fudge_factor)

    def find_blockers(self, game_map: GameMap, start: Location, target: Location) -> List[Entity]:
        """Collect every planet and ship whose inflated disk the segment crosses."""

        # //2.- Materialise the roster once so all centres are tested in one numpy pass.
        entities = list(game_map.all_entities())
        if not entities:
            return []
        centers = np.array([entity.location.as_tuple() for entity in entities], dtype=float)
        radii = np.array([entity.radius for entity in entities], dtype=float)
        distances = segment_distances(start, target, centers)
        blocked = distances <= radii + self._config.forecast_fudge_factor
        # //3.- Exact coordinate equality mirrors the scalar self-exclusion guard.
        at_start = (centers[:, 0] == start.x) & (centers[:, 1] == start.y)
        at_target = (centers[:, 0] == target.x) & (centers[:, 1] == target.y)
        mask = blocked & ~at_start & ~at_target
        return [entity for entity, hit in zip(entities, mask) if hit]


__all__ = ["CollisionDetector", "segment_distances"]
