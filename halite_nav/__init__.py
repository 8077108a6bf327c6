"""Navigation and collision-avoidance core for a turn-based fleet bot."""

from .collision import CollisionDetector, segment_distances
from .config import NavigationConfig, load_config_from_env
from .entities import DockingStatus, Entity, GameMap, Planet, Ship
from .geometry import Location, angle_rad_to_deg_clipped, heading_deviation
from .moves import Move, MoveType
from .navigation import MovePair, Navigator, order_dock_candidates
from .snapshot_io import SnapshotError, load_snapshot_from_file, snapshot_from_mapping
from .strategy import TurnPlan, describe_map, plan_turn

__all__ = [
    "CollisionDetector",
    "DockingStatus",
    "Entity",
    "GameMap",
    "Location",
    "Move",
    "MovePair",
    "MoveType",
    "NavigationConfig",
    "Navigator",
    "Planet",
    "Ship",
    "SnapshotError",
    "TurnPlan",
    "angle_rad_to_deg_clipped",
    "describe_map",
    "heading_deviation",
    "load_config_from_env",
    "load_snapshot_from_file",
    "order_dock_candidates",
    "plan_turn",
    "segment_distances",
    "snapshot_from_mapping",
]
