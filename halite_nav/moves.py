"""Tagged move values produced for each ship every turn."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class MoveType(Enum):
    NOOP = "noop"
    THRUST = "thrust"
    DOCK = "dock"
    UNDOCK = "undock"


@dataclass(frozen=True)
class Move:
    """Single command for one ship; unused fields stay at their defaults."""

    type: MoveType
    ship_id: Optional[int] = None
    thrust: int = 0
    angle_deg: int = 0
    dock_to: Optional[int] = None

    @classmethod
    def noop(cls) -> "Move":
        return cls(MoveType.NOOP)

    @classmethod
    def thrust_move(cls, ship_id: int, thrust: int, angle_deg: int) -> "Move":
        """Build a thrust command, rejecting values that could not be sent as-is."""

        # //1.- Keep the integer-only wire invariants enforced at construction time.
        if thrust < 0:
            raise ValueError("thrust must be non-negative")
        if not 0 <= angle_deg < 360:
            raise ValueError("angle_deg must be within [0, 360)")
        return cls(MoveType.THRUST, ship_id=ship_id, thrust=int(thrust), angle_deg=int(angle_deg))

    @classmethod
    def dock(cls, ship_id: int, planet_id: int) -> "Move":
        return cls(MoveType.DOCK, ship_id=ship_id, dock_to=planet_id)

    @classmethod
    def undock(cls, ship_id: int) -> "Move":
        return cls(MoveType.UNDOCK, ship_id=ship_id)

    @property
    def is_noop(self) -> bool:
        return self.type is MoveType.NOOP

    def same_course(self, other: "Move") -> bool:
        """Return ``True`` when both moves request the same thrust and heading."""

        return self.thrust == other.thrust and self.angle_deg == other.angle_deg

    def as_payload(self) -> Dict[str, object]:
        """Render the move as a plain dictionary for logs and CLI output."""

        payload: Dict[str, object] = {"type": self.type.value}
        if self.type is MoveType.NOOP:
            return payload
        payload["ship_id"] = self.ship_id
        if self.type is MoveType.THRUST:
            payload["thrust"] = self.thrust
            payload["angle_deg"] = self.angle_deg
        elif self.type is MoveType.DOCK:
            payload["planet_id"] = self.dock_to
        return payload


__all__ = ["Move", "MoveType"]
