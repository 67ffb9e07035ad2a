"""
Curve Model
===========
This module defines the ordered collection of knots that make up the spline.

Why is this file needed?
------------------------
1. Topology: The order of the knots is load-bearing. Segment `i` is the cubic
   Bézier between knot `i` and knot `i + 1`, shaped by the two handles that
   face each other across the segment.
2. Bounded storage: The curve holds at most `capacity` knots. Knots are only
   ever appended, so indices handed out by `append_knot` stay valid until
   `clear()`.

Classes:
    ControlPoint: A tangent handle owned by a knot.
    Knot: An anchor point with its incoming and outgoing handles.
    Hit: Result of a selection hit-test.
    Curve: The knot sequence itself.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Iterator, Optional

from bezierspline.config import MAX_KNOTS, CONTROL_POINTS_PER_KNOT
from bezierspline.model.geometry_primitives import Vec2

logger = logging.getLogger(__name__)

INCOMING = 0
OUTGOING = 1

Segment = tuple[Vec2, Vec2, Vec2, Vec2]


@dataclass
class ControlPoint:
    """A tangent handle. Inactive handles are kept in storage but not drawn."""
    position: Vec2
    active: bool = True


@dataclass
class Knot:
    """An anchor the curve passes through; handle 0 is incoming, handle 1 outgoing."""
    position: Vec2
    control_points: tuple[ControlPoint, ControlPoint]

    @classmethod
    def at(cls, position: Vec2) -> Knot:
        """A knot with both handles sitting on the anchor, both active."""
        return cls(
            position=position.copy(),
            control_points=(ControlPoint(position.copy()), ControlPoint(position.copy())),
        )

    @property
    def incoming(self) -> ControlPoint:
        return self.control_points[INCOMING]

    @property
    def outgoing(self) -> ControlPoint:
        return self.control_points[OUTGOING]

    def handle(self, index: int) -> ControlPoint:
        if not 0 <= index < CONTROL_POINTS_PER_KNOT:
            raise IndexError(f"Handle index {index} out of range.")
        return self.control_points[index]

    def translate(self, delta: Vec2) -> None:
        """Rigidly move the knot together with both of its handles."""
        self.position = self.position + delta
        for cp in self.control_points:
            cp.position = cp.position + delta


@dataclass(frozen=True)
class Hit:
    """What the cursor landed on: a knot body (handle_index None) or one of its handles."""
    knot_index: int
    handle_index: Optional[int] = None

    @property
    def is_handle(self) -> bool:
        return self.handle_index is not None


@dataclass
class Curve:
    """
    Fixed-capacity, append-only sequence of knots.
    """
    capacity: int = MAX_KNOTS
    knots: list[Knot] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError(f"Curve capacity must be at least 1, got {self.capacity}.")
        if len(self.knots) > self.capacity:
            raise ValueError(f"{len(self.knots)} knots exceed capacity {self.capacity}.")

    def __len__(self) -> int:
        return len(self.knots)

    def __iter__(self) -> Iterator[Knot]:
        return iter(self.knots)

    @property
    def knot_count(self) -> int:
        return len(self.knots)

    @property
    def is_full(self) -> bool:
        return len(self.knots) >= self.capacity

    def knot(self, index: int) -> Knot:
        if not 0 <= index < len(self.knots):
            raise IndexError(f"Knot index {index} out of range [0, {len(self.knots)}).")
        return self.knots[index]

    def append_knot(self, position: Vec2) -> Optional[int]:
        """
        Append a knot at `position` with both handles on it and active.

        Returns:
            The new knot's index, or None when the curve is already full
            (the model is left untouched).
        """
        if self.is_full:
            logger.debug(f"Knot capacity ({self.capacity}) reached, ignoring new knot.")
            return None
        self.knots.append(Knot.at(position))
        return len(self.knots) - 1

    def segment_count(self) -> int:
        return max(len(self.knots) - 1, 0)

    def segment_control_points(self, index: int) -> Segment:
        """
        Control points (p0, p1, p2, p3) of segment `index`.

        Raises:
            IndexError: If `index` is not in [0, segment_count()).
        """
        if not 0 <= index < self.segment_count():
            raise IndexError(f"Segment index {index} out of range [0, {self.segment_count()}).")
        begin = self.knots[index]
        end = self.knots[index + 1]
        return (
            begin.position,
            begin.outgoing.position,
            end.incoming.position,
            end.position,
        )

    def segments(self) -> Iterator[Segment]:
        for i in range(self.segment_count()):
            yield self.segment_control_points(i)

    def clear(self) -> None:
        self.knots.clear()

    def hit_test(self, point: Vec2, radius: float) -> Optional[Hit]:
        """
        Find what lies under `point`.

        Knots are scanned in index order; within a knot its handles are tried
        first (incoming, then outgoing), then the knot body. The first match
        wins, so overlapping circles resolve to the lowest knot index and, within
        that knot, to a handle before the body.
        """
        for i, knot in enumerate(self.knots):
            for j, cp in enumerate(knot.control_points):
                if point.distance_to(cp.position) <= radius:
                    return Hit(knot_index=i, handle_index=j)
            if point.distance_to(knot.position) <= radius:
                return Hit(knot_index=i)
        return None
