"""
Edit Controller
===============
The pen/select state machine that turns pointer and key events into curve edits.

Why is this file needed?
------------------------
1. Interpretation: The same pointer-down means "add a knot" in pen mode and
   "pick something up" in select mode. This class decides which, based on the
   mode stored in `EditorState`.
2. Invariants: It is the only writer of handle activity flags, so it is where
   the "first knot has no incoming handle, only shared sides are visible" rules
   are kept.

Each handler returns True when the event changed the state, False when it was
absorbed as a no-op (malformed sequence, full curve, nothing under the cursor).
"""
from __future__ import annotations

import logging

from bezierspline.config import KNOT_RADIUS
from bezierspline.model.bezier import reflect
from bezierspline.model.geometry_primitives import Vec2
from bezierspline.model.state import (
    EditorState, PenMode, SelectMode, Idle, PlacingKnot,
    NoSelection, KnotSelected, ControlPointSelected,
)

logger = logging.getLogger(__name__)


class EditController:
    def __init__(self, state: EditorState, hit_radius: float = KNOT_RADIUS) -> None:
        self.state = state
        self.hit_radius = hit_radius

    # ------------------------------------------------------------------------------
    # Mode / reset events
    # ------------------------------------------------------------------------------

    def reset(self) -> bool:
        self.state.reset()
        return True

    def enter_pen(self) -> bool:
        if isinstance(self.state.mode, PenMode):
            return False
        # a select drag in flight is dropped, nothing to finalize
        self.state.mode = PenMode()
        logger.info("Switched to pen mode.")
        return True

    def enter_select(self) -> bool:
        if isinstance(self.state.mode, SelectMode):
            return False
        index = self.state.placing_index
        if index is not None:
            self._finalize_knot(index)
        self.state.mode = SelectMode()
        logger.info("Switched to select mode.")
        return True

    # ------------------------------------------------------------------------------
    # Pointer events
    # ------------------------------------------------------------------------------

    def pointer_down(self, pos: Vec2) -> bool:
        match self.state.mode:
            case PenMode(sub=Idle()):
                return self._begin_knot(pos)
            case SelectMode(sub=NoSelection()):
                return self._select_at(pos)
        return False

    def pointer_move(self, pos: Vec2) -> bool:
        match self.state.mode:
            case PenMode(sub=PlacingKnot(knot_index=index)):
                self._drag_tangent(index, pos)
                return True
            case SelectMode(sub=KnotSelected(knot_index=index)):
                knot = self.state.curve.knot(index)
                knot.translate(pos - knot.position)
                return True
            case SelectMode(sub=ControlPointSelected(knot_index=index, handle_index=handle)):
                self.state.curve.knot(index).handle(handle).position = pos.copy()
                return True
        return False

    def pointer_up(self, pos: Vec2) -> bool:
        match self.state.mode:
            case PenMode(sub=PlacingKnot(knot_index=index)):
                self._drag_tangent(index, pos)
                self._finalize_knot(index)
                self.state.mode = PenMode(Idle())
                return True
            case SelectMode(sub=KnotSelected() | ControlPointSelected()):
                self.state.mode = SelectMode(NoSelection())
                return True
        return False

    def tick(self, dt: float) -> None:
        """Per-frame update; only the playback cursor depends on time."""
        self.state.advance_playback(dt)

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _begin_knot(self, pos: Vec2) -> bool:
        index = self.state.curve.append_knot(pos)
        if index is None:
            return False
        knot = self.state.curve.knot(index)
        for cp in knot.control_points:
            cp.active = True
        self.state.mode = PenMode(PlacingKnot(index))
        logger.debug(f"Placing knot {index} at ({pos.x:g}, {pos.y:g}).")
        return True

    def _drag_tangent(self, index: int, pos: Vec2) -> None:
        """Outgoing handle follows the cursor, incoming handle mirrors it through the knot."""
        knot = self.state.curve.knot(index)
        knot.outgoing.position = pos.copy()
        knot.incoming.position = reflect(pos, knot.position)

    def _finalize_knot(self, index: int) -> None:
        """Show only the handles that face a neighbouring knot."""
        knot = self.state.curve.knot(index)
        knot.outgoing.active = False
        knot.incoming.active = index > 0
        if index > 0:
            self.state.curve.knot(index - 1).outgoing.active = True

    def _select_at(self, pos: Vec2) -> bool:
        hit = self.state.curve.hit_test(pos, self.hit_radius)
        if hit is None:
            return False
        if hit.is_handle:
            self.state.mode = SelectMode(ControlPointSelected(hit.knot_index, hit.handle_index))
        else:
            self.state.mode = SelectMode(KnotSelected(hit.knot_index))
        logger.debug(f"Selected {hit}.")
        return True
