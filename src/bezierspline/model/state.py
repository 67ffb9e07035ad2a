"""
Editor State (Data Model)
=========================
This module defines the central data structure for the running editor.

Why is this file needed?
------------------------
1. State Management: It holds the curve, the active tool and the live
   interaction in one place. It is passed explicitly to the controller and the
   renderer; there is no module-level instance.
2. Legal states only: The tool and its transient interaction are a tagged
   union. A pen placement and a select drag cannot be live at the same time
   because the mode object can only carry one of them.

Classes:
    Idle, PlacingKnot: Pen mode sub-states.
    NoSelection, KnotSelected, ControlPointSelected: Select mode sub-states.
    PenMode, SelectMode: The two modes, each wrapping its sub-state.
    EditorState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
import logging
from typing import Optional, Union

from bezierspline.config import PLAYBACK_SPEED
from bezierspline.model.curve import Curve

logger = logging.getLogger(__name__)


class Tool(IntEnum):
    """The two editing tools, as exposed to the UI."""
    PEN = 0
    SELECT = 1


# ---- Pen sub-states ----

@dataclass(frozen=True)
class Idle:
    pass

@dataclass(frozen=True)
class PlacingKnot:
    knot_index: int


# ---- Select sub-states ----

@dataclass(frozen=True)
class NoSelection:
    pass

@dataclass(frozen=True)
class KnotSelected:
    knot_index: int

@dataclass(frozen=True)
class ControlPointSelected:
    knot_index: int
    handle_index: int


PenSubState = Union[Idle, PlacingKnot]
SelectSubState = Union[NoSelection, KnotSelected, ControlPointSelected]


@dataclass(frozen=True)
class PenMode:
    sub: PenSubState = Idle()

    tool = Tool.PEN


@dataclass(frozen=True)
class SelectMode:
    sub: SelectSubState = NoSelection()

    tool = Tool.SELECT


Mode = Union[PenMode, SelectMode]


@dataclass
class EditorState:
    """
    Holds everything the editor knows about the open curve.
    Pass this instance to the controller and the renderer.
    """
    curve: Curve = field(default_factory=Curve)
    mode: Mode = field(default_factory=PenMode)

    # Position along the spline in segment units, in [0, knot_count - 1).
    # Advanced every frame but not drawn.
    playback_u: float = 0.0

    @property
    def tool(self) -> Tool:
        return self.mode.tool

    @property
    def placing_index(self) -> Optional[int]:
        """Index of the knot being placed in pen mode, if any."""
        match self.mode:
            case PenMode(sub=PlacingKnot(knot_index=index)):
                return index
        return None

    @property
    def selection(self) -> SelectSubState:
        """Current selection; always NoSelection outside select mode."""
        if isinstance(self.mode, SelectMode):
            return self.mode.sub
        return NoSelection()

    def advance_playback(self, dt: float, speed: float = PLAYBACK_SPEED) -> None:
        """Move the playback cursor forward by `dt` seconds, wrapping at the last knot."""
        self.playback_u += dt * speed
        if self.playback_u >= self.curve.knot_count - 1:
            self.playback_u = 0.0

    def reset(self) -> None:
        """Empty curve, pen tool, cursor back at the start."""
        self.curve.clear()
        self.mode = PenMode()
        self.playback_u = 0.0
        logger.info("Editor state has been reset.")
