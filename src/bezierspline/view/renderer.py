"""
Renderer Adapter
================
Turns an `EditorState` into draw calls on an abstract drawing surface.

Why is this file needed?
------------------------
1. Decoupling: The draw order and styling live here, free of any GUI toolkit.
   The Qt canvas only has to implement four primitives (`Surface`), and tests
   can record the calls with a fake surface.
2. Draw order: curve first, then handle lines, then knot and handle circles,
   so the circles stay grabbable on top of everything else.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, TYPE_CHECKING

import numpy as np

from bezierspline.config import (
    BACKGROUND_COLOR, CURVE_COLOR, KNOT_COLOR, HANDLE_COLOR,
    KNOT_RADIUS, CONTROL_POINT_RADIUS, HANDLE_LINE_WIDTH, SAMPLE_STEP,
)
from bezierspline.model.bezier import sample_segment
from bezierspline.model.geometry_primitives import Vec2
from bezierspline.model.state import EditorState

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def from_hex(cls, rgb: int, alpha: int = 255) -> Color:
        return cls((rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF, alpha)


class Surface(Protocol):
    """Drawing primitives provided by the rendering backend."""
    def clear(self, color: Color) -> None: ...
    def draw_circle(self, center: Vec2, radius: float, color: Color) -> None: ...
    def draw_line(self, start: Vec2, end: Vec2, width: float, color: Color) -> None: ...
    def draw_polyline(self, points: npt.NDArray[np.float64], color: Color) -> None: ...


@dataclass(frozen=True)
class Style:
    background: Color = field(default_factory=lambda: Color.from_hex(BACKGROUND_COLOR))
    curve: Color = field(default_factory=lambda: Color.from_hex(CURVE_COLOR))
    knot: Color = field(default_factory=lambda: Color.from_hex(KNOT_COLOR))
    handle: Color = field(default_factory=lambda: Color.from_hex(HANDLE_COLOR))
    knot_radius: float = KNOT_RADIUS
    handle_radius: float = CONTROL_POINT_RADIUS
    handle_width: float = HANDLE_LINE_WIDTH
    step: float = SAMPLE_STEP


def render(surface: Surface, state: EditorState, style: Style = Style()) -> None:
    """Draw one frame of the editor onto `surface`."""
    curve = state.curve
    surface.clear(style.background)

    for p0, p1, p2, p3 in curve.segments():
        surface.draw_polyline(sample_segment(p0, p1, p2, p3, style.step), style.curve)

    for knot in curve:
        for cp in knot.control_points:
            if cp.active:
                surface.draw_line(knot.position, cp.position, style.handle_width, style.handle)

    for knot in curve:
        surface.draw_circle(knot.position, style.knot_radius, style.knot)
        for cp in knot.control_points:
            if cp.active:
                surface.draw_circle(cp.position, style.handle_radius, style.handle)
