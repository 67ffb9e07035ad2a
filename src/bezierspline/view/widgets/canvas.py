"""
Editor Canvas (Qt Backend)
==========================
The QWidget the spline is edited on.

Why is this file needed?
------------------------
1. Input: It translates Qt mouse and key events into `EditController` events.
2. Frame loop: A QTimer ticks the controller at a fixed rate with the measured
   frame time and schedules a repaint.
3. Drawing: `QPainterSurface` implements the renderer's `Surface` primitives on
   top of QPainter, so `render()` stays toolkit-free.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
from PySide6.QtCore import Qt, QTimer, QElapsedTimer, QPointF, QRect, Signal
from PySide6.QtGui import QPainter, QPen, QColor, QPolygonF, QMouseEvent, QKeyEvent, QPaintEvent
from PySide6.QtWidgets import QWidget

from bezierspline.config import TARGET_FPS, KEY_RESET, KEY_PEN, KEY_SELECT
from bezierspline.controller.editor import EditController
from bezierspline.model.geometry_primitives import Vec2
from bezierspline.model.state import EditorState
from bezierspline.view.renderer import Color, render

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def _qcolor(color: Color) -> QColor:
    return QColor(color.r, color.g, color.b, color.a)


def _qpoint(p: Vec2) -> QPointF:
    return QPointF(p.x, p.y)


class QPainterSurface:
    """`Surface` implementation drawing with an active QPainter."""
    def __init__(self, painter: QPainter, rect: QRect) -> None:
        self.painter = painter
        self.rect = rect

    def clear(self, color: Color) -> None:
        self.painter.fillRect(self.rect, _qcolor(color))

    def draw_circle(self, center: Vec2, radius: float, color: Color) -> None:
        self.painter.setPen(Qt.PenStyle.NoPen)
        self.painter.setBrush(_qcolor(color))
        self.painter.drawEllipse(_qpoint(center), radius, radius)

    def draw_line(self, start: Vec2, end: Vec2, width: float, color: Color) -> None:
        self.painter.setPen(QPen(_qcolor(color), width))
        self.painter.setBrush(Qt.BrushStyle.NoBrush)
        self.painter.drawLine(_qpoint(start), _qpoint(end))

    def draw_polyline(self, points: npt.NDArray[np.float64], color: Color) -> None:
        self.painter.setPen(QPen(_qcolor(color), 1.0))
        self.painter.setBrush(Qt.BrushStyle.NoBrush)
        self.painter.drawPolyline(QPolygonF([QPointF(float(x), float(y)) for x, y in points]))


class CanvasWidget(QWidget):
    """Interactive spline canvas: owns the controller and drives the frame loop."""
    mode_changed = Signal(int)
    curve_changed = Signal(int)

    def __init__(self, state: EditorState | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.state = state or EditorState()
        self.controller = EditController(self.state)

        self._key_actions = {
            KEY_RESET.upper(): self.reset,
            KEY_PEN.upper(): self.enter_pen,
            KEY_SELECT.upper(): self.enter_select,
        }

        # pen drags need move events between press and release
        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        self._clock = QElapsedTimer()
        self._frame_timer = QTimer(self)
        self._frame_timer.setInterval(max(1, round(1000 / TARGET_FPS)))
        self._frame_timer.timeout.connect(self._on_frame)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def start(self) -> None:
        """Start the frame loop."""
        self._clock.start()
        self._frame_timer.start()
        logger.debug(f"Frame loop started at {TARGET_FPS} FPS.")

    def stop(self) -> None:
        self._frame_timer.stop()

    def reset(self) -> None:
        self.controller.reset()
        self._notify(mode=True, curve=True)

    def enter_pen(self) -> None:
        if self.controller.enter_pen():
            self._notify(mode=True)

    def enter_select(self) -> None:
        if self.controller.enter_select():
            self._notify(mode=True)

    # ------------------------------------------------------------------------------
    # Qt event handlers
    # ------------------------------------------------------------------------------

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)
        count = self.state.curve.knot_count
        if self.controller.pointer_down(self._cursor(event)):
            self._notify(curve=self.state.curve.knot_count != count)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        if self.controller.pointer_move(self._cursor(event)):
            self.update()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            return super().mouseReleaseEvent(event)
        if self.controller.pointer_up(self._cursor(event)):
            self.update()

    def keyPressEvent(self, event: QKeyEvent) -> None:
        action = self._key_actions.get(event.text().upper())
        if action is None or event.isAutoRepeat():
            return super().keyPressEvent(event)
        action()

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            render(QPainterSurface(painter, self.rect()), self.state)
        finally:
            painter.end()

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    @staticmethod
    def _cursor(event: QMouseEvent) -> Vec2:
        pos = event.position()
        return Vec2(pos.x(), pos.y())

    def _on_frame(self) -> None:
        dt = self._clock.restart() / 1000.0
        self.controller.tick(dt)
        self.update()

    def _notify(self, mode: bool = False, curve: bool = False) -> None:
        if mode:
            self.mode_changed.emit(int(self.state.tool))
        if curve:
            self.curve_changed.emit(self.state.curve.knot_count)
        self.update()
