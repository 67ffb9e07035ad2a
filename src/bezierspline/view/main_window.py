"""
Main Application Window
=======================
The primary GUI container that holds the Toolbar, the Canvas and the Status Bar.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects the toolbar actions to the canvas and mirrors the
   canvas state (tool, knot count) back into the toolbar and status bar.
"""
from PySide6.QtCore import Slot
from PySide6.QtGui import QAction, QActionGroup
from PySide6.QtWidgets import QMainWindow, QToolBar, QLabel

from bezierspline.config import APP_NAME, WINDOW_WIDTH, WINDOW_HEIGHT, KEY_RESET, KEY_PEN, KEY_SELECT
from bezierspline.model.state import EditorState, Tool
from bezierspline.view.widgets.canvas import CanvasWidget


TOOL_LABELS = {
    Tool.PEN: "Pen",
    Tool.SELECT: "Select",
}


class MainWindow(QMainWindow):
    def __init__(self, state: EditorState) -> None:
        super().__init__()
        self.setWindowTitle(APP_NAME)
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)

        # --- CENTRAL: the canvas ---
        self.canvas = CanvasWidget(state, parent=self)
        self.setCentralWidget(self.canvas)

        # --- ACTIONS & TOOLBAR ---
        self._create_actions()
        self._create_toolbar()

        # --- STATUS BAR ---
        self.status_label = QLabel(self)
        self.statusBar().addPermanentWidget(self.status_label)

        # --- SIGNAL CONNECTIONS ---
        self.canvas.mode_changed.connect(self.on_mode_changed)
        self.canvas.curve_changed.connect(self.on_curve_changed)

        self.on_mode_changed(int(state.tool))
        self.canvas.setFocus()
        self.canvas.start()

    def _create_actions(self) -> None:
        # Keys are handled by the canvas itself; the labels only advertise them.
        self.act_pen = QAction(f"{TOOL_LABELS[Tool.PEN]} ({KEY_PEN})", self)
        self.act_pen.setCheckable(True)
        self.act_pen.triggered.connect(self.canvas.enter_pen)

        self.act_select = QAction(f"{TOOL_LABELS[Tool.SELECT]} ({KEY_SELECT})", self)
        self.act_select.setCheckable(True)
        self.act_select.triggered.connect(self.canvas.enter_select)

        self.tool_group = QActionGroup(self)
        self.tool_group.setExclusive(True)
        self.tool_group.addAction(self.act_pen)
        self.tool_group.addAction(self.act_select)

        self.act_clear = QAction(f"Clear ({KEY_RESET})", self)
        self.act_clear.triggered.connect(self.canvas.reset)

    def _create_toolbar(self) -> None:
        toolbar = QToolBar("Tools", self)
        toolbar.setMovable(False)
        toolbar.addAction(self.act_pen)
        toolbar.addAction(self.act_select)
        toolbar.addSeparator()
        toolbar.addAction(self.act_clear)
        self.addToolBar(toolbar)

    @Slot(int)
    def on_mode_changed(self, tool: int) -> None:
        action = self.act_pen if tool == Tool.PEN else self.act_select
        action.setChecked(True)
        self._update_status()
        self.canvas.setFocus()

    @Slot(int)
    def on_curve_changed(self, knot_count: int) -> None:
        self._update_status()

    def _update_status(self) -> None:
        state = self.canvas.state
        self.status_label.setText(
            f"{TOOL_LABELS[state.tool]} | knots: {state.curve.knot_count}/{state.curve.capacity}"
        )

    def closeEvent(self, event) -> None:
        self.canvas.stop()
        super().closeEvent(event)
