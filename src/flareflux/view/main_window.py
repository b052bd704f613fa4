"""
Main Application Window
=======================
The primary GUI container that holds the Menu Bar, the input row, the chart
and the summary panels.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects state changes to every view that shows a result.
"""
import logging

from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QSplitter
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction

from flareflux.config import APP_NAME
from flareflux.app.state import CalculatorState
from flareflux.model.inputs import FlareInputs
from flareflux.view.panels.input_panel import InputPanel
from flareflux.view.panels.calculation_panel import CalculationPanel
from flareflux.view.panels.safety_panel import SafetyPanel
from flareflux.view.widgets.flux_plot import FluxPlotWidget


logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, state: CalculatorState) -> None:
        super().__init__()
        self.state: CalculatorState = state

        self.setWindowTitle(APP_NAME)
        self.resize(1300, 800)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)

        main_layout = QVBoxLayout(main_widget)

        # --- 1. INPUTS ---
        self.input_panel = InputPanel(self.state)
        main_layout.addWidget(self.input_panel)

        # --- 2. SPLITTER (CONTENT AREA) ---
        splitter = QSplitter(Qt.Horizontal)
        main_layout.addWidget(splitter, stretch=1)

        # Left: Chart
        self.plot = FluxPlotWidget()
        splitter.addWidget(self.plot)

        # Right: Summary
        summary = QWidget()
        l_summary = QVBoxLayout(summary)
        l_summary.setContentsMargins(0, 0, 0, 0)
        self.calc_panel = CalculationPanel()
        self.safety_panel = SafetyPanel()
        l_summary.addWidget(self.calc_panel)
        l_summary.addWidget(self.safety_panel)
        splitter.addWidget(summary)

        splitter.setSizes([850, 450])

        # --- SIGNAL CONNECTIONS ---
        self.state.changed.connect(self.on_inputs_changed)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        # Initial Render
        self.update_views()

    def _create_actions(self) -> None:
        self.act_reset = QAction("Reset Inputs", self)
        self.act_reset.setShortcut("Ctrl+R")
        self.act_reset.triggered.connect(self.on_reset)

        self.act_export = QAction("Export Chart...", self)
        self.act_export.setShortcut("Ctrl+E")
        self.act_export.triggered.connect(self.plot.export_image)

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")
        file_menu.addAction(self.act_reset)
        file_menu.addSeparator()
        file_menu.addAction(self.act_export)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

    # --- SLOTS ---

    def on_inputs_changed(self, inputs: FlareInputs) -> None:
        """Slot called after every accepted input change."""
        self.update_views()

    def on_reset(self) -> None:
        self.state.reset()
        self.input_panel.load_from_state()

    def update_views(self) -> None:
        result = self.state.result
        self.plot.set_curve(result.curve)
        self.calc_panel.update_result(result)
        self.safety_panel.update_result(result)
