"""Chart of radiative heat flux versus distance."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import pyqtgraph as pg
from pyqtgraph.exporters import ImageExporter, SVGExporter
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFileDialog, QMessageBox, QVBoxLayout, QWidget

from flareflux.config import SWEEP_START_M, SWEEP_STOP_M
from flareflux.model.thresholds import SAFETY_THRESHOLDS

if TYPE_CHECKING:
    from flareflux.model.results import FluxCurve


logger = logging.getLogger(__name__)


class FluxPlotWidget(QWidget):
    """Flux curve with one dashed horizontal line per safety threshold and a hover readout."""

    CURVE_COLOR = '#8884d8'

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.curve: Optional[FluxCurve] = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.plot_widget = pg.PlotWidget()
        self.plot_widget.setBackground('w')
        self.plot_widget.showGrid(x=True, y=True, alpha=0.3)
        self.plot_widget.setLabel('bottom', 'Distance (m)', color='black')
        self.plot_widget.setLabel('left', 'Heat Flux (kW/m²)', color='black')
        self.plot_widget.setTitle('Radiative Heat Flux', color='black', size='14pt')
        self.plot_widget.getAxis('bottom').setPen('k')
        self.plot_widget.getAxis('left').setPen('k')
        self.plot_widget.getAxis('bottom').setTextPen('k')
        self.plot_widget.getAxis('left').setTextPen('k')
        self.plot_widget.setXRange(SWEEP_START_M, SWEEP_STOP_M, padding=0)
        self.plot_widget.addLegend(offset=(-10, 10))

        layout.addWidget(self.plot_widget)

        self.curve_item = self.plot_widget.plot(
            [], [],
            pen=pg.mkPen(color=self.CURVE_COLOR, width=2),
            name="Heat Flux",
        )

        # Thresholds are drawn as plot items (not InfiniteLines) so they appear in the legend
        for threshold in SAFETY_THRESHOLDS.values():
            self.plot_widget.plot(
                [SWEEP_START_M, SWEEP_STOP_M], [threshold.flux, threshold.flux],
                pen=pg.mkPen(color=threshold.color, width=2, style=Qt.DashLine),
                name=threshold.legend_label,
            )

        self._build_hover()

    def _build_hover(self) -> None:
        """Vertical crosshair, marker and label that follow the nearest sample under the cursor."""
        self.hover_line = pg.InfiniteLine(
            angle=90, movable=False,
            pen=pg.mkPen(color='gray', width=1, style=Qt.DotLine),
        )
        self.hover_marker = pg.ScatterPlotItem(size=8, brush=pg.mkBrush(self.CURVE_COLOR), pen=None)
        self.hover_label = pg.TextItem(
            '', color='k', anchor=(0, 1),
            fill=pg.mkBrush(255, 255, 255, 200), border=pg.mkPen('gray'),
        )
        for item in (self.hover_line, self.hover_marker, self.hover_label):
            # Keep the overlay out of auto-range and the legend
            self.plot_widget.addItem(item, ignoreBounds=True)
            item.setVisible(False)

        self.mouse_proxy = pg.SignalProxy(
            self.plot_widget.scene().sigMouseMoved, rateLimit=60, slot=self._on_mouse_moved
        )

    def _on_mouse_moved(self, event) -> None:
        pos = event[0]
        view_box = self.plot_widget.plotItem.vb
        if self.curve is None or not self.plot_widget.sceneBoundingRect().contains(pos):
            self._set_hover_visible(False)
            return

        point = view_box.mapSceneToView(pos)
        sample = self.curve.nearest(point.x())

        self.hover_line.setPos(sample.distance)
        self.hover_marker.setData([sample.distance], [sample.heat_flux])
        self.hover_label.setText(f"Distance: {sample.distance:g} m\nHeat Flux: {sample.heat_flux:.4f} kW/m²")
        self.hover_label.setPos(sample.distance, sample.heat_flux)
        self._set_hover_visible(True)

    def _set_hover_visible(self, visible: bool) -> None:
        for item in (self.hover_line, self.hover_marker, self.hover_label):
            item.setVisible(visible)

    def set_curve(self, curve: FluxCurve) -> None:
        """Replace the plotted flux curve."""
        self.curve = curve
        self.curve_item.setData(curve.distances, curve.heat_fluxes)
        self.plot_widget.setXRange(float(curve.distances[0]), float(curve.distances[-1]), padding=0)
        self.plot_widget.enableAutoRange(axis='y')
        self._set_hover_visible(False)

    def export_image(self) -> None:
        """Export the current plot as an image file."""
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            "Save chart as image",
            "heat_flux.png",
            "PNG image (*.png);;JPEG image (*.jpg);;SVG vector image (*.svg)"
        )

        if not file_path:
            return

        try:
            if file_path.lower().endswith(".svg"):
                exporter = SVGExporter(self.plot_widget.plotItem)
            else:
                exporter = ImageExporter(self.plot_widget.plotItem)
                exporter.parameters()['width'] = 1920  # High resolution
            exporter.export(file_path)

            logger.info(f"Plot exported to {file_path}")

        except Exception as e:
            logger.exception("Failed to export plot")
            QMessageBox.critical(self, "Export error", f"Could not export the chart:\n{str(e)}")
