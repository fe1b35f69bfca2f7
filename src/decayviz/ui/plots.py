# src/decayviz/ui/plots.py
import math
from PySide6.QtWidgets import QWidget, QVBoxLayout
import pyqtgraph as pg

from decayviz.formatting import series_labels, sample_at, format_hover

MAX_TICKS = 12


class PlotWidget(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)

        # Main plot area
        self.plot_widget = pg.PlotWidget()
        self.plot_widget.setLabel("left", "Caffeine (mg)")
        self.plot_widget.setLabel("bottom", "Time of Day")
        self.plot_widget.showGrid(x=True, y=True, alpha=0.3)
        self.plot_widget.addLegend()
        layout.addWidget(self.plot_widget)

        # Hover readout: nearest sample to the cursor
        self.hover = pg.TextItem(color="#333", fill=pg.mkBrush(255, 255, 255, 220), anchor=(0, 1))
        self.marker = pg.ScatterPlotItem(size=10, brush=pg.mkBrush("#667eea"))
        self._mouse_proxy = pg.SignalProxy(self.plot_widget.scene().sigMouseMoved,
                                           rateLimit=60, slot=self._on_mouse_moved)

        self.curve = None
        self.series = ()
        self.reference_min = 0

    def plot_series(self, series, reference_min: int):
        """Draw one amount-time curve, replacing whatever was drawn before."""
        self.clear()
        self.series = tuple(series)
        self.reference_min = reference_min
        hours = [p.hour for p in series]
        amounts = [p.amount for p in series]
        self.curve = self.plot_widget.plot(
            hours, amounts,
            pen=pg.mkPen("#667eea", width=3),
            fillLevel=0,
            brush=pg.mkBrush(102, 126, 234, 25),
            name="Total Caffeine in Body (mg)",
        )
        self.plot_widget.addItem(self.marker, ignoreBounds=True)
        self.plot_widget.addItem(self.hover, ignoreBounds=True)
        self.marker.setVisible(False)
        self.hover.setVisible(False)

        labels = series_labels(series, reference_min)
        every = max(1, math.ceil(len(labels) / MAX_TICKS))
        ticks = [(hours[i], labels[i]) for i in range(0, len(labels), every)]
        self.plot_widget.getAxis("bottom").setTicks([ticks])
        self.plot_widget.setYRange(0, max(amounts) if amounts else 1.0)

    def _on_mouse_moved(self, evt):
        pos = evt[0]
        if self.curve is None or not self.plot_widget.sceneBoundingRect().contains(pos):
            self.marker.setVisible(False)
            self.hover.setVisible(False)
            return
        x = self.plot_widget.getPlotItem().vb.mapSceneToView(pos).x()
        point = sample_at(self.series, x)
        if point is None:
            return
        self.marker.setData([point.hour], [point.amount])
        self.hover.setText(format_hover(point, self.reference_min))
        self.hover.setPos(point.hour, point.amount)
        self.marker.setVisible(True)
        self.hover.setVisible(True)

    def clear(self):
        self.plot_widget.clear()
        self.plot_widget.getAxis("bottom").setTicks(None)
        self.curve = None
        self.series = ()
