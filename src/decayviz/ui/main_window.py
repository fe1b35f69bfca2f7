# src/decayviz/ui/main_window.py
import logging
from PySide6.QtWidgets import (QMainWindow, QWidget, QHBoxLayout, QVBoxLayout, QStatusBar,
                               QLabel, QMessageBox)
from .controls import ControlsPanel, CalculateRequest
from .plots import PlotWidget
from decayengine.dosing import InvalidInput
from decayengine.simulate import run
from decayviz.formatting import format_result

logger = logging.getLogger(__name__)

class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Caffeine Decay")
        self.resize(1100, 680)

        central = QWidget(self); self.setCentralWidget(central)
        root = QHBoxLayout(central)

        self.controls = ControlsPanel()
        right = QVBoxLayout()
        self.result = QLabel(); self.result.setVisible(False)
        self.plot = PlotWidget()
        right.addWidget(self.result)
        right.addWidget(self.plot, 1)
        root.addWidget(self.controls, 0)
        root.addLayout(right, 1)

        self.status = QStatusBar(); self.setStatusBar(self.status)

        # wire events
        self.controls.calculateRequested.connect(self.on_calculate)

        # first run using the default dose row
        self.controls._emit_request()

    def on_calculate(self, req: CalculateRequest):
        try:
            report = run(req.entries)
        except InvalidInput as e:
            logger.warning("Calculation rejected: %s", e)
            self.plot.clear()
            self.result.setVisible(False)
            self.status.showMessage(f"Error: {e}", 8000)
            QMessageBox.warning(self, "Invalid input", str(e))
            return

        self.result.setText(format_result(report.crossing, report.params.threshold_mg))
        self.result.setVisible(True)
        self.plot.plot_series(report.series, report.reference_min)
        msg = f"Peak {report.peak_mg:.1f} mg at {report.peak_h:.1f} h | AUC {report.auc_mg_h:.1f} mg·h"
        if report.exact_crossing_h is not None:
            msg += f" | below {report.params.threshold_mg:g} mg at {report.exact_crossing_h:.2f} h"
        self.status.showMessage(msg, 5000)
