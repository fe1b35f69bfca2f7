# src/decayviz/ui/controls.py
from dataclasses import dataclass, field
from PySide6.QtCore import Signal, QTime
from PySide6.QtWidgets import (QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QDoubleSpinBox,
                               QTimeEdit, QFrame, QLabel)
from decayengine.types import DoseEntry
from decayengine.config import DEFAULT_DOSE_MG, DEFAULT_DOSE_TIME

@dataclass
class CalculateRequest:
    entries: list[DoseEntry] = field(default_factory=list)

class DoseRow(QWidget):
    """One dosage + time-consumed input pair with its own remove button."""
    removeRequested = Signal(object)

    def __init__(self, row_id: int, parent=None):
        super().__init__(parent)
        self.row_id = row_id
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.dosage = QDoubleSpinBox(); self.dosage.setDecimals(0)
        self.dosage.setRange(0, 1e5); self.dosage.setValue(DEFAULT_DOSE_MG)
        self.dosage.setSuffix(" mg")
        layout.addWidget(QLabel("Caffeine Dosage (mg)"))
        layout.addWidget(self.dosage)

        self.time = QTimeEdit(); self.time.setDisplayFormat("HH:mm")
        self.time.setTime(QTime.fromString(DEFAULT_DOSE_TIME, "HH:mm"))
        layout.addWidget(QLabel("Time Consumed"))
        layout.addWidget(self.time)

        self.remove_btn = QPushButton("✕"); self.remove_btn.setFixedWidth(28)
        self.remove_btn.clicked.connect(lambda: self.removeRequested.emit(self))
        layout.addWidget(self.remove_btn)

    def entry(self) -> DoseEntry:
        return DoseEntry(dosage_text=str(self.dosage.value()),
                         time_text=self.time.time().toString("HH:mm"))

class ControlsPanel(QFrame):
    calculateRequested = Signal(CalculateRequest)

    def __init__(self):
        super().__init__()
        self.setFrameShape(QFrame.StyledPanel)
        layout = QVBoxLayout(self)
        layout.addWidget(QLabel("Caffeine Doses"))

        # Dose rows live in their own layout so they stay above the buttons
        self.rows_layout = QVBoxLayout()
        layout.addLayout(self.rows_layout)
        self.rows: list[DoseRow] = []
        self._next_row_id = 1

        add = QPushButton("+ Add Another Dose"); layout.addWidget(add)
        add.clicked.connect(self.add_dose)

        go = QPushButton("Calculate"); layout.addWidget(go)
        go.clicked.connect(self._emit_request)
        layout.addStretch(1)

        self.add_dose()

    def add_dose(self) -> DoseRow:
        row = DoseRow(self._next_row_id)
        self._next_row_id += 1
        row.removeRequested.connect(self.remove_dose)
        self.rows.append(row)
        self.rows_layout.addWidget(row)
        self._update_remove_buttons()
        return row

    def remove_dose(self, row: DoseRow):
        if row not in self.rows or len(self.rows) == 1:
            return
        self.rows.remove(row)
        self.rows_layout.removeWidget(row)
        row.deleteLater()
        self._update_remove_buttons()

    def _update_remove_buttons(self):
        # A single row cannot be removed
        many = len(self.rows) > 1
        for r in self.rows:
            r.remove_btn.setVisible(many)

    def entries(self) -> list[DoseEntry]:
        return [r.entry() for r in self.rows]

    def _emit_request(self):
        self.calculateRequested.emit(CalculateRequest(entries=self.entries()))
