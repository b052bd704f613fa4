"""
Safety Distances Panel
"""
from PySide6.QtWidgets import QWidget, QVBoxLayout, QGroupBox, QLabel
from PySide6.QtCore import Qt

from flareflux.model.results import CalculationResult
from flareflux.model.thresholds import PROTECTIVE_EQUIPMENT_NOTE, REFERENCE_QUOTE, REFERENCE_SOURCE


class SafetyPanel(QWidget):
    def __init__(self) -> None:
        super().__init__()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        # --- Distances ---
        grp_dist = QGroupBox("Required Safety Distances")
        l_dist = QVBoxLayout(grp_dist)

        self.lbl_distances = QLabel("")
        self.lbl_distances.setTextFormat(Qt.RichText)
        self.lbl_distances.setWordWrap(True)
        l_dist.addWidget(self.lbl_distances)

        lbl_note = QLabel(PROTECTIVE_EQUIPMENT_NOTE)
        lbl_note.setWordWrap(True)
        lbl_note.setStyleSheet("color: #dc2626;")
        l_dist.addWidget(lbl_note)

        layout.addWidget(grp_dist)

        # --- References ---
        grp_ref = QGroupBox("References && Notes")
        l_ref = QVBoxLayout(grp_ref)

        lbl_quote = QLabel(f"<b>Safety Thresholds:</b><br><i>\"{REFERENCE_QUOTE}\"</i>")
        lbl_quote.setTextFormat(Qt.RichText)
        lbl_quote.setWordWrap(True)
        lbl_quote.setStyleSheet("color: gray;")
        l_ref.addWidget(lbl_quote)

        lbl_source = QLabel(REFERENCE_SOURCE)
        lbl_source.setWordWrap(True)
        lbl_source.setStyleSheet("color: gray; font-size: 10px;")
        l_ref.addWidget(lbl_source)

        layout.addWidget(grp_ref)
        layout.addStretch()

    def update_result(self, result: CalculationResult) -> None:
        items = "".join(
            f"<li>{item.threshold.label}: <b>{item.distance:.1f} m</b></li>"
            for item in result.safety_distances
        )
        self.lbl_distances.setText(f"<ul>{items}</ul>")
