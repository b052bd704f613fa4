"""
Heat Release Panel
Shows every step of the BTU/min -> kW conversion for the current inputs.
"""
from PySide6.QtWidgets import QWidget, QVBoxLayout, QGroupBox, QLabel
from PySide6.QtCore import Qt

from flareflux.config import BTU_PER_KWH, HOURS_PER_DAY, MINUTES_PER_DAY
from flareflux.model.results import CalculationResult
from flareflux.utils import format_number


class CalculationPanel(QWidget):
    def __init__(self) -> None:
        super().__init__()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        grp = QGroupBox("Calculation Results")
        l_grp = QVBoxLayout(grp)

        self.lbl_chain = QLabel("")
        self.lbl_chain.setTextFormat(Qt.RichText)
        self.lbl_chain.setTextInteractionFlags(Qt.TextSelectableByMouse)
        self.lbl_chain.setStyleSheet(
            "QLabel { font-family: monospace; padding: 5px; "
            "background-color: rgba(0,0,0,10); border-radius: 3px; }"
        )
        l_grp.addWidget(self.lbl_chain)

        layout.addWidget(grp)

    def update_result(self, result: CalculationResult) -> None:
        inputs = result.inputs
        q = result.heat_release
        lines = [
            f"BTU/min = {format_number(inputs.flow_rate)} SCFM × "
            f"{format_number(inputs.heat_content)} BTU/SCF = {format_number(q.btu_per_minute)}",
            f"BTU/day = {format_number(q.btu_per_minute)} × {MINUTES_PER_DAY:g} = "
            f"{format_number(q.btu_per_day)}",
            f"kWh/day = {format_number(q.btu_per_day)} ÷ {BTU_PER_KWH:g} = "
            f"{format_number(q.kwh_per_day)}",
            f"kW = {format_number(q.kwh_per_day)} ÷ {HOURS_PER_DAY:g} = "
            f"<b>{format_number(q.kilowatts)}</b>",
        ]
        self.lbl_chain.setText("<br>".join(lines))
