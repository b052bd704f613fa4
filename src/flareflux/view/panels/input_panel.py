"""
Flare Input Panel
"""
from PySide6.QtWidgets import QWidget, QHBoxLayout, QFormLayout, QGroupBox, QLineEdit, QLabel

from flareflux.app.state import CalculatorState
from flareflux.model.inputs import FlareInputs


def _format_input(value: float) -> str:
    return f"{value:g}"


class InputPanel(QWidget):
    def __init__(self, state: CalculatorState) -> None:
        super().__init__()
        self.state = state

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        grp = QGroupBox("Flare Parameters")
        row = QHBoxLayout(grp)

        self.edit_flow_rate = self._add_field(row, "Flow Rate:", "SCFM")
        self.edit_heat_content = self._add_field(row, "Heat Content:", "BTU/SCF")
        self.edit_rad_percent = self._add_field(row, "Radiation Fraction:", "%")

        layout.addWidget(grp)

        # Keystrokes: invalid text is ignored by the state, the last valid value stays
        self.edit_flow_rate.textEdited.connect(self.state.set_flow_rate_text)
        self.edit_heat_content.textEdited.connect(self.state.set_heat_content_text)
        self.edit_rad_percent.textEdited.connect(self.state.set_rad_percent_text)

        # Leaving a field shows the value actually in use
        for edit in (self.edit_flow_rate, self.edit_heat_content, self.edit_rad_percent):
            edit.editingFinished.connect(self.load_from_state)

        self.load_from_state()

    def _add_field(self, row: QHBoxLayout, label: str, suffix: str) -> QLineEdit:
        form = QFormLayout()
        field_row = QHBoxLayout()

        edit = QLineEdit()
        edit.setMinimumWidth(90)
        field_row.addWidget(edit)
        field_row.addWidget(QLabel(suffix))

        form.addRow(label, field_row)
        row.addLayout(form)
        return edit

    def load_from_state(self) -> None:
        """Syncs the fields from the current inputs."""
        inputs: FlareInputs = self.state.inputs
        values = (
            (self.edit_flow_rate, inputs.flow_rate),
            (self.edit_heat_content, inputs.heat_content),
            (self.edit_rad_percent, inputs.rad_percent),
        )
        for edit, value in values:
            text = _format_input(value)
            if edit.text() != text:
                edit.blockSignals(True)
                edit.setText(text)
                edit.blockSignals(False)
