"""
Calculator State (Data Model)
=============================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds the current flare inputs in one place.
2. Decoupling: Views read from this object; input widgets write to it.
3. Memoization: The derived result is kept for the current input snapshot
   only, so repeated redraws with unchanged inputs do not recompute.

Classes:
    CalculatorState: The main container class.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import QObject, Signal

from flareflux.model.flux import DomainError
from flareflux.model.inputs import FlareInputs, parse_percentage, parse_positive
from flareflux.model.results import CalculationResult, calculate

logger = logging.getLogger(__name__)


class CalculatorState(QObject):
    """
    Holds the current ``FlareInputs`` and notifies listeners when they change.
    Pass this instance to your Views.
    """
    # Emitted with the new FlareInputs after every accepted change
    changed = Signal(object)

    def __init__(self, inputs: Optional[FlareInputs] = None) -> None:
        super().__init__()
        self._inputs: FlareInputs = inputs or FlareInputs()
        self._cached_inputs: Optional[FlareInputs] = None
        self._cached_result: Optional[CalculationResult] = None

    # --- PROPERTIES ---

    @property
    def inputs(self) -> FlareInputs:
        return self._inputs

    @property
    def result(self) -> CalculationResult:
        """Result for the current inputs, recomputed only when they change."""
        if self._cached_result is None or self._cached_inputs != self._inputs:
            self._cached_result = calculate(self._inputs)
            self._cached_inputs = self._inputs
        return self._cached_result

    # --- SETTERS ---

    def set_inputs(self, inputs: FlareInputs) -> None:
        if inputs == self._inputs:
            return
        self._inputs = inputs
        logger.debug(f"Inputs changed: {inputs}")
        self.changed.emit(inputs)

    def set_flow_rate_text(self, text: str) -> bool:
        return self._apply(text, parse_positive, self._inputs.with_flow_rate)

    def set_heat_content_text(self, text: str) -> bool:
        return self._apply(text, parse_positive, self._inputs.with_heat_content)

    def set_rad_percent_text(self, text: str) -> bool:
        return self._apply(text, parse_percentage, self._inputs.with_rad_fraction)

    def reset(self) -> None:
        """Restore the start-up inputs."""
        self.set_inputs(FlareInputs())
        logger.info("Calculator inputs have been reset.")

    def _apply(
        self,
        text: str,
        parser: Callable[[str], Optional[float]],
        update: Callable[[float], FlareInputs],
    ) -> bool:
        """Apply parsed ``text``; invalid text leaves the last valid value in place."""
        value = parser(text)
        if value is None:
            return False
        try:
            inputs = update(value)
        except DomainError as e:
            logger.debug(f"Rejected input {text!r}: {e}")
            return False
        self.set_inputs(inputs)
        return True
