"""
Flare Inputs
============
The user-editable quantities and the rules for accepting typed text.

Text that fails validation is reported as ``None`` so that the caller can keep
the last valid value instead of showing an error.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
import logging
import math
from typing import Optional

from flareflux.config import DEFAULT_FLOW_RATE, DEFAULT_HEAT_CONTENT, DEFAULT_RAD_FRACTION
from flareflux.model.flux import DomainError, compute_heat_release
from flareflux.utils import fraction_to_percent, percent_to_fraction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FlareInputs:
    flow_rate: float = DEFAULT_FLOW_RATE        # SCFM
    heat_content: float = DEFAULT_HEAT_CONTENT  # BTU/SCF
    rad_fraction: float = DEFAULT_RAD_FRACTION  # 0-1

    def __post_init__(self) -> None:
        if not self.flow_rate > 0:
            raise DomainError(f"Flow rate must be positive, got {self.flow_rate!r}.")
        if not self.heat_content > 0:
            raise DomainError(f"Heat content must be positive, got {self.heat_content!r}.")
        if not 0 < self.rad_fraction <= 1:
            raise DomainError(f"Radiation fraction must be in (0, 1], got {self.rad_fraction!r}.")
        if not math.isfinite(compute_heat_release(self.flow_rate, self.heat_content)):
            raise DomainError(
                f"Heat release overflows for flow rate {self.flow_rate!r} and heat content {self.heat_content!r}."
            )

    @property
    def rad_percent(self) -> float:
        return fraction_to_percent(self.rad_fraction)

    def with_flow_rate(self, value: float) -> FlareInputs:
        return replace(self, flow_rate=value)

    def with_heat_content(self, value: float) -> FlareInputs:
        return replace(self, heat_content=value)

    def with_rad_fraction(self, value: float) -> FlareInputs:
        return replace(self, rad_fraction=value)


def _parse_float(text: str) -> Optional[float]:
    try:
        value = float(text.strip())
    except (AttributeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_positive(text: str) -> Optional[float]:
    """
    Parse a strictly positive number.

    Returns:
        The value, or None for non-numeric, non-finite, zero or negative input.
    """
    value = _parse_float(text)
    if value is None or value <= 0:
        logger.debug(f"Rejected positive input: {text!r}")
        return None
    return value


def parse_percentage(text: str) -> Optional[float]:
    """
    Parse a percentage and convert it to a fraction.

    Zero is excluded; 100 % maps to exactly 1.0.

    Returns:
        The fraction in (0, 1], or None if the input is rejected.
    """
    value = _parse_float(text)
    if value is None:
        logger.debug(f"Rejected percentage input: {text!r}")
        return None

    fraction = percent_to_fraction(value)
    if not 0 < fraction <= 1:
        logger.debug(f"Rejected percentage input out of range: {text!r}")
        return None
    return fraction
