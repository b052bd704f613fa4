"""
Safety Thresholds
=================
Fixed exposure levels drawn on the chart and used for the safe-distance list.

The levels follow the protective-clothing study by Heus & Denhartog (2017),
Industrial Health, 55, 529-536.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from flareflux.config import SAFE_FLUX, SHORT_EXPOSURE_FLUX, VERY_SHORT_EXPOSURE_FLUX


@dataclass(frozen=True)
class SafetyThreshold:
    key: str
    flux: float  # kW/m²
    title: str
    legend_title: str
    color: str

    @property
    def label(self) -> str:
        """Text used in the distance list."""
        return f"{self.title} ({self.flux:.1f} kW/m²)"

    @property
    def legend_label(self) -> str:
        """Text used in the chart legend."""
        return f"{self.legend_title} ({self.flux:.1f} kW/m²)"


SAFE = SafetyThreshold(
    key="safe",
    flux=SAFE_FLUX,
    title="Safe Working Distance",
    legend_title="Safe Limit",
    color="#82ca9d",
)
SHORT_EXPOSURE = SafetyThreshold(
    key="short_exposure",
    flux=SHORT_EXPOSURE_FLUX,
    title="Short Exposure Limit (~48s)",
    legend_title="Short Exposure",
    color="#ffc658",
)
VERY_SHORT_EXPOSURE = SafetyThreshold(
    key="very_short_exposure",
    flux=VERY_SHORT_EXPOSURE_FLUX,
    title="Very Short Exposure Limit (~45s)",
    legend_title="Very Short Exposure",
    color="#ff7300",
)

# Ordered from the lowest flux (largest distance) to the highest
SAFETY_THRESHOLDS: Dict[str, SafetyThreshold] = {
    t.key: t for t in (SAFE, SHORT_EXPOSURE, VERY_SHORT_EXPOSURE)
}

PROTECTIVE_EQUIPMENT_NOTE = (
    "Note: Specialized protective equipment required for closer approaches "
    "or longer durations."
)

REFERENCE_QUOTE = (
    "To determine safe working conditions in emergency situations at "
    "petro-chemical plants in the Netherlands a study was performed on three "
    "protective clothing combinations (operator's, fire-fighter's and "
    "aluminized). The clothing was evaluated at four different heat radiation "
    "levels (3.0, 4.6, 6.3 and 10.0 kW/m²) in standing and walking posture "
    "with a thermal manikin RadMan™. Time till pain threshold (43°C) is set as "
    "a cut-off criterion for regular activities."
)

REFERENCE_SOURCE = "Source: Heus & Denhartog (2017). Industrial Health, 55, 529-536."
