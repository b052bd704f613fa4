"""
Derived Results
===============
Everything the window displays, computed from one ``FlareInputs`` snapshot.

Classes:
    FluxSample: One (distance, flux) point.
    FluxCurve: The swept flux-vs-distance curve.
    SafetyDistance: A threshold with its minimum safe distance.
    CalculationResult: Bundle of all of the above.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Iterator, Optional, Tuple

import numpy as np

from flareflux.config import SWEEP_START_M, SWEEP_STEP_M, SWEEP_STOP_M
from flareflux.model.flux import (
    HeatReleaseBreakdown, compute_heat_flux, compute_safe_distance, heat_release_breakdown
)
from flareflux.model.inputs import FlareInputs
from flareflux.model.thresholds import SAFETY_THRESHOLDS, SafetyThreshold

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FluxSample:
    distance: float   # m
    heat_flux: float  # kW/m²


@dataclass(eq=False)
class FluxCurve:
    distances: npt.NDArray[np.float64]
    heat_fluxes: npt.NDArray[np.float64]

    def __len__(self) -> int:
        return len(self.distances)

    def __iter__(self) -> Iterator[FluxSample]:
        for d, q in zip(self.distances, self.heat_fluxes):
            yield FluxSample(distance=float(d), heat_flux=float(q))

    def nearest(self, distance: float) -> FluxSample:
        """Sample whose distance is closest to ``distance`` (ties go to the shorter distance)."""
        if len(self.distances) == 0:
            raise IndexError("Flux curve has no samples.")
        idx = int(np.argmin(np.abs(self.distances - distance)))
        return FluxSample(distance=float(self.distances[idx]), heat_flux=float(self.heat_fluxes[idx]))

    def plot(self) -> None:
        """
        Quick-look plot of the curve with the safety thresholds.
        """
        import matplotlib.pyplot as plt

        plt.rcParams["figure.constrained_layout.use"] = True
        plt.figure(figsize=(7, 5))

        plt.plot(self.distances, self.heat_fluxes, color='#8884d8', lw=2, label="Heat Flux")
        for threshold in SAFETY_THRESHOLDS.values():
            plt.axhline(threshold.flux, color=threshold.color, ls='--', lw=1.5, label=threshold.legend_label)

        plt.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
        plt.minorticks_on()
        plt.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

        plt.title("Radiative Heat Flux")
        plt.xlabel("Distance (m)")
        plt.ylabel("Heat Flux (kW/m²)")
        plt.legend()
        plt.show()


@dataclass(frozen=True)
class SafetyDistance:
    threshold: SafetyThreshold
    distance: float  # m, one decimal


@dataclass(frozen=True, eq=False)
class CalculationResult:
    inputs: FlareInputs
    heat_release: HeatReleaseBreakdown
    curve: FluxCurve
    safety_distances: Tuple[SafetyDistance, ...]

    def distance_for(self, key: str) -> float:
        """Safe distance for the threshold registered under ``key``."""
        for item in self.safety_distances:
            if item.threshold.key == key:
                return item.distance
        raise KeyError(key)


def sweep_distances() -> npt.NDArray[np.float64]:
    """Chart distances: 1..100 m inclusive, step 1 m."""
    return np.arange(SWEEP_START_M, SWEEP_STOP_M + SWEEP_STEP_M, SWEEP_STEP_M, dtype=np.float64)


def sample_flux_curve(
    inputs: FlareInputs,
    distances: Optional[npt.NDArray[np.float64]] = None,
) -> FluxCurve:
    """Evaluate the flux at every sweep distance."""
    if distances is None:
        distances = sweep_distances()
    else:
        distances = np.asarray(distances, dtype=np.float64)

    fluxes = compute_heat_flux(inputs.flow_rate, inputs.heat_content, inputs.rad_fraction, distances)
    return FluxCurve(distances=distances, heat_fluxes=np.asarray(fluxes, dtype=np.float64))


def compute_safety_distances(heat_release_kw: float, rad_fraction: float) -> Tuple[SafetyDistance, ...]:
    return tuple(
        SafetyDistance(
            threshold=threshold,
            distance=compute_safe_distance(heat_release_kw, rad_fraction, threshold.flux),
        )
        for threshold in SAFETY_THRESHOLDS.values()
    )


def calculate(inputs: FlareInputs) -> CalculationResult:
    """Compute every displayed quantity for ``inputs``."""
    breakdown = heat_release_breakdown(inputs.flow_rate, inputs.heat_content)
    result = CalculationResult(
        inputs=inputs,
        heat_release=breakdown,
        curve=sample_flux_curve(inputs),
        safety_distances=compute_safety_distances(breakdown.kilowatts, inputs.rad_fraction),
    )
    logger.debug(
        f"Calculated {inputs}: Q = {breakdown.kilowatts:.2f} kW, "
        f"distances = {[d.distance for d in result.safety_distances]}"
    )
    return result
