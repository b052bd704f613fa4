"""
Heat Flux Model
===============
Point-source radiation model for a flare.

The total heat release of the flare is obtained from the gas flow rate and its
heat content through a fixed unit-conversion chain (BTU/min -> BTU/day ->
kWh/day -> kW). A fraction of that heat is radiated isotropically, so the flux
incident on a surface at distance ``d`` is::

    q = f_rad * Q / (4 * pi * d**2)

All functions are pure. Distances may be passed as scalars or numpy arrays.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from flareflux.config import DISTANCE_DECIMALS
from flareflux.utils import btu_per_minute_to_per_day, btu_to_kwh, kwh_per_day_to_kw

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

FOUR_PI = 4.0 * np.pi


class DomainError(ValueError):
    """Raised when an argument lies outside the mathematical domain of the model."""


@dataclass(frozen=True)
class HeatReleaseBreakdown:
    """Every step of the BTU/min -> kW conversion chain."""
    btu_per_minute: float
    btu_per_day: float
    kwh_per_day: float
    kilowatts: float


def heat_release_breakdown(flow_rate: float, heat_content: float) -> HeatReleaseBreakdown:
    """
    Run the unit-conversion chain and keep the intermediate values.

    Args:
        flow_rate: Gas flow rate in SCFM.
        heat_content: Heat content in BTU/SCF.
    """
    btu_per_minute = flow_rate * heat_content
    btu_per_day = btu_per_minute_to_per_day(btu_per_minute)
    kwh_per_day = btu_to_kwh(btu_per_day)
    kilowatts = kwh_per_day_to_kw(kwh_per_day)
    return HeatReleaseBreakdown(
        btu_per_minute=btu_per_minute,
        btu_per_day=btu_per_day,
        kwh_per_day=kwh_per_day,
        kilowatts=kilowatts,
    )


def compute_heat_release(flow_rate: float, heat_content: float) -> float:
    """
    Total heat release of the flare.

    Args:
        flow_rate: Gas flow rate in SCFM.
        heat_content: Heat content in BTU/SCF.

    Returns:
        Heat release in kW.
    """
    return heat_release_breakdown(flow_rate, heat_content).kilowatts


def compute_heat_flux(
    flow_rate: float,
    heat_content: float,
    rad_fraction: float,
    distance: float | npt.NDArray[np.float64],
) -> float | npt.NDArray[np.float64]:
    """
    Radiative heat flux at a given distance from the flare.

    Args:
        flow_rate: Gas flow rate in SCFM.
        heat_content: Heat content in BTU/SCF.
        rad_fraction: Radiated fraction of the heat release (0, 1].
        distance: Distance(s) from the flare in meters.

    Returns:
        Heat flux in kW/m², with the same shape as ``distance``.

    Raises:
        DomainError: If any distance is zero, negative or NaN.
    """
    if not np.all(np.asarray(distance) > 0):
        raise DomainError(f"Distance must be positive, got {distance!r}.")

    kilowatts = compute_heat_release(flow_rate, heat_content)
    return (rad_fraction * kilowatts) / (FOUR_PI * distance ** 2)


def solve_distance_for_flux(heat_release: float, rad_fraction: float, target_flux: float) -> float:
    """
    Invert the inverse-square law: distance at which the flux equals ``target_flux``.

    Args:
        heat_release: Total heat release in kW.
        rad_fraction: Radiated fraction of the heat release (0, 1].
        target_flux: Flux level in kW/m².

    Returns:
        Distance in meters (unrounded).

    Raises:
        DomainError: If ``target_flux`` is not positive, ``heat_release`` is
            negative, or ``rad_fraction`` is outside (0, 1].
    """
    if not target_flux > 0:
        raise DomainError(f"Target flux must be positive, got {target_flux!r}.")
    if heat_release < 0:
        raise DomainError(f"Heat release must not be negative, got {heat_release!r}.")
    if not 0 < rad_fraction <= 1:
        raise DomainError(f"Radiation fraction must be in (0, 1], got {rad_fraction!r}.")

    return math.sqrt((rad_fraction * heat_release) / (FOUR_PI * target_flux))


def compute_safe_distance(heat_release: float, rad_fraction: float, target_flux: float) -> float:
    """
    Minimum distance at which the flux drops to ``target_flux``, rounded for display.

    Rounding is half away from zero at the tenths digit.
    """
    distance = solve_distance_for_flux(heat_release, rad_fraction, target_flux)
    rounded = round_half_away_from_zero(distance, DISTANCE_DECIMALS)
    logger.debug(f"Safe distance for {target_flux} kW/m²: {distance:.4f} m -> {rounded} m")
    return rounded


def round_half_away_from_zero(value: float, decimals: int = 1) -> float:
    """Round ``value`` to ``decimals`` places, ties going away from zero."""
    if not math.isfinite(value):
        raise DomainError(f"Cannot round non-finite value {value!r}.")
    factor = 10 ** decimals
    return math.copysign(math.floor(abs(value) * factor + 0.5) / factor, value)
