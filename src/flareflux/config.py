"""
Configuration & Constants
=========================
This module serves as the central registry for global constants and runtime settings.

Why is this file needed?
------------------------
1. Auditability: Every number that enters the physical model (unit
   conversions, exposure thresholds) is named here instead of being scattered
   as magic literals.
2. Runtime settings: The log level and optional log file are read from the
   environment once, at import time.

Exports:
    MINUTES_PER_DAY, BTU_PER_KWH, HOURS_PER_DAY: Unit-conversion chain.
    SAFE_FLUX, SHORT_EXPOSURE_FLUX, VERY_SHORT_EXPOSURE_FLUX: Thresholds [kW/m²].
    SWEEP_START_M, SWEEP_STOP_M, SWEEP_STEP_M: Chart distance sweep [m].
    DEFAULT_FLOW_RATE, DEFAULT_HEAT_CONTENT, DEFAULT_RAD_FRACTION: Start-up inputs.
    LOG_LEVEL (int): Logging level for the application logger.
    LOG_FILE (str | None): Optional path of a log file.
"""
import logging
import os
from typing import Final, Optional


def _log_level_from_env(default: int = logging.INFO) -> int:
    name = os.environ.get("FLAREFLUX_LOG_LEVEL", "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def _log_file_from_env() -> Optional[str]:
    path = os.environ.get("FLAREFLUX_LOG_FILE", "").strip()
    return path or None


APP_NAME: Final[str] = "Flare Heat Flux Calculator"

# --- Unit conversion chain (BTU/min -> kW) ---
MINUTES_PER_DAY: Final[float] = 1440.0
BTU_PER_KWH: Final[float] = 3412.0
HOURS_PER_DAY: Final[float] = 24.0

# --- Safety thresholds [kW/m²] ---
SAFE_FLUX: Final[float] = 1.5
SHORT_EXPOSURE_FLUX: Final[float] = 3.0
VERY_SHORT_EXPOSURE_FLUX: Final[float] = 4.6

# --- Chart sweep [m], inclusive on both ends ---
SWEEP_START_M: Final[int] = 1
SWEEP_STOP_M: Final[int] = 100
SWEEP_STEP_M: Final[int] = 1

# --- Start-up inputs ---
DEFAULT_FLOW_RATE: Final[float] = 150.0      # SCFM
DEFAULT_HEAT_CONTENT: Final[float] = 650.0   # BTU/SCF
DEFAULT_RAD_FRACTION: Final[float] = 0.35    # 35 %

# Safe distances are shown with one decimal place
DISTANCE_DECIMALS: Final[int] = 1

LOG_LEVEL: Final[int] = _log_level_from_env()
LOG_FILE: Final[Optional[str]] = _log_file_from_env()
