from flareflux.config import BTU_PER_KWH, HOURS_PER_DAY, MINUTES_PER_DAY


def btu_per_minute_to_per_day(btu_per_minute):
    """Convert BTU/min to BTU/day."""
    return btu_per_minute * MINUTES_PER_DAY

def btu_to_kwh(btu):
    """Convert BTU to kWh (1 kWh = 3412 BTU)."""
    return btu / BTU_PER_KWH

def kwh_per_day_to_kw(kwh_per_day):
    """Convert kWh/day to kW."""
    return kwh_per_day / HOURS_PER_DAY

def fraction_to_percent(fraction: float) -> float:
    """Convert a 0-1 fraction to a percentage."""
    return fraction * 100.0

def percent_to_fraction(percent: float) -> float:
    """Convert a percentage to a 0-1 fraction."""
    return percent / 100.0

def format_number(value: float, max_decimals: int = 3) -> str:
    """Format with thousands separators and at most ``max_decimals`` decimals (e.g. 41,148.886)."""
    text = f"{value:,.{max_decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
