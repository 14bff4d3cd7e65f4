"""Standard atmosphere and barometric pressure reduction.

What this module provides
- Standard atmospheric pressure (Pa) and temperature (°C) for an altitude, ASHRAE
    Fundamentals (2017) ch. 1 eqns 3 and 4.
- Conversion between station pressure and pressure reduced to sea level using the
    hypsometric equation with the mean temperature of the air column.

Design notes
- Altitude is in meters above mean sea level and may be negative.
- The lapse-rate model is valid in the troposphere only. Altitudes above 11 000 m still
    return a value but emit a `RuntimeWarning`.

Examples:
>>> round(get_standard_atm_pressure(0))
101325
>>> round(get_standard_atm_temperature(1000), 2)
8.5
"""
from __future__ import annotations

import math
import warnings

from py_psychrocalc.constants import (
    cStandardPressurePa,
    cStandardTemperatureC,
    cLapseRateMetric,
    cPressureAltitudeFactor,
    cPressureExponent,
    cAirGasConstant,
    cGravityMetric,
    cTroposphereLimitMeters,
)
from py_psychrocalc.exceptions import DomainError, InvalidPressure
from py_psychrocalc.units import get_t_kelvin_from_t_celsius

__all__ = (
    'get_standard_atm_pressure',
    'get_standard_atm_temperature',
    'get_sea_level_pressure',
    'get_station_pressure',
)


def _warn_above_troposphere(altitude: float) -> None:
    if altitude > cTroposphereLimitMeters:
        warnings.warn(
            f"Altitude {altitude} m is above the modeled troposphere. Atmospheric model not valid here.",
            RuntimeWarning,
        )


def get_standard_atm_pressure(altitude: float) -> float:
    """Standard atmosphere barometric pressure (Pa) at altitude (m).

    Raises:
        DomainError: If altitude is at or above 1 / 2.25577e-5 m (about 44 331 m),
            where the pressure model reaches zero.
    """
    base = 1 - cPressureAltitudeFactor * altitude
    if not base > 0:
        raise DomainError(altitude, -math.inf, 1 / cPressureAltitudeFactor,
                          f"Altitude {altitude} m is above the {1 / cPressureAltitudeFactor:.0f} m "
                          f"limit of the standard atmosphere pressure model")
    _warn_above_troposphere(altitude)
    return cStandardPressurePa * math.pow(base, cPressureExponent)


def get_standard_atm_temperature(altitude: float) -> float:
    """Standard atmosphere temperature (°C) at altitude (m)."""
    _warn_above_troposphere(altitude)
    return cStandardTemperatureC - cLapseRateMetric * altitude


def get_sea_level_pressure(station_pressure: float, altitude: float, t_dry_bulb: float) -> float:
    """Sea level pressure (Pa) from station pressure.

    The air column between station and sea level is taken at the mean of the station
    temperature and the temperature the standard lapse rate gives at sea level. Based on
    Hess, Introduction to Theoretical Meteorology (1959) and the hypsometric equation.

    Args:
        station_pressure: Observed station pressure in Pa.
        altitude: Station altitude above mean sea level in m.
        t_dry_bulb: Dry bulb temperature at the station in °C.

    Returns:
        Pressure reduced to sea level in Pa.

    Raises:
        InvalidPressure: If station_pressure <= 0.
    """
    if not station_pressure > 0:
        raise InvalidPressure(station_pressure)
    _warn_above_troposphere(altitude)
    t_column = t_dry_bulb + cLapseRateMetric * altitude / 2.
    scale_height = cAirGasConstant * get_t_kelvin_from_t_celsius(t_column) / cGravityMetric
    return station_pressure * math.exp(altitude / scale_height)


def get_station_pressure(sea_level_pressure: float, altitude: float, t_dry_bulb: float) -> float:
    """Station pressure (Pa) from sea level pressure; inverse of `get_sea_level_pressure`."""
    if not sea_level_pressure > 0:
        raise InvalidPressure(sea_level_pressure)
    return sea_level_pressure / get_sea_level_pressure(1., altitude, t_dry_bulb)
