"""Psychrometric property conversion network for moist air (SI units).

What this module provides
- Saturation layer: saturation vapor pressure over ice/liquid water and saturation humidity ratio.
- Converters between any two humidity descriptions of the same air: humidity ratio, vapor
    pressure, relative humidity, dew point and wet bulb temperature, given dry bulb temperature
    and atmospheric pressure.
- Wet-bulb solver: bisection inverting the (monotonic) wet bulb -> humidity ratio relation.
- Derived properties: enthalpy, specific volume, density, degree of saturation and vapor
    pressure deficit of moist air, plus the dry-air counterparts.

Design notes
- Units: temperatures in °C, pressures in Pa, humidity ratio in kg_H2O/kg_dry_air, relative
    humidity as a fraction (0, 1], enthalpy in J/kg_dry_air, volume in m³/kg_dry_air.
- Errors: every function returns a float or raises a `PsychroError` subclass naming the first
    broken precondition. Nothing is clamped except the dew point fit, which may overshoot the
    dry bulb temperature near saturation.
- Correlations: ASHRAE Handbook - Fundamentals (2017), chapter 1.

Examples:
>>> w = get_hum_ratio_from_rel_hum(25, 0.5, 101325)
>>> 17.5 < get_t_wet_bulb_from_hum_ratio(25, w, 101325) < 18.5
True
"""
from __future__ import annotations

import math

from typing_extensions import Optional

from py_psychrocalc.config import SolverConfig, get_solver_config
from py_psychrocalc.constants import (
    cMolecularWeightRatio,
    cDryAirGasConstant,
    cVolumeWaterFactor,
    cSpecificHeatDryAir,
    cSpecificHeatWaterVapor,
    cSpecificHeatWater,
    cLatentHeatVaporization,
    cWetBulbLatentSlope,
    cIceC1, cIceC2, cIceC3, cIceC4, cIceC5, cIceC6, cIceC7,
    cWaterC8, cWaterC9, cWaterC10, cWaterC11, cWaterC12, cWaterC13,
    cDewC14, cDewC15, cDewC16, cDewC17, cDewC18, cDewExponent,
    cDewIceC0, cDewIceC1, cDewIceC2,
    cSatPresMinTempC,
    cSatPresMaxTempC,
    cDewPointMaxTempC,
)
from py_psychrocalc.exceptions import (
    DomainError,
    InvalidRelativeHumidity,
    InvalidHumidityRatio,
    NegativeVaporPressure,
    InvalidPressure,
    DewPointAboveDryBulb,
    WetBulbAboveDryBulb,
    WetBulbConvergenceError,
)
from py_psychrocalc.logger import logger
from py_psychrocalc.units import get_t_kelvin_from_t_celsius

__all__ = (
    # Saturation layer
    'get_sat_vap_pres',
    'get_sat_hum_ratio',
    'get_sat_air_enthalpy',
    # Converters
    'get_hum_ratio_from_vap_pres',
    'get_vap_pres_from_hum_ratio',
    'get_rel_hum_from_vap_pres',
    'get_vap_pres_from_rel_hum',
    'get_t_dew_point_from_vap_pres',
    'get_vap_pres_from_t_dew_point',
    'get_t_dew_point_from_rel_hum',
    'get_rel_hum_from_t_dew_point',
    'get_t_dew_point_from_hum_ratio',
    'get_hum_ratio_from_t_dew_point',
    'get_hum_ratio_from_rel_hum',
    'get_rel_hum_from_hum_ratio',
    'get_hum_ratio_from_t_wet_bulb',
    'get_rel_hum_from_t_wet_bulb',
    'get_t_wet_bulb_from_rel_hum',
    'get_t_dew_point_from_t_wet_bulb',
    'get_t_wet_bulb_from_t_dew_point',
    # Wet-bulb solver
    'get_t_wet_bulb_from_hum_ratio',
    # Derived properties
    'get_moist_air_enthalpy',
    'get_moist_air_volume',
    'get_moist_air_density',
    'get_degree_of_saturation',
    'get_vapor_pressure_deficit',
    'get_dry_air_enthalpy',
    'get_dry_air_volume',
    'get_dry_air_density',
    'get_t_dry_bulb_from_enthalpy_and_hum_ratio',
    'get_hum_ratio_from_enthalpy_and_t_dry_bulb',
)


# ---------------------------------------------------------------------
# Precondition helpers
# ---------------------------------------------------------------------
def _check_rel_hum(rel_hum: float) -> None:
    if not 0 < rel_hum <= 1:
        raise InvalidRelativeHumidity(rel_hum)


def _check_hum_ratio(hum_ratio: float) -> None:
    if not hum_ratio > 0:
        raise InvalidHumidityRatio(hum_ratio)


def _check_vap_pres(vap_pres: float) -> None:
    if not vap_pres >= 0:
        raise NegativeVaporPressure(vap_pres)


def _check_pressure(pressure: float) -> None:
    if not pressure > 0:
        raise InvalidPressure(pressure)


# ---------------------------------------------------------------------
# Saturation layer
# ---------------------------------------------------------------------
def get_sat_vap_pres(t_dry_bulb: float) -> float:
    """Saturation vapor pressure (Pa) for given dry bulb temperature (°C).

    Hyland & Wexler correlation, ASHRAE Fundamentals (2017) ch. 1 eqn 5 (over ice,
    -100 °C to 0 °C) and eqn 6 (over liquid water, 0 °C to 200 °C).

    Raises:
        DomainError: If t_dry_bulb is outside [-100, 200] °C.
    """
    if not cSatPresMinTempC <= t_dry_bulb <= cSatPresMaxTempC:
        raise DomainError(t_dry_bulb, cSatPresMinTempC, cSatPresMaxTempC)

    t = get_t_kelvin_from_t_celsius(t_dry_bulb)
    if t_dry_bulb <= 0:
        ln_pws = (cIceC1 / t + cIceC2 + cIceC3 * t + cIceC4 * t ** 2 + cIceC5 * t ** 3
                  + cIceC6 * t ** 4 + cIceC7 * math.log(t))
    else:
        ln_pws = (cWaterC8 / t + cWaterC9 + cWaterC10 * t + cWaterC11 * t ** 2 + cWaterC12 * t ** 3
                  + cWaterC13 * math.log(t))
    return math.exp(ln_pws)


def get_sat_hum_ratio(t_dry_bulb: float, pressure: float) -> float:
    """Humidity ratio (kg/kg) of saturated air at given temperature (°C) and pressure (Pa)."""
    return get_hum_ratio_from_vap_pres(get_sat_vap_pres(t_dry_bulb), pressure)


def get_sat_air_enthalpy(t_dry_bulb: float, pressure: float) -> float:
    """Enthalpy (J/kg_dry_air) of saturated air."""
    return get_moist_air_enthalpy(t_dry_bulb, get_sat_hum_ratio(t_dry_bulb, pressure))


# ---------------------------------------------------------------------
# Vapor pressure <-> humidity ratio <-> relative humidity
# ---------------------------------------------------------------------
def get_hum_ratio_from_vap_pres(vap_pres: float, pressure: float) -> float:
    """Humidity ratio (kg/kg) from partial pressure of water vapor (Pa). ASHRAE eqn 20.

    Raises:
        NegativeVaporPressure: If vap_pres < 0.
        InvalidPressure: If pressure <= 0 or vap_pres >= pressure.
    """
    _check_vap_pres(vap_pres)
    _check_pressure(pressure)
    if vap_pres >= pressure:
        raise InvalidPressure(pressure, vap_pres)
    return cMolecularWeightRatio * vap_pres / (pressure - vap_pres)


def get_vap_pres_from_hum_ratio(hum_ratio: float, pressure: float) -> float:
    """Partial pressure of water vapor (Pa) from humidity ratio (kg/kg).

    Raises:
        InvalidHumidityRatio: If hum_ratio <= 0.
        InvalidPressure: If pressure <= 0.
    """
    _check_hum_ratio(hum_ratio)
    _check_pressure(pressure)
    return pressure * hum_ratio / (cMolecularWeightRatio + hum_ratio)


def get_rel_hum_from_vap_pres(t_dry_bulb: float, vap_pres: float) -> float:
    """Relative humidity (fraction) from partial pressure of water vapor (Pa). ASHRAE eqn 12."""
    _check_vap_pres(vap_pres)
    return vap_pres / get_sat_vap_pres(t_dry_bulb)


def get_vap_pres_from_rel_hum(t_dry_bulb: float, rel_hum: float) -> float:
    """Partial pressure of water vapor (Pa) from relative humidity (fraction).

    Raises:
        InvalidRelativeHumidity: If rel_hum is outside (0, 1].
    """
    _check_rel_hum(rel_hum)
    return rel_hum * get_sat_vap_pres(t_dry_bulb)


def get_hum_ratio_from_rel_hum(t_dry_bulb: float, rel_hum: float, pressure: float) -> float:
    """Humidity ratio (kg/kg) from relative humidity (fraction)."""
    return get_hum_ratio_from_vap_pres(get_vap_pres_from_rel_hum(t_dry_bulb, rel_hum), pressure)


def get_rel_hum_from_hum_ratio(t_dry_bulb: float, hum_ratio: float, pressure: float) -> float:
    """Relative humidity (fraction) from humidity ratio (kg/kg)."""
    return get_rel_hum_from_vap_pres(t_dry_bulb, get_vap_pres_from_hum_ratio(hum_ratio, pressure))


# ---------------------------------------------------------------------
# Dew point
# ---------------------------------------------------------------------
def get_t_dew_point_from_vap_pres(t_dry_bulb: float, vap_pres: float) -> float:
    """Dew point temperature (°C) from partial pressure of water vapor (Pa).

    ASHRAE Fundamentals (2017) ch. 1 eqn 37 (0 °C to 93 °C) and eqn 38 (below 0 °C); the
    branch is chosen by the dry bulb temperature. The fit can overshoot near saturation,
    so the result is bounded by t_dry_bulb.

    Args:
        t_dry_bulb: Dry bulb temperature in °C, at most 93 °C.
        vap_pres: Partial pressure of water vapor in Pa.

    Returns:
        Dew point temperature in °C, never above t_dry_bulb.

    Raises:
        NegativeVaporPressure: If vap_pres < 0.
        DomainError: If t_dry_bulb > 93 °C, or vap_pres == 0 (no dew point for bone-dry air).
    """
    _check_vap_pres(vap_pres)
    if t_dry_bulb > cDewPointMaxTempC:
        raise DomainError(t_dry_bulb, -math.inf, cDewPointMaxTempC,
                          f"Dry bulb temperature {t_dry_bulb} °C is above {cDewPointMaxTempC} °C "
                          f"limit of the dew point fit")
    if vap_pres == 0:
        raise DomainError(vap_pres, 0, math.inf, "Dew point is undefined at zero vapor pressure")

    alpha = math.log(vap_pres / 1000.)
    if t_dry_bulb >= 0:
        t_dew_point = (cDewC14 + cDewC15 * alpha + cDewC16 * alpha ** 2 + cDewC17 * alpha ** 3
                       + cDewC18 * math.pow(vap_pres / 1000., cDewExponent))
    else:
        t_dew_point = cDewIceC0 + cDewIceC1 * alpha + cDewIceC2 * alpha ** 2
    return min(t_dew_point, t_dry_bulb)


def get_vap_pres_from_t_dew_point(t_dew_point: float) -> float:
    """Partial pressure of water vapor (Pa) from dew point temperature (°C). ASHRAE eqn 36."""
    return get_sat_vap_pres(t_dew_point)


def get_t_dew_point_from_rel_hum(t_dry_bulb: float, rel_hum: float) -> float:
    """Dew point temperature (°C) from relative humidity (fraction)."""
    return get_t_dew_point_from_vap_pres(t_dry_bulb, get_vap_pres_from_rel_hum(t_dry_bulb, rel_hum))


def get_rel_hum_from_t_dew_point(t_dry_bulb: float, t_dew_point: float) -> float:
    """Relative humidity (fraction) from dew point temperature (°C).

    Raises:
        DewPointAboveDryBulb: If t_dew_point > t_dry_bulb.
    """
    if t_dew_point > t_dry_bulb:
        raise DewPointAboveDryBulb(t_dew_point, t_dry_bulb)
    return get_rel_hum_from_vap_pres(t_dry_bulb, get_vap_pres_from_t_dew_point(t_dew_point))


def get_t_dew_point_from_hum_ratio(t_dry_bulb: float, hum_ratio: float, pressure: float) -> float:
    """Dew point temperature (°C) from humidity ratio (kg/kg)."""
    return get_t_dew_point_from_vap_pres(t_dry_bulb, get_vap_pres_from_hum_ratio(hum_ratio, pressure))


def get_hum_ratio_from_t_dew_point(t_dew_point: float, pressure: float) -> float:
    """Humidity ratio (kg/kg) from dew point temperature (°C). ASHRAE eqn 22."""
    return get_hum_ratio_from_vap_pres(get_vap_pres_from_t_dew_point(t_dew_point), pressure)


# ---------------------------------------------------------------------
# Wet bulb
# ---------------------------------------------------------------------
def get_hum_ratio_from_t_wet_bulb(t_dry_bulb: float, t_wet_bulb: float, pressure: float) -> float:
    """Humidity ratio (kg/kg) from wet bulb temperature (°C). ASHRAE eqn 33.

    The result may be zero or negative for very dry air with a low wet bulb temperature;
    consumers reject it as an invalid humidity ratio.

    Raises:
        WetBulbAboveDryBulb: If t_wet_bulb > t_dry_bulb.
    """
    if t_wet_bulb > t_dry_bulb:
        raise WetBulbAboveDryBulb(t_wet_bulb, t_dry_bulb)

    ws_star = get_sat_hum_ratio(t_wet_bulb, pressure)
    return (((cLatentHeatVaporization - cWetBulbLatentSlope * t_wet_bulb) * ws_star
             - cSpecificHeatDryAir * (t_dry_bulb - t_wet_bulb))
            / (cLatentHeatVaporization + cSpecificHeatWaterVapor * t_dry_bulb - cSpecificHeatWater * t_wet_bulb))


def get_t_wet_bulb_from_hum_ratio(t_dry_bulb: float, hum_ratio: float, pressure: float,
                                  config: Optional[SolverConfig] = None) -> float:
    """Wet bulb temperature (°C) from humidity ratio (kg/kg) by bisection.

    The wet bulb temperature lies between the dew point and the dry bulb temperature, and
    `get_hum_ratio_from_t_wet_bulb` increases monotonically with it, so the bracket
    [t_dew_point, t_dry_bulb] is halved until it is no wider than the configured tolerance.
    For very dry air the dew point fit falls below the saturation pressure range, so the
    lower end is raised to -100 °C, where the wet bulb relation is still below hum_ratio.

    Args:
        t_dry_bulb: Dry bulb temperature in °C.
        hum_ratio: Humidity ratio in kg_H2O/kg_dry_air.
        pressure: Atmospheric pressure in Pa.
        config: Solver tolerance and iteration cap. Defaults to `get_solver_config()`.

    Returns:
        Midpoint of the final bracket, in °C.

    Raises:
        InvalidHumidityRatio: If hum_ratio <= 0.
        WetBulbConvergenceError: If the iteration cap is reached first.
    """
    _check_hum_ratio(hum_ratio)
    _config = config or get_solver_config()
    _tolerance = _config.cWetBulbTolerance
    _cMaxIterations = _config.cMaxIterations

    t_dew_point = get_t_dew_point_from_hum_ratio(t_dry_bulb, hum_ratio, pressure)

    t_wet_bulb_sup = t_dry_bulb
    t_wet_bulb_inf = max(t_dew_point, cSatPresMinTempC)
    t_wet_bulb = (t_wet_bulb_inf + t_wet_bulb_sup) / 2

    iterations_count = 0
    while (t_wet_bulb_sup - t_wet_bulb_inf) > _tolerance:
        if iterations_count >= _cMaxIterations:
            raise WetBulbConvergenceError(iterations_count, t_wet_bulb_inf, t_wet_bulb_sup, _tolerance)

        w_star = get_hum_ratio_from_t_wet_bulb(t_dry_bulb, t_wet_bulb, pressure)
        if w_star > hum_ratio:
            t_wet_bulb_sup = t_wet_bulb
        else:
            t_wet_bulb_inf = t_wet_bulb
        t_wet_bulb = (t_wet_bulb_inf + t_wet_bulb_sup) / 2
        iterations_count += 1

    logger.debug(f"Wet bulb {t_wet_bulb:.4f}°C found in {iterations_count} iterations")
    return t_wet_bulb


def get_rel_hum_from_t_wet_bulb(t_dry_bulb: float, t_wet_bulb: float, pressure: float) -> float:
    """Relative humidity (fraction) from wet bulb temperature (°C)."""
    hum_ratio = get_hum_ratio_from_t_wet_bulb(t_dry_bulb, t_wet_bulb, pressure)
    return get_rel_hum_from_hum_ratio(t_dry_bulb, hum_ratio, pressure)


def get_t_wet_bulb_from_rel_hum(t_dry_bulb: float, rel_hum: float, pressure: float) -> float:
    """Wet bulb temperature (°C) from relative humidity (fraction)."""
    hum_ratio = get_hum_ratio_from_rel_hum(t_dry_bulb, rel_hum, pressure)
    return get_t_wet_bulb_from_hum_ratio(t_dry_bulb, hum_ratio, pressure)


def get_t_dew_point_from_t_wet_bulb(t_dry_bulb: float, t_wet_bulb: float, pressure: float) -> float:
    """Dew point temperature (°C) from wet bulb temperature (°C)."""
    hum_ratio = get_hum_ratio_from_t_wet_bulb(t_dry_bulb, t_wet_bulb, pressure)
    return get_t_dew_point_from_hum_ratio(t_dry_bulb, hum_ratio, pressure)


def get_t_wet_bulb_from_t_dew_point(t_dry_bulb: float, t_dew_point: float, pressure: float) -> float:
    """Wet bulb temperature (°C) from dew point temperature (°C).

    Raises:
        DewPointAboveDryBulb: If t_dew_point > t_dry_bulb.
    """
    if t_dew_point > t_dry_bulb:
        raise DewPointAboveDryBulb(t_dew_point, t_dry_bulb)
    hum_ratio = get_hum_ratio_from_t_dew_point(t_dew_point, pressure)
    return get_t_wet_bulb_from_hum_ratio(t_dry_bulb, hum_ratio, pressure)


# ---------------------------------------------------------------------
# Derived moist air properties
# ---------------------------------------------------------------------
def get_moist_air_enthalpy(t_dry_bulb: float, hum_ratio: float) -> float:
    """Moist air enthalpy (J/kg_dry_air). ASHRAE eqn 30."""
    _check_hum_ratio(hum_ratio)
    return (cSpecificHeatDryAir * t_dry_bulb
            + hum_ratio * (cLatentHeatVaporization + cSpecificHeatWaterVapor * t_dry_bulb)) * 1000


def get_moist_air_volume(t_dry_bulb: float, hum_ratio: float, pressure: float) -> float:
    """Specific volume of moist air (m³/kg_dry_air). ASHRAE eqn 26."""
    _check_hum_ratio(hum_ratio)
    _check_pressure(pressure)
    return (cDryAirGasConstant * get_t_kelvin_from_t_celsius(t_dry_bulb)
            * (1 + cVolumeWaterFactor * hum_ratio) / (pressure / 1000.))


def get_moist_air_density(t_dry_bulb: float, hum_ratio: float, pressure: float) -> float:
    """Moist air density (kg/m³), counting both dry air and water vapor. ASHRAE eqn 11."""
    return (1 + hum_ratio) / get_moist_air_volume(t_dry_bulb, hum_ratio, pressure)


def get_degree_of_saturation(t_dry_bulb: float, hum_ratio: float, pressure: float) -> float:
    """Degree of saturation: humidity ratio over saturation humidity ratio. ASHRAE eqn 12."""
    _check_hum_ratio(hum_ratio)
    return hum_ratio / get_sat_hum_ratio(t_dry_bulb, pressure)


def get_vapor_pressure_deficit(t_dry_bulb: float, hum_ratio: float, pressure: float) -> float:
    """Vapor pressure deficit (Pa): saturation minus actual vapor pressure."""
    rel_hum = get_rel_hum_from_hum_ratio(t_dry_bulb, hum_ratio, pressure)
    return get_sat_vap_pres(t_dry_bulb) * (1 - rel_hum)


def get_dry_air_enthalpy(t_dry_bulb: float) -> float:
    """Dry air enthalpy (J/kg), zero at 0 °C. ASHRAE eqn 28."""
    return cSpecificHeatDryAir * t_dry_bulb * 1000


def get_dry_air_volume(t_dry_bulb: float, pressure: float) -> float:
    """Dry air specific volume (m³/kg). ASHRAE eqn 28."""
    _check_pressure(pressure)
    return cDryAirGasConstant * get_t_kelvin_from_t_celsius(t_dry_bulb) / (pressure / 1000.)


def get_dry_air_density(t_dry_bulb: float, pressure: float) -> float:
    """Dry air density (kg/m³)."""
    return 1 / get_dry_air_volume(t_dry_bulb, pressure)


def get_t_dry_bulb_from_enthalpy_and_hum_ratio(moist_air_enthalpy: float, hum_ratio: float) -> float:
    """Dry bulb temperature (°C) from moist air enthalpy (J/kg_dry_air) and humidity ratio. Inverts eqn 30."""
    _check_hum_ratio(hum_ratio)
    return ((moist_air_enthalpy / 1000. - cLatentHeatVaporization * hum_ratio)
            / (cSpecificHeatDryAir + cSpecificHeatWaterVapor * hum_ratio))


def get_hum_ratio_from_enthalpy_and_t_dry_bulb(moist_air_enthalpy: float, t_dry_bulb: float) -> float:
    """Humidity ratio (kg/kg) from moist air enthalpy (J/kg_dry_air) and dry bulb temperature (°C).

    Raises:
        InvalidHumidityRatio: If the enthalpy is too low to hold any water vapor at t_dry_bulb.
    """
    hum_ratio = ((moist_air_enthalpy / 1000. - cSpecificHeatDryAir * t_dry_bulb)
                 / (cLatentHeatVaporization + cSpecificHeatWaterVapor * t_dry_bulb))
    _check_hum_ratio(hum_ratio)
    return hum_ratio
