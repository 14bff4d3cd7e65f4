"""Complete moist air state from dry bulb temperature, pressure and one humidity quantity.

Each `calc_psychrometrics_from_*` function resolves the humidity input to a humidity ratio,
then derives every other property from it through `py_psychrocalc.psychrometrics`. Any
failure on the way propagates unchanged; no partial state is returned.
"""
from __future__ import annotations

from typing_extensions import NamedTuple, Tuple

from py_psychrocalc.psychrometrics import (
    get_hum_ratio_from_t_wet_bulb,
    get_hum_ratio_from_t_dew_point,
    get_hum_ratio_from_rel_hum,
    get_t_dew_point_from_hum_ratio,
    get_t_wet_bulb_from_hum_ratio,
    get_rel_hum_from_hum_ratio,
    get_vap_pres_from_hum_ratio,
    get_moist_air_enthalpy,
    get_moist_air_volume,
    get_degree_of_saturation,
)
from py_psychrocalc.exceptions import DewPointAboveDryBulb

__all__ = (
    'MoistAirState',
    'calc_psychrometrics_from_t_wet_bulb',
    'calc_psychrometrics_from_t_dew_point',
    'calc_psychrometrics_from_rel_hum',
)


class MoistAirState(NamedTuple):
    """Psychrometric properties of one moist air state.

    Attributes:
        t_dry_bulb: Dry bulb temperature (°C)
        pressure: Atmospheric pressure (Pa)
        hum_ratio: Humidity ratio (kg_H2O/kg_dry_air)
        t_wet_bulb: Wet bulb temperature (°C)
        t_dew_point: Dew point temperature (°C)
        rel_hum: Relative humidity (fraction)
        vap_pres: Partial pressure of water vapor (Pa)
        moist_air_enthalpy: Enthalpy (J/kg_dry_air)
        moist_air_volume: Specific volume (m³/kg_dry_air)
        degree_of_saturation: Degree of saturation (fraction)
    """

    t_dry_bulb: float
    pressure: float
    hum_ratio: float
    t_wet_bulb: float
    t_dew_point: float
    rel_hum: float
    vap_pres: float
    moist_air_enthalpy: float
    moist_air_volume: float
    degree_of_saturation: float

    def formatted(self) -> Tuple[str, ...]:
        """Human readable "name: value unit" lines for display."""
        return (
            f"Dry bulb temperature: {self.t_dry_bulb:.2f} °C",
            f"Pressure: {self.pressure:.0f} Pa",
            f"Humidity ratio: {self.hum_ratio:.6f} kg/kg",
            f"Wet bulb temperature: {self.t_wet_bulb:.2f} °C",
            f"Dew point temperature: {self.t_dew_point:.2f} °C",
            f"Relative humidity: {self.rel_hum * 100:.1f} %",
            f"Vapor pressure: {self.vap_pres:.1f} Pa",
            f"Moist air enthalpy: {self.moist_air_enthalpy:.0f} J/kg",
            f"Moist air volume: {self.moist_air_volume:.4f} m³/kg",
            f"Degree of saturation: {self.degree_of_saturation:.4f}",
        )


def _state_from_hum_ratio(t_dry_bulb: float, hum_ratio: float, pressure: float, **known: float) -> MoistAirState:
    t_wet_bulb = known.get('t_wet_bulb')
    if t_wet_bulb is None:
        t_wet_bulb = get_t_wet_bulb_from_hum_ratio(t_dry_bulb, hum_ratio, pressure)
    t_dew_point = known.get('t_dew_point')
    if t_dew_point is None:
        t_dew_point = get_t_dew_point_from_hum_ratio(t_dry_bulb, hum_ratio, pressure)
    rel_hum = known.get('rel_hum')
    if rel_hum is None:
        rel_hum = get_rel_hum_from_hum_ratio(t_dry_bulb, hum_ratio, pressure)
    return MoistAirState(
        t_dry_bulb=t_dry_bulb,
        pressure=pressure,
        hum_ratio=hum_ratio,
        t_wet_bulb=t_wet_bulb,
        t_dew_point=t_dew_point,
        rel_hum=rel_hum,
        vap_pres=get_vap_pres_from_hum_ratio(hum_ratio, pressure),
        moist_air_enthalpy=get_moist_air_enthalpy(t_dry_bulb, hum_ratio),
        moist_air_volume=get_moist_air_volume(t_dry_bulb, hum_ratio, pressure),
        degree_of_saturation=get_degree_of_saturation(t_dry_bulb, hum_ratio, pressure),
    )


def calc_psychrometrics_from_t_wet_bulb(t_dry_bulb: float, t_wet_bulb: float, pressure: float) -> MoistAirState:
    """Moist air state from dry bulb (°C), wet bulb (°C) and pressure (Pa)."""
    hum_ratio = get_hum_ratio_from_t_wet_bulb(t_dry_bulb, t_wet_bulb, pressure)
    return _state_from_hum_ratio(t_dry_bulb, hum_ratio, pressure, t_wet_bulb=t_wet_bulb)


def calc_psychrometrics_from_t_dew_point(t_dry_bulb: float, t_dew_point: float, pressure: float) -> MoistAirState:
    """Moist air state from dry bulb (°C), dew point (°C) and pressure (Pa)."""
    if t_dew_point > t_dry_bulb:
        raise DewPointAboveDryBulb(t_dew_point, t_dry_bulb)
    hum_ratio = get_hum_ratio_from_t_dew_point(t_dew_point, pressure)
    return _state_from_hum_ratio(t_dry_bulb, hum_ratio, pressure, t_dew_point=t_dew_point)


def calc_psychrometrics_from_rel_hum(t_dry_bulb: float, rel_hum: float, pressure: float) -> MoistAirState:
    """Moist air state from dry bulb (°C), relative humidity (fraction) and pressure (Pa)."""
    hum_ratio = get_hum_ratio_from_rel_hum(t_dry_bulb, rel_hum, pressure)
    return _state_from_hum_ratio(t_dry_bulb, hum_ratio, pressure, rel_hum=rel_hum)
