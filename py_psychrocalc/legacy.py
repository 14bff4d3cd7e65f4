"""CamelCase names of the psychrometric functions, kept for code written against them.

Each alias calls the snake_case function of the same meaning and emits a DeprecationWarning.
Legacy callers that compared results against a numeric error sentinel must catch
`PsychroError` instead; no sentinel value is ever returned.
"""
from deprecated import deprecated

from py_psychrocalc import atmosphere, psychrometrics, state, units

__all__ = (
    'GetTKelvinFromTCelsius', 'GetTCelsiusFromTKelvin',
    'GetTFahrenheitFromTCelsius', 'GetTCelsiusFromTFahrenheit',
    'GetSatVapPres', 'GetSatHumRatio', 'GetSatAirEnthalpy',
    'GetHumRatioFromVapPres', 'GetVapPresFromHumRatio',
    'GetRelHumFromVapPres', 'GetVapPresFromRelHum',
    'GetTDewPointFromVapPres', 'GetVapPresFromTDewPoint',
    'GetTDewPointFromRelHum', 'GetRelHumFromTDewPoint',
    'GetTDewPointFromHumRatio', 'GetHumRatioFromTDewPoint',
    'GetHumRatioFromRelHum', 'GetRelHumFromHumRatio',
    'GetHumRatioFromTWetBulb', 'GetTWetBulbFromHumRatio',
    'GetRelHumFromTWetBulb', 'GetTWetBulbFromRelHum',
    'GetTDewPointFromTWetBulb', 'GetTWetBulbFromTDewPoint',
    'GetMoistAirEnthalpy', 'GetMoistAirVolume', 'GetMoistAirDensity',
    'GetDegreeOfSaturation', 'GetVPD',
    'GetDryAirEnthalpy', 'GetDryAirVolume', 'GetDryAirDensity',
    'GetStandardAtmPressure', 'GetStandardAtmTemperature',
    'GetSeaLevelPressure', 'GetStationPressure',
    'CalcPsychrometricsFromTWetBulb', 'CalcPsychrometricsFromTDewPoint', 'CalcPsychrometricsFromRelHum',
)


def _alias(func):
    return deprecated(reason=f"Use {func.__module__}.{func.__name__} instead", version="1.0.0")(func)


GetTKelvinFromTCelsius = _alias(units.get_t_kelvin_from_t_celsius)
GetTCelsiusFromTKelvin = _alias(units.get_t_celsius_from_t_kelvin)
GetTFahrenheitFromTCelsius = _alias(units.get_t_fahrenheit_from_t_celsius)
GetTCelsiusFromTFahrenheit = _alias(units.get_t_celsius_from_t_fahrenheit)

GetSatVapPres = _alias(psychrometrics.get_sat_vap_pres)
GetSatHumRatio = _alias(psychrometrics.get_sat_hum_ratio)
GetSatAirEnthalpy = _alias(psychrometrics.get_sat_air_enthalpy)

GetHumRatioFromVapPres = _alias(psychrometrics.get_hum_ratio_from_vap_pres)
GetVapPresFromHumRatio = _alias(psychrometrics.get_vap_pres_from_hum_ratio)
GetRelHumFromVapPres = _alias(psychrometrics.get_rel_hum_from_vap_pres)
GetVapPresFromRelHum = _alias(psychrometrics.get_vap_pres_from_rel_hum)
GetTDewPointFromVapPres = _alias(psychrometrics.get_t_dew_point_from_vap_pres)
GetVapPresFromTDewPoint = _alias(psychrometrics.get_vap_pres_from_t_dew_point)
GetTDewPointFromRelHum = _alias(psychrometrics.get_t_dew_point_from_rel_hum)
GetRelHumFromTDewPoint = _alias(psychrometrics.get_rel_hum_from_t_dew_point)
GetTDewPointFromHumRatio = _alias(psychrometrics.get_t_dew_point_from_hum_ratio)
GetHumRatioFromTDewPoint = _alias(psychrometrics.get_hum_ratio_from_t_dew_point)
GetHumRatioFromRelHum = _alias(psychrometrics.get_hum_ratio_from_rel_hum)
GetRelHumFromHumRatio = _alias(psychrometrics.get_rel_hum_from_hum_ratio)
GetHumRatioFromTWetBulb = _alias(psychrometrics.get_hum_ratio_from_t_wet_bulb)
GetTWetBulbFromHumRatio = _alias(psychrometrics.get_t_wet_bulb_from_hum_ratio)
GetRelHumFromTWetBulb = _alias(psychrometrics.get_rel_hum_from_t_wet_bulb)
GetTWetBulbFromRelHum = _alias(psychrometrics.get_t_wet_bulb_from_rel_hum)
GetTDewPointFromTWetBulb = _alias(psychrometrics.get_t_dew_point_from_t_wet_bulb)
GetTWetBulbFromTDewPoint = _alias(psychrometrics.get_t_wet_bulb_from_t_dew_point)

GetMoistAirEnthalpy = _alias(psychrometrics.get_moist_air_enthalpy)
GetMoistAirVolume = _alias(psychrometrics.get_moist_air_volume)
GetMoistAirDensity = _alias(psychrometrics.get_moist_air_density)
GetDegreeOfSaturation = _alias(psychrometrics.get_degree_of_saturation)
GetVPD = _alias(psychrometrics.get_vapor_pressure_deficit)
GetDryAirEnthalpy = _alias(psychrometrics.get_dry_air_enthalpy)
GetDryAirVolume = _alias(psychrometrics.get_dry_air_volume)
GetDryAirDensity = _alias(psychrometrics.get_dry_air_density)

GetStandardAtmPressure = _alias(atmosphere.get_standard_atm_pressure)
GetStandardAtmTemperature = _alias(atmosphere.get_standard_atm_temperature)
GetSeaLevelPressure = _alias(atmosphere.get_sea_level_pressure)
GetStationPressure = _alias(atmosphere.get_station_pressure)

CalcPsychrometricsFromTWetBulb = _alias(state.calc_psychrometrics_from_t_wet_bulb)
CalcPsychrometricsFromTDewPoint = _alias(state.calc_psychrometrics_from_t_dew_point)
CalcPsychrometricsFromRelHum = _alias(state.calc_psychrometrics_from_rel_hum)
