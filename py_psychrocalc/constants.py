"""Physical constants and correlation coefficients for psychrometric calculations.

All values are SI. Correlations follow the ASHRAE Handbook - Fundamentals (2017), chapter 1
(psychrometrics), which in turn uses Hyland & Wexler (1983) for saturation pressure.

Constant Categories:
    - Moist air constants: gas constant ratio, specific heats, latent heat
    - Saturation pressure coefficients: over ice and over liquid water
    - Dew point fit coefficients: above and below freezing
    - Standard atmosphere constants
    - Conversion factors
    - Validity limits

References:
    - ASHRAE Handbook - Fundamentals (SI), 2017, chapter 1
    - Hyland, R.W. and A. Wexler (1983), ASHRAE Transactions 89(2A)
"""

# Third-party imports
from typing_extensions import Final

# =============================================================================
# Moist Air Constants
# =============================================================================

cMolecularWeightRatio: Final[float] = 0.621945  # Mw/Mda
"""Ratio of molecular weights of water vapor and dry air (dimensionless)"""

cDryAirGasConstant: Final[float] = 0.287042  # kJ/(kg·K)
"""Gas constant of dry air used in the specific volume formula (kJ/(kg·K))"""

cVolumeWaterFactor: Final[float] = 1.607858  # = 1/cMolecularWeightRatio
"""Humidity ratio multiplier in the specific volume formula (dimensionless)"""

cSpecificHeatDryAir: Final[float] = 1.006  # kJ/(kg·K)
"""Specific heat of dry air at constant pressure (kJ/(kg·K))"""

cSpecificHeatWaterVapor: Final[float] = 1.86  # kJ/(kg·K)
"""Specific heat of water vapor at constant pressure (kJ/(kg·K))"""

cSpecificHeatWater: Final[float] = 4.186  # kJ/(kg·K)
"""Specific heat of liquid water (kJ/(kg·K))"""

cLatentHeatVaporization: Final[float] = 2501.0  # kJ/kg at 0 °C
"""Latent heat of vaporization of water at 0 °C (kJ/kg)"""

cWetBulbLatentSlope: Final[float] = 2.326  # kJ/(kg·K)
"""Slope of latent heat with wet bulb temperature in the psychrometer equation (kJ/(kg·K))"""

# =============================================================================
# Saturation Vapor Pressure Coefficients (ln Pws, T in K)
# =============================================================================

# Over ice, -100 °C to 0 °C
cIceC1: Final[float] = -5.6745359e+03
cIceC2: Final[float] = 6.3925247
cIceC3: Final[float] = -9.677843e-03
cIceC4: Final[float] = 6.2215701e-07
cIceC5: Final[float] = 2.0747825e-09
cIceC6: Final[float] = -9.484024e-13
cIceC7: Final[float] = 4.1635019

# Over liquid water, 0 °C to 200 °C
cWaterC8: Final[float] = -5.8002206e+03
cWaterC9: Final[float] = 1.3914993
cWaterC10: Final[float] = -4.8640239e-02
cWaterC11: Final[float] = 4.1764768e-05
cWaterC12: Final[float] = -1.4452093e-08
cWaterC13: Final[float] = 6.5459673

# =============================================================================
# Dew Point Fit Coefficients (alpha = ln(Pw / 1000), Pw in Pa)
# =============================================================================

# 0 °C to 93 °C
cDewC14: Final[float] = 6.54
cDewC15: Final[float] = 14.526
cDewC16: Final[float] = 0.7389
cDewC17: Final[float] = 0.09486
cDewC18: Final[float] = 0.4569
cDewExponent: Final[float] = 0.1984

# Below 0 °C
cDewIceC0: Final[float] = 6.09
cDewIceC1: Final[float] = 12.608
cDewIceC2: Final[float] = 0.4959

# =============================================================================
# Standard Atmosphere Constants
# =============================================================================

cStandardPressurePa: Final[float] = 101325.0  # Pa
"""Standard atmospheric pressure at sea level (Pa)"""

cStandardTemperatureC: Final[float] = 15.0  # °C
"""Standard temperature at sea level (°C)"""

cLapseRateMetric: Final[float] = 0.0065  # K/m
"""Temperature lapse rate in the troposphere (K/m)"""

cPressureAltitudeFactor: Final[float] = 2.25577e-05  # 1/m
"""Altitude coefficient of the standard pressure formula (1/m)"""

cPressureExponent: Final[float] = 5.2559
"""Exponent of the standard pressure formula (dimensionless)"""

cAirGasConstant: Final[float] = 287.055  # J/(kg·K)
"""Gas constant of dry air used for the hypsometric equation (J/(kg·K))"""

cGravityMetric: Final[float] = 9.807  # m/s²
"""Gravitational acceleration used for the hypsometric equation (m/s²)"""

cTroposphereLimitMeters: Final[float] = 11000.0  # m
"""Upper altitude limit of the tropospheric lapse-rate model (m)"""

# =============================================================================
# Conversion Factors
# =============================================================================

cDegreesCtoK: Final[float] = 273.15  # K = °C + 273.15
"""Celsius to Kelvin conversion constant (K)"""

cDegreesFtoR: Final[float] = 459.67  # °R = °F + 459.67
"""Fahrenheit to Rankine conversion constant (°R)"""

# =============================================================================
# Validity Limits
# =============================================================================

cSatPresMinTempC: Final[float] = -100.0  # °C
"""Lower limit of the saturation vapor pressure correlation (°C)"""

cSatPresMaxTempC: Final[float] = 200.0  # °C
"""Upper limit of the saturation vapor pressure correlation (°C)"""

cDewPointMaxTempC: Final[float] = 93.0  # °C
"""Upper dry bulb limit of the dew point fit (°C)"""

__all__ = (
    # Moist air constants
    'cMolecularWeightRatio',
    'cDryAirGasConstant',
    'cVolumeWaterFactor',
    'cSpecificHeatDryAir',
    'cSpecificHeatWaterVapor',
    'cSpecificHeatWater',
    'cLatentHeatVaporization',
    'cWetBulbLatentSlope',
    # Saturation pressure coefficients
    'cIceC1', 'cIceC2', 'cIceC3', 'cIceC4', 'cIceC5', 'cIceC6', 'cIceC7',
    'cWaterC8', 'cWaterC9', 'cWaterC10', 'cWaterC11', 'cWaterC12', 'cWaterC13',
    # Dew point coefficients
    'cDewC14', 'cDewC15', 'cDewC16', 'cDewC17', 'cDewC18', 'cDewExponent',
    'cDewIceC0', 'cDewIceC1', 'cDewIceC2',
    # Standard atmosphere constants
    'cStandardPressurePa',
    'cStandardTemperatureC',
    'cLapseRateMetric',
    'cPressureAltitudeFactor',
    'cPressureExponent',
    'cAirGasConstant',
    'cGravityMetric',
    'cTroposphereLimitMeters',
    # Conversion factors
    'cDegreesCtoK',
    'cDegreesFtoR',
    # Validity limits
    'cSatPresMinTempC',
    'cSatPresMaxTempC',
    'cDewPointMaxTempC',
)
