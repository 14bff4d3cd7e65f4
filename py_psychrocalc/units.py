"""Temperature unit conversions.

Exact affine formulas with no domain restriction; these functions cannot fail.
"""

from py_psychrocalc.constants import cDegreesCtoK, cDegreesFtoR

__all__ = (
    'get_t_kelvin_from_t_celsius',
    'get_t_celsius_from_t_kelvin',
    'get_t_fahrenheit_from_t_celsius',
    'get_t_celsius_from_t_fahrenheit',
    'get_t_rankine_from_t_fahrenheit',
    'get_t_fahrenheit_from_t_rankine',
)


def get_t_kelvin_from_t_celsius(t_celsius: float) -> float:
    """Kelvin for given Celsius temperature."""
    return t_celsius + cDegreesCtoK


def get_t_celsius_from_t_kelvin(t_kelvin: float) -> float:
    """Celsius for given Kelvin temperature."""
    return t_kelvin - cDegreesCtoK


def get_t_fahrenheit_from_t_celsius(t_celsius: float) -> float:
    """Fahrenheit for given Celsius temperature."""
    return t_celsius * 9. / 5 + 32


def get_t_celsius_from_t_fahrenheit(t_fahrenheit: float) -> float:
    """Celsius for given Fahrenheit temperature."""
    return (t_fahrenheit - 32) * 5. / 9


def get_t_rankine_from_t_fahrenheit(t_fahrenheit: float) -> float:
    """Rankine for given Fahrenheit temperature."""
    return t_fahrenheit + cDegreesFtoR


def get_t_fahrenheit_from_t_rankine(t_rankine: float) -> float:
    """Fahrenheit for given Rankine temperature."""
    return t_rankine - cDegreesFtoR
