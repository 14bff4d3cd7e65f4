"""py_psychrocalc exception types.

Every public function either returns a float or raises one of these exceptions.
There is no numeric error sentinel: a failed conversion can never be fed into further
arithmetic by accident.

Exception Hierarchy
-------------------

Exception (built-in Python)
├── ValueError
│   └── PsychroError
│       ├── DomainError
│       ├── InvalidRelativeHumidity
│       ├── InvalidHumidityRatio
│       ├── NegativeVaporPressure
│       ├── InvalidPressure
│       ├── DewPointAboveDryBulb
│       └── WetBulbAboveDryBulb
└── RuntimeError
    └── SolverRuntimeError
        └── WetBulbConvergenceError

Exception Types
---------------

Input/domain exceptions (PsychroError):

- DomainError: A temperature is outside the range of the correlation that consumes it,
  e.g. outside [-100, 200] °C for saturation vapor pressure, or above 93 °C for the
  dew-point fit.

- InvalidRelativeHumidity: Relative humidity outside (0, 1].

- InvalidHumidityRatio: Humidity ratio is not strictly positive. This also covers a
  humidity ratio computed upstream (e.g. from a very low wet-bulb temperature) that came
  out negative.

- NegativeVaporPressure: Partial pressure of water vapor below zero.

- InvalidPressure: Atmospheric pressure not strictly positive, or vapor pressure
  not below atmospheric pressure.

- DewPointAboveDryBulb, WetBulbAboveDryBulb: Physical ordering Tdp <= Tdb or Twb <= Tdb
  violated.

Solver exceptions:

- WetBulbConvergenceError: The wet-bulb bisection reached its iteration cap before the
  bracket shrank below tolerance. Contains:
  - iterations_count: Number of iterations performed
  - t_wet_bulb_inf, t_wet_bulb_sup: Final bracket in °C
"""
from __future__ import annotations

__all__ = (
    'PsychroError',
    'DomainError',
    'InvalidRelativeHumidity',
    'InvalidHumidityRatio',
    'NegativeVaporPressure',
    'InvalidPressure',
    'DewPointAboveDryBulb',
    'WetBulbAboveDryBulb',
    'SolverRuntimeError',
    'WetBulbConvergenceError',
)


class PsychroError(ValueError):
    """Base class for psychrometric input and domain errors.

    Attributes:
        value: The offending input value.
    """

    def __init__(self, message: str, value: float):
        self.value: float = value
        super().__init__(message)


class DomainError(PsychroError):
    """Temperature or altitude outside the valid range of a correlation."""

    def __init__(self, value: float, low: float, high: float, message: str = ""):
        self.low: float = low
        self.high: float = high
        super().__init__(message or f"Dry bulb temperature {value} °C is outside range [{low}, {high}] °C", value)


class InvalidRelativeHumidity(PsychroError):
    """Relative humidity outside (0, 1]."""

    def __init__(self, value: float):
        super().__init__(f"Relative humidity {value} is outside range (0, 1]", value)


class InvalidHumidityRatio(PsychroError):
    """Humidity ratio not strictly positive."""

    def __init__(self, value: float):
        super().__init__(f"Humidity ratio {value} kg/kg must be greater than 0", value)


class NegativeVaporPressure(PsychroError):
    """Partial pressure of water vapor is negative or not a number."""

    def __init__(self, value: float):
        super().__init__(f"Partial pressure of water vapor {value} Pa must be a non-negative number", value)


class InvalidPressure(PsychroError):
    """Atmospheric pressure not positive, or vapor pressure not below it."""

    def __init__(self, value: float, vap_pres: float = 0.0):
        self.vap_pres: float = vap_pres
        if value <= 0:
            msg = f"Atmospheric pressure {value} Pa must be greater than 0"
        else:
            msg = f"Partial pressure of water vapor {vap_pres} Pa must be below atmospheric pressure {value} Pa"
        super().__init__(msg, value)


class DewPointAboveDryBulb(PsychroError):
    """Dew point temperature above dry bulb temperature."""

    def __init__(self, t_dew_point: float, t_dry_bulb: float):
        self.t_dry_bulb: float = t_dry_bulb
        super().__init__(f"Dew point temperature {t_dew_point} °C is above dry bulb temperature {t_dry_bulb} °C",
                         t_dew_point)


class WetBulbAboveDryBulb(PsychroError):
    """Wet bulb temperature above dry bulb temperature."""

    def __init__(self, t_wet_bulb: float, t_dry_bulb: float):
        self.t_dry_bulb: float = t_dry_bulb
        super().__init__(f"Wet bulb temperature {t_wet_bulb} °C is above dry bulb temperature {t_dry_bulb} °C",
                         t_wet_bulb)


class SolverRuntimeError(RuntimeError):
    """Solver error."""


class WetBulbConvergenceError(SolverRuntimeError):
    """Exception for wet-bulb bisection hitting its iteration cap.

    Contains:
    - Iteration count
    - Final bracket [t_wet_bulb_inf, t_wet_bulb_sup]
    """

    def __init__(self, iterations_count: int, t_wet_bulb_inf: float, t_wet_bulb_sup: float, tolerance: float):
        self.iterations_count: int = iterations_count
        self.t_wet_bulb_inf: float = t_wet_bulb_inf
        self.t_wet_bulb_sup: float = t_wet_bulb_sup
        self.tolerance: float = tolerance
        super().__init__(f'Wet bulb bracket [{t_wet_bulb_inf}, {t_wet_bulb_sup}] °C '
                         f'wider than {tolerance} °C after {iterations_count} iterations.')
