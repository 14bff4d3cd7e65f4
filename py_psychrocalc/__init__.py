"""LGPL library for psychrometric calculations of moist air in SI units."""

import importlib.metadata

__version__ = importlib.metadata.version("py_psychrocalc")
__author__ = "py_psychrocalc developers"
__copyright__ = "Copyright 2026 py_psychrocalc developers"

# Correlations from ASHRAE Handbook - Fundamentals (2017), chapter 1
__credits__ = ["ASHRAE Handbook - Fundamentals (2017)"]

# Standard library imports
import os
import sys

# Third-party imports
from typing_extensions import Optional

# Local imports
from .logger import logger as log
from .config import SolverConfigDict, set_solver_config

if sys.version_info[:2] < (3, 11):
    import tomli as tomllib
else:
    import tomllib


def _load_config(filepath: Optional[str] = None, suppress_warnings: bool = False) -> None:
    """Load solver configuration from a .pypsychro.toml file.

    Args:
        filepath: Path to configuration file. If None, searches for .pypsychro.toml or pypsychro.toml
        suppress_warnings: If True, suppress warning messages

    Raises:
        ValueError: If the `pypsychro.solver` table holds out-of-range values.
    """
    def find_pypsychro_toml(start_dir: str = os.getcwd()) -> Optional[str]:
        """Search for the configuration file starting from the specified directory and moving up.

        Args:
            start_dir: The directory to start searching from. Default is the current working directory.

        Returns:
            The absolute path to the configuration file if found, otherwise None.
        """
        current_dir = os.path.abspath(start_dir)
        while True:
            config_paths = [
                os.path.join(current_dir, '.pypsychro.toml'),
                os.path.join(current_dir, 'pypsychro.toml'),
            ]
            for config_path in config_paths:
                if os.path.exists(config_path):
                    return os.path.abspath(config_path)

            parent_dir = os.path.dirname(current_dir)

            # If we have reached the root directory, stop searching
            if parent_dir == current_dir:
                return None
            current_dir = parent_dir

    if filepath is None:
        if (filepath := find_pypsychro_toml()) is None:
            filepath = find_pypsychro_toml(os.path.dirname(__file__))

    if filepath is not None:
        log.debug(f"Found {os.path.basename(filepath)} at {os.path.dirname(filepath)}")

        with open(filepath, "rb") as fp:
            _config = tomllib.load(fp)

            if _pypsychro := _config.get('pypsychro'):
                if solver := _pypsychro.get('solver'):
                    set_solver_config(solver)
                else:
                    if not suppress_warnings:
                        log.warning("Config has no `pypsychro.solver` section")
            else:
                if not suppress_warnings:
                    log.warning("Config has no `pypsychro` section")

    log.debug("Solver configuration load success")


def _basic_config(filename: Optional[str] = None,
                  solver: Optional[SolverConfigDict] = None,
                  suppress_warnings: bool = False) -> None:
    """Load solver configuration from file or Mapping.

    Args:
        filename: Configuration file path
        solver: Dictionary of solver settings (`cWetBulbTolerance`, `cMaxIterations`)
        suppress_warnings: If True, suppress warning messages

    Raises:
        ValueError: If both filename and solver are provided
    """
    if filename and solver:
        raise ValueError("Can't use solver settings and config file at same time")
    if not filename and solver:
        set_solver_config(solver)
    else:
        # trying to load definitions from pypsychro.toml
        _load_config(filename, suppress_warnings)


basicConfig = _basic_config

basicConfig()


from .atmosphere import (get_standard_atm_pressure, get_standard_atm_temperature,
                         get_sea_level_pressure, get_station_pressure)
from .config import (SolverConfig, DEFAULT_SOLVER_CONFIG, create_solver_config,
                     get_solver_config, restore_solver_defaults)
from .exceptions import (PsychroError, DomainError, InvalidRelativeHumidity, InvalidHumidityRatio,
                         NegativeVaporPressure, InvalidPressure, DewPointAboveDryBulb, WetBulbAboveDryBulb,
                         SolverRuntimeError, WetBulbConvergenceError)
from .logger import logger, enable_file_logging, disable_file_logging
from .psychrometrics import (
    get_sat_vap_pres, get_sat_hum_ratio, get_sat_air_enthalpy,
    get_hum_ratio_from_vap_pres, get_vap_pres_from_hum_ratio,
    get_rel_hum_from_vap_pres, get_vap_pres_from_rel_hum,
    get_t_dew_point_from_vap_pres, get_vap_pres_from_t_dew_point,
    get_t_dew_point_from_rel_hum, get_rel_hum_from_t_dew_point,
    get_t_dew_point_from_hum_ratio, get_hum_ratio_from_t_dew_point,
    get_hum_ratio_from_rel_hum, get_rel_hum_from_hum_ratio,
    get_hum_ratio_from_t_wet_bulb, get_t_wet_bulb_from_hum_ratio,
    get_rel_hum_from_t_wet_bulb, get_t_wet_bulb_from_rel_hum,
    get_t_dew_point_from_t_wet_bulb, get_t_wet_bulb_from_t_dew_point,
    get_moist_air_enthalpy, get_moist_air_volume, get_moist_air_density,
    get_degree_of_saturation, get_vapor_pressure_deficit,
    get_dry_air_enthalpy, get_dry_air_volume, get_dry_air_density,
    get_t_dry_bulb_from_enthalpy_and_hum_ratio, get_hum_ratio_from_enthalpy_and_t_dry_bulb,
)
from .state import (MoistAirState, calc_psychrometrics_from_t_wet_bulb,
                    calc_psychrometrics_from_t_dew_point, calc_psychrometrics_from_rel_hum)
from .units import (get_t_kelvin_from_t_celsius, get_t_celsius_from_t_kelvin,
                    get_t_fahrenheit_from_t_celsius, get_t_celsius_from_t_fahrenheit,
                    get_t_rankine_from_t_fahrenheit, get_t_fahrenheit_from_t_rankine)

# DRY: build __all__ from global symbols
_SKIP_GLOBALS = {
    # Skip Python builtins
    "__name__", "__doc__", "__package__", "__loader__", "__spec__",
    "__file__", "__cached__", "__builtins__",
    # Skip imported modules
    "tomllib", "sys", "os", "importlib", "Optional", "log",
    # Skip private/internal symbols
    "_load_config", "_basic_config",
}
# Build __all__ from the module's global namespace
__all__ = [
    name for name in globals()
    if not name.startswith("_") and name not in _SKIP_GLOBALS
]
