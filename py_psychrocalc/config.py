"""Wet-bulb solver configuration.

The bisection in `get_t_wet_bulb_from_hum_ratio` stops when its bracket is no wider than
`cWetBulbTolerance` and fails after `cMaxIterations` halvings. Both can be passed per call
as a `SolverConfig`, or set process-wide with `set_solver_config()` / `basicConfig()`.

Classes:
    SolverConfig: Dataclass configuration for the wet-bulb solver
    SolverConfigDict: TypedDict version for flexible configuration

Configuration Constants:
    cWetBulbTolerance: Bracket width (°C) that ends the wet-bulb search
    cMaxIterations: Maximum number of bisection steps
"""
from __future__ import annotations

from dataclasses import dataclass, asdict

from typing_extensions import Optional, TypedDict, Union

__all__ = (
    'SolverConfig',
    'SolverConfigDict',
    'DEFAULT_SOLVER_CONFIG',
    'create_solver_config',
    'get_solver_config',
    'set_solver_config',
    'restore_solver_defaults',
)

cWetBulbTolerance: float = 0.001  # °C, bracket width to end the wet bulb search
cMaxIterations: int = 100  # maximum number of bisection steps


@dataclass(frozen=True)
class SolverConfig:
    """Configuration dataclass for the wet-bulb bisection solver.

    Attributes:
        cWetBulbTolerance: Bracket width in °C that ends the search. Defaults to 0.001 °C.
        cMaxIterations: Maximum number of bisection steps. A bracket of 300 °C needs
                        about 19 steps at the default tolerance. Defaults to 100.

    Examples:
        >>> config = SolverConfig(cWetBulbTolerance=1e-6)
    """

    cWetBulbTolerance: float = cWetBulbTolerance
    cMaxIterations: int = cMaxIterations

    def __post_init__(self):
        if not self.cWetBulbTolerance > 0:
            raise ValueError(f"cWetBulbTolerance must be positive, got {self.cWetBulbTolerance}")
        if not isinstance(self.cMaxIterations, int) or self.cMaxIterations < 1:
            raise ValueError(f"cMaxIterations must be a positive integer, got {self.cMaxIterations}")


#: Default configuration instance
DEFAULT_SOLVER_CONFIG: SolverConfig = SolverConfig()


class SolverConfigDict(TypedDict, total=False):
    """TypedDict for partial solver configuration.

    Unspecified fields take their values from DEFAULT_SOLVER_CONFIG when passed
    through create_solver_config().
    """

    cWetBulbTolerance: Optional[float]
    cMaxIterations: Optional[int]


def create_solver_config(interface_config: Optional[SolverConfigDict] = None) -> SolverConfig:
    """Create SolverConfig from optional dictionary configuration.

    Args:
        interface_config: Optional dictionary containing configuration overrides.

    Returns:
        SolverConfig with defaults merged with the overrides.

    Raises:
        ValueError: If an override is out of range.
        TypeError: If the dictionary holds unknown keys.
    """
    config = asdict(DEFAULT_SOLVER_CONFIG)
    if interface_config is not None and isinstance(interface_config, dict):
        config.update({k: v for k, v in interface_config.items() if v is not None})
    return SolverConfig(**config)


_active_config: SolverConfig = DEFAULT_SOLVER_CONFIG


def get_solver_config() -> SolverConfig:
    """Solver configuration used when a call passes none."""
    return _active_config


def set_solver_config(config: Union[SolverConfig, SolverConfigDict, None] = None) -> SolverConfig:
    """Replace the process-wide solver configuration.

    Args:
        config: SolverConfig instance, or partial dictionary merged over the defaults.

    Returns:
        The configuration now in effect.
    """
    global _active_config
    if isinstance(config, SolverConfig):
        _active_config = config
    else:
        _active_config = create_solver_config(config)
    return _active_config


def restore_solver_defaults() -> None:
    """Restore DEFAULT_SOLVER_CONFIG as the process-wide configuration."""
    global _active_config
    _active_config = DEFAULT_SOLVER_CONFIG
