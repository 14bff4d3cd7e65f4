import logging

import pytest

from py_psychrocalc import (
    InvalidHumidityRatio,
    DomainError,
    SolverConfig,
    WetBulbConvergenceError,
    basicConfig,
    get_hum_ratio_from_rel_hum,
    get_hum_ratio_from_t_wet_bulb,
    get_solver_config,
    get_t_dew_point_from_hum_ratio,
    get_t_wet_bulb_from_hum_ratio,
    get_t_wet_bulb_from_rel_hum,
)
from py_psychrocalc.config import set_solver_config

P = 101325.0


class TestWetBulbSolver:
    """Bisection inverse of the wet bulb -> humidity ratio relation"""

    @pytest.mark.parametrize("t_dry_bulb", [-20, -5, 0, 10, 25, 40, 60])
    @pytest.mark.parametrize("rel_hum", [0.1, 0.5, 0.9, 1.0])
    def test_convergence(self, t_dry_bulb, rel_hum):
        hum_ratio = get_hum_ratio_from_rel_hum(t_dry_bulb, rel_hum, P)
        t_wet_bulb = get_t_wet_bulb_from_hum_ratio(t_dry_bulb, hum_ratio, P)
        t_dew_point = get_t_dew_point_from_hum_ratio(t_dry_bulb, hum_ratio, P)

        assert t_dew_point <= t_wet_bulb <= t_dry_bulb
        assert pytest.approx(get_hum_ratio_from_t_wet_bulb(t_dry_bulb, t_wet_bulb, P), abs=5e-4) == hum_ratio

    @pytest.mark.parametrize("t_dry_bulb", [-20, 0, 25, 60])
    @pytest.mark.parametrize("hum_ratio", [1e-6, 1e-8])
    def test_convergence_very_dry_air(self, t_dry_bulb, hum_ratio):
        # dew point fit drops below -100 °C here, e.g. about -280 °C at 60 °C and 1e-8
        t_wet_bulb = get_t_wet_bulb_from_hum_ratio(t_dry_bulb, hum_ratio, P)

        assert -100 <= t_wet_bulb <= t_dry_bulb
        assert pytest.approx(get_hum_ratio_from_t_wet_bulb(t_dry_bulb, t_wet_bulb, P), abs=5e-4) == hum_ratio

    def test_very_dry_air_reference(self):
        assert pytest.approx(get_t_wet_bulb_from_hum_ratio(60, 1e-8, P), abs=0.05) == 21.25
        assert pytest.approx(get_t_wet_bulb_from_hum_ratio(60, 1e-6, P), abs=0.05) == 21.25

    def test_reference_value(self):
        # 25 °C, 20 °C wet bulb gives W ~ 0.0126; the solver must find 20 °C back
        hum_ratio = get_hum_ratio_from_t_wet_bulb(25, 20, P)
        assert pytest.approx(get_t_wet_bulb_from_hum_ratio(25, hum_ratio, P), abs=2e-3) == 20.0

    def test_wet_bulb_from_rel_hum(self):
        assert pytest.approx(get_t_wet_bulb_from_rel_hum(25, 0.5, P), abs=0.1) == 17.9

    def test_saturated_air(self):
        hum_ratio = get_hum_ratio_from_rel_hum(30, 1.0, P)
        assert pytest.approx(get_t_wet_bulb_from_hum_ratio(30, hum_ratio, P), abs=1e-3) == 30

    @pytest.mark.parametrize("hum_ratio", [0.0, -0.001])
    def test_invalid_hum_ratio(self, hum_ratio):
        with pytest.raises(InvalidHumidityRatio):
            get_t_wet_bulb_from_hum_ratio(25, hum_ratio, P)

    def test_dry_bulb_above_dew_point_fit(self):
        with pytest.raises(DomainError):
            get_t_wet_bulb_from_hum_ratio(95, 0.01, P)

    def test_tight_tolerance(self):
        config = SolverConfig(cWetBulbTolerance=1e-9)
        hum_ratio = get_hum_ratio_from_t_wet_bulb(25, 20, P)
        t_wet_bulb = get_t_wet_bulb_from_hum_ratio(25, hum_ratio, P, config=config)
        assert pytest.approx(t_wet_bulb, abs=1e-8) == 20.0

    def test_iteration_cap(self):
        config = SolverConfig(cWetBulbTolerance=1e-6, cMaxIterations=3)
        hum_ratio = get_hum_ratio_from_rel_hum(25, 0.5, P)
        with pytest.raises(WetBulbConvergenceError) as excinfo:
            get_t_wet_bulb_from_hum_ratio(25, hum_ratio, P, config=config)
        err = excinfo.value
        assert err.iterations_count == 3
        assert err.t_wet_bulb_inf < err.t_wet_bulb_sup
        assert err.t_wet_bulb_sup - err.t_wet_bulb_inf > 1e-6
        assert "after 3 iterations" in str(err)

    def test_default_config_converges_within_cap(self):
        # 100 °C bracket halves below 0.001 °C in 17 steps
        config = SolverConfig(cMaxIterations=17)
        hum_ratio = get_hum_ratio_from_rel_hum(60, 0.01, P)
        assert get_t_wet_bulb_from_hum_ratio(60, hum_ratio, P, config=config) < 60

    def test_process_wide_config(self):
        set_solver_config({'cMaxIterations': 2})
        assert get_solver_config().cMaxIterations == 2
        hum_ratio = get_hum_ratio_from_rel_hum(25, 0.5, P)
        with pytest.raises(WetBulbConvergenceError):
            get_t_wet_bulb_from_hum_ratio(25, hum_ratio, P)

    def test_basic_config_solver_mapping(self):
        basicConfig(solver={'cWetBulbTolerance': 0.5})
        assert get_solver_config().cWetBulbTolerance == 0.5
        assert get_solver_config().cMaxIterations == 100

    def test_iterations_logged(self, caplog):
        hum_ratio = get_hum_ratio_from_rel_hum(25, 0.5, P)
        with caplog.at_level(logging.DEBUG, logger='py_psychro'):
            get_t_wet_bulb_from_hum_ratio(25, hum_ratio, P)
        assert "iterations" in caplog.text
