import pytest

from py_psychrocalc import *

pytestmark = pytest.mark.extended

P = 101325.0


def test_all_input_errors_are_value_errors():
    for exc_type in (DomainError, InvalidRelativeHumidity, InvalidHumidityRatio, NegativeVaporPressure,
                     InvalidPressure, DewPointAboveDryBulb, WetBulbAboveDryBulb):
        assert issubclass(exc_type, PsychroError)
        assert issubclass(exc_type, ValueError)
    assert issubclass(WetBulbConvergenceError, SolverRuntimeError)
    assert issubclass(WetBulbConvergenceError, RuntimeError)
    assert not issubclass(WetBulbConvergenceError, PsychroError)


@pytest.mark.parametrize("rel_hum", [0.0, -0.1, 1.0001, 1.5])
def test_invalid_rel_hum(rel_hum):
    with pytest.raises(InvalidRelativeHumidity) as excinfo:
        get_vap_pres_from_rel_hum(25, rel_hum)
    assert excinfo.value.value == rel_hum
    assert str(rel_hum) in str(excinfo.value)


@pytest.mark.parametrize("func, args", [
    (get_t_dew_point_from_rel_hum, (25, 0)),
    (get_hum_ratio_from_rel_hum, (25, 1.5, P)),
    (get_t_wet_bulb_from_rel_hum, (25, 0, P)),
    (calc_psychrometrics_from_rel_hum, (25, 2.0, P)),
])
def test_invalid_rel_hum_propagates(func, args):
    with pytest.raises(InvalidRelativeHumidity):
        func(*args)


def test_negative_vap_pres():
    with pytest.raises(NegativeVaporPressure):
        get_hum_ratio_from_vap_pres(-1, P)
    with pytest.raises(NegativeVaporPressure):
        get_rel_hum_from_vap_pres(25, -0.5)


def test_invalid_hum_ratio():
    with pytest.raises(InvalidHumidityRatio) as excinfo:
        get_vap_pres_from_hum_ratio(0, P)
    assert excinfo.value.value == 0
    for func, args in ((get_rel_hum_from_hum_ratio, (25, -0.01, P)),
                       (get_t_dew_point_from_hum_ratio, (25, 0, P))):
        with pytest.raises(InvalidHumidityRatio):
            func(*args)


def test_negative_hum_ratio_from_wet_bulb_is_rejected_downstream():
    # very dry air: the closed form yields W < 0 at 40 °C with a -30 °C wet bulb
    assert get_hum_ratio_from_t_wet_bulb(40, -30, P) < 0
    with pytest.raises(InvalidHumidityRatio):
        get_rel_hum_from_t_wet_bulb(40, -30, P)
    with pytest.raises(InvalidHumidityRatio):
        get_t_dew_point_from_t_wet_bulb(40, -30, P)
    with pytest.raises(InvalidHumidityRatio):
        calc_psychrometrics_from_t_wet_bulb(40, -30, P)


def test_invalid_pressure():
    with pytest.raises(InvalidPressure) as excinfo:
        get_hum_ratio_from_vap_pres(1000, 0)
    assert "greater than 0" in str(excinfo.value)
    with pytest.raises(InvalidPressure) as excinfo:
        get_hum_ratio_from_vap_pres(P, P)
    assert excinfo.value.vap_pres == P
    with pytest.raises(InvalidPressure):
        get_moist_air_volume(25, 0.01, -P)
    with pytest.raises(InvalidPressure):
        get_dry_air_density(25, 0)


def test_dew_point_above_dry_bulb():
    for func, args in ((get_rel_hum_from_t_dew_point, (20, 25)),
                       (get_t_wet_bulb_from_t_dew_point, (20, 25, P)),
                       (calc_psychrometrics_from_t_dew_point, (20, 25, P))):
        with pytest.raises(DewPointAboveDryBulb) as excinfo:
            func(*args)
        assert excinfo.value.value == 25
        assert excinfo.value.t_dry_bulb == 20


def test_wet_bulb_above_dry_bulb():
    for func, args in ((get_hum_ratio_from_t_wet_bulb, (20, 25, P)),
                       (get_rel_hum_from_t_wet_bulb, (20, 20.5, P)),
                       (get_t_dew_point_from_t_wet_bulb, (20, 25, P)),
                       (calc_psychrometrics_from_t_wet_bulb, (20, 25, P))):
        with pytest.raises(WetBulbAboveDryBulb):
            func(*args)


def test_domain_error_message_and_attrs():
    with pytest.raises(DomainError) as excinfo:
        get_sat_vap_pres(250)
    err = excinfo.value
    assert err.value == 250 and err.low == -100 and err.high == 200
    assert "250" in str(err)

    with pytest.raises(DomainError) as excinfo:
        get_t_dew_point_from_rel_hum(100, 0.5)
    assert "93" in str(excinfo.value)


def test_domain_error_propagates_through_network():
    with pytest.raises(DomainError):
        get_rel_hum_from_t_dew_point(25, -150)
    with pytest.raises(DomainError):
        get_hum_ratio_from_t_wet_bulb(25, -101, P)
    with pytest.raises(DomainError):
        get_degree_of_saturation(210, 0.01, P)


def test_wet_bulb_convergence_error_message():
    err = WetBulbConvergenceError(7, 10.0, 11.0, 0.001)
    assert "after 7 iterations" in str(err)
    assert err.iterations_count == 7
    assert err.tolerance == 0.001
