import pytest

from py_psychrocalc.units import *


class TestTemperatureUnits:

    @pytest.mark.parametrize("celsius, kelvin", [(-273.15, 0.0), (0, 273.15), (25, 298.15)])
    def test_kelvin(self, celsius, kelvin):
        assert get_t_kelvin_from_t_celsius(celsius) == pytest.approx(kelvin)
        assert get_t_celsius_from_t_kelvin(kelvin) == pytest.approx(celsius)

    @pytest.mark.parametrize("celsius, fahrenheit", [(-40, -40), (0, 32), (100, 212), (37, 98.6)])
    def test_fahrenheit(self, celsius, fahrenheit):
        assert get_t_fahrenheit_from_t_celsius(celsius) == pytest.approx(fahrenheit)
        assert get_t_celsius_from_t_fahrenheit(fahrenheit) == pytest.approx(celsius)

    def test_rankine(self):
        assert get_t_rankine_from_t_fahrenheit(32) == pytest.approx(491.67)
        assert get_t_fahrenheit_from_t_rankine(0) == pytest.approx(-459.67)

    def test_no_domain_restriction(self):
        # below absolute zero is returned as is
        assert get_t_kelvin_from_t_celsius(-500) == pytest.approx(-226.85)
