import argparse
import logging
import sys
from importlib import metadata

from py_psychrocalc import basicConfig
from py_psychrocalc.logger import logger, enable_file_logging, disable_file_logging
from py_psychrocalc.atmosphere import get_standard_atm_pressure
from py_psychrocalc.exceptions import PsychroError, SolverRuntimeError
from py_psychrocalc.state import (calc_psychrometrics_from_rel_hum, calc_psychrometrics_from_t_dew_point,
                                  calc_psychrometrics_from_t_wet_bulb)

version = metadata.metadata("py_psychrocalc")['Version']


def add_humidity_group(parser):
    humidity = parser.add_argument_group('Humidity', 'Exactly one humidity parameter')
    exclusive = humidity.add_mutually_exclusive_group(required=True)
    exclusive.add_argument("-wb", "--t-wet-bulb", action="store", type=float, help="Wet bulb temperature, °C")
    exclusive.add_argument("-dp", "--t-dew-point", action="store", type=float, help="Dew point temperature, °C")
    exclusive.add_argument("-rh", "--rel-hum", action="store", type=float, help="Relative humidity, fraction (0, 1]")


def add_pressure_group(parser):
    pressure = parser.add_argument_group('Pressure', 'Atmospheric pressure (defaults to standard sea level)')
    exclusive = pressure.add_mutually_exclusive_group()
    exclusive.add_argument("-p", "--pressure", action="store", type=float, help="Atmospheric pressure, Pa")
    exclusive.add_argument("-a", "--altitude", action="store", type=float,
                           help="Altitude, m (standard atmosphere pressure)")


def get_arg_parser():
    parser = argparse.ArgumentParser(
        prog=f'pypsychro v{version}',
        description="Tool for psychrometric calculations of moist air (SI units)"
    )
    parser.add_argument("-db", "--t-dry-bulb", action="store", type=float, required=True,
                        help="Dry bulb temperature, °C")
    parser.add_argument("-c", "--config", action="store", help="Path to .pypsychro.toml")
    parser.add_argument("-v", "--version", action='version',
                        version=f'pypsychro v{version}', help="Show version")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug messages")
    parser.add_argument("-l", "--log-file", action="store", help="Also write log records to this file")

    add_humidity_group(parser)
    add_pressure_group(parser)
    return parser


def calculate(argv):
    if argv.config:
        basicConfig(argv.config)

    if argv.pressure is not None:
        pressure = argv.pressure
    else:
        pressure = get_standard_atm_pressure(argv.altitude or 0.)
        logger.debug(f"Using standard atmosphere pressure {pressure:.0f} Pa")

    if argv.t_wet_bulb is not None:
        return calc_psychrometrics_from_t_wet_bulb(argv.t_dry_bulb, argv.t_wet_bulb, pressure)
    if argv.t_dew_point is not None:
        return calc_psychrometrics_from_t_dew_point(argv.t_dry_bulb, argv.t_dew_point, pressure)
    return calc_psychrometrics_from_rel_hum(argv.t_dry_bulb, argv.rel_hum, pressure)


def main(args=None) -> int:
    parser = get_arg_parser()
    argv = parser.parse_args(args)

    if argv.debug:
        logger.setLevel(logging.DEBUG)
        logger.info("Debug messages enabled")

    if argv.log_file:
        enable_file_logging(argv.log_file)
    try:
        state = calculate(argv)
    except (PsychroError, SolverRuntimeError) as exc:
        logger.error(exc)
        return 1
    except (OSError, TypeError, ValueError) as exc:
        logger.exception(exc)
        return 2
    finally:
        if argv.log_file:
            disable_file_logging()

    print("\n".join(state.formatted()))
    return 0


if __name__ == '__main__':
    sys.exit(main())
