"""
Complete psychrometric state of moist air, derived from the dry-bulb
temperature, the pressure and one measure of humidity.
"""
from dataclasses import dataclass

from .constants import MIN_HUM_RATIO
from .exceptions import InputRangeError
from .dew_point import dew_point_from_humidity_ratio, humidity_ratio_from_dew_point
from .humidity import (
    humidity_ratio_from_relative_humidity,
    relative_humidity_from_humidity_ratio,
    vapor_pressure_from_humidity_ratio,
    degree_of_saturation
)
from .properties import enthalpy, specific_volume, density
from .units import UnitSystemContext, check_humidity_ratio
from .wet_bulb import wet_bulb_temperature, humidity_ratio_from_wet_bulb


@dataclass(frozen=True)
class MoistAirState:
    """
    Psychrometric properties of moist air, in the units of the context the
    state was computed with.

    Attributes
    ----------
    dry_bulb_temp:
        Dry-bulb temperature (°C or °F).
    pressure:
        Atmospheric pressure (Pa or psi).
    humidity_ratio:
        Humidity ratio (kg_w/kg_da or lb_w/lb_da).
    wet_bulb_temp:
        Wet-bulb temperature (°C or °F).
    dew_point_temp:
        Dew-point temperature (°C or °F).
    relative_humidity:
        Relative humidity (fraction).
    vapor_pressure:
        Partial pressure of water vapor (Pa or psi).
    enthalpy:
        Specific enthalpy (kJ/kg_da or Btu/lb_da).
    specific_volume:
        Specific volume (m3/kg_da or ft3/lb_da).
    degree_of_saturation:
        Degree of saturation (fraction).
    density:
        Density of the moist air (kg/m3 or lb/ft3).
    """
    dry_bulb_temp: float
    pressure: float
    humidity_ratio: float
    wet_bulb_temp: float
    dew_point_temp: float
    relative_humidity: float
    vapor_pressure: float
    enthalpy: float
    specific_volume: float
    degree_of_saturation: float
    density: float


def _complete_state(
    context: UnitSystemContext,
    dry_bulb_temp: float,
    humidity_ratio: float,
    pressure: float,
    wet_bulb_temp: float | None = None,
    dew_point_temp: float | None = None
) -> MoistAirState:
    if wet_bulb_temp is None:
        wet_bulb_temp = wet_bulb_temperature(context, dry_bulb_temp, humidity_ratio, pressure)
    if dew_point_temp is None:
        dew_point_temp = dew_point_from_humidity_ratio(context, dry_bulb_temp, humidity_ratio, pressure)
    return MoistAirState(
        dry_bulb_temp=dry_bulb_temp,
        pressure=pressure,
        humidity_ratio=humidity_ratio,
        wet_bulb_temp=wet_bulb_temp,
        dew_point_temp=dew_point_temp,
        relative_humidity=relative_humidity_from_humidity_ratio(context, dry_bulb_temp, humidity_ratio, pressure),
        vapor_pressure=vapor_pressure_from_humidity_ratio(context, humidity_ratio, pressure),
        enthalpy=enthalpy(context, dry_bulb_temp, humidity_ratio),
        specific_volume=specific_volume(context, dry_bulb_temp, humidity_ratio, pressure),
        degree_of_saturation=degree_of_saturation(context, dry_bulb_temp, humidity_ratio, pressure),
        density=density(context, dry_bulb_temp, humidity_ratio, pressure)
    )


def state_from_humidity_ratio(
    context: UnitSystemContext,
    dry_bulb_temp: float,
    humidity_ratio: float,
    pressure: float
) -> MoistAirState:
    check_humidity_ratio(humidity_ratio)
    return _complete_state(context, dry_bulb_temp, max(humidity_ratio, MIN_HUM_RATIO), pressure)


def state_from_wet_bulb(
    context: UnitSystemContext,
    dry_bulb_temp: float,
    wet_bulb_temp: float,
    pressure: float
) -> MoistAirState:
    W = humidity_ratio_from_wet_bulb(context, dry_bulb_temp, wet_bulb_temp, pressure)
    return _complete_state(context, dry_bulb_temp, W, pressure, wet_bulb_temp=wet_bulb_temp)


def state_from_dew_point(
    context: UnitSystemContext,
    dry_bulb_temp: float,
    dew_point_temp: float,
    pressure: float
) -> MoistAirState:
    if dew_point_temp > dry_bulb_temp:
        raise InputRangeError(
            f"The dew-point temperature ({dew_point_temp} "
            f"{context.temperature_unit}) cannot be above the dry-bulb "
            f"temperature ({dry_bulb_temp} {context.temperature_unit})."
        )
    W = humidity_ratio_from_dew_point(context, dew_point_temp, pressure)
    return _complete_state(context, dry_bulb_temp, W, pressure, dew_point_temp=dew_point_temp)


def state_from_relative_humidity(
    context: UnitSystemContext,
    dry_bulb_temp: float,
    relative_humidity: float,
    pressure: float
) -> MoistAirState:
    W = humidity_ratio_from_relative_humidity(context, dry_bulb_temp, relative_humidity, pressure)
    return _complete_state(context, dry_bulb_temp, W, pressure)
