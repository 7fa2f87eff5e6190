"""Conversions between the equivalent representations of the moisture content
of air: vapor pressure, humidity ratio, relative humidity, degree of
saturation and specific humidity.

All conversions are closed form (ASHRAE Handbook - Fundamentals (2017) ch. 1,
eq. 12, 20, 22 and 23). Every humidity ratio returned by this module is
floored at `MIN_HUM_RATIO`: a humidity ratio of exactly zero (perfectly dry
air) is a singularity of several downstream formulas (the logarithm of the
vapor pressure in the dew-point solver amongst others) and is therefore
replaced by this very small positive value.
"""
import math

from .constants import MIN_HUM_RATIO, MOLAR_MASS_RATIO, SATURATION_RTOL
from .exceptions import InputRangeError
from .saturation import saturation_pressure
from .units import (
    UnitSystemContext,
    check_temperature,
    check_pressure,
    check_humidity_ratio,
    check_fraction
)


def _check_vapor_pressure(context: UnitSystemContext, vapor_pressure: float) -> None:
    if not math.isfinite(vapor_pressure) or vapor_pressure < 0.0:
        raise InputRangeError(
            f"The partial pressure of water vapor cannot be negative, "
            f"got {vapor_pressure} {context.pressure_unit}."
        )


def humidity_ratio_from_vapor_pressure(
    context: UnitSystemContext,
    vapor_pressure: float,
    total_pressure: float
) -> float:
    """Returns the humidity ratio (kg_w/kg_da or lb_w/lb_da) of moist air.

    Parameters
    ----------
    vapor_pressure:
        Partial pressure of water vapor in moist air (Pa or psi).
    total_pressure:
        Atmospheric pressure (Pa or psi).
    """
    check_pressure(context, total_pressure)
    _check_vapor_pressure(context, vapor_pressure)
    if vapor_pressure >= total_pressure:
        raise InputRangeError(
            f"The partial pressure of water vapor ({vapor_pressure} "
            f"{context.pressure_unit}) must be smaller than the total "
            f"pressure ({total_pressure} {context.pressure_unit})."
        )
    humidity_ratio = MOLAR_MASS_RATIO * vapor_pressure / (total_pressure - vapor_pressure)
    return max(humidity_ratio, MIN_HUM_RATIO)


def vapor_pressure_from_humidity_ratio(
    context: UnitSystemContext,
    humidity_ratio: float,
    total_pressure: float
) -> float:
    """Returns the partial pressure of water vapor (Pa or psi) of moist air
    with the given humidity ratio at the given total pressure.
    """
    check_pressure(context, total_pressure)
    check_humidity_ratio(humidity_ratio)
    humidity_ratio = max(humidity_ratio, MIN_HUM_RATIO)
    return total_pressure * humidity_ratio / (MOLAR_MASS_RATIO + humidity_ratio)


def relative_humidity_from_vapor_pressure(
    context: UnitSystemContext,
    dry_bulb_temp: float,
    vapor_pressure: float
) -> float:
    """Returns the relative humidity (fraction between 0 and 1).

    Raises
    ------
    InputRangeError
        If the vapor pressure is negative or exceeds the saturation pressure
        at `dry_bulb_temp` (super-saturated air).
    """
    check_temperature(context, dry_bulb_temp)
    _check_vapor_pressure(context, vapor_pressure)
    p_ws = saturation_pressure(context, dry_bulb_temp)
    if vapor_pressure > p_ws * (1.0 + SATURATION_RTOL):
        raise InputRangeError(
            f"The partial pressure of water vapor ({vapor_pressure} "
            f"{context.pressure_unit}) exceeds the saturation pressure "
            f"({p_ws} {context.pressure_unit}) at {dry_bulb_temp} "
            f"{context.temperature_unit}."
        )
    return min(vapor_pressure / p_ws, 1.0)


def vapor_pressure_from_relative_humidity(
    context: UnitSystemContext,
    dry_bulb_temp: float,
    relative_humidity: float
) -> float:
    """Returns the partial pressure of water vapor (Pa or psi) for the given
    relative humidity (fraction between 0 and 1).
    """
    check_temperature(context, dry_bulb_temp)
    check_fraction(relative_humidity, 'relative humidity')
    return relative_humidity * saturation_pressure(context, dry_bulb_temp)


def saturation_humidity_ratio(
    context: UnitSystemContext,
    dry_bulb_temp: float,
    pressure: float
) -> float:
    """Returns the humidity ratio of saturated air."""
    check_temperature(context, dry_bulb_temp)
    check_pressure(context, pressure)
    p_ws = saturation_pressure(context, dry_bulb_temp)
    if p_ws >= pressure:
        # water boils at this temperature and pressure
        raise InputRangeError(
            f"The saturation pressure at {dry_bulb_temp} "
            f"{context.temperature_unit} ({p_ws} {context.pressure_unit}) is "
            f"not below the total pressure ({pressure} {context.pressure_unit})."
        )
    humidity_ratio = MOLAR_MASS_RATIO * p_ws / (pressure - p_ws)
    return max(humidity_ratio, MIN_HUM_RATIO)


def humidity_ratio_from_relative_humidity(
    context: UnitSystemContext,
    dry_bulb_temp: float,
    relative_humidity: float,
    pressure: float
) -> float:
    p_w = vapor_pressure_from_relative_humidity(context, dry_bulb_temp, relative_humidity)
    return humidity_ratio_from_vapor_pressure(context, p_w, pressure)


def relative_humidity_from_humidity_ratio(
    context: UnitSystemContext,
    dry_bulb_temp: float,
    humidity_ratio: float,
    pressure: float
) -> float:
    p_w = vapor_pressure_from_humidity_ratio(context, humidity_ratio, pressure)
    return relative_humidity_from_vapor_pressure(context, dry_bulb_temp, p_w)


def degree_of_saturation(
    context: UnitSystemContext,
    dry_bulb_temp: float,
    humidity_ratio: float,
    pressure: float
) -> float:
    """Returns the degree of saturation, i.e. the ratio of the humidity ratio
    of moist air to the humidity ratio of saturated air at the same
    temperature and pressure.
    """
    check_humidity_ratio(humidity_ratio)
    humidity_ratio = max(humidity_ratio, MIN_HUM_RATIO)
    return humidity_ratio / saturation_humidity_ratio(context, dry_bulb_temp, pressure)


def humidity_ratio_from_degree_of_saturation(
    context: UnitSystemContext,
    dry_bulb_temp: float,
    degree_of_saturation: float,
    pressure: float
) -> float:
    check_fraction(degree_of_saturation, 'degree of saturation')
    humidity_ratio = degree_of_saturation * saturation_humidity_ratio(context, dry_bulb_temp, pressure)
    return max(humidity_ratio, MIN_HUM_RATIO)


def specific_humidity_from_humidity_ratio(humidity_ratio: float) -> float:
    """Returns the specific humidity (mass of water vapor per unit mass of
    moist air).
    """
    check_humidity_ratio(humidity_ratio)
    humidity_ratio = max(humidity_ratio, MIN_HUM_RATIO)
    return humidity_ratio / (1.0 + humidity_ratio)


def humidity_ratio_from_specific_humidity(specific_humidity: float) -> float:
    if not 0.0 <= specific_humidity < 1.0:
        raise InputRangeError(
            f"The specific humidity must be within [0, 1), got {specific_humidity}."
        )
    humidity_ratio = specific_humidity / (1.0 - specific_humidity)
    return max(humidity_ratio, MIN_HUM_RATIO)


def vapor_pressure_deficit(
    context: UnitSystemContext,
    dry_bulb_temp: float,
    humidity_ratio: float,
    pressure: float
) -> float:
    """Returns the difference between the saturation pressure and the actual
    partial pressure of water vapor (Pa or psi).
    """
    check_temperature(context, dry_bulb_temp)
    p_w = vapor_pressure_from_humidity_ratio(context, humidity_ratio, pressure)
    return saturation_pressure(context, dry_bulb_temp) - p_w
