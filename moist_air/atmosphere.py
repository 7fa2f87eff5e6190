"""
Standard atmosphere and the reduction of pressure between station level and
sea level (ASHRAE Handbook - Fundamentals (2017) ch. 1, eq. 3 and 4; ch. 14).
Altitudes are in m (SI) or ft (IP).
"""
import math

from .constants import ZERO_CELSIUS_AS_KELVIN, ZERO_FAHRENHEIT_AS_RANKINE
from .exceptions import InputRangeError
from .units import UnitSystemContext, check_temperature, check_pressure


def standard_atmosphere_pressure(context: UnitSystemContext, altitude: float) -> float:
    """Returns the pressure of the standard atmosphere (Pa or psi) at the
    given altitude.

    Raises
    ------
    InputRangeError
        If the altitude is at or above the top of the model atmosphere
        (about 44.3 km or 145 000 ft), where the pressure would vanish.
    """
    if context.is_ip:
        p_0, base, unit = 14.696, 1.0 - 6.8754e-06 * altitude, 'ft'
    else:
        p_0, base, unit = 101325.0, 1.0 - 2.25577e-05 * altitude, 'm'
    if not base > 0.0:
        raise InputRangeError(
            f"The altitude {altitude} {unit} is above the "
            f"range of the standard atmosphere."
        )
    return p_0 * base ** 5.2559


def standard_atmosphere_temperature(context: UnitSystemContext, altitude: float) -> float:
    """Returns the temperature of the standard atmosphere (°C or °F) at the
    given altitude.
    """
    if context.is_ip:
        return 59.0 - 0.00356620 * altitude
    return 15.0 - 0.0065 * altitude


def sea_level_pressure(
    context: UnitSystemContext,
    station_pressure: float,
    altitude: float,
    dry_bulb_temp: float
) -> float:
    """Returns the pressure reduced to sea level (Pa or psi).

    The air column between the station and sea level is given the mean of
    the station temperature and the temperature at sea level that follows
    from the standard lapse rate.

    Parameters
    ----------
    station_pressure:
        Observed pressure at the station (Pa or psi).
    altitude:
        Altitude of the station above sea level (m or ft).
    dry_bulb_temp:
        Dry-bulb temperature at the station (°C or °F).
    """
    check_pressure(context, station_pressure, 'station pressure')
    check_temperature(context, dry_bulb_temp)
    if context.is_ip:
        T_column = dry_bulb_temp + 0.0036 * altitude / 2.0
        H = 53.351 * (T_column + ZERO_FAHRENHEIT_AS_RANKINE)
    else:
        T_column = dry_bulb_temp + 0.0065 * altitude / 2.0
        H = 287.055 * (T_column + ZERO_CELSIUS_AS_KELVIN) / 9.807
    return station_pressure * math.exp(altitude / H)


def station_pressure(
    context: UnitSystemContext,
    sea_level_pressure_: float,
    altitude: float,
    dry_bulb_temp: float
) -> float:
    """Returns the station pressure (Pa or psi) from the pressure reduced to
    sea level. Inverse of `sea_level_pressure`.
    """
    check_pressure(context, sea_level_pressure_, 'sea level pressure')
    return sea_level_pressure_ / sea_level_pressure(context, 1.0, altitude, dry_bulb_temp)
