"""Wet-bulb temperature of moist air.

The humidity ratio follows in closed form from the dry-bulb and wet-bulb
temperature through the enthalpy balance of adiabatic saturation (ASHRAE
Handbook - Fundamentals (2017) ch. 1, eq. 33 and 35). The inverse problem,
finding the wet-bulb temperature of air with a known humidity ratio, has no
closed-form solution and is solved by bisection.
"""
from .constants import MAX_ITER_COUNT, MIN_HUM_RATIO, SATURATION_RTOL
from .dew_point import (
    dew_point_temperature,
    dew_point_from_humidity_ratio,
    humidity_ratio_from_dew_point
)
from .exceptions import InputRangeError, ConvergenceError
from .humidity import (
    saturation_humidity_ratio,
    vapor_pressure_from_humidity_ratio,
    humidity_ratio_from_relative_humidity,
    relative_humidity_from_humidity_ratio
)
from .logging import ModuleLogger
from .saturation import saturation_pressure
from .units import (
    UnitSystemContext,
    check_temperature,
    check_pressure,
    check_humidity_ratio
)

logger = ModuleLogger.get_logger(__name__)

# relative distance to the total pressure of the highest saturation pressure
# a wet-bulb candidate may have when the dry bulb is above the boiling point
_BOILING_MARGIN = 1e-3


def _check_not_above_dry_bulb(
    context: UnitSystemContext,
    temperature: float,
    dry_bulb_temp: float,
    name: str
) -> None:
    if temperature > dry_bulb_temp:
        raise InputRangeError(
            f"The {name} ({temperature} {context.temperature_unit}) cannot "
            f"be above the dry-bulb temperature ({dry_bulb_temp} "
            f"{context.temperature_unit})."
        )


def humidity_ratio_from_wet_bulb(
    context: UnitSystemContext,
    dry_bulb_temp: float,
    wet_bulb_temp: float,
    pressure: float
) -> float:
    """Returns the humidity ratio implied by the adiabatic saturation balance
    for the given dry-bulb and wet-bulb temperature.

    Above the freezing point the wet bulb is covered with liquid water,
    below the freezing point with ice.
    """
    check_temperature(context, dry_bulb_temp)
    _check_not_above_dry_bulb(context, wet_bulb_temp, dry_bulb_temp, 'wet-bulb temperature')
    W_s = saturation_humidity_ratio(context, wet_bulb_temp, pressure)
    T, T_wb = dry_bulb_temp, wet_bulb_temp
    if context.is_ip:
        if T_wb >= context.freezing_point:
            W = ((1093.0 - 0.556 * T_wb) * W_s - 0.240 * (T - T_wb)) / (1093.0 + 0.444 * T - T_wb)
        else:
            W = ((1220.0 - 0.04 * T_wb) * W_s - 0.240 * (T - T_wb)) / (1220.0 + 0.444 * T - 0.48 * T_wb)
    else:
        if T_wb >= context.freezing_point:
            W = ((2501.0 - 2.326 * T_wb) * W_s - 1.006 * (T - T_wb)) / (2501.0 + 1.86 * T - 4.186 * T_wb)
        else:
            W = ((2830.0 - 0.24 * T_wb) * W_s - 1.006 * (T - T_wb)) / (2830.0 + 1.86 * T - 2.1 * T_wb)
    return max(W, MIN_HUM_RATIO)


def wet_bulb_temperature(
    context: UnitSystemContext,
    dry_bulb_temp: float,
    humidity_ratio: float,
    pressure: float,
    max_iter: int = MAX_ITER_COUNT
) -> float:
    """Returns the wet-bulb temperature (°C or °F) of moist air.

    The wet-bulb temperature lies between the dew-point temperature and the
    dry-bulb temperature. This bracket is halved at each iteration: the
    humidity ratio implied by the midpoint (`humidity_ratio_from_wet_bulb`)
    is compared with the target humidity ratio, and the sign of the
    difference tells which half holds the solution. The search stops when
    the bracket is no wider than the tolerance of the context.

    When the dry bulb is at or above the boiling point of water at
    `pressure`, the air cannot be saturated at the dry bulb; the upper end
    of the bracket is then put just below the boiling point. When the dew
    point of very dry air lies below the range of the saturation pressure
    correlations, the lower end of the bracket is the lowest temperature of
    that range.

    Parameters
    ----------
    context:
        Unit system context.
    dry_bulb_temp:
        Dry-bulb temperature (°C or °F).
    humidity_ratio:
        Humidity ratio (kg_w/kg_da or lb_w/lb_da).
    pressure:
        Atmospheric pressure (Pa or psi).
    max_iter:
        Maximum number of bisection steps.

    Returns
    -------
    The wet-bulb temperature, which equals `dry_bulb_temp` for saturated air
    and is lower otherwise.

    Raises
    ------
    InputRangeError
        If an input is out of range, or if the humidity ratio exceeds the
        saturation humidity ratio at the dry-bulb temperature.
    ConvergenceError
        If the bracket is still wider than the tolerance after `max_iter`
        bisection steps. The error carries the midpoint of the last bracket
        and the humidity ratio residual at that midpoint.
    """
    check_temperature(context, dry_bulb_temp)
    check_pressure(context, pressure)
    check_humidity_ratio(humidity_ratio)
    W = max(humidity_ratio, MIN_HUM_RATIO)
    boiling = saturation_pressure(context, dry_bulb_temp) >= pressure
    if boiling:
        # no saturation limit at the dry bulb; candidates stay just below
        # the boiling point at this pressure
        T_high = dew_point_temperature(
            context,
            (1.0 - _BOILING_MARGIN) * pressure,
            dry_bulb_temp
        )
    else:
        W_sat = saturation_humidity_ratio(context, dry_bulb_temp, pressure)
        if W > W_sat * (1.0 + SATURATION_RTOL):
            raise InputRangeError(
                f"The humidity ratio {humidity_ratio} exceeds the saturation "
                f"humidity ratio {W_sat} at {dry_bulb_temp} "
                f"{context.temperature_unit}."
            )
        if W >= W_sat:
            return dry_bulb_temp
        T_high = dry_bulb_temp

    p_w = vapor_pressure_from_humidity_ratio(context, W, pressure)
    if p_w < saturation_pressure(context, context.min_temperature):
        # dew point below the range of the saturation correlations
        T_low = context.min_temperature
    else:
        T_low = dew_point_temperature(context, p_w, dry_bulb_temp)
    if T_low >= T_high:
        raise InputRangeError(
            f"The humidity ratio {humidity_ratio} is too high for a "
            f"wet-bulb temperature below the boiling point at {pressure} "
            f"{context.pressure_unit}."
        )
    T_wb = 0.5 * (T_low + T_high)
    i = 0
    while T_high - T_low > context.tolerance:
        if i >= max_iter:
            residual = humidity_ratio_from_wet_bulb(context, dry_bulb_temp, T_wb, pressure) - W
            logger.warning(
                f"Wet-bulb search did not converge within {max_iter} "
                f"iterations (bracket [{T_low}, {T_high}] "
                f"{context.temperature_unit}, residual {residual:.3e})."
            )
            raise ConvergenceError(
                f"No wet-bulb temperature within tolerance "
                f"{context.tolerance} was found after {max_iter} iterations.",
                estimate=T_wb,
                residual=residual,
                iterations=i
            )
        i += 1
        residual = humidity_ratio_from_wet_bulb(context, dry_bulb_temp, T_wb, pressure) - W
        # a zero residual can come from the humidity ratio floor, not the root
        if residual > 0.0:
            T_high = T_wb
        else:
            T_low = T_wb
        T_wb = 0.5 * (T_low + T_high)
    logger.debug(
        f"Wet bulb {T_wb:.4f} {context.temperature_unit} found after "
        f"{i} iterations."
    )
    return T_wb


def wet_bulb_from_relative_humidity(
    context: UnitSystemContext,
    dry_bulb_temp: float,
    relative_humidity: float,
    pressure: float
) -> float:
    W = humidity_ratio_from_relative_humidity(context, dry_bulb_temp, relative_humidity, pressure)
    return wet_bulb_temperature(context, dry_bulb_temp, W, pressure)


def wet_bulb_from_dew_point(
    context: UnitSystemContext,
    dry_bulb_temp: float,
    dew_point_temp: float,
    pressure: float
) -> float:
    _check_not_above_dry_bulb(context, dew_point_temp, dry_bulb_temp, 'dew-point temperature')
    W = humidity_ratio_from_dew_point(context, dew_point_temp, pressure)
    return wet_bulb_temperature(context, dry_bulb_temp, W, pressure)


def relative_humidity_from_wet_bulb(
    context: UnitSystemContext,
    dry_bulb_temp: float,
    wet_bulb_temp: float,
    pressure: float
) -> float:
    W = humidity_ratio_from_wet_bulb(context, dry_bulb_temp, wet_bulb_temp, pressure)
    return relative_humidity_from_humidity_ratio(context, dry_bulb_temp, W, pressure)


def dew_point_from_wet_bulb(
    context: UnitSystemContext,
    dry_bulb_temp: float,
    wet_bulb_temp: float,
    pressure: float
) -> float:
    W = humidity_ratio_from_wet_bulb(context, dry_bulb_temp, wet_bulb_temp, pressure)
    return dew_point_from_humidity_ratio(context, dry_bulb_temp, W, pressure)
