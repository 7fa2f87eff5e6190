"""Dew-point temperature of moist air.

The saturation pressure correlations cannot be inverted in closed form, so
the dew point, the temperature at which the saturation pressure equals the
partial pressure of water vapor, is searched for numerically.
"""
import math

from .constants import MAX_ITER_COUNT, SATURATION_RTOL
from .exceptions import InputRangeError, ConvergenceError
from .humidity import (
    humidity_ratio_from_vapor_pressure,
    vapor_pressure_from_humidity_ratio,
    vapor_pressure_from_relative_humidity
)
from .logging import ModuleLogger
from .saturation import saturation_pressure, saturation_pressure_log_derivative
from .units import UnitSystemContext, check_temperature

logger = ModuleLogger.get_logger(__name__)


def dew_point_temperature(
    context: UnitSystemContext,
    vapor_pressure: float,
    dry_bulb_temp: float,
    max_iter: int = MAX_ITER_COUNT
) -> float:
    """Returns the dew-point temperature (°C or °F).

    The root of ``ln(pws(Td)) - ln(pw)`` is searched for inside the bracket
    ``[min_temperature, dry_bulb_temp]`` with Newton-Raphson steps, starting
    from the dry-bulb temperature. A Newton step that would leave the
    bracket is replaced by a bisection step, and the bracket is narrowed
    after each evaluation according to the sign of the residual. The search
    stops when two successive estimates are no more than the tolerance of
    the context apart.

    Parameters
    ----------
    context:
        Unit system context.
    vapor_pressure:
        Partial pressure of water vapor in moist air (Pa or psi).
    dry_bulb_temp:
        Dry-bulb temperature (°C or °F).
    max_iter:
        Maximum number of iterations.

    Returns
    -------
    The dew-point temperature, which equals `dry_bulb_temp` for saturated
    air and is lower otherwise.

    Raises
    ------
    InputRangeError
        If the vapor pressure is negative, exceeds the saturation pressure at
        the dry-bulb temperature, or is so low that the dew point would lie
        below the range of the saturation pressure correlations.
    ConvergenceError
        If no estimate within tolerance was found after `max_iter`
        iterations. The error carries the last estimate and the residual
        of `ln(pws)` at that estimate.
    """
    check_temperature(context, dry_bulb_temp)
    p_ws_db = saturation_pressure(context, dry_bulb_temp)
    if not math.isfinite(vapor_pressure) or vapor_pressure < 0.0:
        raise InputRangeError(
            f"The partial pressure of water vapor cannot be negative, "
            f"got {vapor_pressure} {context.pressure_unit}."
        )
    if vapor_pressure > p_ws_db * (1.0 + SATURATION_RTOL):
        raise InputRangeError(
            f"The partial pressure of water vapor ({vapor_pressure} "
            f"{context.pressure_unit}) exceeds the saturation pressure "
            f"({p_ws_db} {context.pressure_unit}) at {dry_bulb_temp} "
            f"{context.temperature_unit}."
        )
    if vapor_pressure >= p_ws_db:
        return dry_bulb_temp
    p_ws_min = saturation_pressure(context, context.min_temperature)
    if vapor_pressure < p_ws_min:
        raise InputRangeError(
            f"The partial pressure of water vapor ({vapor_pressure} "
            f"{context.pressure_unit}) is below the saturation pressure at "
            f"{context.min_temperature} {context.temperature_unit}: the dew "
            f"point is outside the range of the correlations."
        )

    ln_p_w = math.log(vapor_pressure)
    T_low, T_high = context.min_temperature, dry_bulb_temp
    T_dp = dry_bulb_temp
    for i in range(1, max_iter + 1):
        residual = math.log(saturation_pressure(context, T_dp)) - ln_p_w
        if residual == 0.0:
            return T_dp
        if residual > 0.0:
            T_high = T_dp
        else:
            T_low = T_dp
        T_new = T_dp - residual / saturation_pressure_log_derivative(context, T_dp)
        if not T_low < T_new < T_high:
            T_new = 0.5 * (T_low + T_high)
        if abs(T_new - T_dp) <= context.tolerance:
            logger.debug(
                f"Dew point {T_new:.4f} {context.temperature_unit} found "
                f"after {i} iterations."
            )
            return T_new
        T_dp = T_new
    residual = math.log(saturation_pressure(context, T_dp)) - ln_p_w
    logger.warning(
        f"Dew point search did not converge within {max_iter} iterations "
        f"(last estimate {T_dp} {context.temperature_unit}, "
        f"residual {residual:.3e})."
    )
    raise ConvergenceError(
        f"No dew point within tolerance {context.tolerance} was found "
        f"after {max_iter} iterations.",
        estimate=T_dp,
        residual=residual,
        iterations=max_iter
    )


def dew_point_from_humidity_ratio(
    context: UnitSystemContext,
    dry_bulb_temp: float,
    humidity_ratio: float,
    pressure: float
) -> float:
    p_w = vapor_pressure_from_humidity_ratio(context, humidity_ratio, pressure)
    return dew_point_temperature(context, p_w, dry_bulb_temp)


def dew_point_from_relative_humidity(
    context: UnitSystemContext,
    dry_bulb_temp: float,
    relative_humidity: float
) -> float:
    p_w = vapor_pressure_from_relative_humidity(context, dry_bulb_temp, relative_humidity)
    return dew_point_temperature(context, p_w, dry_bulb_temp)


def humidity_ratio_from_dew_point(
    context: UnitSystemContext,
    dew_point_temp: float,
    pressure: float
) -> float:
    """Returns the humidity ratio of moist air with the given dew point."""
    p_w = saturation_pressure(context, dew_point_temp)
    return humidity_ratio_from_vapor_pressure(context, p_w, pressure)


def relative_humidity_from_dew_point(
    context: UnitSystemContext,
    dry_bulb_temp: float,
    dew_point_temp: float
) -> float:
    if dew_point_temp > dry_bulb_temp:
        raise InputRangeError(
            f"The dew-point temperature ({dew_point_temp} "
            f"{context.temperature_unit}) cannot be above the dry-bulb "
            f"temperature ({dry_bulb_temp} {context.temperature_unit})."
        )
    return saturation_pressure(context, dew_point_temp) / saturation_pressure(context, dry_bulb_temp)
