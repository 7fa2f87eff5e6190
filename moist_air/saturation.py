"""Saturation vapor pressure of water over ice and over liquid water.

The correlations are those of ASHRAE Handbook - Fundamentals (2017) ch. 1,
eq. 5 (over ice, -100 °C up to the triple point) and eq. 6 (over liquid
water, from the triple point up to 200 °C). Both are written in the form
``ln(pws) = C1/T + C2 + C3*T + ... + Cn*ln(T)`` with T the absolute
temperature; the branch is selected by comparing the temperature with the
triple point of the context.
"""
import math

from .exceptions import InputRangeError
from .units import UnitSystemContext

# coefficients (C1, C2, C3, C4, C5, C6, C7) of the ln(pws) correlations
_COEFFICIENTS = {
    ('SI', 'ice'): (
        -5.6745359e+03, 6.3925247, -9.677843e-03, 6.2215701e-07,
        2.0747825e-09, -9.484024e-13, 4.1635019
    ),
    ('SI', 'liquid'): (
        -5.8002206e+03, 1.3914993, -4.8640239e-02, 4.1764768e-05,
        -1.4452093e-08, 0.0, 6.5459673
    ),
    ('IP', 'ice'): (
        -1.0214165e+04, -4.8932428, -5.3765794e-03, 1.9202377e-07,
        3.5575832e-10, -9.0344688e-14, 4.1635019
    ),
    ('IP', 'liquid'): (
        -1.0440397e+04, -1.1294650e+01, -2.7022355e-02, 1.2890360e-05,
        -2.4780681e-09, 0.0, 6.5459673
    )
}


def _check_range(context: UnitSystemContext, temperature: float) -> None:
    if not context.min_temperature <= temperature <= context.max_temperature:
        raise InputRangeError(
            f"The saturation pressure correlation is only valid between "
            f"{context.min_temperature} and {context.max_temperature} "
            f"{context.temperature_unit}, got {temperature} "
            f"{context.temperature_unit}."
        )


def _branch(context: UnitSystemContext, temperature: float) -> tuple[float, ...]:
    phase = 'ice' if temperature <= context.triple_point else 'liquid'
    return _COEFFICIENTS[(context.system.value, phase)]


def saturation_pressure(context: UnitSystemContext, temperature: float) -> float:
    """Returns the saturation vapor pressure of water (Pa or psi).

    Parameters
    ----------
    context:
        Unit system context.
    temperature:
        Dry-bulb temperature (°C or °F).

    Raises
    ------
    InputRangeError
        If `temperature` is outside the range of the correlations.
    """
    _check_range(context, temperature)
    c1, c2, c3, c4, c5, c6, c7 = _branch(context, temperature)
    T = context.absolute(temperature)
    ln_pws = (
        c1 / T + c2 + c3 * T + c4 * T ** 2
        + c5 * T ** 3 + c6 * T ** 4 + c7 * math.log(T)
    )
    return math.exp(ln_pws)


def saturation_pressure_log_derivative(context: UnitSystemContext, temperature: float) -> float:
    """Returns the derivative of ln(pws) with respect to temperature (1/K or
    1/R), i.e. the analytical derivative of the correlation used by
    `saturation_pressure`.
    """
    _check_range(context, temperature)
    c1, _, c3, c4, c5, c6, c7 = _branch(context, temperature)
    T = context.absolute(temperature)
    return (
        -c1 / T ** 2 + c3 + 2 * c4 * T + 3 * c5 * T ** 2
        + 4 * c6 * T ** 3 + c7 / T
    )
