"""Enthalpy, specific volume and density of dry and moist air.

Closed-form correlations of ASHRAE Handbook - Fundamentals (2017) ch. 1,
eq. 26 to 32. Enthalpies are per unit mass of dry air: kJ/kg_da in SI and
Btu/lb_da in IP. Specific volumes are per unit mass of dry air as well,
densities are of the moist air mixture.
"""
from .constants import GAS_CONSTANT_RATIO, MIN_HUM_RATIO, PSI_TO_LBF_PER_FT2
from .humidity import saturation_humidity_ratio
from .units import (
    UnitSystemContext,
    check_temperature,
    check_pressure,
    check_humidity_ratio
)


# (cp_da, h_fg, cp_v) of h = cp_da * T + W * (h_fg + cp_v * T)
_ENTHALPY_COEFFICIENTS_SI = (1.006, 2501.0, 1.86)
_ENTHALPY_COEFFICIENTS_IP = (0.240, 1061.0, 0.444)


def _enthalpy_coefficients(context: UnitSystemContext) -> tuple[float, float, float]:
    return _ENTHALPY_COEFFICIENTS_IP if context.is_ip else _ENTHALPY_COEFFICIENTS_SI


def _pressure_factor(context: UnitSystemContext) -> float:
    # the IP gas constant is in ft.lbf/lb/R, so psi must be converted to lbf/ft2
    return PSI_TO_LBF_PER_FT2 if context.is_ip else 1.0


def dry_air_enthalpy(context: UnitSystemContext, dry_bulb_temp: float) -> float:
    """Returns the specific enthalpy of dry air (kJ/kg_da or Btu/lb_da)."""
    check_temperature(context, dry_bulb_temp)
    cp_da, _, _ = _enthalpy_coefficients(context)
    return cp_da * dry_bulb_temp


def dry_air_density(context: UnitSystemContext, dry_bulb_temp: float, pressure: float) -> float:
    """Returns the density of dry air (kg/m3 or lb/ft3)."""
    check_temperature(context, dry_bulb_temp)
    check_pressure(context, pressure)
    return (
        _pressure_factor(context) * pressure
        / context.gas_constant_dry_air / context.absolute(dry_bulb_temp)
    )


def dry_air_volume(context: UnitSystemContext, dry_bulb_temp: float, pressure: float) -> float:
    """Returns the specific volume of dry air (m3/kg or ft3/lb)."""
    return 1.0 / dry_air_density(context, dry_bulb_temp, pressure)


def enthalpy(context: UnitSystemContext, dry_bulb_temp: float, humidity_ratio: float) -> float:
    """Returns the specific enthalpy of moist air (kJ/kg_da or Btu/lb_da).

    Parameters
    ----------
    context:
        Unit system context.
    dry_bulb_temp:
        Dry-bulb temperature (°C or °F).
    humidity_ratio:
        Humidity ratio (kg_w/kg_da or lb_w/lb_da).
    """
    check_temperature(context, dry_bulb_temp)
    check_humidity_ratio(humidity_ratio)
    humidity_ratio = max(humidity_ratio, MIN_HUM_RATIO)
    cp_da, h_fg, cp_v = _enthalpy_coefficients(context)
    return cp_da * dry_bulb_temp + humidity_ratio * (h_fg + cp_v * dry_bulb_temp)


def dry_bulb_from_enthalpy(
    context: UnitSystemContext,
    enthalpy_: float,
    humidity_ratio: float
) -> float:
    """Returns the dry-bulb temperature (°C or °F) of moist air with the
    given specific enthalpy and humidity ratio.
    """
    check_humidity_ratio(humidity_ratio)
    humidity_ratio = max(humidity_ratio, MIN_HUM_RATIO)
    cp_da, h_fg, cp_v = _enthalpy_coefficients(context)
    dry_bulb_temp = (enthalpy_ - h_fg * humidity_ratio) / (cp_da + cp_v * humidity_ratio)
    check_temperature(context, dry_bulb_temp)
    return dry_bulb_temp


def humidity_ratio_from_enthalpy(
    context: UnitSystemContext,
    dry_bulb_temp: float,
    enthalpy_: float
) -> float:
    """Returns the humidity ratio of moist air with the given dry-bulb
    temperature and specific enthalpy.
    """
    check_temperature(context, dry_bulb_temp)
    cp_da, h_fg, cp_v = _enthalpy_coefficients(context)
    humidity_ratio = (enthalpy_ - cp_da * dry_bulb_temp) / (h_fg + cp_v * dry_bulb_temp)
    return max(humidity_ratio, MIN_HUM_RATIO)


def saturated_air_enthalpy(
    context: UnitSystemContext,
    dry_bulb_temp: float,
    pressure: float
) -> float:
    W_s = saturation_humidity_ratio(context, dry_bulb_temp, pressure)
    return enthalpy(context, dry_bulb_temp, W_s)


def moist_air_specific_heat(context: UnitSystemContext, humidity_ratio: float) -> float:
    """Returns the specific heat at constant pressure of moist air per unit
    mass of dry air (kJ/kg_da/K or Btu/lb_da/F).
    """
    check_humidity_ratio(humidity_ratio)
    cp_da, _, cp_v = _enthalpy_coefficients(context)
    return cp_da + cp_v * max(humidity_ratio, MIN_HUM_RATIO)


def specific_volume(
    context: UnitSystemContext,
    dry_bulb_temp: float,
    humidity_ratio: float,
    pressure: float
) -> float:
    """Returns the specific volume of moist air per unit mass of dry air
    (m3/kg_da or ft3/lb_da).
    """
    check_temperature(context, dry_bulb_temp)
    check_pressure(context, pressure)
    check_humidity_ratio(humidity_ratio)
    humidity_ratio = max(humidity_ratio, MIN_HUM_RATIO)
    return (
        context.gas_constant_dry_air * context.absolute(dry_bulb_temp)
        * (1.0 + GAS_CONSTANT_RATIO * humidity_ratio)
        / (_pressure_factor(context) * pressure)
    )


def dry_bulb_from_specific_volume(
    context: UnitSystemContext,
    specific_volume_: float,
    humidity_ratio: float,
    pressure: float
) -> float:
    """Returns the dry-bulb temperature (°C or °F) of moist air with the
    given specific volume, humidity ratio and pressure.
    """
    check_pressure(context, pressure)
    check_humidity_ratio(humidity_ratio)
    humidity_ratio = max(humidity_ratio, MIN_HUM_RATIO)
    T_abs = (
        specific_volume_ * _pressure_factor(context) * pressure
        / (context.gas_constant_dry_air * (1.0 + GAS_CONSTANT_RATIO * humidity_ratio))
    )
    dry_bulb_temp = T_abs - context.absolute_zero_offset
    check_temperature(context, dry_bulb_temp)
    return dry_bulb_temp


def density(
    context: UnitSystemContext,
    dry_bulb_temp: float,
    humidity_ratio: float,
    pressure: float
) -> float:
    """Returns the density of moist air (kg/m3 or lb/ft3)."""
    v = specific_volume(context, dry_bulb_temp, humidity_ratio, pressure)
    return (1.0 + max(humidity_ratio, MIN_HUM_RATIO)) / v
