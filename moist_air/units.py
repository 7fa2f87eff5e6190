"""Unit system context of the psychrometric engine.

Every engine function takes a `UnitSystemContext` as its first argument. The
context is an immutable value: it holds the selected unit system together
with the constants that belong to it. Switching to another unit system
returns a new context, leaving the original one untouched, so that a context
shared between threads never exposes a tolerance and a gas constant of
different unit systems.

Units implied by the context:

======== ======== ======== ============ ==========
system   T        P        W            h
======== ======== ======== ============ ==========
SI       °C       Pa       kg_w/kg_da   kJ/kg_da
IP       °F       psi      lb_w/lb_da   Btu/lb_da
======== ======== ======== ============ ==========
"""
import math
from dataclasses import dataclass, field, replace
from enum import Enum

from .exceptions import InputRangeError
from .constants import (
    ZERO_CELSIUS_AS_KELVIN,
    ZERO_FAHRENHEIT_AS_RANKINE,
    R_DA_SI,
    R_DA_IP,
    FREEZING_POINT_WATER_SI,
    FREEZING_POINT_WATER_IP,
    TRIPLE_POINT_WATER_SI,
    TRIPLE_POINT_WATER_IP,
    TOLERANCE_SI,
    TOLERANCE_IP,
    MIN_TEMPERATURE_SI,
    MAX_TEMPERATURE_SI,
    MIN_TEMPERATURE_IP,
    MAX_TEMPERATURE_IP
)


class UnitSystem(Enum):
    SI = 'SI'
    IP = 'IP'


_SYSTEM_CONSTANTS = {
    UnitSystem.SI: {
        'gas_constant_dry_air': R_DA_SI,
        'freezing_point': FREEZING_POINT_WATER_SI,
        'triple_point': TRIPLE_POINT_WATER_SI,
        'tolerance': TOLERANCE_SI,
        'absolute_zero_offset': ZERO_CELSIUS_AS_KELVIN,
        'min_temperature': MIN_TEMPERATURE_SI,
        'max_temperature': MAX_TEMPERATURE_SI,
        'temperature_unit': 'degC',
        'pressure_unit': 'Pa',
        'enthalpy_unit': 'kJ / kg',
        'volume_unit': 'm ** 3 / kg',
        'density_unit': 'kg / m ** 3'
    },
    UnitSystem.IP: {
        'gas_constant_dry_air': R_DA_IP,
        'freezing_point': FREEZING_POINT_WATER_IP,
        'triple_point': TRIPLE_POINT_WATER_IP,
        'tolerance': TOLERANCE_IP,
        'absolute_zero_offset': ZERO_FAHRENHEIT_AS_RANKINE,
        'min_temperature': MIN_TEMPERATURE_IP,
        'max_temperature': MAX_TEMPERATURE_IP,
        'temperature_unit': 'degF',
        'pressure_unit': 'psi',
        'enthalpy_unit': 'Btu / lb',
        'volume_unit': 'ft ** 3 / lb',
        'density_unit': 'lb / ft ** 3'
    }
}


def _parse_unit_system(unit_system: 'UnitSystem | str') -> UnitSystem:
    if isinstance(unit_system, UnitSystem):
        return unit_system
    if isinstance(unit_system, str):
        try:
            return UnitSystem[unit_system.strip().upper()]
        except KeyError:
            pass
    raise InputRangeError(
        f"Unknown unit system {unit_system!r}: "
        f"expected one of {[u.value for u in UnitSystem]}."
    )


@dataclass(frozen=True)
class UnitSystemContext:
    """Immutable record of the active unit system and its derived constants.

    Only `system` can be passed when creating a context; all other fields
    are looked up from the unit system in `__post_init__`. Use
    `with_unit_system` to get a context for another unit system.

    Attributes
    ----------
    system:
        The unit system (SI or IP).
    gas_constant_dry_air:
        Gas constant of dry air (J/kg_da/K or ft.lbf/lb_da/R).
    freezing_point:
        Freezing point of water (°C or °F).
    triple_point:
        Triple point of water (°C or °F).
    tolerance:
        Temperature tolerance of the iterative solvers (°C or °F interval).
    absolute_zero_offset:
        Value to add to a temperature to get the absolute temperature.
    min_temperature, max_temperature:
        Range of validity of the saturation pressure correlations.
    """
    system: UnitSystem
    gas_constant_dry_air: float = field(init=False)
    freezing_point: float = field(init=False)
    triple_point: float = field(init=False)
    tolerance: float = field(init=False)
    absolute_zero_offset: float = field(init=False, repr=False)
    min_temperature: float = field(init=False, repr=False)
    max_temperature: float = field(init=False, repr=False)
    temperature_unit: str = field(init=False, repr=False)
    pressure_unit: str = field(init=False, repr=False)
    enthalpy_unit: str = field(init=False, repr=False)
    volume_unit: str = field(init=False, repr=False)
    density_unit: str = field(init=False, repr=False)

    def __post_init__(self):
        system = _parse_unit_system(self.system)
        # frozen dataclass: derived fields can only be set through object
        object.__setattr__(self, 'system', system)
        for name, value in _SYSTEM_CONSTANTS[system].items():
            object.__setattr__(self, name, value)

    @property
    def is_ip(self) -> bool:
        return self.system is UnitSystem.IP

    def absolute(self, temperature: float) -> float:
        """Returns `temperature` on the absolute scale of the unit system
        (K or R).
        """
        return temperature + self.absolute_zero_offset


def create_context(unit_system: UnitSystem | str) -> UnitSystemContext:
    """Creates the context of the given unit system (`UnitSystem.SI`,
    `UnitSystem.IP` or their names).
    """
    return UnitSystemContext(_parse_unit_system(unit_system))


def with_unit_system(
    context: UnitSystemContext,
    unit_system: UnitSystem | str
) -> UnitSystemContext:
    """Returns a new context for `unit_system`. `context` itself is not
    modified.
    """
    return replace(context, system=_parse_unit_system(unit_system))


def t_kelvin_from_t_celsius(t_celsius: float) -> float:
    return t_celsius + ZERO_CELSIUS_AS_KELVIN


def t_celsius_from_t_kelvin(t_kelvin: float) -> float:
    return t_kelvin - ZERO_CELSIUS_AS_KELVIN


def t_rankine_from_t_fahrenheit(t_fahrenheit: float) -> float:
    return t_fahrenheit + ZERO_FAHRENHEIT_AS_RANKINE


def t_fahrenheit_from_t_rankine(t_rankine: float) -> float:
    return t_rankine - ZERO_FAHRENHEIT_AS_RANKINE


def check_temperature(
    context: UnitSystemContext,
    temperature: float,
    name: str = 'dry-bulb temperature'
) -> None:
    """Raises `InputRangeError` if `temperature` is not a finite number above
    absolute zero in the unit system of `context`.
    """
    if not math.isfinite(temperature) or context.absolute(temperature) <= 0.0:
        raise InputRangeError(
            f"The {name} must be above absolute zero, "
            f"got {temperature} {context.temperature_unit}."
        )


def check_pressure(
    context: UnitSystemContext,
    pressure: float,
    name: str = 'pressure'
) -> None:
    """Raises `InputRangeError` if `pressure` is not a finite, strictly
    positive number.
    """
    if not math.isfinite(pressure) or pressure <= 0.0:
        raise InputRangeError(
            f"The {name} must be positive, got {pressure} "
            f"{context.pressure_unit}."
        )


def check_humidity_ratio(humidity_ratio: float) -> None:
    """Raises `InputRangeError` if `humidity_ratio` is negative or not a
    finite number.
    """
    if not math.isfinite(humidity_ratio) or humidity_ratio < 0.0:
        raise InputRangeError(
            f"The humidity ratio cannot be negative, got {humidity_ratio}."
        )


def check_fraction(value: float, name: str) -> None:
    """Raises `InputRangeError` if `value` is not within [0, 1]."""
    if not 0.0 <= value <= 1.0:
        raise InputRangeError(
            f"The {name} must be within [0, 1], got {value}."
        )
