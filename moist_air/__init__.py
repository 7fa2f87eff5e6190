"""
Psychrometric properties of moist air after the ASHRAE Handbook -
Fundamentals (2017), in SI or IP units.
"""
from .pint_setup import UNITS, Quantity

from .exceptions import PsychrometricError, InputRangeError, ConvergenceError

from .constants import MAX_ITER_COUNT, MIN_HUM_RATIO

from .units import (
    UnitSystem,
    UnitSystemContext,
    create_context,
    with_unit_system
)

from .saturation import saturation_pressure

from .humidity import (
    humidity_ratio_from_vapor_pressure,
    vapor_pressure_from_humidity_ratio,
    relative_humidity_from_vapor_pressure,
    vapor_pressure_from_relative_humidity,
    humidity_ratio_from_relative_humidity,
    relative_humidity_from_humidity_ratio,
    saturation_humidity_ratio,
    degree_of_saturation,
    humidity_ratio_from_degree_of_saturation,
    specific_humidity_from_humidity_ratio,
    humidity_ratio_from_specific_humidity,
    vapor_pressure_deficit
)

from .properties import (
    dry_air_enthalpy,
    dry_air_density,
    dry_air_volume,
    enthalpy,
    dry_bulb_from_enthalpy,
    humidity_ratio_from_enthalpy,
    saturated_air_enthalpy,
    moist_air_specific_heat,
    specific_volume,
    dry_bulb_from_specific_volume,
    density
)

from .dew_point import (
    dew_point_temperature,
    dew_point_from_humidity_ratio,
    dew_point_from_relative_humidity,
    humidity_ratio_from_dew_point,
    relative_humidity_from_dew_point
)

from .wet_bulb import (
    wet_bulb_temperature,
    humidity_ratio_from_wet_bulb,
    wet_bulb_from_relative_humidity,
    wet_bulb_from_dew_point,
    relative_humidity_from_wet_bulb,
    dew_point_from_wet_bulb
)

from .atmosphere import (
    standard_atmosphere_pressure,
    standard_atmosphere_temperature,
    sea_level_pressure,
    station_pressure
)

from .state import (
    MoistAirState,
    state_from_humidity_ratio,
    state_from_wet_bulb,
    state_from_dew_point,
    state_from_relative_humidity
)

from .humid_air import HumidAir, STANDARD_PRESSURE

__version__ = '0.1.0'
