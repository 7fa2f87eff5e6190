import math
from typing import Dict
import warnings
from .pint_setup import Quantity
from .constants import MIN_HUM_RATIO
from .units import create_context, UnitSystem
from .humidity import (
    humidity_ratio_from_relative_humidity,
    relative_humidity_from_humidity_ratio,
    vapor_pressure_from_humidity_ratio,
    degree_of_saturation
)
from .properties import (
    enthalpy,
    dry_bulb_from_enthalpy,
    humidity_ratio_from_enthalpy,
    specific_volume,
    density,
    moist_air_specific_heat
)
from .wet_bulb import wet_bulb_temperature, humidity_ratio_from_wet_bulb
from .dew_point import dew_point_from_humidity_ratio, humidity_ratio_from_dew_point
from .atmosphere import standard_atmosphere_pressure

Q_ = Quantity

_SI = create_context(UnitSystem.SI)

STANDARD_PRESSURE = Q_(standard_atmosphere_pressure(_SI, 0.0), 'Pa')


class HumidAir:
    """State of humid air, set and queried with `pint` quantities.

    The state is fixed by the dry-bulb temperature `Tdb` together with one of
    the humidity ratio `W`, the relative humidity `RH`, the wet-bulb
    temperature `Twb` or the dew-point temperature `Tdp`, or by the specific
    enthalpy `h` together with `W`. The pressure `P` defaults to the standard
    atmosphere at sea level.

    Examples
    --------
    >>> air = HumidAir(Tdb=Q_(25, 'degC'), RH=Q_(50, 'pct'))
    >>> air.Twb.to('degC')
    """
    _units: Dict[str, str] = {
        'Tdb': 'degC',
        'Twb': 'degC',
        'Tdp': 'degC',
        'P': 'Pa',
        'Pw': 'Pa',
        'v': 'm ** 3 / kg',
        'rho': 'kg / m ** 3',
        'W': 'kg / kg',
        'RH': 'frac',
        'h': 'kJ / kg',
        'cp': 'kJ / kg / K',
        'mu': 'frac'
    }

    def __init__(self, **input_qties: Quantity):
        P = input_qties.pop('P', None)
        self._P: float = P.to('Pa').m if P is not None else STANDARD_PRESSURE.m
        unknown = [k for k in input_qties if k not in ('Tdb', 'W', 'RH', 'Twb', 'Tdp', 'h')]
        if unknown:
            raise ValueError(f"Unknown input quantities: {', '.join(unknown)}.")
        self._inputs = {
            key: qty.to(self._units[key]).m
            for key, qty in input_qties.items()
        }
        self._validate_inputs()
        self._Tdb, self._W = self._solve_state()

    def _validate_inputs(self):
        if len(self._inputs) != 2:
            raise ValueError(
                f"Humid air state needs exactly 2 input quantities besides "
                f"`P`, got {len(self._inputs)}."
            )
        for k, v in self._inputs.items():
            if v is None or math.isnan(v):
                raise ValueError(
                    f"Humid air state cannot be determined: "
                    f"parameter {k} is NaN or None."
                )
        RH = self._inputs.get('RH')
        if RH is not None and RH < 0.0:
            warnings.warn(
                message=(
                    "Negative value for RH detected. "
                    "RH has been reset to 0 %."
                ),
                category=RuntimeWarning
            )
            self._inputs['RH'] = 0.0
        W = self._inputs.get('W')
        if W is not None and W < 0.0:
            warnings.warn(
                message=(
                    "Negative value for W detected. "
                    "W has been reset to 0 kg/kg."
                ),
                category=RuntimeWarning
            )
            self._inputs['W'] = 0.0

    def _solve_state(self) -> tuple[float, float]:
        inputs = self._inputs
        if 'Tdb' not in inputs:
            if 'h' in inputs and 'W' in inputs:
                Tdb = dry_bulb_from_enthalpy(_SI, inputs['h'], inputs['W'])
                return Tdb, max(inputs['W'], MIN_HUM_RATIO)
            raise ValueError(
                "Without `Tdb`, the state can only be determined from `h` and `W`."
            )
        Tdb = inputs['Tdb']
        if 'W' in inputs:
            W = max(inputs['W'], MIN_HUM_RATIO)
        elif 'RH' in inputs:
            W = humidity_ratio_from_relative_humidity(_SI, Tdb, inputs['RH'], self._P)
        elif 'Twb' in inputs:
            W = humidity_ratio_from_wet_bulb(_SI, Tdb, inputs['Twb'], self._P)
        elif 'Tdp' in inputs:
            if inputs['Tdp'] > Tdb:
                raise ValueError(
                    f"Dew-point temperature {inputs['Tdp']} °C is above the "
                    f"dry-bulb temperature {Tdb} °C."
                )
            W = humidity_ratio_from_dew_point(_SI, inputs['Tdp'], self._P)
        else:
            W = humidity_ratio_from_enthalpy(_SI, Tdb, inputs['h'])
        return Tdb, W

    def __str__(self):
        return (
            f"{self.Tdb.to('degC'):~P.2f} DB, "
            f"{self.W.to('g/kg'):~P.2f} AH "
            f"({self.RH.to('pct'):~P.0f} RH)"
        )

    def _qty(self, value: float, key: str) -> Quantity:
        return Q_(value, self._units[key])

    @property
    def P(self) -> Quantity:
        return Q_(self._P, 'Pa')

    @property
    def Tdb(self) -> Quantity:
        return self._qty(self._Tdb, 'Tdb')

    @property
    def W(self) -> Quantity:
        return self._qty(self._W, 'W')

    @property
    def RH(self) -> Quantity:
        RH = relative_humidity_from_humidity_ratio(_SI, self._Tdb, self._W, self._P)
        return self._qty(RH, 'RH')

    @property
    def h(self) -> Quantity:
        return self._qty(enthalpy(_SI, self._Tdb, self._W), 'h')

    @property
    def Twb(self) -> Quantity:
        return self._qty(wet_bulb_temperature(_SI, self._Tdb, self._W, self._P), 'Twb')

    @property
    def Pw(self) -> Quantity:
        return self._qty(vapor_pressure_from_humidity_ratio(_SI, self._W, self._P), 'Pw')

    @property
    def Tdp(self) -> Quantity:
        return self._qty(dew_point_from_humidity_ratio(_SI, self._Tdb, self._W, self._P), 'Tdp')

    @property
    def v(self) -> Quantity:
        return self._qty(specific_volume(_SI, self._Tdb, self._W, self._P), 'v')

    @property
    def rho(self) -> Quantity:
        return self._qty(density(_SI, self._Tdb, self._W, self._P), 'rho')

    @property
    def cp(self) -> Quantity:
        return self._qty(moist_air_specific_heat(_SI, self._W), 'cp')

    @property
    def mu(self) -> Quantity:
        """Degree of saturation."""
        return self._qty(degree_of_saturation(_SI, self._Tdb, self._W, self._P), 'mu')
