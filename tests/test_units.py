"""Unit system context: construction, immutability and validation helpers."""
import dataclasses
from concurrent.futures import ThreadPoolExecutor

import pytest

from moist_air import (
    UnitSystem,
    UnitSystemContext,
    create_context,
    with_unit_system,
    wet_bulb_temperature,
    InputRangeError
)
from moist_air.units import (
    t_kelvin_from_t_celsius,
    t_celsius_from_t_kelvin,
    t_rankine_from_t_fahrenheit,
    t_fahrenheit_from_t_rankine,
    check_temperature,
    check_pressure
)


class TestCreateContext:

    def test_si_constants(self, si):
        assert si.system is UnitSystem.SI
        assert si.gas_constant_dry_air == 287.042
        assert si.freezing_point == 0.0
        assert si.triple_point == 0.01
        assert si.tolerance == 0.001
        assert si.absolute(20.0) == pytest.approx(293.15)

    def test_ip_constants(self, ip):
        assert ip.system is UnitSystem.IP
        assert ip.gas_constant_dry_air == 53.350
        assert ip.freezing_point == 32.0
        assert ip.triple_point == 32.018
        assert ip.tolerance == pytest.approx(0.0018)
        assert ip.absolute(0.0) == pytest.approx(459.67)

    @pytest.mark.parametrize('name', ['SI', 'si', ' Si '])
    def test_from_name(self, name):
        assert create_context(name).system is UnitSystem.SI

    @pytest.mark.parametrize('selector', ['SIU', 'metric', 3, None])
    def test_unknown_unit_system(self, selector):
        with pytest.raises(InputRangeError, match='Unknown unit system'):
            create_context(selector)

    def test_derived_constants_cannot_be_passed(self):
        with pytest.raises(TypeError):
            UnitSystemContext(UnitSystem.SI, tolerance=0.1)

    def test_contexts_are_values(self):
        assert create_context('SI') == create_context(UnitSystem.SI)
        assert create_context('SI') != create_context('IP')
        assert hash(create_context('IP')) == hash(create_context('IP'))


class TestImmutability:

    def test_fields_cannot_be_assigned(self, si):
        with pytest.raises(dataclasses.FrozenInstanceError):
            si.tolerance = 0.1
        with pytest.raises(dataclasses.FrozenInstanceError):
            si.system = UnitSystem.IP

    def test_switching_returns_new_context(self, ip):
        switched = with_unit_system(ip, UnitSystem.SI)
        assert switched is not ip
        assert switched.system is UnitSystem.SI
        assert switched.tolerance == 0.001
        assert switched.gas_constant_dry_air == 287.042
        # the original IP context keeps its matching pair
        assert ip.system is UnitSystem.IP
        assert ip.tolerance == pytest.approx(0.0018)
        assert ip.gas_constant_dry_air == 53.350

    def test_switch_by_name(self, si):
        assert with_unit_system(si, 'ip') == create_context(UnitSystem.IP)

    def test_shared_context_across_threads(self, si):
        dry_bulbs = [10.0 + 0.5 * i for i in range(40)]
        expected = [wet_bulb_temperature(si, T, 0.005, 101325.0) for T in dry_bulbs]
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(lambda T: wet_bulb_temperature(si, T, 0.005, 101325.0), dry_bulbs))
        assert results == expected


class TestTemperatureConversions:

    def test_kelvin(self):
        assert t_kelvin_from_t_celsius(20.0) == pytest.approx(293.15)
        assert t_celsius_from_t_kelvin(273.15) == pytest.approx(0.0)

    def test_rankine(self):
        assert t_rankine_from_t_fahrenheit(32.0) == pytest.approx(491.67)
        assert t_fahrenheit_from_t_rankine(459.67) == pytest.approx(0.0)


class TestValidation:

    @pytest.mark.parametrize('T', [-273.15, -300.0, float('nan'), float('inf')])
    def test_temperature_not_above_absolute_zero_si(self, si, T):
        with pytest.raises(InputRangeError):
            check_temperature(si, T)

    def test_temperature_not_above_absolute_zero_ip(self, ip):
        with pytest.raises(InputRangeError):
            check_temperature(ip, -459.67)
        check_temperature(ip, -459.0)

    @pytest.mark.parametrize('P', [0.0, -101325.0, float('nan')])
    def test_pressure_must_be_positive(self, si, P):
        with pytest.raises(InputRangeError, match='must be positive'):
            check_pressure(si, P)

    def test_input_range_error_is_value_error(self, si):
        with pytest.raises(ValueError):
            check_pressure(si, -1.0)
