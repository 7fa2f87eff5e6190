import dataclasses

import pytest

from moist_air import (
    InputRangeError,
    MIN_HUM_RATIO,
    MoistAirState,
    state_from_humidity_ratio,
    state_from_wet_bulb,
    state_from_dew_point,
    state_from_relative_humidity
)
from conftest import STANDARD_PRESSURE_SI, STANDARD_PRESSURE_IP


P = STANDARD_PRESSURE_SI


def check_reference_state(state: MoistAirState) -> None:
    assert state.dry_bulb_temp == 25.0
    assert state.pressure == P
    assert state.humidity_ratio == pytest.approx(0.0098810, rel=2e-4)
    assert state.wet_bulb_temp == pytest.approx(17.8894, abs=0.003)
    assert state.dew_point_temp == pytest.approx(13.8640, abs=0.003)
    assert state.relative_humidity == pytest.approx(0.5, abs=1e-4)
    assert state.vapor_pressure == pytest.approx(1584.6082, rel=2e-4)
    assert state.enthalpy == pytest.approx(50.3220, abs=0.005)
    assert state.specific_volume == pytest.approx(0.858043, rel=1e-5)
    assert state.degree_of_saturation == pytest.approx(0.0098810 / 0.0200811, rel=1e-3)
    assert state.density == pytest.approx(1.0098810 / 0.858043, rel=1e-4)


class TestMoistAirState:

    def test_from_relative_humidity(self, si):
        check_reference_state(state_from_relative_humidity(si, 25.0, 0.5, P))

    def test_from_humidity_ratio(self, si):
        check_reference_state(state_from_humidity_ratio(si, 25.0, 0.0098810, P))

    def test_from_wet_bulb(self, si):
        state = state_from_wet_bulb(si, 25.0, 17.8894, P)
        assert state.wet_bulb_temp == 17.8894
        check_reference_state(state)

    def test_from_dew_point(self, si):
        state = state_from_dew_point(si, 25.0, 13.8640, P)
        assert state.dew_point_temp == 13.8640
        check_reference_state(state)

    def test_ip_units(self, ip):
        state = state_from_relative_humidity(ip, 77.0, 0.5, STANDARD_PRESSURE_IP)
        assert state.wet_bulb_temp == pytest.approx(64.1961, abs=0.005)
        assert state.dew_point_temp == pytest.approx(56.9552, abs=0.005)
        assert state.enthalpy == pytest.approx(29.3016, abs=0.005)
        assert state.specific_volume == pytest.approx(13.74439, rel=1e-5)

    def test_saturated(self, si):
        state = state_from_relative_humidity(si, 20.0, 1.0, P)
        assert state.wet_bulb_temp == 20.0
        assert state.dew_point_temp == 20.0
        assert state.degree_of_saturation == pytest.approx(1.0)

    def test_dry_air_is_floored(self, si):
        state = state_from_humidity_ratio(si, 20.0, 0.0, P)
        assert state.humidity_ratio == MIN_HUM_RATIO

    def test_is_immutable(self, si):
        state = state_from_relative_humidity(si, 25.0, 0.5, P)
        with pytest.raises(dataclasses.FrozenInstanceError):
            state.enthalpy = 0.0

    def test_invalid_inputs(self, si):
        with pytest.raises(InputRangeError):
            state_from_humidity_ratio(si, 25.0, -0.001, P)
        with pytest.raises(InputRangeError, match='cannot be above the dry-bulb'):
            state_from_dew_point(si, 20.0, 22.0, P)
        with pytest.raises(InputRangeError, match='cannot be above the dry-bulb'):
            state_from_wet_bulb(si, 20.0, 22.0, P)
        with pytest.raises(InputRangeError):
            state_from_relative_humidity(si, 25.0, 1.5, P)
