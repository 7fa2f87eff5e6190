import pytest

from moist_air import (
    InputRangeError,
    MIN_HUM_RATIO,
    dry_air_enthalpy,
    dry_air_density,
    dry_air_volume,
    enthalpy,
    dry_bulb_from_enthalpy,
    humidity_ratio_from_enthalpy,
    saturated_air_enthalpy,
    saturation_humidity_ratio,
    moist_air_specific_heat,
    specific_volume,
    dry_bulb_from_specific_volume,
    density
)
from conftest import STANDARD_PRESSURE_SI, STANDARD_PRESSURE_IP


P = STANDARD_PRESSURE_SI
W_25C_50PCT = 0.0098810


class TestEnthalpy:

    def test_dry_air(self, si, ip):
        assert dry_air_enthalpy(si, 20.0) == pytest.approx(20.12)
        assert dry_air_enthalpy(ip, 68.0) == pytest.approx(16.32)

    def test_moist_air_si(self, si):
        # kJ/kg_da
        assert enthalpy(si, 25.0, W_25C_50PCT) == pytest.approx(50.3220, abs=1e-3)

    def test_moist_air_ip(self, ip):
        # Btu/lb_da
        assert enthalpy(ip, 77.0, W_25C_50PCT) == pytest.approx(29.3016, abs=1e-3)

    def test_inverse_dry_bulb(self, si, ip):
        h = enthalpy(si, 30.0, 0.012)
        assert dry_bulb_from_enthalpy(si, h, 0.012) == pytest.approx(30.0, abs=1e-9)
        h = enthalpy(ip, 86.0, 0.012)
        assert dry_bulb_from_enthalpy(ip, h, 0.012) == pytest.approx(86.0, abs=1e-9)

    def test_inverse_humidity_ratio(self, si):
        h = enthalpy(si, -10.0, 0.0015)
        assert humidity_ratio_from_enthalpy(si, -10.0, h) == pytest.approx(0.0015, rel=1e-9)

    def test_humidity_ratio_from_enthalpy_is_floored(self, si):
        assert humidity_ratio_from_enthalpy(si, 20.0, 10.0) == MIN_HUM_RATIO

    def test_saturated_air(self, si):
        W_s = saturation_humidity_ratio(si, 25.0, P)
        assert saturated_air_enthalpy(si, 25.0, P) == pytest.approx(enthalpy(si, 25.0, W_s))

    def test_specific_heat(self, si, ip):
        assert moist_air_specific_heat(si, 0.01) == pytest.approx(1.006 + 0.0186)
        assert moist_air_specific_heat(ip, 0.01) == pytest.approx(0.240 + 0.00444)

    def test_negative_humidity_ratio(self, si):
        with pytest.raises(InputRangeError):
            enthalpy(si, 20.0, -0.001)

    def test_below_absolute_zero(self, si):
        with pytest.raises(InputRangeError, match='above absolute zero'):
            enthalpy(si, -274.0, 0.001)


class TestVolumeAndDensity:

    def test_dry_air_density(self, si):
        assert dry_air_density(si, 20.0, P) == pytest.approx(101325.0 / 287.042 / 293.15)
        assert dry_air_volume(si, 20.0, P) == pytest.approx(287.042 * 293.15 / 101325.0)

    def test_dry_air_density_ip(self, ip):
        # lb/ft3
        assert dry_air_density(ip, 68.0, STANDARD_PRESSURE_IP) == pytest.approx(0.0752, rel=2e-3)

    def test_specific_volume_si(self, si):
        assert specific_volume(si, 25.0, W_25C_50PCT, P) == pytest.approx(0.858043, rel=1e-5)

    def test_specific_volume_ip(self, ip):
        assert specific_volume(ip, 77.0, W_25C_50PCT, STANDARD_PRESSURE_IP) == pytest.approx(13.74439, rel=1e-5)

    def test_specific_volume_si_ip_agree(self, si, ip):
        v_si = specific_volume(si, 25.0, W_25C_50PCT, P)
        v_ip = specific_volume(ip, 77.0, W_25C_50PCT, P / 6894.757)
        assert v_ip * 0.3048 ** 3 / 0.45359237 == pytest.approx(v_si, rel=1e-4)

    def test_density(self, si):
        v = specific_volume(si, 25.0, W_25C_50PCT, P)
        assert density(si, 25.0, W_25C_50PCT, P) == pytest.approx((1.0 + W_25C_50PCT) / v)

    def test_moist_air_lighter_than_dry_air(self, si):
        assert density(si, 25.0, 0.015, P) < density(si, 25.0, 0.0, P)
        assert density(si, 25.0, 0.0, P) == pytest.approx(dry_air_density(si, 25.0, P), rel=1e-6)

    def test_inverse_dry_bulb(self, si, ip):
        v = specific_volume(si, 15.0, 0.008, P)
        assert dry_bulb_from_specific_volume(si, v, 0.008, P) == pytest.approx(15.0, abs=1e-9)
        v = specific_volume(ip, 59.0, 0.008, STANDARD_PRESSURE_IP)
        assert dry_bulb_from_specific_volume(ip, v, 0.008, STANDARD_PRESSURE_IP) == pytest.approx(59.0, abs=1e-9)

    @pytest.mark.parametrize('pressure', [0.0, -1.0])
    def test_invalid_pressure(self, si, pressure):
        with pytest.raises(InputRangeError, match='must be positive'):
            density(si, 20.0, 0.01, pressure)


class TestCoolProp:
    """Compare with CoolProp's humid air model (Hyland & Wexler with
    virial corrections)."""

    def test_specific_volume(self, si):
        HumidAirProp = pytest.importorskip('CoolProp.HumidAirProp')
        v_ref = HumidAirProp.HAPropsSI('Vda', 'T', 298.15, 'P', P, 'W', W_25C_50PCT)
        assert specific_volume(si, 25.0, W_25C_50PCT, P) == pytest.approx(v_ref, rel=2e-3)

    def test_enthalpy_difference(self, si):
        # CoolProp has another reference state, so compare enthalpy differences
        HumidAirProp = pytest.importorskip('CoolProp.HumidAirProp')
        h1 = HumidAirProp.HAPropsSI('H', 'T', 293.15, 'P', P, 'W', 0.005)
        h2 = HumidAirProp.HAPropsSI('H', 'T', 303.15, 'P', P, 'W', 0.012)
        dh = enthalpy(si, 30.0, 0.012) - enthalpy(si, 20.0, 0.005)
        assert dh == pytest.approx((h2 - h1) / 1000.0, rel=5e-3)
