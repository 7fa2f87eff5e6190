import pytest

from moist_air import create_context, UnitSystem


STANDARD_PRESSURE_SI = 101325.0
STANDARD_PRESSURE_IP = 14.696


@pytest.fixture
def si():
    return create_context(UnitSystem.SI)


@pytest.fixture
def ip():
    return create_context(UnitSystem.IP)
