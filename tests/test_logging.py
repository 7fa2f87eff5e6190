import logging

import pytest

from moist_air import wet_bulb_temperature, dew_point_temperature, ConvergenceError
from moist_air.logging import ModuleLogger
from conftest import STANDARD_PRESSURE_SI


@pytest.fixture
def restore_level():
    yield
    ModuleLogger.set_level(ModuleLogger.WARNING)


class TestModuleLogger:

    def test_handlers_are_not_stacked(self):
        logger = ModuleLogger.get_logger('moist_air.tests.stacked')
        again = ModuleLogger.get_logger('moist_air.tests.stacked')
        assert logger is again
        assert len(logger.handlers) == 1

    def test_file_handler(self, tmp_path):
        file_path = tmp_path / 'moist_air.log'
        logger = ModuleLogger.get_logger('moist_air.tests.file', file_path=file_path)
        logger.warning('humidity ratio out of range')
        for handler in logger.handlers:
            handler.flush()
        assert '[moist_air.tests.file | WARNING] humidity ratio out of range' in file_path.read_text(encoding='utf-8')
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    def test_set_level(self, restore_level):
        ModuleLogger.set_level(ModuleLogger.DEBUG)
        logger = logging.getLogger('moist_air.wet_bulb')
        assert logger.level == logging.DEBUG
        assert all(h.level == logging.DEBUG for h in logger.handlers)


class TestSolverLogging:

    def test_debug_message_on_convergence(self, si, caplog):
        with caplog.at_level(logging.DEBUG, logger='moist_air.dew_point'):
            dew_point_temperature(si, 1584.6082, 25.0)
        assert 'Dew point' in caplog.text
        assert 'iterations' in caplog.text

    def test_warning_before_convergence_error(self, si, caplog):
        with caplog.at_level(logging.WARNING, logger='moist_air.wet_bulb'):
            with pytest.raises(ConvergenceError):
                wet_bulb_temperature(si, 25.0, 0.0075, STANDARD_PRESSURE_SI, max_iter=3)
        assert 'did not converge within 3 iterations' in caplog.text
