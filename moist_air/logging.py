import logging
from logging import StreamHandler, FileHandler, Logger
from pathlib import Path


class ModuleLogger:
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    # specify the formatting of the log records
    FORMATTER = logging.Formatter(
        '[%(name)s | %(levelname)s] %(message)s'
    )

    @classmethod
    def create_console_handler(cls, log_level: int | None = None) -> StreamHandler:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(cls.FORMATTER)
        console_handler.setLevel(log_level or cls.DEBUG)
        return console_handler

    @classmethod
    def create_file_handler(cls, file_path: Path | str, log_level: int | None = None) -> FileHandler:
        file_handler = logging.FileHandler(file_path, mode='a', encoding='utf-8')
        file_handler.setFormatter(cls.FORMATTER)
        file_handler.setLevel(log_level or cls.DEBUG)
        return file_handler

    @classmethod
    def get_logger(
        cls,
        logger_name: str,
        file_path: Path | str | None = None,
        log_level: int = logging.WARNING
    ) -> Logger:
        """Returns the logger with `logger_name`. The first time a logger is
        requested, a console handler is attached to it, and also a file
        handler if `file_path` is not None. Requesting the same logger again
        returns it unchanged. Only messages with a priority equal or higher
        than `log_level` are emitted.
        """
        logger = logging.getLogger(logger_name)
        if not logger.handlers:
            # don't stack handlers when the same logger is requested again
            console_handler = cls.create_console_handler(log_level)
            logger.addHandler(console_handler)
            if file_path is not None:
                file_handler = cls.create_file_handler(file_path, log_level)
                logger.addHandler(file_handler)
            logger.setLevel(log_level)
        return logger

    @classmethod
    def set_level(cls, log_level: int, package: str = 'moist_air') -> None:
        """Sets `log_level` on every logger of the package that was already
        created through `get_logger`, and on their handlers.
        """
        for name, logger in logging.Logger.manager.loggerDict.items():
            if not isinstance(logger, logging.Logger):
                continue
            if name == package or name.startswith(package + '.'):
                logger.setLevel(log_level)
                for handler in logger.handlers:
                    handler.setLevel(log_level)
