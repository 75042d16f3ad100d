import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict
from .config import Config
from .exceptions import LoggerError

LOGGER_NAME = "dhl_wrapper"
CONTEXT_FIELDS = ("endpoint", "mode")

class ContextFilter(logging.Filter):
    """Fill in request context for records logged without it"""

    def filter(self, record: logging.LogRecord) -> bool:
        for field in CONTEXT_FIELDS:
            if not hasattr(record, field):
                setattr(record, field, "-")
        return True

class Logger:
    _loggers: Dict[str, logging.Logger] = {}

    def __init__(self, config: Config):
        """Initialize logger with configuration"""
        self.config = config

        logger_name = LOGGER_NAME
        if logger_name in self._loggers:
            self.logger = self._loggers[logger_name]
            for handler in self.logger.handlers[:]:
                self.logger.removeHandler(handler)
                handler.close()
        else:
            self.logger = logging.getLogger(logger_name)
            self._loggers[logger_name] = self.logger

        # Set log level
        level = self._get_log_level()
        self.logger.setLevel(level)

        # Set log format
        self.formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s - endpoint:%(endpoint)s - mode:%(mode)s'
        )
        self.context_filter = ContextFilter()

        # Add file handler
        log_file = self.config.get("logging.file")
        if log_file:
            path = Path(log_file)
            try:
                if not path.parent.exists():
                    path.parent.mkdir(parents=True, exist_ok=True)

                max_size = self.config.get("logging.max_size", 1024 * 1024)  # 1MB default
                backup_count = self.config.get("logging.backup_count", 3)

                handler = RotatingFileHandler(
                    str(path),
                    maxBytes=max_size,
                    backupCount=backup_count
                )
            except OSError as e:
                raise LoggerError(f"Failed to setup log file: {str(e)}", details={"file": str(path)})
            self._add_handler(handler)

        # Add console handler if enabled
        if self.config.get("logging.console_output", False):
            self._add_handler(logging.StreamHandler())

    def _add_handler(self, handler: logging.Handler) -> None:
        handler.setFormatter(self.formatter)
        handler.addFilter(self.context_filter)
        self.logger.addHandler(handler)

    def _get_log_level(self) -> int:
        """Convert string log level to logging constant"""
        level_name = str(self.config.get("logging.level", "INFO")).upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise LoggerError(f"Invalid log level: {level_name}")
        return level
