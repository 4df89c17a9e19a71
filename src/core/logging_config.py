"""
Logging configuration: plain text or structured JSON lines on stderr

stdout is reserved for the calculator transcript, so every handler
installed here writes to stderr.
"""
import json
import logging
import sys
from typing import Optional

from src.core.config import Settings, get_settings

ROOT_LOGGER_NAME = "src"

# LogRecord attributes that are not user-supplied extra= fields
_RESERVED_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class ContextualFormatter(logging.Formatter):
    """JSON formatter: one object per record, extra= fields included"""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON"""
        log_dict = {
            'timestamp': self.formatTime(record, self.datefmt),
            'level': record.levelname,
            'logger': record.name,
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
            'message': record.getMessage(),
        }

        if record.exc_info:
            log_dict['exception'] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_dict[key] = value

        return json.dumps(log_dict, ensure_ascii=False, default=str)


class LoggingConfig:
    """Centralized logging configuration"""

    _configured = False
    _handler: Optional[logging.Handler] = None

    @classmethod
    def configure(cls, settings: Optional[Settings] = None) -> None:
        """Configure the package logger (idempotent)"""
        if cls._configured:
            return

        settings = settings or get_settings()

        if settings.log_format == "json":
            formatter: logging.Formatter = ContextualFormatter(datefmt='%Y-%m-%d %H:%M:%S')
        else:
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)

        logger = logging.getLogger(ROOT_LOGGER_NAME)
        logger.setLevel(settings.log_level)
        logger.addHandler(handler)
        logger.propagate = False

        cls._handler = handler
        cls._configured = True

    @classmethod
    def reset(cls) -> None:
        """Remove the installed handler (used by tests)"""
        logger = logging.getLogger(ROOT_LOGGER_NAME)
        if cls._handler is not None:
            logger.removeHandler(cls._handler)
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
        cls._handler = None
        cls._configured = False


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Setup logging (convenience function)"""
    LoggingConfig.configure(settings)
