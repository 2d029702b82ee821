"""
Logging configuration with plain-text or structured JSON output
"""
import json
import logging
import sys
from typing import Optional

from .settings import LogFormat, Settings, get_settings


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line"""

    _RESERVED = frozenset(logging.LogRecord(
        "", logging.INFO, "", 0, "", None, None
    ).__dict__) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        log_dict = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_dict["exception"] = self.formatException(record.exc_info)

        # Fields passed through extra=
        for key, value in record.__dict__.items():
            if key not in self._RESERVED and key not in log_dict:
                log_dict[key] = value

        return json.dumps(log_dict, ensure_ascii=False, default=str)


class LoggingConfig:
    """Centralized logging configuration"""

    _configured = False

    @classmethod
    def configure(cls, settings: Optional[Settings] = None, force: bool = False) -> None:
        """Configure the root logger once for the application"""
        if cls._configured and not force:
            return

        settings = settings or get_settings()

        if settings.log_format == LogFormat.JSON:
            formatter = JSONFormatter(datefmt="%Y-%m-%d %H:%M:%S")
        else:
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            )

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)

        level = "DEBUG" if settings.debug else settings.log_level
        logging.basicConfig(
            level=getattr(logging, level.upper(), logging.INFO),
            handlers=[console_handler],
            force=True
        )

        cls._configured = True

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a logger, configuring logging on first use"""
        if not cls._configured:
            cls.configure()
        return logging.getLogger(name)
