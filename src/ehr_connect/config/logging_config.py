"""Logging configuration for ehr-connect.

Library modules only create loggers with ``logging.getLogger(__name__)``;
applications call ``LoggingConfig.configure()`` once at startup.
"""

import logging
import logging.config
from enum import Enum
from typing import Any, Dict, Optional


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


class LoggingConfig:
    """Centralized logging configuration manager."""

    # HTTP client internals log every request line; keep them quiet
    QUIET_MODULES = [
        "httpx",
        "httpcore",
    ]

    @classmethod
    def build(cls, level: str = "INFO", log_format: str = "simple") -> Dict[str, Any]:
        """Build a ``dictConfig`` mapping.

        Args:
            level: Root log level name
            log_format: One of simple, detailed, json

        Returns:
            Logging configuration dictionary
        """
        level = level.upper()
        format_string = FORMAT_STRINGS[LogFormat(log_format.lower())]

        logging_config: Dict[str, Any] = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": format_string,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                "ehr_connect": {
                    "level": level,
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
        }

        for module in cls.QUIET_MODULES:
            logging_config["loggers"][module] = {
                "level": "WARNING" if level != "DEBUG" else "INFO",
                "handlers": ["console"],
                "propagate": False,
            }

        return logging_config

    @classmethod
    def configure(cls, level: Optional[str] = None, log_format: Optional[str] = None) -> None:
        """Apply logging configuration.

        Missing arguments are taken from EhrConnectSettings.
        """
        if level is None or log_format is None:
            from .settings import get_settings

            settings = get_settings()
            level = level or settings.log_level
            log_format = log_format or settings.log_format

        logging.config.dictConfig(cls.build(level, log_format))

        logger = logging.getLogger(__name__)
        logger.debug(f"Logging configured: level={level}, format={log_format}")

    @classmethod
    def set_module_level(cls, module_name: str, level: str) -> None:
        """Set log level for a specific module."""
        logging.getLogger(module_name).setLevel(getattr(logging, level.upper()))
