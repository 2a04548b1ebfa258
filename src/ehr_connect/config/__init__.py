"""Configuration: settings, resolved client config, endpoint table, logging."""

from .client_config import BackendVariant, ClientConfig
from .endpoints import DEFAULT_ENDPOINTS
from .logging_config import LogFormat, LoggingConfig
from .settings import EhrConnectSettings, get_settings

__all__ = [
    "BackendVariant",
    "ClientConfig",
    "DEFAULT_ENDPOINTS",
    "EhrConnectSettings",
    "get_settings",
    "LoggingConfig",
    "LogFormat",
]
