"""Configuration package with clean public API."""

from .env_expansion import expand_config_env_vars, expand_env_vars
from .manager import ConfigurationManager
from .schemas import AppConfig, DemoConfig, LogDestination, LoggingConfig, LogLevel

__all__ = [
    # Main configuration
    'AppConfig',
    'DemoConfig',
    'LoggingConfig',
    'LogLevel',
    'LogDestination',

    # Loading
    'ConfigurationManager',
    'expand_env_vars',
    'expand_config_env_vars',
]
