"""Configuration manager - loads, expands and validates configuration."""
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from patternbook.core.exceptions import ConfigurationError
from patternbook.infrastructure.logging.logger import get_logger

from .env_expansion import expand_config_env_vars
from .schemas import AppConfig

CONFIG_PATH_ENV = "PATTERNBOOK_CONFIG"
LOG_LEVEL_ENV = "PATTERNBOOK_LOG_LEVEL"


class ConfigurationManager:
    """
    Loads the application configuration.

    Precedence, lowest first: schema defaults, the configuration file
    (explicit path or ``PATTERNBOOK_CONFIG``), then ``PATTERNBOOK_LOG_LEVEL``.
    The file may be YAML or JSON and may reference environment variables.
    """

    def __init__(self, config_path: Optional[str] = None):
        self._config_path = config_path or os.environ.get(CONFIG_PATH_ENV)
        self._config: Optional[AppConfig] = None
        self._logger = get_logger(__name__)

    @property
    def config_path(self) -> Optional[str]:
        return self._config_path

    def get_config(self) -> AppConfig:
        """Return the validated configuration, loading it on first use."""
        if self._config is None:
            self._config = self._load()
        return self._config

    def reload(self) -> AppConfig:
        """Drop the cached configuration and load it again."""
        self._config = None
        return self.get_config()

    def _load(self) -> AppConfig:
        data: Dict[str, Any] = {}
        if self._config_path:
            data = self._read_file(Path(self._config_path))
            self._logger.debug(f"Loaded configuration from {self._config_path}")

        data = expand_config_env_vars(data)

        level_override = os.environ.get(LOG_LEVEL_ENV)
        if level_override:
            data.setdefault("logging", {})["level"] = level_override

        try:
            return AppConfig.model_validate(data)
        except PydanticValidationError as e:
            fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
            raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=fields) from e

    def _read_file(self, path: Path) -> Dict[str, Any]:
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")

        text = path.read_text(encoding="utf-8")
        try:
            if path.suffix in (".yml", ".yaml"):
                loaded = yaml.safe_load(text)
            elif path.suffix == ".json":
                loaded = json.loads(text)
            else:
                raise ConfigurationError(
                    f"Unsupported configuration format '{path.suffix}', use .yaml, .yml or .json"
                )
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Could not parse {path}: {e}") from e

        if loaded is None:
            return {}
        if not isinstance(loaded, dict):
            raise ConfigurationError(f"Configuration root in {path} must be a mapping")
        return loaded
