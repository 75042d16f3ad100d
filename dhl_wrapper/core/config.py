import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .exceptions import ConfigError

ENV_PREFIX = "DHL_"
VALID_MODES = ("sandbox", "production")

class Config:
    def __init__(self, config_path: Optional[Path] = None):
        self._config: Dict[str, Any] = {}
        self._load_defaults()
        self._load_environment_variables()
        if config_path:
            self.load(config_path)
        self.validate(self._config)

    def _load_defaults(self) -> None:
        """Load default configuration values"""
        self._config = {
            "api": {
                "mode": "production",
                "timeout": 30.0,
                "verify_ssl": True,
                "user_agent": "dhl-wrapper/0.1"
            },
            "credentials": {
                "location_finder_api_key": None,
                "shipment_tracking_api_key": None
            },
            "logging": {
                "level": "INFO",
                "file": None,
                "console_output": False,
                "max_size": 1024 * 1024,
                "backup_count": 3
            }
        }

    def load(self, path: Path) -> None:
        """Load configuration from JSON file"""
        try:
            with open(path, 'r') as f:
                file_config = json.load(f)
                self.update(file_config)
        except Exception as e:
            raise ConfigError(f"Failed to load config from {path}: {str(e)}")

    def _load_environment_variables(self) -> None:
        """Load configuration from environment variables"""
        for key, value in os.environ.items():
            if key.startswith(ENV_PREFIX):
                # DHL_CREDENTIALS_LOCATION_FINDER_API_KEY -> credentials.location_finder_api_key
                parts = key[len(ENV_PREFIX):].lower().split('_')
                if len(parts) < 2:
                    continue

                config_key = f"{parts[0]}.{'_'.join(parts[1:])}"

                # API keys may look numeric, keep them verbatim
                if parts[0] == "credentials":
                    self.set(config_key, value)
                else:
                    self.set(config_key, self._convert_value(value))

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot notation key"""
        try:
            value = self._config
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any) -> None:
        """Set configuration value by dot notation key"""
        keys = key.split('.')
        d = self._config
        for k in keys[:-1]:
            if k not in d:
                d[k] = {}
            d = d[k]
        d[keys[-1]] = value

    def update(self, config_dict: Dict[str, Any]) -> None:
        """Update configuration with dictionary"""
        def update_recursive(d1, d2):
            for k, v in d2.items():
                if isinstance(v, dict):
                    if k not in d1 or not isinstance(d1[k], dict):
                        d1[k] = {}
                    update_recursive(d1[k], v)
                else:
                    d1[k] = v
            return d1

        update_recursive(self._config, config_dict)

    def validate(self, config: Dict[str, Any]) -> None:
        """Validate configuration values"""
        if "api" in config:
            api_config = config["api"]
            if "mode" in api_config and api_config["mode"] not in VALID_MODES:
                raise ConfigError(
                    f"api.mode must be one of {', '.join(VALID_MODES)}",
                    details={"mode": api_config["mode"]}
                )
            if "timeout" in api_config:
                timeout = api_config["timeout"]
                if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
                    raise ConfigError("api.timeout must be a positive number")

    @staticmethod
    def _convert_value(value: str) -> Any:
        """Convert string value to appropriate type"""
        # Handle boolean values
        if value.lower() == "true":
            return True
        if value.lower() == "false":
            return False

        # Handle numeric values
        try:
            if '.' in value:
                return float(value)
            return int(value)
        except ValueError:
            # If not a number, return as string
            return value
