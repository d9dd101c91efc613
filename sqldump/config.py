"""
Configuration loading and validation for SQL Dumper.
"""

import os
import re
from typing import Any

import yaml


class ConfigLoader:
    """Loads and validates the dump configuration from a YAML file."""

    ENV_VAR_PATTERN = re.compile(r'\$\{([^}]+)\}')
    DEFAULT_INSTANCE = 'primary'

    def __init__(self, config_path: str):
        self.config_path = config_path
        self.config = self._load_config()
        self._validate()

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from YAML file."""
        with open(self.config_path, 'r') as f:
            config = yaml.safe_load(f) or {}

        return self._resolve_env_vars(config)

    def _resolve_env_vars(self, obj: Any) -> Any:
        """Recursively resolve ${VAR} references; unset variables become ''."""
        if isinstance(obj, str):
            return self.ENV_VAR_PATTERN.sub(lambda m: os.environ.get(m.group(1), ''), obj)
        elif isinstance(obj, dict):
            return {k: self._resolve_env_vars(v) for k, v in obj.items()}
        elif isinstance(obj, list):
            return [self._resolve_env_vars(item) for item in obj]
        return obj

    def _validate(self) -> None:
        """Check the shape of the configuration sections."""
        if not isinstance(self.config, dict):
            raise ValueError("Configuration must be a mapping")

        for section in ('instances', 'defaults', 'output', 'logging'):
            if not isinstance(self.config.get(section) or {}, dict):
                raise ValueError(f"'{section}' must be a mapping")

        databases = self.get_databases()
        if not isinstance(databases, list):
            raise ValueError("'databases' must be a list")
        for db in databases:
            if not isinstance(db, dict) or not db.get('name'):
                raise ValueError(f"Every database entry needs a 'name': {db!r}")
            batch_size = db.get('batch_size', self.get_defaults().get('batch_size', 1))
            if not isinstance(batch_size, int) or isinstance(batch_size, bool) or batch_size < 1:
                raise ValueError(f"Database '{db['name']}': batch_size must be a positive integer")

    def get_instance(self, instance_name: str) -> dict[str, Any]:
        """Get database instance configuration."""
        instances = self.config.get('instances') or {}
        if instance_name not in instances:
            raise ValueError(f"Instance '{instance_name}' not found in configuration")
        return instances[instance_name]

    def get_databases(self) -> list[dict[str, Any]]:
        """Get list of databases to dump."""
        return self.config.get('databases') or []

    def get_defaults(self) -> dict[str, Any]:
        """Get default dump settings."""
        return self.config.get('defaults') or {}

    def get_output_settings(self) -> dict[str, Any]:
        """Get output settings."""
        return self.config.get('output') or {}

    def get_logging_settings(self) -> dict[str, Any]:
        """Get logging settings."""
        return self.config.get('logging') or {}
