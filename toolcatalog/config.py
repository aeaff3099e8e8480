"""Configuration management for toolcatalog."""

import logging
import os
from pathlib import Path
from typing import Optional, Dict, Any

import yaml

from .docs.document import DEFAULT_GENERATOR
from .generator import DEFAULT_OUTPUT_PATH

_log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "toolcatalog.yaml"

DEFAULTS: Dict[str, Any] = {
    "output_path": DEFAULT_OUTPUT_PATH,
    "generator": DEFAULT_GENERATOR,
    "manifest": "tools.yaml",
    "discover": [],
    "timezone": "",
}


class ConfigManager:
    """Manage toolcatalog configuration from YAML.

    A missing config file is not an error; the built-in defaults apply.
    """

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()
        self.data = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            return {}
        return self._read_yaml()

    def _read_yaml(self) -> Dict[str, Any]:
        """Read and parse YAML file."""
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            _log.warning("Error reading config %s: %s", self.config_path, e)
            return {}
        if not isinstance(content, dict):
            return {}
        return content

    def _resolve_env_var(self, value: str) -> str:
        """Resolve environment variable references like ${VAR_NAME}."""
        if not value.startswith("${") or not value.endswith("}"):
            return value

        var_name = value[2:-1]
        return os.getenv(var_name, "")

    def _get_str(self, key: str) -> str:
        value = self.data.get(key)
        if not value:
            return DEFAULTS[key]
        return self._resolve_env_var(str(value)) or DEFAULTS[key]

    def get_output_path(self) -> str:
        """Get the path of the generated document."""
        return self._get_str("output_path")

    def get_generator_name(self) -> str:
        """Get the generator name shown in the document banner."""
        return self._get_str("generator")

    def get_manifest_path(self) -> str:
        """Get the path of the YAML tool manifest."""
        return self._get_str("manifest")

    def get_discover_packages(self) -> list[str]:
        """Get packages to import for @register_tool descriptors."""
        packages = self.data.get("discover") or []
        if isinstance(packages, str):
            packages = [packages]
        return [str(p) for p in packages]

    def get_timezone(self) -> Optional[str]:
        """Get the timezone of the banner timestamp, None for local time."""
        value = self.data.get("timezone")
        if not value:
            return None
        return self._resolve_env_var(str(value)) or None
