"""Configuration management for the EHR log analyzer."""

import yaml
from typing import Dict, Any, List, Optional
from pathlib import Path

from .exceptions import ConfigurationError


DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"


class ConfigManager:
    """Manages application configuration from YAML files."""

    def __init__(self, config_dir: Optional[str] = None):
        self.config_dir = Path(config_dir) if config_dir else DEFAULT_CONFIG_DIR
        self._settings: Optional[Dict[str, Any]] = None

    @property
    def settings(self) -> Dict[str, Any]:
        """Load and cache analyzer settings."""
        if self._settings is None:
            self._settings = self._load_yaml("analyzer.yaml")
        return self._settings

    def _load_yaml(self, filename: str) -> Dict[str, Any]:
        """Load YAML configuration file."""
        file_path = self.config_dir / filename

        if not file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {filename}: {e}")

    def get_entry_class(self) -> str:
        """CSS class marking one log entry in the HTML document."""
        return self.settings.get("document", {}).get("entry_class", "log-entry")

    def get_severity_classes(self) -> Dict[str, str]:
        """Severity name -> CSS class, in precedence order."""
        classes = self.settings.get("document", {}).get("severity_classes")
        return classes or {"fatal": "fatal", "error": "error"}

    def get_upload_extensions(self) -> List[str]:
        return self.settings.get("upload", {}).get("extensions", [".html", ".htm"])

    def get_upload_media_types(self) -> List[str]:
        return self.settings.get("upload", {}).get("media_types", ["text/html"])

    def get_encoding(self) -> str:
        return self.settings.get("upload", {}).get("encoding", "utf-8")

    def get_tab_names(self) -> List[str]:
        return list(self.settings.get("tabs", {}).keys())

    def get_tab_config(self, tab: str) -> Dict[str, Any]:
        """Get display, search and export settings for one result tab."""
        tabs = self.settings.get("tabs", {})
        if tab not in tabs:
            raise ConfigurationError(f"No configuration for tab '{tab}'")
        return tabs[tab]


# Global configuration instance
config = ConfigManager()
