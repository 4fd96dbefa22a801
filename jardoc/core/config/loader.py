"""YAML configuration file reader for jardoc settings."""

from pathlib import Path
from typing import Any

import yaml

from jardoc.core.exceptions.errors import ConfigurationError

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "default.yaml"


class ConfigLoader:
    """Read a YAML settings file and hand out its top-level sections."""

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize the config loader.

        Args:
            config_path: Path to the YAML settings file.
        """
        self.config_path = config_path
        self._sections: dict[str, Any] = {}

    def load(self, path: Path | None = None) -> dict[str, Any]:
        """Read the settings file.

        Args:
            path: File to read. Uses config_path if not provided.

        Returns:
            Parsed document, ``{}`` when no path is known or the file is empty.

        Raises:
            ConfigurationError: If the file is missing, is not valid YAML, or
                its root is not a mapping.
        """
        load_path = path or self.config_path
        if not load_path:
            return {}

        try:
            with open(load_path, encoding="utf-8") as f:
                document = yaml.safe_load(f) or {}
        except FileNotFoundError as e:
            raise ConfigurationError(
                f"Configuration file not found: {load_path}",
                config_key=str(load_path),
            ) from e
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {load_path}",
                config_key=str(load_path),
                details={"error": str(e)},
            ) from e

        if not isinstance(document, dict):
            raise ConfigurationError(
                f"Configuration root must be a mapping: {load_path}",
                config_key=str(load_path),
            )
        self._sections = document
        return document

    def get_section(self, section: str) -> dict[str, Any]:
        """Keyword arguments for one settings group, e.g. ``analysis``.

        A section that is absent, empty or not a mapping yields ``{}`` so the
        settings model falls back to environment variables and defaults.
        """
        values = self._sections.get(section)
        return values if isinstance(values, dict) else {}
